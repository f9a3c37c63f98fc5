from collections.abc import Mapping
from random import Random
from typing import Any
from uuid import UUID

from loguru import logger

from ga_tracker.consts import GA_COOKIE
from ga_tracker.utils import get_item


class ClientIdService:
    _COOKIE_PARTS = 4

    def __init__(self, rng: Random | None = None) -> None:
        self.rng = rng or Random()

    def generate_uuid(self) -> str:
        # Setting the version also forces the RFC 4122 variant bits
        return str(UUID(int=self.rng.getrandbits(128), version=4))

    def resolve(self, cookies: Mapping[str, Any] | None) -> str:
        ga_cookie = get_item(cookies, GA_COOKIE)
        if not ga_cookie:
            return self.generate_uuid()

        client_id = self._parse_ga_cookie(ga_cookie)
        if client_id is None:
            logger.debug("Malformed {} cookie: {}", GA_COOKIE, ga_cookie)
            return self.generate_uuid()

        return client_id

    def _parse_ga_cookie(self, value: Any) -> str | None:
        if not isinstance(value, str):
            return None

        parts = value.split(".", self._COOKIE_PARTS - 1)
        if len(parts) != self._COOKIE_PARTS:
            return None

        _version, _domain_depth, cid1, cid2 = parts
        if not cid1 or not cid2:
            return None
        return f"{cid1}.{cid2}"
