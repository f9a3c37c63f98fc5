from typing import Any
from urllib.parse import urlencode

from requests import Session

from ga_tracker.consts import COLLECT_URL, PAYLOAD_DATA_FLAG


class CollectRepository:
    def __init__(self, api_client: Session, timeout: int = 10) -> None:
        self.api_client = api_client
        self.timeout = timeout

    def build_url(self, params: dict[str, Any]) -> str:
        query = urlencode({k: v for k, v in params.items() if v is not None})
        return f"{COLLECT_URL}?{PAYLOAD_DATA_FLAG}&{query}"

    def send(self, url: str) -> bytes:
        r = self.api_client.get(url, timeout=self.timeout)
        return r.content
