from collections.abc import Mapping
from typing import Any, TypeVar

from loguru import logger
from pydantic import BaseModel

from ga_tracker.client_id import ClientIdService
from ga_tracker.collect import CollectService
from ga_tracker.consts import CLIENT_ID, PROTOCOL_VERSION, TRACKING_ID, VERSION
from ga_tracker.hit import EcommerceInfo, HitBuilder, HitParams, HitType, PageviewInfo

from .exceptions import HitInfoTypeError, UnknownMethodError
from .models import TrackingConfig

InfoT = TypeVar("InfoT", PageviewInfo, EcommerceInfo)


class TrackerService:
    def __init__(
        self,
        client_id_service: ClientIdService,
        hit_builder: HitBuilder,
        collect_service: CollectService,
        tracking_id: str,
        report_address: str | None = None,
    ) -> None:
        self.client_id_service = client_id_service
        self.hit_builder = hit_builder
        self.collect_service = collect_service
        self.config = TrackingConfig(tracking_id=tracking_id, report_address=report_address)

    def set_report_address(self, report_address: str | None) -> "TrackerService":
        self.config = self.config.model_copy(update={"report_address": report_address})
        return self

    def build_and_send_hit(
        self,
        method: HitType | str | None,
        info: Mapping[str, Any] | BaseModel | None,
        cookies: Mapping[str, Any] | None = None,
    ) -> None:
        if not method or not info:
            return

        hit_type = self._get_hit_type(method)
        defaults = self._build_defaults(cookies)

        if hit_type == HitType.pageview:
            pageview = self._get_info(info, PageviewInfo)
            self._send(self.hit_builder.build_pageview(defaults, pageview))
        elif hit_type == HitType.ecommerce:
            ecommerce = self._get_info(info, EcommerceInfo)
            hits = self.hit_builder.build_ecommerce(defaults, ecommerce)
            logger.debug(
                "Sending transaction {} with {} items",
                hits.transaction.get("ti"),
                len(hits.items),
            )

            # The transaction has to reach the endpoint before its items
            self._send(hits.transaction)
            for item in hits.items:
                self._send(item)

    def _build_defaults(self, cookies: Mapping[str, Any] | None) -> HitParams:
        return {
            VERSION: PROTOCOL_VERSION,
            TRACKING_ID: self.config.tracking_id,
            CLIENT_ID: self.client_id_service.resolve(cookies),
        }

    def _send(self, params: HitParams) -> None:
        self.collect_service.send_hit(params, self.config.report_address)

    @staticmethod
    def _get_hit_type(method: HitType | str) -> HitType:
        if isinstance(method, HitType):
            return method
        try:
            return HitType(method)
        except ValueError as e:
            raise UnknownMethodError(method) from e

    @staticmethod
    def _get_info(info: Mapping[str, Any] | BaseModel, info_type: type[InfoT]) -> InfoT:
        if isinstance(info, info_type):
            return info
        if isinstance(info, Mapping):
            return info_type.from_mapping(info)
        raise HitInfoTypeError(info)
