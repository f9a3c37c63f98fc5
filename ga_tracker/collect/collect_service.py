from typing import Any

from loguru import logger
from requests import RequestException

from ga_tracker.report import ReportService, TransportFailure

from .collect_repository import CollectRepository


class CollectService:
    def __init__(
        self, collect_repository: CollectRepository, report_service: ReportService
    ) -> None:
        self.collect_repository = collect_repository
        self.report_service = report_service

    def send_hit(
        self, params: dict[str, Any] | None, report_address: str | None = None
    ) -> bytes | None:
        """Send one hit and return the response body, or ``None`` if it was not delivered.

        Failures are handed to the report service and never raised.
        """
        if not params:
            return None

        url = self.collect_repository.build_url(params)
        logger.debug("Sending hit: {}", url)

        try:
            body = self.collect_repository.send(url)
        except RequestException as e:
            self._report(url, params, str(e) or type(e).__name__, report_address)
            return None

        if not body:
            self._report(url, params, "Empty response", report_address)
            return None
        return body

    def _report(
        self,
        url: str,
        params: dict[str, Any],
        reason: str,
        report_address: str | None,
    ) -> None:
        failure = TransportFailure(url, reason, dict(params))
        self.report_service.report(failure, report_address)
