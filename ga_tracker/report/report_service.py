from collections.abc import Callable
from functools import partial

from loguru import logger
from sentry_sdk import capture_exception

from .email_report_repository import EmailReportRepository
from .models import TransportFailure
from .slack_report_repository import SlackReportRepository

FailureListener = Callable[[TransportFailure], None]


class ReportService:
    """Routes transport failures to the log, registered listeners, email and Slack.

    Nothing in here raises: a sink that fails is logged and skipped.
    """

    def __init__(
        self,
        email_report_repository: EmailReportRepository,
        slack_report_repository: SlackReportRepository,
    ) -> None:
        self.email_report_repository = email_report_repository
        self.slack_report_repository = slack_report_repository
        self.listeners: list[FailureListener] = []

    def add_listener(self, listener: FailureListener) -> None:
        self.listeners.append(listener)

    def report(self, failure: TransportFailure, report_address: str | None = None) -> None:
        logger.warning("Failed to send hit ({}): {}", failure.reason, failure.url)

        sinks: list[FailureListener] = list(self.listeners)
        if report_address is not None:
            sinks.append(partial(self.email_report_repository.send_report, report_address))
        sinks.append(self.slack_report_repository.send_report)

        for sink in sinks:
            try:
                sink(failure)
            except Exception as e:  # noqa: BLE001
                logger.exception("Failure report sink raised")
                capture_exception(e)
