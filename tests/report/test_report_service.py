from unittest.mock import MagicMock, patch

from ga_tracker.report import (
    EmailReportRepository,
    ReportService,
    SlackReportRepository,
    TransportFailure,
)


class TestReportService:
    ADDRESS = "admin@example.com"
    FAILURE = TransportFailure("url", "reason", {"v": 1})

    def setup_method(self) -> None:
        self.email_report_repository = MagicMock(spec=EmailReportRepository)
        self.slack_report_repository = MagicMock(spec=SlackReportRepository)

        self.sut = ReportService(self.email_report_repository, self.slack_report_repository)

    def test_report(self) -> None:
        with patch("ga_tracker.report.report_service.logger") as logger:
            self.sut.report(self.FAILURE, self.ADDRESS)

            logger.warning.assert_called_once()

        self.email_report_repository.send_report.assert_called_once_with(
            self.ADDRESS, self.FAILURE
        )
        self.slack_report_repository.send_report.assert_called_once_with(self.FAILURE)

    def test_report_without_address(self) -> None:
        self.sut.report(self.FAILURE)

        self.email_report_repository.send_report.assert_not_called()
        self.slack_report_repository.send_report.assert_called_once_with(self.FAILURE)

    def test_report_listeners(self) -> None:
        first = MagicMock()
        second = MagicMock()
        self.sut.add_listener(first)
        self.sut.add_listener(second)

        self.sut.report(self.FAILURE)

        first.assert_called_once_with(self.FAILURE)
        second.assert_called_once_with(self.FAILURE)

    def test_report_listener_error(self) -> None:
        error = RuntimeError("Error")
        failing = MagicMock(side_effect=error)
        other = MagicMock()
        self.sut.add_listener(failing)
        self.sut.add_listener(other)

        with patch("ga_tracker.report.report_service.logger") as logger, patch(
            "ga_tracker.report.report_service.capture_exception"
        ) as capture_exception:
            self.sut.report(self.FAILURE, self.ADDRESS)

            logger.exception.assert_called_once_with("Failure report sink raised")
            capture_exception.assert_called_once_with(error)

        other.assert_called_once_with(self.FAILURE)
        self.email_report_repository.send_report.assert_called_once_with(
            self.ADDRESS, self.FAILURE
        )

    def test_report_sink_error(self) -> None:
        error = RuntimeError("Error")
        self.email_report_repository.send_report.side_effect = error

        with patch("ga_tracker.report.report_service.logger") as logger, patch(
            "ga_tracker.report.report_service.capture_exception"
        ) as capture_exception:
            self.sut.report(self.FAILURE, self.ADDRESS)

            logger.exception.assert_called_once_with("Failure report sink raised")
            capture_exception.assert_called_once_with(error)

        self.slack_report_repository.send_report.assert_called_once_with(self.FAILURE)
