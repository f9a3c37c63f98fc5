from unittest.mock import MagicMock, patch
from urllib.error import URLError

import pytest
from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError

from ga_tracker.report import SlackReportRepository, TransportFailure


class TestSlackReportRepository:
    SLACK_CHANNEL = "#ga-tracker"
    FAILURE = TransportFailure("url", "reason")

    def setup_method(self) -> None:
        self.slack_client = MagicMock(spec=WebClient)
        self.sut = SlackReportRepository(self.slack_client, self.SLACK_CHANNEL)

    def test_send_report(self) -> None:
        self._send_report_and_assert_slack_client()

    def test_send_report_without_channel(self) -> None:
        self.sut = SlackReportRepository(self.slack_client)
        self.sut.send_report(self.FAILURE)
        self.slack_client.chat_postMessage.assert_not_called()

    @pytest.mark.parametrize(
        "error", [SlackApiError("Error", "Response"), URLError("Network is unreachable")]
    )
    def test_send_report_error(self, error: Exception) -> None:
        self.slack_client.chat_postMessage.side_effect = error

        with patch("ga_tracker.report.slack_report_repository.logger") as logger, patch(
            "ga_tracker.report.slack_report_repository.capture_exception"
        ) as capture_exception:
            self._send_report_and_assert_slack_client()

            logger.exception.assert_called_once_with("Failed to send failure report to Slack")
            capture_exception.assert_called_once_with(error)

    def _send_report_and_assert_slack_client(self) -> None:
        self.sut.send_report(self.FAILURE)
        self.slack_client.chat_postMessage.assert_called_once_with(
            channel=self.SLACK_CHANNEL,
            text="Failed to send Google Analytics hit (reason):\n\nurl",
        )
