from loguru import logger
from sentry_sdk import capture_exception
from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError

from .models import TransportFailure


class SlackReportRepository:
    def __init__(self, slack_client: WebClient, channel: str | None = None) -> None:
        self.slack_client = slack_client
        self.channel = channel

    def send_report(self, failure: TransportFailure) -> None:
        if self.channel is None:
            return

        try:
            text = f"Failed to send Google Analytics hit ({failure.reason}):\n\n{failure.url}"
            self.slack_client.chat_postMessage(channel=self.channel, text=text)
        except (SlackApiError, OSError) as e:
            logger.exception("Failed to send failure report to Slack")
            capture_exception(e)
