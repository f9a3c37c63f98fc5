import smtplib
from email.message import EmailMessage

from loguru import logger
from sentry_sdk import capture_exception

from .models import TransportFailure


class EmailReportRepository:
    _SUBJECT = "Google Analytics hit failed"

    def __init__(self, smtp_host: str, smtp_port: int, sender: str, timeout: int = 10) -> None:
        self.smtp_host = smtp_host
        self.smtp_port = smtp_port
        self.sender = sender
        self.timeout = timeout

    def send_report(self, address: str, failure: TransportFailure) -> None:
        try:
            message = EmailMessage()
            message["From"] = self.sender
            message["To"] = address
            message["Subject"] = self._SUBJECT
            message.set_content(failure.url)

            with smtplib.SMTP(self.smtp_host, self.smtp_port, timeout=self.timeout) as smtp:
                smtp.send_message(message)
        except (smtplib.SMTPException, OSError, ValueError) as e:
            logger.exception("Failed to email failure report to {}", address)
            capture_exception(e)
