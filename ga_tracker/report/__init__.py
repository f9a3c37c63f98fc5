from .email_report_repository import EmailReportRepository
from .models import TransportFailure
from .report_service import FailureListener, ReportService
from .slack_report_repository import SlackReportRepository

__all__ = [
    "EmailReportRepository",
    "FailureListener",
    "ReportService",
    "SlackReportRepository",
    "TransportFailure",
]
