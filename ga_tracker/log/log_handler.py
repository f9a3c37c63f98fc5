import logging

from loguru import logger
from sentry_sdk.integrations.logging import ignore_logger


class InterceptLoggingHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        # Get corresponding Loguru level if it exists.
        level: int | str
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        # Find caller from where originated the logged message.
        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


class LogHandler:
    _URLLIB3_LOGGERS = ("urllib3", "urllib3.connectionpool")
    _SLACK_SDK = "slack_sdk"

    def __init__(self, intercept_logging_handler: InterceptLoggingHandler) -> None:
        self.intercept_logging_handler = intercept_logging_handler

    def setup(self) -> None:
        logging.basicConfig(
            handlers=[self.intercept_logging_handler], level=logging.INFO, force=True
        )

        for logger_name in self._URLLIB3_LOGGERS:
            logging.getLogger(logger_name).setLevel(logging.WARNING)
            ignore_logger(logger_name)

        logging.getLogger(self._SLACK_SDK).setLevel(logging.WARNING)
