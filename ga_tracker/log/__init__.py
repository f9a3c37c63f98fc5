from .log_handler import InterceptLoggingHandler, LogHandler

__all__ = ["InterceptLoggingHandler", "LogHandler"]
