import logging
import os
from logging.handlers import RotatingFileHandler, SysLogHandler

APP_NAME = "opentracker"


def _system_handler() -> logging.Handler:
    try:
        from systemd.journal import JournalHandler

        return JournalHandler(SYSLOG_IDENTIFIER=APP_NAME)
    except Exception:  # pragma: no cover - fallback when systemd is unavailable
        if os.path.exists("/dev/log"):
            return SysLogHandler(address="/dev/log")
        return logging.StreamHandler()


def configure_logging(log_file: str = "opentracker.log") -> logging.Logger:
    logger = logging.getLogger(APP_NAME)
    logger.setLevel(logging.INFO)
    if getattr(logger, "_opentracker_configured", False):
        return logger

    file_handler = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=5)
    file_handler.setLevel(logging.ERROR)

    system_handler = _system_handler()
    system_handler.setLevel(logging.INFO)

    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    for handler in (file_handler, system_handler):
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger._opentracker_configured = True
    return logger
