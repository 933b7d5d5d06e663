import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_logging_configured = False


def setup_logging(level: str = "WARNING") -> None:
    """Single stderr handler on the package logger, repeated calls only change the level"""
    global _logging_configured

    package_logger = logging.getLogger("calculator")
    package_logger.setLevel(level)
    if _logging_configured:
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    _logging_configured = True
