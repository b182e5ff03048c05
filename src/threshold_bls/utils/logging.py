import json
import logging
import os
import sys
from logging import Logger
from typing import Optional

PACKAGE_LOGGER = "threshold_bls"


class JsonFormatter(logging.Formatter):
    """Structured JSON formatter for log records."""

    def format(self, record: logging.LogRecord) -> str:  # pragma: no cover - trivial
        log = {
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "time": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%SZ"),
        }
        if record.exc_info:
            log["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(log)


def configure_logging(level: Optional[str] = None, json_output: bool = False, log_file: Optional[str] = None) -> None:
    """
    Configure logging for the package's loggers. Writes to stderr by default and can
    additionally tee to a file. ``THRESHOLD_BLS_LOG_LEVEL`` or ``LOG_LEVEL`` set the
    level when none is passed.
    """
    env_level = os.getenv("THRESHOLD_BLS_LOG_LEVEL") or os.getenv("LOG_LEVEL")
    effective_level = level or env_level or "INFO"
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    formatter: logging.Formatter
    if json_output:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            fmt="%(asctime)s [%(levelname)s] %(name)s | %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S",
        )
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        handler.setFormatter(formatter)
        package_logger.addHandler(handler)
    package_logger.setLevel(getattr(logging, effective_level.upper(), logging.INFO))
    package_logger.propagate = False


def get_logger(name: str) -> Logger:
    return logging.getLogger(name)
