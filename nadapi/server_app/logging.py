import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s %(message)s"


class DetailsFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        details = getattr(record, "details", None)
        if details:
            pairs = " ".join(f"{key}={value!r}" for key, value in details.items())
            line = f"{line} {pairs}"
        return line


def create_logger(name: str, level: str = "INFO", handler: Optional[logging.Handler] = None) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level.upper())
    if logger.handlers:
        return logger
    handler = handler or logging.StreamHandler()
    handler.setFormatter(DetailsFormatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
