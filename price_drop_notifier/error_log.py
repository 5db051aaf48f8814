"""Append-only log file for failures caught during a run."""

import logging
import traceback
from datetime import datetime
from pathlib import Path

from price_drop_notifier.messages import format_timestamp

logger = logging.getLogger(__name__)

ERROR_LOG_FORMAT = "%(asctime)s\n%(message)s"


class ErrorLogFormatter(logging.Formatter):
    """Timestamps match the health message, e.g. '7 March 2024 09:05:01'."""

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        return format_timestamp(datetime.fromtimestamp(record.created))


class ErrorLogger:
    """
    Writes one block per failure: timestamp, `<ErrorKind> - <message>`, traceback.

    The file is opened in append mode and never truncated.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._handler = logging.FileHandler(self.path, mode="a", encoding="utf-8", delay=True)
        self._handler.setFormatter(ErrorLogFormatter(ERROR_LOG_FORMAT))
        self._file_logger = logging.Logger(f"{__name__}.file", level=logging.ERROR)
        self._file_logger.addHandler(self._handler)

    def log(self, exc: BaseException, context: str | None = None) -> None:
        kind = type(exc).__name__
        trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)).rstrip()
        self._file_logger.error("%s - %s\n%s", kind, exc, trace)
        if context:
            logger.error("%s: %s - %s", context, kind, exc)
        else:
            logger.error("%s - %s", kind, exc)

    def close(self) -> None:
        self._file_logger.removeHandler(self._handler)
        self._handler.close()
