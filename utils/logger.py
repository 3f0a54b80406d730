"""
Logger Module
File logging, console banners and a simple run timer.
"""

import logging
import time
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from core.constants import LOG_FILE_NAME

logger = logging.getLogger(__name__)

BANNER_RULE = '=' * 29


class Logger:
    """Writes errors and info to a log file and times a run."""

    def __init__(self, log_file: Union[str, Path] = LOG_FILE_NAME):
        self.log_file = Path(log_file)
        self.raw_message: Optional[str] = None
        self.timer_start: Optional[float] = None
        self.timer_end: Optional[float] = None
        self._file_logger = logging.getLogger(f"{__name__}.file.{self.log_file.resolve()}")
        self._file_logger.propagate = False
        self._file_logger.setLevel(logging.INFO)
        if not self._file_logger.handlers:
            handler = logging.FileHandler(self.log_file, encoding='utf-8', delay=True)
            handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(message)s'))
            self._file_logger.addHandler(handler)

    @staticmethod
    def style_info(message: str, timestamp: bool = False) -> str:
        """Wrap a message between two rules of ``=``, optionally stamping the top one."""
        top = f"=============={datetime.now()}===============" if timestamp else BANNER_RULE
        return f"\n{top}\n{message}\n{BANNER_RULE}"

    def start_timer(self) -> None:
        self.timer_start = time.time() * 1000
        self.timer_end = None

    def end_timer(self) -> None:
        self.timer_end = time.time() * 1000

    @property
    def elapsed_time(self) -> Optional[float]:
        """Milliseconds between start_timer and end_timer."""
        if self.timer_start is None or self.timer_end is None:
            return None
        return self.timer_end - self.timer_start

    def to_console(self, message: str) -> None:
        self.raw_message = message
        logger.info(message)

    def error_to_file(self, error: BaseException) -> None:
        self._file_logger.error(f"{type(error).__name__}: {error}", exc_info=error)
        self._flush()

    def info_to_file(self, message: str) -> None:
        self._file_logger.info(message)
        self._flush()

    def close(self) -> None:
        for handler in self._file_logger.handlers:
            handler.close()

    def _flush(self) -> None:
        for handler in self._file_logger.handlers:
            handler.flush()
