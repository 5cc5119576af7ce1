"""
Logger - component-tagged logging for the recent files registry

Usage:
    from recent_registry.utils.logger import logger

    logger.info("Record written", component="STORE")
    logger.error("Persist failed", component="STORE", details=str(e))
    logger.recent("Added recent file", details=path)   # RECENT, debug

Records look like "12:34:56 [INFO] [STORE] Record written - /path".
Console output goes to stderr so it never mixes with data a command
prints on stdout.
"""

import logging
import sys
from enum import IntEnum
from typing import Optional, TextIO

_CONSOLE_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"


class LogLevel(IntEnum):
    """Log levels matching Python logging."""
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL


class RegistryLogger:
    """
    Wraps one stdlib logger with a console handler and an optional log file.

    The underlying logger accepts everything; the handlers decide what is shown.
    """

    def __init__(self, name: str = "recent_registry", stream: Optional[TextIO] = None):
        self._logger = logging.getLogger(name)
        self._logger.setLevel(logging.DEBUG)
        self._logger.propagate = False

        self._console = logging.StreamHandler(stream or sys.stderr)
        self._console.setLevel(logging.INFO)
        self._console.setFormatter(logging.Formatter(_CONSOLE_FORMAT, datefmt="%H:%M:%S"))
        self._logger.addHandler(self._console)

        self._file_handler: Optional[logging.FileHandler] = None

    def set_level(self, level: LogLevel):
        """Minimum level shown on the console."""
        self._console.setLevel(level)

    def set_stream(self, stream: TextIO) -> Optional[TextIO]:
        """Point console output at another stream. Returns the previous one."""
        return self._console.setStream(stream)

    def enable_file_logging(self, filepath: str):
        """Also write every record, debug included, to filepath."""
        self.disable_file_logging()
        handler = logging.FileHandler(filepath, encoding="utf-8")
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
        self._logger.addHandler(handler)
        self._file_handler = handler

    def disable_file_logging(self):
        if self._file_handler is not None:
            self._logger.removeHandler(self._file_handler)
            self._file_handler.close()
            self._file_handler = None

    @staticmethod
    def _format_message(msg: str, component: Optional[str] = None,
                        details: Optional[str] = None) -> str:
        text = f"[{component}] {msg}" if component else msg
        return f"{text} - {details}" if details else text

    def _log(self, level: int, msg: str, component: Optional[str],
             details: Optional[str]):
        if self._logger.isEnabledFor(level):
            self._logger.log(level, self._format_message(msg, component, details))

    def debug(self, msg: str, component: Optional[str] = None, details: Optional[str] = None):
        self._log(logging.DEBUG, msg, component, details)

    def info(self, msg: str, component: Optional[str] = None, details: Optional[str] = None):
        self._log(logging.INFO, msg, component, details)

    def warning(self, msg: str, component: Optional[str] = None, details: Optional[str] = None):
        self._log(logging.WARNING, msg, component, details)

    def error(self, msg: str, component: Optional[str] = None, details: Optional[str] = None):
        self._log(logging.ERROR, msg, component, details)

    # Per-area debug shortcuts
    def recent(self, msg: str, details: Optional[str] = None):
        self._log(logging.DEBUG, msg, "RECENT", details)

    def store(self, msg: str, details: Optional[str] = None):
        self._log(logging.DEBUG, msg, "STORE", details)


logger = RegistryLogger()


def set_log_level(level: LogLevel):
    """Set the console log level of the shared logger."""
    logger.set_level(level)
