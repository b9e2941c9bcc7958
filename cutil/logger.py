"""Levelled, coloured, location-tagged logging to the standard streams."""

from __future__ import annotations

import enum
import inspect
import os
import string
import sys
import threading
import time
from types import FrameType

from cutil.location import format_file_name, format_function_name


class Loglevel(enum.IntEnum):
    """Severity of a log message; higher values are more verbose."""

    ERROR = 0
    WARN = 1
    INFO = 2
    DEBUG = 3


_LEVEL_NAMES = {
    Loglevel.ERROR: "ERROR",
    Loglevel.WARN: "WARN",
    Loglevel.INFO: "INFO",
    Loglevel.DEBUG: "DEBUG",
}

_COLORS = {
    Loglevel.ERROR: "\x1b[91m",
    Loglevel.WARN: "\x1b[93m",
    Loglevel.INFO: "\x1b[0m",
    Loglevel.DEBUG: "\x1b[96m",
}

_RESET = "\x1b[0m"

_LEVEL_WORDS = {
    "error": Loglevel.ERROR,
    "0": Loglevel.ERROR,
    "warn": Loglevel.WARN,
    "1": Loglevel.WARN,
    "info": Loglevel.INFO,
    "2": Loglevel.INFO,
    "debug": Loglevel.DEBUG,
    "3": Loglevel.DEBUG,
}

_ASCII_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)

_time_base = time.monotonic()
_stream_lock = threading.Lock()


def string_to_loglevel(text: str) -> Loglevel | None:
    """Map a level name or digit (``error``/``0`` ... ``debug``/``3``) to a Loglevel."""
    return _LEVEL_WORDS.get(text)


def _frame_location(frame: FrameType | None) -> tuple[str, str, int]:
    if frame is None:
        return "", "", 0
    code = frame.f_code
    return code.co_filename, getattr(code, "co_qualname", code.co_name), frame.f_lineno


class Logger:
    """A named logger whose level may be set by the ``<NAME>_LOGLEVEL`` variable."""

    def __init__(self, name: str | None = None, loglevel: Loglevel = Loglevel.INFO) -> None:
        self.name = ""
        self.loglevel = loglevel
        if name is not None:
            self.set_name_and_detect_loglevel(name)

    def set_name_and_detect_loglevel(self, name: str) -> None:
        """Set the name and read the level from ``<NAME>_LOGLEVEL`` if it is set."""
        self.name = name
        env_name = name.translate(_ASCII_UPPER) + "_LOGLEVEL"
        env = os.environ.get(env_name)
        if env is None:
            return
        level = string_to_loglevel(env)
        if level is None:
            print(f"invalid loglevel {env}", file=sys.stderr)
        else:
            self.loglevel = level

    def log(
        self,
        level: Loglevel,
        message: str,
        filename: str | None = None,
        function: str | None = None,
        line: int | None = None,
    ) -> None:
        """Emit ``message`` at ``level``; missing location parts come from the caller."""
        if self.loglevel < level:
            return
        if filename is None or function is None or line is None:
            frame = inspect.currentframe()
            caller_file, caller_function, caller_line = _frame_location(
                frame.f_back if frame is not None else None
            )
            filename = caller_file if filename is None else filename
            function = caller_function if function is None else function
            line = caller_line if line is None else line
        self._emit(level, message, filename, function, line)

    def _log_from_caller(self, level: Loglevel, message: str) -> None:
        if self.loglevel < level:
            return
        frame = inspect.currentframe()
        caller = None
        if frame is not None and frame.f_back is not None:
            caller = frame.f_back.f_back
        self._emit(level, message, *_frame_location(caller))

    def _emit(self, level: Loglevel, message: str, filename: str, function: str, line: int) -> None:
        elapsed_ms = int((time.monotonic() - _time_base) * 1000)
        minutes, rest = divmod(elapsed_ms, 60_000)
        seconds, mseconds = divmod(rest, 1000)
        short_function = format_function_name(function)
        short_filename = format_file_name(filename)
        text = (
            f"{minutes}:{seconds:02}:{mseconds:03} "
            f"[{self.name}] {_COLORS[level]}{_LEVEL_NAMES[level]} "
            f"{short_function} @ {short_filename}:{line} "
            f"{message}{_RESET}"
        )
        with _stream_lock:
            out = sys.stdout if level <= Loglevel.WARN else sys.stderr
            print(text, file=out)

    def error(self, message: str) -> None:
        """Log at ERROR level."""
        self._log_from_caller(Loglevel.ERROR, message)

    def warn(self, message: str) -> None:
        """Log at WARN level."""
        self._log_from_caller(Loglevel.WARN, message)

    def info(self, message: str) -> None:
        """Log at INFO level."""
        self._log_from_caller(Loglevel.INFO, message)

    def debug(self, message: str) -> None:
        """Log at DEBUG level."""
        self._log_from_caller(Loglevel.DEBUG, message)