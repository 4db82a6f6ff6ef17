"""Console log formatting with ANSI level colors."""

from __future__ import annotations

import copy
import logging
import os
import sys
from typing import IO

RESET = "\033[0m"

LEVEL_STYLES: dict[int, str] = {
    logging.DEBUG: "36",  # cyan
    logging.INFO: "32",  # green
    logging.WARNING: "33",  # yellow
    logging.ERROR: "31",  # red
    logging.CRITICAL: "1;31",  # bold red
}


def stream_supports_color(stream: IO[str] | None) -> bool:
    """Decide whether *stream* should receive ANSI escapes.

    ``NO_COLOR`` always disables color and ``FORCE_COLOR`` always enables it;
    otherwise only terminals get color.
    """
    if "NO_COLOR" in os.environ:
        return False
    if "FORCE_COLOR" in os.environ:
        return True
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def colorize(text: str, levelno: int) -> str:
    style = LEVEL_STYLES.get(levelno)
    if style is None:
        return text
    return f"\033[{style}m{text}{RESET}"


class ColoredFormatter(logging.Formatter):
    """Formatter that colors ``%(levelname)s`` by severity.

    ``use_color`` is ``None`` for auto-detection against ``stream``
    (stderr by default), or a bool to force it either way. The record
    passed to ``format`` is never modified.
    """

    def __init__(
        self,
        fmt: str | None = None,
        datefmt: str | None = None,
        *,
        stream: IO[str] | None = None,
        use_color: bool | None = None,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self._stream = stream
        self._use_color = use_color

    @property
    def colored(self) -> bool:
        if self._use_color is not None:
            return self._use_color
        return stream_supports_color(self._stream or sys.stderr)

    def format(self, record: logging.LogRecord) -> str:
        if not self.colored:
            return super().format(record)

        shaded = copy.copy(record)
        shaded.levelname = colorize(record.levelname, record.levelno)
        return super().format(shaded)
