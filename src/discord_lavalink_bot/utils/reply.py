"""Utility functions for formatting chat replies."""

from __future__ import annotations

import re
from functools import cache

_URL_RE = re.compile(r"^https?://\S+$", re.IGNORECASE)


@cache
def truncate(text: str, max_length: int = 90) -> str:
    if len(text) <= max_length:
        return text
    return text[: max_length - 1] + "…"


def is_url(query: str) -> bool:
    """True when the whole query is a single http(s) URL."""
    return bool(_URL_RE.match(query.strip()))


_INT_RE = re.compile(r"[+-]?[0-9]+")


def parse_int(value: str | None) -> int | None:
    """Parse a plain base-10 integer such as "42" or "-1".

    Returns None for anything else, including "4.5", "1_0" and "".
    """
    if value is None or not _INT_RE.fullmatch(value):
        return None
    return int(value)
