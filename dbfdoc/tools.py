"""Small text and date helpers."""

from __future__ import annotations

import re
from datetime import date


def split_buffer(text: str, delimiters: str) -> list[str]:
    """Split ``text`` on any of ``delimiters``, dropping empty pieces."""
    if not delimiters:
        return [text] if text else []
    pattern = "[" + re.escape(delimiters) + "]+"
    return [piece for piece in re.split(pattern, text) if piece]


def strip_spaces(text: str) -> str:
    """Remove every space character from ``text``."""
    return text.replace(" ", "")


def today_string() -> str:
    """Return today's local date as YYYYMMDD."""
    return date.today().strftime("%Y%m%d")