"""Plain-text rules for drawing console tables."""

from __future__ import annotations

from typing import Iterable


def draw_line(length: int, crosses: Iterable[int]) -> str:
    """Return a horizontal rule of ``length`` dashes.

    Positions listed in ``crosses`` (counted from 1) carry a ``+`` instead.
    Positions outside the rule are ignored.
    """
    marks = set(crosses)
    return "".join("+" if position in marks else "-" for position in range(1, length + 1))