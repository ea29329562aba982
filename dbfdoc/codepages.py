"""Conversion of DOS code page 850 text to Latin-1."""

from __future__ import annotations

_CP850_TABLE = (
    0x00, 0xFC, 0xE9, 0xE2, 0xE4, 0xE9, 0x00, 0x00,
    0xEA, 0x00, 0xE8, 0x00, 0xEE, 0xEC, 0xC4, 0x00,
    0xC9, 0x00, 0x00, 0xF4, 0xF6, 0xF2, 0xFB, 0xF9,
    0x00, 0xD6, 0xDC, 0x00, 0x00, 0x00, 0x00, 0x00,
    0xE1, 0xED, 0xF3, 0xFA, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0x00, 0x00, 0x00, 0x00, 0xC1, 0xC2, 0xC0,
    0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00,
    0x00, 0xC1, 0xC2, 0x00, 0xC4, 0x00, 0x00, 0x00,
    0xC8, 0xC9, 0xCA, 0x00, 0xCC, 0xCD, 0xCE, 0x00,
    0x00, 0x00, 0xCA, 0xDA, 0xD4, 0x00, 0xCD, 0xCE,
    0x00, 0xD9, 0xDA, 0xDB, 0xDC, 0x00, 0xCC, 0xDF,
    0xE9, 0xDF, 0xD4, 0xD2, 0xE4, 0x00, 0x00, 0x00,
    0xE8, 0xD3, 0xDB, 0xD9, 0xEC, 0xED, 0xEE, 0x00,
    0x00, 0x00, 0xF2, 0xF3, 0xF4, 0x00, 0xF6, 0x00,
    0x00, 0xF9, 0xFA, 0xFB, 0xFC, 0x00,
)


def _build_translation() -> bytes:
    table = list(range(256))
    for offset, value in enumerate(_CP850_TABLE):
        if value:
            table[0x80 + offset] = value
    return bytes(table)


_TRANSLATION = _build_translation()
_UMLAUTS = frozenset({0xE1, 0x84, 0x8E, 0x94})


def cp850_convert(data: bytes) -> bytes:
    """Map code page 850 letters to Latin-1, up to the first NUL byte.

    Bytes without a mapping, and everything from the first NUL on, are kept.
    """
    head, sep, tail = bytes(data).partition(b"\0")
    return head.translate(_TRANSLATION) + sep + tail


def count_umlauts(data: bytes) -> int:
    """Count German special letters (code page 850) before the first NUL."""
    head = bytes(data).partition(b"\0")[0]
    return sum(1 for byte in head if byte in _UMLAUTS)