"""Shared alphabets and codepoint ranges for the generators."""

from __future__ import annotations

import string

__all__ = [
    "ASCII_LOWER",
    "ASCII_UPPER",
    "ASCII_LETTERS",
    "DIGITS",
    "HEX_DIGITS_LOWER",
    "HEX_DIGITS",
    "OCT_DIGITS",
    "MAX_CODEPOINT",
    "SURROGATES",
    "CJK_RANGE",
    "CYRILLIC_RANGE",
    "LATIN1_RANGE",
    "LATIN1_EXCLUDED",
    "is_surrogate",
]

ASCII_LOWER: str = string.ascii_lowercase
ASCII_UPPER: str = string.ascii_uppercase
ASCII_LETTERS: str = ASCII_LOWER + ASCII_UPPER
DIGITS: str = string.digits
HEX_DIGITS_LOWER: str = ASCII_LOWER[:6] + DIGITS
HEX_DIGITS: str = ASCII_UPPER[:6] + ASCII_LOWER[:6] + DIGITS
OCT_DIGITS: str = DIGITS[:8]

MAX_CODEPOINT: int = 0x10FFFF
SURROGATES: tuple[int, int] = (0xD800, 0xDFFF)

CJK_RANGE: tuple[int, int] = (0x4E00, 0x9FCC)
CYRILLIC_RANGE: tuple[int, int] = (0x0400, 0x04FF)
LATIN1_RANGE: tuple[int, int] = (0x00C0, 0x00FF)
# multiplication and division signs
LATIN1_EXCLUDED: frozenset[int] = frozenset({0x00D7, 0x00F7})


def is_surrogate(codepoint: int) -> bool:
    """Return ``True`` if ``codepoint`` is a UTF-16 surrogate."""

    return SURROGATES[0] <= codepoint <= SURROGATES[1]
