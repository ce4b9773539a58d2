"""Morse symbol primitives and their fixed prefix-free binary codes."""

from __future__ import annotations

from enum import Enum
from typing import Iterable


class Symbol(str, Enum):
    DOT = "."
    DASH = "-"
    LETTER_SEPARATOR = "/"
    WORD_SEPARATOR = "|"


MORSE_DOT = Symbol.DOT.value
MORSE_DASH = Symbol.DASH.value
MORSE_LETTER_SEPARATOR = Symbol.LETTER_SEPARATOR.value
MORSE_WORD_SEPARATOR = Symbol.WORD_SEPARATOR.value

BINARY_DOT = "0"
BINARY_DASH = "10"
BINARY_LETTER_SEPARATOR = "110"
BINARY_WORD_SEPARATOR = "1110"

# Every code ends in exactly one "0", which is what lets the decoder cut
# codewords without length markers.
CODE_TERMINATOR = "0"

SYMBOL_CODES: tuple[tuple[str, str], ...] = (
    (MORSE_DOT, BINARY_DOT),
    (MORSE_DASH, BINARY_DASH),
    (MORSE_LETTER_SEPARATOR, BINARY_LETTER_SEPARATOR),
    (MORSE_WORD_SEPARATOR, BINARY_WORD_SEPARATOR),
)

MAX_BINARY_CODE_LENGTH = max(len(code) for _, code in SYMBOL_CODES)


def is_prefix_free(codes: Iterable[str]) -> bool:
    """Return True when no code in ``codes`` is a prefix of another one."""
    ordered = sorted(set(codes))
    for current, following in zip(ordered, ordered[1:]):
        # lexicographic order puts a prefix right before its extensions
        if following.startswith(current):
            return False
    return True
