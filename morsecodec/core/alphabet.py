"""The fixed ASCII/Morse alphabet shared by the text-facing dictionaries."""

from __future__ import annotations

from dataclasses import dataclass

from .symbols import MORSE_WORD_SEPARATOR


@dataclass(frozen=True)
class AlphabetEntry:
    character: str
    morse: str


def _entries(pairs: tuple[tuple[str, str], ...]) -> tuple[AlphabetEntry, ...]:
    return tuple(AlphabetEntry(character, morse) for character, morse in pairs)


ALPHABET: tuple[AlphabetEntry, ...] = _entries((
    # Letters
    ("A", ".-"), ("B", "-..."), ("C", "-.-."), ("D", "-.."), ("E", "."),
    ("F", "..-."), ("G", "--."), ("H", "...."), ("I", ".."), ("J", ".---"),
    ("K", "-.-"), ("L", ".-.."), ("M", "--"), ("N", "-."), ("O", "---"),
    ("P", ".--."), ("Q", "--.-"), ("R", ".-."), ("S", "..."), ("T", "-"),
    ("U", "..-"), ("V", "...-"), ("W", ".--"), ("X", "-..-"), ("Y", "-.--"),
    ("Z", "--.."),
    # Digits, like "!" and ";" below, use the ITU codes
    ("0", "-----"), ("1", ".----"), ("2", "..---"), ("3", "...--"), ("4", "....-"),
    ("5", "....."), ("6", "-...."), ("7", "--..."), ("8", "---.."), ("9", "----."),
    # A space is carried as a word separator
    (" ", MORSE_WORD_SEPARATOR),
    # Punctuation
    ("+", ".-.-."), ("-", "-....-"), ("*", "-.-.-"), ("/", "-..-."), ("=", "-...-"),
    ("(", "-.--."), (")", "-.--.-"), ("?", "..--.."), ("!", "-.-.--"), (".", ".-.-.-"),
    ("'", ".----."), ('"', ".-..-."), (",", "--..--"), (";", "-.-.-."),
))

MAX_MORSE_LETTER_LENGTH = max(len(entry.morse) for entry in ALPHABET)


def supported_characters() -> frozenset[str]:
    return frozenset(entry.character for entry in ALPHABET)


def unsupported_characters(text: str) -> list[str]:
    """
    List the distinct characters of ``text`` that have no Morse code, in order
    of first appearance. Callers use it to validate input before encoding.
    """
    supported = supported_characters()
    seen: set[str] = set()
    missing: list[str] = []
    for ch in str(text or ""):
        if ch in supported or ch in seen:
            continue
        seen.add(ch)
        missing.append(ch)
    return missing
