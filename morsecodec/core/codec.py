"""
The four directional converters.

Each converter reads a fully materialized input string, looks every token up
in a dictionary built by :mod:`morsecodec.core.builder` and returns the
converted string. The first unknown or malformed token aborts the whole
conversion; nothing partial is returned.
"""

from __future__ import annotations

import logging
from collections import deque

from PySide6.QtCore import QCoreApplication

from .dictionary import Dictionary
from .errors import MalformedInput, MorseLookupError
from .symbols import (
    CODE_TERMINATOR,
    MORSE_LETTER_SEPARATOR,
    MORSE_WORD_SEPARATOR,
)

logger = logging.getLogger(__name__)

# Longest Morse token the Morse -> ASCII tokenizer accepts.
MAX_TOKEN_LENGTH = 19

_SEPARATORS = (MORSE_LETTER_SEPARATOR, MORSE_WORD_SEPARATOR)


def _tr(text: str) -> str:
    return QCoreApplication.translate("MorseCodec", text)


def _lookup_error(message: str, token: str, position: int) -> MorseLookupError:
    logger.debug("Lookup failed at %s for %r", position, token)
    return MorseLookupError(message.format(token=token, position=position), token=token, position=position)


def ascii_to_morse(dictionary: Dictionary, text: str, *, fold_case: bool = False) -> str:
    """
    Encode ASCII text as a Morse sequence.

    Letters of a word are joined by a letter separator. A space encodes to a
    word separator and never gets a letter separator on either side, so runs
    of spaces become runs of word separators.

    :param dictionary: ASCII character -> Morse letter table
    :param text: text to encode
    :param fold_case: upper-case each character before lookup
    :return: the Morse sequence
    """
    output: list[str] = []
    length = len(text)

    for index, ch in enumerate(text):
        key = ch.upper() if fold_case else ch
        # upper() can expand one character into several, e.g. "ß" -> "SS"
        morse = dictionary.lookup(key) if len(key) == 1 else None
        if morse is None:
            raise _lookup_error(_tr("No Morse code for character {token!r} at {position}"), ch, index)
        output.append(morse)

        if index + 1 >= length or morse.endswith(MORSE_WORD_SEPARATOR):
            continue
        if text[index + 1] == " ":
            continue
        output.append(MORSE_LETTER_SEPARATOR)

    return "".join(output)


def morse_to_ascii(dictionary: Dictionary, morse: str, *, max_token_length: int = MAX_TOKEN_LENGTH) -> str:
    """
    Decode a Morse sequence into ASCII text.

    Every word separator yields one space, including leading, trailing and
    repeated ones. A letter separator is skipped only when it directly
    follows a letter.

    :param dictionary: Morse letter -> ASCII character table
    :param morse: the Morse sequence
    :param max_token_length: longest accepted Morse letter
    :return: decoded text
    """
    output: list[str] = []
    length = len(morse)
    index = 0

    while index < length:
        start = index
        while index < length and morse[index] not in _SEPARATORS:
            index += 1
        token = morse[start:index]

        if len(token) > max_token_length:
            logger.debug("Token at %s is %s symbols long", start, len(token))
            raise MalformedInput(
                _tr("Morse letter at {0} exceeds {1} symbols").format(start, max_token_length),
                position=start,
            )

        if token:
            character = dictionary.lookup(token)
            if character is None:
                raise _lookup_error(_tr("Unknown Morse letter {token!r} at {position}"), token, start)
            output.append(character)
        elif index >= length or morse[index] != MORSE_WORD_SEPARATOR:
            raise _lookup_error(_tr("Missing Morse letter at {position}"), token, start)

        spaces = 0
        while index < length and morse[index] == MORSE_WORD_SEPARATOR:
            output.append(" ")
            spaces += 1
            index += 1

        if not spaces and index < length and morse[index] == MORSE_LETTER_SEPARATOR:
            index += 1
            if index >= length:
                raise _lookup_error(_tr("Missing Morse letter at {position}"), "", index)

    return "".join(output)


def morse_to_binary(dictionary: Dictionary, morse: str) -> str:
    """Substitute every Morse symbol with its binary code."""
    output: list[str] = []
    for index, symbol in enumerate(morse):
        code = dictionary.lookup(symbol)
        if code is None:
            raise _lookup_error(_tr("Unknown Morse symbol {token!r} at {position}"), symbol, index)
        output.append(code)
    return "".join(output)


def binary_to_morse(dictionary: Dictionary, bits: str) -> str:
    """
    Decode a binary digit string into Morse symbols.

    Digits are buffered until a ``0`` closes the current code, which is then
    looked up as a whole. Input that ends inside a code raises
    ``MalformedInput``.
    """
    output: list[str] = []
    pending: deque[str] = deque()
    start = 0

    for index, digit in enumerate(bits):
        if not pending:
            start = index
        pending.append(digit)

        if digit != CODE_TERMINATOR:
            continue

        code = "".join(pending)
        pending.clear()
        symbol = dictionary.lookup(code)
        if symbol is None:
            raise _lookup_error(_tr("Unknown binary code {token!r} at {position}"), code, start)
        output.append(symbol)

    if pending:
        logger.debug("Binary input ends inside a code at %s", start)
        raise MalformedInput(
            _tr("Binary input ends inside a code starting at {0}").format(start),
            position=start,
        )

    return "".join(output)
