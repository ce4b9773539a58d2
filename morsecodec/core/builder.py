"""
Builders for the four directional lookup tables.

Each builder takes an empty dictionary handle (or creates one), sets the
comparator that orders its keys and fills it. Destroy hooks already set on
the handle are kept, so callers decide how released entries are disposed of.
When an entry cannot be stored the partially filled dictionary is closed,
which releases everything inserted so far, and ``AllocationFailure`` is
raised.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Iterable

from .alphabet import ALPHABET
from .dictionary import Comparator, OrderedDictionary, compare_character, compare_string
from .errors import AllocationFailure
from .symbols import SYMBOL_CODES

logger = logging.getLogger(__name__)


def _alphabet_pairs(reverse: bool) -> deque:
    pending = deque()
    for entry in ALPHABET:
        if reverse:
            pending.append((entry.morse, entry.character))
        else:
            pending.append((entry.character, entry.morse))
    return pending


def _symbol_pairs(reverse: bool) -> deque:
    return deque((code, symbol) if reverse else (symbol, code) for symbol, code in SYMBOL_CODES)


def _populate(
    name: str,
    dictionary: OrderedDictionary | None,
    compare: Comparator,
    pairs: Callable[[], Iterable[tuple[str, str]]],
) -> OrderedDictionary:
    if dictionary is None:
        dictionary = OrderedDictionary()
    if len(dictionary):
        raise ValueError(f"{name} needs an empty dictionary, got {len(dictionary)} entries")

    dictionary.compare_key = compare
    try:
        pending = deque(pairs())
        while pending:
            key, value = pending.popleft()
            dictionary.insert(key, value)
    except MemoryError as exc:
        logger.debug("%s failed after %s entries, releasing them", name, len(dictionary))
        dictionary.close()
        raise AllocationFailure(f"{name}: could not store dictionary entry") from exc

    logger.debug("%s built with %s entries", name, len(dictionary))
    return dictionary


def build_ascii_to_morse(dictionary: OrderedDictionary | None = None) -> OrderedDictionary:
    return _populate("ascii_to_morse", dictionary, compare_character, lambda: _alphabet_pairs(False))


def build_morse_to_ascii(dictionary: OrderedDictionary | None = None) -> OrderedDictionary:
    return _populate("morse_to_ascii", dictionary, compare_string, lambda: _alphabet_pairs(True))


def build_morse_to_binary(dictionary: OrderedDictionary | None = None) -> OrderedDictionary:
    return _populate("morse_to_binary", dictionary, compare_character, lambda: _symbol_pairs(False))


def build_binary_to_morse(dictionary: OrderedDictionary | None = None) -> OrderedDictionary:
    return _populate("binary_to_morse", dictionary, compare_string, lambda: _symbol_pairs(True))
