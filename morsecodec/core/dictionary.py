"""Ordered key/value storage used for every codec lookup table."""

from __future__ import annotations

import logging
from bisect import bisect_left
from functools import cmp_to_key
from typing import Any, Callable, Iterator, Optional, Protocol

logger = logging.getLogger(__name__)


Comparator = Callable[[Any, Any], int]
DestroyHook = Callable[[Any], None]


def compare_character(k1: str, k2: str) -> int:
    # only single characters are equal to a stored character key
    if len(k1) != 1 or len(k2) != 1:
        return (len(k1) - len(k2)) or compare_string(k1, k2)
    return ord(k1) - ord(k2)


def compare_string(k1: str, k2: str) -> int:
    return (k1 > k2) - (k1 < k2)


class Dictionary(Protocol):
    """What the converters need from a lookup table."""

    def insert(self, key: Any, value: Any) -> None:
        ...

    def lookup(self, key: Any) -> Optional[Any]:
        ...

    def close(self) -> None:
        ...


class OrderedDictionary:
    """
    Sorted-array map ordered by a pluggable comparator.

    The dictionary owns what is inserted into it: ``close()`` hands every
    stored key to ``destroy_key`` and every stored value to ``destroy_value``
    exactly once, then empties the table. The comparator and hooks can be set
    through the constructor or assigned later, but the comparator must not
    change once entries exist.
    """

    def __init__(
        self,
        compare_key: Comparator = compare_string,
        destroy_key: DestroyHook | None = None,
        destroy_value: DestroyHook | None = None,
    ) -> None:
        self._compare_key = compare_key
        self.destroy_key = destroy_key
        self.destroy_value = destroy_value
        self._wrap = cmp_to_key(compare_key)
        self._order: list[Any] = []
        self._keys: list[Any] = []
        self._values: list[Any] = []
        self._closed = False

    @property
    def compare_key(self) -> Comparator:
        return self._compare_key

    @compare_key.setter
    def compare_key(self, compare: Comparator) -> None:
        if self._keys:
            raise ValueError("cannot change the comparator of a populated dictionary")
        self._compare_key = compare
        self._wrap = cmp_to_key(compare)

    @property
    def closed(self) -> bool:
        return self._closed

    def _check_open(self) -> None:
        if self._closed:
            raise ValueError("operation on closed dictionary")

    def _find(self, key: Any) -> tuple[int, bool]:
        wrapped = self._wrap(key)
        index = bisect_left(self._order, wrapped)
        found = index < len(self._keys) and self._compare_key(self._keys[index], key) == 0
        return index, found

    def insert(self, key: Any, value: Any) -> None:
        self._check_open()
        index, found = self._find(key)
        if found:
            old = self._values[index]
            self._values[index] = value
            if self.destroy_value is not None and old is not value:
                self.destroy_value(old)
            return
        self._order.insert(index, self._wrap(key))
        self._keys.insert(index, key)
        self._values.insert(index, value)

    def lookup(self, key: Any) -> Optional[Any]:
        self._check_open()
        index, found = self._find(key)
        return self._values[index] if found else None

    def items(self) -> Iterator[tuple[Any, Any]]:
        self._check_open()
        return iter(list(zip(self._keys, self._values)))

    def close(self) -> None:
        if self._closed:
            return
        released = len(self._keys)
        for key, value in zip(self._keys, self._values):
            if self.destroy_key is not None:
                self.destroy_key(key)
            if self.destroy_value is not None:
                self.destroy_value(value)
        self._order.clear()
        self._keys.clear()
        self._values.clear()
        self._closed = True
        logger.debug("Dictionary closed, released %s entries", released)

    def __len__(self) -> int:
        return len(self._keys)

    def __contains__(self, key: Any) -> bool:
        return not self._closed and self._find(key)[1]

    def __enter__(self) -> "OrderedDictionary":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
