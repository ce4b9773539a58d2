"""Conversion session holding the four built dictionaries."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from threading import RLock
from typing import Callable

from morsecodec.utils.config_manager import CodecSettings, ConfigManager
from .builder import (
    build_ascii_to_morse,
    build_binary_to_morse,
    build_morse_to_ascii,
    build_morse_to_binary,
)
from .codec import ascii_to_morse, binary_to_morse, morse_to_ascii, morse_to_binary
from .dictionary import OrderedDictionary
from .metadata import APP_NAME, APP_VERSION

logger = logging.getLogger(__name__)


DictionaryBuilder = Callable[[], OrderedDictionary]

_BUILDERS: dict[str, DictionaryBuilder] = {
    "ascii_to_morse": build_ascii_to_morse,
    "morse_to_ascii": build_morse_to_ascii,
    "morse_to_binary": build_morse_to_binary,
    "binary_to_morse": build_binary_to_morse,
}


@dataclass
class CodecContext:
    """
    Builds each dictionary on first use and tears all of them down once.

    Conversions may run from several threads against the same context; the
    lock only guards building and closing.
    """

    app_name: str = APP_NAME
    app_version: str = APP_VERSION
    settings: CodecSettings = field(default_factory=CodecSettings)
    builders: dict[str, DictionaryBuilder] = field(default_factory=lambda: dict(_BUILDERS))
    _dictionaries: dict[str, OrderedDictionary] = field(default_factory=dict, init=False, repr=False)
    _closed: bool = field(default=False, init=False, repr=False)
    _lock: RLock = field(default_factory=RLock, init=False, repr=False)

    @classmethod
    def from_config(cls, config_manager: ConfigManager) -> "CodecContext":
        return cls(settings=config_manager.get_codec_settings())

    @property
    def closed(self) -> bool:
        return self._closed

    def dictionary(self, name: str) -> OrderedDictionary:
        with self._lock:
            if self._closed:
                raise ValueError("operation on closed codec context")
            built = self._dictionaries.get(name)
            if built is None:
                try:
                    builder = self.builders[name]
                except KeyError:
                    raise KeyError(f"unknown dictionary {name!r}") from None
                built = builder()
                self._dictionaries[name] = built
            return built

    def ascii_to_morse(self, text: str) -> str:
        return ascii_to_morse(self.dictionary("ascii_to_morse"), text, fold_case=self.settings.fold_case)

    def morse_to_ascii(self, morse: str) -> str:
        return morse_to_ascii(
            self.dictionary("morse_to_ascii"),
            morse,
            max_token_length=self.settings.max_token_length,
        )

    def morse_to_binary(self, morse: str) -> str:
        return morse_to_binary(self.dictionary("morse_to_binary"), morse)

    def binary_to_morse(self, bits: str) -> str:
        return binary_to_morse(self.dictionary("binary_to_morse"), bits)

    def ascii_to_binary(self, text: str) -> str:
        return self.morse_to_binary(self.ascii_to_morse(text))

    def binary_to_ascii(self, bits: str) -> str:
        return self.morse_to_ascii(self.binary_to_morse(bits))

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            dictionaries = list(self._dictionaries.values())
            self._dictionaries.clear()
            self._closed = True
        for built in dictionaries:
            built.close()
        logger.debug("Codec context closed, %s dictionaries released", len(dictionaries))

    def __enter__(self) -> "CodecContext":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
