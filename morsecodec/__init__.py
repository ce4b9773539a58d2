from .core.alphabet import (
    ALPHABET,
    MAX_MORSE_LETTER_LENGTH,
    AlphabetEntry,
    supported_characters,
    unsupported_characters,
)
from .core.builder import (
    build_ascii_to_morse,
    build_binary_to_morse,
    build_morse_to_ascii,
    build_morse_to_binary,
)
from .core.codec import (
    MAX_TOKEN_LENGTH,
    ascii_to_morse,
    binary_to_morse,
    morse_to_ascii,
    morse_to_binary,
)
from .core.context import CodecContext
from .core.dictionary import Dictionary, OrderedDictionary, compare_character, compare_string
from .core.errors import AllocationFailure, MalformedInput, MorseCodecError, MorseLookupError
from .core.metadata import APP_NAME, APP_VERSION
from .core.symbols import (
    BINARY_DASH,
    BINARY_DOT,
    BINARY_LETTER_SEPARATOR,
    BINARY_WORD_SEPARATOR,
    MAX_BINARY_CODE_LENGTH,
    MORSE_DASH,
    MORSE_DOT,
    MORSE_LETTER_SEPARATOR,
    MORSE_WORD_SEPARATOR,
    SYMBOL_CODES,
    Symbol,
    is_prefix_free,
)
from .utils.config_manager import CodecSettings, ConfigManager

__version__ = APP_VERSION

__all__ = [
    "ALPHABET",
    "APP_NAME",
    "APP_VERSION",
    "AllocationFailure",
    "AlphabetEntry",
    "BINARY_DASH",
    "BINARY_DOT",
    "BINARY_LETTER_SEPARATOR",
    "BINARY_WORD_SEPARATOR",
    "CodecContext",
    "CodecSettings",
    "ConfigManager",
    "Dictionary",
    "MAX_BINARY_CODE_LENGTH",
    "MAX_MORSE_LETTER_LENGTH",
    "MAX_TOKEN_LENGTH",
    "MORSE_DASH",
    "MORSE_DOT",
    "MORSE_LETTER_SEPARATOR",
    "MORSE_WORD_SEPARATOR",
    "MalformedInput",
    "MorseCodecError",
    "MorseLookupError",
    "OrderedDictionary",
    "SYMBOL_CODES",
    "Symbol",
    "ascii_to_morse",
    "binary_to_morse",
    "build_ascii_to_morse",
    "build_binary_to_morse",
    "build_morse_to_ascii",
    "build_morse_to_binary",
    "compare_character",
    "compare_string",
    "is_prefix_free",
    "morse_to_ascii",
    "morse_to_binary",
    "supported_characters",
    "unsupported_characters",
]
