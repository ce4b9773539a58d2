from __future__ import annotations


class MorseCodecError(Exception):
    """Base class for every error raised by the codec."""


class AllocationFailure(MorseCodecError, MemoryError):
    """A dictionary could not be populated; partial state was released."""


class MorseLookupError(MorseCodecError, LookupError):
    """An input character, token or code has no entry in the active dictionary."""

    def __init__(self, message: str, token: str = "", position: int | None = None) -> None:
        super().__init__(message)
        self.token = token
        self.position = position


class MalformedInput(MorseCodecError, ValueError):
    """The input cannot be segmented into complete tokens."""

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position
