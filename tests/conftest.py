import pytest

from morsecodec.core.builder import (
    build_ascii_to_morse,
    build_binary_to_morse,
    build_morse_to_ascii,
    build_morse_to_binary,
)


@pytest.fixture
def ascii_to_morse_table():
    table = build_ascii_to_morse()
    yield table
    table.close()


@pytest.fixture
def morse_to_ascii_table():
    table = build_morse_to_ascii()
    yield table
    table.close()


@pytest.fixture
def morse_to_binary_table():
    table = build_morse_to_binary()
    yield table
    table.close()


@pytest.fixture
def binary_to_morse_table():
    table = build_binary_to_morse()
    yield table
    table.close()
