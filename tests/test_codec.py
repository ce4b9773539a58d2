import itertools
import random

import pytest

from morsecodec.core.alphabet import ALPHABET
from morsecodec.core.codec import ascii_to_morse, binary_to_morse, morse_to_ascii, morse_to_binary
from morsecodec.core.errors import MalformedInput, MorseCodecError, MorseLookupError
from morsecodec.core.symbols import SYMBOL_CODES


SOS = ".../---/..."


def test_sos_uses_letter_separators(ascii_to_morse_table):
    assert ascii_to_morse(ascii_to_morse_table, "SOS") == SOS


def test_word_boundary_has_no_adjacent_letter_separator(ascii_to_morse_table):
    expected = "/".join(["....", ".."]) + "|" + "/".join(["-", "....", ".", ".-.", "."])
    encoded = ascii_to_morse(ascii_to_morse_table, "HI THERE")
    assert encoded == expected
    assert encoded.count("|") == 1
    assert "/|" not in encoded and "|/" not in encoded


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", ""),
        ("E", "."),
        (" A", "|.-"),
        ("A ", ".-|"),
        ("A  B", ".-||-..."),
        ("  ", "||"),
        ("5/2", "...../-..-./..---"),
    ],
)
def test_ascii_to_morse_boundaries(ascii_to_morse_table, text, expected):
    assert ascii_to_morse(ascii_to_morse_table, text) == expected


def test_ascii_to_morse_unknown_character(ascii_to_morse_table):
    with pytest.raises(MorseLookupError) as excinfo:
        ascii_to_morse(ascii_to_morse_table, "A|B")
    assert excinfo.value.token == "|"
    assert excinfo.value.position == 1
    assert isinstance(excinfo.value, LookupError)


def test_ascii_to_morse_is_case_sensitive_by_default(ascii_to_morse_table):
    with pytest.raises(MorseLookupError):
        ascii_to_morse(ascii_to_morse_table, "sos")


def test_ascii_to_morse_fold_case(ascii_to_morse_table):
    assert ascii_to_morse(ascii_to_morse_table, "sos", fold_case=True) == SOS
    assert ascii_to_morse(ascii_to_morse_table, "a b", fold_case=True) == ".-|-..."


@pytest.mark.parametrize("text", ["\u00df", "\ufb01", "S\u00dfS"])
def test_ascii_to_morse_rejects_case_expansion(ascii_to_morse_table, text):
    with pytest.raises(MorseLookupError) as excinfo:
        ascii_to_morse(ascii_to_morse_table, text, fold_case=True)
    assert excinfo.value.token in ("\u00df", "\ufb01")


@pytest.mark.parametrize(
    "morse, expected",
    [
        ("", ""),
        (SOS, "SOS"),
        ("|.-", " A"),
        (".-|", "A "),
        (".-||-...", "A  B"),
        ("||", "  "),
        ("|", " "),
    ],
)
def test_morse_to_ascii(morse_to_ascii_table, morse, expected):
    assert morse_to_ascii(morse_to_ascii_table, morse) == expected


def test_morse_to_ascii_unknown_token(morse_to_ascii_table):
    with pytest.raises(MorseLookupError) as excinfo:
        morse_to_ascii(morse_to_ascii_table, "......")
    assert excinfo.value.token == "......"
    assert excinfo.value.position == 0


@pytest.mark.parametrize("morse", ["/.-", ".-/", ".-//-...", ".-|/-...", "/"])
def test_morse_to_ascii_misplaced_letter_separator(morse_to_ascii_table, morse):
    with pytest.raises(MorseLookupError):
        morse_to_ascii(morse_to_ascii_table, morse)


def test_morse_to_ascii_token_length_bound(morse_to_ascii_table):
    with pytest.raises(MalformedInput):
        morse_to_ascii(morse_to_ascii_table, "." * 20)
    with pytest.raises(MalformedInput) as excinfo:
        morse_to_ascii(morse_to_ascii_table, "./......", max_token_length=5)
    assert excinfo.value.position == 2
    assert morse_to_ascii(morse_to_ascii_table, ".....", max_token_length=5) == "5"


def test_morse_to_binary(morse_to_binary_table):
    assert morse_to_binary(morse_to_binary_table, SOS) == "000" + "110" + "101010" + "110" + "000"
    assert morse_to_binary(morse_to_binary_table, ".|-") == "0" + "1110" + "10"
    assert morse_to_binary(morse_to_binary_table, "") == ""


def test_morse_to_binary_unknown_symbol(morse_to_binary_table):
    with pytest.raises(MorseLookupError) as excinfo:
        morse_to_binary(morse_to_binary_table, ".- -")
    assert excinfo.value.token == " "
    assert excinfo.value.position == 2


def test_binary_to_morse(binary_to_morse_table):
    assert binary_to_morse(binary_to_morse_table, "0101100") == ".-/."
    assert binary_to_morse(binary_to_morse_table, "1110") == "|"
    assert binary_to_morse(binary_to_morse_table, "") == ""


def test_binary_to_morse_incomplete_code(binary_to_morse_table):
    with pytest.raises(MalformedInput) as excinfo:
        binary_to_morse(binary_to_morse_table, "11")
    assert excinfo.value.position == 0
    with pytest.raises(MalformedInput) as excinfo:
        binary_to_morse(binary_to_morse_table, "0101")
    assert excinfo.value.position == 3


def test_binary_to_morse_unknown_code(binary_to_morse_table):
    with pytest.raises(MorseLookupError) as excinfo:
        binary_to_morse(binary_to_morse_table, "011110")
    assert excinfo.value.token == "11110"
    assert excinfo.value.position == 1
    with pytest.raises(MorseLookupError):
        binary_to_morse(binary_to_morse_table, "020")


@pytest.mark.parametrize("bits", ["01111", "1111", "0111111"])
def test_binary_to_morse_trailing_ones_are_incomplete(binary_to_morse_table, bits):
    with pytest.raises(MalformedInput):
        binary_to_morse(binary_to_morse_table, bits)


def test_errors_share_a_base_class(binary_to_morse_table):
    with pytest.raises(MorseCodecError):
        binary_to_morse(binary_to_morse_table, "1")


def test_every_code_concatenation_decodes_unambiguously(binary_to_morse_table):
    for length in range(1, 5):
        for combo in itertools.product(SYMBOL_CODES, repeat=length):
            symbols = "".join(symbol for symbol, _ in combo)
            bits = "".join(code for _, code in combo)
            assert binary_to_morse(binary_to_morse_table, bits) == symbols


def test_ascii_round_trip(ascii_to_morse_table, morse_to_ascii_table):
    alphabet = "".join(entry.character for entry in ALPHABET)
    rng = random.Random(7)
    samples = [alphabet, "HI THERE", " CQ  DE BG7XYZ? ", "(1+2)*3=9!"]
    samples += ["".join(rng.choice(alphabet) for _ in range(rng.randint(1, 40))) for _ in range(50)]
    for text in samples:
        assert morse_to_ascii(morse_to_ascii_table, ascii_to_morse(ascii_to_morse_table, text)) == text


def test_morse_binary_round_trip(ascii_to_morse_table, morse_to_binary_table, binary_to_morse_table):
    for text in ("SOS", "HI THERE", " A  B ", "'QUOTE', \"QUOTE\";"):
        morse = ascii_to_morse(ascii_to_morse_table, text)
        bits = morse_to_binary(morse_to_binary_table, morse)
        assert set(bits) <= {"0", "1"}
        assert binary_to_morse(binary_to_morse_table, bits) == morse
