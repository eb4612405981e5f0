"""Tests for standard alphabets and alphabet validation."""

import pytest

from uidgen.alphabets import (
    ALPHABETS,
    BASE16,
    BASE36,
    BASE58,
    BASE62,
    BASE66,
    BASE71,
    BASE94,
    lookup_alphabet,
    validate_alphabet,
)
from uidgen.errors import (
    AlphabetTooShortError,
    DuplicateSymbolError,
    InvalidArgumentTypeError,
)


class TestStandardAlphabets:
    """The named alphabets must match their documented contents exactly."""

    def test_lengths(self):
        assert len(BASE16) == 16
        assert len(BASE36) == 36
        assert len(BASE58) == 58
        assert len(BASE62) == 62
        assert len(BASE66) == 66
        assert len(BASE71) == 71
        assert len(BASE94) == 94

    def test_base94_is_printable_ascii(self):
        assert BASE94 == "".join(chr(code) for code in range(33, 127))

    def test_base58_omits_ambiguous_characters(self):
        for char in "0OIl":
            assert char not in BASE58

    def test_extended_alphabets_extend_base62(self):
        assert BASE66 == BASE62 + "-._~"
        assert BASE71 == BASE62 + "!'()*-._~"

    @pytest.mark.parametrize("alphabet", list(ALPHABETS.values()))
    def test_standard_alphabets_are_unique(self, alphabet):
        assert len(set(alphabet)) == len(alphabet)
        validate_alphabet(alphabet)


class TestValidateAlphabet:
    """Unit tests for validate_alphabet."""

    def test_accepts_custom_alphabet(self):
        validate_alphabet("123abc")
        validate_alphabet("01")

    @pytest.mark.parametrize("value", [None, False, 256, {}, [], ["a", "b"], b"ab"])
    def test_rejects_non_string(self, value):
        with pytest.raises(InvalidArgumentTypeError):
            validate_alphabet(value)

    def test_argument_type_error_is_type_error(self):
        with pytest.raises(TypeError):
            validate_alphabet(11)

    @pytest.mark.parametrize("value", ["", "1"])
    def test_rejects_short_alphabet(self, value):
        with pytest.raises(AlphabetTooShortError):
            validate_alphabet(value)

    @pytest.mark.parametrize(
        "value, symbol",
        [
            ("11", "1"),
            ("011", "1"),
            ("110", "1"),
            ("101", "1"),
            ("0121", "1"),
            ("01213", "1"),
            ("abba", "a"),
        ],
    )
    def test_rejects_duplicate_symbol(self, value, symbol):
        with pytest.raises(DuplicateSymbolError) as exc_info:
            validate_alphabet(value)

        assert exc_info.value.symbol == symbol
        assert repr(symbol) in str(exc_info.value)

    def test_duplicate_symbol_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_alphabet("aa")


class TestLookupAlphabet:
    """Unit tests for lookup_alphabet."""

    def test_resolves_names_case_insensitively(self):
        assert lookup_alphabet("base62") == BASE62
        assert lookup_alphabet("BASE16") == BASE16
        assert lookup_alphabet(" base94 ") == BASE94

    def test_returns_literal_alphabet_unchanged(self):
        assert lookup_alphabet("abc123") == "abc123"
        assert lookup_alphabet(" ab") == " ab"
