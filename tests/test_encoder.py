"""Property-based and unit tests for fixed-length base encoding."""

import pytest
from hypothesis import given, strategies as st, settings

from uidgen.alphabets import BASE16, BASE58, BASE62, BASE94
from uidgen.config import GeneratorConfig
from uidgen.encoder import encode
from uidgen.errors import ByteCountMismatchError


def integer_encoding(config: GeneratorConfig, data: bytes) -> str:
    """Encode via Python integers, padding or keeping the leading digits."""
    number = int.from_bytes(data, "big")
    digits = ""
    while number:
        number, remainder = divmod(number, config.base)
        digits = config.alphabet[remainder] + digits
    digits = digits or config.alphabet[0]

    if len(digits) >= config.output_length:
        return digits[: config.output_length]
    return config.alphabet[0] * (config.output_length - len(digits)) + digits


alphabets = st.integers(min_value=2, max_value=94).map(lambda base: BASE94[:base])

configs = st.one_of(
    st.builds(
        GeneratorConfig.from_bit_size,
        st.integers(min_value=1, max_value=64).map(lambda n: n * 8),
        alphabets,
    ),
    st.builds(
        GeneratorConfig.from_output_length,
        st.integers(min_value=1, max_value=100),
        alphabets,
    ),
)


class TestEncode:
    """Unit tests for encode."""

    def test_hex_matches_bytes_hex(self):
        config = GeneratorConfig.default(BASE16)
        data = bytes(range(16))

        assert encode(config, data) == data.hex()

    def test_all_zero_bytes_pad_with_zero_symbol(self):
        config = GeneratorConfig.default()

        assert encode(config, bytes(16)) == "1" * 22

    def test_leading_zero_bytes_keep_length(self):
        config = GeneratorConfig.from_bit_size(256)
        data = bytes(31) + b"\xff"

        uid = encode(config, data)

        assert len(uid) == 44
        assert uid == "1" * 42 + "5Q"

    def test_all_max_bytes(self):
        config = GeneratorConfig.from_bit_size(256, BASE62)

        uid = encode(config, b"\xff" * 32)

        assert len(uid) == 43
        assert uid == integer_encoding(config, b"\xff" * 32)

    def test_binary_alphabet(self):
        config = GeneratorConfig.from_bit_size(8, "01")

        assert encode(config, b"\x05") == "00000101"

    def test_overflow_keeps_most_significant_digits(self):
        config = GeneratorConfig.from_output_length(10, BASE58)
        data = b"\xff" * 8

        uid = encode(config, data)
        full = integer_encoding(GeneratorConfig.from_output_length(11, BASE58), data)

        # 2**64 - 1 needs 11 base58 digits
        assert full[0] != "1"
        assert uid == full[:10]

    def test_overflow_single_binary_digit(self):
        config = GeneratorConfig.from_output_length(1, "01")

        assert config.byte_count == 1
        assert encode(config, b"\x00") == "0"
        assert encode(config, b"\x80") == "1"
        assert encode(config, b"\x01") == "1"

    @pytest.mark.parametrize("size", [0, 15, 17])
    def test_rejects_wrong_byte_count(self, size):
        config = GeneratorConfig.default()

        with pytest.raises(ByteCountMismatchError):
            encode(config, bytes(size))


class TestEncodeProperties:
    """Property-based tests for encode."""

    @settings(max_examples=200)
    @given(config=configs, data=st.data())
    def test_output_length_is_exact(self, config, data):
        buffer = data.draw(
            st.binary(min_size=config.byte_count, max_size=config.byte_count)
        )

        uid = encode(config, buffer)

        assert len(uid) == config.output_length
        assert set(uid) <= set(config.alphabet)

    @settings(max_examples=200)
    @given(config=configs, data=st.data())
    def test_matches_integer_encoding(self, config, data):
        buffer = data.draw(
            st.binary(min_size=config.byte_count, max_size=config.byte_count)
        )

        assert encode(config, buffer) == integer_encoding(config, buffer)

    @settings(max_examples=100)
    @given(config=configs)
    def test_extreme_buffers_have_exact_length(self, config):
        for buffer in (bytes(config.byte_count), b"\xff" * config.byte_count):
            assert len(encode(config, buffer)) == config.output_length

        assert encode(config, bytes(config.byte_count)) == (
            config.alphabet[0] * config.output_length
        )

    @settings(max_examples=100)
    @given(st.binary(min_size=1, max_size=64))
    def test_hex_for_byte_sized_configs(self, buffer):
        config = GeneratorConfig.from_bit_size(len(buffer) * 8, BASE16)

        assert encode(config, buffer) == buffer.hex()

    @settings(max_examples=100)
    @given(
        output_length=st.integers(min_value=1, max_value=40),
        data=st.data(),
    )
    def test_overflowing_buffers_are_truncated(self, output_length, data):
        config = GeneratorConfig.from_output_length(output_length, BASE62)
        number = data.draw(
            st.integers(
                min_value=config.base**output_length,
                max_value=2 ** (config.byte_count * 8) - 1,
            )
        )
        buffer = number.to_bytes(config.byte_count, "big")

        uid = encode(config, buffer)

        assert len(uid) == output_length
        assert uid[0] != config.alphabet[0]
        assert uid == integer_encoding(config, buffer)

    def test_same_input_same_output(self):
        config = GeneratorConfig.from_bit_size(128, BASE62)
        data = bytes(range(100, 116))

        assert encode(config, data) == encode(config, data)
