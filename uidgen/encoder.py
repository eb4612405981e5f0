"""Fixed-length base conversion of random bytes.

The conversion follows the base-x encode loop: the buffer is folded into a
little-endian array of base-N digits one byte at a time, then rendered most
significant digit first and fitted to the configured length.
"""

from uidgen.config import GeneratorConfig
from uidgen.errors import ByteCountMismatchError


def encode(config: GeneratorConfig, data: bytes) -> str:
    """Encode a big-endian byte buffer as an identifier string.

    Args:
        config: Resolved generator configuration
        data: Exactly config.byte_count bytes, most significant first

    Returns:
        String of exactly config.output_length symbols from config.alphabet

    Raises:
        ByteCountMismatchError: If len(data) != config.byte_count
    """
    if len(data) != config.byte_count:
        raise ByteCountMismatchError(
            f"Expected {config.byte_count} bytes, got {len(data)}"
        )

    base = config.base
    digits = [0]

    for byte in data:
        carry = byte
        for i, digit in enumerate(digits):
            carry += digit << 8
            digits[i] = carry % base
            carry //= base

        while carry > 0:
            digits.append(carry % base)
            carry //= base

    return _render(digits, config.alphabet, config.output_length)


def _render(digits: list[int], alphabet: str, length: int) -> str:
    # Overflow beyond length keeps the most significant digits
    top = digits[::-1][:length]
    padding = alphabet[0] * (length - len(top))
    return padding + "".join(alphabet[digit] for digit in top)
