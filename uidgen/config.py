"""Generator configuration resolution.

This module turns an alphabet plus either a bit size or an output length into
an immutable GeneratorConfig, deriving the remaining values. All validation
happens here, at construction time.
"""

import logging
import math
from dataclasses import dataclass
from numbers import Real
from typing import Optional

from uidgen.alphabets import DEFAULT_ALPHABET, validate_alphabet
from uidgen.errors import (
    ConflictingLengthSpecificationError,
    InvalidArgumentTypeError,
    InvalidBitSizeError,
    InvalidOutputLengthError,
)

# Configure logging
logger = logging.getLogger(__name__)

DEFAULT_BIT_SIZE = 128


def _require_int(value: object, name: str, error_cls: type) -> int:
    """Return value if it is a positive int, raising error_cls otherwise.

    Non-numeric values (and bools) raise InvalidArgumentTypeError instead.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgumentTypeError(
            f"{name} must be an integer, not {type(value).__name__}"
        )
    if not isinstance(value, int) or value <= 0:
        raise error_cls(f"{name} must be a positive integer, got {value!r}")
    return value


@dataclass(frozen=True)
class GeneratorConfig:
    """Immutable settings shared by every generate call.

    Attributes:
        alphabet: Ordered symbols used as digits
        base: Number of symbols in the alphabet
        bit_size: Entropy in bits, given or derived from output_length
        byte_count: Random bytes requested per identifier
        output_length: Exact number of symbols in every identifier
    """

    alphabet: str
    base: int
    bit_size: int
    byte_count: int
    output_length: int

    @classmethod
    def default(cls, alphabet: Optional[str] = None) -> "GeneratorConfig":
        """128-bit configuration over alphabet (BASE58 if omitted)."""
        return cls.from_bit_size(DEFAULT_BIT_SIZE, alphabet)

    @classmethod
    def from_bit_size(
        cls, bit_size: int, alphabet: Optional[str] = None
    ) -> "GeneratorConfig":
        """Build a configuration from a bit size.

        Args:
            bit_size: Positive multiple of 8
            alphabet: Output alphabet (default: BASE58)

        Returns:
            GeneratorConfig whose output_length is ceil(bit_size / log2(base))

        Raises:
            InvalidBitSizeError: If bit_size is not a positive multiple of 8
            InvalidArgumentTypeError: If an argument has the wrong type
        """
        bit_size = _require_int(bit_size, "bit_size", InvalidBitSizeError)
        if bit_size % 8 != 0:
            raise InvalidBitSizeError(
                f"bit_size must be a positive integer that is a multiple of 8, got {bit_size}"
            )
        alphabet = cls._resolve_alphabet(alphabet)
        base = len(alphabet)

        config = cls(
            alphabet=alphabet,
            base=base,
            bit_size=bit_size,
            byte_count=bit_size // 8,
            output_length=math.ceil(bit_size / math.log2(base)),
        )
        logger.debug(f"Resolved config from bit size: {config}")
        return config

    @classmethod
    def from_output_length(
        cls, output_length: int, alphabet: Optional[str] = None
    ) -> "GeneratorConfig":
        """Build a configuration from an exact identifier length.

        Args:
            output_length: Positive number of symbols per identifier
            alphabet: Output alphabet (default: BASE58)

        Returns:
            GeneratorConfig with bit_size = ceil(output_length * log2(base))
            and byte_count = ceil(bit_size / 8)

        Raises:
            InvalidOutputLengthError: If output_length is not a positive integer
            InvalidArgumentTypeError: If an argument has the wrong type
        """
        output_length = _require_int(
            output_length, "output_length", InvalidOutputLengthError
        )
        alphabet = cls._resolve_alphabet(alphabet)
        base = len(alphabet)
        bit_size = math.ceil(output_length * math.log2(base))

        config = cls(
            alphabet=alphabet,
            base=base,
            bit_size=bit_size,
            byte_count=math.ceil(bit_size / 8),
            output_length=output_length,
        )
        logger.debug(f"Resolved config from output length: {config}")
        return config

    @staticmethod
    def _resolve_alphabet(alphabet: Optional[str]) -> str:
        if alphabet is None:
            return DEFAULT_ALPHABET
        validate_alphabet(alphabet)
        return alphabet


def resolve_config(
    bit_size: Optional[int] = None,
    alphabet: Optional[str] = None,
    output_length: Optional[int] = None,
) -> GeneratorConfig:
    """Resolve a configuration from optional inputs.

    At most one of bit_size and output_length may be given. With neither, the
    default 128-bit size is used.

    Raises:
        ConflictingLengthSpecificationError: If both lengths are given
    """
    if bit_size is not None and output_length is not None:
        raise ConflictingLengthSpecificationError(
            "Specify either bit_size or output_length, not both"
        )
    if output_length is not None:
        return GeneratorConfig.from_output_length(output_length, alphabet)
    if bit_size is not None:
        return GeneratorConfig.from_bit_size(bit_size, alphabet)
    return GeneratorConfig.default(alphabet)
