"""Fixed-length random identifiers over configurable alphabets."""

from uidgen.alphabets import (
    ALPHABETS,
    BASE16,
    BASE36,
    BASE58,
    BASE62,
    BASE66,
    BASE71,
    BASE94,
    validate_alphabet,
)
from uidgen.config import GeneratorConfig, resolve_config
from uidgen.encoder import encode
from uidgen.errors import (
    AlphabetTooShortError,
    ByteCountMismatchError,
    ConflictingLengthSpecificationError,
    DuplicateSymbolError,
    InvalidArgumentTypeError,
    InvalidBitSizeError,
    InvalidOutputLengthError,
    UIDGenError,
)
from uidgen.generator import UIDGenerator

__all__ = [
    "ALPHABETS",
    "BASE16",
    "BASE36",
    "BASE58",
    "BASE62",
    "BASE66",
    "BASE71",
    "BASE94",
    "AlphabetTooShortError",
    "ByteCountMismatchError",
    "ConflictingLengthSpecificationError",
    "DuplicateSymbolError",
    "GeneratorConfig",
    "InvalidArgumentTypeError",
    "InvalidBitSizeError",
    "InvalidOutputLengthError",
    "UIDGenError",
    "UIDGenerator",
    "encode",
    "resolve_config",
    "validate_alphabet",
]
