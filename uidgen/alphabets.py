"""Standard alphabets and alphabet validation.

The named alphabets are literal constants so that identifiers stay compatible
with other implementations using the same symbol sets.
"""

import logging
from collections import Counter

from uidgen.errors import (
    AlphabetTooShortError,
    DuplicateSymbolError,
    InvalidArgumentTypeError,
)

# Configure logging
logger = logging.getLogger(__name__)

BASE16 = "0123456789abcdef"
BASE36 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
BASE58 = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
BASE62 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
BASE66 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz-._~"
BASE71 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz!'()*-._~"
BASE94 = (
    "!\"#$%&'()*+,-./0123456789:;<=>?@"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ[\\]^_`abcdefghijklmnopqrstuvwxyz{|}~"
)

ALPHABETS = {
    "base16": BASE16,
    "base36": BASE36,
    "base58": BASE58,
    "base62": BASE62,
    "base66": BASE66,
    "base71": BASE71,
    "base94": BASE94,
}

DEFAULT_ALPHABET = BASE58

# Known valid, skip the duplicate scan
_STANDARD_ALPHABETS = frozenset(ALPHABETS.values())


def validate_alphabet(alphabet: str) -> None:
    """Check that an alphabet can be used for encoding.

    Args:
        alphabet: Ordered string of symbols

    Raises:
        InvalidArgumentTypeError: If alphabet is not a string
        AlphabetTooShortError: If alphabet has fewer than 2 symbols
        DuplicateSymbolError: If a symbol appears more than once
    """
    if not isinstance(alphabet, str):
        raise InvalidArgumentTypeError(
            f"alphabet must be a string, not {type(alphabet).__name__}"
        )

    if alphabet in _STANDARD_ALPHABETS:
        return

    if len(alphabet) < 2:
        raise AlphabetTooShortError("alphabet must have 2 or more characters")

    counts = Counter(alphabet)
    for symbol in alphabet:
        if counts[symbol] > 1:
            raise DuplicateSymbolError(symbol)

    logger.debug(f"Custom alphabet validated: base {len(alphabet)}")


def lookup_alphabet(value: str) -> str:
    """Resolve a standard alphabet name, or return a literal alphabet as-is.

    Names are matched case-insensitively against ALPHABETS ("base62", ...).
    """
    return ALPHABETS.get(value.strip().lower(), value)
