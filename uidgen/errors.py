"""Exception types raised by uidgen.

Every error derives from UIDGenError and from the builtin exception that best
describes it, so callers can catch either. Failures from the random source are
not wrapped; they reach the caller unchanged.
"""


class UIDGenError(Exception):
    """Base class for all uidgen errors."""

    pass


class InvalidArgumentTypeError(UIDGenError, TypeError):
    """Raised when a configuration input has the wrong kind."""

    pass


class InvalidBitSizeError(UIDGenError, ValueError):
    """Raised when a bit size is not a positive multiple of 8."""

    pass


class InvalidOutputLengthError(UIDGenError, ValueError):
    """Raised when an output length is not a positive integer."""

    pass


class ConflictingLengthSpecificationError(UIDGenError, ValueError):
    """Raised when both a bit size and an output length are given."""

    pass


class AlphabetTooShortError(UIDGenError, ValueError):
    """Raised when an alphabet has fewer than 2 symbols."""

    pass


class DuplicateSymbolError(UIDGenError, ValueError):
    """Raised when an alphabet contains the same symbol more than once.

    Attributes:
        symbol: The first symbol found to be repeated
    """

    def __init__(self, symbol: str):
        self.symbol = symbol
        super().__init__(f"Invalid alphabet due to duplicated character: {symbol!r}")


class ByteCountMismatchError(UIDGenError, ValueError):
    """Raised when a byte buffer does not match the configured byte count."""

    pass
