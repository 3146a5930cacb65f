"""
Exception types raised by the LIONESS construction.

All precondition failures derive from LionessError and from ValueError, so
callers can catch either the library-specific base or the builtin.
"""


class LionessError(Exception):
    """Base class for all LIONESS errors."""
    pass


class InvalidKeyLength(LionessError, ValueError):
    """Raised when a master key is not exactly four digests long."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Master key must be {expected} bytes, got {actual}")


class MessageTooShort(LionessError, ValueError):
    """Raised when a message leaves the right segment empty."""

    def __init__(self, minimum: int, actual: int):
        self.minimum = minimum
        self.actual = actual
        super().__init__(f"Message must be at least {minimum} bytes, got {actual}")


class InvalidBlockLength(LionessError, ValueError):
    """Raised when a fixed-size block cipher receives a block of the wrong size."""

    def __init__(self, expected: int, actual: int):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Block must be exactly {expected} bytes, got {actual}")


class UnknownSuiteError(LionessError, KeyError):
    """Raised when a cipher suite name is not registered."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "Unknown cipher suite"
