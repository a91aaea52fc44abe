"""
Error taxonomy shared by the checksum validator and the amortization calculator.

Every failure the core can signal maps to exactly one ErrorKind, so callers can
translate failures into messages or status codes without string matching.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Kind of failure signalled by the core."""

    INVALID_FORMAT = "INVALID_FORMAT"
    INVALID_LENGTH = "INVALID_LENGTH"
    INVALID_INPUT = "INVALID_INPUT"


class CoreError(ValueError):
    """Base class for core failures. Subclasses set `kind`."""

    kind: ErrorKind


class IdentifierError(CoreError):
    """Identifier does not have the 8-digit + letter shape."""


class InvalidFormat(IdentifierError):
    """Identifier prefix is not made of 8 ASCII digits, or input is not a string."""

    kind = ErrorKind.INVALID_FORMAT


class InvalidLength(IdentifierError):
    """Identifier is not exactly 9 characters long."""

    kind = ErrorKind.INVALID_LENGTH


class InvalidInput(CoreError):
    """Loan parameters violate a precondition or the result is not finite."""

    kind = ErrorKind.INVALID_INPUT
