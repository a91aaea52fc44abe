"""
Checksum: DNI Letter Validation

Spanish national identifiers (DNI) are 8 digits followed by a control letter:

    letter = CHECKSUM_LETTERS[int(digits) % 23]

The comparison is case-insensitive on input (the letter is uppercased before
comparing). Shape problems are reported as exceptions, a well-formed
identifier with the wrong letter is simply invalid (False).

CRITICAL INVARIANTS:
1. Never reads past the end of the input (length is checked first)
2. A non-numeric prefix is never coerced to 0
3. Pure function, deterministic for all inputs
"""

from dataclasses import dataclass
from typing import Final, Optional

from src.core.errors import ErrorKind, IdentifierError, InvalidFormat, InvalidLength

# =============================================================================
# CONSTANTS
# =============================================================================

# Reference alphabet indexed by (prefix mod 23)
CHECKSUM_LETTERS: Final[str] = "TRWAGMYFPDXBNJZSQVHLCKE"

CHECKSUM_MODULUS: Final[int] = 23

IDENTIFIER_PREFIX_LENGTH: Final[int] = 8

IDENTIFIER_LENGTH: Final[int] = IDENTIFIER_PREFIX_LENGTH + 1


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class IdentifierCheck:
    """Result of check_identifier."""

    valid: bool
    error: Optional[ErrorKind]
    details: str


# =============================================================================
# SHAPE CHECKS
# =============================================================================


def _parse_prefix(prefix: str) -> int:
    # str.isdigit() also accepts superscripts and non-Latin digits
    if not (prefix.isascii() and prefix.isdigit()):
        raise InvalidFormat(
            f"Identifier prefix must be {IDENTIFIER_PREFIX_LENGTH} digits, got {prefix!r}"
        )
    return int(prefix)


def _require_shape(identifier: str) -> None:
    if not isinstance(identifier, str):
        raise InvalidFormat(
            f"Identifier must be a string, got {type(identifier).__name__}"
        )

    if len(identifier) != IDENTIFIER_LENGTH:
        raise InvalidLength(
            f"Identifier must be {IDENTIFIER_LENGTH} characters long, "
            f"got {len(identifier)}"
        )


# =============================================================================
# CHECKSUM
# =============================================================================


def checksum_letter(prefix: str) -> str:
    """
    Control letter for an 8-digit identifier prefix.

    Args:
        prefix: Exactly 8 ASCII digits (leading zeros allowed)

    Returns:
        Uppercase control letter

    Raises:
        InvalidFormat: If prefix is not a string of digits
        InvalidLength: If prefix is not 8 characters long

    Examples:
        >>> checksum_letter("36300558")
        'A'
        >>> checksum_letter("00000000")
        'T'
    """
    if not isinstance(prefix, str):
        raise InvalidFormat(f"Identifier prefix must be a string, got {type(prefix).__name__}")

    if len(prefix) != IDENTIFIER_PREFIX_LENGTH:
        raise InvalidLength(
            f"Identifier prefix must be {IDENTIFIER_PREFIX_LENGTH} characters long, "
            f"got {len(prefix)}"
        )

    return CHECKSUM_LETTERS[_parse_prefix(prefix) % CHECKSUM_MODULUS]


def is_valid_identifier(identifier: str) -> bool:
    """
    Verify the control letter of a 9-character identifier.

    Args:
        identifier: 8 digits followed by the control letter (any case)

    Returns:
        True iff the 9th character (uppercased) matches the table letter

    Raises:
        InvalidLength: If identifier is not exactly 9 characters
        InvalidFormat: If identifier is not a string or its prefix is not numeric

    Examples:
        >>> is_valid_identifier("36300558A")
        True
        >>> is_valid_identifier("36300558a")
        True
        >>> is_valid_identifier("36300558B")
        False
    """
    _require_shape(identifier)

    expected = checksum_letter(identifier[:IDENTIFIER_PREFIX_LENGTH])
    return identifier[IDENTIFIER_PREFIX_LENGTH].upper() == expected


def normalize_identifier(identifier: str) -> str:
    """
    Canonical (uppercase) form of a well-shaped identifier.

    The checksum itself is not verified here.

    Raises:
        InvalidLength, InvalidFormat: Same shape rules as is_valid_identifier
    """
    _require_shape(identifier)
    _parse_prefix(identifier[:IDENTIFIER_PREFIX_LENGTH])
    return identifier.upper()


def check_identifier(identifier: str) -> IdentifierCheck:
    """
    Non-raising rendition of is_valid_identifier.

    Shape failures come back with `error` set to the matching ErrorKind; a
    well-shaped identifier with the wrong letter has `valid=False` and
    `error=None`.

    Args:
        identifier: Candidate identifier

    Returns:
        IdentifierCheck
    """
    try:
        valid = is_valid_identifier(identifier)
    except IdentifierError as e:
        return IdentifierCheck(valid=False, error=e.kind, details=str(e))

    if valid:
        return IdentifierCheck(valid=True, error=None, details="checksum_ok")

    expected = checksum_letter(identifier[:IDENTIFIER_PREFIX_LENGTH])
    return IdentifierCheck(
        valid=False,
        error=None,
        details=(
            f"checksum_mismatch: expected {expected}, "
            f"got {identifier[IDENTIFIER_PREFIX_LENGTH].upper()}"
        ),
    )
