"""
Numerical Safeguards: Safe Math Primitives for Currency Calculations

Guards shared by the loan calculators:
- NaN/Inf detection so invalid values never reach the caller
- Epsilon tolerance for "is this rate zero" decisions
- Parameter validation with a caller-selected exception type
- Currency rounding to a fixed number of decimals

CRITICAL INVARIANTS:
1. Validation failures always raise, they are never coerced to a default
2. Rounding is half away from zero on the exact binary value of the float
3. All operations are deterministic and reproducible
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Final

# =============================================================================
# EPSILON PARAMETERS
# =============================================================================

# General-purpose epsilon for comparisons where no domain epsilon applies
EPS_CALC: Final[float] = 1e-12

# Default number of decimals for currency amounts (cents)
CURRENCY_DECIMALS: Final[int] = 2

# Integer digits of the largest finite float (~1.8e308)
FLOAT_MAX_INT_DIGITS: Final[int] = 309


# =============================================================================
# NaN/Inf CHECKS
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Check that a value is a finite real number (not NaN, not Inf).

    Args:
        value: Value to check

    Returns:
        True if the value is finite, False for NaN/Inf, ints beyond float
        range or non-numeric input
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        # int too large to convert to float
        return False


# =============================================================================
# EPSILON COMPARISONS
# =============================================================================


def is_zero(value: float, tol: float = EPS_CALC) -> bool:
    """
    Check whether a value is zero within an absolute tolerance.

    Args:
        value: Value to check
        tol: Absolute tolerance (default: EPS_CALC)

    Returns:
        True if abs(value) <= tol
    """
    return abs(value) <= tol


# =============================================================================
# ROUNDING
# =============================================================================


def round_half_up(value: float, decimals: int = CURRENCY_DECIMALS) -> float:
    """
    Round a float to a fixed number of decimals, half away from zero.

    The float is converted to Decimal exactly (no repr round-trip), so a value
    stored as 84.784999... rounds down even though it prints close to a tie.

    Args:
        value: Finite value to round
        decimals: Number of decimal places (>= 0)

    Returns:
        Rounded value as float

    Raises:
        ValueError: If value is NaN/Inf or decimals is negative

    Examples:
        >>> round_half_up(84.78485)
        84.78
        >>> round_half_up(0.125)
        0.13
        >>> round_half_up(-0.125)
        -0.13
    """
    if not is_valid_float(value):
        raise ValueError(f"value must be a valid float (not NaN/Inf), got {value}")

    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    quantum = Decimal(1).scaleb(-decimals)
    with localcontext() as ctx:
        # Enough digits for the integer part of any finite float plus decimals
        ctx.prec = FLOAT_MAX_INT_DIGITS + decimals
        return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


# =============================================================================
# VALIDATION
# =============================================================================


def validate_positive(
    value: float,
    name: str,
    error: type[ValueError] = ValueError,
) -> None:
    """
    Validate that a value is finite and strictly positive.

    Args:
        value: Value to check
        name: Parameter name (for the error message)
        error: Exception type to raise (a ValueError subclass)

    Raises:
        error: If value <= 0 or NaN/Inf
    """
    if not is_valid_float(value):
        raise error(f"{name} must be a valid number (not NaN/Inf), got {value!r}")

    if value <= 0:
        raise error(f"{name} must be positive, got {value}")


def validate_non_negative(
    value: float,
    name: str,
    error: type[ValueError] = ValueError,
) -> None:
    """
    Validate that a value is finite and non-negative.

    Args:
        value: Value to check
        name: Parameter name (for the error message)
        error: Exception type to raise (a ValueError subclass)

    Raises:
        error: If value < 0 or NaN/Inf
    """
    if not is_valid_float(value):
        raise error(f"{name} must be a valid number (not NaN/Inf), got {value!r}")

    if value < 0:
        raise error(f"{name} must be non-negative, got {value}")


def validate_positive_int(
    value: int,
    name: str,
    error: type[ValueError] = ValueError,
) -> int:
    """
    Validate a whole positive count and return it as int.

    Integral floats (2.0) are accepted; bools and fractional values are not.

    Args:
        value: Value to check
        name: Parameter name (for the error message)
        error: Exception type to raise (a ValueError subclass)

    Returns:
        value as int

    Raises:
        error: If value is not a positive whole number
    """
    if not is_valid_float(value):
        raise error(f"{name} must be a whole number, got {value!r}")

    if isinstance(value, float):
        if not value.is_integer():
            raise error(f"{name} must be a whole number, got {value}")
        value = int(value)

    if value <= 0:
        raise error(f"{name} must be positive, got {value}")

    return value
