"""
Core math modules for the loan simulation service.

Pure calculators with explicit numerical guarantees.
"""

# Numerical Safeguards
from src.core.math.numerical_safeguards import (
    CURRENCY_DECIMALS,
    EPS_CALC,
    is_valid_float,
    is_zero,
    round_half_up,
    validate_non_negative,
    validate_positive,
    validate_positive_int,
)

# Checksum (DNI control letter)
from src.core.math.checksum import (
    CHECKSUM_LETTERS,
    CHECKSUM_MODULUS,
    IDENTIFIER_LENGTH,
    IDENTIFIER_PREFIX_LENGTH,
    IdentifierCheck,
    check_identifier,
    checksum_letter,
    is_valid_identifier,
    normalize_identifier,
)

# Amortization
from src.core.math.amortization import (
    MONTHS_PER_YEAR,
    AmortizationConfig,
    PaymentSchedule,
    compute_payment_schedule,
    monthly_payment,
    periodic_rate,
    total_amount,
)

__all__ = [
    # Numerical Safeguards: Constants
    "CURRENCY_DECIMALS",
    "EPS_CALC",
    # Numerical Safeguards: Functions
    "is_valid_float",
    "is_zero",
    "round_half_up",
    "validate_non_negative",
    "validate_positive",
    "validate_positive_int",
    # Checksum: Constants
    "CHECKSUM_LETTERS",
    "CHECKSUM_MODULUS",
    "IDENTIFIER_LENGTH",
    "IDENTIFIER_PREFIX_LENGTH",
    # Checksum: Types
    "IdentifierCheck",
    # Checksum: Functions
    "check_identifier",
    "checksum_letter",
    "is_valid_identifier",
    "normalize_identifier",
    # Amortization: Constants
    "MONTHS_PER_YEAR",
    # Amortization: Types
    "AmortizationConfig",
    "PaymentSchedule",
    # Amortization: Functions
    "compute_payment_schedule",
    "monthly_payment",
    "periodic_rate",
    "total_amount",
]
