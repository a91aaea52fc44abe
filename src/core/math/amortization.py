"""
Amortization: Fixed-Rate Monthly Payment

Computes the constant installment of a fully-amortizing loan:

    i = annual_rate_percent / 100 / periods_per_year
    n = term_years * periods_per_year

    payment = principal / n                          if i == 0
    payment = principal * i / (1 - (1 + i) ** -n)    otherwise

The general formula is 0/0 at i == 0, hence the special case.

The installment is rounded to cents (half away from zero). The total repaid is
the ROUNDED installment times n: it is what the borrower actually pays over n
installments, not the unrounded mathematical total.

CRITICAL INVARIANTS:
1. Invalid terms (principal <= 0, rate < 0, term < 1, NaN/Inf) → InvalidInput
2. A non-finite result (overflow) → InvalidInput, never NaN/Inf to the caller
3. Returned amounts have at most `currency_decimals` decimals
4. Pure function, deterministic
"""

from dataclasses import dataclass
from typing import Final, NamedTuple, Optional

from src.core.errors import InvalidInput
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

# =============================================================================
# CONSTANTS
# =============================================================================

MONTHS_PER_YEAR: Final[int] = 12

PERCENT: Final[float] = 100.0


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class AmortizationConfig:
    """Calculator configuration.

    Only whole-year terms are modelled; they are converted to
    `term_years * periods_per_year` installments.
    """

    periods_per_year: int = MONTHS_PER_YEAR
    currency_decimals: int = CURRENCY_DECIMALS

    def __post_init__(self) -> None:
        """
        Raises:
            InvalidInput: If periods_per_year < 1 or currency_decimals < 0,
                or either is not an int
        """
        if isinstance(self.periods_per_year, bool) or not isinstance(self.periods_per_year, int):
            raise InvalidInput(f"periods_per_year must be an int, got {self.periods_per_year!r}")
        if self.periods_per_year < 1:
            raise InvalidInput(f"periods_per_year must be positive, got {self.periods_per_year}")

        if isinstance(self.currency_decimals, bool) or not isinstance(self.currency_decimals, int):
            raise InvalidInput(f"currency_decimals must be an int, got {self.currency_decimals!r}")
        if self.currency_decimals < 0:
            raise InvalidInput(
                f"currency_decimals must be non-negative, got {self.currency_decimals}"
            )


_DEFAULT_CONFIG: Final[AmortizationConfig] = AmortizationConfig()


# =============================================================================
# TYPES
# =============================================================================


class PaymentSchedule(NamedTuple):
    """Derived payment figures for one set of loan terms."""

    monthly_payment: float
    total_amount: float
    periods: int
    total_interest: float


# =============================================================================
# HELPERS
# =============================================================================


def periodic_rate(annual_rate_percent: float, periods_per_year: int = MONTHS_PER_YEAR) -> float:
    """
    Periodic rate as a fraction: 3.2 (%) → 0.032 / 12.

    Args:
        annual_rate_percent: Nominal annual rate in percent
        periods_per_year: Installments per year

    Returns:
        Rate per period (dimensionless)
    """
    return annual_rate_percent / PERCENT / periods_per_year


def _validate_terms(principal: float, annual_rate_percent: float, term_years: int) -> int:
    validate_positive(principal, "principal", error=InvalidInput)
    validate_non_negative(annual_rate_percent, "annual_rate_percent", error=InvalidInput)
    return validate_positive_int(term_years, "term_years", error=InvalidInput)


# =============================================================================
# MONTHLY PAYMENT
# =============================================================================


def monthly_payment(
    principal: float,
    annual_rate_percent: float,
    term_years: int,
    config: Optional[AmortizationConfig] = None,
) -> float:
    """
    Fixed installment for a fully-amortizing loan, rounded to cents.

    Args:
        principal: Amount borrowed (> 0)
        annual_rate_percent: Nominal annual rate in percent (>= 0, 3.2 means 3.2%)
        term_years: Term in whole years (> 0)
        config: Calculator configuration (optional)

    Returns:
        Installment rounded half away from zero to `currency_decimals`

    Raises:
        InvalidInput: If a precondition is violated or the result is not finite

    Examples:
        >>> monthly_payment(1000, 3.2, 1)
        84.78
        >>> monthly_payment(1200, 0, 1)
        100.0
    """
    config = config or _DEFAULT_CONFIG
    years = _validate_terms(principal, annual_rate_percent, term_years)

    i = periodic_rate(annual_rate_percent, config.periods_per_year)
    n = years * config.periods_per_year

    try:
        if is_zero(i, tol=EPS_CALC):
            payment = principal / n
        else:
            payment = principal * i / (1.0 - (1.0 + i) ** -n)
    except (OverflowError, ZeroDivisionError) as e:
        raise InvalidInput(
            f"Payment calculation failed for principal={principal}, "
            f"annual_rate_percent={annual_rate_percent}, term_years={years}: {e}"
        ) from e

    if not is_valid_float(payment):
        raise InvalidInput(
            f"Payment is not a finite number ({payment}) for principal={principal}, "
            f"annual_rate_percent={annual_rate_percent}, term_years={years}"
        )

    return round_half_up(payment, config.currency_decimals)


# =============================================================================
# TOTAL AMOUNT
# =============================================================================


def total_amount(
    monthly_payment: float,
    term_years: int,
    config: Optional[AmortizationConfig] = None,
) -> float:
    """
    Total repaid over the loan: rounded installment × number of installments.

    Args:
        monthly_payment: Installment as returned by monthly_payment()
        term_years: Term in whole years (> 0)
        config: Calculator configuration (optional)

    Returns:
        Total rounded to `currency_decimals`

    Raises:
        InvalidInput: If the installment is negative/not finite or term is invalid
    """
    config = config or _DEFAULT_CONFIG
    validate_non_negative(monthly_payment, "monthly_payment", error=InvalidInput)
    years = validate_positive_int(term_years, "term_years", error=InvalidInput)

    total = monthly_payment * years * config.periods_per_year
    if not is_valid_float(total):
        raise InvalidInput(f"Total amount is not a finite number ({total})")

    return round_half_up(total, config.currency_decimals)


def compute_payment_schedule(
    principal: float,
    annual_rate_percent: float,
    term_years: int,
    config: Optional[AmortizationConfig] = None,
) -> PaymentSchedule:
    """
    Installment, total repaid and total interest for one set of terms.

    Returns:
        PaymentSchedule(monthly_payment, total_amount, periods, total_interest)

    Raises:
        InvalidInput: Same conditions as monthly_payment()
    """
    config = config or _DEFAULT_CONFIG
    payment = monthly_payment(principal, annual_rate_percent, term_years, config)
    total = total_amount(payment, term_years, config)
    years = validate_positive_int(term_years, "term_years", error=InvalidInput)
    periods = years * config.periods_per_year

    # Can be slightly negative at 0% when the installment rounds down
    interest = round_half_up(total - principal, config.currency_decimals)

    return PaymentSchedule(
        monthly_payment=payment,
        total_amount=total,
        periods=periods,
        total_interest=interest,
    )
