"""
LoanTerms: Loan parameters for a simulation

Typed wrapper over the inputs of the amortization calculator.
"""

from typing import Optional

from pydantic import BaseModel, Field

from src.core.math.amortization import (
    AmortizationConfig,
    PaymentSchedule,
    compute_payment_schedule,
)


class LoanTerms(BaseModel):
    """
    Fixed-rate loan terms.

    Immutable model (frozen=True). Only whole-year terms are modelled.
    """

    principal: float = Field(..., gt=0, allow_inf_nan=False, description="Amount borrowed")
    annual_rate_percent: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Nominal annual rate (TAE), percent"
    )
    term_years: int = Field(..., ge=1, description="Term in whole years")

    model_config = {"frozen": True}

    def periods(self, config: Optional[AmortizationConfig] = None) -> int:
        """Number of installments (monthly unless config says otherwise)."""
        return self.term_years * (config or AmortizationConfig()).periods_per_year

    def schedule(self, config: Optional[AmortizationConfig] = None) -> PaymentSchedule:
        """
        Payment figures for these terms.

        Raises:
            InvalidInput: If the calculation overflows
        """
        return compute_payment_schedule(
            self.principal,
            self.annual_rate_percent,
            self.term_years,
            config,
        )
