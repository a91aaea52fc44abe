"""
Simulation: Model of a stored loan simulation

Immutable Pydantic model of a simulation run for a client.
Compatible with the JSON Schema contract (contracts/schema/simulation.json).

`total_amount` is the rounded monthly payment times the number of installments,
as produced by the amortization calculator.
"""

from pydantic import BaseModel, Field, field_validator

from src.core.domain.loan import LoanTerms
from src.core.math.amortization import PaymentSchedule
from src.core.math.checksum import is_valid_identifier, normalize_identifier


class Simulation(BaseModel):
    """
    Loan simulation record.

    Immutable model (frozen=True). `client_id` is the client's DNI.
    """

    client_id: str = Field(..., description="DNI of the client the simulation belongs to")
    tae: float = Field(..., ge=0, allow_inf_nan=False, description="Nominal annual rate, percent")
    term: int = Field(..., ge=1, description="Term in whole years")
    monthly_payment: float = Field(
        ..., ge=0, allow_inf_nan=False, description="Installment, rounded to cents"
    )
    total_amount: float = Field(
        ..., ge=0, allow_inf_nan=False, description="monthly_payment × installments"
    )

    model_config = {"frozen": True}

    @field_validator("client_id")
    @classmethod
    def validate_client_id(cls, v: str) -> str:
        """Normalize to uppercase and verify the control letter."""
        dni = normalize_identifier(v)
        if not is_valid_identifier(dni):
            raise ValueError(f"Invalid DNI control letter: {dni}")
        return dni

    @classmethod
    def from_schedule(
        cls,
        client_id: str,
        terms: LoanTerms,
        schedule: PaymentSchedule,
    ) -> "Simulation":
        """
        Build the record from loan terms and their computed schedule.

        Args:
            client_id: Client DNI
            terms: Loan terms the schedule was computed for
            schedule: Output of LoanTerms.schedule()

        Returns:
            Simulation
        """
        return cls(
            client_id=client_id,
            tae=terms.annual_rate_percent,
            term=terms.term_years,
            monthly_payment=schedule.monthly_payment,
            total_amount=schedule.total_amount,
        )
