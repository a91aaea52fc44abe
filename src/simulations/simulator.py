"""Loan simulator: client + loan terms → Simulation record.

Order of checks:
1. Client DNI (shape and control letter)
2. Sanity caps on rate and term (SimulatorConfig)
3. Amortization (principal = client capital)

The simulator never raises for invalid input: core exceptions are mapped to
a SimulationOutcome carrying the ErrorKind, so the calling layer decides how
to report them.
"""

from dataclasses import dataclass, field
from typing import Optional

from src.core.domain.client import Client
from src.core.domain.loan import LoanTerms
from src.core.domain.simulation import Simulation
from src.core.errors import ErrorKind, InvalidInput
from src.core.math.amortization import AmortizationConfig, compute_payment_schedule
from src.core.math.checksum import check_identifier
from src.core.math.numerical_safeguards import is_valid_float


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class SimulationOutcome:
    """Result of LoanSimulator.simulate."""

    success: bool
    simulation: Optional[Simulation]
    error: Optional[ErrorKind]
    details: str


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class SimulatorConfig:
    """Simulator configuration.

    Caps guard against obviously mistyped input (e.g. 320 instead of 3.2).
    """

    max_term_years: int = 50
    max_rate_percent: float = 100.0
    amortization: AmortizationConfig = field(default_factory=AmortizationConfig)


# =============================================================================
# SIMULATOR
# =============================================================================


class LoanSimulator:
    """Builds loan simulations for stored clients."""

    def __init__(self, config: SimulatorConfig | None = None):
        """
        Args:
            config: simulator configuration (optional, default used otherwise)
        """
        self.config = config or SimulatorConfig()

    def simulate(self, client: Client, tae: float, term: int) -> SimulationOutcome:
        """Simulate a fixed-rate loan of `client.capital`.

        Args:
            client: stored client (capital is the principal)
            tae: nominal annual rate, percent
            term: term in whole years

        Returns:
            SimulationOutcome with the Simulation on success
        """
        # 1. DNI
        check = check_identifier(client.dni)
        if check.error is not None:
            return self._failed(check.error, f"invalid_dni: {check.details}")
        if not check.valid:
            return self._failed(ErrorKind.INVALID_INPUT, f"invalid_dni: {check.details}")

        # 2. Caps
        if is_valid_float(tae) and tae > self.config.max_rate_percent:
            return self._failed(
                ErrorKind.INVALID_INPUT,
                f"rate_too_high: {tae} > {self.config.max_rate_percent}",
            )
        if is_valid_float(term) and term > self.config.max_term_years:
            return self._failed(
                ErrorKind.INVALID_INPUT,
                f"term_too_long: {term} > {self.config.max_term_years}",
            )

        # 3. Amortization
        try:
            schedule = compute_payment_schedule(
                client.capital, tae, term, self.config.amortization
            )
        except InvalidInput as e:
            return self._failed(e.kind, f"calculation_failed: {e}")

        terms = LoanTerms(
            principal=client.capital,
            annual_rate_percent=tae,
            term_years=schedule.periods // self.config.amortization.periods_per_year,
        )
        simulation = Simulation.from_schedule(client.dni, terms, schedule)

        return SimulationOutcome(
            success=True,
            simulation=simulation,
            error=None,
            details=(
                f"Simulation created: {schedule.periods} installments of "
                f"{schedule.monthly_payment:.2f}, total {schedule.total_amount:.2f}"
            ),
        )

    def _failed(self, error: ErrorKind, details: str) -> SimulationOutcome:
        return SimulationOutcome(success=False, simulation=None, error=error, details=details)
