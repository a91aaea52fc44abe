"""Loan simulations: assembling simulation records for stored clients.

Combines the DNI checksum validator and the amortization calculator and maps
every core failure to a SimulationOutcome instead of raising.
"""

from .simulator import LoanSimulator, SimulationOutcome, SimulatorConfig

__all__ = [
    "LoanSimulator",
    "SimulationOutcome",
    "SimulatorConfig",
]
