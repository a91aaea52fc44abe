"""
Domain models and value objects.

Contains the records handled by the loan simulation service: Client,
LoanTerms, Simulation.
"""

from src.core.domain.client import UPDATABLE_FIELDS, Client
from src.core.domain.loan import LoanTerms
from src.core.domain.simulation import Simulation

__all__ = [
    # Client model
    "Client",
    "UPDATABLE_FIELDS",
    # Loan terms
    "LoanTerms",
    # Simulation model
    "Simulation",
]
