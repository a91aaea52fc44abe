"""
Contract Validation Module

Validation of serialized client and simulation records against JSON Schema.
"""

from .validators import (
    ClientValidator,
    ContractValidator,
    SchemaLoader,
    SimulationValidator,
    validate_client,
    validate_simulation,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "ClientValidator",
    "SimulationValidator",
    # Functions
    "validate_client",
    "validate_simulation",
]
