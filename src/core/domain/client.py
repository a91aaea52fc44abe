"""
Client: Model of a stored client

Immutable Pydantic model of the client record: name, DNI, e-mail and the
requested capital (the principal used for loan simulations).
Compatible with the JSON Schema contract (contracts/schema/client.json).
"""

from typing import Any, Final

from pydantic import BaseModel, EmailStr, Field, field_validator

from src.core.math.checksum import is_valid_identifier, normalize_identifier

# =============================================================================
# CONSTANTS
# =============================================================================

# Fields a client update may touch (the DNI identifies the record)
UPDATABLE_FIELDS: Final[frozenset[str]] = frozenset({"name", "email", "capital"})


# =============================================================================
# CLIENT MODEL
# =============================================================================


class Client(BaseModel):
    """
    Client record.

    Immutable model (frozen=True). The DNI is stored uppercase and must carry
    a valid control letter.
    """

    name: str = Field(..., min_length=1, description="Client full name")
    dni: str = Field(..., description="National identifier, 8 digits + control letter")
    email: EmailStr = Field(..., description="Contact e-mail")
    capital: float = Field(
        ..., gt=0, allow_inf_nan=False, description="Requested capital (loan principal)"
    )

    model_config = {"frozen": True}

    @field_validator("dni")
    @classmethod
    def validate_dni(cls, v: str) -> str:
        """Normalize to uppercase and verify the control letter."""
        dni = normalize_identifier(v)
        if not is_valid_identifier(dni):
            raise ValueError(f"Invalid DNI control letter: {dni}")
        return dni

    def with_updates(self, **changes: Any) -> "Client":
        """
        New client with some of name/email/capital replaced.

        Args:
            **changes: New values for updatable fields

        Returns:
            New validated Client

        Raises:
            ValueError: If a field outside UPDATABLE_FIELDS is given
            pydantic.ValidationError: If a new value is invalid
        """
        not_allowed = sorted(set(changes) - UPDATABLE_FIELDS)
        if not_allowed:
            raise ValueError(f"Field {not_allowed[0]} is not allowed")

        return Client.model_validate({**self.model_dump(), **changes})
