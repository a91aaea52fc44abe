"""
JSON Schema Contract Validators

Validation of the serialized records against formal JSON Schema contracts,
using the jsonschema library (Draft 2020-12).

Schemas (packaged in contracts/schema/):
- client.json
- simulation.json
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterator

import jsonschema
from jsonschema import Draft202012Validator, ValidationError


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class SchemaLoader:
    """
    JSON Schema file loader.

    Looks for schemas in the `schema/` directory next to this module.
    """

    def __init__(self, schema_dir: Path | None = None):
        self._schema_dir = schema_dir or Path(__file__).parent / "schema"
        if not self._schema_dir.exists():
            raise RuntimeError(f"Schema directory not found: {self._schema_dir}")

        # Loaded schemas cache
        self._schemas: Dict[str, Dict[str, Any]] = {}

    def load_schema(self, schema_name: str) -> Dict[str, Any]:
        """
        Load a JSON Schema file.

        Args:
            schema_name: Schema name without extension (e.g. 'client')

        Returns:
            Loaded schema as dict

        Raises:
            FileNotFoundError: If the schema file does not exist
            ValueError: If the file is not a valid JSON Schema
        """
        if schema_name in self._schemas:
            return self._schemas[schema_name]

        schema_path = self._schema_dir / f"{schema_name}.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")

        with open(schema_path, "r", encoding="utf-8") as f:
            schema = json.load(f)

        # Meta-validation of the schema itself
        try:
            Draft202012Validator.check_schema(schema)
        except jsonschema.SchemaError as e:
            raise ValueError(f"Invalid JSON Schema in {schema_name}.json: {e}")

        self._schemas[schema_name] = schema
        return schema


# Global loader instance
_SCHEMA_LOADER = SchemaLoader()


# =============================================================================
# CONTRACT VALIDATORS
# =============================================================================


class ContractValidator:
    """
    Validator bound to one contract schema.

    String formats declared by the schema (e.g. "email") are asserted through
    the Draft 2020-12 format checker, not treated as annotations.
    """

    def __init__(self, schema_name: str):
        self.schema_name = schema_name
        self.schema = _SCHEMA_LOADER.load_schema(schema_name)
        self.validator = Draft202012Validator(
            self.schema, format_checker=Draft202012Validator.FORMAT_CHECKER
        )

    def validate(self, data: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: On the first (best-matching) violation
        """
        self.validator.validate(data)

    def is_valid(self, data: Dict[str, Any]) -> bool:
        return self.validator.is_valid(data)

    def iter_errors(self, data: Dict[str, Any]) -> Iterator[ValidationError]:
        """Every violation in `data`, lazily; empty when the data is valid."""
        return self.validator.iter_errors(data)


class ClientValidator(ContractValidator):
    def __init__(self):
        super().__init__("client")


class SimulationValidator(ContractValidator):
    def __init__(self):
        super().__init__("simulation")


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def validate_client(data: Dict[str, Any]) -> None:
    """Validate a serialized client (raises jsonschema.ValidationError)."""
    ClientValidator().validate(data)


def validate_simulation(data: Dict[str, Any]) -> None:
    """Validate a serialized simulation (raises jsonschema.ValidationError)."""
    SimulationValidator().validate(data)
