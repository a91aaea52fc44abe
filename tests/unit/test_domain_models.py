"""
Tests for domain models: Client, LoanTerms, Simulation

Covers:
1. Creation and validation of the Pydantic models
2. DNI normalization and checksum enforcement
3. Immutability (frozen=True) and client updates
4. JSON serialization/deserialization
5. Loan terms → schedule → simulation record
"""

import json

import pytest
from pydantic import ValidationError

from src.core.domain import UPDATABLE_FIELDS, Client, LoanTerms, Simulation
from src.core.errors import InvalidInput
from src.core.math.amortization import AmortizationConfig, PaymentSchedule


# =============================================================================
# CLIENT TESTS
# =============================================================================


class TestClient:
    """Tests for the Client model"""

    @pytest.fixture
    def valid_client(self) -> Client:
        """Valid client"""
        return Client(
            name="John Doe",
            dni="36300558a",
            email="johndoe@email.com",
            capital=1000,
        )

    def test_client_creation(self, valid_client: Client) -> None:
        assert valid_client.name == "John Doe"
        assert valid_client.email == "johndoe@email.com"
        assert valid_client.capital == 1000.0

    def test_dni_stored_uppercase(self, valid_client: Client) -> None:
        assert valid_client.dni == "36300558A"

    @pytest.mark.parametrize("dni", ["36300558B", "3630055", "ABCDEFGHZ", "36300558AA"])
    def test_invalid_dni_rejected(self, dni: str) -> None:
        with pytest.raises(ValidationError):
            Client(name="John Doe", dni=dni, email="johndoe@email.com", capital=1000)

    @pytest.mark.parametrize(
        "email",
        [
            "johndoe",
            "john@",
            "john doe@email.com",
            "@email.com",
            "john..doe@email.com",
            "john@-email.com",
        ],
    )
    def test_invalid_email_rejected(self, email: str) -> None:
        with pytest.raises(ValidationError):
            Client(name="John Doe", dni="36300558A", email=email, capital=1000)

    def test_email_domain_normalized(self) -> None:
        """Domain part is stored lowercase"""
        client = Client(name="John Doe", dni="36300558A", email="johndoe@Email.COM", capital=1000)
        assert client.email == "johndoe@email.com"

    @pytest.mark.parametrize("capital", [0, -1, float("nan"), float("inf")])
    def test_invalid_capital_rejected(self, capital: float) -> None:
        with pytest.raises(ValidationError):
            Client(name="John Doe", dni="36300558A", email="johndoe@email.com", capital=capital)

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Client(name="", dni="36300558A", email="johndoe@email.com", capital=1000)

    def test_client_immutable(self, valid_client: Client) -> None:
        """Client must be immutable (frozen=True)"""
        with pytest.raises(ValidationError):
            valid_client.capital = 2000.0  # type: ignore

    def test_with_updates(self, valid_client: Client) -> None:
        """Updates produce a new client, the original is unchanged"""
        updated = valid_client.with_updates(name="Jane Doe", capital=2000)

        assert updated.name == "Jane Doe"
        assert updated.capital == 2000.0
        assert updated.dni == valid_client.dni
        assert valid_client.name == "John Doe"
        assert valid_client.capital == 1000.0

    def test_with_updates_rejects_other_fields(self, valid_client: Client) -> None:
        assert UPDATABLE_FIELDS == {"name", "email", "capital"}

        with pytest.raises(ValueError, match="Field dni is not allowed"):
            valid_client.with_updates(dni="12345678Z")

        with pytest.raises(ValueError, match="Field id is not allowed"):
            valid_client.with_updates(id=1, name="Jane Doe")

    def test_with_updates_validates_values(self, valid_client: Client) -> None:
        with pytest.raises(ValidationError):
            valid_client.with_updates(email="not-an-email")

        with pytest.raises(ValidationError):
            valid_client.with_updates(capital="abc")

    def test_client_json_serialization(self, valid_client: Client) -> None:
        json_str = valid_client.model_dump_json()
        data = json.loads(json_str)

        assert data == {
            "name": "John Doe",
            "dni": "36300558A",
            "email": "johndoe@email.com",
            "capital": 1000.0,
        }

        restored = Client.model_validate_json(json_str)
        assert restored == valid_client


# =============================================================================
# LOAN TERMS TESTS
# =============================================================================


class TestLoanTerms:
    """Tests for the LoanTerms model"""

    def test_schedule(self) -> None:
        terms = LoanTerms(principal=1000, annual_rate_percent=3.2, term_years=1)

        assert terms.periods() == 12
        assert terms.schedule() == PaymentSchedule(
            monthly_payment=84.78, total_amount=1017.36, periods=12, total_interest=17.36
        )

    def test_zero_rate_allowed(self) -> None:
        terms = LoanTerms(principal=1200, annual_rate_percent=0, term_years=1)
        assert terms.schedule().monthly_payment == 100.0

    def test_periods_follow_config(self) -> None:
        """Installment count agrees with schedule() under a non-monthly config"""
        terms = LoanTerms(principal=1000, annual_rate_percent=10, term_years=3)
        config = AmortizationConfig(periods_per_year=1)

        assert terms.periods(config) == 3
        assert terms.periods(config) == terms.schedule(config).periods

    @pytest.mark.parametrize(
        "field,value",
        [
            ("principal", 0),
            ("principal", -10),
            ("annual_rate_percent", -0.5),
            ("annual_rate_percent", float("nan")),
            ("term_years", 0),
            ("term_years", 2.5),
        ],
    )
    def test_invalid_terms_rejected(self, field: str, value: float) -> None:
        data = {"principal": 1000, "annual_rate_percent": 3.2, "term_years": 1}
        data[field] = value
        with pytest.raises(ValidationError):
            LoanTerms(**data)

    def test_overflow_surfaces_invalid_input(self) -> None:
        terms = LoanTerms(principal=1e308, annual_rate_percent=1e6, term_years=1)
        with pytest.raises(InvalidInput):
            terms.schedule()


# =============================================================================
# SIMULATION TESTS
# =============================================================================


class TestSimulation:
    """Tests for the Simulation model"""

    def test_from_schedule(self) -> None:
        terms = LoanTerms(principal=1000, annual_rate_percent=3.2, term_years=1)
        simulation = Simulation.from_schedule("36300558a", terms, terms.schedule())

        assert simulation.client_id == "36300558A"
        assert simulation.tae == 3.2
        assert simulation.term == 1
        assert simulation.monthly_payment == 84.78
        assert simulation.total_amount == 1017.36

    def test_invalid_client_id_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Simulation(
                client_id="36300558B",
                tae=3.2,
                term=1,
                monthly_payment=84.78,
                total_amount=1017.36,
            )

    def test_negative_amounts_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Simulation(
                client_id="36300558A",
                tae=3.2,
                term=1,
                monthly_payment=-84.78,
                total_amount=1017.36,
            )

    def test_simulation_immutable(self) -> None:
        simulation = Simulation(
            client_id="36300558A", tae=0, term=1, monthly_payment=100.0, total_amount=1200.0
        )
        with pytest.raises(ValidationError):
            simulation.tae = 1.0  # type: ignore

    def test_simulation_json_roundtrip(self) -> None:
        simulation = Simulation(
            client_id="36300558A", tae=3.2, term=1, monthly_payment=84.78, total_amount=1017.36
        )
        restored = Simulation.model_validate_json(simulation.model_dump_json())
        assert restored == simulation
