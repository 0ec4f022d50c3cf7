"""Input validation at the forecast boundary.

Leaf calculators accept anything arithmetic accepts; generate_forecast calls
validate_property_input first so bad input fails fast instead of producing
non-finite figures.
"""

from decimal import Decimal

from propforecast.models.property import PropertyInput

HUNDRED = Decimal("100")
MAX_LOAN_TERM_YEARS = 50


class InvalidInputError(ValueError):
    """Raised when a PropertyInput cannot produce a meaningful forecast."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


def _require_non_negative(inp: PropertyInput, *fields: str) -> None:
    for name in fields:
        if getattr(inp, name) < 0:
            raise InvalidInputError(name, "must not be negative")


def _require_percentage(inp: PropertyInput, *fields: str) -> None:
    for name in fields:
        value = getattr(inp, name)
        if value < 0 or value > HUNDRED:
            raise InvalidInputError(name, "must be between 0 and 100")


def validate_property_input(inp: PropertyInput) -> None:
    """Raise InvalidInputError on the first invalid field."""
    for name in (
        "purchase_price", "deposit", "interest_rate", "monthly_levies",
        "monthly_rates", "expected_rent", "vacancy_rate", "maintenance_pct",
    ):
        value = getattr(inp, name)
        if not isinstance(value, Decimal) or not value.is_finite():
            raise InvalidInputError(name, "must be a finite number")

    if inp.purchase_price <= 0:
        raise InvalidInputError("purchase_price", "must be greater than zero")
    _require_non_negative(inp, "deposit")
    if inp.deposit >= inp.purchase_price:
        raise InvalidInputError("deposit", "must be less than the purchase price")
    _require_percentage(inp, "interest_rate")
    term = inp.loan_term_years
    if not isinstance(term, int) or isinstance(term, bool):
        raise InvalidInputError("loan_term_years", "must be a whole number of years")
    if term <= 0:
        raise InvalidInputError("loan_term_years", "must be at least one year")
    if term > MAX_LOAN_TERM_YEARS:
        raise InvalidInputError(
            "loan_term_years", f"must not exceed {MAX_LOAN_TERM_YEARS} years"
        )
    _require_non_negative(inp, "monthly_levies", "monthly_rates", "expected_rent")
    _require_percentage(inp, "vacancy_rate", "maintenance_pct")
