from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class PropertyType(Enum):
    APARTMENT = "apartment"
    HOUSE = "house"
    TOWNHOUSE = "townhouse"
    DUPLEX = "duplex"


@dataclass(frozen=True)
class PropertyInput:
    # Purchase & financing
    purchase_price: Decimal
    deposit: Decimal
    interest_rate: Decimal  # Annual %, e.g. Decimal("10.75")
    loan_term_years: int

    # Monthly running costs
    monthly_levies: Decimal = Decimal("0")  # Sectional title / complex levies
    monthly_rates: Decimal = Decimal("0")  # Municipal rates & taxes

    # Income
    expected_rent: Decimal = Decimal("0")  # Monthly
    vacancy_rate: Decimal = Decimal("0")  # %
    maintenance_pct: Decimal = Decimal("1")  # Annual % of purchase price

    # Descriptive, passed through untouched
    property_type: PropertyType = PropertyType.APARTMENT
    location: str = ""
    bedrooms: int = 0
    bathrooms: Decimal = Decimal("1")

    @property
    def loan_amount(self) -> Decimal:
        return self.purchase_price - self.deposit


# Starting values for a new manual entry
DEFAULT_PROPERTY_INPUT = PropertyInput(
    property_type=PropertyType.APARTMENT,
    purchase_price=Decimal("1200000"),
    deposit=Decimal("200000"),
    interest_rate=Decimal("10.75"),
    loan_term_years=20,
    monthly_levies=Decimal("1500"),
    monthly_rates=Decimal("800"),
    expected_rent=Decimal("9000"),
    bedrooms=2,
    bathrooms=Decimal("1"),
    location="",
    maintenance_pct=Decimal("1"),
    vacancy_rate=Decimal("5"),
)
