"""Once-off purchase costs: transfer duty, conveyancing fees, registration.

Pure functions: Decimal in, dataclass out. No I/O.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP

from propforecast.models.results import PurchaseCosts

TWO_PLACES = Decimal("0.01")


@dataclass(frozen=True)
class Bracket:
    """Marginal band: base + rate * (price - floor), for floor < price <= ceiling."""
    floor: Decimal
    ceiling: Decimal | None  # None = open-ended top band
    base: Decimal
    rate: Decimal


# SARS transfer duty tables, keyed by tax year (1 March - end February)
TRANSFER_DUTY_SCHEDULES: dict[str, tuple[Bracket, ...]] = {
    "2023/24": (
        Bracket(Decimal("0"), Decimal("1000000"), Decimal("0"), Decimal("0")),
        Bracket(Decimal("1000000"), Decimal("1375000"), Decimal("0"), Decimal("0.03")),
        Bracket(Decimal("1375000"), Decimal("1925000"), Decimal("11250"), Decimal("0.06")),
        Bracket(Decimal("1925000"), Decimal("2475000"), Decimal("44250"), Decimal("0.08")),
        Bracket(Decimal("2475000"), Decimal("11000000"), Decimal("88250"), Decimal("0.11")),
        Bracket(Decimal("11000000"), None, Decimal("1026000"), Decimal("0.13")),
    ),
    "2024/25": (
        Bracket(Decimal("0"), Decimal("1100000"), Decimal("0"), Decimal("0")),
        Bracket(Decimal("1100000"), Decimal("1512500"), Decimal("0"), Decimal("0.03")),
        Bracket(Decimal("1512500"), Decimal("2117500"), Decimal("12375"), Decimal("0.06")),
        Bracket(Decimal("2117500"), Decimal("2722500"), Decimal("48675"), Decimal("0.08")),
        Bracket(Decimal("2722500"), Decimal("12100000"), Decimal("97075"), Decimal("0.11")),
        Bracket(Decimal("12100000"), None, Decimal("1128600"), Decimal("0.13")),
    ),
}

DEFAULT_TAX_YEAR = "2023/24"

# Simplified conveyancing tariff (excl. VAT)
ATTORNEY_FEE_BRACKETS: tuple[Bracket, ...] = (
    Bracket(Decimal("0"), Decimal("100000"), Decimal("4500"), Decimal("0")),
    Bracket(Decimal("100000"), Decimal("500000"), Decimal("4500"), Decimal("0.015")),
    Bracket(Decimal("500000"), Decimal("1000000"), Decimal("10500"), Decimal("0.01")),
    Bracket(Decimal("1000000"), Decimal("5000000"), Decimal("15500"), Decimal("0.007")),
    Bracket(Decimal("5000000"), None, Decimal("43500"), Decimal("0.003")),
)

VAT_RATE = Decimal("0.15")

# Flat estimates
DEEDS_OFFICE_REGISTRATION = Decimal("1500")
ELECTRONIC_TRANSFER_FEE = Decimal("1800")


class UnknownTaxYearError(ValueError):
    pass


def _apply_brackets(price: Decimal, brackets: tuple[Bracket, ...]) -> Decimal:
    for bracket in brackets:
        if bracket.ceiling is None or price <= bracket.ceiling:
            return bracket.base + (price - bracket.floor) * bracket.rate
    raise ValueError("bracket table has no open-ended top band")


def transfer_duty(purchase_price: Decimal, tax_year: str = DEFAULT_TAX_YEAR) -> Decimal:
    """Transfer duty payable on a purchase price.

    Upper bounds are inclusive: a price exactly on a threshold is taxed by the
    lower band. Prices at or below zero fall in the tax-free band.
    """
    try:
        schedule = TRANSFER_DUTY_SCHEDULES[tax_year]
    except KeyError:
        raise UnknownTaxYearError(f"No transfer duty schedule for tax year {tax_year!r}") from None
    duty = _apply_brackets(purchase_price, schedule)
    return duty.quantize(TWO_PLACES, ROUND_HALF_UP)


def attorney_fees(purchase_price: Decimal) -> Decimal:
    """Estimated transfer attorney fees, VAT inclusive."""
    base_fee = _apply_brackets(purchase_price, ATTORNEY_FEE_BRACKETS)
    return (base_fee * (1 + VAT_RATE)).quantize(TWO_PLACES, ROUND_HALF_UP)


def total_purchase_costs(
    purchase_price: Decimal, tax_year: str = DEFAULT_TAX_YEAR
) -> PurchaseCosts:
    duty = transfer_duty(purchase_price, tax_year)
    fees = attorney_fees(purchase_price)
    return PurchaseCosts(
        transfer_duty=duty,
        attorney_fees=fees,
        deeds_office_registration=DEEDS_OFFICE_REGISTRATION,
        electronic_transfer_fee=ELECTRONIC_TRANSFER_FEE,
        total=duty + fees + DEEDS_OFFICE_REGISTRATION + ELECTRONIC_TRANSFER_FEE,
    )
