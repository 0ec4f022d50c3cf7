"""Terminal report for a property forecast.

Usage:
    propforecast --price 1200000 --deposit 200000 --rate 10.75 --rent 9000
    propforecast --url https://www.property24.com/for-sale/sandton/johannesburg/gauteng/116/123
"""

import argparse
import sys
from decimal import Decimal

from propforecast.data.listing import resolve_listing
from propforecast.engine.forecast import generate_forecast
from propforecast.models.property import DEFAULT_PROPERTY_INPUT, PropertyInput, PropertyType
from propforecast.models.results import Forecast


# ── Helpers ──────────────────────────────────────────────────────────────────

def _rand(v) -> str:
    return f"R{float(v):,.0f}"


def _pct(v) -> str:
    """Format a percentage figure (already x100)."""
    return f"{float(v):.2f}%"


def _header(title: str) -> None:
    print(f"\n{'=' * 64}")
    print(f"  {title}")
    print(f"{'=' * 64}")


# ── Report sections ──────────────────────────────────────────────────────────

def print_summary(forecast: Forecast) -> None:
    _header("Investment Summary")
    print(f"  {forecast.investment_summary}")


def print_key_metrics(forecast: Forecast) -> None:
    details = forecast.property_details
    _header("Key Metrics")
    print(f"  Property:             {details.property_type.value.capitalize()}, "
          f"{details.bedrooms} bd / {float(details.bathrooms):g} ba")
    if details.location:
        print(f"  Location:             {details.location}")
    print(f"  Monthly Cash Flow:    {_rand(forecast.cash_flow.monthly)}")
    print(f"  Net Yield:            {_pct(forecast.yields.net_yield_on_investment)}")
    print(f"  10-Year ROI:          {_pct(forecast.roi.ten_year.roi)}")
    if forecast.breakeven.is_unbounded:
        print("  Breakeven:            Not within projection period")
    else:
        print(f"  Breakeven:            {float(forecast.breakeven.years):.1f} years")


def print_purchase_costs(forecast: Forecast) -> None:
    costs = forecast.purchase_costs
    _header("Purchase Costs")
    print(f"  Transfer Duty:        {_rand(costs.transfer_duty)}")
    print(f"  Attorney Fees:        {_rand(costs.attorney_fees)}")
    print(f"  Deeds Office:         {_rand(costs.deeds_office_registration)}")
    print(f"  Electronic Transfer:  {_rand(costs.electronic_transfer_fee)}")
    print(f"  Total:                {_rand(costs.total)}")
    print(f"  Total Investment:     {_rand(forecast.property_details.total_investment)}")


def print_monthly_cash_flow(forecast: Forecast) -> None:
    _header("Monthly Cash Flow")
    print(f"  Rental Income:        {_rand(forecast.rental.effective_rent)}")
    print(f"  Bond Repayment:       {_rand(-forecast.financing.monthly_bond_repayment)}")
    print(f"  Expenses:             {_rand(-forecast.expenses.total)}")
    print(f"  Net Cash Flow:        {_rand(forecast.cash_flow.monthly)}")


def print_roi(forecast: Forecast) -> None:
    _header("ROI Projections")
    print(f"  {'':<16}{'5 Years':>16}{'10 Years':>16}")
    five, ten = forecast.roi.five_year, forecast.roi.ten_year
    rows = [
        ("Appreciation", _rand(five.appreciation), _rand(ten.appreciation)),
        ("Cash Flow", _rand(five.cash_flow), _rand(ten.cash_flow)),
        ("Equity Build", _rand(five.equity_build), _rand(ten.equity_build)),
        ("Total Return", _rand(five.total_return), _rand(ten.total_return)),
        ("ROI", _pct(five.roi), _pct(ten.roi)),
        ("Annualized", _pct(five.annualized_roi), _pct(ten.annualized_roi)),
    ]
    for label, a, b in rows:
        print(f"  {label:<16}{a:>16}{b:>16}")


def print_projection(forecast: Forecast) -> None:
    _header("Cumulative Return by Year")
    print(f"  {'Year':>4} {'Return':>14} {'Principal Paid':>14} {'Loan Balance':>14}")
    for point in forecast.projection:
        print(f"  {point.year:>4} {_rand(point.cumulative_return):>14} "
              f"{_rand(point.principal_repaid):>14} {_rand(point.loan_balance):>14}")


# ── Main ─────────────────────────────────────────────────────────────────────

def _build_parser() -> argparse.ArgumentParser:
    d = DEFAULT_PROPERTY_INPUT
    parser = argparse.ArgumentParser(
        description="Forecast a South African buy-to-let property investment"
    )
    parser.add_argument("--url", help="Property24 / PrivateProperty listing URL (demo data)")
    parser.add_argument("--type", dest="property_type", default=d.property_type.value,
                        choices=[t.value for t in PropertyType])
    parser.add_argument("--location", default=d.location)
    parser.add_argument("--price", type=Decimal, default=d.purchase_price, help="Purchase price (R)")
    parser.add_argument("--deposit", type=Decimal, default=d.deposit, help="Deposit (R)")
    parser.add_argument("--rate", type=Decimal, default=d.interest_rate, help="Interest rate (%%)")
    parser.add_argument("--term", type=int, default=d.loan_term_years, help="Loan term (years)")
    parser.add_argument("--levies", type=Decimal, default=d.monthly_levies, help="Monthly levies (R)")
    parser.add_argument("--rates", type=Decimal, default=d.monthly_rates,
                        help="Monthly rates & taxes (R)")
    parser.add_argument("--rent", type=Decimal, default=d.expected_rent, help="Monthly rent (R)")
    parser.add_argument("--vacancy", type=Decimal, default=d.vacancy_rate, help="Vacancy (%%)")
    parser.add_argument("--maintenance", type=Decimal, default=d.maintenance_pct,
                        help="Annual maintenance (%% of price)")
    parser.add_argument("--beds", type=int, default=d.bedrooms)
    parser.add_argument("--baths", type=Decimal, default=d.bathrooms)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        if args.url:
            inp = resolve_listing(args.url)
        else:
            inp = PropertyInput(
                property_type=PropertyType(args.property_type),
                location=args.location,
                purchase_price=args.price,
                deposit=args.deposit,
                interest_rate=args.rate,
                loan_term_years=args.term,
                monthly_levies=args.levies,
                monthly_rates=args.rates,
                expected_rent=args.rent,
                vacancy_rate=args.vacancy,
                maintenance_pct=args.maintenance,
                bedrooms=args.beds,
                bathrooms=args.baths,
            )
        forecast = generate_forecast(inp)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print_summary(forecast)
    print_key_metrics(forecast)
    print_purchase_costs(forecast)
    print_monthly_cash_flow(forecast)
    print_roi(forecast)
    print_projection(forecast)
    print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
