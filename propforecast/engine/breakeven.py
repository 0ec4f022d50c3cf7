"""Breakeven: months of positive cash flow needed to recover the initial outlay."""

from decimal import Decimal, ROUND_CEILING, ROUND_HALF_UP

from propforecast.models.results import UNBOUNDED, BreakevenResult

FOUR_PLACES = Decimal("0.0001")


def breakeven(initial_outflow: Decimal, monthly_cash_flow: Decimal) -> BreakevenResult:
    """Breakeven point in whole months and in years.

    Non-positive monthly cash flow never recovers the outlay: both fields are
    the UNBOUNDED sentinel.
    """
    if monthly_cash_flow <= 0:
        return BreakevenResult(months=UNBOUNDED, years=UNBOUNDED)

    months = (initial_outflow / monthly_cash_flow).to_integral_value(rounding=ROUND_CEILING)
    years = (months / 12).quantize(FOUR_PLACES, ROUND_HALF_UP)
    return BreakevenResult(months=months, years=years)
