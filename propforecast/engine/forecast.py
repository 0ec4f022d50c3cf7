"""Forecast orchestrator: composes the engine sub-modules into one Forecast.

Pure computation. No I/O beyond a debug log line. PropertyInput in, Forecast out.
"""

import logging
from decimal import Decimal

from propforecast.config import settings
from propforecast.models.property import PropertyInput
from propforecast.models.results import (
    FinancingDetails,
    Forecast,
    PropertyDetails,
    RentalDetails,
)

from propforecast.engine.validation import validate_property_input
from propforecast.engine.purchase_costs import total_purchase_costs
from propforecast.engine.debt import monthly_payment
from propforecast.engine.cashflow import (
    monthly_expenses,
    effective_rental_income,
    yields,
    cash_flow,
)
from propforecast.engine.roi import project_roi, projection_series
from propforecast.engine.breakeven import breakeven
from propforecast.engine.narrative import generate_investment_summary

logger = logging.getLogger(__name__)


def generate_forecast(
    inp: PropertyInput,
    appreciation_rate: Decimal | None = None,
    tax_year: str | None = None,
) -> Forecast:
    """Run the complete investment forecast for one property.

    appreciation_rate and tax_year default to the configured deployment values;
    they are not taken from user input.

    Raises InvalidInputError if the input cannot produce a meaningful forecast.
    """
    validate_property_input(inp)
    if appreciation_rate is None:
        appreciation_rate = settings.default_appreciation_rate
    if tax_year is None:
        tax_year = settings.transfer_duty_tax_year

    loan_amount = inp.loan_amount

    # Purchase
    costs = total_purchase_costs(inp.purchase_price, tax_year)
    total_investment = inp.purchase_price + costs.total

    # Financing
    bond_payment = monthly_payment(loan_amount, inp.interest_rate, inp.loan_term_years)

    # Operations
    expenses = monthly_expenses(
        purchase_price=inp.purchase_price,
        monthly_levies=inp.monthly_levies,
        monthly_rates=inp.monthly_rates,
        maintenance_pct=inp.maintenance_pct,
    )
    effective_rent = effective_rental_income(inp.expected_rent, inp.vacancy_rate)
    yield_metrics = yields(
        purchase_price=inp.purchase_price,
        total_investment=total_investment,
        expected_rent=inp.expected_rent,
        effective_rent=effective_rent,
        monthly_expenses=expenses.total,
    )
    flow = cash_flow(effective_rent, expenses.total, bond_payment)

    # Returns
    roi = project_roi(
        deposit=inp.deposit,
        total_investment=total_investment,
        annual_cash_flow=flow.annual,
        bond_payment=bond_payment,
        loan_term_years=inp.loan_term_years,
        appreciation_rate=appreciation_rate,
    )
    payback = breakeven(inp.deposit + costs.total, flow.monthly)
    series = projection_series(
        deposit=inp.deposit,
        total_investment=total_investment,
        purchase_costs_total=costs.total,
        annual_cash_flow=flow.annual,
        bond_payment=bond_payment,
        loan_amount=loan_amount,
        interest_rate=inp.interest_rate,
        loan_term_years=inp.loan_term_years,
        appreciation_rate=appreciation_rate,
    )

    summary = generate_investment_summary(
        cash_flow=flow, yields=yield_metrics, roi=roi, breakeven=payback
    )

    logger.debug(
        "Forecast for R%s (%s): cash flow %s/month, net yield %s%%, breakeven %s months",
        inp.purchase_price, inp.location or "no location",
        flow.monthly, yield_metrics.net_yield_on_investment, payback.months,
    )

    return Forecast(
        property_details=PropertyDetails(
            property_type=inp.property_type,
            location=inp.location,
            bedrooms=inp.bedrooms,
            bathrooms=inp.bathrooms,
            purchase_price=inp.purchase_price,
            total_investment=total_investment,
        ),
        financing=FinancingDetails(
            deposit=inp.deposit,
            loan_amount=loan_amount,
            interest_rate=inp.interest_rate,
            loan_term_years=inp.loan_term_years,
            monthly_bond_repayment=bond_payment,
        ),
        purchase_costs=costs,
        rental=RentalDetails(
            expected_rent=inp.expected_rent,
            vacancy_rate=inp.vacancy_rate,
            effective_rent=effective_rent,
        ),
        expenses=expenses,
        yields=yield_metrics,
        cash_flow=flow,
        roi=roi,
        breakeven=payback,
        projection=series,
        investment_summary=summary,
    )
