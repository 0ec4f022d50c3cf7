"""Forecast routes — the primary API entry point."""

import logging

from fastapi import APIRouter, HTTPException

from propforecast.api.schemas import (
    BreakevenResponse,
    CashFlowResponse,
    ExpensesResponse,
    FinancingResponse,
    ForecastRequest,
    ForecastResponse,
    ListingRequest,
    ProjectionPointResponse,
    PropertyDetailsResponse,
    PurchaseCostsResponse,
    RentalResponse,
    ROIProjectionResponse,
    YieldsResponse,
)
from propforecast.data.listing import resolve_listing
from propforecast.engine.forecast import generate_forecast
from propforecast.models.property import DEFAULT_PROPERTY_INPUT, PropertyInput, PropertyType
from propforecast.models.results import Forecast

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["forecast"])


def _build_input(req: ForecastRequest) -> PropertyInput:
    try:
        property_type = PropertyType(req.property_type.lower())
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Unknown property type: {req.property_type}")

    return PropertyInput(
        property_type=property_type,
        location=req.location,
        bedrooms=req.bedrooms,
        bathrooms=req.bathrooms,
        purchase_price=req.purchase_price,
        deposit=req.deposit,
        interest_rate=req.interest_rate,
        loan_term_years=req.loan_term_years,
        monthly_levies=req.monthly_levies,
        monthly_rates=req.monthly_rates,
        expected_rent=req.expected_rent,
        vacancy_rate=req.vacancy_rate,
        maintenance_pct=req.maintenance_pct,
    )


def _forecast_to_response(forecast: Forecast) -> ForecastResponse:
    """Convert engine Forecast to API response."""
    details = forecast.property_details
    payback = forecast.breakeven
    if payback.is_unbounded:
        breakeven = BreakevenResponse(is_unbounded=True)
    else:
        breakeven = BreakevenResponse(months=int(payback.months), years=payback.years)

    return ForecastResponse(
        property_details=PropertyDetailsResponse(
            property_type=details.property_type.value,
            location=details.location,
            bedrooms=details.bedrooms,
            bathrooms=details.bathrooms,
            purchase_price=details.purchase_price,
            total_investment=details.total_investment,
        ),
        financing=FinancingResponse.model_validate(forecast.financing),
        purchase_costs=PurchaseCostsResponse.model_validate(forecast.purchase_costs),
        rental=RentalResponse.model_validate(forecast.rental),
        expenses=ExpensesResponse.model_validate(forecast.expenses),
        yields=YieldsResponse.model_validate(forecast.yields),
        cash_flow=CashFlowResponse.model_validate(forecast.cash_flow),
        roi=ROIProjectionResponse.model_validate(forecast.roi),
        breakeven=breakeven,
        projection=[ProjectionPointResponse.model_validate(p) for p in forecast.projection],
        investment_summary=forecast.investment_summary,
    )


def _run(inp: PropertyInput) -> ForecastResponse:
    try:
        forecast = generate_forecast(inp)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return _forecast_to_response(forecast)


@router.get("/forecast/defaults", response_model=ForecastRequest)
async def forecast_defaults():
    """Starting values for the manual entry form."""
    d = DEFAULT_PROPERTY_INPUT
    return ForecastRequest(
        property_type=d.property_type.value,
        location=d.location,
        bedrooms=d.bedrooms,
        bathrooms=d.bathrooms,
        purchase_price=d.purchase_price,
        deposit=d.deposit,
        interest_rate=d.interest_rate,
        loan_term_years=d.loan_term_years,
        monthly_levies=d.monthly_levies,
        monthly_rates=d.monthly_rates,
        expected_rent=d.expected_rent,
        vacancy_rate=d.vacancy_rate,
        maintenance_pct=d.maintenance_pct,
    )


@router.post("/forecast", response_model=ForecastResponse)
async def forecast(req: ForecastRequest):
    """Manual entry → full forecast."""
    return _run(_build_input(req))


@router.post("/forecast/listing", response_model=ForecastResponse)
async def forecast_listing(req: ListingRequest):
    """Listing URL → full forecast (demo listing data)."""
    try:
        inp = resolve_listing(req.url)
    except ValueError as e:
        logger.info("Rejected listing URL %r: %s", req.url, e)
        raise HTTPException(status_code=400, detail=str(e))
    return _run(inp)
