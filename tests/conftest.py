"""Canonical test fixtures used across engine, data and API tests.

Fixture: R1.2M apartment, R200K deposit, 10.75% over 20 years, R9,000 rent.
At prime-linked rates this bond does not cash flow: the canonical case is the
negative-cash-flow path. A second fixture covers the positive path.
"""

import pytest
from dataclasses import replace
from decimal import Decimal

from fastapi.testclient import TestClient

from propforecast.api.app import app
from propforecast.models.property import DEFAULT_PROPERTY_INPUT, PropertyInput, PropertyType


@pytest.fixture
def canonical_input() -> PropertyInput:
    """Manual-entry defaults."""
    return DEFAULT_PROPERTY_INPUT


@pytest.fixture
def cash_flow_positive_input() -> PropertyInput:
    """R1M house, 90% deposit, small R100K bond, no running costs."""
    return replace(
        DEFAULT_PROPERTY_INPUT,
        property_type=PropertyType.HOUSE,
        location="Durbanville, Cape Town",
        purchase_price=Decimal("1000000"),
        deposit=Decimal("900000"),
        interest_rate=Decimal("10"),
        loan_term_years=20,
        monthly_levies=Decimal("0"),
        monthly_rates=Decimal("0"),
        expected_rent=Decimal("12000"),
        vacancy_rate=Decimal("0"),
        maintenance_pct=Decimal("0"),
    )


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)
