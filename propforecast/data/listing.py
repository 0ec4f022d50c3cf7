"""Listing URL intake for Property24 / PrivateProperty.

Scraping is not implemented: a valid listing URL resolves to a fixed demo
listing so the rest of the pipeline can be exercised end to end.
"""

import logging
from decimal import Decimal
from urllib.parse import urlparse

from propforecast.config import settings
from propforecast.models.property import PropertyInput, PropertyType

logger = logging.getLogger(__name__)

DEMO_LOCATIONS = {
    "property24.com": "Sandton, Johannesburg",
}
DEFAULT_DEMO_LOCATION = "Rondebosch, Cape Town"


class InvalidListingUrlError(ValueError):
    pass


def validate_listing_url(url: str) -> str:
    """Check that url points at a listing on a supported portal.

    Returns the hostname. Raises InvalidListingUrlError with a user-facing message.
    """
    parsed = urlparse((url or "").strip())
    if parsed.scheme not in ("http", "https") or not parsed.hostname:
        raise InvalidListingUrlError("Please enter a valid URL")

    host = parsed.hostname
    if not any(domain in host for domain in settings.listing_domains):
        raise InvalidListingUrlError("Please enter a URL from Property24 or PrivateProperty")

    if len(parsed.path) <= 1:
        raise InvalidListingUrlError("This doesn't appear to be a property listing URL")

    return host


def resolve_listing(url: str) -> PropertyInput:
    """Resolve a listing URL to forecast inputs (demo data)."""
    host = validate_listing_url(url)
    location = next(
        (loc for domain, loc in DEMO_LOCATIONS.items() if domain in host),
        DEFAULT_DEMO_LOCATION,
    )
    logger.info("Listing scraping not implemented, using demo listing for %s", host)

    return PropertyInput(
        property_type=PropertyType.APARTMENT,
        purchase_price=Decimal("1250000"),
        deposit=Decimal("125000"),
        interest_rate=Decimal("10.5"),
        loan_term_years=20,
        monthly_levies=Decimal("1800"),
        monthly_rates=Decimal("950"),
        expected_rent=Decimal("8500"),
        bedrooms=2,
        bathrooms=Decimal("1"),
        location=location,
        maintenance_pct=Decimal("1"),
        vacancy_rate=Decimal("5"),
    )
