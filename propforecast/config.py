from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    # App
    debug: bool = False
    log_level: str = "INFO"

    # Forecast defaults (deployment-wide, not user input)
    default_appreciation_rate: Decimal = Decimal("5")  # % per year
    transfer_duty_tax_year: str = "2023/24"

    # Listing portals accepted by the URL resolver
    listing_domains: list[str] = ["property24.com", "privateproperty.co.za"]


settings = Settings()
