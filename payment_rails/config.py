"""Application configuration via environment variables."""

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    log_level: str = "INFO"
    domestic_currency: str = "USD"

    # Amount thresholds for rail selection (minor units)
    medium_value_threshold_cents: int = 1_000_000  # $10,000
    high_value_threshold_cents: int = 10_000_000  # $100,000
    low_value_threshold_cents: int = 100_000  # $1,000
    rtgs_minimum_cents: int = 100_000  # $1,000

    # Static sanctions stub (ISO 3166-1 alpha-2)
    sanctioned_countries: list[str] = ["KP", "IR", "SY", "CU", "VE"]

    beneficiary_name_max_length: int = 35
    check_memo_max_length: int = 40

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "PAYMENT_RAILS_",
        "extra": "ignore",
    }


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Install the root handler used by every payment_rails logger."""
    logging.basicConfig(
        level=getattr(logging, (level or settings.log_level).upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
