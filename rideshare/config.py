"""Centralised application settings loaded from environment / .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Fare policy
    fixed_fare: float = 25.0
    currency_symbol: str = "$"

    # API
    rate_limit: str = "100/minute"  # per route, per client address
    seed_demo_data: bool = False

    # Logging
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
