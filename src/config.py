"""Centralised application settings loaded from environment / .env file."""

from typing import Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Ledger
    booking_code_prefix: str = "BK"
    ledger_max_entries: Optional[int] = None  # None = unbounded

    # Vehicles
    max_seat_capacity: int = 52  # largest supported seat layout

    # Logging
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}


settings = Settings()
