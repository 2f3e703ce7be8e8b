"""Engine defaults loaded from environment variables."""

from decimal import Decimal

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Take-home engine configuration from environment variables."""

    default_jurisdiction: str = "ruk"
    default_ni_category: str = "A"
    default_days_per_year: int = 260
    reverse_max_iterations: int = 100
    reverse_tolerance: Decimal = Decimal("0.01")
    log_level: str = "INFO"

    model_config = {"env_prefix": "TAKEHOME_", "env_file": ".env", "extra": "ignore"}


settings = Settings()
