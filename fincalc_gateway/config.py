"""Configuration management using Pydantic Settings"""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "fincalc-gateway"
    log_level: str = "INFO"

    # Calculation policy
    capitalization_bonus_percent: Decimal = Decimal("0.5")
    max_term_months: int = 360  # 30-year mortgages
    default_currency: str = "KZT"


settings = Settings()
