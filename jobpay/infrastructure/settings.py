"""
Application settings using pydantic-settings
"""

from decimal import Decimal
from functools import lru_cache
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment (local, test, staging, prod)
    ENV: str = "local"
    LOG_LEVEL: str = "INFO"

    # Database
    DATABASE_URL: str = "sqlite:///./jobpay.db"
    DB_ECHO: bool = False

    # Maximum time a request waits for a contended row lock before failing
    LOCK_TIMEOUT_SECONDS: float = 10.0

    # Deposits are capped at this fraction of the client's unpaid job total
    DEPOSIT_CAP_RATIO: Decimal = Decimal("0.25")

    # Reporting
    BEST_CLIENTS_DEFAULT_LIMIT: int = 2

    # Observability / Metrics
    METRICS_PUBLIC: bool = True
    METRICS_TOKEN: str = ""

    # API Configuration (empty prefix keeps the historical paths, e.g. /jobs/{id}/pay)
    API_PREFIX: str = ""

    @field_validator('DEPOSIT_CAP_RATIO')
    @classmethod
    def validate_cap_ratio(cls, v: Decimal) -> Decimal:
        """Ratio must be a fraction in (0, 1]"""
        if v <= 0 or v > 1:
            raise ValueError("DEPOSIT_CAP_RATIO must be in (0, 1]")
        return v

    @field_validator('API_PREFIX')
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        """Strip trailing slash so routers can be mounted cleanly"""
        return v.rstrip("/")

    @property
    def is_sqlite(self) -> bool:
        """Check if the configured database is SQLite"""
        return self.DATABASE_URL.startswith("sqlite")

    @property
    def is_production(self) -> bool:
        """Check if running in production"""
        return self.ENV.lower() in ["production", "prod"]

    @property
    def is_test(self) -> bool:
        """Check if running in test environment"""
        return self.ENV.lower() == "test"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()
