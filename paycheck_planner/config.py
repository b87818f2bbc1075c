"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Service
    service_name: str = "paycheck-planner"
    log_level: str = "INFO"

    # Scheduling window
    horizon_months: int = 3
    lookback_months: int = 6
    lock_threshold_days: int = 7  # Paychecks sooner than this keep their stored payments
    early_threshold_days: int = 5

    # Paid detection
    paid_match_window_days: int = 7
    paid_match_horizon_days: int = 60


settings = Settings()
