"""
Application Settings
====================
Loads configuration from environment variables / .env file.
"""

from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from db.models import Department


class Settings(BaseSettings):
    """Central configuration sourced from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # ── Service ───────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]

    # ── Facility defaults (Indian office) ─────────────────
    DEFAULT_ELECTRICITY_KWH: float = 15000
    DEFAULT_GRID_FACTOR: float = 0.82  # kg CO2e per kWh
    DEFAULT_CLOUD_CPU_HOURS: float = 4500
    DEFAULT_CLOUD_STORAGE_GB: float = 1800
    DEFAULT_SERVER_COUNT: float = 6

    # ── Scope 3 factors ───────────────────────────────────
    CLOUD_CPU_FACTOR: float = 0.025  # kg CO2e per vCPU hour
    CLOUD_STORAGE_FACTOR: float = 0.006  # kg CO2e per GB/month
    SERVER_EMBODIED_FACTOR: float = 85  # kg CO2e amortized monthly per server

    # ── Mock roster ───────────────────────────────────────
    MOCK_ROSTER_SIZE: int = 25
    MOCK_SEED: Optional[int] = None

    # ── Employee portal ───────────────────────────────────
    CURRENT_USER_NAME: str = "Arjun Reddy"
    CURRENT_USER_DEPARTMENT: Department = Department.ENGINEERING
    HOME_COMMUTE_KM: float = 12.5


settings = Settings()
