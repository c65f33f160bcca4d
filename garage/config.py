# garage/config.py
"""
Application configuration using Pydantic-Settings.
All settings can be overridden via environment variables or .env file.
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    # ── Facility limits ───────────────────────────────────────────────────
    MAX_FLOORS: int = 5
    MAX_SLOTS_PER_FLOOR: int = 200
    DEFAULT_SLOT_CLASS: str = "CAR"   # MOTORCYCLE | CAR | LARGE_CAR

    # Pre-configure the API facility at startup (0 = wait for PUT /facility)
    INITIAL_FLOORS: int = 0
    INITIAL_SLOTS_PER_FLOOR: int = 0

    # ── Fee schedule ──────────────────────────────────────────────────────
    FEE_FIRST_15_MIN: float = 1.0
    FEE_FIRST_30_MIN: float = 2.0
    FEE_FIRST_HOUR: float = 3.0
    FEE_PER_ADDITIONAL_HOUR: float = 2.0
    FEE_FULL_DAY: float = 20.0
    FEE_FULL_DAY_CAP: bool = False    # Cap exit fees at FEE_FULL_DAY when enabled
    CURRENCY_SYMBOL: str = "€"

    # ── Network ───────────────────────────────────────────────────────────
    BACKEND_IP: str = "127.0.0.1"
    BACKEND_PORT: int = 8080

    # ── Security ──────────────────────────────────────────────────────────
    API_KEY: Optional[str] = None   # Set in .env to enable auth on API endpoints

    # ── Logging ───────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True

    @property
    def BACKEND_URL(self) -> str:
        return f"http://{self.BACKEND_IP}:{self.BACKEND_PORT}/api/v1"

    class Config:
        env_file = ".env"
        extra = "ignore"


settings = Settings()
