"""
custom_validation/core/config.py

Centralised configuration loaded from environment variables.
Use a .env file locally; the container environment injects these at runtime.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # ── Application ────────────────────────────────────────────────────────────
    app_name: str = "Custom Validation API"
    app_version: str = "1.0.0"
    debug: bool = False

    # ── File-type rule ─────────────────────────────────────────────────────────
    default_file_types: str = "PDF"   # comma-separated FileType names

    # ── Minimum-age rule ───────────────────────────────────────────────────────
    default_min_age_years: int = 18

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


# Single shared instance — import this everywhere.
settings = Settings()
