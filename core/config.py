"""Application configuration with environment-specific profiles.

Supports dev, staging, and production environments via APP_ENV.
All values can be overridden by environment variables.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Settings:
    """Immutable application settings resolved from environment."""

    app_env: str = "dev"
    log_level: str = "INFO"

    # Plan horizon (weeks)
    min_plan_weeks: int = 8
    max_plan_weeks: int = 52

    request_id_header_name: str = "X-Request-ID"
    cors_origins: list[str] = field(default_factory=lambda: ["*"])

    @property
    def is_production(self) -> bool:
        return self.app_env == "production"

    @property
    def is_dev(self) -> bool:
        return self.app_env == "dev"


# -- Environment profiles --

_ENV_PROFILES: dict[str, dict] = {
    "dev": {
        "log_level": "DEBUG",
    },
    "staging": {
        "log_level": "INFO",
    },
    "production": {
        "log_level": "WARNING",
        "max_plan_weeks": 40,
    },
}


def _split_origins(raw: str) -> list[str]:
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def get_settings() -> Settings:
    """Build Settings by merging environment profile with env-var overrides."""
    app_env = os.getenv("APP_ENV", "dev")
    profile = _ENV_PROFILES.get(app_env, _ENV_PROFILES["dev"])

    return Settings(
        app_env=app_env,
        log_level=os.getenv("LOG_LEVEL", profile.get("log_level", "INFO")),
        min_plan_weeks=int(os.getenv("MIN_PLAN_WEEKS", str(profile.get("min_plan_weeks", 8)))),
        max_plan_weeks=int(os.getenv("MAX_PLAN_WEEKS", str(profile.get("max_plan_weeks", 52)))),
        request_id_header_name=os.getenv("REQUEST_ID_HEADER", "X-Request-ID"),
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS", "*")),
    )
