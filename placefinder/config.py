from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = ["http://localhost:3000"]


def _first_env(*names: str) -> Optional[str]:
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return None


class Settings(BaseModel):
    """Server-side configuration. Keys never leave the process."""

    search_api_key: Optional[str] = None
    details_api_key: Optional[str] = None
    language: str = "tr"
    timeout_seconds: float = Field(default=20.0, gt=0)
    photo_max_width: int = Field(default=800, ge=1, le=1600)
    cors_origins: List[str] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("CORS_ORIGINS")
        return cls(
            search_api_key=_first_env("GOOGLE_PLACE_KEY"),
            # Details and photos share a key; older deployments used the maps key names
            details_api_key=_first_env("GOOGLE_PLACE_DETAILS_KEY", "GOOGLE_MAPS_API_KEY", "GOOGLE_API_KEY"),
            language=os.getenv("PLACES_LANGUAGE", "tr"),
            timeout_seconds=float(os.getenv("PLACES_TIMEOUT_SECONDS", "20")),
            photo_max_width=int(os.getenv("PLACES_PHOTO_MAX_WIDTH", "800")),
            cors_origins=[o.strip() for o in origins.split(",") if o.strip()] if origins else list(DEFAULT_CORS_ORIGINS),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )


@lru_cache()
def get_settings() -> Settings:
    return Settings.from_env()


def log_missing_keys(settings: Settings) -> None:
    """Startup warnings; call once logging is configured."""
    if not settings.search_api_key:
        logger.error("GOOGLE_PLACE_KEY not found in environment variables")
    if not settings.details_api_key:
        logger.error("GOOGLE_PLACE_DETAILS_KEY not found in environment variables")
