"""
Cancellation Engine - Configuration

Settings are read from the environment once, at startup, and passed
explicitly to the services that need them.
"""
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional

from fastapi import Request

DEFAULT_LLM_MODEL = "gemini-2.0-flash"

# Values a missing key shows up as when it is templated into the environment
_MISSING_KEY_VALUES = {"", "undefined", "none", "null"}


def _parse_origins(raw: Optional[str]) -> List[str]:
    if not raw:
        return ["*"]
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


@dataclass(frozen=True)
class Settings:
    """Runtime configuration."""
    llm_api_key: Optional[str] = None
    llm_model: str = DEFAULT_LLM_MODEL
    llm_timeout_seconds: float = 30.0
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @property
    def has_llm_credentials(self) -> bool:
        if self.llm_api_key is None:
            return False
        return self.llm_api_key.strip().lower() not in _MISSING_KEY_VALUES


def load_settings() -> Settings:
    """Build Settings from environment variables."""
    return Settings(
        # API_KEY is the name the browser build used
        llm_api_key=os.getenv("LLM_API_KEY") or os.getenv("API_KEY"),
        llm_model=os.getenv("LLM_MODEL", DEFAULT_LLM_MODEL),
        llm_timeout_seconds=float(os.getenv("LLM_TIMEOUT_SECONDS", "30")),
        cors_origins=_parse_origins(os.getenv("CORS_ORIGINS")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache()
def get_settings() -> Settings:
    """Process-wide settings, loaded on first use."""
    return load_settings()


def get_app_settings(request: Request) -> Settings:
    """Dependency for FastAPI - settings stored on the app at startup."""
    settings = getattr(request.app.state, "settings", None)
    return settings or get_settings()
