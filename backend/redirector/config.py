"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - Defaults reproduce the original behavior exactly (302 to index.jsp)
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Redirect semantics validated by core.RedirectTarget, not here: one source of truth
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from redirector.core.redirect_target import (
    DEFAULT_LOCATION, DEFAULT_STATUS_CODE, RedirectTarget,
)


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Redirect
    redirect_location: str = DEFAULT_LOCATION
    redirect_status_code: int = DEFAULT_STATUS_CODE

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("log_format", mode="before")
    @classmethod
    def normalize_log_format(cls, v: str) -> str:
        """Accept JSON/Text in any case."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    def redirect_target(self) -> RedirectTarget:
        """Build the validated redirect target. Raises InvalidRedirectTargetError."""
        return RedirectTarget(
            location=self.redirect_location,
            status_code=self.redirect_status_code,
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
