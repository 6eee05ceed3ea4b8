import warnings
from typing import Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    APP_ENV: str = "development"
    APP_VERSION: str | None = None  # e.g. "1.2.3" or git SHA, used as Sentry release tag

    # Sentry error monitoring: set SENTRY_DSN to enable; no-op when unset
    SENTRY_DSN: str | None = None
    SENTRY_ENVIRONMENT: str = "development"

    # PCAF: what to do with an attribution factor outside [0, 1]
    PCAF_ATTRIBUTION_POLICY: Literal["clamp", "reject"] = "clamp"

    # Targets: pin the "as of" year for status derivation (reporting runs, replays)
    TARGET_REFERENCE_YEAR: int | None = None

    @model_validator(mode="after")
    def _warn_missing_sentry(self) -> "Settings":
        if self.APP_ENV == "production" and not self.SENTRY_DSN:
            warnings.warn(
                "SENTRY_DSN not set in production; calculation errors will be invisible",
                stacklevel=2,
            )
        return self


settings = Settings()
