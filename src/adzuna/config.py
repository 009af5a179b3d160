"""Client configuration."""

from __future__ import annotations

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from adzuna.lib.api.client import ROOT_URL
from adzuna.lib.models.models import Country


class AdzunaSettings(BaseSettings):
    """Adzuna settings, read from ``ADZUNA_*`` variables or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix="ADZUNA_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Credentials
    app_id: str = Field("", validation_alias=AliasChoices("ADZUNA_APP_ID", "API_ID"))
    app_key: str = Field("", validation_alias=AliasChoices("ADZUNA_APP_KEY", "API_KEY"))

    # API
    base_url: str = ROOT_URL
    timeout: float | None = None
    default_country: Country = Country.UNITED_STATES

    @field_validator("timeout", mode="before")
    @classmethod
    def empty_timeout_is_unset(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def has_credentials(self) -> bool:
        return bool(self.app_id and self.app_key)
