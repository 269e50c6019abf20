"""Configuration for the Algolia search client."""

import json
from typing import Annotated

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class AlgoliaConfig(BaseSettings):
    """Configuration for the Algolia search client.

    All settings can be configured via environment variables with ALGOLIA_ prefix.

    Credentials:
        - ALGOLIA_APPLICATION_ID (or ALGOLIA_APP_ID)
        - ALGOLIA_API_KEY

    Hosts:
        - ALGOLIA_HOSTS: comma-separated host names or a JSON list,
          e.g. "app-1.algolia.io,app-2.algolia.io"
    """

    model_config = SettingsConfigDict(
        env_prefix="ALGOLIA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    application_id: str | None = Field(
        default=None,
        validation_alias=AliasChoices("application_id", "ALGOLIA_APPLICATION_ID", "ALGOLIA_APP_ID"),
    )
    api_key: str | None = Field(default=None, repr=False)
    hosts: Annotated[list[str], NoDecode] = Field(default_factory=list)
    timeout: float = Field(default=30.0, ge=1.0, le=300.0)

    log_level: str = Field(default="INFO")

    @field_validator("hosts", mode="before")
    @classmethod
    def split_hosts(cls, v):
        """Accept a comma-separated string, a JSON list string, or a list."""
        if isinstance(v, str):
            v = v.strip()
            if v.startswith("["):
                return json.loads(v)
            return [h.strip() for h in v.split(",") if h.strip()]
        return v

    @field_validator("hosts")
    @classmethod
    def strip_schemes(cls, v: list[str]) -> list[str]:
        """Hosts are bare names; drop any scheme and trailing slash."""
        return [h.split("://", 1)[-1].rstrip("/") for h in v]

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid Python logging level."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    def validate_config(self) -> None:
        """Validate that credentials and hosts are present.

        Call this after construction to get helpful error messages about
        missing configuration.

        Raises:
            ValueError: If configuration is incomplete.
        """
        missing = []
        if not self.application_id:
            missing.append("ALGOLIA_APPLICATION_ID")
        if not self.api_key:
            missing.append("ALGOLIA_API_KEY")
        if not self.hosts:
            missing.append("ALGOLIA_HOSTS")
        if missing:
            raise ValueError(
                f"Missing configuration: {', '.join(missing)}. "
                "Example: ALGOLIA_HOSTS=myapp-1.algolia.io,myapp-2.algolia.io"
            )
