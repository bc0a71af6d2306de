"""Configuration models: the validated AppConfig and its env-var layer."""

from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import (
    AliasChoices,
    AliasPath,
    BaseModel,
    Field,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

Environment = Literal["dev", "test", "prod"]
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR"]
LogFormat = Literal["json", "console"]


class AppwriteConfig(BaseModel):
    """Appwrite counter store settings.

    The store is only used when project, database and collection are all
    set; otherwise counters are kept in process memory.
    """

    endpoint: str = Field(
        default="https://cloud.appwrite.io/v1",
        description="Appwrite REST endpoint (including /v1).",
    )
    project_id: Optional[str] = Field(default=None, description="Appwrite project ID.")
    database_id: Optional[str] = Field(default=None, description="Database ID.")
    collection_id: Optional[str] = Field(
        default=None,
        description="Collection holding the search-term counter documents.",
    )
    api_key: Optional[str] = Field(
        default=None,
        description="Server API key with documents.read/documents.write scope.",
    )

    @property
    def enabled(self) -> bool:
        return bool(self.project_id and self.database_id and self.collection_id)


class SearchConfig(BaseModel):
    """Live search behaviour."""

    debounce_ms: int = Field(
        default=800,
        description="Quiet period after the last keystroke before searching.",
    )
    trending_limit: int = Field(
        default=5,
        description="Number of trending search terms to show.",
    )

    @field_validator("debounce_ms")
    @classmethod
    def _validate_debounce(cls, v: int) -> int:
        if v < 0:
            raise ValueError("debounce_ms must be >= 0")
        return v

    @field_validator("trending_limit")
    @classmethod
    def _validate_trending_limit(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("trending_limit must be > 0")
        return v

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000.0


class AppConfig(BaseModel):
    """Validated ReelScout settings.

    Fields are flat; YAML uses sections (``tmdb.api_key`` fills
    ``tmdb_api_key``), resolved through ``AliasPath``. ``appwrite`` and
    ``search`` stay nested because they are passed around whole.
    """

    # General
    app_name: str = Field(default="reelscout", description="Application name.")
    environment: Environment = Field(
        default="dev",
        description="Runtime environment (affects defaults like log format).",
    )

    # TMDB (YAML section: tmdb.*)
    tmdb_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "tmdb_api_key",
            AliasPath("tmdb", "api_key"),
        ),
        description="TMDB API read access token (sent as bearer token).",
    )
    tmdb_base_url: str = Field(
        default="https://api.themoviedb.org/3",
        validation_alias=AliasChoices(
            "tmdb_base_url",
            AliasPath("tmdb", "base_url"),
        ),
        description="TMDB API base URL.",
    )

    # HTTP (YAML section: http.*)
    http_timeout_seconds: float = Field(
        default=30.0,
        validation_alias=AliasChoices(
            "http_timeout_seconds",
            AliasPath("http", "timeout_seconds"),
        ),
        description="HTTP timeout in seconds for outgoing requests.",
    )
    http_user_agent: str = Field(
        default="ReelScout/0.1.0",
        validation_alias=AliasChoices(
            "http_user_agent",
            AliasPath("http", "user_agent"),
        ),
        description="User-Agent for outgoing HTTP requests.",
    )

    # Logging (YAML section: logging.*)
    log_level: LogLevel = Field(
        default="INFO",
        validation_alias=AliasChoices(
            "log_level",
            AliasPath("logging", "level"),
        ),
        description="Log level.",
    )
    log_format: Optional[LogFormat] = Field(
        default=None,
        validation_alias=AliasChoices(
            "log_format",
            AliasPath("logging", "format"),
        ),
        description=(
            "Log renderer format (console/json). If unset, derived from environment."
        ),
    )

    # Counter store (YAML section: appwrite.*)
    appwrite: AppwriteConfig = Field(default_factory=AppwriteConfig)

    # Live search (YAML section: search.*)
    search: SearchConfig = Field(default_factory=SearchConfig)

    @field_validator("http_timeout_seconds")
    @classmethod
    def _validate_http_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("http_timeout_seconds must be > 0")
        return v

    @field_validator("tmdb_api_key", mode="before")
    @classmethod
    def _blank_key_is_missing(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @model_validator(mode="after")
    def _derive_defaults(self) -> "AppConfig":
        # Default log format: console in dev/test, json in prod.
        if self.log_format is None:
            self.log_format = "json" if self.environment == "prod" else "console"
        return self

    def to_sectioned_dict(self) -> dict[str, Any]:
        """
        Dump configuration in the sectioned shape used by config.yaml/docs.

        Secrets are masked.
        """
        return {
            "app_name": self.app_name,
            "environment": self.environment,
            "tmdb": {
                "api_key": "***" if self.tmdb_api_key else None,
                "base_url": self.tmdb_base_url,
            },
            "http": {
                "timeout_seconds": self.http_timeout_seconds,
                "user_agent": self.http_user_agent,
            },
            "logging": {"level": self.log_level, "format": self.log_format},
            "appwrite": {
                **self.appwrite.model_dump(exclude={"api_key"}),
                "api_key": "***" if self.appwrite.api_key else None,
            },
            "search": self.search.model_dump(),
        }


class EnvOverrides(BaseSettings):
    """``REELSCOUT_*`` environment variables, all optional.

    Only variables that are set end up in ``to_update_dict()``, so an unset
    variable never hides a YAML value. Names follow the flat field names:
    ``REELSCOUT_TMDB_API_KEY``, ``REELSCOUT_APPWRITE_PROJECT_ID``,
    ``REELSCOUT_DEBOUNCE_MS``.
    """

    model_config = SettingsConfigDict(
        env_prefix="REELSCOUT_",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: Optional[str] = None
    environment: Optional[Environment] = None

    tmdb_api_key: Optional[str] = None
    tmdb_base_url: Optional[str] = None

    http_timeout_seconds: Optional[float] = None
    http_user_agent: Optional[str] = None

    log_level: Optional[LogLevel] = None
    log_format: Optional[LogFormat] = None

    appwrite_endpoint: Optional[str] = None
    appwrite_project_id: Optional[str] = None
    appwrite_database_id: Optional[str] = None
    appwrite_collection_id: Optional[str] = None
    appwrite_api_key: Optional[str] = None

    debounce_ms: Optional[int] = None
    trending_limit: Optional[int] = None

    def to_update_dict(self) -> dict[str, Any]:
        """Values that were set, keyed by flat field name."""
        return self.model_dump(exclude_none=True)
