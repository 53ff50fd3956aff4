"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Required fields (DATABASE_URL for postgres, SECRET_KEY)
are validated at load time.
"""

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults except those validated in
    validate_required (database_url for the postgres backend, secret_key,
    and a resolvable timezone).
    """

    # App
    app_name: str = "task-tracker"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Database: "postgres" (SQLAlchemy + Alembic) or "memory" (in-process, dev/tests)
    database_backend: str = "postgres"
    database_url: str = ""
    database_echo: bool = False
    db_pool_size: int = 20
    db_max_overflow: int = 30
    # asyncpg per-statement deadline; a timeout surfaces as StorageException.
    db_command_timeout: int = 30

    # Identity: bearer tokens issued by the identity provider (sub = owner id)
    secret_key: SecretStr = SecretStr("")
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 480  # 8 hours

    # Calendar: IANA zone used for today/week/month boundaries and the
    # "not before today" delivery-date rule.
    timezone: str = "UTC"
    default_page_size: int = 10

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_timeout_seconds: int = 60
    request_id_header: str = "X-Request-ID"
    correlation_id_header: str = "X-Correlation-ID"

    # OpenTelemetry
    telemetry_enabled: bool = True
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0
    telemetry_environment: str = "development"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @property
    def tzinfo(self) -> ZoneInfo:
        """Configured calendar timezone."""
        return ZoneInfo(self.timezone)

    @model_validator(mode="after")
    def validate_required(self) -> "Settings":
        """Validate backend, secret key, and timezone.

        - Postgres: DATABASE_URL required.
        - Memory: nothing extra (data lives only as long as the process).
        """
        if self.database_backend == "postgres":
            if not self.database_url:
                raise ValueError(
                    "DATABASE_URL is required when database_backend is 'postgres'. "
                    "Set in environment or .env file."
                )
        elif self.database_backend != "memory":
            raise ValueError(
                f"database_backend must be 'postgres' or 'memory', got: {self.database_backend!r}"
            )
        if not self.secret_key.get_secret_value():
            raise ValueError(
                "SECRET_KEY is required (shared with the identity provider). "
                "Generate with: openssl rand -hex 32."
            )
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone: {self.timezone!r}") from e
        if self.default_page_size < 1:
            raise ValueError("default_page_size must be >= 1")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.
    """
    return Settings()
