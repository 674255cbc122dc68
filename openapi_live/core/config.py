"""
Configuration management using Pydantic Settings.

Provides environment-driven defaults for the OpenAPI plugin. Every value can
be overridden per plugin instance through OpenAPIConfig; Settings only
supplies the process-wide defaults.

Architecture:
- Flat Settings structure (no nesting)
- All values loaded from OPENAPI_* environment variables
- Type validation via Pydantic

Usage:
    from openapi_live.core.config import get_settings

    settings = get_settings()
    settings.spec_path          # "/openapi/json"
    settings.exclude_path_list  # ["/internal", "/metrics"]
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from openapi_live.core.enums import Environment


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    """
    OpenAPI plugin settings (flat structure).

    Configuration precedence:
        1. Explicit OpenAPIConfig arguments
        2. OPENAPI_* environment variables
        3. Default values below
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Runtime environment (development, testing, ci, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Plugin surface
    enabled: bool = Field(
        default=True,
        description="Register the documentation page and spec endpoint",
    )
    path: str = Field(
        default="/openapi",
        description="Documentation page path",
    )
    spec_path: str | None = Field(
        default=None,
        description="Spec endpoint path (defaults to '{path}/json')",
    )
    provider: str | None = Field(
        default="scalar",
        description="Documentation viewer: 'scalar', 'swagger-ui' or empty for none",
    )
    embed_spec: bool = Field(
        default=False,
        description="Inline the current document into the HTML page at request time",
    )

    # Initial exclusion policy (comma-separated)
    exclude_paths: str = Field(
        default="",
        description="Comma-separated literal paths hidden from the document",
    )
    exclude_tags: str = Field(
        default="",
        description="Comma-separated tags hidden from the document",
    )
    exclude_methods: str = Field(
        default="",
        description="Comma-separated HTTP methods hidden from the document",
    )

    model_config = SettingsConfigDict(
        env_prefix="OPENAPI_",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("path", "spec_path")
    @classmethod
    def ensure_leading_slash(cls, v: str | None) -> str | None:
        """
        Normalize route paths to start with a slash.

        Args:
            v: Path string or None.

        Returns:
            str | None: Path with a leading slash, or None.
        """
        if v is None or v.startswith("/"):
            return v
        return f"/{v}"

    @field_validator("provider")
    @classmethod
    def normalize_provider(cls, v: str | None) -> str | None:
        """
        Treat an empty provider as "no documentation page".

        Args:
            v: Provider name.

        Returns:
            str | None: Lower-cased provider or None.

        Raises:
            ValueError: If provider is not a supported viewer.
        """
        if v is None or not v.strip() or v.strip().lower() == "none":
            return None
        v = v.strip().lower()
        if v not in {"scalar", "swagger-ui"}:
            raise ValueError("provider must be 'scalar' or 'swagger-ui'")
        return v

    @property
    def resolved_spec_path(self) -> str:
        """Spec endpoint path, derived from path when not set explicitly."""
        return self.spec_path or f"{self.path.rstrip('/')}/json"

    @property
    def exclude_path_list(self) -> list[str]:
        """Excluded paths parsed from the comma-separated env value."""
        return _split_csv(self.exclude_paths)

    @property
    def exclude_tag_list(self) -> list[str]:
        """Excluded tags parsed from the comma-separated env value."""
        return _split_csv(self.exclude_tags)

    @property
    def exclude_method_list(self) -> list[str]:
        """Excluded methods parsed from the comma-separated env value."""
        return _split_csv(self.exclude_methods)

    # Convenience properties for environment checks
    @property
    def is_development(self) -> bool:
        """True if environment is DEVELOPMENT."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """True if environment is TESTING."""
        return self.environment == Environment.TESTING

    @property
    def is_ci(self) -> bool:
        """True if environment is CI."""
        return self.environment == Environment.CI

    @property
    def is_production(self) -> bool:
        """True if environment is PRODUCTION."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache so the environment is read once per process. Tests call
    get_settings.cache_clear() after patching the environment.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
