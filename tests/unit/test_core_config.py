"""
Unit tests for configuration management (flat Settings).

Tests cover:
- Default values
- OPENAPI_* environment variables
- Validation (path normalization, provider names)
- Comma-separated exclusion lists
- Cached singleton behavior
"""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from openapi_live.core.config import Settings, get_settings
from openapi_live.core.enums import Environment


@pytest.mark.unit
class TestSettingsDefaults:
    """Test defaults with an empty environment."""

    def test_defaults(self):
        """Every field has a usable default."""
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()

        assert settings.environment == Environment.DEVELOPMENT
        assert settings.is_development
        assert settings.enabled is True
        assert settings.path == "/openapi"
        assert settings.resolved_spec_path == "/openapi/json"
        assert settings.provider == "scalar"
        assert settings.embed_spec is False
        assert settings.exclude_path_list == []


@pytest.mark.unit
class TestSettingsFromEnvironment:
    """Test OPENAPI_* variables."""

    def test_paths_gain_leading_slash(self):
        """Paths without a slash are normalized."""
        env = {"OPENAPI_PATH": "docs", "OPENAPI_SPEC_PATH": "docs/spec.json"}
        with patch.dict(os.environ, env, clear=True):
            settings = Settings()

        assert settings.path == "/docs"
        assert settings.resolved_spec_path == "/docs/spec.json"

    def test_spec_path_follows_path(self):
        """Without OPENAPI_SPEC_PATH the spec lives under the page path."""
        with patch.dict(os.environ, {"OPENAPI_PATH": "/reference"}, clear=True):
            assert Settings().resolved_spec_path == "/reference/json"

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("Swagger-UI", "swagger-ui"), ("scalar", "scalar"), ("", None), ("none", None)],
    )
    def test_provider_normalization(self, raw, expected):
        """Provider names are lower-cased; empty or 'none' disables the page."""
        with patch.dict(os.environ, {"OPENAPI_PROVIDER": raw}, clear=True):
            assert Settings().provider == expected

    def test_unknown_provider_rejected(self):
        """Unsupported viewers fail validation."""
        with patch.dict(os.environ, {"OPENAPI_PROVIDER": "redoc"}, clear=True):
            with pytest.raises(ValidationError):
                Settings()

    def test_exclusion_lists_are_split(self):
        """Comma-separated values become stripped lists."""
        env = {
            "OPENAPI_EXCLUDE_PATHS": "/internal, /metrics,",
            "OPENAPI_EXCLUDE_TAGS": "admin",
            "OPENAPI_EXCLUDE_METHODS": "delete , patch",
        }
        with patch.dict(os.environ, env, clear=True):
            settings = Settings()

        assert settings.exclude_path_list == ["/internal", "/metrics"]
        assert settings.exclude_tag_list == ["admin"]
        assert settings.exclude_method_list == ["delete", "patch"]

    def test_environment_detection(self):
        """Environment flags follow OPENAPI_ENVIRONMENT."""
        with patch.dict(os.environ, {"OPENAPI_ENVIRONMENT": "ci"}, clear=True):
            settings = Settings()

        assert settings.is_ci
        assert not settings.is_production


@pytest.mark.unit
class TestGetSettings:
    """Test the cached accessor."""

    def test_returns_cached_instance(self):
        """get_settings() reads the environment once."""
        assert get_settings() is get_settings()

    def test_cache_clear_rereads_environment(self):
        """Tests patch the environment and clear the cache."""
        with patch.dict(os.environ, {"OPENAPI_PATH": "/a"}, clear=True):
            get_settings.cache_clear()
            assert get_settings().path == "/a"
        get_settings.cache_clear()
        assert get_settings().path != "/a"
