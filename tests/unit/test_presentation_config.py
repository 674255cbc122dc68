"""Unit tests for OpenAPIConfig."""

import os
from unittest.mock import patch

import pytest

from openapi_live.core.config import get_settings
from openapi_live.presentation.config import OpenAPIConfig


@pytest.mark.unit
class TestOpenAPIConfig:
    """Test defaults and normalization."""

    def test_defaults_come_from_settings(self):
        """Unset fields read the OPENAPI_* settings."""
        env = {"OPENAPI_PROVIDER": "swagger-ui", "OPENAPI_EMBED_SPEC": "true"}
        with patch.dict(os.environ, env, clear=True):
            get_settings.cache_clear()
            config = OpenAPIConfig()

        assert config.enabled is True
        assert config.path == "/openapi"
        assert config.spec_path == "/openapi/json"
        assert config.provider == "swagger-ui"
        assert config.embed_spec is True
        assert config.exclude is None

    def test_spec_path_defaults_under_path(self):
        """The spec endpoint follows a custom page path."""
        config = OpenAPIConfig(path="docs")

        assert config.path == "/docs"
        assert config.spec_path == "/docs/json"
        assert config.reserved_paths == ("/docs", "/docs/json")

    def test_explicit_spec_path_is_normalized(self):
        """An explicit spec path only gains a leading slash."""
        config = OpenAPIConfig(spec_path="schema.json")
        assert config.spec_path == "/schema.json"

    def test_exclusion_from_environment(self):
        """Comma-separated env lists seed the initial exclusion."""
        env = {"OPENAPI_EXCLUDE_PATHS": "/internal", "OPENAPI_EXCLUDE_TAGS": "admin,ops"}
        with patch.dict(os.environ, env, clear=True):
            get_settings.cache_clear()
            config = OpenAPIConfig()

        assert config.exclude == {"paths": ["/internal"], "tags": ["admin", "ops"]}

    def test_explicit_values_win(self):
        """Arguments override settings."""
        config = OpenAPIConfig(enabled=False, provider=None, exclude={"tags": ["x"]})

        assert config.enabled is False
        assert config.provider is None
        assert config.exclude == {"tags": ["x"]}

    def test_root_path_spec_default_has_single_slash(self):
        """Docs at the root put the spec endpoint at /json."""
        config = OpenAPIConfig(path="/")

        assert config.spec_path == "/json"
        assert config.reserved_paths == ("/", "/json")

    def test_unknown_provider_is_rejected(self):
        """Only the supported viewers (or None) are accepted."""
        with pytest.raises(ValueError, match="provider"):
            OpenAPIConfig(provider="redoc")
