"""Unit tests for the Scalar and Swagger UI pages."""

import json

import pytest

from openapi_live.presentation.renderers import render_scalar, render_swagger_ui
from openapi_live.presentation.renderers.scalar import escape_script_json

INFO = {"title": "Shop <API>", "description": "Docs"}


@pytest.mark.unit
class TestScalar:
    """Test render_scalar()."""

    def test_references_spec_by_url(self):
        """Without an embedded document the page fetches the spec URL."""
        page = render_scalar(INFO, {"url": "/openapi/json", "_integration": "fastapi"})

        assert 'data-url="/openapi/json"' in page
        assert "<title>Shop &lt;API&gt;</title>" in page
        assert "@scalar/api-reference@latest" in page
        assert 'data-configuration="{&quot;_integration&quot;: &quot;fastapi&quot;}"' in page

    def test_version_and_cdn_options(self):
        """version picks the CDN release; cdn replaces the script URL."""
        assert "@scalar/api-reference@1.25.0" in render_scalar(INFO, {"version": "1.25.0"})

        page = render_scalar(INFO, {"cdn": "https://static.example.com/scalar.js"})
        assert 'src="https://static.example.com/scalar.js"' in page

    def test_embedded_document(self):
        """The document is inlined and no URL is emitted."""
        document = {"openapi": "3.1.0", "paths": {"/users": {}}}
        page = render_scalar(INFO, {"url": "/openapi/json"}, document)

        assert "data-url" not in page
        assert json.dumps(document) in page

    def test_embedded_document_cannot_close_script(self):
        """A '</script>' inside the document is escaped."""
        document = {"info": {"description": "</script><script>alert(1)"}}
        page = render_scalar(INFO, {}, document)

        assert "</script><script>alert(1)" not in page
        assert "<\\/script>" in page

    def test_escape_script_json(self):
        """Closing tags and comment openers are neutralized."""
        assert escape_script_json('"</b><!--"') == '"<\\/b><\\!--"'


@pytest.mark.unit
class TestSwaggerUI:
    """Test render_swagger_ui()."""

    def test_bundle_options(self):
        """Options are serialized into SwaggerUIBundle."""
        page = render_swagger_ui(INFO, {"url": "/openapi/json", "deepLinking": True})

        assert "swagger-ui-dist@latest/swagger-ui-bundle.js" in page
        assert '"url": "/openapi/json"' in page
        assert '"deepLinking": true' in page
        assert '<div id="swagger-ui"></div>' in page
        assert "prefers-color-scheme: dark" in page

    def test_dark_mode_can_be_disabled(self):
        """autoDarkMode=False drops the dark stylesheet."""
        page = render_swagger_ui(INFO, {"autoDarkMode": False, "version": "5.17.14"})

        assert "prefers-color-scheme" not in page
        assert "swagger-ui-dist@5.17.14" in page
        assert "autoDarkMode" not in page

    def test_embedded_document_replaces_url(self):
        """An embedded document is passed as spec."""
        page = render_swagger_ui(INFO, {"url": "/openapi/json"}, {"openapi": "3.1.0"})

        assert '"spec": {"openapi": "3.1.0"}' in page
        assert '"url"' not in page
