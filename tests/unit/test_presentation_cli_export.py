"""Unit tests for the export CLI.

Uses tests/api/sample_app.py as the application to export.
"""

import json

import pytest

from openapi_live.core.enums import ErrorCode
from openapi_live.core.result import Failure, Success
from openapi_live.presentation.cli.export import load_app, main

SAMPLE_APP = "tests.api.sample_app:app"


@pytest.mark.unit
class TestLoadApp:
    """Test load_app()."""

    def test_loads_fastapi_app(self):
        """module:attribute resolves to the application."""
        result = load_app(SAMPLE_APP)

        assert isinstance(result, Success)
        assert result.value.title == "Sample Shop"

    @pytest.mark.parametrize(
        "target",
        ["tests.api.sample_app", "tests.api.missing_module:app", "json:dumps"],
    )
    def test_bad_targets_fail(self, target):
        """Malformed paths, import errors and non-apps are failures."""
        result = load_app(target)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.APP_IMPORT_FAILED


@pytest.mark.unit
class TestMain:
    """Test main()."""

    def test_writes_document(self, tmp_path, capsys):
        """The document is written as indented JSON with the app's info."""
        out = tmp_path / "nested" / "openapi.json"

        exit_code = main([SAMPLE_APP, "--out", str(out)])

        assert exit_code == 0
        document = json.loads(out.read_text(encoding="utf-8"))
        assert document["info"] == {
            "title": "Sample Shop",
            "version": "2.1.0",
            "description": "Sample application",
        }
        assert set(document["paths"]) == {"/users", "/admin/stats"}
        assert set(document["paths"]["/users"]) == {"get", "post"}
        assert "User" in document["components"]["schemas"]
        assert f"Wrote OpenAPI document to {out}" in capsys.readouterr().out

    def test_exclusion_flags(self, tmp_path):
        """--exclude-* flags seed the exclusion policy."""
        out = tmp_path / "openapi.json"

        main(
            [
                SAMPLE_APP,
                "--out",
                str(out),
                "--exclude-tag",
                "admin",
                "--exclude-method",
                "post",
            ]
        )

        document = json.loads(out.read_text(encoding="utf-8"))
        assert list(document["paths"]) == ["/users"]
        assert list(document["paths"]["/users"]) == ["get"]

    def test_exclude_path_flag(self, tmp_path):
        """--exclude-path drops a literal path."""
        out = tmp_path / "openapi.json"

        assert main([SAMPLE_APP, "--out", str(out), "--exclude-path", "/users"]) == 0

        document = json.loads(out.read_text(encoding="utf-8"))
        assert list(document["paths"]) == ["/admin/stats"]

    def test_load_failure_exit_code(self, capsys):
        """A bad target exits with status 2 and an error message."""
        assert main(["not-a-target"]) == 2
        assert "error:" in capsys.readouterr().err
