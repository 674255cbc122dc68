"""Export the OpenAPI document of a FastAPI application to a JSON file.

Builds the document through the same service the spec endpoint uses, so the
exported file matches what ``GET /openapi/json`` would serve for the given
exclusions.

Usage:
    python -m openapi_live.presentation.cli.export app.main:app \\
        --out openapi.json --exclude-path /internal --exclude-tag admin
"""

import argparse
import importlib
import json
import sys
from pathlib import Path

from fastapi import FastAPI

from openapi_live.core.enums import ErrorCode
from openapi_live.core.errors import AppLoadError
from openapi_live.core.result import Failure, Result, Success
from openapi_live.infrastructure.routing.fastapi_source import FastAPIRouteSource
from openapi_live.presentation.plugin import openapi


def _eprint(*args: object) -> None:
    print(*args, file=sys.stderr)


def load_app(target: str) -> Result[FastAPI, AppLoadError]:
    """Import ``module:attribute`` and return the FastAPI application.

    Args:
        target: Import path such as ``app.main:app``.

    Returns:
        Success(app) or Failure(AppLoadError).
    """
    module_name, _, attribute = target.partition(":")
    if not module_name or not attribute:
        return Failure(
            error=AppLoadError(
                code=ErrorCode.APP_IMPORT_FAILED,
                message=f"Expected 'module:attribute', got {target!r}",
            )
        )

    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        return Failure(
            error=AppLoadError(
                code=ErrorCode.APP_IMPORT_FAILED,
                message=f"Cannot import module {module_name!r}: {e}",
                details={"module": module_name},
            )
        )

    app = getattr(module, attribute, None)
    if not isinstance(app, FastAPI):
        return Failure(
            error=AppLoadError(
                code=ErrorCode.APP_IMPORT_FAILED,
                message=f"{target!r} is not a FastAPI application",
                details={"module": module_name, "attribute": attribute},
            )
        )
    return Success(value=app)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Write the OpenAPI document of a FastAPI app to a JSON file."
    )
    p.add_argument("app", help="Application import path, 'module:attribute'.")
    p.add_argument(
        "--out",
        default="openapi.json",
        help="Output file (default: openapi.json).",
    )
    p.add_argument(
        "--exclude-path",
        action="append",
        default=[],
        metavar="PATH",
        help="Literal path to leave out (repeatable).",
    )
    p.add_argument(
        "--exclude-tag",
        action="append",
        default=[],
        metavar="TAG",
        help="Tag to leave out (repeatable).",
    )
    p.add_argument(
        "--exclude-method",
        action="append",
        default=[],
        metavar="METHOD",
        help="HTTP method to leave out (repeatable).",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the export; returns the process exit code."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)

    match load_app(args.app):
        case Failure(error=error):
            _eprint(f"error: {error.message}")
            return 2
        case Success(value=app):
            pass

    exclude = {
        key: values
        for key, values in (
            ("paths", args.exclude_path),
            ("tags", args.exclude_tag),
            ("methods", args.exclude_method),
        )
        if values
    }
    info = {"title": app.title, "version": app.version}
    if app.description:
        info["description"] = app.description
    plugin = openapi(
        enabled=False,
        documentation={"info": info},
        exclude=exclude or None,
    )

    match plugin.service.get_document(FastAPIRouteSource(app)):
        case Failure(error=error):
            _eprint(f"error: {error.message}")
            return 1
        case Success(value=document):
            pass

    out = Path(args.out)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(json.dumps(document, indent=2) + "\n", encoding="utf-8")
    print(f"Wrote OpenAPI document to {out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
