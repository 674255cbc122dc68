"""Swagger UI page."""

import html
import json
from collections.abc import Mapping
from typing import Any

from openapi_live.presentation.renderers.scalar import escape_script_json

_SWAGGER_UI_HTML = """<!doctype html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1">
    <meta name="description" content="{description}">
    <title>{title}</title>
    <link rel="stylesheet" href="https://unpkg.com/swagger-ui-dist@{version}/swagger-ui.css">
    <style>
        body {{ margin: 0; }}
        {dark_css}
    </style>
</head>
<body>
    <div id="{dom_id}"></div>
    <script src="https://unpkg.com/swagger-ui-dist@{version}/swagger-ui-bundle.js" crossorigin></script>
    <script>
        window.onload = () => {{
            window.ui = SwaggerUIBundle({options});
        }};
    </script>
</body>
</html>"""

_DARK_CSS = """@media (prefers-color-scheme: dark) {
            body { background: #1b1b1b; }
            .swagger-ui { filter: invert(88%) hue-rotate(180deg); }
            .swagger-ui .microlight { filter: invert(100%) hue-rotate(180deg); }
        }"""


def render_swagger_ui(
    info: Mapping[str, Any],
    config: Mapping[str, Any],
    embedded_spec: Mapping[str, Any] | None = None,
) -> str:
    """Render the Swagger UI page.

    Args:
        info: Document info object (title, description).
        config: SwaggerUIBundle options plus ``version`` and
            ``autoDarkMode``; ``dom_id`` defaults to ``#swagger-ui``.
        embedded_spec: Document passed as ``spec`` instead of
            fetching ``url``.

    Returns:
        HTML page.
    """
    options = dict(config)
    version = options.pop("version", "latest")
    auto_dark_mode = options.pop("autoDarkMode", True)
    options.setdefault("dom_id", "#swagger-ui")

    if embedded_spec is not None:
        options.pop("url", None)
        options["spec"] = embedded_spec
    serialized = json.dumps(options)

    return _SWAGGER_UI_HTML.format(
        title=html.escape(str(info.get("title", ""))),
        description=html.escape(str(info.get("description", ""))),
        version=html.escape(str(version)),
        dark_css=_DARK_CSS if auto_dark_mode else "",
        dom_id=html.escape(str(options["dom_id"]).lstrip("#")),
        options=escape_script_json(serialized),
    )
