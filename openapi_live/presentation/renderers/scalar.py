"""Scalar API reference page."""

import html
import json
from collections.abc import Mapping
from typing import Any

SCALAR_CDN = "https://cdn.jsdelivr.net/npm/@scalar/api-reference@{version}/dist/browser/standalone.min.js"

_SCALAR_HTML = """<!doctype html>
<html>
  <head>
    <title>{title}</title>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <meta name="description" content="{description}" />
    <meta name="og:description" content="{description}" />
  </head>
  <body>
    <script id="api-reference"{url_attribute} data-configuration="{configuration}" type="application/json">{content}</script>
    <script src="{cdn}" crossorigin></script>
  </body>
</html>"""


def escape_script_json(payload: str) -> str:
    """Make a JSON string safe to place inside a <script> element."""
    return payload.replace("</", "<\\/").replace("<!--", "<\\!--")


def render_scalar(
    info: Mapping[str, Any],
    config: Mapping[str, Any],
    embedded_spec: Mapping[str, Any] | None = None,
) -> str:
    """Render the Scalar page.

    Args:
        info: Document info object (title, description).
        config: Scalar configuration; ``url`` points at the spec endpoint,
            ``cdn`` overrides the script location.
        embedded_spec: Document to inline instead of fetching
            ``url``.

    Returns:
        HTML page.
    """
    options = dict(config)
    version = options.pop("version", "latest")
    cdn = options.pop("cdn", None) or SCALAR_CDN.format(version=version)
    url = options.pop("url", None)

    url_attribute = ""
    content = ""
    if embedded_spec is not None:
        content = escape_script_json(json.dumps(embedded_spec))
    elif url:
        url_attribute = f' data-url="{html.escape(str(url))}"'

    return _SCALAR_HTML.format(
        title=html.escape(str(info.get("title", ""))),
        description=html.escape(str(info.get("description", ""))),
        url_attribute=url_attribute,
        configuration=html.escape(json.dumps(options)),
        content=content,
        cdn=html.escape(cdn),
    )
