from __future__ import annotations

import logging

from ..log import log_page_render
from ..schemas.config import Config
from .config_json import format_config

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = """
window.ui = SwaggerUIBundle({
  {{config}},
  presets: [
    SwaggerUIBundle.presets.apis,
    SwaggerUIStandalonePreset
  ],
  plugins: [
    SwaggerUIBundle.plugins.DownloadUrl
  ],
});"""


def render_page(
    *,
    title: str,
    css_path: str,
    index_css_path: str,
    js_path: str,
    standalone_preset_js_path: str,
    config: Config,
) -> str:
    """Build the Swagger UI HTML document.

    The stylesheet and script paths are inserted as given; the host must
    serve the bundled files there. The bundle script has to load before the
    standalone preset, which depends on its globals.

    Raises:
        ConfigSerializationError: if ``config`` cannot be converted to JSON.
    """
    config_js = format_config(config, DEFAULT_CONFIG)

    html = f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>{title}</title>
    <link rel="stylesheet" type="text/css" href="{css_path}" />
    <link rel="stylesheet" type="text/css" href="{index_css_path}" />
</head>
<body>
<div id="swagger-ui"></div>
<script src="{js_path}" charset="UTF-8"></script>
<script src="{standalone_preset_js_path}" charset="UTF-8"></script>
<script>
    window.onload = () => {{
        {config_js}
    }};
</script>
</body>
</html>
"""
    log_page_render(title, len(html), len(config_js))
    return html


__all__ = ["render_page", "DEFAULT_CONFIG"]
