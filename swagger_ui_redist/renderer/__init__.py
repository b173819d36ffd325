from .config_json import CONFIG_PLACEHOLDER, config_payload, format_config, serialize_config
from .page import DEFAULT_CONFIG, render_page

__all__ = [
    "CONFIG_PLACEHOLDER",
    "DEFAULT_CONFIG",
    "config_payload",
    "format_config",
    "render_page",
    "serialize_config",
]
