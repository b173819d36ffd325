"""Framework-agnostic boilerplate for serving Swagger UI.

Bundles the Swagger UI static files, a typed model of its runtime
configuration and the HTML page that boots it. Serving the files and the page
is left to the host web framework.
"""

from .exceptions import ConfigSerializationError, TrackedError
from .schemas import BasicAuth, Config, OAuthConfig, SyntaxHighlight, Url
from .services import StaticFile, StaticFileRegistry, SwaggerFile
from .swagger_ui import SwaggerUi

__all__ = [
    "SwaggerUi",
    "Config",
    "Url",
    "SyntaxHighlight",
    "BasicAuth",
    "OAuthConfig",
    "StaticFile",
    "StaticFileRegistry",
    "SwaggerFile",
    "TrackedError",
    "ConfigSerializationError",
]
