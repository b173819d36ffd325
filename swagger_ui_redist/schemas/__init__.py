from .url import Url, UrlLike
from .oauth import OAuthConfig
from .config import (
    DEFAULT_DOM_ID,
    SWAGGER_BASE_LAYOUT,
    SWAGGER_STANDALONE_LAYOUT,
    BasicAuth,
    Config,
    SyntaxHighlight,
    resolve_urls,
)

__all__ = [
    "Url",
    "UrlLike",
    "OAuthConfig",
    "Config",
    "BasicAuth",
    "SyntaxHighlight",
    "resolve_urls",
    "DEFAULT_DOM_ID",
    "SWAGGER_BASE_LAYOUT",
    "SWAGGER_STANDALONE_LAYOUT",
]
