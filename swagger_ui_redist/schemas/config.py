from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt
from pydantic.alias_generators import to_camel

from .oauth import OAuthConfig
from .url import Url, UrlLike

logger = logging.getLogger(__name__)

SWAGGER_STANDALONE_LAYOUT = "StandaloneLayout"
SWAGGER_BASE_LAYOUT = "BaseLayout"
DEFAULT_DOM_ID = "#swagger-ui"


class BasicAuth(BaseModel):
    model_config = ConfigDict(extra="forbid")

    username: str
    password: str


class SyntaxHighlight(BaseModel):
    """Syntax highlighting of request and response payloads.

    Highlighting is activated by default; ``theme`` is one of the highlight.js
    themes bundled with the viewer (``agate``, ``arta``, ``monokai``, ...).
    """

    model_config = ConfigDict(extra="forbid")

    activated: bool = True
    theme: Optional[str] = None

    @classmethod
    def from_value(cls, value: Union[bool, "SyntaxHighlight"]) -> "SyntaxHighlight":
        if isinstance(value, SyntaxHighlight):
            return value
        if isinstance(value, bool):
            return cls(activated=value)
        raise TypeError(f"expected bool or SyntaxHighlight, got {type(value).__name__}")

    def with_activated(self, activated: bool) -> "SyntaxHighlight":
        return self.model_copy(update={"activated": activated})

    def with_theme(self, theme: str) -> "SyntaxHighlight":
        return self.model_copy(update={"theme": theme})


class Config(BaseModel):
    """Swagger UI runtime configuration.

    Fields are declared in the order they are emitted. Every ``set_*`` method
    mutates this instance and returns it, so calls can be chained::

        config = Config().set_urls(["/api-docs/openapi.json"]).set_filter(True)

    Optional fields left at ``None`` are omitted from the rendered page and
    the viewer falls back to its own defaults.
    """

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    config_url: Optional[str] = None
    dom_id: str = Field(default=DEFAULT_DOM_ID, serialization_alias="dom_id")
    url: Optional[str] = None
    urls_primary_name: Optional[str] = Field(default=None, serialization_alias="urls.primaryName")
    urls: List[Url] = Field(default_factory=list)
    query_config_enabled: Optional[bool] = None
    deep_linking: Optional[bool] = True
    display_operation_id: Optional[bool] = None
    default_models_expand_depth: Optional[int] = None
    default_model_expand_depth: Optional[int] = None
    default_model_rendering: Optional[str] = None
    display_request_duration: Optional[bool] = None
    doc_expansion: Optional[str] = None
    filter: Optional[bool] = None
    max_displayed_tags: Optional[NonNegativeInt] = None
    show_extensions: Optional[bool] = None
    show_common_extensions: Optional[bool] = None
    try_it_out_enabled: Optional[bool] = None
    request_snippets_enabled: Optional[bool] = None
    oauth2_redirect_url: Optional[str] = None
    show_mutated_request: Optional[bool] = None
    supported_submit_methods: Optional[List[str]] = None
    validator_url: Optional[str] = None
    with_credentials: Optional[bool] = None
    persist_authorization: Optional[bool] = None
    # Never emitted; kept for the OAuth flow configurator.
    oauth: Optional[OAuthConfig] = Field(default=None, exclude=True)
    syntax_highlight: Optional[SyntaxHighlight] = None
    layout: str = SWAGGER_STANDALONE_LAYOUT
    basic_auth: Optional[BasicAuth] = None

    def set_urls(self, urls: Iterable[UrlLike]) -> "Config":
        """Set the API doc url(s) shown by the viewer.

        A single unnamed url is rendered as ``url``; a named url or several
        urls are rendered as the ``urls`` dropdown, where unnamed entries are
        labelled with their own url. The first url flagged ``primary`` is
        preselected. An empty iterable leaves the config untouched.
        """
        resolve_urls(self, urls)
        return self

    def set_oauth(self, oauth_config: OAuthConfig) -> "Config":
        self.oauth = oauth_config
        return self

    def set_config_url(self, config_url: str) -> "Config":
        self.config_url = config_url
        return self

    def set_dom_id(self, dom_id: str) -> "Config":
        self.dom_id = dom_id
        return self

    def set_query_config_enabled(self, query_config_enabled: bool) -> "Config":
        self.query_config_enabled = query_config_enabled
        return self

    def set_deep_linking(self, deep_linking: bool) -> "Config":
        self.deep_linking = deep_linking
        return self

    def set_display_operation_id(self, display_operation_id: bool) -> "Config":
        self.display_operation_id = display_operation_id
        return self

    def use_base_layout(self) -> "Config":
        self.layout = SWAGGER_BASE_LAYOUT
        return self

    def use_standalone_layout(self) -> "Config":
        self.layout = SWAGGER_STANDALONE_LAYOUT
        return self

    def set_default_models_expand_depth(self, depth: int) -> "Config":
        """Models section expansion depth, ``-1`` hides the section."""
        self.default_models_expand_depth = depth
        return self

    def set_default_model_expand_depth(self, depth: int) -> "Config":
        self.default_model_expand_depth = depth
        return self

    def set_default_model_rendering(self, default_model_rendering: str) -> "Config":
        self.default_model_rendering = default_model_rendering
        return self

    def set_display_request_duration(self, display_request_duration: bool) -> "Config":
        self.display_request_duration = display_request_duration
        return self

    def set_doc_expansion(self, doc_expansion: str) -> "Config":
        """One of ``"list"``, ``"full"`` or ``"none"``; passed through as is."""
        self.doc_expansion = doc_expansion
        return self

    def set_filter(self, filter: bool) -> "Config":
        self.filter = filter
        return self

    def set_max_displayed_tags(self, max_displayed_tags: int) -> "Config":
        self.max_displayed_tags = max_displayed_tags
        return self

    def set_show_extensions(self, show_extensions: bool) -> "Config":
        self.show_extensions = show_extensions
        return self

    def set_show_common_extensions(self, show_common_extensions: bool) -> "Config":
        self.show_common_extensions = show_common_extensions
        return self

    def set_try_it_out_enabled(self, try_it_out_enabled: bool) -> "Config":
        self.try_it_out_enabled = try_it_out_enabled
        return self

    def set_request_snippets_enabled(self, request_snippets_enabled: bool) -> "Config":
        self.request_snippets_enabled = request_snippets_enabled
        return self

    def set_oauth2_redirect_url(self, oauth2_redirect_url: str) -> "Config":
        self.oauth2_redirect_url = oauth2_redirect_url
        return self

    def set_show_mutated_request(self, show_mutated_request: bool) -> "Config":
        self.show_mutated_request = show_mutated_request
        return self

    def set_supported_submit_methods(self, methods: Iterable[str]) -> "Config":
        """HTTP methods with "Try it out" enabled, e.g. ``["get", "post"]``."""
        if isinstance(methods, str):
            raise TypeError("expected an iterable of method names, got str")
        self.supported_submit_methods = [str(method) for method in methods]
        return self

    def set_validator_url(self, validator_url: str) -> "Config":
        """Badge validator url, ``"none"`` disables validation."""
        self.validator_url = validator_url
        return self

    def set_with_credentials(self, with_credentials: bool) -> "Config":
        self.with_credentials = with_credentials
        return self

    def set_persist_authorization(self, persist_authorization: bool) -> "Config":
        self.persist_authorization = persist_authorization
        return self

    def set_syntax_highlight(self, syntax_highlight: Union[bool, SyntaxHighlight]) -> "Config":
        self.syntax_highlight = SyntaxHighlight.from_value(syntax_highlight)
        return self

    def set_basic_auth(self, basic_auth: BasicAuth) -> "Config":
        self.basic_auth = basic_auth
        return self


def resolve_urls(config: Config, values: Iterable[UrlLike]) -> None:
    urls = [Url.from_value(value) for value in values]
    if not urls:
        return
    if len(urls) == 1:
        _apply_single_url(config, urls[0])
    else:
        _apply_multiple_urls(config, urls)


def _apply_single_url(config: Config, url: Url) -> None:
    # An unnamed primary url still yields an (empty) primary name.
    config.urls_primary_name = url.name if url.primary else None
    if url.name:
        config.url = None
        config.urls = [url]
        logger.debug("Resolved single named url %s", url.url)
    else:
        config.url = url.url
        config.urls = []
        logger.debug("Resolved single url %s", url.url)


def _apply_multiple_urls(config: Config, urls: List[Url]) -> None:
    config.urls_primary_name = next((url.name for url in urls if url.primary), None)
    for url in urls:
        if not url.name:
            url.name = url.url
    config.url = None
    config.urls = urls
    logger.debug("Resolved %d urls, primary=%s", len(urls), config.urls_primary_name)


__all__ = [
    "Config",
    "BasicAuth",
    "SyntaxHighlight",
    "resolve_urls",
    "SWAGGER_STANDALONE_LAYOUT",
    "SWAGGER_BASE_LAYOUT",
    "DEFAULT_DOM_ID",
]
