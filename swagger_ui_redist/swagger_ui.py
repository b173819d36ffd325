from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from .config import Settings, get_settings
from .renderer.page import render_page
from .schemas.config import Config
from .services.static_files import StaticFile, StaticFileRegistry, SwaggerFile

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Swagger UI"


class SwaggerUi:
    """Entry point for serving Swagger UI from any web framework.

    The host serves :meth:`static_files` at the configured paths and the
    result of :meth:`serve` at a route of its choice::

        swagger = SwaggerUi()
        swagger.config().set_urls(["/api-docs/openapi.json"])
        html = swagger.serve()
    """

    def __init__(self) -> None:
        self._title = DEFAULT_TITLE
        self._config = Config()
        self._files = StaticFileRegistry()

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "SwaggerUi":
        settings = settings or get_settings()
        swagger = cls()
        swagger.title(settings.title)
        swagger.config().set_dom_id(settings.dom_id).set_deep_linking(settings.deep_linking)
        if settings.static_prefix:
            swagger._files.override_prefix(settings.static_prefix)
        return swagger

    def config(self) -> Config:
        return self._config

    def title(self, title: str) -> "SwaggerUi":
        self._title = title
        return self

    def get_title(self) -> str:
        return self._title

    @staticmethod
    def static_files() -> List[Tuple[StaticFile, bytes]]:
        return StaticFileRegistry().list_all()

    def override_file_path(self, static_file: StaticFile, path: str) -> "SwaggerUi":
        self._files.override_path(static_file, path)
        return self

    def file_path(self, static_file: StaticFile) -> str:
        return self._files.path_of(static_file)

    def static_file(self, static_file: StaticFile) -> SwaggerFile:
        return self._files.get(static_file)

    def file_registry(self) -> StaticFileRegistry:
        return self._files

    def serve(self) -> str:
        """Render the Swagger UI page.

        Raises:
            ConfigSerializationError: if the config cannot be serialized.
        """
        return render_page(
            title=self._title,
            css_path=self._files.path_of(StaticFile.css),
            index_css_path=self._files.path_of(StaticFile.index_css),
            js_path=self._files.path_of(StaticFile.js),
            standalone_preset_js_path=self._files.path_of(StaticFile.standalone_preset_js),
            config=self._config,
        )

    def copy(self) -> "SwaggerUi":
        clone = SwaggerUi()
        clone._title = self._title
        clone._config = self._config.model_copy(deep=True)
        clone._files = self._files.copy()
        return clone


__all__ = ["SwaggerUi", "DEFAULT_TITLE"]
