from __future__ import annotations

import logging
import mimetypes
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from importlib import resources
from pathlib import PurePosixPath
from typing import List, Optional, Tuple

logger = logging.getLogger(__name__)

_RESOURCE_PACKAGE = "swagger_ui_redist"
_RESOURCE_DIR = "res"

_MIME_BY_EXTENSION = {
    ".css": "text/css",
    ".js": "text/javascript",
    ".png": "image/png",
}


class StaticFile(str, Enum):
    css = "css"
    index_css = "index_css"
    js = "js"
    standalone_preset_js = "standalone_preset_js"
    favicon16 = "favicon16"
    favicon32 = "favicon32"

    @classmethod
    def all(cls) -> Tuple["StaticFile", ...]:
        return _ALL_FILES

    @property
    def ordinal(self) -> int:
        return _ALL_FILES.index(self)

    @property
    def file_name(self) -> str:
        return _FILE_NAMES[self]

    @property
    def content_type(self) -> str:
        return _content_type_for_extension(PurePosixPath(self.file_name).suffix)

    def default_path(self) -> str:
        return f"./{self.file_name}"


_ALL_FILES: Tuple[StaticFile, ...] = tuple(StaticFile)

_FILE_NAMES = {
    StaticFile.css: "swagger-ui.css",
    StaticFile.index_css: "index.css",
    StaticFile.js: "swagger-ui-bundle.js",
    StaticFile.standalone_preset_js: "swagger-ui-standalone-preset.js",
    StaticFile.favicon16: "favicon-16x16.png",
    StaticFile.favicon32: "favicon-32x32.png",
}


@dataclass(frozen=True)
class SwaggerFile:
    bytes: bytes
    content_type: str


def _content_type_for_extension(extension: str) -> str:
    if not extension:
        return "application/octet-stream"
    normalized = extension.lower()
    if normalized in _MIME_BY_EXTENSION:
        return _MIME_BY_EXTENSION[normalized]
    guessed, _ = mimetypes.guess_type(f"file{normalized}")
    return guessed or "application/octet-stream"


@lru_cache(maxsize=1)
def _load_contents() -> Tuple[bytes, ...]:
    base = resources.files(_RESOURCE_PACKAGE) / _RESOURCE_DIR
    contents = tuple((base / static_file.file_name).read_bytes() for static_file in _ALL_FILES)
    logger.debug("Loaded %d Swagger UI static files (%d bytes)", len(contents), sum(map(len, contents)))
    return contents


class StaticFileRegistry:
    """Bundled Swagger UI files and the paths a host serves them at.

    File contents are shared by every registry. Paths belong to the instance
    and start at ``./<file name>``; they can be overridden but never removed.
    """

    def __init__(self) -> None:
        self._paths: List[str] = [static_file.default_path() for static_file in _ALL_FILES]

    def list_all(self) -> List[Tuple[StaticFile, bytes]]:
        return list(zip(_ALL_FILES, _load_contents()))

    def content_of(self, static_file: StaticFile) -> bytes:
        return _load_contents()[StaticFile(static_file).ordinal]

    def get(self, static_file: StaticFile) -> SwaggerFile:
        static_file = StaticFile(static_file)
        return SwaggerFile(bytes=self.content_of(static_file), content_type=static_file.content_type)

    def path_of(self, static_file: StaticFile) -> str:
        return self._paths[StaticFile(static_file).ordinal]

    def override_path(self, static_file: StaticFile, path: str) -> None:
        static_file = StaticFile(static_file)
        self._paths[static_file.ordinal] = path
        logger.debug("Serving %s from %s", static_file.file_name, path)

    def override_prefix(self, prefix: str) -> None:
        """Serve every file from ``<prefix>/<file name>``."""
        base = prefix.rstrip("/")
        for static_file in _ALL_FILES:
            self.override_path(static_file, f"{base}/{static_file.file_name}")

    def paths(self) -> List[Tuple[StaticFile, str]]:
        return list(zip(_ALL_FILES, self._paths))

    def find_by_path(self, path: str) -> Optional[StaticFile]:
        for static_file, candidate in zip(_ALL_FILES, self._paths):
            if candidate == path:
                return static_file
        return None

    def copy(self) -> "StaticFileRegistry":
        clone = StaticFileRegistry()
        clone._paths = list(self._paths)
        return clone

    def __repr__(self) -> str:
        paths = ", ".join(f"{static_file.value}={path!r}" for static_file, path in self.paths())
        return f"StaticFileRegistry({paths})"


__all__ = ["StaticFile", "StaticFileRegistry", "SwaggerFile"]
