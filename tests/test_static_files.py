from pathlib import Path

import pytest

import swagger_ui_redist
from swagger_ui_redist.services.static_files import StaticFile, StaticFileRegistry

EXPECTED_FILES = [
    (StaticFile.css, "swagger-ui.css", "./swagger-ui.css"),
    (StaticFile.index_css, "index.css", "./index.css"),
    (StaticFile.js, "swagger-ui-bundle.js", "./swagger-ui-bundle.js"),
    (StaticFile.standalone_preset_js, "swagger-ui-standalone-preset.js", "./swagger-ui-standalone-preset.js"),
    (StaticFile.favicon16, "favicon-16x16.png", "./favicon-16x16.png"),
    (StaticFile.favicon32, "favicon-32x32.png", "./favicon-32x32.png"),
]


def test_all_static_files_in_fixed_order() -> None:
    assert StaticFile.all() == tuple(static_file for static_file, _, _ in EXPECTED_FILES)


@pytest.mark.parametrize(("static_file", "file_name", "default_path"), EXPECTED_FILES)
def test_file_names_and_default_paths(static_file: StaticFile, file_name: str, default_path: str) -> None:
    assert static_file.file_name == file_name
    assert static_file.default_path() == default_path
    assert StaticFileRegistry().path_of(static_file) == default_path


def test_content_types() -> None:
    assert StaticFile.css.content_type == "text/css"
    assert StaticFile.js.content_type == "text/javascript"
    assert StaticFile.favicon16.content_type == "image/png"


def test_list_all_returns_six_non_empty_entries() -> None:
    entries = StaticFileRegistry().list_all()

    assert [static_file for static_file, _ in entries] == list(StaticFile.all())
    assert all(isinstance(content, bytes) and content for _, content in entries)
    assert entries[4][1].startswith(b"\x89PNG")


def test_contents_are_shared_between_registries() -> None:
    assert StaticFileRegistry().list_all() == StaticFileRegistry().list_all()


def test_override_path_changes_only_that_file() -> None:
    registry = StaticFileRegistry()
    contents_before = registry.list_all()

    registry.override_path(StaticFile.css, "/assets/swagger-ui.css")

    assert registry.path_of(StaticFile.css) == "/assets/swagger-ui.css"
    for static_file, _, default_path in EXPECTED_FILES[1:]:
        assert registry.path_of(static_file) == default_path
    assert registry.list_all() == contents_before


def test_override_path_accepts_any_string_and_last_write_wins() -> None:
    registry = StaticFileRegistry()

    registry.override_path(StaticFile.js, "not a url")
    registry.override_path(StaticFile.js, "")

    assert registry.path_of(StaticFile.js) == ""


def test_override_path_accepts_enum_values() -> None:
    registry = StaticFileRegistry()
    registry.override_path("favicon32", "/f32.png")  # type: ignore[arg-type]
    assert registry.path_of(StaticFile.favicon32) == "/f32.png"


def test_override_prefix() -> None:
    registry = StaticFileRegistry()

    registry.override_prefix("/docs/static/")

    assert registry.paths() == [
        (static_file, f"/docs/static/{file_name}") for static_file, file_name, _ in EXPECTED_FILES
    ]


def test_overrides_do_not_leak_between_registries() -> None:
    registry = StaticFileRegistry()
    registry.override_path(StaticFile.css, "/x.css")

    assert StaticFileRegistry().path_of(StaticFile.css) == "./swagger-ui.css"

    clone = registry.copy()
    clone.override_path(StaticFile.css, "/y.css")
    assert registry.path_of(StaticFile.css) == "/x.css"
    assert clone.path_of(StaticFile.css) == "/y.css"


def test_find_by_path() -> None:
    registry = StaticFileRegistry()
    registry.override_path(StaticFile.js, "/static/bundle.js")

    assert registry.find_by_path("/static/bundle.js") is StaticFile.js
    assert registry.find_by_path("./index.css") is StaticFile.index_css
    assert registry.find_by_path("./swagger-ui-bundle.js") is None


def test_get_returns_bytes_and_content_type() -> None:
    registry = StaticFileRegistry()

    swagger_file = registry.get(StaticFile.index_css)

    assert swagger_file.content_type == "text/css"
    assert swagger_file.bytes == registry.content_of(StaticFile.index_css)
    assert b"box-sizing" in swagger_file.bytes


PLACEHOLDER_MARKER = b"run scripts/update_swagger_ui.sh"


@pytest.mark.skipif(
    not (Path(swagger_ui_redist.__file__).parent / "res" / "VERSION").exists(),
    reason="Swagger UI release not vendored; run scripts/update_swagger_ui.sh",
)
@pytest.mark.parametrize("static_file", [StaticFile.css, StaticFile.js, StaticFile.standalone_preset_js])
def test_vendored_release_has_no_placeholders(static_file: StaticFile) -> None:
    assert PLACEHOLDER_MARKER not in StaticFileRegistry().content_of(static_file)
