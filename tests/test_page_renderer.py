from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from swagger_ui_redist.exceptions import ConfigSerializationError
from swagger_ui_redist.renderer import config_json
from swagger_ui_redist.renderer.page import render_page
from swagger_ui_redist.schemas import Config, Url

GOLDEN_DIR = Path(__file__).parent / "golden"


def _render(config: Config, **overrides: str) -> str:
    paths = {
        "title": "Swagger UI",
        "css_path": "./swagger-ui.css",
        "index_css_path": "./index.css",
        "js_path": "./swagger-ui-bundle.js",
        "standalone_preset_js_path": "./swagger-ui-standalone-preset.js",
    }
    paths.update(overrides)
    return render_page(config=config, **paths)


def _inline_script(html: str) -> str:
    soup = BeautifulSoup(html, "html.parser")
    inline = [script for script in soup.find_all("script") if script.get("src") is None]
    assert len(inline) == 1
    return inline[0].get_text()


def test_render_page_matches_golden_file() -> None:
    html = _render(Config().set_urls(["/api.json"]))
    expected = (GOLDEN_DIR / "page_single_url.html").read_text(encoding="utf-8")
    assert html == expected


def test_render_page_structure() -> None:
    html = _render(Config().set_urls(["/api.json"]))
    soup = BeautifulSoup(html, "html.parser")

    assert html.startswith("<!DOCTYPE html>")
    assert soup.title.string == "Swagger UI"
    assert len(soup.find_all("div", id="swagger-ui")) == 1

    stylesheets = [link["href"] for link in soup.find_all("link", rel="stylesheet")]
    assert stylesheets == ["./swagger-ui.css", "./index.css"]

    scripts = [script["src"] for script in soup.find_all("script", src=True)]
    assert scripts == ["./swagger-ui-bundle.js", "./swagger-ui-standalone-preset.js"]


def test_render_page_splices_config_next_to_presets() -> None:
    script = _inline_script(_render(Config().set_urls(["/api.json"])))
    lines = script.splitlines()

    assert "window.onload = () => {" in script
    assert '  "url": "/api.json",' in lines
    assert "  presets: [" in lines
    assert "  plugins: [" in lines
    assert lines.index('  "url": "/api.json",') < lines.index("  presets: [")


def test_render_page_uses_given_paths_and_title() -> None:
    html = _render(
        Config().set_urls([Url.named("Pets", "/pets.json"), Url.named("Store", "/store.json")]),
        title="Pet Store",
        css_path="/static/ui.css",
        index_css_path="/static/index.css",
        js_path="https://cdn.example.com/bundle.js",
        standalone_preset_js_path="",
    )
    soup = BeautifulSoup(html, "html.parser")

    assert soup.title.string == "Pet Store"
    assert [link["href"] for link in soup.find_all("link", rel="stylesheet")] == [
        "/static/ui.css",
        "/static/index.css",
    ]
    assert [script["src"] for script in soup.find_all("script", src=True)] == [
        "https://cdn.example.com/bundle.js",
        "",
    ]
    assert '"name": "Store"' in _inline_script(html)


def test_render_page_anchor_does_not_follow_dom_id() -> None:
    # The div is fixed; the viewer reads dom_id from the config at runtime.
    html = _render(Config().set_dom_id("#docs").set_urls(["/api.json"]))
    soup = BeautifulSoup(html, "html.parser")

    assert soup.find("div", id="swagger-ui") is not None
    assert soup.find("div", id="docs") is None
    assert '"dom_id": "#docs"' in _inline_script(html)


def test_render_page_propagates_serialization_error(monkeypatch) -> None:
    def fail(config):
        raise ValueError("boom")

    monkeypatch.setattr(config_json, "config_payload", fail)

    with pytest.raises(ConfigSerializationError):
        _render(Config())
