from resource_search import platforms
from resource_search.config import settings
from resource_search.url import create_integration_search


def test_load_platforms(tmp_path) -> None:
    path = tmp_path / "platforms.yaml"
    path.write_text("platforms:\n  - fly\n  - ''\n  - vercel\n", encoding="utf-8")
    assert platforms.load_platforms(str(path)) == ["fly", "vercel"]


def test_load_platforms_empty_file(tmp_path) -> None:
    path = tmp_path / "platforms.yaml"
    path.write_text("", encoding="utf-8")
    assert platforms.load_platforms(str(path)) == []


def test_load_platforms_missing(tmp_path) -> None:
    assert platforms.load_platforms(str(tmp_path / "missing.yaml")) == []


def test_known_platforms_falls_back_to_settings(tmp_path, monkeypatch) -> None:
    monkeypatch.setattr(settings, "platforms_config_path", str(tmp_path / "missing.yaml"))
    monkeypatch.setattr(settings, "platforms", ["deno"])
    assert platforms.known_platforms() == ["deno"]


def test_known_platforms_from_file(tmp_path, monkeypatch) -> None:
    path = tmp_path / "platforms.yaml"
    path.write_text("platforms: [netlify]\n", encoding="utf-8")
    monkeypatch.setattr(settings, "platforms_config_path", str(path))
    assert platforms.known_platforms() == ["netlify"]
    assert create_integration_search("netlify") == "sort=top&platform=netlify"
    assert create_integration_search("vercel") == "sort=top&integration=vercel"
