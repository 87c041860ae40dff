from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest
import requests

from highlight_compare.exceptions import LanguageCatalogError
from highlight_compare.github import languages as languages_module
from highlight_compare.github import languages_from_catalog, load_languages, parse_catalog
from highlight_compare.schemas import Language

CATALOG_YAML = """
C++:
  type: programming
  aliases:
  - cpp
  - c++
JSON:
  type: data
  aliases:
  - geojson
Makefile:
  type: programming
Text:
  type: prose
"""


def test_parse_catalog_uses_first_alias_or_lowercased_name() -> None:
    languages = parse_catalog(CATALOG_YAML)

    assert languages == [
        Language(name="C++", alias="cpp"),
        Language(name="JSON", alias="geojson"),
        Language(name="Makefile", alias="makefile"),
        Language(name="Text", alias="text"),
    ]


def test_parse_catalog_filters_by_type() -> None:
    languages = parse_catalog(CATALOG_YAML, types=["programming"])

    assert [lang.name for lang in languages] == ["C++", "Makefile"]


def test_languages_from_catalog_rejects_non_mapping() -> None:
    with pytest.raises(LanguageCatalogError):
        languages_from_catalog(["not", "a", "mapping"])


def test_parse_catalog_rejects_invalid_yaml() -> None:
    with pytest.raises(LanguageCatalogError):
        parse_catalog("key: [unclosed")


def test_load_languages_from_local_file(tmp_path: Path) -> None:
    catalog = tmp_path / "languages.yml"
    catalog.write_text(CATALOG_YAML, encoding="utf-8")

    languages = load_languages(str(catalog))

    assert len(languages) == 4


def test_load_languages_missing_file(tmp_path: Path) -> None:
    with pytest.raises(LanguageCatalogError):
        load_languages(str(tmp_path / "missing.yml"))


def test_load_languages_from_url(monkeypatch: pytest.MonkeyPatch) -> None:
    calls = []

    def fake_get(url, timeout):
        calls.append((url, timeout))
        return SimpleNamespace(ok=True, status_code=200, text=CATALOG_YAML)

    monkeypatch.setattr(languages_module.requests, "get", fake_get)

    languages = load_languages("https://example.test/languages.yml", timeout=5)

    assert calls == [("https://example.test/languages.yml", 5)]
    assert languages[0] == Language(name="C++", alias="cpp")


def test_load_languages_http_error(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        languages_module.requests,
        "get",
        lambda url, timeout: SimpleNamespace(ok=False, status_code=404, text=""),
    )

    with pytest.raises(LanguageCatalogError, match="404"):
        load_languages("https://example.test/languages.yml")


def test_load_languages_transport_error(monkeypatch: pytest.MonkeyPatch) -> None:
    def boom(url, timeout):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(languages_module.requests, "get", boom)

    with pytest.raises(LanguageCatalogError, match="offline"):
        load_languages("https://example.test/languages.yml")
