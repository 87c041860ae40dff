from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from highlight_compare import cli
from highlight_compare.exceptions import RateLimitError

runner = CliRunner()

CATALOG_YAML = """
JavaScript:
  type: programming
  aliases:
  - js
Python:
  type: programming
TypeScript:
  type: programming
  aliases:
  - ts
"""


@pytest.fixture
def catalog_file(tmp_path: Path) -> Path:
    path = tmp_path / "languages.yml"
    path.write_text(CATALOG_YAML, encoding="utf-8")
    return path


def test_group_command_outputs_json(tmp_path: Path, rendered_document: str) -> None:
    html_file = tmp_path / "rendered.html"
    html_file.write_text(rendered_document, encoding="utf-8")

    result = runner.invoke(cli.app, ["group", str(html_file), "--json"])

    assert result.exit_code == 0, result.output
    report = json.loads(result.output)
    assert [g["lang_names"] for g in report["groups"]] == [["JavaScript", "TypeScript"], ["Python"]]
    assert report["highlighted_count"] == 3


def test_group_command_missing_file(tmp_path: Path) -> None:
    result = runner.invoke(cli.app, ["group", str(tmp_path / "nope.html")])

    assert result.exit_code == 1
    assert "File not found" in result.output


def test_languages_command_lists_catalog(catalog_file: Path) -> None:
    result = runner.invoke(cli.app, ["languages", "--languages-file", str(catalog_file)])

    assert result.exit_code == 0, result.output
    assert "Loaded 3 languages" in result.output
    assert "TypeScript" in result.output


def test_compare_command_uses_render_client(
    monkeypatch: pytest.MonkeyPatch, catalog_file: Path, rendered_document: str
) -> None:
    sent = []

    def fake_render(self, markdown: str) -> str:
        sent.append(markdown)
        return rendered_document

    monkeypatch.setattr(cli.MarkdownRenderClient, "render", fake_render)

    result = runner.invoke(cli.app, [
        "compare",
        "--text", 'console.log("hello")',
        "--languages-file", str(catalog_file),
        "--only", "javascript,typescript",
        "--json",
    ])

    assert result.exit_code == 0, result.output
    assert "## LANG_NAME:Python" not in sent[0]
    assert "```ts\n" in sent[0]
    report = json.loads(result.output)
    assert report["total_languages"] == 2
    assert report["groups"][0]["lang_names"] == ["JavaScript", "TypeScript"]


def test_compare_command_reports_rate_limit(monkeypatch: pytest.MonkeyPatch, catalog_file: Path) -> None:
    def fake_render(self, markdown: str) -> str:
        raise RateLimitError()

    monkeypatch.setattr(cli.MarkdownRenderClient, "render", fake_render)

    result = runner.invoke(cli.app, [
        "compare",
        "--text", "x",
        "--languages-file", str(catalog_file),
    ])

    assert result.exit_code == 1
    assert "rate limit" in result.output


def test_compare_command_rejects_empty_selection(catalog_file: Path) -> None:
    result = runner.invoke(cli.app, [
        "compare",
        "--text", "x",
        "--languages-file", str(catalog_file),
        "--only", "Cobol",
    ])

    assert result.exit_code == 1
    assert "No languages selected" in result.output


def test_version_command() -> None:
    result = runner.invoke(cli.app, ["version"])

    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_invalid_timeout_setting_is_reported(monkeypatch: pytest.MonkeyPatch, catalog_file: Path) -> None:
    monkeypatch.setenv("HIGHLIGHT_COMPARE_TIMEOUT", "soon")

    compare_result = runner.invoke(cli.app, ["compare", "--text", "x", "--languages-file", str(catalog_file)])
    languages_result = runner.invoke(cli.app, ["languages", "--languages-file", str(catalog_file)])

    for result in (compare_result, languages_result):
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
