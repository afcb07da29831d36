"""Tests for the click CLI."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from industry_page.cli import cli


def _state_lines(output: str) -> list[dict]:
    return [json.loads(line) for line in output.splitlines() if line.startswith('{"offset"')]


@pytest.fixture()
def document_file(tmp_path, sample_document):
    path = tmp_path / "cardiology.json"
    path.write_text(json.dumps(sample_document), encoding="utf-8")
    return path


class TestRender:
    def test_render_to_stdout(self, document_file):
        result = CliRunner().invoke(cli, ["render", str(document_file), "--parent", "Health Services"])
        assert result.exit_code == 0, result.output
        assert "<h1" in result.output
        assert 'href="/industries/health-services"' in result.output

    def test_render_scrolled_on_mount(self, document_file, tmp_path):
        out = tmp_path / "page.html"
        result = CliRunner().invoke(
            cli, ["render", str(document_file), "--scroll-y", "500", "-o", str(out)]
        )
        assert result.exit_code == 0, result.output
        html = out.read_text(encoding="utf-8")
        assert 'data-action="scroll-to-top"' in html

    def test_render_service_kind(self, document_file):
        result = CliRunner().invoke(cli, ["render", str(document_file), "--kind", "service"])
        assert result.exit_code == 0, result.output
        assert 'data-page-kind="service"' in result.output

    def test_invalid_json(self, tmp_path):
        bad = tmp_path / "bad.json"
        bad.write_text("{not json", encoding="utf-8")
        result = CliRunner().invoke(cli, ["render", str(bad)])
        assert result.exit_code == 2
        assert "not valid JSON" in result.output

    def test_non_object_document_renders_defaults(self, tmp_path):
        doc = tmp_path / "list.json"
        doc.write_text("[1, 2, 3]", encoding="utf-8")
        result = CliRunner().invoke(cli, ["render", str(doc)])
        assert result.exit_code == 0, result.output
        assert "Industry Title" in result.output


class TestSimulate:
    def test_offset_sequence(self, document_file):
        result = CliRunner().invoke(
            cli, ["simulate", str(document_file), "--offsets", "0,50,100,101,500,99"]
        )
        assert result.exit_code == 0, result.output
        lines = _state_lines(result.output)
        assert [line["is_sticky"] for line in lines] == [False, False, False, True, True, False]
        assert all(line["is_sticky"] == line["show_back_to_top"] for line in lines)
        assert not any(line["faulted"] for line in lines)

    def test_revealed_set_grows(self, document_file):
        result = CliRunner().invoke(
            cli, ["simulate", str(document_file), "--offsets", "0,2000,0"]
        )
        assert result.exit_code == 0, result.output
        lines = _state_lines(result.output)
        assert "section-1" in lines[0]["revealed"]
        assert "solution-1" in lines[1]["revealed"]
        assert set(lines[1]["revealed"]) <= set(lines[2]["revealed"])

    def test_bad_offsets(self, document_file):
        result = CliRunner().invoke(cli, ["simulate", str(document_file), "--offsets", "a,b"])
        assert result.exit_code == 2
