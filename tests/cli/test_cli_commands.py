"""Tests for the spine-fp CLI -- version, dates parse, json parse."""

from __future__ import annotations

import json

from typer.testing import CliRunner

from spinefp import __version__
from spinefp.cli.app import app

runner = CliRunner()


class TestRoot:
    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert result.output.startswith("spine-fp ")

    def test_version_matches_package(self):
        result = runner.invoke(app, ["-V"])
        assert result.exit_code == 0
        assert result.output.strip() == f"spine-fp {__version__}"

    def test_bad_log_level(self):
        result = runner.invoke(app, ["--log-level", "LOUD", "dates", "parse", "2019-02-13T21:04:10.984Z"])
        assert result.exit_code != 0

    def test_log_level_from_env(self, monkeypatch):
        monkeypatch.setenv("SPINE_FP_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("SPINE_FP_JSON_LOGS", "true")
        result = runner.invoke(app, ["dates", "parse", "2019-02-13T21:04:1"])
        assert result.exit_code == 1
        assert "parse_date_rejected" in result.output


class TestDatesParse:
    def test_valid(self):
        result = runner.invoke(app, ["dates", "parse", "2019-02-13T21:04:10.984Z"])
        assert result.exit_code == 0
        assert result.output.strip() == "2019-02-13T21:04:10.984Z"

    def test_offset_is_rendered_in_utc(self):
        result = runner.invoke(app, ["dates", "parse", "2019-02-13T23:04:10.984+02:00"])
        assert result.exit_code == 0
        assert result.output.strip() == "2019-02-13T21:04:10.984Z"

    def test_invalid(self):
        result = runner.invoke(app, ["dates", "parse", "2019-02-13T21:04:1"])
        assert result.exit_code == 1
        assert "not a strict ISO 8601 timestamp" in result.output

    def test_json_valid(self):
        result = runner.invoke(app, ["dates", "parse", "2019-02-13T21:04:10.984Z", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {
            "input": "2019-02-13T21:04:10.984Z",
            "present": True,
            "value": "2019-02-13T21:04:10.984Z",
        }

    def test_json_invalid(self):
        result = runner.invoke(app, ["dates", "parse", "2019-02-30T00:00:00.000Z", "--json"])
        assert result.exit_code == 1
        assert json.loads(result.output)["present"] is False


class TestJsonParse:
    def test_valid(self):
        result = runner.invoke(app, ["json", "parse", '{"name": "jason"}'])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"name": "jason"}

    def test_invalid_reports_parser_diagnostic(self):
        result = runner.invoke(app, ["json", "parse", "<>"])
        assert result.exit_code == 1
        assert "JSONDecodeError: Expecting value: line 1 column 1 (char 0)" in result.output

    def test_describe_success(self):
        result = runner.invoke(app, ["json", "parse", "[1, 2]", "--describe"])
        assert result.exit_code == 0
        assert result.output.strip() == "Success([1, 2])"

    def test_describe_failure(self):
        result = runner.invoke(app, ["json", "parse", "<>", "--describe"])
        assert result.exit_code == 1
        assert result.output.strip() == "Failure(JSONDecodeError: Expecting value: line 1 column 1 (char 0))"
