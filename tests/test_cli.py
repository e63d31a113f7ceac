"""Tests for the Typer CLI."""

import json

import pytest
from pydantic import ValidationError
from typer.testing import CliRunner

from cli.main import app


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


def invoke(runner: CliRunner, *args: str):
    return runner.invoke(app, ["--no-banner", *args])


class TestCommands:
    """Happy paths of the demonstration commands."""

    def test_user(self, runner):
        result = invoke(runner, "user")
        assert result.exit_code == 0, result.output
        assert "jakeinerney" in result.output

    def test_user_from_file_and_export(self, runner, tmp_path, user_data):
        """--input validates a JSON file and --export writes the parsed user."""
        user_data["birthday"] = "1992-04-01T00:00:00"
        source = tmp_path / "user.json"
        source.write_text(json.dumps(user_data), encoding="utf-8")
        target = tmp_path / "parsed.json"

        result = invoke(runner, "user", "--input", str(source), "--export", str(target))

        assert result.exit_code == 0, result.output
        assert json.loads(target.read_text(encoding="utf-8"))["birthday"] == "1992-04-01T00:00:00"

    def test_user_input_must_be_object(self, runner, tmp_path):
        source = tmp_path / "list.json"
        source.write_text("[1, 2]", encoding="utf-8")
        result = invoke(runner, "user", "--input", str(source))
        assert result.exit_code == 2

    def test_shape(self, runner):
        result = invoke(runner, "shape")
        assert result.exit_code == 0, result.output
        assert "username" in result.output

    def test_partial(self, runner):
        assert invoke(runner, "partial").exit_code == 0

    def test_record(self, runner):
        result = invoke(runner, "record")
        assert result.exit_code == 0, result.output
        assert "keyDoesNotMatter" in result.output

    def test_map(self, runner):
        result = invoke(runner, "map")
        assert result.exit_code == 0, result.output
        assert "Garth" in result.output

    def test_promise(self, runner):
        result = invoke(runner, "promise")
        assert result.exit_code == 0, result.output
        assert "Hello there" in result.output

    def test_email(self, runner):
        result = invoke(runner, "email")
        assert result.exit_code == 0, result.output
        assert "grow.com" in result.output

    def test_family(self, runner):
        assert invoke(runner, "family").exit_code == 0

    def test_errors(self, runner):
        """The errors demo reports but does not fail."""
        result = invoke(runner, "errors")
        assert result.exit_code == 0, result.output
        assert "Field required" in result.output

    def test_all(self, runner):
        result = invoke(runner, "all")
        assert result.exit_code == 0, result.output
        assert "Hello there" in result.output

    def test_list(self, runner):
        result = invoke(runner, "list")
        assert result.exit_code == 0, result.output
        assert "promise" in result.output

    def test_banner(self, runner):
        result = runner.invoke(app, ["list"])
        assert result.exit_code == 0
        assert "schema-tour" in result.output

    def test_doctor(self, runner):
        result = invoke(runner, "doctor", "run")
        assert result.exit_code == 0, result.output
        assert "pydantic" in result.output


class TestValidationFailures:
    """Invalid inputs exit with code 1 and a readable message."""

    def test_wrong_email(self, runner):
        result = invoke(runner, "email", "jake.mcinerney@epcior.com")
        assert result.exit_code == 1
        assert "Email must end with @grow.com" in result.output

    def test_record_with_invalid_value(self, runner):
        result = invoke(runner, "record", "--include-invalid")
        assert result.exit_code == 1
        assert "thisWillThrowAnError" in result.output

    def test_promise_not_awaitable(self, runner):
        result = invoke(runner, "promise", "--not-awaitable")
        assert result.exit_code == 1
        assert "Expected awaitable" in result.output

    def test_promise_resolving_to_number(self, runner):
        assert invoke(runner, "promise", "--resolve-to-number").exit_code == 1

    def test_family_duplicate(self, runner):
        result = invoke(runner, "family", "--duplicate")
        assert result.exit_code == 1
        assert "listed twice" in result.output

    def test_user_from_invalid_file(self, runner, tmp_path):
        source = tmp_path / "user.json"
        source.write_text('{"username": 1}', encoding="utf-8")
        result = invoke(runner, "user", "--input", str(source))
        assert result.exit_code == 1
        assert "Field required" in result.output

    def test_invalid_configuration(self, runner, monkeypatch):
        """Broken settings stop before any command runs."""
        monkeypatch.setenv("SCHEMA_TOUR_MAX_ISSUES_IN_MESSAGE", "0")
        result = invoke(runner, "list")
        assert result.exit_code == 2


class TestInputFiles:
    """Unreadable --input files are parameter errors."""

    def test_malformed_json(self, runner, tmp_path):
        source = tmp_path / "bad.json"
        source.write_text("{not json", encoding="utf-8")
        result = invoke(runner, "user", "--input", str(source))
        assert result.exit_code == 2
        assert not isinstance(result.exception, ValueError)

    def test_not_utf8(self, runner, tmp_path):
        source = tmp_path / "latin1.json"
        source.write_bytes('{"username": "José"}'.encode("latin-1"))
        result = invoke(runner, "user", "--input", str(source))
        assert result.exit_code == 2


class TestRunAll:
    """The `all` command with failing demonstrations."""

    def test_failing_demo_is_reported(self, runner, monkeypatch):
        """The run goes on, shows the readable error and exits with 1."""
        monkeypatch.setenv("SCHEMA_TOUR_BRAND_EMAIL_DOMAIN", "epcior.com")
        result = invoke(runner, "all")
        assert result.exit_code == 1
        assert not isinstance(result.exception, ValidationError)
        assert "Email must end with @epcior.com" in result.output
        assert "Failed: email" in result.output


class TestLogging:
    """--verbose and SCHEMA_TOUR_LOG_LEVEL."""

    def test_invalid_log_level(self, runner, monkeypatch):
        monkeypatch.setenv("SCHEMA_TOUR_LOG_LEVEL", "loud")
        assert invoke(runner, "list").exit_code == 2

    def test_verbose_emits_debug(self, runner):
        result = runner.invoke(app, ["--no-banner", "-v", "user"])
        assert result.exit_code == 0, result.output
        assert "Parsing user with keys" in result.output

    def test_log_level_from_env(self, runner, monkeypatch):
        """INFO from the environment shows info lines but not debug ones."""
        monkeypatch.setenv("SCHEMA_TOUR_LOG_LEVEL", "info")
        result = invoke(runner, "user")
        assert result.exit_code == 0, result.output
        assert "User 'jakeinerney' parsed" in result.output
        assert "Parsing user with keys" not in result.output

    def test_default_level_is_quiet(self, runner):
        result = invoke(runner, "user")
        assert result.exit_code == 0, result.output
        assert "Parsing user with keys" not in result.output


class TestDoctorWithBrokenSettings:
    """doctor runs even when the settings are invalid."""

    def test_settings_failure_row(self, runner, monkeypatch):
        monkeypatch.setenv("SCHEMA_TOUR_MAX_ISSUES_IN_MESSAGE", "0")
        result = invoke(runner, "doctor", "run")
        assert result.exit_code == 1
        assert "FAIL" in result.output
        assert "invalid value" in result.output
