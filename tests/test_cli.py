"""Tests for the typer CLI."""
# pylint: disable=missing-function-docstring

from typer.testing import CliRunner

from line_relay.cli import main_app
from line_relay.cli import server as server_module

runner = CliRunner()


def test_classify_command_prints_intent() -> None:
    result = runner.invoke(main_app, ["classify", "請轉圈"])
    assert result.exit_code == 0
    assert "spin" in result.stdout
    assert "control" in result.stdout


def test_classify_command_defaults_to_chat() -> None:
    result = runner.invoke(main_app, ["classify", "hello"])
    assert result.exit_code == 0
    assert "chat" in result.stdout
    assert "conversational" in result.stdout


def test_serve_runs_app_factory_under_uvicorn(monkeypatch) -> None:
    captured: dict = {}

    def fake_run(app, **kwargs) -> None:
        captured["app"] = app
        captured.update(kwargs)

    monkeypatch.setattr(server_module.uvicorn, "run", fake_run)
    result = runner.invoke(main_app, ["serve", "--port", "8123"])
    assert result.exit_code == 0
    assert captured["app"] == "line_relay.api_factory:create_app"
    assert captured["factory"] is True
    assert captured["port"] == 8123
