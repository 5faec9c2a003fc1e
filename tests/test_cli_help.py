from __future__ import annotations

from typer.testing import CliRunner

from fuzzdata.cli import app


def test_global_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "gen" in result.stdout
    assert "kinds" in result.stdout


def test_gen_help() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["gen", "--help"])
    assert result.exit_code == 0
    assert "--count" in result.stdout
    assert "--length" in result.stdout
    assert "--seed" in result.stdout
    assert "--config" in result.stdout
    assert "--param" in result.stdout
