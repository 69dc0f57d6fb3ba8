"""Tests for the proccontext CLI."""

import json

import pytest
from click.testing import CliRunner
from rich.console import Console
from proccontext.cli import main


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def no_user_config(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("PROCCONTEXT_CONFIG", raising=False)


def test_json_output(runner):
    result = runner.invoke(main, ["--format", "json", "--", "python3", "-m", "hello"])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["commands"][0]["identity"] == "hello"
    assert data["commands"][0]["tag"] == "process_context:hello"


def test_table_output(runner, monkeypatch):
    monkeypatch.setattr("proccontext.cli.console", Console(width=200))
    result = runner.invoke(main, ["java -Xmx4000m -jar /opt/sheepdog/bin/myservice.jar"])
    assert result.exit_code == 0
    assert "process_context:myservice" in result.output


@pytest.mark.parametrize("script", ["/srv/[/]app.py", "/srv/[red]app.py"])
def test_table_shows_bracketed_paths_verbatim(runner, monkeypatch, script):
    monkeypatch.setattr("proccontext.cli.console", Console(width=200))
    result = runner.invoke(main, ["--", "python3", script])
    assert result.exit_code == 0
    assert script in result.output


def test_error_exit_code(runner):
    result = runner.invoke(main, ["--format", "json", "sudo -u dog"])
    assert result.exit_code == 1
    assert "command not found" in result.output


def test_file_input_with_csv_export(runner, tmp_path):
    input_path = tmp_path / "cmdlines.txt"
    input_path.write_text("ruby /usr/sbin/td-agent --daemon x\n\nsudo -u dog\n")
    out_path = tmp_path / "out.csv"

    result = runner.invoke(main, ["--file", str(input_path), "--format", "csv", "--out", str(out_path)])
    assert result.exit_code == 0
    lines = out_path.read_text().splitlines()
    assert len(lines) == 3
    assert "td-agent" in lines[1]


def test_stdin_input(runner):
    result = runner.invoke(main, ["--file", "-", "--format", "json"], input="python3 app.py\n")
    assert result.exit_code == 0
    assert json.loads(result.stdout)["commands"][0]["identity"] == "app.py"


def test_config_file(runner, tmp_path):
    config_path = tmp_path / "custom.yaml"
    config_path.write_text("output:\n  format: json\nnaming:\n  tag_prefix: svc\n")
    result = runner.invoke(main, ["--config", str(config_path), "python3 -m hello"])
    assert result.exit_code == 0
    assert json.loads(result.stdout)["commands"][0]["tag"] == "svc:hello"


def test_missing_input(runner):
    result = runner.invoke(main, [])
    assert result.exit_code == 2
