import io
from pathlib import Path

import pytest
from rich.console import Console
from ruamel.yaml import YAML

from deskentry.cli.main import DeskEntryCLI


def make_cli():
    buffer = io.StringIO()
    return DeskEntryCLI(Console(file=buffer, width=200, force_terminal=False)), buffer


@pytest.fixture
def good(tmp_path: Path) -> Path:
    path = tmp_path / "good.desktop"
    path.write_text("[Desktop Entry]\nName=Good App\nComment=Does things\nExec=good --run\n")
    return path


@pytest.fixture
def broken(tmp_path: Path) -> Path:
    path = tmp_path / "broken.desktop"
    path.write_text("BadLine\nName=Broken\n")
    return path


def test_check_all_complete_exits_zero(good):
    cli, buffer = make_cli()
    assert cli.run(["check", str(good)]) == 0
    output = buffer.getvalue()
    assert "Good App" in output
    assert "COMPLETE" in output


def test_check_reports_diagnostics_and_fails(good, broken):
    cli, buffer = make_cli()
    assert cli.run(["check", str(good), str(broken)]) == 1
    output = buffer.getvalue()
    assert "Expected '=' after key" in output
    assert "Does not have a 'Exec=' field" in output
    assert "INCOMPLETE" in output


def test_check_quiet_prints_summary_only(broken):
    cli, buffer = make_cli()
    assert cli.run(["check", "--quiet", str(broken)]) == 1
    output = buffer.getvalue()
    assert "Summary Report" in output
    assert "Expected '=' after key" not in output


def test_menu_to_stdout(good, broken, capsys):
    cli, _ = make_cli()
    assert cli.run(["menu", str(good), str(broken)]) == 0
    menu = YAML(typ='safe').load(capsys.readouterr().out)
    assert menu == [{
        "name": "Good App",
        "comment": "Does things",
        "exec": "good --run",
        "path": str(good),
    }]


def test_menu_to_file(good, tmp_path):
    cli, buffer = make_cli()
    out = tmp_path / "menu.yaml"
    assert cli.run(["menu", str(good), "-o", str(out)]) == 0
    assert YAML(typ='safe').load(out.read_text())[0]["name"] == "Good App"
    assert "Menu written" in buffer.getvalue()


def test_config_limits_are_applied(tmp_path, capsys):
    entry = tmp_path / "long.desktop"
    entry.write_text("Name=Extremely Long Name\nExec=x\n")
    settings = tmp_path / "settings.yaml"
    settings.write_text("max_value_length: 9\n")
    cli, _ = make_cli()
    assert cli.run(["--config", str(settings), "menu", str(entry)]) == 0
    menu = YAML(typ='safe').load(capsys.readouterr().out)
    assert menu[0]["name"] == "Extremely"


def test_bad_config_exits_two(good, tmp_path):
    cli, buffer = make_cli()
    assert cli.run(["--config", str(tmp_path / "missing.yaml"), "check", str(good)]) == 2
    assert "CRITICAL ERROR" in buffer.getvalue()


def test_no_arguments_prints_help(capsys):
    cli, buffer = make_cli()
    assert cli.run([]) == 0
    assert "DeskEntry" in buffer.getvalue()
    assert "usage: deskentry" in capsys.readouterr().out


def test_unknown_encoding_in_config_exits_two(good, tmp_path):
    settings = tmp_path / "settings.yaml"
    settings.write_text("encoding: no-such-codec\n")
    cli, buffer = make_cli()
    assert cli.run(["--config", str(settings), "check", str(good)]) == 2
    assert "Unknown encoding" in buffer.getvalue()


def test_menu_output_to_missing_directory_exits_two(good, tmp_path):
    cli, buffer = make_cli()
    out = tmp_path / "no" / "such" / "dir" / "menu.yaml"
    assert cli.run(["menu", str(good), "-o", str(out)]) == 2
    assert "CRITICAL ERROR" in buffer.getvalue()
    assert not out.exists()
