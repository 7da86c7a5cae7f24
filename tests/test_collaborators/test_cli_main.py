import json
import logging

import pytest
from rich.console import Console

from argwalk.__main__ import get_cli, main
from argwalk.console import argwalk_theme

DEFINITIONS = """
settings:
  script_name: backup
options:
  - {short: v, long: verbose}
  - {short: o, long: output, arity: required}
operands:
  - {name: source, required: true}
commands:
  - name: restore
    options:
      - {long: force}
"""


@pytest.fixture(autouse=True)
def plain_console(monkeypatch):
    """Print without colour codes so the output can be matched as text."""
    plain = Console(color_system=None, theme=argwalk_theme, width=200)
    monkeypatch.setattr("argwalk.help.default_console", plain)
    monkeypatch.setattr("argwalk.__main__.console", plain)
    return plain


@pytest.fixture
def definitions(tmp_path):
    path = tmp_path / "backup.yaml"
    path.write_text(DEFINITIONS, encoding="UTF-8")
    return str(path)


def test_get_cli():
    cli = get_cli()
    assert cli.get("script_name") == "argwalk"
    assert [operand.name for operand in cli.operands] == ["definitions", "arguments"]
    assert cli.get_option("log-mode").argument.validates("json")
    assert not cli.get_option("log-mode").argument.validates("xml")


def test_main_help(capsys):
    assert main(["argwalk", "--help"]) == 0
    captured = capsys.readouterr()
    assert "usage: argwalk [options] [--] [<definitions>] [<arguments>]" in captured.out


def test_main_parses_arguments(definitions, capsys):
    code = main(["argwalk", definitions, "--", "-vv", "--output=out.tar", "/data"])
    assert code == 0
    output = json.loads(capsys.readouterr().out)
    assert output == {
        "command": None,
        "options": {"v": 2, "verbose": 2, "o": "out.tar", "output": "out.tar"},
        "operands": ["/data"],
    }


def test_main_selects_command(definitions, capsys):
    code = main(["argwalk", definitions, "--", "restore", "--force", "/data"])
    assert code == 0
    output = json.loads(capsys.readouterr().out)
    assert output["command"] == "restore"
    assert output["options"] == {"force": 1}
    assert output["operands"] == ["/data"]


def test_main_parse_failure(definitions, capsys):
    assert main(["argwalk", definitions, "--", "--unknown", "/data"]) == 1
    captured = capsys.readouterr()
    assert "Option 'unknown' is unknown" in captured.out
    assert "usage: backup" in captured.out


def test_main_missing_required_operand(definitions, capsys):
    assert main(["argwalk", definitions]) == 1
    assert "Operand 'source' is required" in capsys.readouterr().out


def test_main_without_definitions(capsys):
    assert main(["argwalk"]) == 2
    assert "usage: argwalk" in capsys.readouterr().out


def test_main_bad_cli_option(capsys):
    assert main(["argwalk", "--log-mode=xml"]) == 2
    assert "has an invalid value" in capsys.readouterr().out


def test_main_bad_definitions(tmp_path, capsys):
    path = tmp_path / "broken.yaml"
    path.write_text("options: [unclosed\n", encoding="UTF-8")
    assert main(["argwalk", str(path)]) == 2
    assert "error:" in capsys.readouterr().out


def test_main_writes_log_file(definitions, tmp_path, capsys):
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    log_file = tmp_path / "run.log"
    try:
        code = main(
            ["argwalk", "--log-mode=cli", f"--log-file={log_file}", definitions, "--", "/data"]
        )
    finally:
        for handler in root.handlers:
            handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)
    assert code == 0
    assert json.loads(capsys.readouterr().out)["operands"] == ["/data"]
    assert "Logging initialized in 'cli' mode" in log_file.read_text()
