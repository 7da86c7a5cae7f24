"""
Argwalk CLI Parsing Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

Command-line entry point: load a definition file and parse the arguments given after
`--` against it, printing the outcome as JSON.

    argwalk definitions.yaml -- --output=out.txt -v file.txt
"""
from __future__ import annotations

import logging
import sys
from typing import Sequence

from rich.markup import escape

from argwalk.arity import Arity
from argwalk.bootstrap import process_argv
from argwalk.config import loader
from argwalk.console import console
from argwalk.exceptions import ConfigurationError, ParseError
from argwalk.getopt import Getopt
from argwalk.operand import Operand
from argwalk.option import Option
from argwalk.utils import setup_logging
from argwalk.validators import one_of


def get_cli() -> Getopt:
    return Getopt(
        [
            Option("h", "help", Arity.NO_ARGUMENT, "Show this help message"),
            Option("v", "verbose", Arity.NO_ARGUMENT, "Enable debug logging"),
            Option(
                None,
                "log-mode",
                Arity.REQUIRED,
                "Logging mode, cli or json",
                validator=one_of(["cli", "json"]),
            ),
            Option(None, "log-file", Arity.REQUIRED, "Also write debug logs to this file"),
        ],
        settings={"script_name": "argwalk"},
        operands=[
            Operand("definitions", description="YAML or TOML definition file"),
            Operand("arguments", description="Arguments to parse, given after --"),
        ],
    )


def print_error(error: Exception) -> None:
    console.print(f"[bold red]error:[/] {escape(str(error))}")


def main(argv: Sequence[str] | None = None) -> int:
    cli = get_cli()
    try:
        result = process_argv(cli, argv if argv is not None else sys.argv)
    except ParseError as error:
        print_error(error)
        cli.render_help()
        return 2

    if result["help"]:
        cli.render_help()
        return 0

    if result["verbose"] or result["log-mode"] or result["log-file"]:
        setup_logging(
            mode=result["log-mode"],
            console_log_level=logging.DEBUG if result["verbose"] else logging.WARNING,
            log_file=result["log-file"],
        )

    definitions = result.operand_value("definitions")
    if definitions is None:
        cli.render_help()
        return 2

    try:
        target = loader(definitions)
    except ConfigurationError as error:
        print_error(error)
        return 2

    try:
        parsed = target.process(result.all_operand_values()[1:])
    except ParseError as error:
        print_error(error)
        target.render_help()
        return 1

    command = parsed.selected_command()
    console.print_json(
        data={
            "command": command.name if command else None,
            "options": parsed.all_set_options(),
            "operands": parsed.all_operand_values(),
        }
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
