# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Process bootstrapping helpers.

`Getopt.process()` only ever sees the token list it is given. These helpers are the
one place that reads the interpreter's argument vector, derive a script name for
help output, and split a single command-line string with shell quoting.
"""
from __future__ import annotations

import os
import shlex
import sys
from typing import TYPE_CHECKING, Sequence

from argwalk.logger import logger

if TYPE_CHECKING:
    from argwalk.getopt import Getopt
    from argwalk.result import ParseResult


def argv_source(argv: Sequence[str] | None = None) -> list[str]:
    """Return the tokens to parse: `argv` minus the program name, `sys.argv` by default."""
    if argv is None:
        argv = sys.argv
    return list(argv[1:])


def default_script_name(argv: Sequence[str] | None = None) -> str | None:
    """Return the basename of the program in `argv` (or `sys.argv`)."""
    if argv is None:
        argv = sys.argv
    if not argv or not argv[0]:
        return None
    return os.path.basename(argv[0])


def split_command_line(text: str) -> list[str]:
    """Split a command-line string into tokens using shell quoting rules."""
    return shlex.split(text)


def process_argv(getopt: Getopt, argv: Sequence[str] | None = None) -> ParseResult:
    """
    Parse the process arguments with `getopt`.

    Sets the `script_name` setting from `argv[0]` if it is not set yet, then hands
    the remaining tokens to `Getopt.process()`.
    """
    if getopt.get("script_name") is None:
        script_name = default_script_name(argv)
        if script_name:
            getopt.set("script_name", script_name)
    tokens = argv_source(argv)
    logger.debug("Bootstrapping %s with %d argument(s)", getopt.get("script_name"), len(tokens))
    return getopt.process(tokens)
