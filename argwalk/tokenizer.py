# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Tokenizer`, the state machine that walks an argument list
left to right and binds every token to an option, a command or an operand.

States:
- `SCANNING_FOR_COMMAND`: commands are registered and none is selected; the first
  bare token matching a command name selects it.
- `NORMAL`: options and operands interleave freely.
- `LITERAL`: entered after a bare `--`; every remaining token is an operand.

Token classification, in priority order:
1. In `LITERAL`, the token is an operand.
2. `--` switches to `LITERAL` and is dropped.
3. `--name` or `--name=value` is a long option.
4. `-abc` is a cluster of short options, unless it looks like a negative number
   and its first character names no option (`-5` is an operand then).
5. Anything else selects a command (while scanning for one) or is an operand.

Value binding:
- An inline value (`--out=x`, `-ox`) is always used when present.
- REQUIRED and MULTIPLE options without an inline value take the next token if it
  looks like a value: it is empty, exactly `-`, or does not start with `-`.
  Otherwise they fail with `ValueMissingError`. A negative number given this way
  (`--offset -5`) is treated as a missing value; use `--offset=-5` instead.
- OPTIONAL options never take the next token.
- NO_ARGUMENT options count occurrences and reject inline values.

Example:
    registry = OptionRegistry()
    registry.add_option(Option("v", "verbose"))
    registry.add_option(Option("o", "output", Arity.REQUIRED))
    sequencer = OperandSequencer([Operand("input", required=True)])

    Tokenizer(registry, sequencer).run(["--output=out.txt", "-v", "file.txt"])

    # registry.resolve("output").value == "out.txt"
    # registry.resolve("v").value == 1
    # sequencer.get(0) == "file.txt"
"""
from __future__ import annotations

import re
from enum import Enum
from typing import Sequence

from argwalk.arity import Arity
from argwalk.exceptions import ParseError, UnknownOptionError
from argwalk.logger import logger
from argwalk.operands import OperandSequencer
from argwalk.option import Option
from argwalk.registry import OptionRegistry

LONG_PREFIX = "--"
SHORT_PREFIX = "-"
TERMINATOR = "--"
INLINE_SEPARATOR = "="

NEGATIVE_NUMBER = re.compile(r"^-(\d+\.?\d*|\.\d+)([eE][-+]?\d+)?$")


class ScanState(Enum):
    """States of the tokenizer."""

    SCANNING_FOR_COMMAND = "scanning_for_command"
    NORMAL = "normal"
    LITERAL = "literal"

    def __str__(self) -> str:
        return self.value


def is_value(token: str) -> bool:
    """True if a token may be consumed as the value of the preceding option."""
    return token == "" or token == SHORT_PREFIX or not token.startswith(SHORT_PREFIX)


def looks_like_negative_number(token: str) -> bool:
    return bool(NEGATIVE_NUMBER.match(token))


class Tokenizer:
    """
    Drives one parse pass over an argument list.

    Args:
        registry (OptionRegistry): Resolves option names and holds the commands.
        sequencer (OperandSequencer): Receives every operand value.
    """

    def __init__(self, registry: OptionRegistry, sequencer: OperandSequencer) -> None:
        self.registry: OptionRegistry = registry
        self.sequencer: OperandSequencer = sequencer
        if registry.has_commands() and registry.selected_command is None:
            self.state: ScanState = ScanState.SCANNING_FOR_COMMAND
        else:
            self.state = ScanState.NORMAL

    def run(self, tokens: Sequence[str]) -> None:
        """
        Consume every token, then check for unfilled required operands.

        Raises:
            ParseError: Any parse failure; parsing stops at the first one.
        """
        args = list(tokens)
        logger.debug("Processing %d token(s) in state '%s'", len(args), self.state)
        i = 0
        try:
            while i < len(args):
                i = self._handle_token(args, i)
            self.sequencer.check_required()
        except ParseError as error:
            logger.debug("Parsing aborted at token %d: %s", i, error)
            raise

    def _handle_token(self, args: list[str], i: int) -> int:
        token = args[i]
        if self.state == ScanState.LITERAL:
            self._add_operand(token)
            return i + 1

        if token == TERMINATOR:
            logger.debug("Terminator found, remaining tokens are operands")
            self.state = ScanState.LITERAL
            return i + 1

        if token.startswith(LONG_PREFIX):
            return self._handle_long_option(args, i)

        if self._is_short_cluster(token):
            return self._handle_short_cluster(args, i)

        if self.state == ScanState.SCANNING_FOR_COMMAND:
            if self.registry.get_command(token) is not None:
                self._select_command(token)
                return i + 1

        self._add_operand(token)
        return i + 1

    def _is_short_cluster(self, token: str) -> bool:
        if not token.startswith(SHORT_PREFIX) or len(token) < 2:
            return False
        if looks_like_negative_number(token):
            return self.registry.resolve(token[1]) is not None
        return True

    def _take_next_value(self, args: list[str], i: int) -> tuple[str | None, int]:
        """Return the token after `i` if it looks like a value, and the next index."""
        if i + 1 < len(args) and is_value(args[i + 1]):
            return args[i + 1], i + 2
        return None, i + 1

    def _bind(self, option: Option, args: list[str], i: int) -> int:
        """Bind an option that had no inline value; return the next index."""
        if option.arity.forces_value:
            value, next_i = self._take_next_value(args, i)
            option.set_value(value)
            return next_i
        option.set_value()
        return i + 1

    def _handle_long_option(self, args: list[str], i: int) -> int:
        name, separator, inline_value = args[i][len(LONG_PREFIX) :].partition(
            INLINE_SEPARATOR
        )
        option = self.registry.resolve(name)
        if option is None:
            raise UnknownOptionError(name)
        if separator:
            option.set_value(inline_value)
            return i + 1
        return self._bind(option, args, i)

    def _handle_short_cluster(self, args: list[str], i: int) -> int:
        cluster = args[i][len(SHORT_PREFIX) :]
        for position, char in enumerate(cluster):
            option = self.registry.resolve(char)
            if option is None:
                raise UnknownOptionError(char)
            if option.arity == Arity.NO_ARGUMENT:
                option.set_value()
                continue
            remainder = cluster[position + 1 :]
            if remainder:
                option.set_value(remainder)
                return i + 1
            return self._bind(option, args, i)
        return i + 1

    def _select_command(self, name: str) -> None:
        command = self.registry.select_command(name)
        if command.has_operands():
            self.sequencer.replace_operands(command.operands)
        self.state = ScanState.NORMAL

    def _add_operand(self, value: str) -> None:
        self.sequencer.consume(value)
        if self.state == ScanState.SCANNING_FOR_COMMAND:
            self.state = ScanState.NORMAL
