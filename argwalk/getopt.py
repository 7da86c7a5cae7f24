# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `Getopt`, the entry point of argwalk.

`Getopt` owns an `OptionRegistry`, an `OperandSequencer` and the settings. Callers
register options, operands and commands, call `process()` with an argument list, and
read the outcome through the returned `ParseResult` or the query methods mirrored on
`Getopt` itself.

Key Features:
- Options given as `Option` objects, rows, mappings or `"ab:c::"` shorthand
- The four arities: NO_ARGUMENT, REQUIRED, OPTIONAL, MULTIPLE
- Clustered short flags (`-abc`), inline values (`--out=x`, `-ox`)
- `--` terminator
- Sub-commands with their own options and operands
- Operand validation and defaults

Example Usage:
    getopt = Getopt([
        Option("v", "verbose"),
        Option("o", "output", Arity.REQUIRED),
    ])
    getopt.add_operand(Operand("input", required=True))

    result = getopt.process(["--output=out.txt", "-v", "file.txt"])

    # result["output"] == "out.txt"
    # result["v"] == 1
    # result.operand_value(0) == "file.txt"

A `Getopt` is meant to process one argument list. Option values are never reset, so
processing a second list accumulates on top of the first.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from pydantic import ValidationError

from argwalk.bootstrap import split_command_line
from argwalk.command import Command
from argwalk.exceptions import ConfigurationError, ParseError
from argwalk.help import Help
from argwalk.logger import logger
from argwalk.operand import Operand
from argwalk.operands import OperandSequencer
from argwalk.option import Option
from argwalk.option_string import parse_option_list, parse_option_row, parse_option_string
from argwalk.registry import OptionRegistry
from argwalk.result import ParseResult
from argwalk.settings import SETTING_DEFAULT_ARITY, SETTING_SCRIPT_NAME, GetoptSettings
from argwalk.tokenizer import Tokenizer

OptionDefinition = Option | Sequence[Any] | Mapping[str, Any]


class Getopt:
    """
    Registers options, operands and commands and processes argument lists.

    Args:
        options (str | Iterable | None): Options to register, see `add_options()`.
        settings (Mapping | GetoptSettings | None): `default_arity` and `script_name`.
        operands (Iterable[Operand] | None): Operands to register.
        commands (Iterable[Command] | None): Commands to register.
        help (Help | None): Help renderer, a default `Help` when omitted.
    """

    SETTING_SCRIPT_NAME = SETTING_SCRIPT_NAME
    SETTING_DEFAULT_ARITY = SETTING_DEFAULT_ARITY

    def __init__(
        self,
        options: str | Iterable[OptionDefinition] | None = None,
        settings: Mapping[str, Any] | GetoptSettings | None = None,
        operands: Iterable[Operand] | None = None,
        commands: Iterable[Command] | None = None,
        help: Help | None = None,
    ) -> None:
        self.settings: GetoptSettings = self._validate_settings(settings)
        self.registry: OptionRegistry = OptionRegistry(self.settings.default_arity)
        self.sequencer: OperandSequencer = OperandSequencer()
        self.help: Help = help or Help()
        self._result: ParseResult = ParseResult(self.registry, self.sequencer)
        self._processed: bool = False
        if options is not None:
            self.add_options(options)
        if operands is not None:
            self.add_operands(operands)
        if commands is not None:
            self.add_commands(commands)

    @staticmethod
    def _validate_settings(
        settings: Mapping[str, Any] | GetoptSettings | None,
    ) -> GetoptSettings:
        if settings is None:
            return GetoptSettings()
        if isinstance(settings, GetoptSettings):
            return settings.model_copy()
        try:
            return GetoptSettings(**settings)
        except ValidationError as error:
            raise ConfigurationError(f"Invalid settings: {error}") from error

    def set(self, setting: str, value: Any) -> Getopt:
        """Change a setting; `default_arity` only affects options registered later."""
        if setting not in GetoptSettings.model_fields:
            raise ConfigurationError(f"Unknown setting '{setting}'")
        try:
            setattr(self.settings, setting, value)
        except ValidationError as error:
            raise ConfigurationError(f"Invalid value for '{setting}': {error}") from error
        if setting == SETTING_DEFAULT_ARITY:
            self.registry.default_arity = self.settings.default_arity
        return self

    def get(self, setting: str) -> Any:
        return getattr(self.settings, setting, None)

    def add_options(self, options: str | Iterable[OptionDefinition]) -> Getopt:
        """
        Register several options.

        Args:
            options: A shorthand string (`"ab:c::"`), or an iterable mixing `Option`
                instances, `[short, long, arity, description, default]` rows and
                mappings.
        """
        if isinstance(options, str):
            parsed = parse_option_string(options)
        elif isinstance(options, Iterable):
            parsed = parse_option_list(options)
        else:
            raise ConfigurationError(
                f"options must be a string or an iterable, got {type(options).__name__}"
            )
        for option in parsed:
            self.registry.add_option(option)
        return self

    def add_option(self, option: str | OptionDefinition) -> Getopt:
        """Register one option; for a shorthand string only the first option is used."""
        if isinstance(option, str):
            option = parse_option_string(option)[0]
        elif not isinstance(option, Option):
            option = parse_option_row(option)
        self.registry.add_option(option)
        return self

    def get_option(self, name: str) -> Option | None:
        """Return the `Option` object answering to `name`."""
        return self.registry.resolve(name)

    @property
    def options(self) -> list[Option]:
        return self.registry.options

    def has_options(self) -> bool:
        return self.registry.has_options()

    def add_command(self, command: Command) -> Getopt:
        self.registry.add_command(command)
        return self

    def add_commands(self, commands: Iterable[Command]) -> Getopt:
        for command in commands:
            self.add_command(command)
        return self

    def get_command(self, name: str | None = None) -> Command | None:
        """Return the named command, or the selected one when `name` is None."""
        if name is None:
            return self.registry.selected_command
        return self.registry.get_command(name)

    @property
    def commands(self) -> list[Command]:
        return self.registry.commands

    def has_commands(self) -> bool:
        return self.registry.has_commands()

    def add_operand(self, operand: Operand) -> Getopt:
        self.sequencer.add_operand(operand)
        return self

    def add_operands(self, operands: Iterable[Operand]) -> Getopt:
        for operand in operands:
            self.add_operand(operand)
        return self

    @property
    def operands(self) -> list[Operand]:
        return self.sequencer.operands

    def process(self, arguments: Sequence[str] | str) -> ParseResult:
        """
        Parse an argument list and return the result view.

        Args:
            arguments (Sequence[str] | str): Tokens without the program name, or a
                single command-line string split with shell quoting rules.

        Returns:
            ParseResult: Read-only view over options, command and operands.

        Raises:
            ParseError: The argument list does not match the definitions.
        """
        if isinstance(arguments, str):
            try:
                arguments = split_command_line(arguments)
            except ValueError as error:
                raise ParseError(f"Cannot split arguments: {error}") from error
        elif not isinstance(arguments, Sequence):
            raise ConfigurationError(
                "arguments must be a sequence of strings or a command-line string"
            )
        if not all(isinstance(token, str) for token in arguments):
            raise ConfigurationError("every argument must be a string")
        if self._processed:
            logger.warning(
                "Getopt.process() called again; option values accumulate across calls"
            )
        self._processed = True
        Tokenizer(self.registry, self.sequencer).run(arguments)
        return self._result

    @property
    def result(self) -> ParseResult:
        return self._result

    def option_value(self, name: str) -> Any:
        return self._result.option_value(name)

    def all_set_options(self) -> dict[str, Any]:
        return self._result.all_set_options()

    def selected_command(self) -> Command | None:
        return self._result.selected_command()

    def operand_value(self, key: int | str) -> Any:
        return self._result.operand_value(key)

    def all_operand_values(self) -> list[str]:
        return self._result.all_operand_values()

    def get_usage(self, plain_text: bool = True) -> str:
        return self.help.get_usage(self, plain_text=plain_text)

    def get_help_text(self) -> str:
        return self.help.get_help_text(self)

    def render_help(self) -> None:
        self.help.render(self)

    def __str__(self) -> str:
        return (
            f"Getopt(options={len(self.registry.options)}, "
            f"operands={len(self.sequencer.operands)}, "
            f"commands={len(self.registry.commands)})"
        )

    def __repr__(self) -> str:
        return str(self)
