# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Command`, a named sub-mode with its own options and operands.

A command is selected by the first bare token of an argument list that matches its
name. Once selected, its options join the active option set and, if it declares
operands, they replace the operand list of the `Getopt` it was registered on.

The optional `handler` is stored for the caller to dispatch to after parsing; the
parser never invokes it.
"""
from __future__ import annotations

from typing import Any, Callable, Iterable

from argwalk.exceptions import ConfigurationError
from argwalk.operand import Operand
from argwalk.option import Option


class Command:
    """
    Represents a sub-command.

    Args:
        name (str): The token that selects the command.
        description (str): Long help text.
        handler (Callable | None): Callable the caller may run once parsed.
        options (Iterable[Option] | None): Options owned by the command.
        operands (Iterable[Operand] | None): Operands replacing the base list.
        short_description (str | None): One-line summary for command listings,
            defaults to `description`.
    """

    def __init__(
        self,
        name: str,
        description: str = "",
        handler: Callable[..., Any] | None = None,
        options: Iterable[Option] | None = None,
        operands: Iterable[Operand] | None = None,
        short_description: str | None = None,
    ) -> None:
        self.name: str = self._validate_name(name)
        self.description: str = description
        self.short_description: str = (
            short_description if short_description is not None else description
        )
        if handler is not None and not callable(handler):
            raise ConfigurationError(f"Command '{name}' handler must be callable")
        self.handler: Callable[..., Any] | None = handler
        self._options: list[Option] = []
        self._operands: list[Operand] = []
        for option in options or []:
            self.add_option(option)
        for operand in operands or []:
            self.add_operand(operand)

    @staticmethod
    def _validate_name(name: str) -> str:
        if not isinstance(name, str) or not name:
            raise ConfigurationError("Command name must be a non-empty string")
        if name.startswith("-"):
            raise ConfigurationError(f"Command name '{name}' may not start with '-'")
        if any(char.isspace() for char in name):
            raise ConfigurationError(f"Command name '{name}' may not contain whitespace")
        return name

    def add_option(self, option: Option) -> Command:
        if not isinstance(option, Option):
            raise ConfigurationError(
                f"Command '{self.name}' options must be Option instances"
            )
        for name in option.names:
            if any(existing.matches(name) for existing in self._options):
                raise ConfigurationError(
                    f"Command '{self.name}' already has an option named '{name}'"
                )
        self._options.append(option)
        return self

    def add_operand(self, operand: Operand) -> Command:
        if not isinstance(operand, Operand):
            raise ConfigurationError(
                f"Command '{self.name}' operands must be Operand instances"
            )
        if any(existing.name == operand.name for existing in self._operands):
            raise ConfigurationError(
                f"Command '{self.name}' already has an operand named '{operand.name}'"
            )
        self._operands.append(operand)
        return self

    @property
    def options(self) -> list[Option]:
        return list(self._options)

    @property
    def operands(self) -> list[Operand]:
        return list(self._operands)

    def has_operands(self) -> bool:
        return bool(self._operands)

    def __repr__(self) -> str:
        return (
            f"Command(name={self.name!r}, options={len(self._options)}, "
            f"operands={len(self._operands)})"
        )
