# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `OptionRegistry`, the single authority for option and command names.

The registry owns the active option set and the command table. It enforces that no
short or long name is used twice across the base options and every registered
command, and resolves names to options for the tokenizer.

Resolution is memoized: once a name resolves to an option, the same `Option`
object is returned for the life of the registry. Misses are not memoized, so a
command selected mid-parse makes its option names resolvable from then on.

A command's options only join the active set when the command is selected with
`select_command()`.
"""
from __future__ import annotations

from typing import Iterable

from argwalk.arity import Arity
from argwalk.command import Command
from argwalk.exceptions import ConfigurationError
from argwalk.logger import logger
from argwalk.option import Option


class OptionRegistry:
    """
    Owns the active options and the command table.

    Args:
        default_arity (Arity): Applied to registered options constructed
            without an arity.
    """

    def __init__(self, default_arity: Arity = Arity.NO_ARGUMENT) -> None:
        self.default_arity: Arity = default_arity
        self._options: list[Option] = []
        self._mapping: dict[str, Option] = {}
        self._commands: dict[str, Command] = {}
        self._selected: Command | None = None

    def _command_claiming(self, name: str | None) -> Command | None:
        """Return the registered command owning an option called `name`, if any."""
        if not name:
            return None
        for command in self._commands.values():
            if any(option.matches(name) for option in command.options):
                return command
        return None

    def add_option(self, option: Option) -> None:
        """
        Add an option to the active set.

        Raises:
            ConfigurationError: The short or long name is already taken by an
                active option or by an option of a registered command.
        """
        if not isinstance(option, Option):
            raise ConfigurationError(
                f"option must be an instance of Option, got {type(option).__name__}"
            )
        for name in option.names:
            if self.resolve(name) is not None:
                raise ConfigurationError(
                    f"Option name '{name}' is already used by another option"
                )
            command = self._command_claiming(name)
            if command is not None:
                raise ConfigurationError(
                    f"Option name '{name}' is already used by command '{command.name}'"
                )
        self._activate(option)

    def _activate(self, option: Option) -> None:
        option.apply_default_arity(self.default_arity)
        self._options.append(option)
        logger.debug("Registered option %s (%s)", option, option.arity)

    def add_options(self, options: Iterable[Option]) -> None:
        for option in options:
            self.add_option(option)

    def resolve(self, name: str | None) -> Option | None:
        """Return the option with the exact short or long `name`, or None."""
        if not name:
            return None
        option = self._mapping.get(name)
        if option is None:
            option = next((opt for opt in self._options if opt.matches(name)), None)
            if option is not None:
                self._mapping[name] = option
        return option

    def add_command(self, command: Command) -> None:
        """
        Register a command without activating its options.

        Raises:
            ConfigurationError: A command with the same name exists, or one of
                its options collides with an active option or a sibling's option.
        """
        if not isinstance(command, Command):
            raise ConfigurationError(
                f"command must be an instance of Command, got {type(command).__name__}"
            )
        if command.name in self._commands:
            raise ConfigurationError(f"Command '{command.name}' is already registered")
        for option in command.options:
            for name in option.names:
                if self.resolve(name) is not None:
                    raise ConfigurationError(
                        f"Command '{command.name}' has conflicting option '{name}'"
                    )
                sibling = self._command_claiming(name)
                if sibling is not None:
                    raise ConfigurationError(
                        f"Command '{command.name}' has option '{name}' "
                        f"conflicting with command '{sibling.name}'"
                    )
            option.apply_default_arity(self.default_arity)
        self._commands[command.name] = command

    def get_command(self, name: str) -> Command | None:
        return self._commands.get(name)

    def select_command(self, name: str) -> Command:
        """
        Select a registered command and merge its options into the active set.

        Raises:
            ConfigurationError: The name is unknown or a command was already
                selected.
        """
        command = self._commands.get(name)
        if command is None:
            raise ConfigurationError(f"Command '{name}' is not registered")
        if self._selected is not None:
            raise ConfigurationError(
                f"Command '{self._selected.name}' is already selected"
            )
        for option in command.options:
            self._activate(option)
        self._selected = command
        logger.debug("Selected command '%s'", command.name)
        return command

    @property
    def selected_command(self) -> Command | None:
        return self._selected

    @property
    def options(self) -> list[Option]:
        return list(self._options)

    @property
    def commands(self) -> list[Command]:
        return list(self._commands.values())

    def has_options(self) -> bool:
        return bool(self._options)

    def has_commands(self) -> bool:
        return bool(self._commands)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.resolve(name) is not None

    def __str__(self) -> str:
        return (
            f"OptionRegistry(options={len(self._options)}, "
            f"commands={len(self._commands)}, "
            f"selected={self._selected.name if self._selected else None})"
        )

    def __repr__(self) -> str:
        return str(self)
