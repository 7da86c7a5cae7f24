# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ParseResult`, the read-only view returned by `Getopt.process()`.

The result is a `Mapping` from option names to option values. Short and long names
of the same option answer with the same value. Iterating yields one key per option
that reports a value (short name preferred), skipping flags never seen, options
without a value, empty lists and empty strings. Membership agrees with iteration.
Any write raises `ImmutableAccessError`.

The view reads live from the registry and operand sequencer it wraps; it holds no
copy of the parsed state.
"""
from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Iterator, NoReturn

from argwalk.command import Command
from argwalk.exceptions import ImmutableAccessError
from argwalk.operands import OperandSequencer
from argwalk.option import Option
from argwalk.registry import OptionRegistry


class ParseResult(Mapping):
    """Read-only access to the options, command and operands of one parse."""

    def __init__(self, registry: OptionRegistry, sequencer: OperandSequencer) -> None:
        self._registry = registry
        self._sequencer = sequencer
        self._frozen = True

    def __setattr__(self, name: str, value: Any) -> None:
        if getattr(self, "_frozen", False):
            raise ImmutableAccessError("ParseResult is read only")
        super().__setattr__(name, value)

    def __delattr__(self, name: str) -> NoReturn:
        raise ImmutableAccessError("ParseResult is read only")

    def __getitem__(self, name: str) -> Any:
        option = self._registry.resolve(name)
        if option is None:
            raise KeyError(name)
        return option.value

    @staticmethod
    def _is_listed(option: Option) -> bool:
        return option.is_set() and option.value != ""

    def __contains__(self, name: object) -> bool:
        if not isinstance(name, str):
            return False
        option = self._registry.resolve(name)
        return option is not None and self._is_listed(option)

    def __iter__(self) -> Iterator[str]:
        for option in self._registry.options:
            if self._is_listed(option):
                yield option.short or option.long  # type: ignore[misc]

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __setitem__(self, name: str, value: Any) -> NoReturn:
        raise ImmutableAccessError(f"Cannot set '{name}': ParseResult is read only")

    def __delitem__(self, name: str) -> NoReturn:
        raise ImmutableAccessError(f"Cannot delete '{name}': ParseResult is read only")

    def option_value(self, name: str) -> Any:
        """Return the value of the option called `name`, or None if unknown."""
        option = self._registry.resolve(name)
        return option.value if option is not None else None

    def is_set(self, name: str) -> bool:
        option = self._registry.resolve(name)
        return option is not None and option.is_set()

    def count(self, name: str) -> int:
        """Occurrences of a flag, or number of values bound to the option."""
        option = self._registry.resolve(name)
        return option.count if option is not None else 0

    def all_set_options(self) -> dict[str, Any]:
        """Return every set option keyed by both names, empty strings included."""
        result: dict[str, Any] = {}
        for option in self._registry.options:
            if not option.is_set():
                continue
            for name in option.names:
                result[name] = option.value
        return result

    def selected_command(self) -> Command | None:
        return self._registry.selected_command

    def operand_value(self, key: int | str) -> Any:
        """Return an operand by position (value or None) or by name (value or default)."""
        return self._sequencer.get(key)

    def all_operand_values(self) -> list[str]:
        return self._sequencer.all_values()

    def __repr__(self) -> str:
        command = self.selected_command()
        return (
            f"ParseResult(options={dict(self)!r}, "
            f"command={command.name if command else None!r}, "
            f"operands={self.all_operand_values()!r})"
        )
