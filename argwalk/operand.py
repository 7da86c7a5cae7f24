# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Operand` dataclass describing a positional argument.

Operands are filled in registration order by the bare tokens of an argument list.
They hold no parsed state themselves; `OperandSequencer` tracks which slots have
been filled.

A required operand may declare a default, but the default is never used to satisfy
the requirement: an unfilled required operand fails the parse. Name lookups on an
unfilled slot still return the default.
"""
from dataclasses import dataclass
from typing import Any, Callable

from argwalk.exceptions import ConfigurationError


@dataclass
class Operand:
    """
    Represents a positional operand.

    Attributes:
        name (str): Unique name used for lookups and help output.
        required (bool): True if parsing fails when the operand is not given.
        default (Any): Value returned by name lookups while the slot is unfilled.
        validator (Callable[[str], Any] | None): Predicate over the raw value.
        description (str): Help text, display only.
    """

    name: str
    required: bool = False
    default: Any = None
    validator: Callable[[str], Any] | None = None
    description: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ConfigurationError("Operand name must be a non-empty string")
        if self.validator is not None and not callable(self.validator):
            raise ConfigurationError(
                f"Operand '{self.name}' validator must be callable"
            )

    def has_validator(self) -> bool:
        return self.validator is not None

    def validates(self, value: str) -> bool:
        if self.validator is None:
            return True
        return bool(self.validator(value))

    def get_usage_text(self) -> str:
        """Return `<name>` for required operands and `[<name>]` otherwise."""
        if self.required:
            return f"<{self.name}>"
        return f"[<{self.name}>]"
