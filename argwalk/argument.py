# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Argument` dataclass describing the value an `Option` accepts.

An argument carries the fallback value returned while nothing has been bound, an
optional validator predicate applied to every bound value, and a display name used
by help rendering (e.g. `--config <file>`).

Key Attributes:
- `default`: Value returned by the option until one is bound.
- `validator`: Callable taking the raw string and returning a truthy result if it
  is acceptable.
- `name`: Value placeholder shown in help output, `"arg"` unless given.
"""
from dataclasses import dataclass
from typing import Any, Callable

from argwalk.exceptions import ConfigurationError


@dataclass
class Argument:
    """
    Represents the value side of an option.

    Attributes:
        default (Any): Value reported while the option has no bound value.
        validator (Callable[[str], Any] | None): Predicate over the raw value.
        name (str): Placeholder used in help output.
    """

    default: Any = None
    validator: Callable[[str], Any] | None = None
    name: str = "arg"

    def __post_init__(self) -> None:
        if self.validator is not None and not callable(self.validator):
            raise ConfigurationError(
                f"validator must be callable, got {type(self.validator).__name__}"
            )
        if not isinstance(self.name, str) or not self.name:
            raise ConfigurationError("argument name must be a non-empty string")

    def has_default(self) -> bool:
        return self.default is not None

    def has_validator(self) -> bool:
        return self.validator is not None

    def validates(self, value: str) -> bool:
        """Return True if the value passes the validator (or there is none)."""
        if self.validator is None:
            return True
        return bool(self.validator(value))
