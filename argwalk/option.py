# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Option`, a named short/long flag and the value slot it binds into.

An option is identified by a single-character short name, a long name, or both.
Its `Arity` decides what `set_value()` does with each occurrence:

- NO_ARGUMENT: every occurrence increments a count (`-vvv` → 3).
- REQUIRED / OPTIONAL: the latest value wins.
- MULTIPLE: values are appended to a list in the order they were seen.

The slot is only written by the tokenizer during `Getopt.process()` and is never
reset; build fresh options to parse a second argument list.
"""
from __future__ import annotations

from typing import Any, Callable

from argwalk.argument import Argument
from argwalk.arity import Arity
from argwalk.exceptions import (
    ConfigurationError,
    InvalidOptionValueError,
    UnexpectedValueError,
    ValueMissingError,
)


def coerce_arity(arity: Arity | str | int | None) -> Arity | None:
    """Convert an arity alias into an `Arity`, leaving None untouched."""
    if arity is None or isinstance(arity, Arity):
        return arity
    try:
        return Arity(arity)
    except ValueError as error:
        raise ConfigurationError(str(error)) from error


class Option:
    """
    Represents a command-line option.

    Args:
        short (str | None): Single character name used as `-x`.
        long (str | None): Word used as `--word`.
        arity (Arity | str | int | None): How values are bound. When None, the
            `default_arity` setting of the `Getopt` it is registered on applies.
        description (str): Help text, display only.
        argument (Argument | None): Default value, validator and value name.
        default (Any): Shortcut for `Argument(default=...)`.
        validator (Callable | None): Shortcut for `Argument(validator=...)`.
    """

    def __init__(
        self,
        short: str | None = None,
        long: str | None = None,
        arity: Arity | str | int | None = None,
        description: str = "",
        argument: Argument | None = None,
        *,
        default: Any = None,
        validator: Callable[[str], Any] | None = None,
    ) -> None:
        self.short: str | None = self._validate_short(short)
        self.long: str | None = self._validate_long(long)
        if self.short is None and self.long is None:
            raise ConfigurationError("The short and long name may not both be empty")
        self._arity: Arity | None = coerce_arity(arity)
        self.description: str = description
        if argument is None:
            argument = Argument(default=default, validator=validator)
        elif default is not None or validator is not None:
            raise ConfigurationError(
                "Pass either an Argument or default/validator, not both"
            )
        elif not isinstance(argument, Argument):
            raise ConfigurationError("argument must be an instance of Argument")
        self.argument: Argument = argument
        self._value: Any = None

    @staticmethod
    def _validate_short(short: str | None) -> str | None:
        if short is None or short == "":
            return None
        if not isinstance(short, str) or len(short) != 1:
            raise ConfigurationError(
                f"Short option '{short}' must be a single character"
            )
        if short == "-" or short.isspace():
            raise ConfigurationError(f"Short option '{short}' is not a valid name")
        return short

    @staticmethod
    def _validate_long(long: str | None) -> str | None:
        if long is None or long == "":
            return None
        if not isinstance(long, str):
            raise ConfigurationError(f"Long option '{long}' must be a string")
        if long.startswith("-"):
            raise ConfigurationError(
                f"Long option '{long}' must be given without leading dashes"
            )
        if "=" in long or any(char.isspace() for char in long):
            raise ConfigurationError(
                f"Long option '{long}' may not contain '=' or whitespace"
            )
        return long

    @property
    def arity(self) -> Arity:
        """The arity of the option, NO_ARGUMENT when none was given."""
        return self._arity if self._arity is not None else Arity.NO_ARGUMENT

    def has_explicit_arity(self) -> bool:
        return self._arity is not None

    def apply_default_arity(self, arity: Arity) -> None:
        """Use `arity` unless the option was constructed with one."""
        if self._arity is None:
            self._arity = arity

    @property
    def name(self) -> str:
        """The name used in messages: long if present, else short."""
        return self.long or self.short  # type: ignore[return-value]

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(name for name in (self.short, self.long) if name is not None)

    @property
    def flags(self) -> tuple[str, ...]:
        """Command-line spellings, e.g. `("-v", "--verbose")`."""
        flags = []
        if self.short:
            flags.append(f"-{self.short}")
        if self.long:
            flags.append(f"--{self.long}")
        return tuple(flags)

    def matches(self, name: str | None) -> bool:
        if not name:
            return False
        return name in (self.short, self.long)

    def set_value(self, value: str | None = None) -> None:
        """
        Record one occurrence of the option.

        Args:
            value (str | None): The bound value, or None for an occurrence
                without a value.

        Raises:
            ValueMissingError: A REQUIRED or MULTIPLE option got no value.
            UnexpectedValueError: A NO_ARGUMENT option got a value.
            InvalidOptionValueError: The argument validator rejected the value.
        """
        arity = self.arity
        if value is None:
            if arity.forces_value:
                raise ValueMissingError(self.name)
            if arity == Arity.NO_ARGUMENT:
                self._value = (self._value or 0) + 1
            return

        if arity == Arity.NO_ARGUMENT:
            raise UnexpectedValueError(self.name)
        if not self.argument.validates(value):
            raise InvalidOptionValueError(self.name, value)
        if arity == Arity.MULTIPLE:
            if self._value is None:
                self._value = []
            self._value.append(value)
        else:
            self._value = value

    @property
    def value(self) -> Any:
        """The bound value, falling back to the argument default."""
        value = self._value if self._value is not None else self.argument.default
        if value is None and self.arity == Arity.MULTIPLE:
            return []
        return value

    @property
    def count(self) -> int:
        """Number of occurrences for NO_ARGUMENT options, number of values otherwise."""
        if self._value is None:
            return 0
        if isinstance(self._value, list):
            return len(self._value)
        if isinstance(self._value, int):
            return self._value
        return 1

    def is_set(self) -> bool:
        """True if the option reports a value: a positive count, a non-empty list or a string."""
        value = self.value
        if isinstance(value, (int, list)):
            return bool(value)
        return value is not None

    def __str__(self) -> str:
        return ", ".join(self.flags)

    def __repr__(self) -> str:
        return (
            f"Option(short={self.short!r}, long={self.long!r}, "
            f"arity={self.arity}, value={self.value!r})"
        )
