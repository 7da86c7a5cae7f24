# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Arity`, the enum describing how many values an option accepts.

Supports alias coercion for shorthand or config-friendly values, including the
integer constants used by getopt-style libraries (0 to 3), so option definitions
loaded from YAML or TOML can spell the arity however is convenient.

Exports:
    - Arity: Enum of allowed option arities.

Example:
    Arity("required") → Arity.REQUIRED
    Arity("flag")     → Arity.NO_ARGUMENT (via alias)
    Arity(3)          → Arity.MULTIPLE (via alias)
"""
from __future__ import annotations

from enum import Enum


class Arity(Enum):
    """
    Defines how an option binds values when it is encountered.

    Members:
        NO_ARGUMENT: The option takes no value; every occurrence increments a count.
        REQUIRED: The option must be given a value (`--out=x`, `--out x`, `-ox`, `-o x`).
        OPTIONAL: The option may be given an inline value (`--color=auto`, `-cauto`),
            it never consumes the following token.
        MULTIPLE: Like REQUIRED, but every occurrence appends to a list.

    Aliases:
        - "none", "flag", 0 → "no_argument"
        - 1 → "required"
        - 2 → "optional"
        - "list", 3 → "multiple"
    """

    NO_ARGUMENT = "no_argument"
    REQUIRED = "required"
    OPTIONAL = "optional"
    MULTIPLE = "multiple"

    @classmethod
    def choices(cls) -> list[Arity]:
        """Return a list of all arities."""
        return list(cls)

    @property
    def takes_value(self) -> bool:
        """True if the option binds a value rather than counting occurrences."""
        return self is not Arity.NO_ARGUMENT

    @property
    def forces_value(self) -> bool:
        """True if the option fails without a value."""
        return self in (Arity.REQUIRED, Arity.MULTIPLE)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "none": "no_argument",
            "flag": "no_argument",
            "list": "multiple",
            "0": "no_argument",
            "1": "required",
            "2": "optional",
            "3": "multiple",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> Arity:
        if isinstance(value, bool) or not isinstance(value, (str, int)):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = str(value).strip().lower().replace("-", "_")
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def __str__(self) -> str:
        """Return the string representation of the arity."""
        return self.value
