# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Translators from compact option definitions to `Option` objects.

These helpers never touch a registry; they only build definition objects that can be
handed to `Getopt.add_options()`.

Functions:
- parse_option_string: getopt(3)-style shorthand such as `"ab:c::"`.
- parse_option_row: one `(short, long, arity, description, default)` row or mapping.
- parse_option_list: a list mixing rows, mappings and `Option` instances.
- options_from_mapping: REQUIRED long options named after the keys of a mapping.
- format_long_options: `--name=value` tokens for a mapping of values.
"""
from __future__ import annotations

from typing import Any, Iterable, Mapping, Sequence

from argwalk.argument import Argument
from argwalk.arity import Arity
from argwalk.exceptions import ConfigurationError
from argwalk.option import Option, coerce_arity

ROW_KEYS = ("short", "long", "arity", "description", "default", "validator")


def parse_option_string(optstring: str) -> list[Option]:
    """
    Parse a getopt(3)-style option string.

    A letter or digit alone is a NO_ARGUMENT option, followed by `:` it is
    REQUIRED, followed by `::` it is OPTIONAL.

    Example:
        parse_option_string("ab:c::") → [-a NO_ARGUMENT, -b REQUIRED, -c OPTIONAL]

    Raises:
        ConfigurationError: The string is empty or not well formed.
    """
    if not isinstance(optstring, str) or not optstring:
        raise ConfigurationError("Option string must not be empty")
    options: list[Option] = []
    end = len(optstring)
    i = 0
    next_can_be_colon = False
    while i < end:
        char = optstring[i]
        if not (char.isascii() and char.isalnum()):
            expected = "a letter or ':'" if next_can_be_colon else "a letter"
            raise ConfigurationError(
                f"Option string is not well formed: expected {expected}, "
                f"found '{char}' at position {i + 1}"
            )
        colons = 0
        while i + 1 + colons < end and optstring[i + 1 + colons] == ":" and colons < 2:
            colons += 1
        arity = (Arity.NO_ARGUMENT, Arity.REQUIRED, Arity.OPTIONAL)[colons]
        options.append(Option(char, None, arity))
        i += 1 + colons
        next_can_be_colon = colons < 2
    return options


def _complete_row(row: Sequence[Any]) -> tuple[str | None, str | None, Any]:
    """Expand a one or two item row into (short, long, arity)."""
    first = row[0]
    short = first if isinstance(first, str) and len(first) == 1 else None
    long = None if short else first
    arity = None
    if len(row) > 1:
        second = row[1]
        if isinstance(second, str) and second.startswith(":"):
            if second not in (":", "::"):
                raise ConfigurationError(f"Invalid arity marker '{second}'")
            arity = Arity.REQUIRED if second == ":" else Arity.OPTIONAL
        elif short is not None:
            long = second
        else:
            raise ConfigurationError(
                f"Option row {list(row)!r} has two long names"
            )
    return short, long, arity


def parse_option_row(row: Sequence[Any] | Mapping[str, Any]) -> Option:
    """
    Build an `Option` from a row or a mapping.

    Rows are `[short, long, arity, description, default]`; the last two are
    optional. Rows shorter than three items are completed: a single character is a
    short name, a longer one a long name, and a second item of `:` or `::` marks the
    option REQUIRED or OPTIONAL. Mappings use the keys of `ROW_KEYS`.

    Raises:
        ConfigurationError: The row is empty or malformed.
    """
    if isinstance(row, Mapping):
        unknown = set(row) - set(ROW_KEYS)
        if unknown:
            raise ConfigurationError(
                f"Unknown option keys: {', '.join(sorted(unknown))}"
            )
        return Option(
            row.get("short"),
            row.get("long"),
            row.get("arity"),
            row.get("description", ""),
            Argument(default=row.get("default"), validator=row.get("validator")),
        )

    if isinstance(row, str) or not isinstance(row, Sequence) or not row:
        raise ConfigurationError(
            "Invalid option row (at least a name has to be given)"
        )
    if len(row) > 5:
        raise ConfigurationError(f"Option row {list(row)!r} has too many items")
    if len(row) < 3:
        short, long, arity = _complete_row(row)
    else:
        short, long, arity = row[0], row[1], row[2]
    description = row[3] if len(row) >= 4 else ""
    default = row[4] if len(row) == 5 else None
    arity = coerce_arity(arity)
    if default is not None and arity == Arity.NO_ARGUMENT:
        default = None
    return Option(short, long, arity, description or "", Argument(default=default))


def parse_option_list(
    options: Iterable[Option | Sequence[Any] | Mapping[str, Any]],
) -> list[Option]:
    """Translate a mix of `Option` instances, rows and mappings into options."""
    parsed: list[Option] = []
    for option in options:
        if isinstance(option, Option):
            parsed.append(option)
        else:
            parsed.append(parse_option_row(option))
    return parsed


def options_from_mapping(values: Mapping[str, Any]) -> list[Option]:
    """Return one REQUIRED long option per key of `values`."""
    return [Option(None, name, Arity.REQUIRED) for name in values]


def format_long_options(values: Mapping[str, Any]) -> list[str]:
    """Format a mapping as `--name=value` tokens, in mapping order."""
    return [f"--{name}={value}" for name, value in values.items()]
