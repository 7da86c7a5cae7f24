# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Reusable validator predicates for option arguments and operands.

Each factory returns a callable taking the raw string value and returning a bool,
suitable for `Argument(validator=...)` and `Operand(validator=...)`.

Included Validators:
- is_int: Accepts integer literals, including negative ones.
- int_range: Accepts integers within an inclusive range.
- one_of: Accepts specific words (case-insensitive).
- existing_file / existing_dir: Accepts paths that exist as a file or directory.
- matches: Accepts values fully matching a regular expression.
"""
import re
from pathlib import Path
from typing import Callable, Sequence

Predicate = Callable[[str], bool]


def is_int(text: str) -> bool:
    """Return True if the text is an integer literal."""
    try:
        int(text)
    except ValueError:
        return False
    return True


def int_range(minimum: int, maximum: int) -> Predicate:
    """Validator for integer ranges."""

    def validate(text: str) -> bool:
        try:
            value = int(text)
        except ValueError:
            return False
        return minimum <= value <= maximum

    return validate


def one_of(words: Sequence[str]) -> Predicate:
    """Validator for specific word inputs."""
    allowed = {word.upper() for word in words}

    def validate(text: str) -> bool:
        return text.upper() in allowed

    return validate


def existing_file(text: str) -> bool:
    return Path(text).is_file()


def existing_dir(text: str) -> bool:
    return Path(text).is_dir()


def matches(pattern: str) -> Predicate:
    """Validator for values fully matching a regular expression."""
    compiled = re.compile(pattern)

    def validate(text: str) -> bool:
        return compiled.fullmatch(text) is not None

    return validate
