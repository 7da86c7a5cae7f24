"""
Argwalk CLI Parsing Engine

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import Argument
from .arity import Arity
from .command import Command
from .exceptions import (
    ArgwalkError,
    ConfigurationError,
    ImmutableAccessError,
    InvalidOperandValueError,
    InvalidOptionValueError,
    OperandRequiredError,
    ParseError,
    UnexpectedValueError,
    UnknownOptionError,
    ValueMissingError,
)
from .getopt import Getopt
from .logger import logger
from .operand import Operand
from .option import Option
from .result import ParseResult

__all__ = [
    "Argument",
    "Arity",
    "Command",
    "Getopt",
    "Operand",
    "Option",
    "ParseResult",
    "ArgwalkError",
    "ConfigurationError",
    "ImmutableAccessError",
    "InvalidOperandValueError",
    "InvalidOptionValueError",
    "OperandRequiredError",
    "ParseError",
    "UnexpectedValueError",
    "UnknownOptionError",
    "ValueMissingError",
    "logger",
]
