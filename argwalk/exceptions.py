# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by argwalk.

Definition problems are reported while options, operands and commands are being
registered, before a single token is read. Parse problems abort `Getopt.process()`
immediately and carry the name of the offending option or operand.

All exceptions inherit from `ArgwalkError`, the base exception for the package.

Exception Hierarchy:
- ArgwalkError
    ├── ConfigurationError
    ├── ImmutableAccessError
    └── ParseError
        ├── UnknownOptionError
        ├── ValueMissingError
        ├── UnexpectedValueError
        ├── InvalidOptionValueError
        ├── InvalidOperandValueError
        └── OperandRequiredError
"""


class ArgwalkError(Exception):
    """Base exception for argwalk."""


class ConfigurationError(ArgwalkError):
    """Exception raised when an option, operand, command or setting is malformed."""


class ImmutableAccessError(ArgwalkError, TypeError):
    """Exception raised when writing through the read-only parse result."""


class ParseError(ArgwalkError):
    """Base exception for failures while processing an argument list."""

    def __init__(self, message: str, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name


class UnknownOptionError(ParseError):
    """Exception raised when a token names no registered option."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Option '{name}' is unknown", name)


class ValueMissingError(ParseError):
    """Exception raised when a required or multiple option gets no value."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Option '{name}' must have a value", name)


class UnexpectedValueError(ParseError):
    """Exception raised when a value is given to an option that takes none."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Option '{name}' does not accept a value", name)


class InvalidOptionValueError(ParseError):
    """Exception raised when an option argument validator rejects a value."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"Option '{name}' has an invalid value: {value!r}", name)
        self.value = value


class InvalidOperandValueError(ParseError):
    """Exception raised when an operand validator rejects a value."""

    def __init__(self, name: str, value: str) -> None:
        super().__init__(f"Operand '{name}' has an invalid value: {value!r}", name)
        self.value = value


class OperandRequiredError(ParseError):
    """Exception raised when a required operand is still unfilled after parsing."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Operand '{name}' is required", name)
