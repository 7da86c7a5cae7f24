# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Loader for option, operand and command definitions stored in YAML or TOML.

Example (YAML):
    settings:
      script_name: backup
      default_arity: required
    options:
      - {short: v, long: verbose, arity: none, description: Print more}
      - {short: o, long: output, description: Write to file}
    operands:
      - {name: source, required: true, validator: existing_dir}
    commands:
      - name: restore
        description: Restore a backup
        handler: my_app.restore
        options:
          - {long: force, arity: none}

Validators and handlers are dotted import paths. A validator without a dot names one
of the predicates in `argwalk.validators`.
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Callable

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from argwalk import validators
from argwalk.argument import Argument
from argwalk.arity import Arity
from argwalk.command import Command
from argwalk.exceptions import ConfigurationError
from argwalk.getopt import Getopt
from argwalk.logger import logger
from argwalk.operand import Operand
from argwalk.option import Option
from argwalk.option_string import parse_option_string
from argwalk.settings import GetoptSettings


def import_callable(dotted_path: str) -> Callable[..., Any]:
    """Import a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        target = getattr(validators, attr, None)
        if not callable(target):
            raise ConfigurationError(f"Invalid import path: '{dotted_path}'")
        return target
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ConfigurationError(f"Could not import '{dotted_path}': {error}") from error
    try:
        target = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ConfigurationError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error
    if not callable(target):
        raise ConfigurationError(f"'{dotted_path}' is not callable")
    return target


class RawOption(BaseModel):
    """Raw option model for argwalk definition files."""

    model_config = ConfigDict(extra="forbid")

    short: str | None = None
    long: str | None = None
    arity: Arity | None = None
    description: str = ""
    default: Any = None
    validator: str | None = None
    argument_name: str = "arg"

    @field_validator("arity", mode="before")
    @classmethod
    def validate_arity(cls, value: Any) -> Arity | None:
        if value is None or isinstance(value, Arity):
            return value
        return Arity(value)

    def to_option(self) -> Option:
        validator = import_callable(self.validator) if self.validator else None
        return Option(
            self.short,
            self.long,
            self.arity,
            self.description,
            Argument(default=self.default, validator=validator, name=self.argument_name),
        )


class RawOperand(BaseModel):
    """Raw operand model for argwalk definition files."""

    model_config = ConfigDict(extra="forbid")

    name: str
    required: bool = False
    default: Any = None
    validator: str | None = None
    description: str = ""

    def to_operand(self) -> Operand:
        validator = import_callable(self.validator) if self.validator else None
        return Operand(
            name=self.name,
            required=self.required,
            default=self.default,
            validator=validator,
            description=self.description,
        )


def _to_options(raw_options: str | list[RawOption]) -> list[Option]:
    if isinstance(raw_options, str):
        return parse_option_string(raw_options)
    return [raw_option.to_option() for raw_option in raw_options]


class RawCommand(BaseModel):
    """Raw command model for argwalk definition files."""

    model_config = ConfigDict(extra="forbid")

    name: str
    description: str = ""
    short_description: str | None = None
    handler: str | None = None
    options: str | list[RawOption] = Field(default_factory=list)
    operands: list[RawOperand] = Field(default_factory=list)

    def to_command(self) -> Command:
        handler = import_callable(self.handler) if self.handler else None
        return Command(
            self.name,
            self.description,
            handler,
            _to_options(self.options),
            [raw_operand.to_operand() for raw_operand in self.operands],
            self.short_description,
        )


class GetoptConfig(BaseModel):
    """Complete definition set for one `Getopt`."""

    model_config = ConfigDict(extra="forbid")

    settings: GetoptSettings = Field(default_factory=GetoptSettings)
    options: str | list[RawOption] = Field(default_factory=list)
    operands: list[RawOperand] = Field(default_factory=list)
    commands: list[RawCommand] = Field(default_factory=list)

    def to_getopt(self) -> Getopt:
        getopt = Getopt(settings=self.settings)
        getopt.add_options(_to_options(self.options))
        getopt.add_operands(raw_operand.to_operand() for raw_operand in self.operands)
        getopt.add_commands(raw_command.to_command() for raw_command in self.commands)
        return getopt


def from_mapping(raw_config: Any) -> Getopt:
    """Build a `Getopt` from an already loaded mapping."""
    if not isinstance(raw_config, dict):
        raise ConfigurationError(
            "Definition file must contain a mapping with 'options', 'operands' "
            "and/or 'commands'.\n"
            "Example:\n"
            "options:\n"
            "  - {short: v, long: verbose, arity: none}\n"
            "operands:\n"
            "  - {name: input, required: true}"
        )
    try:
        config = GetoptConfig(**raw_config)
    except ValidationError as error:
        raise ConfigurationError(f"Invalid definition file: {error}") from error
    return config.to_getopt()


def loader(file_path: Path | str) -> Getopt:
    """
    Load option definitions from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to a `.yaml`, `.yml` or `.toml` file.

    Returns:
        Getopt: A `Getopt` with the loaded settings, options, operands and commands.

    Raises:
        ConfigurationError: The file is missing, has an unsupported format, or its
            content is not a valid definition set.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise ConfigurationError(f"No such definition file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        try:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigurationError(f"Unsupported definition format: {suffix}")
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise ConfigurationError(f"Cannot parse '{path}': {error}") from error

    logger.debug("Loaded definitions from '%s'", path)
    return from_mapping(raw_config)
