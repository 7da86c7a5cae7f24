# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Settings model for `Getopt`.

- `default_arity`: applied to options registered without an arity.
- `script_name`: program name shown in help output; never used while parsing.
"""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from argwalk.arity import Arity

SETTING_SCRIPT_NAME = "script_name"
SETTING_DEFAULT_ARITY = "default_arity"


class GetoptSettings(BaseModel):
    """Settings consumed by `Getopt` and its collaborators."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    default_arity: Arity = Arity.NO_ARGUMENT
    script_name: str | None = None

    @field_validator("default_arity", mode="before")
    @classmethod
    def validate_default_arity(cls, value: Any) -> Arity:
        if isinstance(value, Arity):
            return value
        return Arity(value)
