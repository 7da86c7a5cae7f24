# Argwalk CLI Parsing Engine — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `OperandSequencer`, which fills operand slots in declaration order.

The i-th bare token of an argument list fills the i-th operand. Tokens beyond the
declared operands are still accepted and kept, so `all_values()` may be longer than
the operand list.
"""
from __future__ import annotations

from typing import Any, Iterable

from argwalk.exceptions import (
    ConfigurationError,
    InvalidOperandValueError,
    OperandRequiredError,
)
from argwalk.operand import Operand


class OperandSequencer:
    """Tracks declared operands and the values supplied for them."""

    def __init__(self, operands: Iterable[Operand] | None = None) -> None:
        self._operands: list[Operand] = []
        self._values: list[str] = []
        for operand in operands or []:
            self.add_operand(operand)

    def add_operand(self, operand: Operand) -> None:
        if not isinstance(operand, Operand):
            raise ConfigurationError(
                f"operand must be an instance of Operand, got {type(operand).__name__}"
            )
        if any(existing.name == operand.name for existing in self._operands):
            raise ConfigurationError(f"Operand '{operand.name}' is already defined")
        self._operands.append(operand)

    def replace_operands(self, operands: Iterable[Operand]) -> None:
        """Swap the declared operands, keeping values consumed so far."""
        self._operands = []
        for operand in operands:
            self.add_operand(operand)

    @property
    def operands(self) -> list[Operand]:
        return list(self._operands)

    @property
    def filled(self) -> int:
        return len(self._values)

    def peek_next(self) -> Operand | None:
        """Return the operand the next value will fill, or None if all are filled."""
        if self.filled < len(self._operands):
            return self._operands[self.filled]
        return None

    def consume(self, value: str) -> None:
        """
        Fill the next operand slot with `value`.

        Raises:
            InvalidOperandValueError: The operand's validator rejected the value.
        """
        operand = self.peek_next()
        if operand is not None and not operand.validates(value):
            raise InvalidOperandValueError(operand.name, value)
        self._values.append(value)

    def check_required(self) -> None:
        """
        Raises:
            OperandRequiredError: The next unfilled operand is required.
        """
        operand = self.peek_next()
        if operand is not None and operand.required:
            raise OperandRequiredError(operand.name)

    def get(self, key: int | str) -> Any:
        """
        Look up an operand value by position or by name.

        By position, return the supplied value or None. By name, return the
        supplied value or the operand's default; unknown names give None.
        """
        if isinstance(key, str):
            for index, operand in enumerate(self._operands):
                if operand.name == key:
                    if index >= self.filled:
                        return operand.default
                    return self._values[index]
            return None
        if isinstance(key, bool) or not isinstance(key, int):
            raise TypeError(f"operand key must be an int or str, got {type(key).__name__}")
        if 0 <= key < self.filled:
            return self._values[key]
        return None

    def all_values(self) -> list[str]:
        return list(self._values)
