"""Evaluation of parsed transmissions against the built-in actors."""

from __future__ import annotations

from enum import Enum
import logging
from math import prod
import sys
from typing import Iterable, Optional, TextIO

from ..errors import ArityError
from .syntax import Transmission

logger = logging.getLogger(__name__)


class Operation(Enum):
    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"

    @classmethod
    def from_identifier(cls, identifier: str) -> Optional["Operation"]:
        try:
            return cls(identifier)
        except ValueError:
            return None


def apply_operation(operation: Operation, parts: list[int]) -> int:
    if operation is Operation.ADD:
        return sum(parts)
    elif operation is Operation.SUBTRACT:
        if not parts:
            raise ArityError(operation.value, 1, 0)
        head, *tail = parts
        return head - sum(tail)
    elif operation is Operation.MULTIPLY:
        return prod(parts)
    raise ValueError(f"Unhandled operation {operation!r}")


class Interpreter:
    """Executes transmissions in order, one output line per produced value."""

    def __init__(self, transmissions: Iterable[Transmission], output: Optional[TextIO] = None):
        self._transmissions = transmissions
        self._output = output

    @property
    def output(self) -> TextIO:
        return self._output if self._output is not None else sys.stdout

    def evaluate(self, transmission: Transmission) -> Optional[int]:
        """Return the value a transmission produces, or ``None`` if ignored."""

        identifier = transmission.actor_reference.identifier
        operation = Operation.from_identifier(identifier)
        if operation is None:
            logger.info(
                "ignoring transmission to unknown actor %r at line %d",
                identifier,
                transmission.line,
            )
            return None
        parts = transmission.message.parts
        value = apply_operation(operation, parts)
        logger.debug("%s%r -> %d", identifier, parts, value)
        return value

    def interpret(self) -> None:
        output = self.output
        for transmission in self._transmissions:
            value = self.evaluate(transmission)
            if value is not None:
                print(value, file=output)


__all__ = [
    "Interpreter",
    "Operation",
    "apply_operation",
]
