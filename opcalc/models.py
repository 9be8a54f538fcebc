"""Data models for opcalc.

Operator enum, Request, Outcome and the error hierarchy: the typed
structures that flow through reader → evaluator → writer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

# Printed in place of a number for every failure.
ERROR_TEXT = "Error!"


class Operator(str, Enum):
    """Supported binary operators."""

    ADD = "+"
    SUB = "-"
    MUL = "*"
    DIV = "/"


class CalculatorError(ValueError):
    """Base for every failure that is reported as ERROR_TEXT."""

    def __init__(self, reason: str, detail: str = "") -> None:
        super().__init__(reason if not detail else f"{reason}: {detail}")
        self.reason = reason
        self.detail = detail


class InputError(CalculatorError):
    """Raised when the input is missing tokens or an operand is not a number."""


class OperationError(CalculatorError):
    """Raised for division by zero and unrecognised operators."""


@dataclass
class Request:
    """One parsed calculation.

    An operator character outside Operator is kept as a plain str so the
    evaluator can reject it.
    """

    operator: Union[Operator, str]
    left: float
    right: float


@dataclass
class Outcome:
    """Result of one calculation: a number, or a failure reason."""

    value: Optional[float] = None
    error: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.value is None) == (self.error is None):
            raise ValueError("Outcome needs exactly one of value or error")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: float) -> Outcome:
        return cls(value=value)

    @classmethod
    def failure(cls, reason: str) -> Outcome:
        return cls(error=reason)
