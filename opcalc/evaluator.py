"""Evaluator — applies a Request's operator to its operands."""

from __future__ import annotations

import operator
from typing import Callable

from opcalc.models import Operator, OperationError, Request

OPS: dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: operator.add,
    Operator.SUB: operator.sub,
    Operator.MUL: operator.mul,
    Operator.DIV: operator.truediv,
}


def evaluate(request: Request) -> float:
    """Compute the result of a request.

    Raises:
        OperationError: for an unknown operator or division by zero.
    """
    try:
        op = Operator(request.operator)
    except ValueError:
        raise OperationError("unknown_operator", repr(request.operator)) from None
    # -0.0 == 0 as well
    if op is Operator.DIV and request.right == 0:
        raise OperationError("division_by_zero")
    return float(OPS[op](request.left, request.right))
