"""opcalc pipeline — read → evaluate, folding failures into an Outcome.

Only CalculatorError is turned into a failed Outcome. Anything else is a
bug and propagates to the caller.
"""

from __future__ import annotations

import logging

from opcalc.evaluator import evaluate
from opcalc.models import CalculatorError, Outcome
from opcalc.reader import read_request

logger = logging.getLogger("opcalc")


def calculate(text: str) -> Outcome:
    """Run one calculation over the raw input text."""
    try:
        request = read_request(text)
        logger.debug("Parsed request: %s", request)
        value = evaluate(request)
    except CalculatorError as exc:
        logger.info("Rejected (%s): %s", type(exc).__name__, exc)
        return Outcome.failure(exc.reason)
    return Outcome.success(value)
