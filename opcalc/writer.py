"""Output writer — renders an Outcome as the single line printed on stdout."""

from __future__ import annotations

from opcalc.models import ERROR_TEXT, Outcome

# Matches the default stream conversion: %g with 6 significant digits.
DEFAULT_PRECISION = 6


def format_number(value: float, precision: int = DEFAULT_PRECISION) -> str:
    """Format a float in general notation.

    7.0 → '7', 5.5 → '5.5', 1/3 → '0.333333', 1e20 → '1e+20'
    """
    return f"{value:.{precision}g}"


def format_result(outcome: Outcome, precision: int = DEFAULT_PRECISION) -> str:
    """Render an outcome: the number, or ERROR_TEXT on any failure."""
    if not outcome.ok:
        return ERROR_TEXT
    return format_number(outcome.value, precision)
