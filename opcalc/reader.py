"""Input reader — turns raw stdin text into a Request.

The operator is a single character: the first non-whitespace character of
the input, whether or not whitespace follows it. The two operands are the
next two whitespace-separated tokens; anything after them is ignored.
"""

from __future__ import annotations

import math
import re
from typing import Union

from opcalc.models import InputError, Operator, Request

# Plain ASCII decimal or scientific literal. No inf/nan, hex or digit separators.
_NUMBER_RE = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?', re.ASCII)


def parse_operator(char: str) -> Union[Operator, str]:
    """Map a character to an Operator, or return it unchanged if unknown."""
    try:
        return Operator(char)
    except ValueError:
        return char


def parse_operand(token: str) -> float:
    """Parse one operand token.

    Raises:
        InputError: if the token is not a plain numeric literal, or is
            too large to be represented as a finite float.
    """
    if not _NUMBER_RE.fullmatch(token):
        raise InputError("invalid_operand", token)
    value = float(token)
    if math.isinf(value):
        raise InputError("invalid_operand", f"{token} out of range")
    return value


def read_request(text: str) -> Request:
    """Read an operator and two operands from text.

    Raises:
        InputError: on empty input, a missing operand, or a non-numeric operand.
    """
    stripped = text.lstrip()
    if not stripped:
        raise InputError("missing_operator")

    operator = parse_operator(stripped[0])
    tokens = stripped[1:].split()
    if len(tokens) < 2:
        raise InputError("missing_operand", f"expected 2, got {len(tokens)}")

    return Request(
        operator=operator,
        left=parse_operand(tokens[0]),
        right=parse_operand(tokens[1]),
    )
