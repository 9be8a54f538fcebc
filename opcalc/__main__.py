"""CLI for opcalc.

Usage:
    echo "+ 3 4" | python -m opcalc                  # prints 7
    echo "/ 5 0" | python -m opcalc                  # prints Error!
    echo "/ 1 3" | python -m opcalc --precision 10   # prints 0.3333333333
    echo "? 1 2" | python -m opcalc --log-level info # reason on stderr
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from opcalc.calculator import calculate
from opcalc.config import MAX_PRECISION, MIN_PRECISION, LogLevel, Settings
from opcalc.writer import format_result

app = typer.Typer(
    name="opcalc",
    help="Apply one arithmetic operator to two numbers read from stdin",
    add_completion=False,
)
console = Console(stderr=True)
logger = logging.getLogger("opcalc")


def _setup_logging(level: LogLevel) -> None:
    """Route the opcalc logger to stderr through Rich, once per process."""
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=console, show_time=False, show_path=False))
    logger.setLevel(level.value)


@app.command()
def cmd_calculate(
    precision: Optional[int] = typer.Option(
        None, "--precision", "-p", min=MIN_PRECISION, max=MAX_PRECISION,
        help="Significant digits in the result (env OPCALC_PRECISION, default 6)",
    ),
    log_level: Optional[LogLevel] = typer.Option(
        None, "--log-level", case_sensitive=False,
        help="Diagnostics on stderr (env OPCALC_LOG_LEVEL, default WARNING)",
    ),
) -> None:
    """Read '<operator> <left> <right>' from stdin and print the result.

    Prints Error! for division by zero, an unknown operator or malformed
    input. The exit status is 0 either way.
    """
    # Installed before reading the environment so its warnings have a handler.
    _setup_logging(log_level or LogLevel.WARNING)
    settings = Settings.from_env()
    if log_level is None:
        _setup_logging(settings.log_level)

    outcome = calculate(sys.stdin.read())
    typer.echo(format_result(outcome, precision or settings.precision))


if __name__ == "__main__":
    app()
