"""Runtime settings for opcalc, read from OPCALC_* environment variables.

Command-line options take precedence; these only supply the defaults.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from opcalc.writer import DEFAULT_PRECISION

logger = logging.getLogger("opcalc")

MIN_PRECISION = 1
MAX_PRECISION = 17


class LogLevel(str, Enum):
    """Diagnostic verbosity on stderr."""

    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"


@dataclass
class Settings:
    """Output precision and log verbosity."""

    precision: int = DEFAULT_PRECISION
    log_level: LogLevel = LogLevel.WARNING

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> Settings:
        """Build settings from the environment, falling back to defaults.

        Invalid values are reported as warnings and ignored.
        """
        env = os.environ if env is None else env
        settings = cls()

        raw = env.get("OPCALC_PRECISION", "").strip()
        if raw:
            try:
                precision = int(raw)
            except ValueError:
                precision = -1
            if MIN_PRECISION <= precision <= MAX_PRECISION:
                settings.precision = precision
            else:
                logger.warning("Ignoring OPCALC_PRECISION=%r (expected %d..%d)",
                               raw, MIN_PRECISION, MAX_PRECISION)

        raw = env.get("OPCALC_LOG_LEVEL", "").strip()
        if raw:
            try:
                settings.log_level = LogLevel(raw.upper())
            except ValueError:
                logger.warning("Ignoring OPCALC_LOG_LEVEL=%r", raw)

        return settings
