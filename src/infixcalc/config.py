"""Calculator configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_INT_BITS = 64

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class CalculatorConfig:
    """Settings shared by the evaluator and the CLI.

    Attributes:
        int_bits: Signed integer width enforced on literals and results,
            or None for unbounded Python ints
        log_level: Logging level name used by the CLI
    """

    int_bits: int | None = DEFAULT_INT_BITS
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.int_bits is not None and self.int_bits < 2:
            raise ValueError(f"int_bits must be at least 2, got {self.int_bits}")
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level!r}")

    @classmethod
    def from_env(cls) -> CalculatorConfig:
        """Create config from environment variables.

        Resolution order for each setting:
        1. INFIXCALC_INT_BITS / INFIXCALC_LOG_LEVEL env vars
        2. Defaults (64 bits, WARNING)

        INFIXCALC_INT_BITS accepts an integer, or "none"/"0" to disable the
        width check.
        """
        int_bits: int | None = DEFAULT_INT_BITS
        raw_bits = os.environ.get("INFIXCALC_INT_BITS")
        if raw_bits:
            int_bits = parse_int_bits(raw_bits)

        log_level = os.environ.get("INFIXCALC_LOG_LEVEL", "WARNING").upper()
        return cls(int_bits=int_bits, log_level=log_level)

    @property
    def min_value(self) -> int | None:
        if self.int_bits is None:
            return None
        return -(1 << (self.int_bits - 1))

    @property
    def max_value(self) -> int | None:
        if self.int_bits is None:
            return None
        return (1 << (self.int_bits - 1)) - 1


def parse_int_bits(raw: str) -> int | None:
    """Parse an integer width setting.

    Raises:
        ValueError: If the value is neither an integer nor "none".
    """
    value = raw.strip().lower()
    if value in ("none", "0"):
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Invalid integer width: {raw!r}") from None


DEFAULT_CONFIG = CalculatorConfig()
