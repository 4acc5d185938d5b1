"""Error taxonomy for the infixcalc pipeline.

Every failure raised by the pipeline is a CalculatorError tagged with an
ErrorKind, so callers can tell malformed input apart from arithmetic
failures without matching on messages:

- INVALID_ARGUMENT: absent or blank input, bad syntax, unknown tokens,
  missing operands, an expression that does not reduce to one value
- ARITHMETIC: division by zero, integer overflow (when a width is set)

The concrete classes also derive from the matching builtin (ValueError,
ZeroDivisionError, OverflowError) so plain `except ValueError` works too.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from infixcalc.lexer import Token


class ErrorKind(Enum):
    """Classification of a calculator failure."""

    INVALID_ARGUMENT = "invalid_argument"
    ARITHMETIC = "arithmetic"


class CalculatorError(Exception):
    """Base class for all calculator errors."""

    kind: ErrorKind = ErrorKind.INVALID_ARGUMENT


class InvalidExpressionError(CalculatorError, ValueError):
    """The expression is absent, blank, or malformed."""

    kind = ErrorKind.INVALID_ARGUMENT


class TokenizeError(InvalidExpressionError):
    """Error while splitting the expression into tokens."""

    def __init__(self, message: str, position: int):
        self.position = position
        super().__init__(f"{message} at position {position}")


class ConversionError(InvalidExpressionError):
    """Error while reordering tokens into postfix form."""

    def __init__(self, message: str, token: Token):
        self.token = token
        super().__init__(f"{message} at position {token.position}")


class EvaluationError(InvalidExpressionError):
    """Malformed postfix sequence found during evaluation."""

    def __init__(self, message: str, token: Token | None = None):
        self.token = token
        if token is not None:
            message = f"{message} at position {token.position}"
        super().__init__(message)


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """Division with a zero divisor."""

    kind = ErrorKind.ARITHMETIC


class IntegerOverflowError(CalculatorError, OverflowError):
    """A literal or intermediate result left the configured integer width."""

    kind = ErrorKind.ARITHMETIC

    def __init__(self, value: int, bits: int):
        self.value = value
        self.bits = bits
        super().__init__(f"Value {value} does not fit in a signed {bits}-bit integer")
