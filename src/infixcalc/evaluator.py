"""Postfix evaluator and the main `evaluate` entry point.

Consumes a postfix token sequence with an operand stack. Each operator pops
its right operand first, then its left operand, and pushes the result.
Division truncates toward zero.
"""

import logging
from typing import Callable

from infixcalc.config import DEFAULT_CONFIG, CalculatorConfig
from infixcalc.converter import parse
from infixcalc.errors import (
    DivisionByZeroError,
    EvaluationError,
    IntegerOverflowError,
    InvalidExpressionError,
)
from infixcalc.lexer import Token, TokenType

logger = logging.getLogger(__name__)


def _divide(left: int, right: int) -> int:
    """Integer division truncating toward zero."""
    if right == 0:
        raise DivisionByZeroError("Division by zero is not allowed")
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        return -quotient
    return quotient


OPERATIONS: dict[TokenType, Callable[[int, int], int]] = {
    TokenType.PLUS: lambda a, b: a + b,
    TokenType.MINUS: lambda a, b: a - b,
    TokenType.MULTIPLY: lambda a, b: a * b,
    TokenType.DIVIDE: _divide,
}


class Evaluator:
    """Evaluates a postfix token sequence.

    Usage:
        evaluator = Evaluator(CalculatorConfig(int_bits=32))
        result = evaluator.evaluate(parse("3 + 2 * 4"))
    """

    def __init__(self, config: CalculatorConfig | None = None):
        self.config = config or DEFAULT_CONFIG

    def evaluate(self, postfix: list[Token]) -> int:
        """Evaluate postfix tokens and return the single remaining value."""
        stack: list[int] = []

        for token in postfix:
            if token.type == TokenType.NUMBER:
                stack.append(self._check_range(int(token.value)))
            elif token.type in OPERATIONS:
                if len(stack) < 2:
                    raise EvaluationError(
                        f"Invalid expression: insufficient operands for operator '{token.text}'",
                        token,
                    )
                right = stack.pop()
                left = stack.pop()
                stack.append(self._check_range(OPERATIONS[token.type](left, right)))
            else:
                raise EvaluationError(f"Unexpected token '{token.text}'", token)

        if len(stack) != 1:
            raise EvaluationError(
                "Invalid expression: the evaluation stack was not properly reduced"
            )

        return stack[0]

    def _check_range(self, value: int) -> int:
        """Reject values outside the configured signed width."""
        bits = self.config.int_bits
        if bits is not None and not (self.config.min_value <= value <= self.config.max_value):
            raise IntegerOverflowError(value, bits)
        return value


# -----------------------------------------------------------------------------
# Convenience functions
# -----------------------------------------------------------------------------


def evaluate_postfix(postfix: list[Token], config: CalculatorConfig | None = None) -> int:
    """Evaluate an already converted postfix token sequence."""
    return Evaluator(config).evaluate(postfix)


def evaluate(expression: str | None, config: CalculatorConfig | None = None) -> int:
    """Evaluate an infix arithmetic expression.

    This is the main entry point: the expression is tokenized, converted to
    postfix order and evaluated. Tokens must be separated by whitespace.

    Args:
        expression: The expression string, e.g. "3 * -2 + 6"
        config: Optional settings; defaults to a signed 64-bit width

    Returns:
        The integer result

    Raises:
        InvalidExpressionError: If the expression is absent, blank or malformed
        DivisionByZeroError: If a division has a zero divisor
        IntegerOverflowError: If a value leaves the configured width

    Example:
        result = evaluate("10 + 2 * -3 - 4 / 2")
        # result = 2
    """
    if expression is None or not expression.strip():
        raise InvalidExpressionError("Expression cannot be null or empty")

    result = evaluate_postfix(parse(expression), config)
    logger.debug("Evaluated %r = %d", expression, result)
    return result
