"""Integer arithmetic expression evaluator.

This module provides:
- Lexer: Tokenizes expression strings, folding unary minus into numbers
- PostfixConverter: Reorders tokens into postfix order (shunting-yard)
- Evaluator: Evaluates postfix tokens with an operand stack
- evaluate: The single entry point, text in, int out
"""

from infixcalc.config import DEFAULT_CONFIG, CalculatorConfig
from infixcalc.converter import (
    PRECEDENCE,
    PostfixConverter,
    format_postfix,
    parse,
    to_postfix,
)
from infixcalc.errors import (
    CalculatorError,
    ConversionError,
    DivisionByZeroError,
    ErrorKind,
    EvaluationError,
    IntegerOverflowError,
    InvalidExpressionError,
    TokenizeError,
)
from infixcalc.evaluator import Evaluator, evaluate, evaluate_postfix
from infixcalc.lexer import Lexer, Token, TokenType, tokenize

__all__ = [
    # Config
    "CalculatorConfig",
    "DEFAULT_CONFIG",
    # Errors
    "CalculatorError",
    "ConversionError",
    "DivisionByZeroError",
    "ErrorKind",
    "EvaluationError",
    "IntegerOverflowError",
    "InvalidExpressionError",
    "TokenizeError",
    # Lexer
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    # Converter
    "PRECEDENCE",
    "PostfixConverter",
    "format_postfix",
    "parse",
    "to_postfix",
    # Evaluator
    "Evaluator",
    "evaluate",
    "evaluate_postfix",
]
