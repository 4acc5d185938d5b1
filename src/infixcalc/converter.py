"""Infix to postfix conversion (shunting-yard).

Operator Precedence (lowest to highest):
1. + -
2. * /

Operators of equal precedence are applied left to right: an incoming
operator first pops every stacked operator whose precedence is greater than
or equal to its own.
"""

import logging

from infixcalc.errors import ConversionError
from infixcalc.lexer import Token, TokenType, tokenize

logger = logging.getLogger(__name__)


PRECEDENCE = {
    TokenType.PLUS: 1,
    TokenType.MINUS: 1,
    TokenType.MULTIPLY: 2,
    TokenType.DIVIDE: 2,
}


def precedence(token: Token) -> int:
    """Return the precedence rank of an operator token."""
    return PRECEDENCE[token.type]


class PostfixConverter:
    """Reorders an infix token sequence into postfix order.

    Usage:
        converter = PostfixConverter(tokenize("3 + 2 * 4"))
        postfix = converter.convert()
    """

    def __init__(self, tokens: list[Token]):
        self.tokens = tokens

    def convert(self) -> list[Token]:
        """Run the conversion and return the postfix token list."""
        output: list[Token] = []
        operators: list[Token] = []

        for token in self.tokens:
            if token.type == TokenType.NUMBER:
                output.append(token)
            elif token.is_operator:
                while (
                    operators
                    and operators[-1].is_operator
                    and precedence(operators[-1]) >= precedence(token)
                ):
                    output.append(operators.pop())
                operators.append(token)
            else:
                raise ConversionError(f"Unexpected token '{token.text}'", token)

        while operators:
            output.append(operators.pop())

        logger.debug("Postfix form: %s", format_postfix(output))
        return output


def to_postfix(tokens: list[Token]) -> list[Token]:
    """Convenience function to convert infix tokens to postfix order."""
    return PostfixConverter(tokens).convert()


def format_postfix(tokens: list[Token]) -> str:
    """Render tokens as space-separated text, e.g. "3 2 4 * +"."""
    return " ".join(token.text for token in tokens)


def parse(source: str) -> list[Token]:
    """Tokenize an expression string and return it in postfix order.

    Args:
        source: The expression string

    Returns:
        The postfix token list
    """
    return to_postfix(tokenize(source))
