"""Tokenizer for infix arithmetic expressions.

Splits an expression string on whitespace and classifies each word.

Token types:
- Literals: NUMBER (signed decimal integer)
- Operators: PLUS, MINUS, MULTIPLY, DIVIDE
- UNKNOWN: any other word, passed through for the converter to reject

A standalone "-" at the start of the expression, or directly after another
operator, is a unary sign and is folded into the number that follows it.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator

from infixcalc.errors import TokenizeError

logger = logging.getLogger(__name__)


class TokenType(Enum):
    """Types of tokens in an arithmetic expression."""

    NUMBER = auto()

    PLUS = auto()        # +
    MINUS = auto()       # -
    MULTIPLY = auto()    # *
    DIVIDE = auto()      # /

    UNKNOWN = auto()


OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULTIPLY,
    "/": TokenType.DIVIDE,
}

OPERATOR_TYPES = frozenset(OPERATORS.values())

# ASCII digits only; str.isdigit() and int() also accept other scripts
NUMBER_PATTERN = re.compile(r"[+-]?[0-9]+")
DIGITS_PATTERN = re.compile(r"[0-9]+")
# Only ASCII whitespace separates words; U+00A0 and friends stay inside a word
WORD_PATTERN = re.compile(r"[^ \t\n\x0b\f\r]+")


@dataclass(frozen=True)
class Token:
    """A single token from the tokenizer.

    Attributes:
        type: The token type
        value: The integer value for NUMBER tokens, the source text otherwise
        position: Character offset of the token in the source string
    """

    type: TokenType
    value: int | str
    position: int = 0

    @property
    def is_operator(self) -> bool:
        return self.type in OPERATOR_TYPES

    @property
    def text(self) -> str:
        """The token as it would be written in an expression."""
        return str(self.value)

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, pos={self.position})"


class Lexer:
    """Tokenizer for arithmetic expressions.

    Usage:
        lexer = Lexer("3 * -2 + 6")
        for token in lexer:
            print(token)
    """

    def __init__(self, source: str):
        self.source = source

    def __iter__(self) -> Iterator[Token]:
        """Iterate over all tokens in the source."""
        words = [(m.group(), m.start()) for m in WORD_PATTERN.finditer(self.source)]
        previous: Token | None = None
        i = 0

        while i < len(words):
            word, position = words[i]

            if word == "-" and (previous is None or previous.is_operator):
                if i + 1 < len(words) and DIGITS_PATTERN.fullmatch(words[i + 1][0]):
                    token = Token(TokenType.NUMBER, -int(words[i + 1][0]), position)
                    i += 2
                else:
                    raise TokenizeError("Invalid syntax: '-' must be followed by a number", position)
            else:
                token = self._classify(word, position)
                i += 1

            previous = token
            yield token

    def _classify(self, word: str, position: int) -> Token:
        """Turn a single word into a token."""
        if NUMBER_PATTERN.fullmatch(word):
            return Token(TokenType.NUMBER, int(word), position)
        if word in OPERATORS:
            return Token(OPERATORS[word], word, position)
        return Token(TokenType.UNKNOWN, word, position)

    def tokenize(self) -> list[Token]:
        """Tokenize the entire source and return list of tokens."""
        tokens = list(self)
        logger.debug("Tokenized %r into %s", self.source, tokens)
        return tokens


def tokenize(source: str) -> list[Token]:
    """Convenience function to tokenize an expression string.

    Args:
        source: The expression string

    Returns:
        The list of tokens, with unary minus signs already folded into numbers
    """
    return Lexer(source).tokenize()
