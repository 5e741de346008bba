"""
Tokenizer for arithmetic expressions.

This module scans an expression one character at a time and classifies runs
of characters into numbers, variables, parentheses and operations. Characters
outside those classes are skipped and scanning continues.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator

from .errors import TokenizerError
from .logging import get_logger

logger = get_logger(__name__)

PARENTHESES = frozenset("()")
OPERATIONS = frozenset("+-*/")


class TokenType(Enum):
    """Token types for arithmetic expressions."""

    NUMBER = auto()
    VARIABLE = auto()
    PARENTHESIS = auto()  # ( or )
    OPERATION = auto()  # + - * /


@dataclass(frozen=True)
class Token:
    """
    Represents a single token in the expression.

    Attributes:
        type: The token type
        value: float for numbers, the source text otherwise
        pos: Position in the source string (ignored by equality)
    """

    type: TokenType
    value: float | str
    pos: int = field(default=0, compare=False)

    @classmethod
    def number(cls, value: float, pos: int = 0) -> "Token":
        return cls(TokenType.NUMBER, float(value), pos)

    @classmethod
    def variable(cls, name: str, pos: int = 0) -> "Token":
        return cls(TokenType.VARIABLE, name, pos)

    @classmethod
    def parenthesis(cls, char: str, pos: int = 0) -> "Token":
        if char not in PARENTHESES:
            raise ValueError(f"Not a parenthesis: {char!r}")
        return cls(TokenType.PARENTHESIS, char, pos)

    @classmethod
    def operation(cls, char: str, pos: int = 0) -> "Token":
        if char not in OPERATIONS:
            raise ValueError(f"Not an operation: {char!r}")
        return cls(TokenType.OPERATION, char, pos)

    def __str__(self) -> str:
        if self.type == TokenType.VARIABLE:
            return f'Variable("{self.value}")'
        if self.type == TokenType.NUMBER:
            return f"Number({self.value})"
        return f"{self.type.name.capitalize()}('{self.value}')"

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, pos={self.pos})"


def _is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def _is_alphanumeric(char: str) -> bool:
    return char.isascii() and char.isalnum()


class Tokenizer:
    """
    Scans an expression into tokens, one token per call.

    The tokenizer owns a cursor into the expression and nothing else; it is
    an iterator and cannot be rewound. Construct a new one to scan again.

    Scanning rules, in priority order:
    - ASCII digits, optionally followed by '.' and more digits -> NUMBER
    - ASCII letters followed by letters/digits -> VARIABLE
    - '(' or ')' -> PARENTHESIS
    - '+', '-', '*', '/' -> OPERATION
    - anything else is skipped
    """

    def __init__(self, expression: str):
        self.expression = expression
        self.position = 0
        self.skipped = 0

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration
        return token

    @property
    def exhausted(self) -> bool:
        return self.position >= len(self.expression)

    def next_token(self) -> Token | None:
        """
        Scan the next token.

        Returns:
            The next token, or None once the end of input is reached

        Raises:
            TokenizerError: If a scanned number cannot be converted
        """
        while not self.exhausted:
            start = self.position
            char = self.expression[start]
            self.position += 1

            if _is_digit(char):
                return self._scan_number(start)

            if _is_alphanumeric(char):
                self._consume_while(_is_alphanumeric)
                return Token.variable(self.expression[start:self.position], start)

            if char in PARENTHESES:
                return Token.parenthesis(char, start)

            if char in OPERATIONS:
                return Token.operation(char, start)

            self.skipped += 1
            logger.debug("Skipping character %r at position %d", char, start)

        return None

    def _scan_number(self, start: int) -> Token:
        self._consume_while(_is_digit)
        if not self.exhausted and self.expression[self.position] == ".":
            self.position += 1
            self._consume_while(_is_digit)

        text = self.expression[start:self.position]
        try:
            value = float(text)
        except ValueError as exc:
            raise TokenizerError(text, start) from exc
        return Token.number(value, start)

    def _consume_while(self, predicate) -> None:
        while not self.exhausted and predicate(self.expression[self.position]):
            self.position += 1


def tokenize(expression: str) -> list[Token]:
    """
    Tokenize an arithmetic expression into a list of tokens.

    Examples:
        >>> [str(t) for t in tokenize("x+1.5")]
        ['Variable("x")', "Operation('+')", 'Number(1.5)']
    """
    return list(Tokenizer(expression))
