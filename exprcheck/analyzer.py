"""
Finite-state validator for token sequences.

The analyzer receives tokens one at a time and checks each one against the
state left by the previous token. An illegal pair records a Diagnostic and
sends the analyzer back to START, so a single pass reports every violation
in the order it occurs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .logging import get_logger
from .tokenizer import Token, TokenType

logger = get_logger(__name__)


class State(Enum):
    """Grammatical category of the most recently accepted token."""

    START = "start"
    NUMBER = "number"
    VARIABLE = "variable"
    PARENTHESIS = "parenthesis"
    OPERATION = "operation"


class DiagnosticReason(Enum):
    """Kinds of illegal token adjacency, valued by their message."""

    PARENTHESIS_AT_START = "Unexpected parenthesis at the beginning of the expression"
    OPERATION_AT_START = "Unexpected operation at the beginning of the expression"
    NUMBER_IN_MIDDLE = "Error: unexpected number in the middle of the expression"
    NUMBER_AFTER_VARIABLE = "Unexpected number after variable"
    VARIABLE_AFTER_VARIABLE = "Unexpected variable after variable"
    OPEN_PARENTHESIS_AFTER_VARIABLE = "Unexpected open parenthesis after variable"
    OPERATION_AFTER_OPERATION = "Unexpected operation after operation"
    UNEXPECTED_TOKEN = "Unexpected token"
    UNEXPECTED_END = "Unexpected end of expression"

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class Diagnostic:
    """
    One illegal adjacency found during validation.

    Attributes:
        reason: What was wrong
        token: The offending token, None for the end-of-expression check
        index: Position of the token in the analyzer's token log
        state: State the analyzer was in when the token arrived
    """

    reason: DiagnosticReason
    token: Token | None = None
    index: int = 0
    state: State = State.START

    @property
    def message(self) -> str:
        return self.reason.message

    def __str__(self) -> str:
        return self.message


# Token kinds used as the second key of the transition table
NUMBER = "number"
VARIABLE = "variable"
OPEN = "("
CLOSE = ")"
OPERATION = "operation"

TRANSITIONS: dict[State, dict[str, State | DiagnosticReason]] = {
    State.START: {
        NUMBER: State.NUMBER,
        VARIABLE: State.VARIABLE,
        OPEN: State.PARENTHESIS,
        CLOSE: DiagnosticReason.PARENTHESIS_AT_START,
        OPERATION: DiagnosticReason.OPERATION_AT_START,
    },
    State.NUMBER: {
        NUMBER: DiagnosticReason.NUMBER_IN_MIDDLE,
        VARIABLE: State.VARIABLE,
        OPEN: State.PARENTHESIS,
        CLOSE: State.PARENTHESIS,
        OPERATION: State.OPERATION,
    },
    State.VARIABLE: {
        NUMBER: DiagnosticReason.NUMBER_AFTER_VARIABLE,
        VARIABLE: DiagnosticReason.VARIABLE_AFTER_VARIABLE,
        OPEN: DiagnosticReason.OPEN_PARENTHESIS_AFTER_VARIABLE,
        CLOSE: State.PARENTHESIS,
        OPERATION: State.OPERATION,
    },
    # Pairs missing from a row fall through to UNEXPECTED_TOKEN.
    State.PARENTHESIS: {
        NUMBER: State.NUMBER,
        VARIABLE: State.VARIABLE,
        OPEN: State.PARENTHESIS,
    },
    State.OPERATION: {
        NUMBER: State.NUMBER,
        VARIABLE: State.VARIABLE,
        OPEN: State.PARENTHESIS,
        OPERATION: DiagnosticReason.OPERATION_AFTER_OPERATION,
    },
}

# States an expression must not end in when the end check is enabled.
# PARENTHESIS also follows ")", so the last token kind is checked too.
INCOMPLETE_STATES = frozenset({State.OPERATION, State.PARENTHESIS})
INCOMPLETE_KINDS = frozenset({OPERATION, OPEN})


def token_kind(token: Token) -> str:
    """Map a token to its column in the transition table."""
    if token.type == TokenType.NUMBER:
        return NUMBER
    if token.type == TokenType.VARIABLE:
        return VARIABLE
    if token.type == TokenType.PARENTHESIS:
        return OPEN if token.value == "(" else CLOSE
    return OPERATION


class Analyzer:
    """
    Error-tolerant state machine over a token stream.

    Every accepted token is appended to ``tokens`` whether or not it was legal;
    illegal tokens additionally append a Diagnostic to ``errors``.

    Example:
        >>> analyzer = Analyzer()
        >>> for token in (Token.number(1), Token.operation("+"), Token.operation("-")):
        ...     analyzer.accept(token)
        >>> analyzer.messages
        ['Unexpected operation after operation']
    """

    def __init__(self, check_end: bool = False):
        self.check_end = check_end
        self.tokens: list[Token] = []
        self.errors: list[Diagnostic] = []
        self._state = State.START
        self._finished = False

    @property
    def state(self) -> State:
        return self._state

    @property
    def messages(self) -> list[str]:
        return [error.message for error in self.errors]

    @property
    def valid(self) -> bool:
        return not self.errors

    def accept(self, token: Token) -> None:
        """Advance the state machine by one token."""
        previous = self._state
        outcome = TRANSITIONS[previous].get(
            token_kind(token), DiagnosticReason.UNEXPECTED_TOKEN
        )

        self.tokens.append(token)

        if isinstance(outcome, DiagnosticReason):
            self._record(outcome, token, previous)
            self._state = State.START
        else:
            self._state = outcome

        logger.debug("Token: %s, State: %s -> %s", token, previous.name, self._state.name)

    analyze = accept

    def finish(self) -> None:
        """
        Close the session.

        With ``check_end`` enabled, an expression whose last token leaves it
        on an operation or an opening parenthesis gets an UNEXPECTED_END
        diagnostic.
        Calling this more than once has no further effect.
        """
        if self._finished:
            return
        self._finished = True

        if (
            self.check_end
            and self._state in INCOMPLETE_STATES
            and token_kind(self.tokens[-1]) in INCOMPLETE_KINDS
        ):
            self._record(DiagnosticReason.UNEXPECTED_END, None, self._state)

    def _record(self, reason: DiagnosticReason, token: Token | None, state: State) -> None:
        index = len(self.tokens) - 1 if token is not None else len(self.tokens)
        self.errors.append(Diagnostic(reason, token, index, state))
        logger.debug("Diagnostic at token %d: %s", index, reason.message)
