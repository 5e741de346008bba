"""
Validation report.

A ParseReport is the serializable outcome of one parse session: the token
log, the diagnostics and a few counters. It renders as the plain text the
command line prints by default, or as JSON/YAML for tooling.
"""

from __future__ import annotations

from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, computed_field, field_serializer

from .analyzer import Analyzer, Diagnostic
from .tokenizer import Token, TokenType

OutputFormat = Literal["text", "json", "yaml"]


class TokenRecord(BaseModel):
    """Serializable form of a Token."""

    model_config = ConfigDict(frozen=True)

    type: str
    value: float | str
    pos: int

    @classmethod
    def from_token(cls, token: Token) -> "TokenRecord":
        return cls(type=token.type.name, value=token.value, pos=token.pos)


class DiagnosticRecord(BaseModel):
    """Serializable form of a Diagnostic."""

    model_config = ConfigDict(frozen=True)

    reason: str
    message: str
    index: int
    token: TokenRecord | None = None

    @classmethod
    def from_diagnostic(cls, diagnostic: Diagnostic) -> "DiagnosticRecord":
        token = diagnostic.token
        return cls(
            reason=diagnostic.reason.name,
            message=diagnostic.message,
            index=diagnostic.index,
            token=TokenRecord.from_token(token) if token is not None else None,
        )


class ParseReport(BaseModel):
    """
    Result of validating one expression.

    Attributes:
        expression: The input text
        tokens: Every scanned token, in order, legal or not
        errors: Diagnostics in order of occurrence
        skipped: Number of input characters that produced no token
    """

    model_config = ConfigDict(validate_assignment=True)

    expression: str
    tokens: list[TokenRecord] = []
    errors: list[DiagnosticRecord] = []
    skipped: int = 0

    @field_serializer("expression")
    def serialize_expression(self, expression: str) -> str:
        return _printable(expression)

    @computed_field
    @property
    def valid(self) -> bool:
        return not self.errors

    @property
    def messages(self) -> list[str]:
        return [error.message for error in self.errors]

    @classmethod
    def from_analyzer(
        cls, expression: str, analyzer: Analyzer, skipped: int = 0
    ) -> "ParseReport":
        return cls(
            expression=expression,
            tokens=[TokenRecord.from_token(t) for t in analyzer.tokens],
            errors=[DiagnosticRecord.from_diagnostic(e) for e in analyzer.errors],
            skipped=skipped,
        )

    def to_text(self) -> str:
        stack = ", ".join(str(_as_token(record)) for record in self.tokens)
        return f"Stack: [{stack}]\nErrors: {self.messages!r}"

    def render(self, output_format: OutputFormat = "text") -> str:
        """
        Render the report.

        Raises:
            ValueError: If the output format is unknown
        """
        if output_format == "text":
            return self.to_text()
        if output_format == "json":
            return self.model_dump_json(indent=2)
        if output_format == "yaml":
            return yaml.safe_dump(self.model_dump(), sort_keys=False).rstrip("\n")
        raise ValueError(f"Unknown output format: {output_format}")


def _printable(text: str) -> str:
    """
    Replace lone surrogates so the text can be encoded as UTF-8.

    Command line bytes that are not UTF-8 arrive as U+DC80..U+DCFF and become
    U+FFFD; any other lone surrogate is written as a backslash escape.
    """
    try:
        raw = text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return text.encode("utf-8", "backslashreplace").decode("utf-8")
    return raw.decode("utf-8", "replace")


def _as_token(record: TokenRecord) -> Token:
    return Token(TokenType[record.type], record.value, record.pos)
