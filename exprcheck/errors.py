"""
Exceptions raised by exprcheck.

Grammar violations found by the analyzer are not exceptions; they are
recorded as Diagnostic values. The classes here cover failures that stop
a call outright.
"""

from __future__ import annotations

from typing import Any


class ExprCheckError(Exception):
    """Base exception for exprcheck errors"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class TokenizerError(ExprCheckError):
    """Raised when scanned numeric text cannot be converted to a float."""

    def __init__(self, text: str, pos: int):
        self.text = text
        self.pos = pos
        super().__init__(
            message=f"Invalid number '{text}' at position {pos}",
            details={"text": text, "pos": pos},
        )
