"""
Driver tying the tokenizer to the analyzer.

The parser pulls tokens until the tokenizer is exhausted, pushes each one
into a fresh analyzer, then closes the session and builds a ParseReport.
It does not build a syntax tree.
"""

from __future__ import annotations

from .analyzer import Analyzer
from .config import Settings, get_settings
from .logging import get_context_logger
from .report import ParseReport
from .tokenizer import Tokenizer


class Parser:
    """
    One validation session over one expression.

    Args:
        expression: The expression text
        check_end: Diagnose expressions ending on an operator or '('.
            None uses the CHECK_END setting.
        settings: Settings to read defaults from (defaults to the cached ones)
    """

    def __init__(
        self,
        expression: str,
        *,
        check_end: bool | None = None,
        settings: Settings | None = None,
    ):
        settings = settings or get_settings()
        if check_end is None:
            check_end = settings.CHECK_END

        self.expression = expression
        self.tokenizer = Tokenizer(expression)
        self.analyzer = Analyzer(check_end=check_end)
        self.logger = get_context_logger(__name__, expression=expression)

    def parse(self) -> ParseReport:
        """
        Validate the whole expression.

        Returns:
            The report for this expression

        Raises:
            TokenizerError: If a scanned number cannot be converted
        """
        for token in self.tokenizer:
            self.analyzer.accept(token)
        self.analyzer.finish()

        report = ParseReport.from_analyzer(
            self.expression, self.analyzer, skipped=self.tokenizer.skipped
        )
        self.logger.info(
            "Parsed %d tokens, %d errors",
            len(report.tokens),
            len(report.errors),
            context={"valid": report.valid},
        )
        return report


def parse_expression(expression: str, **kwargs) -> ParseReport:
    """Validate an expression in one call. See Parser for keyword arguments."""
    return Parser(expression, **kwargs).parse()
