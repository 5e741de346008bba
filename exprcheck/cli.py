"""Command line interface for exprcheck."""

from __future__ import annotations

import argparse
import sys

from . import __version__
from .config import get_settings
from .errors import ExprCheckError
from .logging import get_logger, setup_logging
from .parser import Parser

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exprcheck",
        description="Tokenize an arithmetic expression and report illegal token sequences.",
    )
    parser.add_argument(
        "expression",
        nargs="?",
        help="Expression to check (read one line from stdin when omitted).",
    )
    parser.add_argument(
        "-f",
        "--format",
        dest="output_format",
        choices=("text", "json", "yaml"),
        help="Report format (default: EXPRCHECK_OUTPUT_FORMAT or text).",
    )
    parser.add_argument(
        "--check-end",
        action="store_true",
        default=None,
        help="Also report expressions ending on an operation or '('.",
    )
    parser.add_argument(
        "--log-level",
        help="Logging level, e.g. DEBUG to trace every transition.",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"Version: {__version__}",
    )
    return parser


def _read_expression() -> str:
    if sys.stdin.isatty():
        print("Enter an expression:", file=sys.stderr)
    return sys.stdin.readline().rstrip("\r\n")


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    settings = get_settings()
    if args.log_level:
        settings = settings.model_copy(update={"LOG_LEVEL": args.log_level})
    setup_logging(settings)

    expression = args.expression if args.expression is not None else _read_expression()
    output_format = args.output_format or settings.OUTPUT_FORMAT

    try:
        report = Parser(expression, check_end=args.check_end, settings=settings).parse()
    except ExprCheckError as exc:
        logger.debug("Tokenizing failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(report.render(output_format))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
