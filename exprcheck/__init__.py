"""
exprcheck

Lexical and sequence checking for arithmetic expressions. The tokenizer
turns text into numbers, variables, parentheses and operations; the analyzer
walks the tokens with a finite-state machine and records every illegal
adjacency instead of stopping at the first one.
"""

__version__ = "0.1.0"

from .analyzer import Analyzer, Diagnostic, DiagnosticReason, State
from .errors import ExprCheckError, TokenizerError
from .parser import Parser, parse_expression
from .report import DiagnosticRecord, ParseReport, TokenRecord
from .tokenizer import Token, TokenType, Tokenizer, tokenize

__all__ = [
    "Analyzer",
    "Diagnostic",
    "DiagnosticReason",
    "State",
    "ExprCheckError",
    "TokenizerError",
    "Parser",
    "parse_expression",
    "DiagnosticRecord",
    "ParseReport",
    "TokenRecord",
    "Token",
    "TokenType",
    "Tokenizer",
    "tokenize",
]
