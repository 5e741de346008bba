"""
Shared pytest fixtures for exprcheck tests.

This module provides:
- Isolation of the cached settings from the developer's environment
- Helpers for running tokens through a fresh analyzer
"""

import pytest

from exprcheck.analyzer import Analyzer
from exprcheck.config import get_settings
from exprcheck.tokenizer import Tokenizer


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch, tmp_path):
    """Run every test without EXPRCHECK_* variables or a stray .env file."""
    for name in ("LOG_LEVEL", "LOG_FORMAT", "LOG_FILE", "CHECK_END", "OUTPUT_FORMAT"):
        monkeypatch.delenv(f"EXPRCHECK_{name}", raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def analyze():
    """Feed an expression or an iterable of tokens through a fresh Analyzer."""
    def _analyze(source, check_end: bool = False) -> Analyzer:
        analyzer = Analyzer(check_end=check_end)
        tokens = Tokenizer(source) if isinstance(source, str) else source
        for token in tokens:
            analyzer.accept(token)
        analyzer.finish()
        return analyzer
    return _analyze


@pytest.fixture
def restore_logging():
    """Undo setup_logging() changes to the root logger."""
    import logging

    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
