# =============================================================================
# test_logging.py - Lexer Logging Tests
# =============================================================================

import logging

from minic.lexer import tokenize


class TestLexerLogging:
    """The lexer reports scan progress at DEBUG level."""

    def test_clean_scan_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="minic.lexer"):
            tokenize("a b c")
        messages = [record.getMessage() for record in caplog.records]
        assert "Scanning 5 characters" in messages
        assert "Scan finished: 3 tokens" in messages

    def test_failed_scan_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="minic.lexer"):
            tokenize("a /* open")
        assert any("Scan stopped after 1 tokens" in r.getMessage() for r in caplog.records)

    def test_silent_by_default(self, caplog):
        with caplog.at_level(logging.WARNING):
            tokenize("@")
        assert caplog.records == []
