# =============================================================================
# test_config.py - Configuration Tests
# =============================================================================

import logging

import pytest

from minic.config import LexerConfig


class TestLexerConfig:
    """Tests for defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        for name in ("MINIC_OUTPUT_FORMAT", "MINIC_ENCODING", "MINIC_LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)
        config = LexerConfig.from_env()
        assert config == LexerConfig()
        assert config.output_format == "repr"
        assert config.encoding == "utf-8"
        assert config.logging_level == logging.WARNING

    def test_env_overrides(self, monkeypatch):
        monkeypatch.setenv("MINIC_OUTPUT_FORMAT", "JSON")
        monkeypatch.setenv("MINIC_ENCODING", "latin-1")
        monkeypatch.setenv("MINIC_LOG_LEVEL", "debug")
        config = LexerConfig.from_env()
        assert config.output_format == "json"
        assert config.encoding == "latin-1"
        assert config.logging_level == logging.DEBUG

    def test_invalid_values_ignored(self, monkeypatch):
        monkeypatch.setenv("MINIC_OUTPUT_FORMAT", "xml")
        monkeypatch.setenv("MINIC_ENCODING", "no-such-codec")
        monkeypatch.setenv("MINIC_LOG_LEVEL", "LOUD")
        config = LexerConfig.from_env()
        assert config == LexerConfig()

    @pytest.mark.parametrize("codec", ["rot13", "hex", "base64", "zlib"])
    def test_non_text_encoding_ignored(self, monkeypatch, codec):
        """Codecs that cannot decode bytes to text keep the default."""
        monkeypatch.setenv("MINIC_ENCODING", codec)
        assert LexerConfig.from_env().encoding == "utf-8"
