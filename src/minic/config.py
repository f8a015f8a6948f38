"""
minic Configuration
===================

Settings for the minic driver. Configuration can come from:
- Default values (defined here)
- Environment variables (LexerConfig.from_env)
- Command-line options, which override both

The tokenizer itself has no settings; these only shape how the driver
reads input, prints tokens and logs.
"""

from dataclasses import dataclass
import logging
import os


OUTPUT_FORMATS = ("repr", "text", "json")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class LexerConfig:
    """
    Configuration for the mclex driver.

    Attributes:
        output_format: How tokens are printed: "repr", "text" or "json"
        encoding: Text encoding used to decode source files
        log_level: Logging level name when not in verbose mode
    """

    output_format: str = "repr"
    encoding: str = "utf-8"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "LexerConfig":
        """
        Create LexerConfig from environment variables.

        Environment variables (all optional):
            MINIC_OUTPUT_FORMAT: "repr", "text" or "json"
            MINIC_ENCODING: Source file encoding (e.g. "latin-1")
            MINIC_LOG_LEVEL: Logging level name (e.g. "INFO")

        Invalid values are ignored and the default is kept.
        """
        config = cls()

        if output_format := os.environ.get("MINIC_OUTPUT_FORMAT"):
            if output_format.lower() in OUTPUT_FORMATS:
                config.output_format = output_format.lower()

        if encoding := os.environ.get("MINIC_ENCODING"):
            try:
                # Rejects unknown codecs and non-text ones (rot13, hex, zlib)
                "".encode(encoding)
                config.encoding = encoding
            except LookupError:
                pass

        if log_level := os.environ.get("MINIC_LOG_LEVEL"):
            if log_level.upper() in LOG_LEVELS:
                config.log_level = log_level.upper()

        return config

    @property
    def logging_level(self) -> int:
        """Numeric logging level for log_level."""
        return getattr(logging, self.log_level)
