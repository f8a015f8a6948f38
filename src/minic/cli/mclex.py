"""
mclex - minic Tokenizer Command-Line Interface
==============================================

Reads a minic source file, tokenizes it and prints the tokens.

Usage Examples
--------------
Print tokens:
    $ mclex hello.c

Tab-separated output:
    $ mclex --format text hello.c

JSON document with status and error:
    $ mclex --format json hello.c

Read from stdin with debug logging:
    $ cat hello.c | mclex -v -
"""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from minic import __version__
from minic.cli.errors import ExitCode, handle_cli_exception
from minic.config import OUTPUT_FORMATS, LexerConfig
from minic.lexer import ScanResult, tokenize

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def setup_logging(verbose: bool, config: LexerConfig) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else config.logging_level
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(name)s: %(message)s" if verbose else "%(levelname)s: %(message)s",
        force=True,
    )


def read_source(input_file: Path, encoding: str) -> str:
    """Read source text from a file, or stdin when the path is '-'."""
    if str(input_file) == "-":
        return click.get_text_stream("stdin", encoding=encoding).read()
    return input_file.read_text(encoding=encoding)


def escape_text(text: str) -> str:
    """
    Escape backslashes and control characters so a lexeme fits on one line.

    >>> escape_text("a\\nb")
    'a\\\\nb'
    """
    parts = []
    for char in text:
        if char == "\\":
            parts.append("\\\\")
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            parts.append(repr(char)[1:-1])
        else:
            parts.append(char)
    return "".join(parts)


def format_result(result: ScanResult, output_format: str) -> str:
    """Render a scan result in the requested output format."""
    if output_format == "json":
        error = None
        if result.error is not None:
            error = {"kind": result.error.kind.value, "message": result.error.message}
        document = {
            "status": result.status.name.lower(),
            "tokens": [token.to_dict() for token in result],
            "error": error,
        }
        return json.dumps(document, indent=2)

    if output_format == "text":
        return "\n".join(f"{token.kind.name}\t{escape_text(token.text)}" for token in result)

    return "\n".join(repr(token) for token in result)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, allow_dash=True, path_type=Path),
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(OUTPUT_FORMATS, case_sensitive=False),
    default=None,
    help="Output style (default: repr, or $MINIC_OUTPUT_FORMAT)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Debug logging and a summary line on stderr",
)
@click.version_option(version=__version__, prog_name="mclex")
def main(
    input_file: Path,
    output_format: Optional[str],
    verbose: bool,
) -> None:
    """
    Tokenize a minic source file.

    INPUT_FILE is the source file to scan, or '-' for stdin.

    Tokens are printed in source order. On malformed input the tokens
    scanned before the error are still printed, the error goes to
    stderr and the exit status is 1.
    """
    config = LexerConfig.from_env()
    output_format = (output_format or config.output_format).lower()
    setup_logging(verbose, config)

    try:
        source = read_source(input_file, config.encoding)
    except Exception as e:
        handle_cli_exception(e, verbose)

    logger.debug(f"Read {len(source)} characters from {input_file}")
    result = tokenize(source)

    output = format_result(result, output_format)
    if output:
        click.echo(output)

    if verbose:
        outcome = "finished" if result.ok else "stopped on error"
        click.echo(f"Scan {outcome}: {len(result)} tokens", err=True)

    if not result.ok:
        handle_cli_exception(result.error, verbose)

    sys.exit(ExitCode.SUCCESS)


if __name__ == "__main__":
    main()
