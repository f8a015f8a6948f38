"""
minic Error Hierarchy
=====================

This module defines the exception hierarchy for the minic tokenizer.
All exceptions inherit from MinicError, allowing callers to catch every
package error with a single except clause if desired.

Exception Hierarchy
-------------------
MinicError (base)
├── LexerStateError - a Lexer instance was asked to scan twice
└── LexerError (malformed input)
    ├── UnterminatedStringError - quote opened but never closed
    ├── UnterminatedCommentError - block comment opened but never closed
    └── UnexpectedSymbolError - character outside every token class

Reaching the end of the input is NOT an error. It is reported through
the ``EndOfInput`` sentinel in ``minic.lexer``, so a caller inspecting
only the error can always tell a clean finish from malformed input.

Error messages follow this format:
    error: description
    hint: suggestion for fixing (when available)
"""

from enum import Enum
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class MinicError(Exception):
    """
    Base exception for all minic errors.

        try:
            tokenize(source).raise_for_error()
        except MinicError as e:
            print(f"Error: {e}")
    """
    pass


class LexerStateError(MinicError):
    """
    Raised when a Lexer is used outside its one-scan lifecycle.

    A Lexer is constructed for one input and runs exactly one scan;
    create a new instance to scan again.
    """
    pass


# =============================================================================
# Lexer Exceptions
# =============================================================================

class ErrorKind(Enum):
    """The failure kinds a scan can stop on."""

    UNTERMINATED_STRING = "UnterminatedString"
    UNTERMINATED_COMMENT = "UnterminatedComment"
    UNEXPECTED_SYMBOL = "UnexpectedSymbol"


class LexerError(MinicError):
    """
    Base exception for malformed input found while scanning.

    Attributes:
        message: The error description
        hint: A suggestion for fixing the error (optional)
        kind: The ErrorKind classifying this failure
    """

    kind: ErrorKind

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with its hint.

        Example output:
            error: unexpected symbol '@' (U+0040)
            hint: remove the character or place it inside a string literal
        """
        parts = [f"error: {self.message}"]
        if self.hint:
            parts.append(f"hint: {self.hint}")
        return "\n".join(parts)


class UnterminatedStringError(LexerError):
    """
    String literal with no closing quote before end of input.

    Strings may span lines, so only the end of the input can leave
    one unterminated.

    Example:
        x = "hello
    """

    kind = ErrorKind.UNTERMINATED_STRING

    def __init__(self, quote: str = '"'):
        self.quote = quote
        super().__init__(
            "unterminated string literal",
            hint=f"add closing {quote} to complete the string",
        )


class UnterminatedCommentError(LexerError):
    """Block comment with no closing */ before end of input."""

    kind = ErrorKind.UNTERMINATED_COMMENT

    def __init__(self):
        super().__init__(
            "unterminated block comment",
            hint="add closing */ to terminate the comment",
        )


class UnexpectedSymbolError(LexerError):
    """
    Character that matches no token class.

    Raised for any character that is not a quote, digit, ASCII letter,
    space, newline, or member of the symbol table.
    """

    kind = ErrorKind.UNEXPECTED_SYMBOL

    def __init__(self, char: str):
        self.char = char
        super().__init__(
            f"unexpected symbol {char!r} (U+{ord(char):04X})",
            hint="remove the character or place it inside a string literal",
        )
