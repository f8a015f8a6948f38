"""
minic - Tokenizer for a Small C-like Language
=============================================

This package provides the scanner stage of a compiler front end for
minic, a small C-like language. It turns source text into an ordered
sequence of tokens plus a termination status.

Main Components
---------------
- **tokens**: Token model, keyword and symbol tables
- **lexer**: The scanner (Lexer, ScanResult, tokenize)
- **errors**: Exception hierarchy
- **cli**: The mclex command-line driver

Quick Start
-----------
    >>> from minic import tokenize
    >>> result = tokenize("int x = 42;")
    >>> result.ok
    True
    >>> [token.text for token in result]
    ['int', 'x', '=', '42', ';']

Or use the command-line tool:
    $ mclex hello.c
"""

__version__ = "0.1.0"
__author__ = "minic Contributors"

# =============================================================================
# Public API Exports
# =============================================================================

from minic.errors import (
    ErrorKind,
    LexerError,
    LexerStateError,
    MinicError,
    UnexpectedSymbolError,
    UnterminatedCommentError,
    UnterminatedStringError,
)
from minic.lexer import (
    END_OF_INPUT,
    EndOfInput,
    Lexer,
    ScanResult,
    TerminationStatus,
    tokenize,
)
from minic.tokens import Keyword, Symbol, Token, TokenKind

__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Lexer
    "Lexer",
    "ScanResult",
    "TerminationStatus",
    "EndOfInput",
    "END_OF_INPUT",
    "tokenize",
    # Tokens
    "Token",
    "TokenKind",
    "Keyword",
    "Symbol",
    # Exception hierarchy
    "MinicError",
    "LexerError",
    "LexerStateError",
    "ErrorKind",
    "UnterminatedStringError",
    "UnterminatedCommentError",
    "UnexpectedSymbolError",
]
