"""
minic Lexer (Tokenizer)
=======================

This module implements the scanner for the minic language, a small
C-like language. It converts source text into an ordered sequence of
tokens for a parser.

Token Categories
----------------
- Keywords: const, enum, return, int, double, if, while, etc.
- Identifiers: ASCII letters, then letters, digits and dots (a.b.c)
- Numbers: digit runs with at most one decimal point, kept as text
- Strings: "double" or 'single' quoted, no escape processing
- Comments: // line and /* block */, kept as tokens
- Symbols: ( ) { } [ ] < > # , ; and + - * / & | ^ = with compound =

Scan Outcome
------------
A scan never raises on malformed input. ``Lexer.tokenize()`` returns a
``ScanResult`` holding the tokens emitted so far, a ``TerminationStatus``
and, on failure, the ``LexerError`` that stopped it. Running out of
input is signalled internally by the ``EndOfInput`` sentinel, never by
an exception, so a clean finish cannot be confused with an error.

Example Usage
-------------
>>> from minic.lexer import Lexer
>>> result = Lexer("if(x>=1){return;}").tokenize()
>>> result.ok
True
>>> for token in result:
...     print(token)
Token(KEYWORD, 'if')
Token(SYMBOL, '(')
Token(IDENTIFIER, 'x')
Token(SYMBOL, '>=')
Token(NUMBER_LITERAL, '1')
Token(SYMBOL, ')')
Token(SYMBOL, '{')
Token(KEYWORD, 'return')
Token(SYMBOL, ';')
Token(SYMBOL, '}')
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional, Union
import logging
import string

from minic.errors import (
    LexerError,
    LexerStateError,
    UnexpectedSymbolError,
    UnterminatedCommentError,
    UnterminatedStringError,
)
from minic.tokens import (
    COMPOUND_CHARS,
    KEYWORDS,
    SINGLE_SYMBOLS,
    SYMBOLS,
    Symbol,
    Token,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Scan Signals and Results
# =============================================================================

class EndOfInput:
    """
    Sentinel returned when a read finds no more characters.

    This is a signal, not a failure: it is deliberately unrelated to
    LexerError. Use the END_OF_INPUT singleton.
    """

    _instance: Optional["EndOfInput"] = None

    def __new__(cls) -> "EndOfInput":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "END_OF_INPUT"

    def __bool__(self) -> bool:
        return False


END_OF_INPUT = EndOfInput()


class TerminationStatus(Enum):
    """How a scan ended."""

    PENDING = auto()    # Scan not yet run
    CLEAN = auto()      # Whole input consumed
    ERROR = auto()      # Stopped on malformed input


@dataclass(frozen=True)
class ScanResult:
    """
    Outcome of one scan.

    Attributes:
        tokens: Tokens in source order (partial when the scan failed)
        status: CLEAN or ERROR
        error: The error that stopped the scan, None on a clean finish
    """
    tokens: tuple[Token, ...]
    status: TerminationStatus
    error: Optional[LexerError] = None

    @property
    def ok(self) -> bool:
        """True if the whole input was consumed without error."""
        return self.status is TerminationStatus.CLEAN

    def raise_for_error(self) -> "ScanResult":
        """Raise the stored LexerError, if any; return self otherwise."""
        if self.error is not None:
            raise self.error
        return self

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)


# =============================================================================
# Lexer Implementation
# =============================================================================

# Result of scanning at one position: a token, None for skipped
# whitespace, or the end-of-input signal
_Step = Union[Token, None, EndOfInput]


class Lexer:
    """
    Tokenizes minic source code.

    A Lexer is built for one input string and performs exactly one scan.
    Any malformed construct stops the scan immediately; there is no
    resynchronization.

    Usage:
        result = Lexer(source_text).tokenize()
        if not result.ok:
            print(result.error)

    Attributes:
        source: The source text being tokenized
    """

    # Characters that can start an identifier
    IDENT_START = string.ascii_letters

    # Characters that can continue an identifier (dots allow a.b.c)
    IDENT_CHARS = string.ascii_letters + string.digits + "."

    QUOTES = "\"'"

    # Skipped between tokens
    WHITESPACE = " \n"

    def __init__(self, source: str):
        """
        Initialize the lexer with source code.

        Args:
            source: The minic source text to tokenize
        """
        self.source = source

        # Scan cursor
        self._pos = 0
        self._tokens: list[Token] = []
        self._status = TerminationStatus.PENDING

    @property
    def status(self) -> TerminationStatus:
        """Termination status of this lexer's scan."""
        return self._status

    def tokenize(self) -> ScanResult:
        """
        Scan the whole source.

        Returns:
            ScanResult with all tokens and CLEAN status, or the tokens
            emitted before the failure with ERROR status and the error

        Raises:
            LexerStateError: If this lexer has already scanned
        """
        if self._status is not TerminationStatus.PENDING:
            raise LexerStateError("a Lexer performs exactly one scan; create a new instance")

        logger.debug(f"Scanning {len(self.source)} characters")

        try:
            while True:
                step = self._scan_token()
                if step is END_OF_INPUT:
                    break
                if step is not None:
                    self._tokens.append(step)
        except LexerError as e:
            self._status = TerminationStatus.ERROR
            logger.debug(f"Scan stopped after {len(self._tokens)} tokens: {e.message}")
            return ScanResult(tuple(self._tokens), self._status, e)

        self._status = TerminationStatus.CLEAN
        logger.debug(f"Scan finished: {len(self._tokens)} tokens")
        return ScanResult(tuple(self._tokens), self._status)

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if we've reached the end of source."""
        return self._pos >= len(self.source)

    def _peek(self) -> Union[str, EndOfInput]:
        """Look at the current character without advancing."""
        if self._at_end():
            return END_OF_INPUT
        return self.source[self._pos]

    def _advance(self) -> Union[str, EndOfInput]:
        """Consume and return the current character."""
        if self._at_end():
            return END_OF_INPUT
        char = self.source[self._pos]
        self._pos += 1
        return char

    def _match(self, expected: str) -> bool:
        """
        Consume next character if it matches expected.

        Returns:
            True if matched and consumed, False otherwise
        """
        if self._peek() == expected:
            self._advance()
            return True
        return False

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> _Step:
        """
        Classify the next character and scan the token it starts.

        Returns:
            The next Token, None for skipped whitespace, or END_OF_INPUT

        Raises:
            LexerError: On malformed input
        """
        char = self._advance()
        if char is END_OF_INPUT:
            return END_OF_INPUT

        if char in self.QUOTES:
            return self._scan_string(char)

        if char == "/":
            return self._scan_slash()

        if char in COMPOUND_CHARS:
            return self._scan_compound(char)

        if char in string.digits:
            return self._scan_number(char)

        if char in self.IDENT_START:
            return self._scan_identifier(char)

        if char in self.WHITESPACE:
            return None

        if char in SINGLE_SYMBOLS:
            return Token.symbol(SINGLE_SYMBOLS[char])

        raise UnexpectedSymbolError(char)

    def _scan_string(self, quote: str) -> Token:
        """
        Scan a string literal up to the matching quote.

        The opening quote has been consumed. No escapes are recognised
        and strings may span lines.
        """
        chars = []
        while True:
            char = self._advance()
            if char is END_OF_INPUT:
                raise UnterminatedStringError(quote)
            if char == quote:
                return Token.string("".join(chars))
            chars.append(char)

    def _scan_slash(self) -> Token:
        """Scan '/', '/=', a // line comment or a /* block comment */."""
        if self._match("*"):
            return self._scan_block_comment()
        if self._match("="):
            return Token.symbol(Symbol.SLASH_ASSIGN)
        if self._match("/"):
            return self._scan_line_comment()
        return Token.symbol(Symbol.SLASH)

    def _scan_line_comment(self) -> Token:
        """
        Scan the rest of a // comment.

        The comment runs to the next control character, which is
        consumed but not kept; end of input also ends it. Surrounding
        spaces are trimmed, everything else is kept verbatim.
        """
        chars = []
        while True:
            char = self._advance()
            if char is END_OF_INPUT or _is_control(char):
                break
            chars.append(char)
        return Token.comment("".join(chars).strip(" "))

    def _scan_block_comment(self) -> Token:
        """
        Scan a /* ... */ comment body.

        Three states: outside, saw-star and done. A '*' that is not
        followed by '/' is kept in the text.

        Raises:
            UnterminatedCommentError: If input ends before */
        """
        chars = []
        saw_star = False
        while True:
            char = self._advance()
            if char is END_OF_INPUT:
                raise UnterminatedCommentError()

            if saw_star:
                if char == "/":
                    return Token.comment("".join(chars))
                chars.append("*")
                if char == "*":
                    continue
                chars.append(char)
                saw_star = False
            elif char == "*":
                saw_star = True
            else:
                chars.append(char)

    def _scan_compound(self, char: str) -> Token:
        """Scan an operator, taking a following '=' when present."""
        if self._match("="):
            return Token.symbol(SYMBOLS[char + "="])
        return Token.symbol(SYMBOLS[char])

    def _scan_number(self, first: str) -> Token:
        """
        Scan a decimal number: digits, optionally '.' and more digits.

        Every lookahead is checked before use; end of input right after
        a digit ends the literal normally.
        """
        chars = [first]
        self._take_digits(chars)

        if self._match("."):
            chars.append(".")
            self._take_digits(chars)

        return Token.number("".join(chars))

    def _take_digits(self, chars: list[str]) -> None:
        while True:
            char = self._peek()
            if char is END_OF_INPUT or char not in string.digits:
                return
            chars.append(self._advance())

    def _scan_identifier(self, first: str) -> Token:
        """
        Scan an identifier or keyword.

        Identifiers start with an ASCII letter and continue with letters,
        digits and dots, so qualified names like a.b.c stay one token.
        """
        chars = [first]
        while True:
            char = self._peek()
            if char is END_OF_INPUT or char not in self.IDENT_CHARS:
                break
            chars.append(self._advance())

        name = "".join(chars)
        if name in KEYWORDS:
            return Token.keyword(KEYWORDS[name])
        return Token.identifier(name)


# =============================================================================
# Utility Functions
# =============================================================================

def _is_control(char: str) -> bool:
    """True for ASCII control characters (newline, tab, DEL, ...)."""
    code = ord(char)
    return code < 0x20 or code == 0x7F


def tokenize(source: str) -> ScanResult:
    """
    Convenience function to tokenize source code.

    Args:
        source: minic source text

    Returns:
        ScanResult for a fresh single-use Lexer
    """
    return Lexer(source).tokenize()
