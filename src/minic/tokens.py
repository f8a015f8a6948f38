"""
Token Model
===========

Token kinds, the closed keyword and symbol sets, and the immutable
Token value produced by the lexer.

A token is a tagged value: its ``kind`` says which class it belongs to
and its ``value`` carries the payload. Keywords and symbols carry an
enum member; comments, literals, and identifiers carry their source
text verbatim (no case folding, no escape processing).

>>> Token.keyword(Keyword.IF)
Token(KEYWORD, 'if')
>>> Token.number("3.14").text
'3.14'
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Union


# =============================================================================
# Token Kind Enumeration
# =============================================================================

class TokenKind(Enum):
    """The six classes of lexical element."""

    KEYWORD = auto()
    SYMBOL = auto()
    COMMENT = auto()
    NUMBER_LITERAL = auto()
    STRING_LITERAL = auto()
    IDENTIFIER = auto()


# =============================================================================
# Keywords
# =============================================================================

class Keyword(Enum):
    """Reserved words. The value is the source spelling."""

    # Declarations and expressions
    CONST = "const"
    ENUM = "enum"
    RETURN = "return"
    NEW = "new"
    DELETE = "delete"
    INCLUDE = "include"

    # Basic types
    VOID = "void"
    INT = "int"
    DOUBLE = "double"

    # Control flow
    DO = "do"
    FOR = "for"
    WHILE = "while"
    BREAK = "break"
    CONTINUE = "continue"
    IF = "if"
    ELSE = "else"
    SWITCH = "switch"
    CASE = "case"


KEYWORDS: dict[str, Keyword] = {kw.value: kw for kw in Keyword}


# =============================================================================
# Symbols
# =============================================================================

class Symbol(Enum):
    """Operators and punctuation. The value is the source spelling."""

    # Brackets
    LEFT_ANGLE = "<"
    RIGHT_ANGLE = ">"
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    LEFT_BRACE = "{"
    RIGHT_BRACE = "}"
    LEFT_BRACKET = "["
    RIGHT_BRACKET = "]"

    # Punctuation
    SHARP = "#"
    COMMA = ","
    SEMICOLON = ";"

    # Comparison
    EQUAL = "=="
    GREATER_EQUAL = ">="
    LESS_EQUAL = "<="

    # Arithmetic and bitwise
    PLUS = "+"
    MINUS = "-"
    STAR = "*"
    SLASH = "/"
    AMPERSAND = "&"
    PIPE = "|"
    CARET = "^"

    # Assignment
    ASSIGN = "="
    PLUS_ASSIGN = "+="
    MINUS_ASSIGN = "-="
    STAR_ASSIGN = "*="
    SLASH_ASSIGN = "/="
    AND_ASSIGN = "&="
    OR_ASSIGN = "|="
    XOR_ASSIGN = "^="


SYMBOLS: dict[str, Symbol] = {sym.value: sym for sym in Symbol}

# Characters that take part in maximal munch: followed by '=' they form
# a two-character symbol. '/' also compounds but is dispatched with the
# comment forms.
COMPOUND_CHARS = frozenset("+-*&|^=<>")

# Standalone punctuation looked up as a last resort
SINGLE_SYMBOLS: dict[str, Symbol] = {
    "(": Symbol.LEFT_PAREN,
    ")": Symbol.RIGHT_PAREN,
    "{": Symbol.LEFT_BRACE,
    "}": Symbol.RIGHT_BRACE,
    "[": Symbol.LEFT_BRACKET,
    "]": Symbol.RIGHT_BRACKET,
    "#": Symbol.SHARP,
    ",": Symbol.COMMA,
    ";": Symbol.SEMICOLON,
}


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified lexical unit.

    Attributes:
        kind: The TokenKind classification
        value: A Keyword or Symbol member for those kinds, otherwise
            the payload text
    """
    kind: TokenKind
    value: Union[Keyword, Symbol, str]

    def __repr__(self) -> str:
        return f"Token({self.kind.name}, {self.text!r})"

    @property
    def text(self) -> str:
        """The lexeme: spelling for keywords/symbols, payload otherwise."""
        if isinstance(self.value, (Keyword, Symbol)):
            return self.value.value
        return self.value

    def is_keyword(self, keyword: Keyword | None = None) -> bool:
        """Return True if this is a keyword (optionally a specific one)."""
        if self.kind is not TokenKind.KEYWORD:
            return False
        return keyword is None or self.value is keyword

    def is_symbol(self, symbol: Symbol | None = None) -> bool:
        """Return True if this is a symbol (optionally a specific one)."""
        if self.kind is not TokenKind.SYMBOL:
            return False
        return symbol is None or self.value is symbol

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable view of the token."""
        data: dict[str, Any] = {"kind": self.kind.name, "text": self.text}
        if isinstance(self.value, (Keyword, Symbol)):
            data["name"] = self.value.name
        return data

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def keyword(cls, keyword: Keyword) -> "Token":
        return cls(TokenKind.KEYWORD, keyword)

    @classmethod
    def symbol(cls, symbol: Symbol) -> "Token":
        return cls(TokenKind.SYMBOL, symbol)

    @classmethod
    def comment(cls, text: str) -> "Token":
        return cls(TokenKind.COMMENT, text)

    @classmethod
    def number(cls, text: str) -> "Token":
        return cls(TokenKind.NUMBER_LITERAL, text)

    @classmethod
    def string(cls, text: str) -> "Token":
        return cls(TokenKind.STRING_LITERAL, text)

    @classmethod
    def identifier(cls, text: str) -> "Token":
        return cls(TokenKind.IDENTIFIER, text)
