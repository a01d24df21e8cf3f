"""
parenc Lexer (Tokenizer)
========================

This module converts s-expression source text into a list of tokens for
the parser.

Token Categories
----------------
| Token       | Matches                         | Value            |
|-------------|---------------------------------|------------------|
| OPEN_PAREN  | (                               | "("              |
| CLOSE_PAREN | )                               | ")"              |
| NUMBER      | maximal run of 0-9              | the digits       |
| STRING      | "..." (no escape sequences)     | text in quotes   |
| NAME        | maximal run of ASCII letters    | the letters      |

Whitespace between tokens is skipped and never produces a token.

Matchers
--------
Each lexical class is recognized by a stateless matcher object. The lexer
tries its matchers in order at every cursor position; the first one that
accepts wins, so the order in DEFAULT_MATCHERS is the priority order.
A matcher returns None when it does not apply, or a (token, end) pair
where token may be None for input that is consumed silently.

Example Usage
-------------
>>> from parenc.lexer import tokenize
>>> for token in tokenize('(add 2 "x")'):
...     print(token)
Token(OPEN_PAREN, '(')
Token(NAME, 'add')
Token(NUMBER, '2')
Token(STRING, 'x')
Token(CLOSE_PAREN, ')')
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional
import string

from parenc.errors import UnrecognizedCharacterError, UnterminatedStringError


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """Token types for the s-expression language."""

    OPEN_PAREN = auto()     # (
    CLOSE_PAREN = auto()    # )
    NUMBER = auto()         # 0-9 run
    STRING = auto()         # "..."
    NAME = auto()           # letter run


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single token from the source text.

    Tokens carry no position information; their order in the token list
    is their left-to-right order in the input.

    Attributes:
        type: The TokenType classification
        value: The literal characters matched (string contents for STRING)
    """
    type: TokenType
    value: str

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r})"


# Result of a matcher: the token produced (or None) and the new cursor
MatchResult = Optional[tuple[Optional[Token], int]]


# Whitespace set: the ASCII controls \t \n \v \f \r, the space, the Unicode
# space separators, the line and paragraph separators, and the byte order
# mark. U+001C-U+001F and U+0085 are not whitespace here.
WHITESPACE = frozenset(
    "\t\n\v\f\r "
    + "".join(chr(code) for code in (0x00A0, 0x1680, 0x2028, 0x2029, 0x202F, 0x205F, 0x3000, 0xFEFF))
    + "".join(chr(code) for code in range(0x2000, 0x200B))
)


# =============================================================================
# Matchers
# =============================================================================

class WhitespaceMatcher:
    """Consumes one whitespace character without producing a token."""

    def match(self, source: str, pos: int) -> MatchResult:
        if source[pos] in WHITESPACE:
            return None, pos + 1
        return None


@dataclass(frozen=True)
class CharMatcher:
    """Matches one fixed character and emits it as a token."""
    char: str
    token_type: TokenType

    def match(self, source: str, pos: int) -> MatchResult:
        if source[pos] == self.char:
            return Token(self.token_type, self.char), pos + 1
        return None


@dataclass(frozen=True)
class RunMatcher:
    """
    Matches the longest run of characters from a fixed set.

    Runs are maximal: "12" is one NUMBER token, never two.
    """
    charset: str
    token_type: TokenType

    def match(self, source: str, pos: int) -> MatchResult:
        if source[pos] not in self.charset:
            return None

        end = pos
        while end < len(source) and source[end] in self.charset:
            end += 1

        return Token(self.token_type, source[pos:end]), end


class StringMatcher:
    """
    Matches a double-quoted string literal.

    Content is taken verbatim up to the next '"'; there are no escape
    sequences, so an embedded quote always ends the literal.
    """

    QUOTE = '"'

    def match(self, source: str, pos: int) -> MatchResult:
        if source[pos] != self.QUOTE:
            return None

        close = source.find(self.QUOTE, pos + 1)
        if close == -1:
            raise UnterminatedStringError()

        return Token(TokenType.STRING, source[pos + 1:close]), close + 1


# Priority order is significant: the first matcher that accepts wins
DEFAULT_MATCHERS = (
    WhitespaceMatcher(),
    CharMatcher("(", TokenType.OPEN_PAREN),
    CharMatcher(")", TokenType.CLOSE_PAREN),
    StringMatcher(),
    RunMatcher(string.digits, TokenType.NUMBER),
    RunMatcher(string.ascii_letters, TokenType.NAME),
)


# =============================================================================
# Lexer Implementation
# =============================================================================

class Lexer:
    """
    Tokenizes s-expression source text.

    The lexer scans left to right from position 0, asking each matcher in
    turn whether it accepts the input at the cursor. It holds no state
    between calls to tokenize() other than the source itself.

    Usage:
        lexer = Lexer(source_text)
        tokens = list(lexer.tokenize())

    Attributes:
        source: The text being tokenized
        matchers: Ordered matchers tried at each position
    """

    def __init__(self, source: str, matchers=DEFAULT_MATCHERS):
        self.source = source
        self.matchers = tuple(matchers)

    def tokenize(self) -> Iterator[Token]:
        """
        Generate tokens from the source text.

        Yields:
            Token objects in source order

        Raises:
            UnrecognizedCharacterError: If no matcher accepts a character
            UnterminatedStringError: If a string literal is never closed
        """
        pos = 0

        while pos < len(self.source):
            token, pos = self._scan_token(pos)
            if token is not None:
                yield token

    def _scan_token(self, pos: int) -> tuple[Optional[Token], int]:
        """Run the matchers at pos and return the first accepted result."""
        for matcher in self.matchers:
            result = matcher.match(self.source, pos)
            if result is not None:
                return result

        raise UnrecognizedCharacterError(self.source[pos])


def tokenize(text: str, matchers=DEFAULT_MATCHERS) -> list[Token]:
    """
    Tokenize text into a list of tokens.

    Args:
        text: Source text in the s-expression language
        matchers: Ordered matchers (defaults to DEFAULT_MATCHERS)

    Returns:
        List of tokens in source order
    """
    return list(Lexer(text, matchers).tokenize())
