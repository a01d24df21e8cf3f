"""
parenc Error Hierarchy
======================

This module defines the exception hierarchy for the parenc compiler.
All exceptions inherit from ParencError, allowing callers to catch every
compiler error with a single except clause if desired.

Exception Hierarchy
-------------------
ParencError (base)
├── LexicalError - errors raised while tokenizing
│   ├── UnrecognizedCharacterError - character outside every token class
│   └── UnterminatedStringError - input ends inside a string literal
├── ParseError - errors raised while building the source AST
│   ├── UnexpectedTokenError - token cannot start a construct here
│   └── UnexpectedEndOfInputError - tokens run out before ')' closes a call
└── InvariantViolationError - node kind outside the closed set (internal bug)

Error Message Format
--------------------
The compiler does not track source positions, so messages carry the
offending character, token type, or node kind instead:

    error: unexpected token 'CLOSE_PAREN'
    hint: expected a number, a string, or '('

Every error aborts the compile call that raised it. No stage recovers
internally and no partial output is returned.
"""

from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class ParencError(Exception):
    """
    Base exception for all parenc errors.

    Provides the common message/hint formatting used by every subclass:

        try:
            output = compile("(add 2 3)")
        except ParencError as e:
            print(e)

    Attributes:
        message: The error description
        hint: A suggestion for fixing the error (optional)
    """

    def __init__(self, message: str, hint: Optional[str] = None):
        self.message = message
        self.hint = hint
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with its hint.

        Example output:
            error: unterminated string literal
            hint: add a closing '"' to complete the string
        """
        parts = [f"error: {self.message}"]

        if self.hint:
            parts.append(f"hint: {self.hint}")

        return "\n".join(parts)


# =============================================================================
# Lexical Errors
# =============================================================================

class LexicalError(ParencError):
    """
    Error raised by the lexer.

    Raised when the input text cannot be split into tokens.
    """
    pass


class UnrecognizedCharacterError(LexicalError):
    """
    Character that matches none of the recognized token classes.

    Example:
        (add 2 #)     # '#' is not whitespace, a paren, quote, digit or letter
    """

    def __init__(self, char: str):
        self.char = char
        super().__init__(
            f"unrecognized character {char!r} (U+{ord(char):04X})",
            hint="expressions may only contain parentheses, digits, letters and strings",
        )


class UnterminatedStringError(LexicalError):
    """
    Input ended inside an open string literal.

    Example:
        (concat "ab "cd")     # the second literal never closes
    """

    def __init__(self):
        super().__init__(
            "unterminated string literal",
            hint="add a closing '\"' to complete the string",
        )


# =============================================================================
# Parse Errors
# =============================================================================

class ParseError(ParencError):
    """
    Error raised by the parser.

    Raised when the token sequence does not form a valid program.
    """
    pass


class UnexpectedTokenError(ParseError):
    """
    Token that cannot start a valid construct at the current position.

    Raised for a ')' where an expression is expected, or for a call head
    that is not a name, as in ``(2 3)``.
    """

    def __init__(self, token_type: str, expected: Optional[str] = None):
        self.token_type = token_type
        self.expected = expected

        hint = None
        if expected:
            hint = f"expected {expected}"

        super().__init__(f"unexpected token '{token_type}'", hint=hint)


class UnexpectedEndOfInputError(ParseError):
    """
    Token sequence exhausted before a construct was closed.

    Example:
        (add 2 3      # missing ')'
    """

    def __init__(self, expected: str = "')'"):
        self.expected = expected
        super().__init__(
            "unexpected end of input",
            hint=f"expected {expected}",
        )


# =============================================================================
# Internal Errors
# =============================================================================

class InvariantViolationError(ParencError):
    """
    Node kind outside the closed set reached a traversal or render switch.

    This indicates a bug in the compiler itself, not a problem with the
    user's input.
    """

    def __init__(self, kind: str, stage: Optional[str] = None):
        self.kind = kind
        self.stage = stage

        where = f" in {stage}" if stage else ""
        super().__init__(f"unhandled node kind '{kind}'{where}")
