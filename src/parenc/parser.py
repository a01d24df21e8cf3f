"""
parenc Recursive Descent Parser
===============================

This module implements a recursive descent parser for the s-expression
language. It takes the token list from the lexer and builds the source
AST.

Grammar (EBNF)
--------------
program     ::= token*
token       ::= NUMBER | STRING | expression
expression  ::= '(' NAME token* ')'

The grammar is fully prefix and parenthesized, so one token of lookahead
decides every production and the parser never backtracks.

Example Usage
-------------
>>> from parenc.lexer import tokenize
>>> from parenc.parser import parse
>>> parse(tokenize("(add 2 3)"))
Program(body=(CallExpression(name='add', params=(NumberLiteral(value='2'), NumberLiteral(value='3'))),))
"""

from typing import Optional

from parenc.lexer import Token, TokenType
from parenc.ast import (
    Program,
    CallExpression,
    Expression,
    NumberLiteral,
    StringLiteral,
)
from parenc.errors import UnexpectedTokenError, UnexpectedEndOfInputError


class Parser:
    """
    Recursive descent parser for the s-expression language.

    Parses a list of tokens into a source Program. The first error
    encountered aborts parsing; there is no recovery.

    Attributes:
        tokens: List of tokens to parse
    """

    def __init__(self, tokens: list[Token]):
        self.tokens = list(tokens)

        # Current position in token list
        self._pos = 0

    def parse(self) -> Program:
        """
        Parse the token list into a Program.

        Returns:
            Program holding every top-level expression

        Raises:
            UnexpectedTokenError: If a token cannot start a construct
            UnexpectedEndOfInputError: If a call is never closed
        """
        self._pos = 0
        body = []

        while not self._at_end():
            body.append(self._parse_token())

        return Program(body=tuple(body))

    # =========================================================================
    # Token Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if every token has been consumed."""
        return self._pos >= len(self.tokens)

    def _peek(self) -> Optional[Token]:
        """Look at the current token, or None past the end."""
        if self._at_end():
            return None
        return self.tokens[self._pos]

    def _advance(self) -> Token:
        """Consume and return the current token."""
        token = self.tokens[self._pos]
        self._pos += 1
        return token

    # =========================================================================
    # Grammar Rules
    # =========================================================================

    def _parse_token(self) -> Expression:
        """Parse one NUMBER, STRING, or parenthesized expression."""
        token = self._peek()
        if token is None:
            raise UnexpectedEndOfInputError()

        if token.type == TokenType.NUMBER:
            self._advance()
            return NumberLiteral(token.value)

        if token.type == TokenType.STRING:
            self._advance()
            return StringLiteral(token.value)

        if token.type == TokenType.OPEN_PAREN:
            return self._parse_expression()

        raise UnexpectedTokenError(
            token.type.name,
            expected="a number, a string, or '('",
        )

    def _parse_expression(self) -> CallExpression:
        """Parse '(' NAME token* ')' into a CallExpression."""
        self._advance()  # '('

        head = self._peek()
        if head is None:
            raise UnexpectedEndOfInputError("a function name")
        if head.type != TokenType.NAME:
            raise UnexpectedTokenError(head.type.name, expected="a function name after '('")
        self._advance()

        params = []
        while True:
            token = self._peek()
            if token is None:
                raise UnexpectedEndOfInputError()
            if token.type == TokenType.CLOSE_PAREN:
                self._advance()
                break
            params.append(self._parse_token())

        return CallExpression(name=head.value, params=tuple(params))


def parse(tokens: list[Token]) -> Program:
    """
    Parse tokens into a source Program.

    Args:
        tokens: Tokens produced by the lexer

    Returns:
        The source AST root
    """
    return Parser(tokens).parse()
