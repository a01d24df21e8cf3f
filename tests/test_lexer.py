# =============================================================================
# test_lexer.py - Lexer Unit Tests
# =============================================================================
# Tests for the s-expression lexer/tokenizer.
#
# Test coverage includes:
#   - Parentheses, numbers, strings and names
#   - Maximal digit and letter runs
#   - Whitespace handling
#   - Custom matcher lists
#   - Error conditions
# =============================================================================

import dataclasses

import pytest
from parenc.lexer import (
    Lexer,
    Token,
    TokenType,
    tokenize,
    DEFAULT_MATCHERS,
    WhitespaceMatcher,
)
from parenc.errors import (
    LexicalError,
    UnrecognizedCharacterError,
    UnterminatedStringError,
)


def kinds(source: str) -> list:
    """Helper returning just the token types for source."""
    return [t.type for t in tokenize(source)]


# =============================================================================
# Basic Token Recognition Tests
# =============================================================================

class TestBasicTokens:
    """Test basic token recognition for simple inputs."""

    def test_empty_source(self):
        """Empty input produces no tokens."""
        assert tokenize("") == []

    def test_whitespace_only(self):
        """Whitespace-only input produces no tokens."""
        assert tokenize("   \t\n  \r\n") == []

    def test_parentheses(self):
        tokens = tokenize("()")
        assert tokens == [
            Token(TokenType.OPEN_PAREN, "("),
            Token(TokenType.CLOSE_PAREN, ")"),
        ]

    def test_number(self):
        tokens = tokenize("42")
        assert tokens == [Token(TokenType.NUMBER, "42")]

    def test_number_keeps_leading_zeros(self):
        """Numbers keep the digits exactly as written."""
        assert tokenize("007") == [Token(TokenType.NUMBER, "007")]

    def test_name(self):
        assert tokenize("add") == [Token(TokenType.NAME, "add")]

    def test_name_mixed_case(self):
        """Letters are matched case-insensitively."""
        assert tokenize("AddNums") == [Token(TokenType.NAME, "AddNums")]

    def test_complete_expression(self):
        """The canonical example lexes to the expected token sequence."""
        tokens = tokenize("(add 2 (subtract 4 2))")
        assert tokens == [
            Token(TokenType.OPEN_PAREN, "("),
            Token(TokenType.NAME, "add"),
            Token(TokenType.NUMBER, "2"),
            Token(TokenType.OPEN_PAREN, "("),
            Token(TokenType.NAME, "subtract"),
            Token(TokenType.NUMBER, "4"),
            Token(TokenType.NUMBER, "2"),
            Token(TokenType.CLOSE_PAREN, ")"),
            Token(TokenType.CLOSE_PAREN, ")"),
        ]


# =============================================================================
# Maximal Run Tests
# =============================================================================

class TestMaximalRuns:
    """Digit and letter runs are always consumed in full."""

    def test_digits_form_one_token(self):
        """'12' is one NUMBER token, never two."""
        assert tokenize("12") == [Token(TokenType.NUMBER, "12")]

    def test_letters_then_digits_split(self):
        """A name stops at the first digit."""
        assert tokenize("add2") == [
            Token(TokenType.NAME, "add"),
            Token(TokenType.NUMBER, "2"),
        ]

    def test_digits_then_letters_split(self):
        assert tokenize("2add") == [
            Token(TokenType.NUMBER, "2"),
            Token(TokenType.NAME, "add"),
        ]

    def test_paren_ends_run(self):
        assert kinds("(f 12)") == [
            TokenType.OPEN_PAREN,
            TokenType.NAME,
            TokenType.NUMBER,
            TokenType.CLOSE_PAREN,
        ]


# =============================================================================
# String Literal Tests
# =============================================================================

class TestStrings:
    """Test string literal recognition."""

    def test_simple_string(self):
        assert tokenize('"hello"') == [Token(TokenType.STRING, "hello")]

    def test_empty_string(self):
        assert tokenize('""') == [Token(TokenType.STRING, "")]

    def test_string_preserves_content(self):
        """Everything except '"' is kept verbatim, including spaces and parens."""
        content = "a (b) 12 \t #!\\n"
        assert tokenize(f'"{content}"') == [Token(TokenType.STRING, content)]

    def test_no_escape_sequences(self):
        """A backslash does not escape the closing quote."""
        assert tokenize('"a\\" b') == [
            Token(TokenType.STRING, "a\\"),
            Token(TokenType.NAME, "b"),
        ]

    def test_quote_ends_literal(self):
        """A '"' inside intended content ends the literal there."""
        assert tokenize('"ab""cd"') == [
            Token(TokenType.STRING, "ab"),
            Token(TokenType.STRING, "cd"),
        ]

    def test_unterminated_string(self):
        with pytest.raises(UnterminatedStringError):
            tokenize('(concat "ab')

    def test_lone_quote(self):
        with pytest.raises(UnterminatedStringError):
            tokenize('"')


# =============================================================================
# Whitespace Tests
# =============================================================================

class TestWhitespace:
    """Whitespace between tokens is insignificant."""

    def test_runs_equal_single_space(self):
        assert tokenize("(add  \t 2\n\n   3)") == tokenize("(add 2 3)")

    def test_leading_and_trailing_whitespace(self):
        assert tokenize("  (add 2 3)\n") == tokenize("(add 2 3)")

    def test_no_whitespace_needed_around_parens(self):
        assert tokenize("(add 2(sub 4 2))") == tokenize("(add 2 (sub 4 2))")

    @pytest.mark.parametrize("code", [0x0B, 0x0C, 0xA0, 0x2003, 0x2028, 0x3000, 0xFEFF])
    def test_unicode_whitespace_separates(self, code):
        """Vertical tab, form feed, Unicode spaces and the BOM separate tokens."""
        assert tokenize(f"(f{chr(code)}1)") == tokenize("(f 1)")

    @pytest.mark.parametrize("code", [0x1C, 0x1D, 0x1E, 0x1F, 0x85])
    def test_separator_controls_rejected(self, code):
        """Information separators and NEL are not whitespace."""
        with pytest.raises(UnrecognizedCharacterError) as exc_info:
            tokenize(f"(f{chr(code)}1)")
        assert exc_info.value.char == chr(code)


# =============================================================================
# Error Tests
# =============================================================================

class TestErrors:
    """Test lexer error conditions."""

    @pytest.mark.parametrize("char", ["#", "-", "_", ".", "+", "'", "é"])
    def test_unrecognized_character(self, char):
        """The error carries the offending character."""
        with pytest.raises(UnrecognizedCharacterError) as exc_info:
            tokenize(f"(add 2 {char})")
        assert exc_info.value.char == char

    def test_error_message(self):
        with pytest.raises(UnrecognizedCharacterError) as exc_info:
            tokenize("#")
        assert "unrecognized character '#'" in str(exc_info.value)

    def test_errors_are_lexical(self):
        with pytest.raises(LexicalError):
            tokenize("1.5")


# =============================================================================
# Matcher Configuration Tests
# =============================================================================

class TestMatchers:
    """The lexer uses whatever ordered matchers it is given."""

    def test_default_matchers_order(self):
        """Whitespace is tried first."""
        assert isinstance(DEFAULT_MATCHERS[0], WhitespaceMatcher)

    def test_without_whitespace_matcher(self):
        """Removing a matcher removes its lexical class."""
        matchers = DEFAULT_MATCHERS[1:]
        with pytest.raises(UnrecognizedCharacterError) as exc_info:
            tokenize("(add 2)", matchers)
        assert exc_info.value.char == " "

    def test_lexer_can_be_reused(self):
        """tokenize() always starts from position 0."""
        lexer = Lexer("(f 1)")
        assert list(lexer.tokenize()) == list(lexer.tokenize())

    def test_tokens_are_immutable(self):
        token = Token(TokenType.NAME, "add")
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.value = "sub"

    def test_token_repr(self):
        assert repr(Token(TokenType.NUMBER, "2")) == "Token(NUMBER, '2')"
