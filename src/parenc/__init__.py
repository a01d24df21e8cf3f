"""
parenc - s-expression to Call-Expression Compiler
=================================================

This package compiles a small Lisp-like language of nested parenthesized
calls into C-like function-call expressions:

    (add 2 (subtract 4 2))    →    add(2, subtract(4, 2));

Pipeline
--------
The compilation process follows this pipeline:

    Source → Lexer → Tokens → Parser → Source AST
           → Transformer → Target AST → Code Generator → Output

Each stage lives in its own module and can be used on its own:

- **lexer**: tokenize(text) → list of Token
- **parser**: parse(tokens) → source Program
- **transformer**: transform(program) → target Program
- **codegen**: generate(target) → text
- **compiler**: compile(text) → text, and the Compiler class

Quick Start
-----------
>>> from parenc import compile
>>> print(compile('(concat "ab" "cd") (add 2 3)'))
concat("ab", "cd");
add(2, 3);

Or use the command-line tool:
    $ parenc -e "(add 2 3)"
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from parenc.compiler import Compiler, CompilerResult, compile, compile_file
from parenc.config import CompilerOptions
from parenc.lexer import Lexer, Token, TokenType, tokenize, DEFAULT_MATCHERS
from parenc.parser import Parser, parse
from parenc.transformer import Transformer, NodeCollector, transform
from parenc.codegen import CodeGenerator, generate
from parenc.ast import NodeKind
from parenc.errors import (
    ParencError,
    LexicalError,
    UnrecognizedCharacterError,
    UnterminatedStringError,
    ParseError,
    UnexpectedTokenError,
    UnexpectedEndOfInputError,
    InvariantViolationError,
)

__all__ = [
    # Version
    "__version__",
    # Main API
    "Compiler",
    "CompilerResult",
    "CompilerOptions",
    "compile",
    "compile_file",
    # Stages
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    "DEFAULT_MATCHERS",
    "Parser",
    "parse",
    "Transformer",
    "NodeCollector",
    "transform",
    "CodeGenerator",
    "generate",
    "NodeKind",
    # Errors
    "ParencError",
    "LexicalError",
    "UnrecognizedCharacterError",
    "UnterminatedStringError",
    "ParseError",
    "UnexpectedTokenError",
    "UnexpectedEndOfInputError",
    "InvariantViolationError",
]
