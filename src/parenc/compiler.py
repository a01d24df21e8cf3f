"""
parenc Compiler Main Module
===========================

This module provides the main compiler interface. It composes the four
stages into one pipeline:

    Source → Lex → Parse → Transform → Generate → Output

Usage
-----
Command line:
    $ parenc -e "(add 2 (subtract 4 2))"
    add(2, subtract(4, 2));

Programmatic:
    >>> from parenc import compile
    >>> compile("(add 2 3) (sub 4 1)")
    'add(2, 3);\\nsub(4, 1);'

Error Handling
--------------
The first error raised by any stage aborts the compilation and propagates
to the caller unchanged; no partial output is produced.

Limits
------
Parsing, transformation and generation recurse once per level of call
nesting, so input nested deeper than the interpreter's recursion limit
fails with RecursionError. Input is never truncated to avoid this.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from parenc.config import CompilerOptions
from parenc.lexer import Token, tokenize
from parenc.parser import parse
from parenc.transformer import transform
from parenc.codegen import generate
from parenc.ast import Program, SourceASTPrinter
from parenc import target_ast
from parenc.errors import ParencError

logger = logging.getLogger(__name__)


@dataclass
class CompilerResult:
    """
    Result of a compilation, including every intermediate product.

    Attributes:
        filename: Source filename ("<input>" for strings)
        tokens: Tokens produced by the lexer
        ast: Source AST produced by the parser
        target: Target AST produced by the transformer
        output: Generated text
    """
    filename: str = "<input>"
    tokens: list[Token] = field(default_factory=list)
    ast: Optional[Program] = None
    target: Optional[target_ast.Program] = None
    output: str = ""

    @property
    def token_count(self) -> int:
        return len(self.tokens)


class Compiler:
    """
    s-expression to call-expression compiler.

    Holds only configuration; every call to compile_source() works on its
    own tokens and trees, so one instance may be shared between threads.

    Example:
        compiler = Compiler()
        result = compiler.compile_source("(add 2 3)")
        print(result.output)

    Attributes:
        options: Compiler configuration options
    """

    def __init__(self, options: Optional[CompilerOptions] = None):
        self.options = options or CompilerOptions()

    def compile_source(self, source: str, filename: str = "<input>") -> CompilerResult:
        """
        Compile source text.

        Args:
            source: Text in the s-expression language
            filename: Source name used in log messages

        Returns:
            CompilerResult holding the output and intermediate products

        Raises:
            ParencError: If any stage fails
        """
        result = CompilerResult(filename=filename)

        try:
            # Stage 1: Lexical analysis
            result.tokens = tokenize(source)
            logger.debug(f"{filename}: lexed {result.token_count} tokens")
            if self.options.trace_stages:
                logger.debug(f"{filename}: tokens {result.tokens!r}")

            # Stage 2: Parsing
            result.ast = parse(result.tokens)
            logger.debug(f"{filename}: parsed {len(result.ast.body)} top-level expressions")
            if self.options.trace_stages:
                printer = SourceASTPrinter(self.options.printer_indent)
                logger.debug(f"{filename}: source AST\n{printer.print(result.ast)}")

            # Stage 3: Transformation
            result.target = transform(result.ast)
            if self.options.trace_stages:
                printer = target_ast.ASTPrinter(self.options.printer_indent)
                logger.debug(f"{filename}: target AST\n{printer.print(result.target)}")

            # Stage 4: Code generation
            result.output = generate(result.target)
            logger.debug(f"{filename}: generated {len(result.output)} characters")

        except ParencError as e:
            logger.debug(f"{filename}: compilation failed: {e.message}")
            raise

        return result

    def compile_file(self, filepath: str) -> CompilerResult:
        """
        Compile a source file.

        Args:
            filepath: Path to the source file (read as UTF-8)

        Returns:
            CompilerResult containing the output

        Raises:
            ParencError: If compilation fails
            FileNotFoundError: If source file not found
        """
        path = Path(filepath)
        if not path.exists():
            raise FileNotFoundError(f"Source file not found: {filepath}")

        source = path.read_text(encoding="utf-8")
        return self.compile_source(source, str(filepath))


# =============================================================================
# Convenience Functions
# =============================================================================

def compile(text: str) -> str:
    """
    Compile s-expression text to call-expression text.

    Equivalent to generate(transform(parse(tokenize(text)))).

    Args:
        text: Zero or more whitespace-separated s-expressions

    Returns:
        One output line per top-level expression

    Raises:
        ParencError: If compilation fails

    Example:
        >>> compile("(add 2 (subtract 4 2))")
        'add(2, subtract(4, 2));'
    """
    return Compiler().compile_source(text).output


def compile_file(filepath: str, output_path: Optional[str] = None) -> str:
    """
    Compile a source file, optionally writing the output to disk.

    Args:
        filepath: Path to the source file
        output_path: Optional path to write the output to

    Returns:
        The generated text

    Raises:
        ParencError: If compilation fails
        FileNotFoundError: If source file not found
    """
    result = Compiler().compile_file(filepath)

    if output_path:
        Path(output_path).write_text(result.output, encoding="utf-8")

    return result.output
