#!/usr/bin/env python3
"""
parenc Pipeline Demo
====================

This script walks one expression through every compiler stage and prints
what each stage produces:
1. Tokens from the lexer
2. Source AST from the parser
3. Target AST from the transformer
4. Output text from the code generator

Usage:
    python examples/compile_demo.py
    python examples/compile_demo.py '(concat "ab" (upper "cd"))'
"""

import sys

from parenc import tokenize, parse, transform, generate
from parenc.ast import SourceASTPrinter
from parenc.target_ast import ASTPrinter


def main():
    source = sys.argv[1] if len(sys.argv) > 1 else "(add 2 (subtract 4 2))"
    print(f"Input: {source}")

    # ==========================================================================
    # 1. Lexical analysis
    # ==========================================================================
    tokens = tokenize(source)
    print("\nTokens:")
    for token in tokens:
        print(f"  {token!r}")

    # ==========================================================================
    # 2. Parsing
    # ==========================================================================
    program = parse(tokens)
    print("\nSource AST:")
    print(SourceASTPrinter("  ").print(program))

    # ==========================================================================
    # 3. Transformation
    # ==========================================================================
    target = transform(program)
    print("\nTarget AST:")
    print(ASTPrinter("  ").print(target))

    # ==========================================================================
    # 4. Code generation
    # ==========================================================================
    print("\nOutput:")
    print(generate(target))


if __name__ == "__main__":
    main()
