"""
parenc - Compiler Command-Line Interface
========================================

This module implements the command-line interface for the compiler.

Usage Examples
--------------
Compile a file to stdout:
    $ parenc program.lisp

Compile a file to another file:
    $ parenc program.lisp -o program.c

Compile an inline expression:
    $ parenc -e "(add 2 (subtract 4 2))"

Read one expression at the prompt:
    $ parenc
    Enter an expression: (add 2 3)
    add(2, 3);

Inspect intermediate products:
    $ parenc -e "(add 2 3)" --tokens
    $ parenc -e "(add 2 3)" --source-ast
    $ parenc -e "(add 2 3)" --ast
"""

import logging
from pathlib import Path
from typing import Optional

import click

from parenc import __version__
from parenc.compiler import Compiler
from parenc.lexer import tokenize
from parenc.parser import parse
from parenc.config import CompilerOptions
from parenc.ast import SourceASTPrinter
from parenc.target_ast import ASTPrinter
from parenc.cli.errors import handle_cli_exception


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-e", "--expression",
    help="Compile this expression instead of reading a file",
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Write output to this file (default: stdout)",
)
@click.option(
    "--tokens",
    is_flag=True,
    help="Print tokens and exit (for debugging)",
)
@click.option(
    "--source-ast",
    is_flag=True,
    help="Print the parsed AST and exit (for debugging)",
)
@click.option(
    "--ast",
    is_flag=True,
    help="Print the transformed AST and exit (for debugging)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="parenc")
def main(
    input_file: Optional[Path],
    expression: Optional[str],
    output: Optional[Path],
    tokens: bool,
    source_ast: bool,
    ast: bool,
    verbose: bool,
) -> None:
    """
    Compile s-expressions to C-like call expressions.

    INPUT_FILE is the source file to compile. Without INPUT_FILE or -e,
    one line is read from an interactive prompt.

    \b
    Examples:
        parenc program.lisp              # Print output to stdout
        parenc program.lisp -o out.c     # Write output to a file
        parenc -e "(add 2 3)"            # Compile an inline expression
        parenc --ast -e "(add 2 3)"      # Show the transformed AST
    """
    options = CompilerOptions.from_env()
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")
        options.trace_stages = True

    try:
        if input_file is not None and expression is not None:
            raise click.UsageError("give either INPUT_FILE or --expression, not both")

        if expression is not None:
            source, filename = expression, "<expression>"
        elif input_file is not None:
            source, filename = input_file.read_text(encoding="utf-8"), str(input_file)
        else:
            source, filename = click.prompt("Enter an expression"), "<stdin>"

        if verbose:
            click.echo(f"Compiling {filename}...", err=True)

        # Dump modes stop at the stage that produces their product, so a
        # later stage failing does not hide it
        if tokens:
            for token in tokenize(source):
                click.echo(repr(token))
            return
        if source_ast:
            program = parse(tokenize(source))
            click.echo(SourceASTPrinter(options.printer_indent).print(program))
            return

        compiler = Compiler(options)
        result = compiler.compile_source(source, filename)

        if ast:
            click.echo(ASTPrinter(options.printer_indent).print(result.target))
            return

        if output is not None:
            output.write_text(result.output + "\n", encoding="utf-8")
            if verbose:
                click.echo(f"Wrote {len(result.output)} characters to {output}", err=True)
        else:
            click.echo(result.output)

    except (click.ClickException, click.Abort):
        # click reports these itself ("Aborted!" on EOF at the prompt)
        raise
    except Exception as e:
        handle_cli_exception(e, verbose)


if __name__ == "__main__":
    main()
