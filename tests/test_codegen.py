"""
Code Generator Test Suite
=========================

Tests for rendering target ASTs to text and for the target tree printer.
"""

import pytest
from parenc import ast as src
from parenc.target_ast import (
    ASTPrinter,
    Program,
    ExpressionStatement,
    CallExpression,
    Identifier,
    NumberLiteral,
    StringLiteral,
)
from parenc.codegen import CodeGenerator, generate
from parenc.errors import InvariantViolationError


def call(name: str, *arguments) -> CallExpression:
    """Helper to build a target call."""
    return CallExpression(callee=Identifier(name), arguments=tuple(arguments))


# =============================================================================
# Rendering Tests
# =============================================================================

class TestCodeGen:
    """Tests for output text generation."""

    def test_identifier(self):
        assert generate(Identifier("add")) == "add"

    def test_number_verbatim(self):
        """Digits are copied as written, not re-formatted."""
        assert generate(NumberLiteral("007")) == "007"

    def test_string_quoted(self):
        assert generate(StringLiteral("a b")) == '"a b"'

    def test_string_not_escaped(self):
        assert generate(StringLiteral("a\\b")) == '"a\\b"'

    def test_call_without_arguments(self):
        assert generate(call("now")) == "now()"

    def test_call_arguments_separated(self):
        node = call("f", NumberLiteral("1"), StringLiteral("x"), Identifier("y"))
        assert generate(node) == 'f(1, "x", y)'

    def test_nested_call_not_terminated(self):
        node = call("add", NumberLiteral("2"), call("subtract", NumberLiteral("4"), NumberLiteral("2")))
        assert generate(node) == "add(2, subtract(4, 2))"

    def test_expression_statement(self):
        assert generate(ExpressionStatement(call("f", NumberLiteral("1")))) == "f(1);"

    def test_program_lines(self):
        program = Program(body=(
            ExpressionStatement(call("add", NumberLiteral("2"), NumberLiteral("3"))),
            ExpressionStatement(call("sub", NumberLiteral("4"), NumberLiteral("1"))),
        ))
        assert generate(program) == "add(2, 3);\nsub(4, 1);"

    def test_empty_program(self):
        assert generate(Program()) == ""

    def test_generator_class(self):
        assert CodeGenerator().generate(call("f")) == "f()"


class TestCodeGenErrors:
    """Nodes outside the target tree are rejected."""

    def test_source_node_rejected(self):
        with pytest.raises(InvariantViolationError) as exc_info:
            generate(src.CallExpression("f"))
        assert exc_info.value.kind == "call_expression"
        assert exc_info.value.stage == "code generator"

    def test_non_node_rejected(self):
        with pytest.raises(InvariantViolationError):
            generate(Program(body=("f(1);",)))


# =============================================================================
# Target AST Printer
# =============================================================================

class TestASTPrinter:
    """Tests for the target tree debug printer."""

    def test_print_canonical_example(self):
        program = Program(body=(
            ExpressionStatement(
                call("add", NumberLiteral("2"), call("subtract", NumberLiteral("4"), NumberLiteral("2")))
            ),
        ))
        assert ASTPrinter().print(program) == "\n".join([
            "Program",
            "\tExpressionStatement",
            "\t\tCallExpression",
            "\t\t\tIdentifier - add",
            "\t\t\tNumberLiteral - 2",
            "\t\t\tCallExpression",
            "\t\t\t\tIdentifier - subtract",
            "\t\t\t\tNumberLiteral - 4",
            "\t\t\t\tNumberLiteral - 2",
        ])

    def test_custom_indent(self):
        output = ASTPrinter("  ").print(Program(body=(StringLiteral("s"),)))
        assert output == 'Program\n  StringLiteral - "s"'

    def test_printer_reusable(self):
        printer = ASTPrinter()
        node = call("f")
        assert printer.print(node) == printer.print(node)

    def test_handles_every_target_kind(self):
        assert ASTPrinter.missing_handlers() == []

    def test_source_node_rejected(self):
        with pytest.raises(InvariantViolationError):
            ASTPrinter().print(src.Program())
