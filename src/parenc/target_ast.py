"""
parenc Target Abstract Syntax Tree
==================================

Node types for the C-like call-expression language the compiler emits.
The transformer builds these from the source AST and the code generator
renders them back to text.

Target Node Hierarchy
---------------------
TargetNode (base)
├── Program - root node holding the statements
├── ExpressionStatement - top-level expression terminated by ';'
├── CallExpression - callee(arguments...)
├── Identifier - a name
├── NumberLiteral - digit run, unchanged from the source
└── StringLiteral - string contents, unchanged from the source

ExpressionStatement only ever appears directly under Program; a call used
as an argument is a bare CallExpression.
"""

from dataclasses import dataclass
from typing import ClassVar, Union

from parenc.ast import NodeKind, NodeVisitor


# Kinds that can appear in a target tree
TARGET_KINDS = frozenset({
    NodeKind.PROGRAM,
    NodeKind.EXPRESSION_STATEMENT,
    NodeKind.CALL_EXPRESSION,
    NodeKind.IDENTIFIER,
    NodeKind.NUMBER_LITERAL,
    NodeKind.STRING_LITERAL,
})


# =============================================================================
# Target Nodes
# =============================================================================

@dataclass(frozen=True)
class TargetNode:
    """Base class for all target AST nodes."""
    kind: ClassVar[NodeKind]


@dataclass(frozen=True)
class Identifier(TargetNode):
    kind: ClassVar[NodeKind] = NodeKind.IDENTIFIER
    name: str


@dataclass(frozen=True)
class NumberLiteral(TargetNode):
    kind: ClassVar[NodeKind] = NodeKind.NUMBER_LITERAL
    value: str


@dataclass(frozen=True)
class StringLiteral(TargetNode):
    kind: ClassVar[NodeKind] = NodeKind.STRING_LITERAL
    value: str


@dataclass(frozen=True)
class CallExpression(TargetNode):
    """
    Function call: callee(arg, arg, ...)

    Attributes:
        callee: The function being called
        arguments: Argument expressions in order
    """
    kind: ClassVar[NodeKind] = NodeKind.CALL_EXPRESSION
    callee: Identifier
    arguments: tuple["Expression", ...] = ()


Expression = Union[CallExpression, Identifier, NumberLiteral, StringLiteral]


@dataclass(frozen=True)
class ExpressionStatement(TargetNode):
    """
    Top-level expression used as a statement.

    Attributes:
        expression: The wrapped expression (always exactly one)
    """
    kind: ClassVar[NodeKind] = NodeKind.EXPRESSION_STATEMENT
    expression: Expression


@dataclass(frozen=True)
class Program(TargetNode):
    """
    Root node of the target AST.

    Attributes:
        body: Statements (and bare top-level literals) in source order
    """
    kind: ClassVar[NodeKind] = NodeKind.PROGRAM
    body: tuple[Union[ExpressionStatement, Expression], ...] = ()


# =============================================================================
# AST Pretty Printer
# =============================================================================

class ASTPrinter(NodeVisitor):
    """
    Pretty printer for target AST debugging.

    Produces one line per node, indented once per level of depth:

        Program
            ExpressionStatement
                CallExpression
                    Identifier - add
                    NumberLiteral - 2

    Usage:
        printer = ASTPrinter()
        output = printer.print(ast)
        print(output)
    """

    HANDLES = TARGET_KINDS
    NODE_TYPE = TargetNode
    STAGE = "printer"

    def __init__(self, indent: str = "\t"):
        self.indent = indent
        self.output: list[str] = []

    def print(self, node: TargetNode) -> str:
        """Print the AST and return as string."""
        self.output = []
        self.visit(node, 0)
        return "\n".join(self.output)

    def _emit(self, depth: int, text: str) -> None:
        """Emit a line at the given depth."""
        self.output.append(f"{self.indent * depth}{text}")

    def visit_program(self, node: Program, depth: int) -> None:
        self._emit(depth, "Program")
        for child in node.body:
            self.visit(child, depth + 1)

    def visit_expression_statement(self, node: ExpressionStatement, depth: int) -> None:
        self._emit(depth, "ExpressionStatement")
        self.visit(node.expression, depth + 1)

    def visit_call_expression(self, node: CallExpression, depth: int) -> None:
        self._emit(depth, "CallExpression")
        self.visit(node.callee, depth + 1)
        for argument in node.arguments:
            self.visit(argument, depth + 1)

    def visit_identifier(self, node: Identifier, depth: int) -> None:
        self._emit(depth, f"Identifier - {node.name}")

    def visit_number_literal(self, node: NumberLiteral, depth: int) -> None:
        self._emit(depth, f"NumberLiteral - {node.value}")

    def visit_string_literal(self, node: StringLiteral, depth: int) -> None:
        self._emit(depth, f'StringLiteral - "{node.value}"')
