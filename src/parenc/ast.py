"""
parenc Source Abstract Syntax Tree
==================================

This module defines the node kinds shared by both trees the compiler
builds, the source AST produced by the parser, and the visitor base class
that every tree consumer dispatches through.

Source Node Hierarchy
---------------------
SourceNode (base)
├── Program - root node holding the top-level expressions
├── CallExpression - (name param param ...)
├── NumberLiteral - digit run
└── StringLiteral - string contents

Design Notes
------------
- All nodes are frozen dataclasses; child sequences are tuples
- Every node class names its NodeKind, and consumers dispatch on it
- A visitor lists the kinds it handles in HANDLES, and a node of any
  other kind raises InvariantViolationError instead of being skipped
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Union

from parenc.errors import InvariantViolationError


# =============================================================================
# Node Kinds
# =============================================================================

class NodeKind(Enum):
    """Every node kind in the source and target trees."""

    PROGRAM = "program"
    CALL_EXPRESSION = "call_expression"
    NUMBER_LITERAL = "number_literal"
    STRING_LITERAL = "string_literal"
    IDENTIFIER = "identifier"
    EXPRESSION_STATEMENT = "expression_statement"


# Kinds that can appear in a source tree
SOURCE_KINDS = frozenset({
    NodeKind.PROGRAM,
    NodeKind.CALL_EXPRESSION,
    NodeKind.NUMBER_LITERAL,
    NodeKind.STRING_LITERAL,
})


# =============================================================================
# Source Nodes
# =============================================================================

@dataclass(frozen=True)
class SourceNode:
    """Base class for all source AST nodes."""
    kind: ClassVar[NodeKind]


@dataclass(frozen=True)
class NumberLiteral(SourceNode):
    """
    Integer literal, kept as the digits that were written.

    Attributes:
        value: The digit string (leading zeros preserved)
    """
    kind: ClassVar[NodeKind] = NodeKind.NUMBER_LITERAL
    value: str


@dataclass(frozen=True)
class StringLiteral(SourceNode):
    """
    String literal.

    Attributes:
        value: The characters between the quotes
    """
    kind: ClassVar[NodeKind] = NodeKind.STRING_LITERAL
    value: str


@dataclass(frozen=True)
class CallExpression(SourceNode):
    """
    Call expression: (name param param ...)

    Attributes:
        name: Function name from the NAME token after '('
        params: Arguments in source order (zero or more)
    """
    kind: ClassVar[NodeKind] = NodeKind.CALL_EXPRESSION
    name: str
    params: tuple["Expression", ...] = ()


# Anything that can appear in Program.body or CallExpression.params
Expression = Union[CallExpression, NumberLiteral, StringLiteral]


@dataclass(frozen=True)
class Program(SourceNode):
    """
    Root node of the source AST.

    Attributes:
        body: Top-level expressions in source order
    """
    kind: ClassVar[NodeKind] = NodeKind.PROGRAM
    body: tuple[Expression, ...] = ()


# =============================================================================
# Visitor Pattern
# =============================================================================

class NodeVisitor:
    """
    Base class for tree visitors.

    Dispatches on a node's kind to a method named visit_<kind>, e.g.
    visit_call_expression. Subclasses list the kinds they handle in
    HANDLES; a node outside that set raises InvariantViolationError.

    Usage:
        class CallCounter(NodeVisitor):
            HANDLES = SOURCE_KINDS
            ...

        CallCounter().visit(program)
    """

    HANDLES: ClassVar[frozenset] = frozenset()

    # Base class every visited node must derive from
    NODE_TYPE: ClassVar[type] = object

    # Stage name reported in InvariantViolationError
    STAGE: ClassVar[str] = "visitor"

    @classmethod
    def missing_handlers(cls) -> list[NodeKind]:
        """Return the kinds in HANDLES that have no visit method."""
        return sorted(
            (kind for kind in cls.HANDLES if not hasattr(cls, f"visit_{kind.value}")),
            key=lambda kind: kind.value,
        )

    def visit(self, node, *args, **kwargs):
        """
        Visit a node by dispatching to the method for its kind.

        Extra arguments are passed through to the visit method.

        Raises:
            InvariantViolationError: If the node's kind is not handled
        """
        kind = getattr(node, "kind", None)
        if kind not in self.HANDLES or not isinstance(node, self.NODE_TYPE):
            name = kind.value if isinstance(kind, NodeKind) else type(node).__name__
            raise InvariantViolationError(name, self.STAGE)

        return getattr(self, f"visit_{kind.value}")(node, *args, **kwargs)


# =============================================================================
# AST Pretty Printer
# =============================================================================

class SourceASTPrinter(NodeVisitor):
    """
    Pretty printer for source AST debugging.

    Usage:
        printer = SourceASTPrinter()
        print(printer.print(program))
    """

    HANDLES = SOURCE_KINDS
    NODE_TYPE = SourceNode
    STAGE = "source printer"

    def __init__(self, indent: str = "\t"):
        self.indent = indent
        self.output: list[str] = []

    def print(self, node: SourceNode) -> str:
        """Print the tree and return it as a string."""
        self.output = []
        self.visit(node, 0)
        return "\n".join(self.output)

    def _emit(self, depth: int, text: str) -> None:
        self.output.append(f"{self.indent * depth}{text}")

    def visit_program(self, node: Program, depth: int) -> None:
        self._emit(depth, "Program")
        for child in node.body:
            self.visit(child, depth + 1)

    def visit_call_expression(self, node: CallExpression, depth: int) -> None:
        self._emit(depth, f"CallExpression - {node.name}")
        for child in node.params:
            self.visit(child, depth + 1)

    def visit_number_literal(self, node: NumberLiteral, depth: int) -> None:
        self._emit(depth, f"NumberLiteral - {node.value}")

    def visit_string_literal(self, node: StringLiteral, depth: int) -> None:
        self._emit(depth, f'StringLiteral - "{node.value}"')
