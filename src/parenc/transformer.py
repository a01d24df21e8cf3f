"""
parenc AST Transformer
======================

Rewrites the source AST into a target AST whose shape matches the output
language:

    source                          target
    ------                          ------
    Program                         Program
    CallExpression (top level)      ExpressionStatement(CallExpression)
    CallExpression (argument)       CallExpression
    name                            Identifier
    NumberLiteral / StringLiteral   NumberLiteral / StringLiteral

Traversal is pre-order. Each visit receives the collector its result
belongs in and whether the source parent is the Program, so the source
nodes are never annotated and the target nodes are built whole.
"""

from parenc import ast as src
from parenc import target_ast as tgt
from parenc.ast import NodeVisitor, SOURCE_KINDS


class NodeCollector:
    """
    Accumulates the target nodes built for one parent.

    A collector is created per target node that has children (the Program
    body, each call's arguments) and is handed down to the visits of the
    matching source children.
    """

    def __init__(self):
        self._nodes: list = []

    def append(self, node) -> None:
        """Add a finished target node."""
        self._nodes.append(node)

    def build(self) -> tuple:
        """Return the collected nodes in order."""
        return tuple(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)


class Transformer(NodeVisitor):
    """
    Converts a source Program into a target Program.

    Usage:
        target = Transformer().transform(program)
    """

    HANDLES = SOURCE_KINDS
    NODE_TYPE = src.SourceNode
    STAGE = "transformer"

    def transform(self, program: src.Program) -> tgt.Program:
        """
        Transform a source Program.

        Args:
            program: Root of the source AST

        Returns:
            Root of the target AST

        Raises:
            InvariantViolationError: If a node of unknown kind is reached
        """
        root = NodeCollector()
        self.visit(program, root, top_level=False)
        (target,) = root.build()
        return target

    def visit_program(self, node: src.Program, slot: NodeCollector, top_level: bool) -> None:
        body = NodeCollector()
        for child in node.body:
            self.visit(child, body, top_level=True)

        slot.append(tgt.Program(body=body.build()))

    def visit_call_expression(
        self, node: src.CallExpression, slot: NodeCollector, top_level: bool
    ) -> None:
        arguments = NodeCollector()
        for child in node.params:
            self.visit(child, arguments, top_level=False)

        expression = tgt.CallExpression(
            callee=tgt.Identifier(node.name),
            arguments=arguments.build(),
        )

        if top_level:
            slot.append(tgt.ExpressionStatement(expression))
        else:
            slot.append(expression)

    def visit_number_literal(
        self, node: src.NumberLiteral, slot: NodeCollector, top_level: bool
    ) -> None:
        slot.append(tgt.NumberLiteral(node.value))

    def visit_string_literal(
        self, node: src.StringLiteral, slot: NodeCollector, top_level: bool
    ) -> None:
        slot.append(tgt.StringLiteral(node.value))


def transform(program: src.Program) -> tgt.Program:
    """Transform a source Program into a target Program."""
    return Transformer().transform(program)
