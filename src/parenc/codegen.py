"""
parenc Code Generator
=====================

Renders a target AST as source text in the call-expression language.

Rendering Rules
---------------
| Node                | Output                                  |
|---------------------|-----------------------------------------|
| Program             | each element, joined with newlines      |
| ExpressionStatement | expression followed by ';'              |
| CallExpression      | callee(arg1, arg2, ...)                 |
| Identifier          | name                                    |
| NumberLiteral       | digits exactly as written               |
| StringLiteral       | "content" (no escaping)                 |
"""

from parenc.ast import NodeVisitor
from parenc.target_ast import (
    TARGET_KINDS,
    TargetNode,
    Program,
    ExpressionStatement,
    CallExpression,
    Identifier,
    NumberLiteral,
    StringLiteral,
)


class CodeGenerator(NodeVisitor):
    """
    Generates output text from the target AST.

    Usage:
        output = CodeGenerator().generate(target_program)
    """

    HANDLES = TARGET_KINDS
    NODE_TYPE = TargetNode
    STAGE = "code generator"

    def generate(self, node: TargetNode) -> str:
        """
        Render a target node and everything beneath it.

        Raises:
            InvariantViolationError: If a node of unknown kind is reached
        """
        return self.visit(node)

    def visit_program(self, node: Program) -> str:
        return "\n".join(self.visit(child) for child in node.body)

    def visit_expression_statement(self, node: ExpressionStatement) -> str:
        return self.visit(node.expression) + ";"

    def visit_call_expression(self, node: CallExpression) -> str:
        arguments = ", ".join(self.visit(argument) for argument in node.arguments)
        return f"{self.visit(node.callee)}({arguments})"

    def visit_identifier(self, node: Identifier) -> str:
        return node.name

    def visit_number_literal(self, node: NumberLiteral) -> str:
        return node.value

    def visit_string_literal(self, node: StringLiteral) -> str:
        return f'"{node.value}"'


def generate(node: TargetNode) -> str:
    """Render a target AST as output text."""
    return CodeGenerator().generate(node)
