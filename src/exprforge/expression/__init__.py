"""Arithmetic expression trees: nodes, generation and evaluation."""

from exprforge.expression.types import OPERATORS, NodeType, Operator
from exprforge.expression.arithmetic import DEFAULT_SEMANTICS, IntegerSemantics
from exprforge.expression.nodes import (
    Node,
    LiteralNode,
    OperatorNode,
)
from exprforge.expression.generator import (
    TreeGenerator,
    count_candidates,
    generate_expressions,
)
from exprforge.expression.compiler import ExpressionCompiler, evaluate_candidates

__all__ = [
    "OPERATORS",
    "NodeType",
    "Operator",
    "DEFAULT_SEMANTICS",
    "IntegerSemantics",
    "Node",
    "LiteralNode",
    "OperatorNode",
    "TreeGenerator",
    "count_candidates",
    "generate_expressions",
    "ExpressionCompiler",
    "evaluate_candidates",
]
