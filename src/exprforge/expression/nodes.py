"""Expression tree nodes.

Implements the two node shapes of an arithmetic expression:
- LiteralNode: One input number (leaf)
- OperatorNode: A binary operator applied to two child subtrees

Nodes are immutable. A subtree may be the child of many different parents
at once; the generator relies on this to combine every left subtree with
every right subtree without copying.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from exprforge.expression.arithmetic import DEFAULT_SEMANTICS, IntegerSemantics
from exprforge.expression.types import NodeType, Operator


@dataclass(frozen=True)
class Node(ABC):
    """Abstract base class for expression tree nodes."""

    @property
    @abstractmethod
    def node_type(self) -> NodeType:
        """Get the type of this node."""
        pass

    @property
    @abstractmethod
    def arity(self) -> int:
        """Get the number of children this node has."""
        pass

    @abstractmethod
    def evaluate(self, semantics: IntegerSemantics = DEFAULT_SEMANTICS) -> int:
        """Compute the integer value of the subtree rooted here."""
        pass

    @abstractmethod
    def to_string(self) -> str:
        """Render the subtree as a fully parenthesized infix string."""
        pass

    def __str__(self) -> str:
        return self.to_string()


@dataclass(frozen=True)
class LiteralNode(Node):
    """Leaf node holding one number from the input sequence."""

    value: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", int(self.value))

    @property
    def node_type(self) -> NodeType:
        return NodeType.LITERAL

    @property
    def arity(self) -> int:
        return 0

    def evaluate(self, semantics: IntegerSemantics = DEFAULT_SEMANTICS) -> int:
        return self.value

    def to_string(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class OperatorNode(Node):
    """Binary operator node, e.g. ``(2+3)``.

    The operator is not validated on construction; an unknown symbol
    surfaces as InvalidOperatorError when the node is evaluated.
    """

    operator: Operator | str
    left: Node
    right: Node

    @property
    def node_type(self) -> NodeType:
        return NodeType.OPERATOR

    @property
    def arity(self) -> int:
        return 2

    @property
    def symbol(self) -> str:
        """Get the operator character used when rendering."""
        if isinstance(self.operator, Operator):
            return self.operator.symbol
        return str(self.operator)

    def evaluate(self, semantics: IntegerSemantics = DEFAULT_SEMANTICS) -> int:
        left_val = self.left.evaluate(semantics)
        right_val = self.right.evaluate(semantics)
        return semantics.apply(self.operator, left_val, right_val)

    def to_string(self) -> str:
        return f"({self.left.to_string()}{self.symbol}{self.right.to_string()})"


def count_nodes(node: Node) -> int:
    """Count total nodes in a subtree."""
    if isinstance(node, OperatorNode):
        return 1 + count_nodes(node.left) + count_nodes(node.right)
    return 1


def get_depth(node: Node) -> int:
    """Get the depth of a subtree."""
    if isinstance(node, OperatorNode):
        return 1 + max(get_depth(node.left), get_depth(node.right))
    return 1


def collect_literals(node: Node) -> list[int]:
    """Collect literal values left to right (in-order leaves)."""
    if isinstance(node, OperatorNode):
        return collect_literals(node.left) + collect_literals(node.right)
    return [node.value]
