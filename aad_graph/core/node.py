# aad_graph/core/node.py
from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Tuple


class Operation(Enum):
    """Tag of the operation that produced a node."""
    LEAF = "leaf"
    SUM = "sum"
    PRODUCT = "product"

    @property
    def symbol(self) -> str:
        return _SYMBOLS[self]


_SYMBOLS = {Operation.LEAF: "?", Operation.SUM: "+", Operation.PRODUCT: "*"}


@dataclass(eq=False)
class Node:
    """
    One scalar quantity recorded in a Graph.

    Attributes
    ----------
    graph    : Graph
        The graph that owns this node. Nodes are only created through
        `Graph.create_leaf` / `Graph.create_binary`.
    id       : int
        Position of the node in its graph; dense and assigned in creation order.
    value    : np.float64
        Primal value, computed once at creation.
    op       : Operation
        LEAF, SUM or PRODUCT. Selects the gradient-distribution rule.
    operands : Tuple[int, ...]
        Ids of the operand nodes, `()` for leaves and `(lhs, rhs)` otherwise.
    grad     : float
        Adjoint accumulator. The only field a pass may mutate.
    """
    graph: Any = field(repr=False)
    id: int
    value: Any
    op: Operation
    operands: Tuple[int, ...] = ()
    grad: Any = 0.0

    @property
    def is_leaf(self) -> bool:
        return self.op is Operation.LEAF

    # Operator overloading, see ops/arithmetic.py
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def zero_grad(self) -> None:
        """Reset grad on every node of this node's dependency component."""
        from .engine import zero_grad
        zero_grad(self)

    def backward(self) -> None:
        """Seed grad = 1 here and propagate it to every ancestor."""
        from .engine import backward
        backward(self)
