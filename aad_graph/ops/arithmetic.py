# aad_graph/ops/arithmetic.py
import numpy as np
from ..core.node import Node, Operation


def _as_node(x, graph):
    """Ensure x is a Node of `graph`; plain numbers become LEAF nodes in it."""
    if isinstance(x, Node):
        if x.graph is not graph:
            raise ValueError("Cannot combine nodes that belong to different graphs")
        return x
    return graph.create_leaf(x)


def _is_operand(x):
    return isinstance(x, Node) or (
        not isinstance(x, bool) and isinstance(x, (int, float, np.integer, np.floating))
    )


def _binary(x, y, f, op):
    """
    Generic binary primitive:
      - computes out.value = f(x.value, y.value)
      - records a node tagged `op` with operand edges x -> out, y -> out
    Gradients are left untouched; the engine applies the rule for `op` later.
    """
    if not (_is_operand(x) and _is_operand(y)):
        return NotImplemented
    if not (isinstance(x, Node) or isinstance(y, Node)):
        raise TypeError("At least one operand must be a Node")
    graph = x.graph if isinstance(x, Node) else y.graph
    x = _as_node(x, graph)
    y = _as_node(y, graph)
    return graph.create_binary(f(x.value, y.value), op, x.id, y.id)


def add(x, y): return _binary(x, y, lambda a, b: a + b, Operation.SUM)
def mul(x, y): return _binary(x, y, lambda a, b: a * b, Operation.PRODUCT)
