# aad_graph/core/__init__.py

"""
Core public API for the aad_graph package.

Exports:
    Graph         : Append-only store of nodes and producer -> consumer edges.
    Node          : One scalar value recorded in a Graph.
    Operation     : LEAF / SUM / PRODUCT tag of a node.
    Edge          : (source, target) pair of node ids.
    backward      : Seed grad = 1 at a node and run one reverse pass.
    zero_grad     : Reset grads over a node's dependency component.
    grad, grads   : Convenience: gradients of a function built in a fresh graph.
    value         : Convenience: extract the primal value from a Node.
"""

from .node import Node, Operation
from .graph import Graph, Edge
from .engine import backward, zero_grad, visit_component, topological_order
from .seeds import grad, grads, grads_list, value

__all__ = [
    "Node", "Operation",
    "Graph", "Edge",
    "backward", "zero_grad", "visit_component", "topological_order",
    "grad", "grads", "grads_list", "value",
]
