# aad_graph/core/graph.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator, List, Tuple
import numpy as np

from .node import Node, Operation


@dataclass(frozen=True)
class Edge:
    """Directed producer -> consumer link between two node ids."""
    source: int
    target: int


def _as_scalar(value) -> np.float64:
    # bool is an int subclass but never a meaningful scalar here
    if isinstance(value, bool) or not isinstance(value, (int, float, np.integer, np.floating)):
        raise TypeError(
            f"Graph nodes only hold real scalars (int, float, numpy scalar), "
            f"but got {type(value)}"
        )
    return np.float64(value)


class Graph:
    """
    Append-only store of Nodes and Edges.

    Nodes are recorded in creation order and addressed by their integer id,
    which is also their index in `self._nodes`. Nothing is ever removed or
    reordered, so an id handed out once stays valid for the graph's lifetime.
    """

    def __init__(self):
        self._nodes: List[Node] = []
        self._edges: List[Edge] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __getitem__(self, node_id: int) -> Node:
        return self.node(node_id)

    def __repr__(self):
        return f"Graph(nodes={len(self._nodes)}, edges={len(self._edges)})"

    def node(self, node_id: int) -> Node:
        self._check_id(node_id)
        return self._nodes[node_id]

    def nodes(self) -> Tuple[Node, ...]:
        """Read-only snapshot of all nodes, ordered by id."""
        return tuple(self._nodes)

    def edges(self) -> Tuple[Edge, ...]:
        """Read-only snapshot of all edges, in insertion order."""
        return tuple(self._edges)

    def create_leaf(self, value) -> Node:
        """Append a LEAF node holding `value`. Records no edges."""
        node = Node(graph=self, id=len(self._nodes), value=_as_scalar(value), op=Operation.LEAF)
        self._nodes.append(node)
        return node

    def create_binary(self, value, operation: Operation, lhs_id: int, rhs_id: int) -> Node:
        """
        Append the result of a binary operation.

        Records the edges lhs_id -> new and rhs_id -> new, in that order.
        `operation` decides which gradient-distribution rule the engine applies
        to this node during a backward pass.
        """
        if operation not in (Operation.SUM, Operation.PRODUCT):
            raise ValueError(f"Binary nodes must be SUM or PRODUCT, got {operation}")
        self._check_id(lhs_id)
        self._check_id(rhs_id)

        next_id = len(self._nodes)
        self._edges.append(Edge(lhs_id, next_id))
        self._edges.append(Edge(rhs_id, next_id))
        node = Node(graph=self, id=next_id, value=_as_scalar(value), op=operation,
                    operands=(lhs_id, rhs_id))
        self._nodes.append(node)
        return node

    def _check_id(self, node_id: int) -> None:
        if isinstance(node_id, bool) or not isinstance(node_id, (int, np.integer)):
            raise TypeError(f"Node ids are integers, got {type(node_id)}")
        if not 0 <= node_id < len(self._nodes):
            raise ValueError(f"Node id {node_id} does not belong to this graph "
                             f"(valid ids: 0..{len(self._nodes) - 1})")
