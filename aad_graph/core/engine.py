# aad_graph/core/engine.py
from __future__ import annotations
from typing import Callable, List, Tuple
from .graph import Graph
from .node import Node, Operation

Adjacency = List[List[int]]


def adjacency(graph: Graph) -> Tuple[Adjacency, Adjacency]:
    """
    Build the forward (producer -> consumers) and backward (consumer -> producers)
    adjacency lists of the whole graph. Neighbours keep edge insertion order.
    """
    forward: Adjacency = [[] for _ in range(len(graph))]
    backward: Adjacency = [[] for _ in range(len(graph))]
    for e in graph.edges():
        forward[e.source].append(e.target)
        backward[e.target].append(e.source)
    return forward, backward


def visit_component(graph: Graph, root: int, on_visit: Callable[[Node], None]) -> None:
    """
    Visit every node weakly connected to `root`, each exactly once.

    Order, per node: mark visited, exhaust all unvisited consumers (forward
    neighbours), call `on_visit`, then descend into unvisited operands
    (backward neighbours). When `root` is the sink of its component this runs
    every consumer of a node before the node itself.

    The recursion is unrolled onto an explicit stack so long chains do not hit
    the interpreter's recursion limit; the visiting order is unchanged.
    """
    graph.node(root)
    forward, backward = adjacency(graph)
    visited = [False] * len(graph)

    visited[root] = True
    # frame: (node id, pending neighbours, on_visit already called)
    stack = [(root, iter(forward[root]), False)]
    while stack:
        node_id, pending, done = stack[-1]
        for nxt in pending:
            if not visited[nxt]:
                visited[nxt] = True
                stack.append((nxt, iter(forward[nxt]), False))
                break
        else:
            if done:
                stack.pop()
            else:
                on_visit(graph.node(node_id))
                stack[-1] = (node_id, iter(backward[node_id]), True)


def topological_order(graph: Graph, root: int) -> List[int]:
    """
    Ids of `root` and all of its ancestors, each after all of its operands
    (iterative postorder over operand links). `root` is always last.
    """
    graph.node(root)
    order: List[int] = []
    visited = {root}
    stack = [(root, iter(graph.node(root).operands))]
    while stack:
        node_id, parents = stack[-1]
        for p in parents:
            if p not in visited:
                visited.add(p)
                stack.append((p, iter(graph.node(p).operands)))
                break
        else:
            stack.pop()
            order.append(node_id)
    return order


def zero_grad(node: Node) -> None:
    """
    Set grad to zero on `node` and on every node of its dependency component,
    upstream and downstream alike.
    """
    def _zero(v: Node):
        v.grad = 0.0
    visit_component(node.graph, node.id, _zero)


def backward(node: Node) -> None:
    """
    Run a single reverse pass from `node`.

    Seeds node.grad = 1 and applies each ancestor's gradient-distribution rule
    exactly once, consumers before operands, so every node has received all
    contributions before it distributes its own grad:
        p.grad += y.grad * (dy/dp)
    Only ancestors of `node` are traversed, so the root need not be a sink.
    Grads are accumulated; call zero_grad() first for a fresh pass.
    """
    graph = node.graph
    node.grad = 1.0
    for node_id in reversed(topological_order(graph, node.id)):
        _distribute(graph, graph.node(node_id))


def _distribute(graph: Graph, y: Node) -> None:
    """Apply the fixed gradient-distribution rule selected by y.op."""
    if y.op is Operation.LEAF:
        return
    if y.grad == 0:
        return  # nothing to propagate
    lhs, rhs = (graph.node(i) for i in y.operands)

    if y.op is Operation.SUM:
        # y = x + z ; dy/dx = dy/dz = 1
        lhs.grad += y.grad
        rhs.grad += y.grad
    elif y.op is Operation.PRODUCT:
        # y = x * z ; dy/dx = z, dy/dz = x
        lhs.grad += y.grad * rhs.value
        rhs.grad += y.grad * lhs.value
    else:
        raise ValueError(f"No gradient rule for operation {y.op}")
