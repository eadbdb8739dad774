"""
Reverse-pass tests: seeding, sum/product rules, shared sub-expressions,
zero_grad and traversal order.
"""

import numpy as np

from aad_graph import Graph
from aad_graph.core.engine import adjacency, visit_component, topological_order


def build_example():
    g = Graph()
    a = g.create_leaf(-2.1)
    b = g.create_leaf(2.2)
    c = g.create_leaf(1.1)
    d = a * b
    e = a * b
    cd = c * d
    f = cd + e
    return g, dict(a=a, b=b, c=c, d=d, e=e, cd=cd, f=f)


def test_backward_seeds_root():
    g = Graph()
    a = g.create_leaf(3.0)
    b = g.create_leaf(4.0)
    p = a * b
    p.zero_grad()
    p.backward()
    assert p.grad == 1


def test_lone_leaf():
    g = Graph()
    x = g.create_leaf(5.0)
    x.zero_grad()
    x.backward()
    assert x.grad == 1

    seen = []
    visit_component(g, x.id, lambda n: seen.append(n.id))
    assert seen == [x.id]


def test_sum_linearity():
    g = Graph()
    a = g.create_leaf(1.5)
    b = g.create_leaf(-7.0)
    s = a + b
    s.zero_grad()
    s.backward()
    assert a.grad == 1
    assert b.grad == 1


def test_product_rule():
    g = Graph()
    a = g.create_leaf(1.5)
    b = g.create_leaf(-7.0)
    p = a * b
    p.zero_grad()
    p.backward()
    assert a.grad == b.value
    assert b.grad == a.value


def test_square_accumulates_both_operands():
    g = Graph()
    a = g.create_leaf(3.0)
    sq = a * a
    sq.zero_grad()
    sq.backward()
    assert a.grad == 6.0


def test_shared_subexpression_example():
    g, n = build_example()
    f = n["f"]
    f.zero_grad()
    f.backward()

    a, b, c, d, e, cd = n["a"], n["b"], n["c"], n["d"], n["e"], n["cd"]
    assert f.grad == 1
    assert cd.grad == 1
    assert e.grad == 1
    assert d.grad == c.value
    assert c.grad == d.value
    assert np.isclose(c.grad, a.value * b.value)
    assert np.isclose(a.grad, b.value * d.grad + b.value * e.grad)
    assert np.isclose(b.grad, a.value * d.grad + a.value * e.grad)
    assert np.isclose(c.grad, -4.62)
    assert np.isclose(b.grad, -4.41)
    assert np.isclose(d.grad, 1.1)


def test_zero_grad_resets_component_and_is_idempotent():
    g, n = build_example()
    f = n["f"]
    f.backward()
    assert any(node.grad != 0 for node in g)

    f.zero_grad()
    assert all(node.grad == 0 for node in g)
    f.zero_grad()
    assert all(node.grad == 0 for node in g)


def test_zero_grad_reaches_downstream_nodes():
    g = Graph()
    a = g.create_leaf(2.0)
    b = g.create_leaf(3.0)
    s = (a * b) + a
    s.backward()
    assert s.grad == 1 and a.grad != 0

    a.zero_grad()
    assert all(node.grad == 0 for node in g)


def test_zero_grad_leaves_other_components_alone():
    g = Graph()
    a = g.create_leaf(2.0)
    b = g.create_leaf(3.0)
    p = a * b
    x = g.create_leaf(1.0)
    y = x + x
    y.backward()
    p.zero_grad()
    assert y.grad == 1
    assert x.grad == 2


def test_backward_accumulates_without_zero_grad():
    g = Graph()
    a = g.create_leaf(2.0)
    b = g.create_leaf(5.0)
    p = a * b
    p.backward()
    p.backward()
    # root is re-seeded, ancestors accumulate
    assert p.grad == 1
    assert a.grad == 2 * b.value
    assert b.grad == 2 * a.value


def test_backward_from_non_sink_node():
    g = Graph()
    a = g.create_leaf(2.0)
    b = g.create_leaf(3.0)
    p = a * b
    s = p + a
    s.zero_grad()
    p.backward()
    assert p.grad == 1
    assert a.grad == b.value
    assert b.grad == a.value
    assert s.grad == 0


def test_deep_chain_does_not_recurse():
    g = Graph()
    x = g.create_leaf(1.0)
    y = x
    for _ in range(5000):
        y = y + x
    y.zero_grad()
    y.backward()
    assert x.grad == 5001
    assert y.value == 5001


def test_adjacency_keeps_edge_order():
    g, n = build_example()
    forward, backward = adjacency(g)
    a, b, d, e = n["a"], n["b"], n["d"], n["e"]
    assert forward[a.id] == [d.id, e.id]
    assert forward[b.id] == [d.id, e.id]
    assert backward[n["f"].id] == [n["cd"].id, e.id]
    assert forward[n["f"].id] == []
    assert backward[a.id] == []


def test_visit_component_order_from_sink():
    g, n = build_example()
    order = []
    visit_component(g, n["f"].id, lambda node: order.append(node.id))
    ids = {k: v.id for k, v in n.items()}
    assert order == [ids["f"], ids["cd"], ids["c"], ids["d"], ids["e"], ids["b"], ids["a"]]
    assert sorted(order) == list(range(len(g)))


def test_visit_component_runs_consumers_first():
    g, n = build_example()
    order = []
    visit_component(g, n["f"].id, lambda node: order.append(node.id))
    position = {node_id: i for i, node_id in enumerate(order)}
    for edge in g.edges():
        assert position[edge.target] < position[edge.source]


def test_topological_order_over_ancestors():
    g, n = build_example()
    ids = {k: v.id for k, v in n.items()}
    order = topological_order(g, ids["f"])
    assert order == [ids["c"], ids["a"], ids["b"], ids["d"], ids["cd"], ids["e"], ids["f"]]

    assert topological_order(g, ids["d"]) == [ids["a"], ids["b"], ids["d"]]
    assert topological_order(g, ids["a"]) == [ids["a"]]
