# aad_graph/export/dot.py
"""
Graphviz DOT serialization of a Graph.

Render with e.g.  dot graph.dot -Tpng -o graph.png
Layout reference: https://graphviz.org/pdf/dotguide.pdf
"""
from __future__ import annotations
import io
from typing import Optional, TextIO

from ..config import DotConfig


def _node_line(node, config: DotConfig) -> str:
    label = "%s|i%d|{{value|%s}|{grad|%s}}" % (
        node.op.symbol, node.id,
        config.format_number(node.value), config.format_number(node.grad),
    )
    return f'{node.id} [style=bold, label="{label}"]'


def write_dot(graph, stream: TextIO, config: Optional[DotConfig] = None) -> None:
    """
    Write `graph` as a DOT digraph: one record per node (op symbol, id, value,
    grad) followed by one line per edge in insertion order. Does not modify
    the graph.
    """
    config = config or DotConfig()
    stream.write("digraph g {\n")
    stream.write(f"node [shape={config.node_shape}]\n")
    stream.write(f'fontname="{config.fontname}"\n')
    stream.write(f'node [fontname="{config.fontname}"]\n')
    stream.write(f'rankdir = "{config.rankdir}"\n')
    stream.write(f'edge [fontname="{config.fontname}"]\n')
    for node in graph.nodes():
        stream.write(_node_line(node, config) + "\n")
    stream.write("\n")
    for e in graph.edges():
        stream.write(f"{e.source} -> {e.target}\n")
    stream.write("}\n")


def to_dot(graph, config: Optional[DotConfig] = None) -> str:
    """Return the DOT text for `graph`."""
    buf = io.StringIO()
    write_dot(graph, buf, config)
    return buf.getvalue()
