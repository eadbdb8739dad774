"""
Demo: build f = c*(a*b) + a*b, back-propagate from f and dump the graph.

Usage:
    python -m aad_graph graph.dot
    dot graph.dot -Tpng -o graph.png
"""

import argparse

from .core.graph import Graph
from .core.graph_utils import print_graph_summary, print_computation_graph
from .export.dot import write_dot


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog='aad_graph',
        description='Build the example expression, run backward and write it as DOT',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('output', nargs='?', default=None,
                        help='DOT file to write (nothing is written if omitted)')
    parser.add_argument('--summary', action='store_true',
                        help='Print graph statistics')
    parser.add_argument('--verbose', action='store_true',
                        help='Print every node with its value and grad')
    return parser.parse_args(argv)


def build_example():
    """Forward pass of the example expression. Returns (graph, f)."""
    g = Graph()
    a = g.create_leaf(-2.1)
    b = g.create_leaf(2.2)
    c = g.create_leaf(1.1)
    d = a * b
    e = a * b
    f = c * d + e
    return g, f


def main(argv=None) -> int:
    args = parse_args(argv)

    g, f = build_example()

    # backward pass
    f.zero_grad()
    f.backward()

    if args.verbose:
        print_computation_graph(g, max_nodes=len(g))
    if args.summary:
        print_graph_summary(g)

    if args.output:
        print(f"Writing graph to {args.output}")
        with open(args.output, "w") as fh:
            write_dot(g, fh)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
