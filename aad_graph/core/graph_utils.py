"""
Computation graph utilities.

Printing and statistics over a finished Graph. Everything here is read-only:
only `graph.nodes()` and `graph.edges()` are consulted.
"""

import numpy as np
from typing import Dict, List, Tuple
from collections import Counter


def _fan_counts(graph) -> Tuple[List[int], List[int]]:
    n_nodes = len(graph)
    fan_ins = [0] * n_nodes
    fan_outs = [0] * n_nodes
    for e in graph.edges():
        fan_ins[e.target] += 1
        fan_outs[e.source] += 1
    return fan_ins, fan_outs


def get_graph_stats(graph) -> Dict:
    """
    Collect graph statistics (without printing).

    Returns:
        dict with keys nodes, edges, max_fan_in, avg_fan_in, max_fan_out,
        avg_fan_out and operations (op name -> count)
    """
    if len(graph) == 0:
        return {
            'nodes': 0,
            'edges': 0,
            'max_fan_in': 0,
            'avg_fan_in': 0.0,
            'max_fan_out': 0,
            'avg_fan_out': 0.0,
            'operations': {}
        }

    fan_ins, fan_outs = _fan_counts(graph)
    op_counter = Counter(node.op.value for node in graph.nodes())

    return {
        'nodes': len(graph),
        'edges': len(graph.edges()),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter)
    }


def print_graph_summary(graph, detailed: bool = False) -> Dict:
    """
    Print a summary of the computation graph.

    Args:
        graph: Graph to summarize
        detailed: also list every node (only for graphs of at most 100 nodes)

    Returns:
        The statistics dict from get_graph_stats
    """
    if len(graph) == 0:
        print("Empty computation graph")
        return {}

    stats = get_graph_stats(graph)
    n_nodes = stats['nodes']

    print("\n" + "="*70)
    print("COMPUTATION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {n_nodes:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / n_nodes
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and n_nodes <= 100:
        print()
        print("="*70)
        print("DETAILED NODE LIST")
        print("="*70)
        for node in graph.nodes():
            parent_info = ", ".join(f"Node{i}" for i in node.operands)
            print(f"Node {node.id:3d}: {node.op.value:12s} <- [{parent_info}]")

    print("="*70 + "\n")

    return stats


def print_computation_graph(graph, max_nodes: int = 20) -> None:
    """
    Print the graph structure, one line per node.

    Args:
        graph: Graph to print
        max_nodes: print at most this many nodes
    """
    print("\n" + "="*70)
    print("COMPUTATION GRAPH STRUCTURE")
    print("="*70)

    if len(graph) == 0:
        print("Empty graph")
        return

    nodes = graph.nodes()
    for node in nodes[:max_nodes]:
        out_val = float(node.value)
        grad = float(node.grad)
        if node.operands:
            parent_info = ", ".join(f"Node{i}" for i in node.operands)
            print(f"Node {node.id:4d}: {node.op.value:12s} ({out_val:10.6f}, grad {grad:10.6f}) <- [{parent_info}]")
        else:
            print(f"Node {node.id:4d}: {node.op.value:12s} ({out_val:10.6f}, grad {grad:10.6f}) [leaf/input]")

    if len(nodes) > max_nodes:
        print(f"... ({len(nodes) - max_nodes} more nodes)")

    print("="*70 + "\n")
