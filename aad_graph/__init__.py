# aad_graph/__init__.py
# Reverse-mode automatic differentiation over a scalar computation graph

from .core.node import Node, Operation
from .core.graph import Graph, Edge
from .core.engine import backward, zero_grad
from .core.seeds import grad, grads, grads_list, value
from .core.graph_utils import get_graph_stats, print_graph_summary, print_computation_graph
from .config import DotConfig
from .export.dot import to_dot, write_dot

__all__ = [
    # Core
    'Graph',
    'Node',
    'Operation',
    'Edge',
    # Engine
    'backward',
    'zero_grad',
    # Functional helpers
    'grad',
    'grads',
    'grads_list',
    'value',
    # Inspection / export
    'get_graph_stats',
    'print_graph_summary',
    'print_computation_graph',
    'DotConfig',
    'to_dot',
    'write_dot',
]
