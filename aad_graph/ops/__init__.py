# aad_graph/ops/__init__.py

# Convenience re-exports so users can do: from aad_graph.ops import add, mul
from .arithmetic import add, mul

__all__ = ["add", "mul"]
