# aad_graph/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List
import warnings

from .graph import Graph
from .node import Node


def value(x: Any) -> Any:
    """Return the numeric value of a Node; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Node) else x


def _run(y: Any, fname: str) -> None:
    """Zero and back-propagate from `y`; warn if f gave back a constant."""
    if not isinstance(y, Node):
        warnings.warn(
            f"{fname}: f returned a constant ({y!r}); all gradients are zero",
            RuntimeWarning,
            stacklevel=3,
        )
        return
    y.zero_grad()
    y.backward()


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Node], Any], x0: float) -> float:
    """
    Derivative of a scalar function y=f(x) at x0.
    Builds f in a fresh graph and runs one reverse pass.
    """
    g = Graph()
    x = g.create_leaf(x0)
    _run(f(x), "grad")
    return x.grad


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Node]], Any],
          inputs: Dict[str, float]) -> Dict[str, float]:
    """
    Gradient of y=f(vars) w.r.t. ALL inputs (dict form), from ONE reverse pass.

    Parameters
    ----------
    f       : function taking a dict {name: Node} and returning a Node
    inputs  : dict {name: number}

    Returns
    -------
    dict {name: float}  # gradients in the same key order as `inputs`
    """
    g = Graph()
    vars_ad = {k: g.create_leaf(v) for k, v in inputs.items()}
    _run(f(vars_ad), "grads")
    return {k: vars_ad[k].grad for k in inputs.keys()}


def grads_list(f: Callable[[List[Node]], Any],
               x0_list: Iterable[float]) -> List[float]:
    """
    Same as grads(), but inputs are given as a list and partials come back in
    the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    g = Graph()
    xs = [g.create_leaf(v) for v in x0_list]
    _run(f(xs), "grads_list")
    return [x.grad for x in xs]
