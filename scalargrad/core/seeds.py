# scalargrad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph. Each helper builds a fresh graph, so no
# gradient from an earlier call can leak in.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Iterable, List

from .node import Node
from .engine import backward


def value(x: Any) -> Any:
    """Return the numeric value of a Node; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Node) else x


def _check_output(y: Any, fname: str) -> Node:
    if not isinstance(y, Node):
        raise ValueError(f"{fname} expects f to return a Node, got {type(y).__name__}")
    return y


def grad(f: Callable[[Node], Node], x0: float) -> float:
    """
    Derivative of a scalar function y=f(x) at x0.

    Example
    -------
    grad(lambda x: x * x, 3.0) -> 6.0
    """
    x = Node(x0, label="x")
    y = _check_output(f(x), "grad(f, x0)")
    backward(y)
    return float(x.gradient)


def grads_list(f: Callable[[List[Node]], Node], x0_list: Iterable[float]) -> List[float]:
    """
    Gradient of y=f(xs) w.r.t. every input, in input order, from ONE
    backward pass.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs = [Node(v, label=f"x{i}") for i, v in enumerate(x0_list)]
    y = _check_output(f(xs), "grads_list(f, x0_list)")
    backward(y)
    return [float(x.gradient) for x in xs]
