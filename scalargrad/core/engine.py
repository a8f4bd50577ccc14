# scalargrad/core/engine.py
from __future__ import annotations
import numpy as np
from typing import Iterable, List
from .node import Node, Op


class StaleGradientError(ValueError):
    """Raised by backward(..., require_zeroed=True) when a graph node still holds a gradient."""


def zero_grad(nodes: Iterable[Node]):
    """
    Set the gradient of every given node to zero.

    The engine never does this on its own; call it on the parameters before
    each backward pass that reuses them.
    """
    for v in nodes:
        v.gradient = np.float64(0.0)


def topological_order(root: Node) -> List[Node]:
    """
    Postorder of the sub-graph reachable from `root` along operand edges.

    Every node appears exactly once and after all of its operands, so the
    reversed list visits each node only after all of its consumers.
    The visited set is keyed by id(): distinct nodes with equal values
    are never merged.
    """
    order: List[Node] = []
    visited = set()
    # (node, expanded) pairs; a node is emitted when its expanded entry pops
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            order.append(node)
            continue
        if id(node) in visited:
            continue  # reached again through another consumer
        visited.add(id(node))
        stack.append((node, True))
        for child in reversed(node.operands):
            if id(child) not in visited:
                stack.append((child, False))
    return order


def backward(root: Node, *, require_zeroed: bool = False):
    """
    Reverse pass from `root`: accumulate d(root)/d(v) into v.gradient for
    every ancestor v.

    Args:
        root: the node to differentiate (usually a scalar loss).
        require_zeroed: if True, refuse to run when any node other than the
            root already carries a non-zero gradient.

    Notes:
        - root.gradient is overwritten with 1.0 (the seed).
        - All other gradients are added to, never overwritten. Zero the
          parameters first (see zero_grad / Module.zero_grad), otherwise the
          previous pass leaks into this one.
    """
    order = topological_order(root)

    if require_zeroed:
        stale = [v for v in order if v is not root and v.gradient != 0.0]
        if stale:
            raise StaleGradientError(
                f"{len(stale)} node(s) reachable from the root carry a non-zero gradient; "
                f"call zero_grad() before backward()"
            )

    root.gradient = np.float64(1.0)
    with np.errstate(all="ignore"):
        for node in reversed(order):
            _propagate(node)


def _propagate(node: Node):
    """Apply the local gradient rule of `node` to its operands."""
    op = node.op
    if op is Op.NONE:
        return
    g = node.gradient
    if op is Op.ADD:
        a, b = node.operands
        a.gradient += g
        b.gradient += g
    elif op is Op.MUL:
        a, b = node.operands
        a.gradient += g * b.value
        b.gradient += g * a.value
    elif op is Op.POW:
        (a,) = node.operands
        p = node.aux
        a.gradient += g * p * np.power(a.value, p - 1.0)
    elif op is Op.EXP:
        (a,) = node.operands
        a.gradient += g * node.value
    else:
        raise ValueError(f"No gradient rule for operation {op!r}")
