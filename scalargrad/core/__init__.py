# scalargrad/core/__init__.py

"""
Core public API of the engine.

Exports:
    Node               : Scalar cell of the computation graph.
    Op                 : Operation tag selecting a node's local gradient rule.
    backward           : Reverse pass accumulating d(root)/d(v) into every ancestor.
    topological_order  : Postorder of the graph reachable from a node.
    zero_grad          : Reset the gradients of a collection of nodes.
    StaleGradientError : Raised by backward(require_zeroed=True).
    grad, grads_list   : Convenience: derivatives of plain-number functions.
    value              : Convenience: numeric value of a Node.
"""

from .node import Node, Op
from .engine import backward, topological_order, zero_grad, StaleGradientError
from .seeds import grad, grads_list, value

__all__ = [
    "Node", "Op",
    "backward", "topological_order", "zero_grad", "StaleGradientError",
    "grad", "grads_list", "value",
]
