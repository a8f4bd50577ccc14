# scalargrad/ops/arithmetic.py
import numbers
import numpy as np
from ..core.node import Node, Op


def _as_node(x):
    """Ensure x is a Node; otherwise wrap it as a constant leaf."""
    return x if isinstance(x, Node) else Node(x)


def add(x, y):
    x, y = _as_node(x), _as_node(y)
    with np.errstate(all="ignore"):
        return Node.derived(x.value + y.value, Op.ADD, (x, y))


def mul(x, y):
    x, y = _as_node(x), _as_node(y)
    with np.errstate(all="ignore"):
        return Node.derived(x.value * y.value, Op.MUL, (x, y))


def pow(x, p):
    """
    Power with a constant exponent:
      out.value = x.value ** p

    No domain handling: a negative base with a non-integer exponent gives NaN,
    and 0 ** -1 gives inf, exactly as float64 arithmetic does.
    """
    if isinstance(p, Node) or not isinstance(p, numbers.Real):
        raise TypeError(f"pow() exponent must be a plain number, got {type(p).__name__}")
    x = _as_node(x)
    p = np.float64(p)
    with np.errstate(all="ignore"):
        return Node.derived(np.power(x.value, p), Op.POW, (x,), aux=p)


# Composite operations: built from the primitives above, no rules of their own.

def neg(x):
    return mul(x, Node(-1.0))


def sub(x, y):
    return add(x, neg(y))


def div(x, y):
    return mul(x, pow(y, -1.0))
