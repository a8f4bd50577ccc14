# scalargrad/core/node.py
from __future__ import annotations
from enum import Enum
from typing import Any, Sequence, Tuple
import numpy as np


class Op(Enum):
    """
    Operation that produced a node. Selects the local gradient rule
    applied during the backward sweep.

    Only four primitive rules exist; subtraction, negation, division and
    tanh are composed from them in `scalargrad.ops`.
    """
    NONE = "leaf"
    ADD = "+"
    MUL = "*"
    POW = "pow"
    EXP = "exp"


class Node:
    """
    One scalar cell of the computation graph.

    Attributes
    ----------
    value : np.float64
        Forward value. Leaves are mutated only by an optimizer step;
        derived nodes are evaluated once, at construction.
    gradient : np.float64
        Accumulator for d(root)/d(self); starts at 0.0.
    op : Op
        Rule that produced this node (Op.NONE for leaves).
    operands : tuple[Node, ...]
        Inputs of the operation, in order. Fixed after construction.
    aux : np.float64
        Operation constant (the exponent for Op.POW, otherwise 0.0).
    label : str
        Debug-only name.

    Equality and hashing are by identity: two nodes holding the same value
    are still different nodes.
    """

    __slots__ = ("value", "gradient", "op", "operands", "aux", "label")

    def __init__(self, value: Any, label: str = ""):
        self.value = np.float64(value)
        self.gradient = np.float64(0.0)
        self.op = Op.NONE
        self.operands: Tuple[Node, ...] = ()
        self.aux = np.float64(0.0)
        self.label = label

    @classmethod
    def leaf(cls, value: Any, label: str = "") -> "Node":
        return cls(value, label=label)

    @classmethod
    def derived(cls, value: Any, op: Op, operands: Sequence["Node"], aux: Any = 0.0) -> "Node":
        """Node produced by a graph-building operation; `value` is already evaluated."""
        out = cls(value)
        out.op = op
        out.operands = tuple(operands)
        out.aux = np.float64(aux)
        return out

    @property
    def is_leaf(self) -> bool:
        return self.op is Op.NONE

    def __repr__(self):
        if self.label:
            return f"Node({self.label}: value={self.value:.4f}, gradient={self.gradient:.4f})"
        return f"Node(value={self.value:.4f}, gradient={self.gradient:.4f})"

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, exponent):
        from ..ops.arithmetic import pow
        return pow(self, exponent)

    def exp(self):
        from ..ops.transcendental import exp
        return exp(self)

    def tanh(self):
        from ..ops.transcendental import tanh
        return tanh(self)
