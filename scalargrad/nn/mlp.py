# scalargrad/nn/mlp.py
"""
Feed-forward network built from scalar graph nodes.

Every forward call builds a fresh graph whose leaves include the network's
parameters, so a backward pass on any loss derived from the output
reaches every weight and bias.
"""
from __future__ import annotations
import numpy as np
from typing import List, Optional, Sequence, Union

from ..core.node import Node
from ..core.engine import zero_grad
from ..ops import add, mul, tanh

RngLike = Union[np.random.Generator, int, None]


def make_rng(rng: RngLike = None) -> np.random.Generator:
    """Accept a Generator, an integer seed or None (fresh entropy)."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


class Module:
    """Shared parameter handling for Neuron, Layer and MLP."""

    def parameters(self) -> List[Node]:
        return []

    def zero_grad(self):
        """Reset every parameter gradient to 0. Required before each backward()."""
        zero_grad(self.parameters())

    def __call__(self, inputs):
        return self.forward(inputs)


class Neuron(Module):
    """
    tanh(b + sum_i w_i * x_i) with weights and bias drawn from U[-1, 1).
    """

    def __init__(self, input_count: int, rng: RngLike = None):
        rng = make_rng(rng)
        self.w = [Node(rng.uniform(-1.0, 1.0)) for _ in range(input_count)]
        self.b = Node(rng.uniform(-1.0, 1.0))

    def forward(self, inputs: Sequence[Union[Node, float]]) -> Node:
        if len(inputs) != len(self.w):
            raise ValueError(
                f"Neuron expects {len(self.w)} inputs, got {len(inputs)}"
            )
        act = self.b
        for wi, xi in zip(self.w, inputs):
            act = add(act, mul(wi, xi))
        return tanh(act)

    def parameters(self) -> List[Node]:
        return self.w + [self.b]

    def __repr__(self):
        return f"Neuron({len(self.w)})"


class Layer(Module):
    def __init__(self, input_count: int, output_count: int, rng: RngLike = None):
        rng = make_rng(rng)
        self.neurons = [Neuron(input_count, rng) for _ in range(output_count)]

    def forward(self, inputs: Sequence[Union[Node, float]]) -> List[Node]:
        return [n.forward(inputs) for n in self.neurons]

    def parameters(self) -> List[Node]:
        return [p for n in self.neurons for p in n.parameters()]

    def __repr__(self):
        return f"Layer of [{', '.join(str(n) for n in self.neurons)}]"


class MLP(Module):
    """
    Multi-layer perceptron. sizes=[3, 4, 4, 1] builds layers 3->4, 4->4, 4->1.

    Args:
        sizes: layer widths, input width first.
        rng: numpy Generator or integer seed shared by all layers, so a
             fixed seed gives a reproducible initialization.
    """

    def __init__(self, sizes: Sequence[int], rng: Optional[RngLike] = None):
        if len(sizes) < 2:
            raise ValueError(f"MLP needs at least an input and an output size, got {list(sizes)}")
        rng = make_rng(rng)
        self.sizes = list(sizes)
        self.layers = [Layer(n_in, n_out, rng) for n_in, n_out in zip(sizes[:-1], sizes[1:])]

    def forward(self, inputs: Sequence[Union[Node, float]]) -> List[Node]:
        out = list(inputs)
        for layer in self.layers:
            out = layer.forward(out)
        return out

    def parameters(self) -> List[Node]:
        return [p for layer in self.layers for p in layer.parameters()]

    def __repr__(self):
        return f"MLP of [{', '.join(str(layer) for layer in self.layers)}]"
