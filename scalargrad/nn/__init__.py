# scalargrad/nn/__init__.py

from .mlp import Module, Neuron, Layer, MLP, make_rng

__all__ = ["Module", "Neuron", "Layer", "MLP", "make_rng"]
