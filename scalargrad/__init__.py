# scalargrad/__init__.py
# Reverse-mode automatic differentiation over scalars, with a small MLP on top

from .core.node import Node, Op
from .core.engine import backward, topological_order, zero_grad, StaleGradientError
from .core.seeds import grad, grads_list, value

from .ops import add, sub, mul, div, neg, pow, exp, tanh

from .nn import Module, Neuron, Layer, MLP
from .train import TrainingConfig, TrainingResult, mse_loss, sgd_step, train

__all__ = [
    # Core
    'Node',
    'Op',
    'backward',
    'topological_order',
    'zero_grad',
    'StaleGradientError',
    'grad',
    'grads_list',
    'value',
    # Ops
    'add', 'sub', 'mul', 'div', 'neg', 'pow', 'exp', 'tanh',
    # Network
    'Module',
    'Neuron',
    'Layer',
    'MLP',
    # Training
    'TrainingConfig',
    'TrainingResult',
    'mse_loss',
    'sgd_step',
    'train',
]
