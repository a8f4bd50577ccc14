"""
Gradient-descent training loop for scalargrad networks.

Each epoch runs:
    1. forward pass on every example (fresh graph)
    2. mean-squared-error loss node
    3. model.zero_grad() then backward(loss)
    4. p.value -= learning_rate * p.gradient for every parameter
"""

import numpy as np
from dataclasses import dataclass, field
from typing import List, Sequence, Union

from .core.node import Node
from .core.engine import backward
from .nn.mlp import Module
from .ops import add, sub, pow, div


@dataclass
class TrainingConfig:
    """Configuration for gradient-descent training."""
    epochs: int = 100
    learning_rate: float = 0.1

    # Logging
    verbose: bool = False
    log_every: int = 1  # print every n-th epoch when verbose


@dataclass
class TrainingResult:
    """Loss per epoch and the predictions of the trained model."""
    losses: List[float] = field(default_factory=list)
    predictions: List[float] = field(default_factory=list)


def mse_loss(predictions: Sequence[Node], targets: Sequence[Union[Node, float]]) -> Node:
    """
    Mean of (pred - target)^2, built from graph operations so it can be
    differentiated.
    """
    if len(predictions) != len(targets):
        raise ValueError(
            f"Got {len(predictions)} predictions for {len(targets)} targets"
        )
    if not predictions:
        raise ValueError("mse_loss needs at least one prediction")

    total = Node(0.0)
    for pred, target in zip(predictions, targets):
        total = add(total, pow(sub(pred, target), 2))
    return div(total, float(len(predictions)))


def sgd_step(parameters: Sequence[Node], learning_rate: float):
    """Plain gradient descent: value -= learning_rate * gradient."""
    for p in parameters:
        p.value = np.float64(p.value - learning_rate * p.gradient)


def predict(model: Module, inputs: Sequence[Sequence[Union[Node, float]]]) -> List[Node]:
    """First output of the model for every example."""
    return [model(x)[0] for x in inputs]


def train(model: Module,
          inputs: Sequence[Sequence[Union[Node, float]]],
          targets: Sequence[Union[Node, float]],
          config: TrainingConfig = None) -> TrainingResult:
    """
    Fit `model` to (inputs, targets) with full-batch gradient descent.

    Args:
        model: any Module whose forward returns a list of output nodes;
               the first output is compared against the target.
        inputs: one input sequence per example.
        targets: one scalar target per example.
        config: epochs, learning rate and verbosity.

    Returns:
        TrainingResult with the loss of every epoch (measured before that
        epoch's update) and the final predictions.
    """
    config = config or TrainingConfig()
    result = TrainingResult()

    for epoch in range(config.epochs):
        # forward pass
        preds = predict(model, inputs)
        loss = mse_loss(preds, targets)

        # backward pass
        model.zero_grad()
        backward(loss)

        # update
        sgd_step(model.parameters(), config.learning_rate)

        result.losses.append(float(loss.value))
        if config.verbose and epoch % config.log_every == 0:
            print(f"epoch: {epoch:4d} | loss: {float(loss.value):.6f}")

    result.predictions = [float(p.value) for p in predict(model, inputs)]
    if config.verbose:
        print(f"final predictions: {[round(p, 4) for p in result.predictions]}")
    return result
