import math

import numpy as np
import pytest

from scalargrad import Node, backward
from scalargrad.nn import Neuron, Layer, MLP, make_rng
from scalargrad.train import mse_loss


def test_neuron_forward_matches_tanh():
    n = Neuron(3, rng=0)
    x = [2.0, -1.0, 0.5]
    out = n(x)
    expected = math.tanh(n.b.value + sum(w.value * xi for w, xi in zip(n.w, x)))
    assert out.value == pytest.approx(expected, abs=1e-12)


def test_neuron_parameters_are_weights_then_bias():
    n = Neuron(4, rng=1)
    params = n.parameters()
    assert len(params) == 5
    assert params[:4] == n.w
    assert params[4] is n.b
    assert all(-1.0 <= p.value < 1.0 for p in params)


def test_neuron_bias_receives_gradient():
    n = Neuron(2, rng=2)
    out = n([Node(0.5), Node(-0.25)])
    backward(out)
    assert n.b.gradient == pytest.approx(1 - out.value ** 2)
    assert n.w[0].gradient == pytest.approx((1 - out.value ** 2) * 0.5)


def test_neuron_rejects_wrong_input_length():
    with pytest.raises(ValueError):
        Neuron(3, rng=0)([1.0, 2.0])


def test_layer_feeds_every_neuron_the_same_inputs():
    layer = Layer(3, 4, rng=3)
    x = [Node(1.0), Node(-2.0), Node(0.5)]
    outs = layer(x)
    assert len(outs) == 4
    for neuron, out in zip(layer.neurons, outs):
        assert out.value == neuron(x).value
    assert len(layer.parameters()) == 4 * (3 + 1)


def test_mlp_shapes_and_parameter_order():
    mlp = MLP([3, 4, 4, 1], rng=0)
    assert len(mlp.layers) == 3
    params = mlp.parameters()
    assert len(params) == 4 * 4 + 4 * 5 + 1 * 5
    assert params[0] is mlp.layers[0].neurons[0].w[0]
    assert params[-1] is mlp.layers[-1].neurons[-1].b
    assert len(mlp([1.0, 2.0, 3.0])) == 1


def test_mlp_needs_two_sizes():
    with pytest.raises(ValueError):
        MLP([3], rng=0)


def test_same_seed_same_network():
    m1 = MLP([3, 4, 4, 1], rng=42)
    m2 = MLP([3, 4, 4, 1], rng=np.random.default_rng(42))
    assert [p.value for p in m1.parameters()] == [p.value for p in m2.parameters()]
    x = [2.0, 3.0, -1.0]
    assert m1(x)[0].value == m2(x)[0].value


def test_make_rng_passes_generator_through():
    g = np.random.default_rng(7)
    assert make_rng(g) is g
    assert isinstance(make_rng(None), np.random.Generator)


def test_zero_grad_clears_every_parameter():
    mlp = MLP([3, 4, 4, 1], rng=5)
    preds = [mlp(x)[0] for x in ([2.0, 3.0, -1.0], [3.0, -1.0, 0.5])]
    backward(mse_loss(preds, [1.0, -1.0]))
    assert any(p.gradient != 0.0 for p in mlp.parameters())

    mlp.zero_grad()
    assert all(p.gradient == 0.0 for p in mlp.parameters())


def test_gradients_match_finite_differences():
    mlp = MLP([2, 3, 1], rng=11)
    x, target = [0.4, -0.7], 0.5

    def loss_value():
        return mse_loss([mlp(x)[0]], [target]).value

    mlp.zero_grad()
    backward(mse_loss([mlp(x)[0]], [target]))

    eps = 1e-6
    for p in mlp.parameters():
        analytic = p.gradient
        original = p.value
        p.value = original + eps
        up = loss_value()
        p.value = original - eps
        down = loss_value()
        p.value = original
        assert analytic == pytest.approx((up - down) / (2 * eps), abs=1e-6)
