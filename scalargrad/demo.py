"""
Walk-through of the engine and a small training run.

    python -m scalargrad.demo --epochs 100 --lr 0.1 --seed 0
"""

import argparse

from .core import Node, backward
from .core.graph_utils import print_graph_summary
from .nn import MLP
from .train import TrainingConfig, predict, train

# four fixed 3-input examples and their targets
XS = [
    [2.0, 3.0, -1.0],
    [3.0, -1.0, 0.5],
    [0.5, 1.0, 1.0],
    [1.0, 1.0, -1.0],
]
YS = [1.0, -1.0, -1.0, 1.0]


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description='scalargrad walk-through: gradients by hand, then a 3-4-4-1 MLP',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )
    parser.add_argument('--epochs', type=int, default=100,
                        help='Training epochs')
    parser.add_argument('--lr', type=float, default=0.1,
                        help='Learning rate')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for weight initialization (random if omitted)')
    parser.add_argument('--log-every', type=int, default=10,
                        help='Print the loss every n epochs')
    parser.add_argument('--quiet', action='store_true',
                        help='Only print the final predictions')
    return parser.parse_args(argv)


def engine_examples():
    """e = a * (b + c) * a, then exp(2) and 2 / 5."""
    a, b, c = Node(1.0, "a"), Node(2.0, "b"), Node(3.0, "c")
    d = a * (b + c)
    d.label = "d"
    e = d * a
    e.label = "e"
    backward(e)
    print(a, b, c, d, e)
    print_graph_summary(e)

    print(Node(2.0).exp())

    g, h = Node(2.0, "g"), Node(5.0, "h")
    i = g / h
    i.label = "i"
    backward(i)
    print(g, h, i)


def main(argv=None):
    args = parse_args(argv)

    if not args.quiet:
        engine_examples()

    mlp = MLP([3, 4, 4, 1], rng=args.seed)
    if not args.quiet:
        print("initial predictions:")
        for y in predict(mlp, XS):
            print(f"  {y}")

    config = TrainingConfig(
        epochs=args.epochs,
        learning_rate=args.lr,
        verbose=not args.quiet,
        log_every=max(1, args.log_every),
    )
    result = train(mlp, XS, YS, config)

    for target, pred in zip(YS, result.predictions):
        print(f"target {target:+.1f} -> prediction {pred:+.4f}")
    return result


if __name__ == '__main__':
    main()
