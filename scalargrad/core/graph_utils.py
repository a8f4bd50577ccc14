"""
Computation graph utilities.

Summaries of the graph reachable from a root node, for printing and
inspection. Nothing here touches values or gradients.
"""

import numpy as np
from typing import Dict
from collections import Counter

from .node import Node
from .engine import topological_order


def get_graph_stats(root: Node) -> Dict:
    """
    Collect graph statistics without printing.

    Returns:
        dict with node/edge/leaf counts, fan-in and fan-out figures, and a
        count per operation name.
    """
    order = topological_order(root)

    n_nodes = len(order)
    n_edges = sum(len(node.operands) for node in order)
    n_leaves = sum(1 for node in order if node.is_leaf)

    fan_ins = [len(node.operands) for node in order]

    # fan-out: number of consumers inside this graph
    fan_outs = Counter()
    for node in order:
        for child in node.operands:
            fan_outs[id(child)] += 1
    fan_out_list = [fan_outs[id(node)] for node in order]

    op_counter = Counter(node.op.value for node in order)

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'leaves': n_leaves,
        'max_fan_in': max(fan_ins),
        'max_fan_out': max(fan_out_list),
        'avg_fan_out': float(np.mean(fan_out_list)),
        'operations': dict(op_counter)
    }


def print_graph_summary(root: Node) -> Dict:
    """
    Print a graph summary and return the statistics dict.
    """
    stats = get_graph_stats(root)

    print("\n" + "="*50)
    print("COMPUTATION GRAPH SUMMARY")
    print("="*50)
    print(f"Total nodes:        {stats['nodes']:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_name, count in Counter(stats['operations']).most_common():
        pct = 100.0 * count / stats['nodes']
        print(f"  {op_name:6s}: {count:6,} ({pct:5.1f}%)")
    print("="*50 + "\n")

    return stats
