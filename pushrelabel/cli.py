"""Command that solves the bundled six-node example and prints the result."""

from __future__ import annotations

import argparse

from .network import Network
from .solver import PushRelabel

_EXAMPLE_ARCS = [
    (1, 2, 15), (2, 3, 8), (2, 5, 4), (3, 2, 4), (3, 4, 3),
    (3, 6, 3), (4, 1, 4), (4, 5, 6), (5, 2, 1), (5, 4, 4),
    (5, 6, 10), (6, 3, 4), (6, 5, 6), (2, 1, 8), (1, 4, 10),
]
EXAMPLE_SOURCE = 5
EXAMPLE_SINK = 0


def example_network() -> Network:
    """The six-node, fifteen-arc example network (nodes numbered from 0)."""
    network = Network(6)
    for tail, head, capacity in _EXAMPLE_ARCS:
        network.add_arc(tail - 1, head - 1, capacity)
    return network


def _fmt(value: float) -> str:
    return f"{value:g}"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="pushrelabel",
        description="Solve the example maximum flow problem and print flows, labels and the minimum cut.",
    )
    parser.parse_args(argv)

    network = example_network()
    solver = PushRelabel(network, EXAMPLE_SOURCE, EXAMPLE_SINK)
    solver.solve()

    lines = ["FINISHED"]
    lines.extend(
        f"{arc.tail + 1} to {arc.head + 1} : {_fmt(flow)}"
        for arc, flow in solver.arc_flows()
        if flow
    )
    lines.append("LABEL")
    lines.extend(
        f"label {node + 1}: {label}" for node, label in enumerate(solver.labels)
    )
    lines.append("CUT")
    cut_arcs = [network.arcs[index] for index in solver.min_cut]
    lines.extend(f"{arc.tail + 1} {arc.head + 1}" for arc in cut_arcs)
    mincut = sum(arc.capacity for arc in cut_arcs)
    lines.append(f"flow: {_fmt(solver.flow_value())} mincut: {_fmt(mincut)}")
    print("\n".join(lines))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())