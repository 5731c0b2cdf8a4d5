"""Directed, capacitated networks used by the flow solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from collections.abc import Iterator


@dataclass(frozen=True)
class Arc:
    """A directed arc from ``tail`` to ``head`` with a capacity."""

    tail: int
    head: int
    capacity: float


@dataclass(frozen=True)
class Demand:
    """A quantity to be routed from ``origin`` to ``destination``."""

    origin: int
    destination: int
    quantity: float


@dataclass
class Network:
    """A directed network on nodes ``0 .. nnodes - 1``.

    Arcs are numbered in the order they are added. At most one arc may
    join a given ordered pair of nodes.
    """

    nnodes: int
    arcs: list[Arc] = field(default_factory=list, init=False)
    demands: list[Demand] = field(default_factory=list, init=False)
    _index: dict[tuple[int, int], int] = field(
        default_factory=dict, init=False, repr=False
    )

    def __init__(self, nnodes: int) -> None:
        if nnodes < 1:
            raise ValueError(f"a network needs at least one node, got {nnodes}")
        self.nnodes = nnodes
        self.arcs = []
        self.demands = []
        self._index = {}

    def _check_node(self, node: int) -> None:
        if not 0 <= node < self.nnodes:
            raise ValueError(f"node {node} is outside 0..{self.nnodes - 1}")

    def add_arc(self, tail: int, head: int, capacity: float) -> int:
        """Add an arc and return its index."""
        self._check_node(tail)
        self._check_node(head)
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        if (tail, head) in self._index:
            raise ValueError(f"an arc from {tail} to {head} already exists")
        index = len(self.arcs)
        self.arcs.append(Arc(tail, head, capacity))
        self._index[(tail, head)] = index
        return index

    def arc_index(self, tail: int, head: int) -> int | None:
        """Return the index of the arc from ``tail`` to ``head``, or None."""
        return self._index.get((tail, head))

    def __len__(self) -> int:
        return len(self.arcs)

    def __iter__(self) -> Iterator[Arc]:
        return iter(self.arcs)