"""Highest-label push-relabel maximum flow with minimum cut extraction."""

from __future__ import annotations

from collections import defaultdict, deque

from .network import Arc, Network


class PushRelabel:
    """Maximum flow from ``source`` to ``sink`` on a :class:`Network`.

    Construction saturates every arc leaving the source (the initial
    preflow); :meth:`solve` then discharges active nodes, always picking
    one with the highest label.
    """

    def __init__(self, network: Network, source: int, sink: int) -> None:
        n = network.nnodes
        for node in (source, sink):
            if not 0 <= node < n:
                raise ValueError(f"node {node} is outside 0..{n - 1}")
        if source == sink:
            raise ValueError("source and sink must differ")
        self.network = network
        self.source = source
        self.sink = sink
        self.residual: list[list[float]] = [[0] * n for _ in range(n)]
        for arc in network:
            self.residual[arc.tail][arc.head] = arc.capacity
        self._flows: list[list[float]] = [[0] * n for _ in range(n)]
        self.labels: list[int] = [0] * n
        self.excess: list[float] = [0] * n
        self.min_cut: list[int] = []
        self.source_side: frozenset[int] = frozenset()
        self.feasible: bool | None = None
        self._buckets: defaultdict[int, deque[int]] = defaultdict(deque)
        self._highest = 0
        self._saturate_source()

    def _check_node(self, node: int) -> None:
        if not 0 <= node < self.network.nnodes:
            raise ValueError(f"node {node} is outside 0..{self.network.nnodes - 1}")

    def _enqueue(self, label: int, node: int) -> None:
        self._buckets[label].append(node)
        self._highest = max(self._highest, label)

    def _next_active(self) -> int | None:
        while self._highest >= 0:
            bucket = self._buckets.get(self._highest)
            if bucket:
                return bucket.popleft()
            self._highest -= 1
        return None

    def _saturate_source(self) -> None:
        s = self.source
        for head in range(self.network.nnodes):
            if head == s:
                continue
            index = self.network.arc_index(s, head)
            if index is None:
                continue
            capacity = self.network.arcs[index].capacity
            self._flows[s][head] = capacity
            self.excess[head] += capacity
            self.excess[s] -= capacity
            self.residual[s][head] = 0
            self.residual[head][s] += capacity
            if capacity > 0 and head != self.sink:
                self._enqueue(0, head)
        self.labels[s] = self.network.nnodes

    def push(self, node: int) -> bool:
        """Push excess from ``node`` along admissible arcs.

        Returns True if any flow was pushed.
        """
        self._check_node(node)
        labels, excess = self.labels, self.excess
        pushed = False
        for head, capacity in enumerate(self.residual[node]):
            if capacity <= 0 or labels[node] != labels[head] + 1:
                continue
            amount = min(excess[node], capacity)
            cancelled = min(self._flows[head][node], amount)
            self._flows[head][node] -= cancelled
            self._flows[node][head] += amount - cancelled
            self.residual[node][head] -= amount
            self.residual[head][node] += amount
            if excess[head] == 0 and head not in (self.source, self.sink):
                self._enqueue(labels[head], head)
            excess[node] -= amount
            excess[head] += amount
            if excess[node] == 0:
                return True
            pushed = True
        return pushed

    def relabel(self, node: int) -> bool:
        """Raise the label of ``node`` to one above its lowest residual neighbour.

        Returns False if ``node`` has no residual arc leaving it.
        """
        self._check_node(node)
        reachable = [
            self.labels[head]
            for head, capacity in enumerate(self.residual[node])
            if capacity > 0
        ]
        if not reachable:
            return False
        label = min(reachable) + 1
        self.labels[node] = label
        self._enqueue(label, node)
        return True

    def solve(self) -> bool:
        """Run the algorithm; return True if no excess is left stranded."""
        while (node := self._next_active()) is not None:
            if self.excess[node] <= 0:
                continue
            if not self.push(node):
                self.relabel(node)
            elif self.excess[node] > 0:
                self._enqueue(self.labels[node], node)
        self.feasible = self.excess[self.sink] == -self.excess[self.source]
        self._find_min_cut()
        return self.feasible

    def _find_min_cut(self) -> None:
        n = self.network.nnodes
        reaches_sink = {self.sink}
        frontier = deque([self.sink])
        while frontier:
            head = frontier.popleft()
            for tail in range(n):
                if tail not in reaches_sink and self.residual[tail][head] > 0:
                    reaches_sink.add(tail)
                    frontier.append(tail)
        side = [node for node in range(n) if node not in reaches_sink]
        self.source_side = frozenset(side)
        self.min_cut = [
            index
            for tail in side
            for head in sorted(reaches_sink)
            if (index := self.network.arc_index(tail, head)) is not None
        ]

    def flow(self, tail: int, head: int) -> float:
        """Flow currently carried from ``tail`` to ``head``."""
        self._check_node(tail)
        self._check_node(head)
        return self._flows[tail][head]

    def flow_value(self) -> float:
        """Total flow that has reached the sink."""
        return self.excess[self.sink]

    def arc_flows(self) -> list[tuple[Arc, float]]:
        """Every arc of the network paired with the flow it carries."""
        return [(arc, self._flows[arc.tail][arc.head]) for arc in self.network]