# pushrelabel

Maximum flow and minimum cut on directed networks, computed with the
highest-label push-relabel method. Pure Python, no dependencies.

## Installation

```
pip install .
```

## Building a network

`pushrelabel.network.Network(nnodes)` holds a directed network on the
nodes `0 .. nnodes - 1`. Arcs are added with `add_arc(tail, head,
capacity)`, which returns the arc's index; indices follow insertion order.

```python
from pushrelabel.network import Network
from pushrelabel.solver import PushRelabel

net = Network(4)
net.add_arc(0, 1, 3)
net.add_arc(0, 2, 2)
net.add_arc(1, 3, 2)
net.add_arc(2, 3, 3)

solver = PushRelabel(net, source=0, sink=3)
feasible = solver.solve()

print(solver.flow_value())   # total flow that reached the sink
print(solver.arc_flows())    # (Arc, flow) for every arc, in index order
print(solver.min_cut)        # indices of the arcs in the minimum cut
```

`Network` raises `ValueError` for a network with fewer than one node, for
an arc whose end lies outside the node range, for a negative capacity and
for a second arc between the same ordered pair of nodes.

Other parts of `Network`:

- `arc_index(tail, head)` returns the index of the arc from `tail` to
  `head`, or `None` if there is none.
- `len(net)` is the number of arcs, and iterating over a network yields
  its `Arc` objects (`tail`, `head`, `capacity`) in insertion order.
- `arcs` is the list of arcs; `demands` is a list that can hold `Demand`
  records (`origin`, `destination`, `quantity`). The solver does not use
  demands.

## Solving

`PushRelabel(network, source, sink)` raises `ValueError` if either node is
out of range or if they are the same node. Construction already saturates
every arc leaving the source; `solve()` then discharges active nodes,
always taking one with the highest label, and returns `True` when the
excess at the sink equals the flow that left the source.

After `solve()`:

- `flow_value()` is the flow that reached the sink.
- `flow(tail, head)` is the flow carried from `tail` to `head`.
- `arc_flows()` pairs each arc with its flow.
- `min_cut` lists the indices of the arcs that run from `source_side` to
  the remaining nodes, where the remaining nodes are those that can still
  reach the sink in the residual network.
- `source_side` is the frozenset of nodes on the source side of that cut.
- `feasible` holds the value `solve()` returned.
- `labels`, `excess` and `residual` expose the final labels, node excesses
  and residual capacities.

The single steps `push(node)` and `relabel(node)` are public as well;
each returns whether it changed anything.

A solver is meant to be solved once: build a new `PushRelabel` for each run.

## Command line

```
pushrelabel
```

This solves a bundled six-node, fifteen-arc example (available in code as
`pushrelabel.cli.example_network()`) from node 6 to node 1 and prints, with
nodes numbered from 1:

- under `FINISHED`, every arc that carries flow, as `i to j : flow`;
- under `LABEL`, the final label of each node;
- under `CUT`, the arcs of the minimum cut, as `i j`;
- a last line `flow: <value> mincut: <capacity>`.

The command takes no options besides `--help`.

## Limits

The command solves only its bundled example; there is no reader for
network files and no way to pass a network on the command line. Networks
are built in Python with `Network.add_arc`. Flows, labels and residual
capacities are kept in dense `nnodes × nnodes` tables, so memory grows
with the square of the node count.

## Running the tests

```
pip install .[test]
pytest
```