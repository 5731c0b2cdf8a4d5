import pytest

from pushrelabel.network import Arc, Demand, Network


def test_add_arc_returns_sequential_indices():
    network = Network(3)
    assert network.add_arc(0, 1, 5) == 0
    assert network.add_arc(1, 2, 7) == 1
    assert network.add_arc(2, 0, 1) == 2


def test_arc_index_lookup():
    network = Network(4)
    network.add_arc(0, 1, 5)
    network.add_arc(2, 3, 7)
    assert network.arc_index(0, 1) == 0
    assert network.arc_index(2, 3) == 1


def test_arc_index_missing_and_reversed():
    network = Network(3)
    network.add_arc(0, 1, 5)
    assert network.arc_index(1, 0) is None
    assert network.arc_index(1, 2) is None


def test_len_and_iteration_follow_insertion_order():
    network = Network(3)
    network.add_arc(0, 1, 5)
    network.add_arc(1, 2, 7)
    assert len(network) == 2
    assert list(network) == [Arc(0, 1, 5), Arc(1, 2, 7)]


def test_empty_network():
    network = Network(2)
    assert len(network) == 0
    assert list(network) == []
    assert network.nnodes == 2


def test_duplicate_arc_rejected():
    network = Network(2)
    network.add_arc(0, 1, 5)
    with pytest.raises(ValueError):
        network.add_arc(0, 1, 3)
    assert len(network) == 1


@pytest.mark.parametrize("tail, head", [(-1, 0), (0, 3), (3, 1)])
def test_out_of_range_nodes_rejected(tail, head):
    network = Network(3)
    with pytest.raises(ValueError):
        network.add_arc(tail, head, 1)


def test_negative_capacity_rejected():
    network = Network(2)
    with pytest.raises(ValueError):
        network.add_arc(0, 1, -1)


def test_network_needs_nodes():
    with pytest.raises(ValueError):
        Network(0)


def test_demands_are_stored():
    network = Network(3)
    network.demands.append(Demand(0, 2, 4.5))
    assert network.demands[0].origin == 0
    assert network.demands[0].destination == 2
    assert network.demands[0].quantity == 4.5