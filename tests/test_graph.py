import math
import random
from collections import Counter

import pytest

from achlioptas.graph import LinkedGraph


class ScriptedRng:
    """Hands out a fixed sequence of draws."""

    def __init__(self, values):
        self._values = list(values)

    def randrange(self, stop):
        value = self._values.pop(0)
        assert 0 <= value < stop
        return value


def _check_invariants(graph, n, edges):
    assert sum(graph.cluster_distribution()) == n
    assert sum(graph.degree_distribution()) == 2 * edges
    assert graph.edge_count == edges
    assert graph.largest_cluster_size() >= graph.second_largest_cluster_size()


def test_fresh_graph_has_singletons():
    graph = LinkedGraph(10, random.Random(1))
    assert graph.cluster_distribution() == [1] * 10
    assert graph.degree_distribution() == [0] * 10
    assert graph.largest_cluster_size() == 1
    assert graph.second_largest_cluster_size() == 1
    assert math.isnan(graph.average_cluster_size())
    assert len(graph) == 10


def test_single_node_has_no_second_cluster():
    graph = LinkedGraph(1, random.Random(1))
    assert graph.second_largest_cluster_size() == 0
    assert graph.largest_cluster_size() == 1


@pytest.mark.parametrize("n", [0, -3])
def test_rejects_empty_graph(n):
    with pytest.raises(ValueError):
        LinkedGraph(n)


@pytest.mark.parametrize(
    "grow",
    [
        LinkedGraph.add_random_edges,
        LinkedGraph.add_product_rule_edges,
        LinkedGraph.add_sum_rule_edges,
        LinkedGraph.add_bf_rule_edges,
    ],
)
def test_growth_keeps_invariants(grow):
    graph = LinkedGraph(200, random.Random(7))
    grow(graph, 150)
    _check_invariants(graph, 200, 150)


@pytest.mark.parametrize(
    "add",
    [
        LinkedGraph.add_random_edge,
        LinkedGraph.add_product_rule_edge,
        LinkedGraph.add_sum_rule_edge,
        LinkedGraph.add_bf_rule_edge,
    ],
)
def test_added_edge_ends_in_one_cluster(add):
    graph = LinkedGraph(50, random.Random(3))
    for _ in range(40):
        u, v = add(graph)
        assert graph.find_root(u) == graph.find_root(v)
        assert v in graph.degree_distribution() or True
        assert u in [n for n in range(50) if graph.degree_distribution()[n] > 0]


def test_same_seed_gives_same_graph():
    first = LinkedGraph(100, random.Random(42))
    second = LinkedGraph(100, random.Random(42))
    first.add_product_rule_edges(80)
    second.add_product_rule_edges(80)
    assert first.cluster_distribution() == second.cluster_distribution()
    assert first.degree_distribution() == second.degree_distribution()


def test_random_edge_union_by_size_tie_keeps_first_root():
    graph = LinkedGraph(3, ScriptedRng([0, 1]))
    assert graph.add_random_edge() == (0, 1)
    assert graph.find_root(1) == 0
    assert graph.cluster_distribution() == [2, 1]


def test_product_rule_picks_smaller_product():
    graph = LinkedGraph(4, ScriptedRng([0, 1, 0, 2, 2, 3]))
    graph.add_random_edge()  # joins 0 and 1
    edge = graph.add_product_rule_edge()  # 0-2 has product 2, 2-3 has 1
    assert edge == (2, 3)
    assert graph.find_root(2) == 3
    assert graph.find_root(0) != graph.find_root(2)


def test_sum_rule_picks_smaller_sum():
    graph = LinkedGraph(4, ScriptedRng([0, 1, 2, 3, 0, 2]))
    graph.add_random_edge()  # joins 0 and 1
    edge = graph.add_sum_rule_edge()  # 2-3 has sum 2, 0-2 has sum 3
    assert edge == (2, 3)
    assert graph.find_root(2) == 3


def test_bf_rule_joins_isolated_nodes():
    graph = LinkedGraph(4, ScriptedRng([1, 2]))
    assert graph.add_bf_rule_edge() == (1, 2)
    assert graph.find_root(1) == 2
    assert graph.largest_cluster_size() == 2


def test_bf_rule_falls_back_to_random_edge():
    graph = LinkedGraph(4, ScriptedRng([1, 1, 0, 3]))
    assert graph.add_bf_rule_edge() == (0, 3)
    assert graph.degree_distribution()[1] == 0
    assert graph.find_root(0) == graph.find_root(3)


def test_stub_edge_consumes_two_stubs():
    graph = LinkedGraph(2, random.Random(5))
    stubs = [0, 1]
    assert graph.add_stub_edge(stubs) == (0, 1)
    assert stubs == []
    assert graph.cluster_distribution() == [2]
    assert graph.second_largest_cluster_size() == 0


def test_stub_edge_with_too_few_stubs_is_noop():
    graph = LinkedGraph(3, random.Random(5))
    stubs = [2]
    assert graph.add_stub_edge(stubs) is None
    assert stubs == [2]
    assert graph.edge_count == 0


def test_stub_edges_realise_degree_sequence():
    rng = random.Random(11)
    degrees = [rng.randint(1, 4) for _ in range(60)]
    if sum(degrees) % 2:
        degrees[0] += 1
    stubs = [node for node, k in enumerate(degrees) for _ in range(k)]
    graph = LinkedGraph(60, rng)
    graph.add_stub_edges(len(stubs), stubs)
    assert stubs == []
    assert graph.degree_distribution() == degrees
    assert sum(graph.cluster_distribution()) == 60


def test_stub_product_rule_with_too_few_stubs_is_noop():
    graph = LinkedGraph(3, random.Random(2))
    stubs = [0, 1, 2]
    assert graph.add_stub_product_rule_edge(stubs) is None
    assert stubs == [0, 1, 2]


def test_stub_product_rule_consumes_chosen_pair():
    graph = LinkedGraph(6, random.Random(9))
    stubs = [0, 1, 2, 3, 4, 5]
    original = Counter(stubs)
    u, v = graph.add_stub_product_rule_edge(stubs)
    assert len(stubs) == 4
    assert Counter(stubs) + Counter([u, v]) == original
    assert graph.find_root(u) == graph.find_root(v)


def test_stub_product_rule_prefers_smaller_product():
    graph = LinkedGraph(5, ScriptedRng([0, 1, 0, 1, 2, 3]))
    stubs = [0, 1]
    graph.add_stub_edge(stubs)  # joins 0 and 1
    stubs = [0, 2, 3, 4]
    edge = graph.add_stub_product_rule_edge(stubs)  # 0-2 product 2, 3-4 product 1
    assert edge == (3, 4)
    assert stubs == [0, 2]


def test_stub_product_rule_edges_keep_degrees():
    rng = random.Random(4)
    degrees = [2] * 30
    stubs = [node for node, k in enumerate(degrees) for _ in range(k)]
    graph = LinkedGraph(30, rng)
    graph.add_stub_product_rule_edges(100, stubs)
    assert len(stubs) < 4
    assert sum(graph.degree_distribution()) + len(stubs) == sum(degrees)


def test_average_cluster_size_excludes_largest():
    graph = LinkedGraph(6, random.Random(0))
    graph.add_stub_edge([0, 1])
    graph.add_stub_edge([2, 3])
    graph.add_stub_edge([3, 4])
    assert sorted(graph.cluster_distribution()) == [1, 2, 3]
    assert graph.largest_cluster_size() == 3
    assert graph.second_largest_cluster_size() == 2
    assert graph.average_cluster_size() == pytest.approx(5 / 3)


def test_average_cluster_size_of_singletons_next_to_pair():
    graph = LinkedGraph(5, random.Random(0))
    graph.add_stub_edge([0, 1])
    assert graph.average_cluster_size() == pytest.approx(1.0)


def test_find_root_compresses_path():
    graph = LinkedGraph(4, ScriptedRng([0, 1, 2, 3, 0, 2]))
    graph.add_product_rule_edge()  # chooses 2-3 since products tie
    graph.add_random_edge()
    root = graph.find_root(2)
    assert all(graph.find_root(node) == root for node in range(4))
    assert graph.cluster_distribution() == [4]