import random
from pathlib import Path

import pytest

from achlioptas.graph import LinkedGraph
from achlioptas.simulations import (
    Rule,
    average_cluster_distribution,
    degree_sequence,
    delta_m,
    grow,
    main,
    observable_curves,
    write_columns,
)


@pytest.mark.parametrize("rule", list(Rule))
def test_grow_adds_requested_edges(rule):
    graph = LinkedGraph(40, random.Random(3))
    grow(graph, rule, 25)
    assert graph.edge_count == 25
    assert sum(graph.cluster_distribution()) == 40


@pytest.mark.parametrize("rule", list(Rule))
def test_observable_curves_shape_and_monotone_largest(rule):
    rows = observable_curves(rule, 80, repetitions=3, step=10, seed=7)
    assert [row[0] for row in rows] == list(range(0, 80, 10))
    largest = [row[1] for row in rows]
    assert largest == sorted(largest)
    assert all(0 < value <= 1 for value in largest)
    assert all(0 <= row[2] <= row[1] for row in rows)


def test_observable_curves_is_reproducible():
    first = observable_curves(Rule.PRODUCT, 50, repetitions=2, step=5, tmax=30, seed=11)
    second = observable_curves(Rule.PRODUCT, 50, repetitions=2, step=5, tmax=30, seed=11)
    assert first == second
    assert len(first) == 6


def test_observable_curves_rejects_bad_step():
    with pytest.raises(ValueError):
        observable_curves(Rule.SUM, 10, repetitions=1, step=0)


def test_cluster_distribution_without_edges_is_all_singletons():
    assert average_cluster_distribution(Rule.ERDOS_RENYI, 30, 0, repetitions=2, seed=1) == {1: 30}


@pytest.mark.parametrize("rule", list(Rule))
def test_cluster_distribution_accounts_for_every_node(rule):
    distribution = average_cluster_distribution(rule, 60, 30, repetitions=1, seed=5)
    assert list(distribution) == sorted(distribution)
    assert sum(size * count for size, count in distribution.items()) == 60


def test_degree_sequence_sums_to_twice_the_edges():
    degrees = degree_sequence(50, 20, seed=2)
    assert len(degrees) == 50
    assert sum(degrees) == 40


@pytest.mark.parametrize("rule", list(Rule))
def test_delta_m_is_a_multiple_of_step_within_bounds(rule):
    value = delta_m(rule, 400, repetitions=1, step=20, seed=4)
    assert 0 <= value < 400
    assert value % 20 == 0


def test_delta_m_is_reproducible():
    first = delta_m(Rule.BOHMAN_FRIEZE, 300, 3, 10, 9)
    second = delta_m(Rule.BOHMAN_FRIEZE, 300, 3, 10, 9)
    assert first == second
    assert 0 <= first < 300
    assert (first * 3) % 10 == 0


def test_write_columns_formats_like_a_stream(tmp_path):
    target = tmp_path / "nested" / "out.txt"
    write_columns(target, [(0, 0.5), (150, 1e-7)])
    assert target.read_text() == "0 0.5\n150 1e-07\n"


def test_main_curves_writes_all_files(tmp_path, capsys):
    code = main(["curves", "--nodes", "60", "--repetitions", "1", "--step", "10",
                 "--data-dir", str(tmp_path), "--seed", "1"])
    assert code == 0
    for label in ("ER", "PR", "SR", "BF"):
        lines = (tmp_path / "LCC" / f"{label}.txt").read_text().splitlines()
        assert len(lines) == 6
        assert (tmp_path / "SLCC" / f"{label}second.txt").exists()
        assert (tmp_path / "AvgClusterSize" / f"{label}average.txt").exists()
    assert "BF Rule done." in capsys.readouterr().out


def test_main_degrees_writes_degree_file(tmp_path):
    main(["degrees", "--nodes", "50", "--edges", "20",
          "--data-dir", str(tmp_path), "--seed", "1"])
    lines = (tmp_path / "DegreeDistribution" / "ER.txt").read_text().split()
    assert len(lines) == 50
    assert sum(int(value) for value in lines) == 40


def test_main_delta_m_doubles_sizes(tmp_path):
    main(["delta-m", "--min-nodes", "100", "--max-nodes", "400", "--repetitions", "1",
          "--step", "10", "--rules", "ER", "--data-dir", str(tmp_path), "--seed", "2"])
    rows = Path(tmp_path / "deltaM" / "ER.txt").read_text().splitlines()
    assert [row.split()[0] for row in rows] == ["100", "200", "400"]


def test_main_clusters_writes_five_files(tmp_path):
    main(["clusters", "--nodes", "100", "--repetitions", "1", "--rule", "PR",
          "--data-dir", str(tmp_path), "--seed", "3"])
    names = sorted(p.name for p in (tmp_path / "ClusterDistribution").iterdir())
    assert names == sorted(f"PR_{m}.txt" for m in (30, 40, 50, 60, 70))