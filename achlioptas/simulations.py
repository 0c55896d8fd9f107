"""Percolation experiments on growing graphs under several edge-selection rules."""

from __future__ import annotations

import argparse
import math
import random
from collections import Counter, defaultdict
from enum import Enum
from pathlib import Path
from statistics import fmean
from typing import Iterable, Sequence

from achlioptas.graph import LinkedGraph


class Rule(Enum):
    """Edge-selection rule, valued by the label used in output file names."""

    ERDOS_RENYI = "ER"
    PRODUCT = "PR"
    SUM = "SR"
    BOHMAN_FRIEZE = "BF"

    @property
    def label(self) -> str:
        return self.value

    @property
    def title(self) -> str:
        return _TITLES[self]


_TITLES = {
    Rule.ERDOS_RENYI: "ER",
    Rule.PRODUCT: "Product Rule",
    Rule.SUM: "Sum Rule",
    Rule.BOHMAN_FRIEZE: "BF Rule",
}


def _child_rng(master: random.Random) -> random.Random:
    return random.Random(master.getrandbits(64))


def grow(graph: LinkedGraph, rule: Rule, count: int) -> None:
    """Add ``count`` edges to ``graph`` following ``rule``."""
    adders = {
        Rule.ERDOS_RENYI: graph.add_random_edges,
        Rule.PRODUCT: graph.add_product_rule_edges,
        Rule.SUM: graph.add_sum_rule_edges,
        Rule.BOHMAN_FRIEZE: graph.add_bf_rule_edges,
    }
    adders[Rule(rule)](count)


def _sample_run(
    rule: Rule, n: int, step: int, points: int, rng: random.Random
) -> list[tuple[float, float, float]]:
    graph = LinkedGraph(n, rng)
    samples = []
    for _ in range(points):
        grow(graph, rule, step)
        samples.append(
            (
                graph.largest_cluster_size() / n,
                graph.second_largest_cluster_size() / n,
                graph.average_cluster_size(),
            )
        )
    return samples


def observable_curves(
    rule: Rule,
    n: int,
    repetitions: int = 5,
    step: int = 150,
    tmax: int | None = None,
    seed: int | None = None,
) -> list[tuple[int, float, float, float]]:
    """Average the order parameters over independent growths of a graph.

    Edges are added ``step`` at a time up to ``tmax`` (default ``n``). Each row
    is ``(index * step, largest / n, second largest / n, average cluster size)``.
    """
    if tmax is None:
        tmax = n
    if step < 1:
        raise ValueError(f"step must be positive, got {step}")
    if repetitions < 1:
        raise ValueError(f"repetitions must be positive, got {repetitions}")
    points = tmax // step
    master = random.Random(seed)
    runs = [
        _sample_run(rule, n, step, points, _child_rng(master))
        for _ in range(repetitions)
    ]
    return [
        (index * step, *(sum(values) / repetitions for values in zip(*column)))
        for index, column in enumerate(zip(*runs))
    ]


def average_cluster_distribution(
    rule: Rule,
    n: int,
    m: int,
    repetitions: int = 10,
    seed: int | None = None,
) -> dict[int, float]:
    """Mean number of clusters of each size after ``m`` edges, sorted by size.

    A size is averaged only over the repetitions in which it occurred.
    """
    if repetitions < 1:
        raise ValueError(f"repetitions must be positive, got {repetitions}")
    master = random.Random(seed)
    counts: defaultdict[int, list[int]] = defaultdict(list)
    for _ in range(repetitions):
        graph = LinkedGraph(n, _child_rng(master))
        grow(graph, rule, m)
        for size, occurrences in Counter(graph.cluster_distribution()).items():
            counts[size].append(occurrences)
    return {size: fmean(counts[size]) for size in sorted(counts)}


def degree_sequence(n: int, m: int, seed: int | None = None) -> list[int]:
    """Degrees of all nodes after adding ``m`` product-rule edges."""
    graph = LinkedGraph(n, random.Random(seed))
    graph.add_product_rule_edges(m)
    return graph.degree_distribution()


def delta_m(
    rule: Rule,
    n: int,
    repetitions: int = 32,
    step: int = 100,
    seed: int | None = None,
) -> float:
    """Mean width of the transition window.

    The window opens when the largest cluster first exceeds ``sqrt(n)`` and
    closes when it first exceeds ``n / 2``; it is measured in added edges.
    """
    if step < 1:
        raise ValueError(f"step must be positive, got {step}")
    if repetitions < 1:
        raise ValueError(f"repetitions must be positive, got {repetitions}")
    master = random.Random(seed)
    lower = math.sqrt(n)
    upper = 0.5 * n
    total = 0
    for _ in range(repetitions):
        graph = LinkedGraph(n, _child_rng(master))
        delta = 0
        start: int | None = None
        for edges in range(0, n, step):
            grow(graph, rule, step)
            largest = graph.largest_cluster_size()
            if start is None and largest > lower:
                start = edges
                delta = edges
            if start is not None and largest > upper:
                delta = edges - start
                break
        total += delta
    return total / repetitions


def _format(value: object) -> str:
    if isinstance(value, float):
        return f"{value:g}"
    return str(value)


def write_columns(path: str | Path, rows: Iterable[Sequence[object]]) -> None:
    """Write rows as space-separated columns, creating parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        for row in rows:
            handle.write(" ".join(_format(value) for value in row) + "\n")


def _run_curves(args: argparse.Namespace) -> None:
    data_dir = Path(args.data_dir)
    for rule in args.rules:
        rows = observable_curves(
            rule, args.nodes, args.repetitions, args.step, args.tmax, args.seed
        )
        label = rule.label
        write_columns(data_dir / "LCC" / f"{label}.txt", [(x, s, _, _a) for x, s, _, _a in rows])
        write_columns(
            data_dir / "SLCC" / f"{label}second.txt",
            [(x, second) for x, _, second, _ in rows],
        )
        write_columns(
            data_dir / "AvgClusterSize" / f"{label}average.txt",
            [(x, average) for x, _, _, average in rows],
        )
        print(f"{rule.title} done.")


def _run_clusters(args: argparse.Namespace) -> None:
    n = args.nodes
    critical = n // 2
    m_values = [critical - n // 5, critical - n // 10, critical,
                critical + n // 10, critical + n // 5]
    master = random.Random(args.seed)
    for m in m_values:
        distribution = average_cluster_distribution(
            args.rule, n, m, args.repetitions, master.getrandbits(64)
        )
        write_columns(
            Path(args.data_dir) / "ClusterDistribution" / f"{args.rule.label}_{m}.txt",
            distribution.items(),
        )


def _run_degrees(args: argparse.Namespace) -> None:
    edges = args.edges if args.edges is not None else args.nodes // 2
    degrees = degree_sequence(args.nodes, edges, args.seed)
    write_columns(
        Path(args.data_dir) / "DegreeDistribution" / "ER.txt",
        ((degree,) for degree in degrees),
    )


def _run_delta_m(args: argparse.Namespace) -> None:
    master = random.Random(args.seed)
    for rule in args.rules:
        rows = []
        n = args.min_nodes
        while n <= args.max_nodes:
            rows.append(
                (n, delta_m(rule, n, args.repetitions, args.step, master.getrandbits(64)))
            )
            n *= 2
        write_columns(Path(args.data_dir) / "deltaM" / f"{rule.label}.txt", rows)


def _build_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("--data-dir", default="../data")
    common.add_argument("--seed", type=int, default=None)
    all_rules = list(Rule)

    parser = argparse.ArgumentParser(description="Explosive percolation experiments.")
    commands = parser.add_subparsers(dest="command", required=True)

    curves = commands.add_parser("curves", parents=[common],
                                 help="largest, second and average cluster sizes")
    curves.add_argument("--nodes", type=int, default=1_000_000)
    curves.add_argument("--repetitions", type=int, default=5)
    curves.add_argument("--step", type=int, default=150)
    curves.add_argument("--tmax", type=int, default=None)
    curves.add_argument("--rules", type=Rule, nargs="+", default=all_rules,
                        choices=all_rules, metavar="RULE")
    curves.set_defaults(handler=_run_curves)

    clusters = commands.add_parser("clusters", parents=[common],
                                   help="finite cluster size distribution")
    clusters.add_argument("--nodes", type=int, default=1_000_000)
    clusters.add_argument("--repetitions", type=int, default=10)
    clusters.add_argument("--rule", type=Rule, default=Rule.ERDOS_RENYI,
                          choices=all_rules, metavar="RULE")
    clusters.set_defaults(handler=_run_clusters)

    degrees = commands.add_parser("degrees", parents=[common],
                                  help="degree sequence of a product-rule graph")
    degrees.add_argument("--nodes", type=int, default=1_000_000)
    degrees.add_argument("--edges", type=int, default=None)
    degrees.set_defaults(handler=_run_degrees)

    window = commands.add_parser("delta-m", parents=[common],
                                 help="scaling of the transition window")
    window.add_argument("--min-nodes", type=int, default=10_000)
    window.add_argument("--max-nodes", type=int, default=1_000_000)
    window.add_argument("--repetitions", type=int, default=32)
    window.add_argument("--step", type=int, default=100)
    window.add_argument("--rules", type=Rule, nargs="+", default=all_rules,
                        choices=all_rules, metavar="RULE")
    window.set_defaults(handler=_run_delta_m)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one experiment chosen on the command line and write its data files."""
    args = _build_parser().parse_args(argv)
    args.handler(args)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())