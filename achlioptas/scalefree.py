"""Stub-matching growth of graphs with a power-law degree sequence."""

from __future__ import annotations

import argparse
import math
import random
from bisect import bisect_left
from itertools import accumulate
from pathlib import Path
from typing import Sequence

from achlioptas.graph import LinkedGraph
from achlioptas.simulations import write_columns


def power_law_degrees(
    n: int, alpha: float, kmin: int, kmax: int, rng: random.Random | None = None
) -> list[int]:
    """Draw ``n`` degrees with probability proportional to ``k ** -alpha`` on [kmin, kmax]."""
    if kmax < kmin:
        raise ValueError(f"kmax ({kmax}) must not be below kmin ({kmin})")
    rng = rng if rng is not None else random.Random()
    cumulative = list(accumulate(k ** -alpha for k in range(kmin, kmax + 1)))
    norm = cumulative[-1]
    cdf = [value / norm for value in cumulative]
    last = len(cdf) - 1
    return [min(bisect_left(cdf, rng.random()), last) + kmin for _ in range(n)]


def stubs_from_degrees(degrees: Sequence[int]) -> list[int]:
    """List every node once per unit of its degree, in node order."""
    return [node for node, degree in enumerate(degrees) for _ in range(degree)]


def kappa(degrees: Sequence[int]) -> float:
    """Ratio of the second to the first moment of the degrees; 0 when empty."""
    if not degrees:
        return 0.0
    total = sum(degrees)
    if total == 0:
        return math.nan
    return sum(k * k for k in degrees) / total


def _sample_run(
    n: int, stubs: list[int], product_rule: bool, steps: int, m_max: int,
    rng: random.Random,
) -> list[tuple[int, int, float]]:
    graph = LinkedGraph(n, rng)
    remaining = list(stubs)
    add = graph.add_stub_product_rule_edges if product_rule else graph.add_stub_edges
    samples = []
    for _ in range(0, m_max, steps):
        add(steps, remaining)
        samples.append(
            (
                graph.largest_cluster_size(),
                graph.second_largest_cluster_size(),
                graph.average_cluster_size(),
            )
        )
    return samples


def scale_free_curves(
    degrees: Sequence[int],
    product_rule: bool = False,
    repetitions: int = 4,
    steps: int = 150,
    seed: int | None = None,
) -> list[tuple[float, float, float, float]]:
    """Average order parameters while stubs are paired into edges.

    Each row is ``(m / M, largest / n, second largest / n, average cluster size)``
    where ``M`` is half the number of stubs.
    """
    n = len(degrees)
    if n == 0:
        raise ValueError("the degree sequence is empty")
    if steps < 1:
        raise ValueError(f"steps must be positive, got {steps}")
    if repetitions < 1:
        raise ValueError(f"repetitions must be positive, got {repetitions}")
    stubs = stubs_from_degrees(degrees)
    m_max = len(stubs) // 2
    master = random.Random(seed)
    runs = [
        _sample_run(n, stubs, product_rule, steps, m_max,
                    random.Random(master.getrandbits(64)))
        for _ in range(repetitions)
    ]
    rows = []
    for edges, column in zip(range(0, m_max, steps), zip(*runs)):
        largest, second, average = (
            sum(values) / repetitions for values in zip(*column)
        )
        rows.append((edges / m_max, largest / n, second / n, average))
    return rows


def main(argv: Sequence[str] | None = None) -> int:
    """Run the scale-free experiments and write their data files."""
    parser = argparse.ArgumentParser(description="Percolation on scale-free networks.")
    parser.add_argument("--nodes", type=int, default=1_000_000)
    parser.add_argument("--repetitions", type=int, default=4)
    parser.add_argument("--steps", type=int, default=150)
    parser.add_argument("--types", nargs="+", choices=["RG", "PR"], default=["RG"])
    parser.add_argument("--alphas", type=float, nargs="+", default=[3.8])
    parser.add_argument("--kmins", type=int, nargs="+", default=[1])
    parser.add_argument("--data-dir", default="../data")
    parser.add_argument("--seed", type=int, default=None)
    args = parser.parse_args(argv)

    data_dir = Path(args.data_dir)
    n = args.nodes
    master = random.Random(args.seed)
    for kind in args.types:
        product_rule = kind == "PR"
        for alpha in args.alphas:
            for kmin in args.kmins:
                kmax = kmin * int(n ** (1.0 / (alpha - 1)))
                degrees = power_law_degrees(
                    n, alpha, kmin, kmax, random.Random(master.getrandbits(64))
                )
                print(f"Working with type = {int(product_rule)}, "
                      f"alpha = {alpha:g}, kmin = {kmin}")
                print(f"kappa = {kappa(degrees):g}")
                rows = scale_free_curves(degrees, product_rule, args.repetitions,
                                         args.steps, master.getrandbits(64))
                name = f"{kind}SF_gamma{alpha:f}_kmin{kmin}.txt"
                write_columns(data_dir / "LCC" / name,
                              [(x, largest) for x, largest, _, _ in rows])
                write_columns(data_dir / "SLCC" / name,
                              [(x, second) for x, _, second, _ in rows])
                write_columns(data_dir / "AvgClusterSize" / name,
                              [(x, average) for x, _, _, average in rows])
    return 0


if __name__ == "__main__":
    raise SystemExit(main())