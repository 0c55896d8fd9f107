"""Figures drawn from the data files written by the percolation experiments."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Sequence

import numpy as np
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from scipy.optimize import curve_fit

_RULES = (
    ("ER", "Erdos-Renyi"),
    ("PR", "Product Rule"),
    ("SR", "Sum Rule"),
    ("BF", "BF Rule"),
)
_COLORS = ("tab:blue", "tab:red", "tab:green", "tab:orange", "tab:purple")

_SCALE_FREE_THRESHOLD = 1.0 / (2.80898 - 1)
_HISTOGRAM_BINS = 21
_FIT_RANGE = (10.0, 20.0)


def read_columns(path: str | Path) -> tuple[np.ndarray, ...]:
    """Read whitespace-separated numbers, returning one array per column.

    Blank lines are skipped. An empty file gives an empty tuple.
    """
    rows: list[list[float]] = []
    with Path(path).open(encoding="utf-8") as handle:
        for number, line in enumerate(handle, start=1):
            fields = line.split()
            if not fields:
                continue
            try:
                row = [float(field) for field in fields]
            except ValueError as error:
                raise ValueError(f"{path}:{number}: not a number: {line.strip()!r}") from error
            if rows and len(row) != len(rows[0]):
                raise ValueError(
                    f"{path}:{number}: expected {len(rows[0])} columns, got {len(row)}"
                )
            rows.append(row)
    return tuple(np.array(column, dtype=float) for column in zip(*rows))


def _xy(path: Path) -> tuple[np.ndarray, np.ndarray]:
    columns = read_columns(path)
    if not columns:
        return np.empty(0), np.empty(0)
    if len(columns) < 2:
        raise ValueError(f"{path}: needs at least two columns")
    return columns[0], columns[1]


def _axes(ax: Axes | None) -> Axes:
    return ax if ax is not None else Figure().add_subplot()


def _legend(ax: Axes) -> None:
    ax.legend(loc="upper left", frameon=False, fontsize="small")


def plot_lcc(data_dir: str | Path, n: int = 1_000_000, ax: Axes | None = None) -> Axes:
    """Draw the order parameter of every rule against m / N."""
    ax = _axes(ax)
    base = Path(data_dir) / "LCC"
    for (label, title), color in zip(_RULES, _COLORS):
        x, y = _xy(base / f"{label}.txt")
        ax.plot(x / n, y, marker="o", markersize=3, linewidth=2, color=color, label=title)
    ax.set(title="Order parameter S", xlabel="m / N", ylabel="S", xlim=(0, 1), ylim=(0, 1))
    _legend(ax)
    return ax


def plot_average_cluster_size(
    data_dir: str | Path, n: int = 1_000_000, ax: Axes | None = None
) -> Axes:
    """Draw the average finite cluster size of every rule on a logarithmic scale."""
    ax = _axes(ax)
    base = Path(data_dir) / "AvgClusterSize"
    for (label, title), color in zip(_RULES, _COLORS):
        x, y = _xy(base / f"{label}average.txt")
        ax.plot(x / n, y, marker="o", markersize=3, linewidth=2, color=color, label=title)
    ax.set_yscale("log")
    ax.set(
        title="Average cluster size",
        xlabel="m / N",
        ylabel="χ",
        xlim=(0.3, 1),
        ylim=(0.99, 10000),
    )
    _legend(ax)
    return ax


def plot_cluster_distribution(
    data_dir: str | Path,
    kind: str = "ER",
    m_values: Iterable[object] = (300000, 400000, 500000, 600000, 700000),
    ax: Axes | None = None,
) -> Axes:
    """Draw the finite cluster size distribution for several edge counts.

    Only points with a positive size and a positive count are drawn.
    """
    ax = _axes(ax)
    base = Path(data_dir) / "ClusterDistribution"
    for index, (m, color) in enumerate(zip(m_values, _COLORS)):
        sizes, counts = _xy(base / f"{kind}_{m}.txt")
        keep = (sizes > 0) & (counts > 0)
        ax.plot(
            sizes[keep],
            counts[keep],
            marker="o",
            markersize=4,
            linestyle="none" if index == 0 else "-",
            color=color,
            label=f"m/N = {float(m) / 1e6:f}",
        )
    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set(
        title=f"Finite cluster size distribution ({kind})",
        xlabel="Cluster size s",
        ylabel="Occurrences",
        xlim=(1, 5e2),
    )
    _legend(ax)
    return ax


def plot_scale_free(
    data_dir: str | Path,
    family: str = "LCC",
    kind: str = "RG",
    alphas: Sequence[float] = (3.8,),
    kmin: int = 1,
    ax: Axes | None = None,
) -> Axes:
    """Draw one observable of the scale-free runs for several exponents."""
    ax = _axes(ax)
    base = Path(data_dir) / family
    for index, (alpha, color) in enumerate(zip(alphas, _COLORS)):
        x, y = _xy(base / f"{kind}SF_gamma{alpha:f}_kmin{kmin}.txt")
        ax.plot(
            x,
            y,
            marker="o" if index == 0 else "v",
            markersize=3,
            linewidth=2,
            color=color,
            label=f"gamma = {alpha:f}, kmin ={kmin}",
        )
    ax.plot(
        [_SCALE_FREE_THRESHOLD, _SCALE_FREE_THRESHOLD],
        [0, 0.5],
        linestyle="--",
        linewidth=2,
        color="darkorange",
    )
    ax.set(
        title="Order parameter S (scale free nets)",
        xlabel="m / M",
        ylabel="S",
        xlim=(0, 1),
        ylim=(0, 1),
    )
    _legend(ax)
    return ax


def _power_law(x, amplitude, exponent):
    return amplitude * np.power(x, exponent)


def fit_power_law(
    x: Sequence[float], y: Sequence[float], initial: Sequence[float] | None = None
) -> tuple[float, float]:
    """Fit ``y = A * x ** alpha`` by least squares and return ``(A, alpha)``.

    Without ``initial``, the starting point comes from a straight-line fit in
    log-log space.
    """
    x = np.asarray(x, dtype=float)
    y = np.asarray(y, dtype=float)
    if x.shape != y.shape:
        raise ValueError("x and y must have the same length")
    if x.size < 2:
        raise ValueError("a power-law fit needs at least two points")
    if initial is None:
        positive = (x > 0) & (y > 0)
        if positive.sum() < 2:
            raise ValueError("need two points with positive x and y to start the fit")
        slope, intercept = np.polyfit(np.log(x[positive]), np.log(y[positive]), 1)
        initial = (math.exp(intercept), slope)
    params, _ = curve_fit(_power_law, x, y, p0=tuple(initial), maxfev=10000)
    return float(params[0]), float(params[1])


@dataclass
class DegreeHistogram:
    """A drawn degree histogram and the power law fitted to its tail."""

    ax: Axes
    counts: np.ndarray
    edges: np.ndarray
    fit: tuple[float, float] | None


def plot_degree_histogram(path: str | Path, ax: Axes | None = None) -> DegreeHistogram:
    """Histogram node degrees in unit bins on [0, 21) and fit a power law on [10, 20].

    Degrees outside the bin range are not counted. The fit uses the non-empty
    bins whose centres lie in the fit range and is None when fewer than two do.
    """
    ax = _axes(ax)
    columns = read_columns(path)
    values = columns[0] if columns else np.empty(0)
    values = values[(values >= 0) & (values < _HISTOGRAM_BINS)]
    counts, edges = np.histogram(values, bins=np.arange(_HISTOGRAM_BINS + 1))
    ax.stairs(counts, edges, linewidth=2, color="navy")
    centres = edges[:-1] + 0.5
    low, high = _FIT_RANGE
    usable = (centres >= low) & (centres <= high) & (counts > 0)
    fit = None
    if usable.sum() >= 2:
        fit = fit_power_law(centres[usable], counts[usable])
        grid = np.linspace(low, high, 50)
        ax.plot(grid, _power_law(grid, *fit), color="red", linewidth=2)
    ax.set_xscale("log")
    ax.set_yscale("log")
    ax.set(
        title="Log-Log plot of Degree Distribution",
        xlabel="Degree",
        ylabel="Occurrences",
        xlim=(1, 100),
    )
    ax.grid(True)
    return DegreeHistogram(ax=ax, counts=counts, edges=edges, fit=fit)


def plot_delta_m(data_dir: str | Path, exponent: float, ax: Axes | None = None) -> Axes:
    """Draw the transition width of every rule divided by ``N ** exponent``.

    Points with N equal to zero are drawn at zero.
    """
    ax = _axes(ax)
    base = Path(data_dir) / "deltaM"
    for (label, _), color in zip(_RULES, _COLORS):
        x, y = _xy(base / f"{label}.txt")
        scaled = np.zeros_like(y)
        nonzero = x != 0
        scaled[nonzero] = y[nonzero] / np.power(x[nonzero], exponent)
        ax.plot(x, scaled, marker="o", markersize=3, linewidth=2, color=color, label=label)
    ax.set(title="Scaling law for Δ", xlabel="N", ylabel="Δ / N", ylim=(-0.05, 0.28))
    _legend(ax)
    return ax


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Draw percolation figures.")
    commands = parser.add_subparsers(dest="command", required=True)

    def command(name: str, help_text: str) -> argparse.ArgumentParser:
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("--output", default=None, help="image file to write")
        return sub

    lcc = command("lcc", "order parameter of every rule")
    lcc.add_argument("--data-dir", default="../data")
    lcc.add_argument("--nodes", type=int, default=1_000_000)

    average = command("average", "average cluster size of every rule")
    average.add_argument("--data-dir", default="../data")
    average.add_argument("--nodes", type=int, default=1_000_000)

    clusters = command("clusters", "finite cluster size distribution")
    clusters.add_argument("--data-dir", default="../data")
    clusters.add_argument("--kind", default="ER")
    clusters.add_argument(
        "--m-values", nargs="+", default=["300000", "400000", "500000", "600000", "700000"]
    )

    scale_free = command("scale-free", "scale-free observables")
    scale_free.add_argument("--data-dir", default="../data")
    scale_free.add_argument("--family", default="LCC")
    scale_free.add_argument("--kind", default="RG")
    scale_free.add_argument("--alphas", type=float, nargs="+", default=[3.8])
    scale_free.add_argument("--kmin", type=int, default=1)

    degrees = command("degrees", "degree histogram with a power-law fit")
    degrees.add_argument("--path", default="./data/DegreeDistribution/ER.txt")

    window = command("delta-m", "scaling of the transition window")
    window.add_argument("--data-dir", default="../data")
    window.add_argument("--exponent", type=float, required=True)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Draw the figure chosen on the command line and save it as an image."""
    args = _build_parser().parse_args(argv)
    if args.command == "lcc":
        ax = plot_lcc(args.data_dir, args.nodes)
    elif args.command == "average":
        ax = plot_average_cluster_size(args.data_dir, args.nodes)
    elif args.command == "clusters":
        ax = plot_cluster_distribution(args.data_dir, args.kind, args.m_values)
    elif args.command == "scale-free":
        ax = plot_scale_free(args.data_dir, args.family, args.kind, args.alphas, args.kmin)
    elif args.command == "degrees":
        histogram = plot_degree_histogram(args.path)
        ax = histogram.ax
        if histogram.fit is not None:
            amplitude, exponent = histogram.fit
            print(f"A = {amplitude:g}, alpha = {exponent:g}")
    else:
        ax = plot_delta_m(args.data_dir, args.exponent)
    output = args.output if args.output is not None else f"{args.command}.png"
    ax.figure.savefig(output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())