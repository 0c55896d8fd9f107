# achlioptas

Monte Carlo simulations of explosive percolation on growing random graphs.
A graph starts with `n` isolated nodes. Edges are then added one at a time, and
an edge-selection rule decides which edge is added:

- **Erdős–Rényi** (`ER`): join two uniformly drawn nodes.
- **Product rule** (`PR`): draw two candidate edges and keep the one whose
  cluster sizes have the smaller product.
- **Sum rule** (`SR`): the same, but it compares the sums of the cluster sizes.
- **Bohman–Frieze rule** (`BF`): if the two drawn nodes are distinct and both
  isolated, join them. Otherwise add a fresh uniformly random edge.

Scale-free graphs are grown by pairing stubs from a power-law degree sequence.
The stubs are paired either at random or by the product rule.

Clusters are tracked with a union-find forest with path compression.

## Installation

```
pip install .
pip install .[test]    # with pytest
```

## Library use

### `achlioptas.graph`

`LinkedGraph(n, rng=None)` is a graph on `n` nodes. `rng` is a
`random.Random` and is used for every random draw. Pass a seeded instance to get
reproducible runs.

```python
import random
from achlioptas.graph import LinkedGraph

graph = LinkedGraph(10_000, random.Random(1))
graph.add_product_rule_edges(5_000)
print(graph.largest_cluster_size(), graph.second_largest_cluster_size())
print(graph.average_cluster_size())
```

Edge adders:

- `add_random_edge()`
- `add_product_rule_edge()`
- `add_sum_rule_edge()`
- `add_bf_rule_edge()`

Each adds one edge and returns it as a pair of node indices. Their plural forms
(`add_random_edges(count)`, `add_product_rule_edges(count)`,
`add_sum_rule_edges(count)`, `add_bf_rule_edges(count)`) add `count` edges.

Stub pairing works on a mutable list of node indices and removes the stubs it
uses:

- `add_stub_edge(stubs)` needs at least two stubs. With fewer it returns `None`.
- `add_stub_product_rule_edge(stubs)` needs at least four stubs. It breaks ties
  at random.

Their batch forms are `add_stub_edges(count, stubs)` and
`add_stub_product_rule_edges(count, stubs)`.

Observables:

- `cluster_distribution()`: the size of every cluster.
- `degree_distribution()`: the degree of every node.
- `largest_cluster_size()`: the size of the largest cluster.
- `second_largest_cluster_size()`: the size of the second largest cluster, or
  0 when there is only one cluster.
- `average_cluster_size()`: the weighted mean size of the finite clusters.
  Every cluster that has the largest size is left out. The result is NaN when
  all clusters have the same size, as in an empty graph.

Other members:

- `find_root(node)`: the root of the cluster that holds `node`.
- `len(graph)`: the number of nodes.
- `edge_count`: the number of edges added so far.

### `achlioptas.simulations`

`Rule` is an enumeration with the members `ERDOS_RENYI`, `PRODUCT`, `SUM` and
`BOHMAN_FRIEZE`. Their values are `"ER"`, `"PR"`, `"SR"` and `"BF"`.

- `grow(graph, rule, count)` adds `count` edges to `graph` by `rule`.
- `observable_curves(rule, n, repetitions=5, step=150, tmax=None, seed=None)`
  grows a graph `step` edges at a time, up to `tmax` edges (default `n`). The
  values are averaged over `repetitions` independent graphs. The function
  returns rows of `(edges, largest/n, second largest/n, average cluster size)`.
- `average_cluster_distribution(rule, n, m, repetitions=10, seed=None)` returns
  the mean number of clusters of each size after `m` edges, as a dict sorted by
  size. A size is averaged only over the repetitions in which it occurred.
- `degree_sequence(n, m, seed=None)` returns the node degrees after `m`
  product-rule edges.
- `delta_m(rule, n, repetitions=32, step=100, seed=None)` returns the mean
  number of edges between two moments: when the largest cluster first exceeds
  `sqrt(n)`, and when it first exceeds `n/2`.
- `write_columns(path, rows)` writes rows as space-separated text. It creates
  parent directories as needed.

### `achlioptas.scalefree`

- `power_law_degrees(n, alpha, kmin, kmax, rng=None)` draws `n` degrees with
  probability proportional to `k ** -alpha` on `[kmin, kmax]`.
- `stubs_from_degrees(degrees)` lists each node once per unit of its degree.
- `kappa(degrees)` returns `<k²>/<k>`. It is 0 for an empty sequence.
- `scale_free_curves(degrees, product_rule=False, repetitions=4, steps=150, seed=None)`
  pairs stubs `steps` at a time. It returns rows of
  `(m/M, largest/n, second largest/n, average cluster size)`, where `M` is half
  the number of stubs.

### `achlioptas.plots`

These functions draw on a matplotlib `Axes`. If none is given, they create a
new figure.

- `read_columns(path)` reads whitespace-separated numbers and returns one numpy
  array per column.
- `plot_lcc(data_dir, n, ax)` draws the largest cluster size.
- `plot_average_cluster_size(data_dir, n, ax)` draws the average cluster size.
- `plot_cluster_distribution(data_dir, kind, m_values, ax)` draws the
  cluster-size distributions.
- `plot_scale_free(data_dir, family, kind, alphas, kmin, ax)` draws the
  scale-free results.
- `plot_delta_m(data_dir, exponent, ax)` draws `Δm / N**exponent` against `N`.
- `plot_degree_histogram(path, ax)` draws a histogram of the degrees with unit
  bins on `[0, 21)`. It fits a power law to the bins whose centres lie in
  `[10, 20]` and returns a `DegreeHistogram` with `ax`, `counts`, `edges` and
  `fit`.
- `fit_power_law(x, y, initial=None)` fits `y = A * x**alpha` and returns
  `(A, alpha)`.

## Command line

### `achlioptas-simulate`

Every subcommand takes `--data-dir` (default `../data`) and `--seed`.

- `curves`: writes these files for each rule in `--rules`:
  - `LCC/<RULE>.txt`
  - `SLCC/<RULE>second.txt`
  - `AvgClusterSize/<RULE>average.txt`

  Options: `--nodes`, `--repetitions`, `--step`, `--tmax`.
- `clusters`: writes `ClusterDistribution/<RULE>_<m>.txt` for five edge counts
  around `n/2`: `n/2 ± n/5`, `n/2 ± n/10` and `n/2`. Options: `--nodes`,
  `--repetitions`, `--rule`.
- `degrees`: writes the product-rule degree sequence to
  `DegreeDistribution/ER.txt`. Options: `--nodes`, `--edges` (default `n/2`).
- `delta-m`: writes `deltaM/<RULE>.txt` for `N` from `--min-nodes`, doubling up
  to `--max-nodes`. Options: `--repetitions`, `--step`, `--rules`.

Rules are named `ER`, `PR`, `SR` and `BF`.

### `achlioptas-scalefree`

Writes `LCC/`, `SLCC/` and `AvgClusterSize/<TYPE>SF_gamma<alpha>_kmin<kmin>.txt`.

Options:

- `--types`: `RG` and/or `PR`.
- `--alphas` and `--kmins`: the exponents and minimum degrees to run.
- `--nodes`, `--repetitions`, `--steps`, `--data-dir`, `--seed`.

`kmax` is `kmin * int(n ** (1 / (alpha - 1)))`.

### `achlioptas-plot`

The subcommands are:

- `lcc`
- `average`
- `clusters`
- `scale-free`
- `degrees`
- `delta-m` (requires `--exponent`)

Each one saves its figure to `--output`, or to `<subcommand>.png` when
`--output` is not given. `degrees` also prints the fitted amplitude and
exponent.

Run any command with `--help` to see all options:

```
achlioptas-simulate --help
achlioptas-scalefree --help
achlioptas-plot --help
```

## Limitations

- Repetitions run one after another in a single process.
- The defaults (a million nodes) describe a full study and take a long time.
  Pass smaller `--nodes` values for quick runs.
- Figures are written only to image files. No window is opened.

## Tests

```
pytest
```