"""Growing random graphs whose clusters are tracked with a union-find forest."""

from __future__ import annotations

import math
import random
from collections import Counter
from typing import MutableSequence

Edge = tuple[int, int]


class LinkedGraph:
    """A graph on ``n`` nodes that starts empty and grows one edge at a time.

    Every node keeps its list of neighbours. Clusters are kept as a forest:
    each node points to a parent, and a root holds the size of its cluster.
    """

    def __init__(self, n: int, rng: random.Random | None = None) -> None:
        if n < 1:
            raise ValueError(f"a graph needs at least one node, got {n}")
        self._n = n
        self._rng = rng if rng is not None else random.Random()
        self._parent: list[int | None] = [None] * n
        self._cluster_size = [1] * n
        self._neighbors: list[list[int]] = [[] for _ in range(n)]

    def __len__(self) -> int:
        return self._n

    @property
    def edge_count(self) -> int:
        """Number of edges added so far, self-loops and repeats included."""
        return sum(len(adjacent) for adjacent in self._neighbors) // 2

    def find_root(self, node: int) -> int:
        """Return the root of the cluster holding ``node``, compressing the path."""
        root = node
        while (parent := self._parent[root]) is not None:
            root = parent
        while node != root:
            parent = self._parent[node]
            self._parent[node] = root
            node = parent
        return root

    def cluster_distribution(self) -> list[int]:
        """Sizes of all clusters, listed in the order of their root nodes."""
        return [
            size
            for parent, size in zip(self._parent, self._cluster_size)
            if parent is None
        ]

    def degree_distribution(self) -> list[int]:
        """Degree of every node, in node order."""
        return [len(adjacent) for adjacent in self._neighbors]

    def largest_cluster_size(self) -> int:
        """Size of the largest connected component."""
        return max(self.cluster_distribution())

    def second_largest_cluster_size(self) -> int:
        """Size of the second largest cluster, or 0 when there is only one."""
        sizes = sorted(self.cluster_distribution(), reverse=True)
        return sizes[1] if len(sizes) >= 2 else 0

    def average_cluster_size(self) -> float:
        """Weighted mean size of the finite clusters.

        Every cluster whose size equals the largest size is left out. The result
        is NaN when all clusters share one size.
        """
        occurrences = Counter(self.cluster_distribution())
        finite_sizes = sorted(occurrences)[:-1]
        numerator = sum(size * size * occurrences[size] for size in finite_sizes)
        denominator = sum(size * occurrences[size] for size in finite_sizes)
        if denominator == 0:
            return math.nan
        return numerator / denominator

    def _link(self, u: int, v: int) -> None:
        self._neighbors[u].append(v)
        self._neighbors[v].append(u)

    def _merge_by_size(self, root_u: int, root_v: int) -> None:
        if root_u == root_v:
            return
        size_u = self._cluster_size[root_u]
        size_v = self._cluster_size[root_v]
        if size_u < size_v:
            self._parent[root_u] = root_v
            self._cluster_size[root_v] += size_u
        else:
            self._parent[root_v] = root_u
            self._cluster_size[root_u] += size_v

    def _attach(self, root_from: int, root_to: int) -> None:
        if root_from == root_to:
            return
        self._parent[root_from] = root_to
        self._cluster_size[root_to] += self._cluster_size[root_from]

    def _random_node(self) -> int:
        return self._rng.randrange(self._n)

    def add_random_edge(self) -> Edge:
        """Join two uniformly drawn nodes; return the edge added."""
        u = self._random_node()
        v = self._random_node()
        root_u = self.find_root(u)
        root_v = self.find_root(v)
        self._link(u, v)
        self._merge_by_size(root_u, root_v)
        return u, v

    def add_random_edges(self, count: int) -> None:
        """Add ``count`` uniformly random edges."""
        for _ in range(count):
            self.add_random_edge()

    def _add_competing_edge(self, score) -> Edge:
        u1, u2 = self._random_node(), self._random_node()
        v1, v2 = self._random_node(), self._random_node()
        root_u1, root_u2 = self.find_root(u1), self.find_root(u2)
        root_v1, root_v2 = self.find_root(v1), self.find_root(v2)
        first = score(self._cluster_size[root_u1], self._cluster_size[root_u2])
        second = score(self._cluster_size[root_v1], self._cluster_size[root_v2])
        if first < second:
            self._link(u1, u2)
            self._attach(root_u1, root_u2)
            return u1, u2
        self._link(v1, v2)
        self._attach(root_v1, root_v2)
        return v1, v2

    def add_product_rule_edge(self) -> Edge:
        """Draw two candidate edges and keep the one with the smaller size product."""
        return self._add_competing_edge(lambda a, b: a * b)

    def add_product_rule_edges(self, count: int) -> None:
        """Add ``count`` edges chosen by the product rule."""
        for _ in range(count):
            self.add_product_rule_edge()

    def add_sum_rule_edge(self) -> Edge:
        """Draw two candidate edges and keep the one with the smaller size sum."""
        return self._add_competing_edge(lambda a, b: a + b)

    def add_sum_rule_edges(self, count: int) -> None:
        """Add ``count`` edges chosen by the sum rule."""
        for _ in range(count):
            self.add_sum_rule_edge()

    def _is_isolated(self, node: int) -> bool:
        return self._parent[node] is None and self._cluster_size[node] == 1

    def add_bf_rule_edge(self) -> Edge:
        """Join two isolated nodes if drawn, otherwise add a fresh random edge."""
        u1 = self._random_node()
        u2 = self._random_node()
        if u1 != u2 and self._is_isolated(u1) and self._is_isolated(u2):
            self._link(u1, u2)
            self._parent[u1] = u2
            self._cluster_size[u2] += 1
            return u1, u2
        return self.add_random_edge()

    def add_bf_rule_edges(self, count: int) -> None:
        """Add ``count`` edges by the Bohman-Frieze rule."""
        for _ in range(count):
            self.add_bf_rule_edge()

    def _distinct_positions(self, stubs: MutableSequence[int], k: int) -> list[int]:
        while True:
            positions = [self._rng.randrange(len(stubs)) for _ in range(k)]
            if len(set(positions)) == k:
                return positions

    def add_stub_edge(self, stubs: MutableSequence[int]) -> Edge | None:
        """Pair two random stubs into an edge and remove them from ``stubs``.

        Nothing happens, and None is returned, when fewer than two stubs remain.
        """
        if len(stubs) < 2:
            return None
        first, second = sorted(self._distinct_positions(stubs, 2))
        u, v = stubs[first], stubs[second]
        root_u, root_v = self.find_root(u), self.find_root(v)
        self._link(u, v)
        self._merge_by_size(root_u, root_v)
        del stubs[second]
        del stubs[first]
        return u, v

    def add_stub_edges(self, count: int, stubs: MutableSequence[int]) -> None:
        """Add up to ``count`` edges drawn from ``stubs``."""
        for _ in range(count):
            self.add_stub_edge(stubs)

    def add_stub_product_rule_edge(self, stubs: MutableSequence[int]) -> Edge | None:
        """Draw two stub pairs and keep the one with the smaller size product.

        Ties are broken at random. Nothing happens, and None is returned, when
        fewer than four stubs remain.
        """
        if len(stubs) < 4:
            return None
        i1, i2, i3, i4 = self._distinct_positions(stubs, 4)
        first_pair = sorted((i1, i2))
        second_pair = sorted((i3, i4))
        s1, s2 = (stubs[i] for i in first_pair)
        s3, s4 = (stubs[i] for i in second_pair)
        roots = [self.find_root(node) for node in (s1, s2, s3, s4)]
        size1, size2, size3, size4 = (self._cluster_size[root] for root in roots)
        product_first = size1 * size2
        product_second = size3 * size4
        if product_first < product_second or (
            product_first == product_second
            and self._rng.randrange(len(stubs)) % 2 == 0
        ):
            chosen, (root_a, root_b), (u, v) = first_pair, roots[:2], (s1, s2)
        else:
            chosen, (root_a, root_b), (u, v) = second_pair, roots[2:], (s3, s4)
        self._link(u, v)
        self._merge_by_size(root_a, root_b)
        low, high = chosen
        del stubs[high]
        del stubs[low]
        return u, v

    def add_stub_product_rule_edges(
        self, count: int, stubs: MutableSequence[int]
    ) -> None:
        """Add up to ``count`` product-rule edges drawn from ``stubs``."""
        for _ in range(count):
            self.add_stub_product_rule_edge(stubs)