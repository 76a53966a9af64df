"""Van Emde Boas integer set over a fixed universe [0, U)."""
from __future__ import annotations

import math
from typing import Iterator, List, Optional


def cluster_root(universe_size: int) -> int:
    """Number of clusters, and size of each cluster, for a universe of this size."""
    # ceil(sqrt(U)) in exact integer arithmetic
    return math.isqrt(universe_size - 1) + 1


class VanEmdeBoas:
    """
    Recursive VEB tree supporting insert / contains / enumerate.

    A universe of size <= 2 is a flat pair slot holding its keys in
    minimum/maximum only. Larger universes use r = ceil(sqrt(U)) for both
    the cluster count and the cluster size, so r*r >= U at every level and
    high(x) < r for every valid key.

    The minimum is never stored in a cluster (min-swap on insert), which keeps
    it readable in O(1) and makes inserting into an empty cluster O(1).
    """

    def __init__(self, universe_size: int):
        if universe_size < 1:
            raise ValueError(f"universe_size must be >= 1, got {universe_size}")
        self.universe_size = universe_size
        self.minimum: Optional[int] = None
        self.maximum: Optional[int] = None
        self.summary: Optional[VanEmdeBoas] = None
        self.clusters: List[VanEmdeBoas] = []

        if universe_size > 2:
            r = cluster_root(universe_size)
            self.summary = VanEmdeBoas(r)
            self.clusters = [VanEmdeBoas(r) for _ in range(r)]

    @property
    def root(self) -> int:
        return cluster_root(self.universe_size)

    def high(self, x: int) -> int:
        return x // self.root

    def low(self, x: int) -> int:
        return x % self.root

    def index(self, h: int, l: int) -> int:
        return h * self.root + l

    def is_empty(self) -> bool:
        return self.minimum is None

    def _empty_insert(self, x: int) -> None:
        self.minimum = self.maximum = x

    def insert(self, x: int) -> None:
        """
        Insert key x (0 <= x < universe_size; not checked).

        Inserting a key that is already present leaves the structure unchanged.
        """
        if self.minimum is None:
            self._empty_insert(x)
            return
        if x == self.minimum or x == self.maximum:
            return

        if x < self.minimum:
            x, self.minimum = self.minimum, x

        if self.universe_size > 2:
            h, l = self.high(x), self.low(x)
            cluster = self.clusters[h]
            if cluster.minimum is None:
                self.summary.insert(h)
                cluster._empty_insert(l)
            else:
                cluster.insert(l)

        if x > self.maximum:
            self.maximum = x

    def contains(self, x: int) -> bool:
        if x == self.minimum or x == self.maximum:
            return True
        if self.universe_size <= 2:
            return False
        h = self.high(x)
        if h < 0 or h >= len(self.clusters):
            return False
        cluster = self.clusters[h]
        if cluster.is_empty():
            return False
        return cluster.contains(self.low(x))

    def enumerate(self) -> List[int]:
        """
        All stored keys in ascending order.

        The minimum comes first; every other key lives in exactly one cluster,
        and clusters are visited in ascending index order.
        """
        out: List[int] = []
        if self.minimum is None:
            return out
        out.append(self.minimum)
        if self.universe_size <= 2:
            if self.maximum != self.minimum:
                out.append(self.maximum)
            return out

        for h, cluster in enumerate(self.clusters):
            if cluster.is_empty():
                continue
            out.extend(self.index(h, l) for l in cluster.enumerate())
        return out

    def __contains__(self, x: int) -> bool:
        return self.contains(x)

    def __iter__(self) -> Iterator[int]:
        return iter(self.enumerate())

    def __len__(self) -> int:
        return len(self.enumerate())

    def __repr__(self) -> str:
        return (
            f"VanEmdeBoas(universe_size={self.universe_size}, "
            f"minimum={self.minimum}, maximum={self.maximum})"
        )
