from __future__ import annotations

from typing import Dict, Iterator, List, Optional, Tuple

from porphyry.config import PORPHYRY_UNIVERSE
from porphyry.exceptions import CapacityExceeded
from porphyry.veb.tree import VanEmdeBoas
from .paths import dijkstra_unit_path


class LabeledGraph:
    """
    Undirected graph on string labels with dense integer ids.

    Ids are handed out as 0, 1, 2, ... the first time a label is seen and are
    recorded in a VanEmdeBoas index of size ``universe_size``. Parallel edges
    and self loops are kept as given.
    """

    def __init__(self, universe_size: int = PORPHYRY_UNIVERSE):
        self.universe_size = universe_size
        self.index = VanEmdeBoas(universe_size)
        self.adj: List[List[int]] = []
        self.id_of: Dict[str, int] = {}
        self.label_of: List[str] = []

    def ensure_node(self, label: str) -> int:
        """Return the id of *label*, allocating the next id if it is new."""
        nid = self.id_of.get(label)
        if nid is not None:
            return nid
        nid = len(self.label_of)
        if nid >= self.universe_size:
            raise CapacityExceeded(self.universe_size, label)
        self.id_of[label] = nid
        self.label_of.append(label)
        self.adj.append([])
        self.index.insert(nid)
        return nid

    def connect(self, parent: str, child: str) -> None:
        p = self.ensure_node(parent)
        c = self.ensure_node(child)
        self.adj[p].append(c)
        self.adj[c].append(p)

    def shortest_path(self, a: str, b: str) -> List[int]:
        """
        Fewest-edge path between two labels as a list of ids.

        Returns [] if either label is unknown or b is unreachable from a.
        """
        s = self.id_of.get(a)
        t = self.id_of.get(b)
        if s is None or t is None:
            return []
        return dijkstra_unit_path(self.adj, s, t)

    def shortest_path_labels(self, a: str, b: str) -> List[str]:
        return [self.label_of[v] for v in self.shortest_path(a, b)]

    # ---------------------------------------------------------------------
    # Read-only views
    # ---------------------------------------------------------------------

    def label(self, nid: int) -> str:
        return self.label_of[nid]

    def lookup(self, label: str) -> Optional[int]:
        return self.id_of.get(label)

    def neighbors(self, nid: int) -> List[int]:
        return list(self.adj[nid])

    def labels(self) -> List[str]:
        return list(self.label_of)

    def edges(self) -> List[Tuple[int, int]]:
        """
        Undirected edges as (u, v) with u <= v, one entry per connect() call.
        """
        eds: List[Tuple[int, int]] = []
        for u, neigh in enumerate(self.adj):
            loops = 0
            for v in neigh:
                if v > u:
                    eds.append((u, v))
                elif v == u:
                    loops += 1
            # a self loop appears twice in adj[u]
            eds.extend((u, u) for _ in range(loops // 2))
        return eds

    def enumerate_by_cluster(self) -> Dict[int, List[Tuple[int, str]]]:
        """
        Group the indexed ids by top-level cluster.

        Returns {cluster: [(id, label), ...]} with clusters and ids ascending.
        Ids without a label map to "(unused:#id)".
        """
        keys = sorted(set(self.index.enumerate()))
        by_cluster: Dict[int, List[Tuple[int, str]]] = {}
        for k in keys:
            h = self.index.high(k)
            if 0 <= k < len(self.label_of):
                name = self.label_of[k]
            else:
                name = f"(unused:#{k})"
            by_cluster.setdefault(h, []).append((k, name))
        return by_cluster

    def __len__(self) -> int:
        return len(self.label_of)

    def __contains__(self, label: str) -> bool:
        return label in self.id_of

    def __iter__(self) -> Iterator[str]:
        return iter(self.label_of)
