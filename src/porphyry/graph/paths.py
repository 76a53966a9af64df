from __future__ import annotations

import heapq
from typing import List, Sequence, Tuple


def dijkstra_unit_path(adj: Sequence[Sequence[int]], s: int, t: int) -> List[int]:
    """
    Shortest s -> t path in an adjacency list where every edge costs 1.

    Returns the vertex sequence [s, ..., t], or [] if t is unreachable.
    Heap entries whose distance no longer matches dist[u] are skipped.
    """
    n = len(adj)
    INF = n + 1  # longer than any simple path
    dist = [INF] * n
    parent = [-1] * n

    dist[s] = 0
    heap: List[Tuple[int, int]] = [(0, s)]
    while heap:
        d, u = heapq.heappop(heap)
        if d != dist[u]:
            continue
        if u == t:
            break
        for v in adj[u]:
            if dist[v] > d + 1:
                dist[v] = d + 1
                parent[v] = u
                heapq.heappush(heap, (dist[v], v))

    if dist[t] == INF:
        return []

    path: List[int] = []
    cur = t
    while cur != -1:
        path.append(cur)
        cur = parent[cur]
    path.reverse()
    return path


def path_stats(path: Sequence[int]) -> Tuple[int, int]:
    """
    Returns (edges, nodes strictly between the endpoints) for a vertex path.
    An empty path gives (0, 0).
    """
    if not path:
        return 0, 0
    return len(path) - 1, max(0, len(path) - 2)
