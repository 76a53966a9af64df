#!/usr/bin/env python3
"""
Time building synthetic Porphyrian trees and a leaf-to-leaf shortest path
(first leaf to last leaf, which crosses the root) for a range of depths.

Usage:
  python3 examples/synthetic_timing.py --branching 3 --max-levels 7
"""
from __future__ import annotations

import argparse

from porphyry.graph.labeled import LabeledGraph
from porphyry.taxonomy.samples import (
    build_synthetic_porphyry,
    synthetic_label,
    synthetic_node_count,
)
from porphyry.utils.timing import timed_us


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--branching", type=int, default=2)
    ap.add_argument("--min-levels", type=int, default=2)
    ap.add_argument("--max-levels", type=int, default=10)
    args = ap.parse_args()
    if args.min_levels < 1 or args.branching < 1:
        ap.error("--min-levels and --branching must be >= 1")

    print(f"{'L':>3} {'nodes':>8} {'U':>8} {'build_us':>10} {'dijkstra_us':>12} {'hops':>5}")
    for levels in range(args.min_levels, args.max_levels + 1):
        n = synthetic_node_count(levels, args.branching)
        G = LabeledGraph(n)
        _, build_us = timed_us(build_synthetic_porphyry, G, levels, args.branching)

        last = args.branching ** (levels - 1) - 1
        a, b = synthetic_label(levels, 0), synthetic_label(levels, last)
        path, dijk_us = timed_us(G.shortest_path, a, b)
        print(f"{levels:>3} {n:>8} {G.universe_size:>8} {build_us:>10} {dijk_us:>12} {len(path) - 1:>5}")


if __name__ == '__main__':
    main()
