#!/usr/bin/env python3
"""
Arbor Porphyriana demo: build a taxonomy on a VEB-indexed graph, print the
index view and an ASCII diagram, write Graphviz DOT, and time a shortest-path
query.

Usage:
  porphyry
  porphyry --source Plato --target chicken --dot porphyry.dot
  porphyry --synthetic-levels 5 --branching 3 --universe 1024 --root L1_0 \
      --source L5_0 --target L5_80
  dot -Tpng porphyry.dot -o porphyry.png
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from porphyry.config import PORPHYRY_DOT_PATH, PORPHYRY_UNIVERSE
from porphyry.exceptions import CapacityExceeded
from porphyry.graph.labeled import LabeledGraph
from porphyry.graph.paths import path_stats
from porphyry.io.dot import write_dot
from porphyry.taxonomy.samples import build_sample_animals, build_synthetic_porphyry
from porphyry.utils.naming import join_labels
from porphyry.utils.timing import timed_us
from porphyry.viz.ascii_tree import render_ascii_tree
from porphyry.viz.draw import draw_arbor
from porphyry.viz.veb_view import render_veb_view


def positive_int(text: str) -> int:
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="porphyry", description=__doc__.strip().splitlines()[0])
    ap.add_argument("--universe", type=positive_int, default=PORPHYRY_UNIVERSE, help="VEB universe size (node capacity)")
    ap.add_argument("--source", type=str, default="Plato")
    ap.add_argument("--target", type=str, default="chicken")
    ap.add_argument("--root", type=str, default="substance", help="root label for the ASCII diagram")
    ap.add_argument("--dot", type=str, default=PORPHYRY_DOT_PATH, help="path for the Graphviz DOT file")
    ap.add_argument("--no-dot", action="store_true", help="skip writing the DOT file")
    ap.add_argument(
        "--synthetic-levels",
        type=int,
        default=0,
        help="build an N-level synthetic tree instead of the sample animals",
    )
    ap.add_argument("--branching", type=int, default=2, help="fan-out of the synthetic tree")
    ap.add_argument("--draw", type=str, default=None, help="save a matplotlib PNG of the taxonomy here")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    arbor = LabeledGraph(args.universe)

    try:
        if args.synthetic_levels > 0:
            _, build_us = timed_us(build_synthetic_porphyry, arbor, args.synthetic_levels, args.branching)
            what = f"synthetic L={args.synthetic_levels} B={args.branching}"
        else:
            _, build_us = timed_us(build_sample_animals, arbor)
            what = "sample animals"
    except CapacityExceeded as e:
        print(f"[build] {e}", file=sys.stderr)
        return 1

    print(f"Build time ({what}): {build_us} us")

    print()
    print(render_veb_view(arbor), end="")

    print(f"\nASCII Diagram (root={args.root})")
    try:
        print(render_ascii_tree(arbor, args.root), end="")
    except KeyError:
        print(f"[diagram] root label not found: {args.root}", file=sys.stderr)

    if not args.no_dot:
        try:
            write_dot(arbor, args.dot)
        except OSError:
            print(f"[graphviz] cannot open: {args.dot}", file=sys.stderr)

    path, dijk_us = timed_us(arbor.shortest_path, args.source, args.target)

    if not path:
        print(f"\nNo path found between {args.source} and {args.target}")
    else:
        edges, between = path_stats(path)
        print(f"\nShortest path ({args.source} -> {args.target}):\n  {join_labels(path, arbor.label_of)}")
        print(f"Edges (hops): {edges}")
        print(f"Nodes between terms (excluding endpoints): {between}")
        print(f"Dijkstra time: {dijk_us} us")

    if args.draw:
        draw_arbor(arbor, root=args.root, highlight=path, save_path=args.draw)
        print(f"[draw] wrote {args.draw}", file=sys.stderr)

    return 0


if __name__ == "__main__":
    sys.exit(main())
