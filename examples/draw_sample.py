#!/usr/bin/env python3
"""
Draw the sample taxonomy with a highlighted shortest path.

Usage:
  python3 examples/draw_sample.py --source Socrates --target canine --save arbor.png
"""
from __future__ import annotations

import argparse

from porphyry.graph.labeled import LabeledGraph
from porphyry.taxonomy.samples import build_sample_animals
from porphyry.utils.naming import join_labels
from porphyry.viz.draw import draw_arbor


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--source", type=str, default="Plato")
    ap.add_argument("--target", type=str, default="chicken")
    ap.add_argument("--root", type=str, default="substance")
    ap.add_argument("--save", type=str, default=None, help="path to save PNG instead of showing")
    args = ap.parse_args()

    G = build_sample_animals(LabeledGraph(64))
    path = G.shortest_path(args.source, args.target)
    print(join_labels(path, G.label_of) if path else "no path")

    draw_arbor(G, root=args.root, highlight=path, save_path=args.save)


if __name__ == '__main__':
    main()
