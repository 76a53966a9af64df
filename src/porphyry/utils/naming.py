from __future__ import annotations

from typing import Sequence


def join_labels(ids: Sequence[int], labels: Sequence[str], sep: str = " -> ") -> str:
    """
    Join node ids as their labels; ids with no label are shown as #id.
    """
    parts = []
    for nid in ids:
        if 0 <= nid < len(labels):
            parts.append(labels[nid])
        else:
            parts.append(f"#{nid}")
    return sep.join(parts)
