from .samples import (
    SAMPLE_EDGES,
    build_sample_animals,
    build_synthetic_porphyry,
    synthetic_label,
    synthetic_node_count,
)

__all__ = [
    "SAMPLE_EDGES",
    "build_sample_animals",
    "build_synthetic_porphyry",
    "synthetic_label",
    "synthetic_node_count",
]
