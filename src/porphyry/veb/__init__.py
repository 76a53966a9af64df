from .tree import VanEmdeBoas, cluster_root

__all__ = [
    "VanEmdeBoas",
    "cluster_root",
]
