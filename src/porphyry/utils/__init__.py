from .naming import join_labels
from .timing import timed_us

__all__ = [
    "join_labels",
    "timed_us",
]
