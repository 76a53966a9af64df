"""
Exceptions raised by porphyry.
"""


class PorphyryError(Exception):
    """Base exception for porphyry"""
    pass


class CapacityExceeded(PorphyryError):
    """A new node id would fall outside the index universe"""

    def __init__(self, capacity: int, label: str):
        self.capacity = capacity
        self.label = label
        super().__init__(
            f"Out of VEB universe capacity ({capacity}) while adding {label!r}. "
            "Increase the universe size."
        )
