from __future__ import annotations

import time
from typing import Any, Callable, Tuple


def timed_us(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Tuple[Any, int]:
    """
    Call fn(*args, **kwargs) and return (result, elapsed microseconds).
    """
    t0 = time.perf_counter_ns()
    result = fn(*args, **kwargs)
    elapsed = (time.perf_counter_ns() - t0) // 1000
    return result, elapsed
