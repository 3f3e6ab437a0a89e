"""Wall-clock measurement of a solve."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

R = TypeVar("R")


@dataclass(frozen=True)
class Measurement(Generic[R]):
    answer: R
    duration_ms: float


def measure(fn: Callable[[], R]) -> Measurement[R]:
    """Call ``fn`` once and return its result with the elapsed milliseconds."""
    started = time.perf_counter()
    answer = fn()
    return Measurement(answer=answer, duration_ms=(time.perf_counter() - started) * 1000.0)


__all__ = ["Measurement", "measure"]
