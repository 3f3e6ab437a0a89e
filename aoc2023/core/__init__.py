from __future__ import annotations

from .config import RunPaths, TrackingConfig
from .errors import InvalidPuzzleInput
from .logging import MLflowRunLogger, NullRunLogger, RunLogger, build_run_logger
from .timing import Measurement, measure

__all__ = [
    "InvalidPuzzleInput",
    "Measurement",
    "measure",
    "RunLogger",
    "NullRunLogger",
    "MLflowRunLogger",
    "build_run_logger",
    "RunPaths",
    "TrackingConfig",
]
