from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict


@dataclass(slots=True)
class RunPaths:
    """Filesystem layout for puzzle inputs."""

    inputs_dir: Path = Path("inputs")
    input_template: str = "{day:02d}.txt"

    def input_for(self, day: int) -> Path:
        return self.inputs_dir / self.input_template.format(day=day)


@dataclass(slots=True)
class TrackingConfig:
    """Options for forwarding solve metrics to MLflow."""

    enabled: bool = False
    experiment_name: str | None = "aoc2023"
    run_name: str | None = None
    tracking_uri: str | None = None
    tags: Dict[str, str] = field(default_factory=dict)


__all__ = ["RunPaths", "TrackingConfig"]
