"""Run loggers that record solve answers and timings.

``NullRunLogger`` is the default. ``MLflowRunLogger`` forwards everything
to an MLflow run and is only importable with the ``tracking`` extra.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

from aoc2023.core.config import TrackingConfig
from aoc2023.core.timing import Measurement


def _as_strings(values: Mapping[str, Any]) -> Dict[str, str]:
    return {key: str(value) for key, value in values.items()}


class RunLogger:
    """Sink for the parameters, tags and per-part results of one solve run."""

    def log_params(self, params: Dict[str, Any]) -> None:
        raise NotImplementedError

    def log_metric(self, key: str, value: float, step: int | None = None) -> None:
        raise NotImplementedError

    def set_tags(self, tags: Dict[str, Any]) -> None:
        raise NotImplementedError

    def close(self) -> None:
        raise NotImplementedError

    def log_solve(self, part: int, result: Measurement) -> None:
        """Record one part's answer (when there is one) and its duration."""
        if result.answer is not None:
            self.log_metric(f"part{part}/answer", float(result.answer))
        self.log_metric(f"part{part}/duration_ms", result.duration_ms)


class NullRunLogger(RunLogger):
    def log_params(self, params: Dict[str, Any]) -> None:
        return None

    def log_metric(self, key: str, value: float, step: int | None = None) -> None:
        return None

    def set_tags(self, tags: Dict[str, Any]) -> None:
        return None

    def close(self) -> None:
        return None


class MLflowRunLogger(RunLogger):
    """Solve run backed by ``mlflow``; one MLflow run per CLI invocation."""

    def __init__(self, config: TrackingConfig) -> None:
        try:
            import mlflow
        except ModuleNotFoundError as exc:  # pragma: no cover - import guard
            raise RuntimeError(
                "MLflow is not installed. Install the tracking extras via `pip install aoc2023[tracking]`."
            ) from exc

        self._mlflow = mlflow
        if config.tracking_uri is not None:
            mlflow.set_tracking_uri(config.tracking_uri)
        if config.experiment_name is not None:
            mlflow.set_experiment(config.experiment_name)

        if mlflow.active_run() is not None:
            mlflow.end_run()
        self._run = mlflow.start_run(run_name=config.run_name)
        if config.tags:
            self.set_tags(config.tags)

    def log_params(self, params: Dict[str, Any]) -> None:
        self._mlflow.log_params(_as_strings(params))

    def log_metric(self, key: str, value: float, step: int | None = None) -> None:
        self._mlflow.log_metric(key, float(value), step=step)

    def set_tags(self, tags: Dict[str, Any]) -> None:
        self._mlflow.set_tags(_as_strings(tags))

    def close(self) -> None:
        if self._mlflow.active_run() is not None:
            self._mlflow.end_run()


def build_run_logger(config: TrackingConfig) -> RunLogger:
    if not config.enabled:
        return NullRunLogger()
    return MLflowRunLogger(config)


__all__ = ["RunLogger", "NullRunLogger", "MLflowRunLogger", "build_run_logger"]
