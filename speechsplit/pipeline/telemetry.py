"""Stage telemetry helper methods for the segmentation pipeline.

Responsibilities:
- Emit stage start/complete/failure events.
- Wrap stage actions with consistent telemetry hooks.
"""

from __future__ import annotations

from collections.abc import Callable, Sized
from typing import TypeVar

from ..telemetry.logger import RunLogger

_StageResult = TypeVar("_StageResult")


class PipelineTelemetryMixin:
    """Provide stage-telemetry helper methods."""

    _run_logger: RunLogger | None

    def _on_stage_start(self, stage_name: str) -> None:
        """Emit a stage-start event to the structured logger."""

        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage_name)

    def _on_stage_complete(self, stage_name: str, **context: object) -> None:
        """Emit a stage-complete event to the structured logger."""

        if self._run_logger is not None:
            self._run_logger.log_stage_complete(stage_name, **context)

    def _on_stage_failure(self, stage_name: str, exc: Exception) -> None:
        """Emit a stage-failure event with sanitized exception metadata."""

        if self._run_logger is not None:
            self._run_logger.log_stage_failure(stage_name, type(exc).__name__)

    def _on_stage_detail(self, stage_name: str, event: str, **context: object) -> None:
        """Emit a debug detail event inside a running stage."""

        if self._run_logger is not None:
            self._run_logger.log_detail(stage_name, event, **context)

    def _run_stage(
        self,
        stage_name: str,
        action: Callable[[], _StageResult],
        count_key: str | None = None,
    ) -> _StageResult:
        """Run one named stage and emit start/complete/failure telemetry events.

        When `count_key` is given and the result is sized, its length is
        attached to the completion event under that key.
        """

        self._on_stage_start(stage_name)
        try:
            result = action()
        except Exception as exc:
            self._on_stage_failure(stage_name, exc)
            raise
        context: dict[str, object] = {}
        if count_key is not None and isinstance(result, Sized):
            context[count_key] = len(result)
        self._on_stage_complete(stage_name, **context)
        return result
