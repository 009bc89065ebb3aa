"""Structured run logging utilities.

Responsibilities:
- Emit concise, deterministic stage-level segmentation logs through `loguru`.
- Never log text payloads; only stage names, counts and error types.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class RunLogger:
    """Emit deterministic stage logs for segmentation activity."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Initialize logger sink and configure deterministic formatting.

        Args:
            sink: Text stream receiving log lines, `sys.stderr` by default.
            level: Minimum `loguru` level to emit.
        """

        self._sink = sink or sys.stderr
        self.level = level.upper()
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level=self.level, colorize=False)

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured runtime log line."""

        line = f"[segment] level={level} stage={stage} event={event}{_format_context(context)}"
        _loguru_logger.log(level, line)

    def log_stage_start(self, stage: str) -> None:
        """Emit a stage-start runtime event."""

        self._emit("INFO", "start", stage)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        """Emit a stage-complete runtime event with optional count metadata."""

        self._emit("INFO", "complete", stage, **context)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage-failure runtime event without text payload details."""

        self._emit("ERROR", "failure", stage, error_type=error_type)

    def log_detail(self, stage: str, event: str, **context: object) -> None:
        """Emit a debug-level detail event inside a stage."""

        self._emit("DEBUG", event, stage, **context)
