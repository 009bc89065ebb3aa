"""Domain exceptions for segmentation and CLI diagnostics."""

from __future__ import annotations


class SegmentationError(RuntimeError):
    """Raised when a specific segmentation stage fails."""

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped segmentation error."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.hint = hint


class EmptyInputError(SegmentationError, ValueError):
    """Raised when input text yields no speakable chunk."""


class InvalidChunkSizeError(SegmentationError, ValueError):
    """Raised when the maximum chunk size is not a positive integer."""

    def __init__(self, max_size: object) -> None:
        """Initialize with the rejected maximum size value."""

        super().__init__(
            stage="config",
            detail=f"Maximum chunk size must be a positive integer, got `{max_size}`.",
            hint="Pass a value of 1 or more via `--max-size` or `max_chunk_size`.",
        )
        self.max_size = max_size


def require_positive_size(max_size: object) -> int:
    """Return `max_size` when it is a positive integer, otherwise raise.

    Raises:
        InvalidChunkSizeError: If `max_size` is not a positive `int`.
    """

    if isinstance(max_size, bool) or not isinstance(max_size, int) or max_size <= 0:
        raise InvalidChunkSizeError(max_size)
    return max_size
