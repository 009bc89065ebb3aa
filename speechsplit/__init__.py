"""Top-level package for speechsplit.

This package converts arbitrary-length text into an ordered list of bounded
chunks for speech-synthesis backends with a per-request character limit. The
main entry point is `SegmentationPipeline`.
"""

from .config import SegmenterConfig
from .errors import EmptyInputError, InvalidChunkSizeError, SegmentationError
from .pipeline import SegmentationPipeline, segment

__all__ = [
    "EmptyInputError",
    "InvalidChunkSizeError",
    "SegmentationError",
    "SegmentationPipeline",
    "SegmenterConfig",
    "__version__",
    "segment",
]

__version__ = "0.1.0"
