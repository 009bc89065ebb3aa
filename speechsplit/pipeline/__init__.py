"""Segmentation pipeline package.

This package contains the orchestration facade and its stage telemetry helpers.
"""

from .orchestrator import SegmentationPipeline, segment

__all__ = ["SegmentationPipeline", "segment"]
