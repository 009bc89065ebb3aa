"""Shared typed data models for speechsplit."""

from .datatypes import SegmentationReport

__all__ = ["SegmentationReport"]
