"""Telemetry and observability helpers.

This package emits deterministic stage events for segmentation runs.
"""

from .logger import RunLogger

__all__ = ["RunLogger"]
