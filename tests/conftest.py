"""Shared pytest fixtures for the full speechsplit test suite."""

from __future__ import annotations

import pytest

from speechsplit.config import SegmenterConfig
from speechsplit.pipeline import SegmentationPipeline


@pytest.fixture
def multi_sentence_text() -> str:
    """Provide a short paragraph longer than 40 characters with mixed punctuation."""

    return (
        "Hello there, my friend. This is a test of the segmenter! "
        "Does it work? Yes: it does."
    )


@pytest.fixture
def small_pipeline() -> SegmentationPipeline:
    """Provide a default pipeline with a 40-character chunk limit."""

    return SegmentationPipeline(SegmenterConfig(max_chunk_size=40))
