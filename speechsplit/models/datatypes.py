"""Core datatypes shared across speechsplit modules.

Key types:
- `SegmentationReport`: chunks plus diagnostics from one segmentation run.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class SegmentationReport:
    """Structured output of one segmentation run.

    Attributes:
        chunks: Ordered chunks, each non-empty and within the size limit.
        preprocessed_text: Text after trimming and pre-processing.
        fast_path: Whether the text fit in one chunk and skipped tokenizing.
        token_count: Raw tokens produced by the tokenizer (0 on the fast path).
        max_chunk_size: Size limit the chunks were produced for.
    """

    chunks: tuple[str, ...]
    preprocessed_text: str
    fast_path: bool
    token_count: int
    max_chunk_size: int
