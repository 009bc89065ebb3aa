"""Segmentation orchestration for speechsplit.

Responsibilities:
- Compose pre-processing, tokenizing, cleaning and minimizing into one
  deterministic transform from raw text to ordered chunks.
- Enforce the chunk-size and non-empty output guarantees.

Key types:
- `SegmentationPipeline`: orchestration facade.
- `SegmentationReport`: chunks plus run diagnostics.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
import re

from ..config import SegmenterConfig
from ..errors import EmptyInputError, require_positive_size
from ..models.datatypes import SegmentationReport
from ..telemetry.logger import RunLogger
from ..text.cleaners import TokenCleaner
from ..text.minimizer import minimize
from ..text.preprocessors import PreProcessorLike, PreProcessorPipeline, build_pre_processors
from ..text.tokenizer import Tokenizer, build_split_rules
from .telemetry import PipelineTelemetryMixin

TokenizerFunc = Callable[[str], list[str]]

MINIMIZE_DELIMITER = " "


class SegmentationPipeline(PipelineTelemetryMixin):
    """Split raw text into ordered chunks no longer than the configured size.

    The pipeline holds only immutable configuration; every call works on
    function-local values, so one instance may serve concurrent callers.
    """

    def __init__(
        self,
        config: SegmenterConfig | None = None,
        pre_processors: Sequence[PreProcessorLike] | None = None,
        tokenizer: TokenizerFunc | None = None,
        run_logger: RunLogger | None = None,
    ) -> None:
        """Initialize components from configuration and optional overrides.

        Args:
            config: Segmentation settings; defaults to `SegmenterConfig()`.
            pre_processors: Custom ordered stages replacing the configured ones.
                Bare `str -> str` callables are accepted.
            tokenizer: Custom `str -> list[str]` tokenizer replacing the
                configured split rules.
            run_logger: Optional structured logger for stage events.

        Raises:
            InvalidChunkSizeError: If the configured maximum size is not positive.
            ValueError: If the configuration names unknown stages or rules.
        """

        self.config = config if config is not None else SegmenterConfig()
        require_positive_size(self.config.max_chunk_size)
        self.config.validate()
        self._run_logger = run_logger

        symbols = self.config.symbol_table()
        if pre_processors is None:
            pre_processors = build_pre_processors(self.config.pre_processors, symbols)
        self.pre_processors = PreProcessorPipeline(pre_processors)
        if tokenizer is None:
            flags = re.IGNORECASE if self.config.ignore_case else 0
            tokenizer = Tokenizer(build_split_rules(self.config.split_rules, symbols), flags)
        self.tokenizer = tokenizer
        self.cleaner = TokenCleaner(symbols.all_punc)

    def preprocess(self, text: str) -> str:
        """Trim `text` and run every pre-processing stage in order."""

        text = text.strip()
        for stage in self.pre_processors.stages:
            self._on_stage_detail("preprocess", "pre-processing", name=stage.name)
            text = stage.apply(text)
        return text

    def segment(self, text: str, max_chunk_size: int | None = None) -> list[str]:
        """Return ordered chunks for `text`.

        Raises:
            EmptyInputError: If no speakable chunk remains.
            InvalidChunkSizeError: If `max_chunk_size` is not positive.
        """

        return list(self.segment_with_report(text, max_chunk_size).chunks)

    def segment_with_report(
        self, text: str, max_chunk_size: int | None = None
    ) -> SegmentationReport:
        """Segment `text` and return chunks with run diagnostics.

        Args:
            text: Raw input text.
            max_chunk_size: Optional per-call override of the configured size.

        Returns:
            Report whose chunks are non-empty, not punctuation-only, and at
            most `max_chunk_size` characters long, in source order.

        Raises:
            EmptyInputError: If the trimmed text is empty or cleaning leaves
                no chunk.
            InvalidChunkSizeError: If the effective maximum size is not positive.
        """

        max_size = require_positive_size(
            self.config.max_chunk_size if max_chunk_size is None else max_chunk_size
        )
        if not text.strip():
            raise EmptyInputError(
                stage="input",
                detail="No text to segment.",
                hint="Provide non-blank text.",
            )

        preprocessed = self._run_stage("preprocess", lambda: self.preprocess(text))

        if len(preprocessed) <= max_size:
            self._on_stage_detail("preprocess", "fast_path", length=len(preprocessed))
            chunks = self._run_stage(
                "finalize", lambda: self._finalize([preprocessed]), count_key="chunks"
            )
            return SegmentationReport(
                chunks=tuple(chunks),
                preprocessed_text=preprocessed,
                fast_path=True,
                token_count=0,
                max_chunk_size=max_size,
            )

        tokens = self._run_stage(
            "tokenize", lambda: self.tokenizer(preprocessed), count_key="tokens"
        )
        cleaned = self._run_stage("clean", lambda: self.cleaner.clean(tokens), count_key="tokens")
        minimized = self._run_stage(
            "minimize",
            lambda: [
                piece
                for token in cleaned
                for piece in minimize(token, MINIMIZE_DELIMITER, max_size)
            ],
            count_key="pieces",
        )
        chunks = self._run_stage("finalize", lambda: self._finalize(minimized), count_key="chunks")
        return SegmentationReport(
            chunks=tuple(chunks),
            preprocessed_text=preprocessed,
            fast_path=False,
            token_count=len(tokens),
            max_chunk_size=max_size,
        )

    def _finalize(self, pieces: list[str]) -> list[str]:
        """Clean the final pieces and reject an empty result."""

        chunks = self.cleaner.clean(pieces)
        if not chunks:
            raise EmptyInputError(
                stage="finalize",
                detail="Text contains only whitespace or punctuation; nothing to speak.",
                hint="Provide text with at least one word or number.",
            )
        return chunks


def segment(
    text: str,
    max_chunk_size: int = 100,
    run_logger: RunLogger | None = None,
) -> list[str]:
    """Segment `text` with the default configuration and `max_chunk_size`."""

    pipeline = SegmentationPipeline(
        SegmenterConfig(max_chunk_size=max_chunk_size),
        run_logger=run_logger,
    )
    return pipeline.segment(text)
