"""Unit tests for deterministic structured run logging."""

from __future__ import annotations

import io

from speechsplit.telemetry.logger import RunLogger


def test_run_logger_formats_events_with_sorted_sanitized_context() -> None:
    """Context keys should be sorted and unsafe characters replaced."""

    sink = io.StringIO()
    logger = RunLogger(sink=sink)

    logger.log_stage_start("tokenize")
    logger.log_stage_complete("tokenize", tokens=7, note="two words")

    assert sink.getvalue().splitlines() == [
        "[segment] level=INFO stage=tokenize event=start",
        "[segment] level=INFO stage=tokenize event=complete note=two_words tokens=7",
    ]


def test_run_logger_filters_debug_details_below_level() -> None:
    """Debug detail events should only appear when the level allows them."""

    info_sink = io.StringIO()
    RunLogger(sink=info_sink).log_detail("preprocess", "pre-processing", name="word_sub")
    debug_sink = io.StringIO()
    RunLogger(sink=debug_sink, level="debug").log_detail(
        "preprocess", "pre-processing", name="word_sub"
    )

    assert info_sink.getvalue() == ""
    assert debug_sink.getvalue() == (
        "[segment] level=DEBUG stage=preprocess event=pre-processing name=word_sub\n"
    )


def test_run_logger_failure_event_reports_error_type_only() -> None:
    """Failure events should carry the exception type and a blank-safe value."""

    sink = io.StringIO()
    logger = RunLogger(sink=sink)

    logger.log_stage_failure("finalize", "EmptyInputError")
    logger.log_stage_failure("finalize", " ")

    assert sink.getvalue().splitlines() == [
        "[segment] level=ERROR stage=finalize event=failure error_type=EmptyInputError",
        "[segment] level=ERROR stage=finalize event=failure error_type=none",
    ]
