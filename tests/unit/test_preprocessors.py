"""Unit tests for text pre-processing stages and their pipeline."""

from __future__ import annotations

import pytest

from speechsplit.text.preprocessors import (
    DEFAULT_PRE_PROCESSORS,
    AbbreviationPeriodRemoval,
    EndOfLineHyphenJoin,
    PreProcessorPipeline,
    ToneMarkSpacing,
    WordSubstitution,
    build_pre_processors,
)
from speechsplit.text.symbols import SymbolTable


def test_tone_mark_spacing_inserts_space_after_unspaced_marks() -> None:
    """A tone mark directly followed by text should get a space."""

    assert ToneMarkSpacing().apply("Hi!How are you?Fine") == "Hi! How are you? Fine"


def test_tone_mark_spacing_keeps_existing_whitespace() -> None:
    """Marks already followed by whitespace should be left untouched."""

    assert ToneMarkSpacing().apply("Hi! There?\nYes") == "Hi! There?\nYes"


def test_tone_mark_spacing_handles_consecutive_and_fullwidth_marks() -> None:
    """Each mark in a run, including full-width ones, should be spaced."""

    assert ToneMarkSpacing().apply("Really?!") == "Really? ! "
    assert ToneMarkSpacing().apply("本当？はい") == "本当？ はい"


def test_end_of_line_rejoins_hyphenated_words() -> None:
    """Hyphen + newline should be removed to re-form the word."""

    assert EndOfLineHyphenJoin().apply("won-\nderful") == "wonderful"
    assert EndOfLineHyphenJoin().apply("well-known\nfact") == "well-known\nfact"


def test_abbreviation_period_removal_strips_period_after_known_roots() -> None:
    """Known abbreviation roots should lose their trailing period, any case."""

    stage = AbbreviationPeriodRemoval()

    assert stage.apply("Dr. Smith went home.") == "Dr Smith went home."
    assert stage.apply("MRS. Jones and Prof. X") == "MRS Jones and Prof X"


def test_abbreviation_period_removal_uses_configured_roots() -> None:
    """Custom symbol tables should drive which periods are removed."""

    stage = AbbreviationPeriodRemoval(SymbolTable(abbreviations=("approx",)))

    assert stage.apply("Approx. 5 and Dr. Who") == "Approx 5 and Dr. Who"


def test_word_substitution_stage_expands_abbreviated_forms() -> None:
    """The default table should expand `Esq.`."""

    assert WordSubstitution().apply("John Doe Esq. signed") == "John Doe Esquire signed"


def test_default_pipeline_runs_stages_in_order() -> None:
    """Default stages should apply tone marks, hyphen join, abbreviations, word sub."""

    pipeline = PreProcessorPipeline()

    assert [stage.name for stage in pipeline.stages] == list(DEFAULT_PRE_PROCESSORS)
    assert pipeline.apply("Dr. Who?Yes-\nterday, Esq.") == "Dr Who? Yesterday, Esquire"


def test_pipeline_accepts_plain_callables_as_stages() -> None:
    """Bare `str -> str` callables should be wrapped and named after the function."""

    pipeline = PreProcessorPipeline([str.upper, EndOfLineHyphenJoin()])

    assert [stage.name for stage in pipeline.stages] == ["upper", "end_of_line"]
    assert pipeline.apply("a-\nb") == "AB"


def test_build_pre_processors_rejects_unknown_names() -> None:
    """Unknown stage names should fail with the list of known names."""

    with pytest.raises(ValueError, match="Unknown pre-processor `nope`"):
        build_pre_processors(["tone_marks", "nope"])


def test_abbreviation_period_removal_with_no_roots_keeps_text() -> None:
    """An empty abbreviation list should disable period removal."""

    stage = AbbreviationPeriodRemoval(SymbolTable(abbreviations=()))

    assert stage.apply("Dr. Who and Mr. X") == "Dr. Who and Mr. X"
