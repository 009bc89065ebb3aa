"""Text pre-processing stages applied before tokenization.

Responsibilities:
- Normalize text so split rules find reliable boundaries.
- Compose stages into an ordered pipeline selectable by stage name.

Key types:
- `PreProcessor`: protocol for text-to-text stages.
- `PreProcessorPipeline`: runs stages sequentially.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
import re
from typing import Protocol, Union

from .patterns import Condition, PatternTemplate, PositionalCondition
from .substitution import SubstitutionProcessor, WordSubstitutionProcessor
from .symbols import DEFAULT_SYMBOLS, SymbolTable


class PreProcessor(Protocol):
    """Protocol for text pre-processing stages."""

    name: str

    def apply(self, text: str) -> str:
        """Return the transformed text."""


class ToneMarkSpacing:
    """Insert a space after tone-modifying punctuation.

    The tone-mark split rule matches the character following a tone mark, so a
    mark directly followed by a letter (or ending the text) gets a space first.
    """

    name = "tone_marks"

    def __init__(self, symbols: SymbolTable = DEFAULT_SYMBOLS) -> None:
        template = PatternTemplate(
            target="",
            conditions=(
                PositionalCondition(Condition.PRECEDED_BY),
                PositionalCondition(Condition.NOT_FOLLOWED_BY, r"\s"),
            ),
        )
        self._processor = SubstitutionProcessor.from_triggers(
            tuple(symbols.tone_marks), template, " "
        )

    def apply(self, text: str) -> str:
        return self._processor.apply(text)


class EndOfLineHyphenJoin:
    """Re-join words broken across lines by a trailing hyphen."""

    name = "end_of_line"

    def __init__(self, symbols: SymbolTable = DEFAULT_SYMBOLS) -> None:
        _ = symbols
        self._processor = SubstitutionProcessor.from_triggers(
            "-", PatternTemplate(target="{trigger}\\n"), ""
        )

    def apply(self, text: str) -> str:
        return self._processor.apply(text)


class AbbreviationPeriodRemoval:
    """Remove the period following a known abbreviation root.

    `Dr.` becomes `Dr` so the period/comma split rule never treats it as a
    sentence boundary. The period is removed wherever it follows a listed root.
    An empty root list disables the stage.
    """

    name = "abbreviations"

    def __init__(self, symbols: SymbolTable = DEFAULT_SYMBOLS) -> None:
        self._processor: SubstitutionProcessor | None = None
        if symbols.abbreviations:
            template = PatternTemplate(
                target=r"\.",
                conditions=(PositionalCondition(Condition.PRECEDED_BY),),
            )
            self._processor = SubstitutionProcessor.from_triggers(
                symbols.abbreviations, template, "", re.IGNORECASE
            )

    def apply(self, text: str) -> str:
        if self._processor is None:
            return text
        return self._processor.apply(text)


class WordSubstitution:
    """Apply the literal word-for-word substitution table."""

    name = "word_sub"

    def __init__(self, symbols: SymbolTable = DEFAULT_SYMBOLS) -> None:
        self._processor = WordSubstitutionProcessor(symbols.sub_pairs)

    def apply(self, text: str) -> str:
        return self._processor.apply(text)


class FunctionPreProcessor:
    """Adapt a plain `str -> str` callable to the `PreProcessor` protocol."""

    def __init__(self, func: Callable[[str], str], name: str | None = None) -> None:
        self._func = func
        self.name = name or getattr(func, "__name__", type(func).__name__)

    def apply(self, text: str) -> str:
        return self._func(text)


PreProcessorLike = Union[PreProcessor, Callable[[str], str]]

PRE_PROCESSOR_FACTORIES: dict[str, Callable[[SymbolTable], PreProcessor]] = {
    ToneMarkSpacing.name: ToneMarkSpacing,
    EndOfLineHyphenJoin.name: EndOfLineHyphenJoin,
    AbbreviationPeriodRemoval.name: AbbreviationPeriodRemoval,
    WordSubstitution.name: WordSubstitution,
}

DEFAULT_PRE_PROCESSORS: tuple[str, ...] = (
    ToneMarkSpacing.name,
    EndOfLineHyphenJoin.name,
    AbbreviationPeriodRemoval.name,
    WordSubstitution.name,
)


def build_pre_processors(
    names: Iterable[str] = DEFAULT_PRE_PROCESSORS,
    symbols: SymbolTable = DEFAULT_SYMBOLS,
) -> list[PreProcessor]:
    """Instantiate registered pre-processors by name, preserving order.

    Raises:
        ValueError: If a name is not registered.
    """

    stages: list[PreProcessor] = []
    for name in names:
        factory = PRE_PROCESSOR_FACTORIES.get(name)
        if factory is None:
            known = ", ".join(sorted(PRE_PROCESSOR_FACTORIES))
            raise ValueError(f"Unknown pre-processor `{name}`. Expected one of: {known}.")
        stages.append(factory(symbols))
    return stages


def _as_pre_processor(stage: PreProcessorLike) -> PreProcessor:
    """Return `stage` as a protocol object, wrapping bare callables."""

    if hasattr(stage, "apply"):
        return stage  # type: ignore[return-value]
    return FunctionPreProcessor(stage)  # type: ignore[arg-type]


class PreProcessorPipeline:
    """Run pre-processing stages sequentially, each on the previous output."""

    def __init__(self, stages: Sequence[PreProcessorLike] | None = None) -> None:
        """Initialize with custom stages or the default stage sequence."""

        if stages is None:
            stages = build_pre_processors()
        self.stages = [_as_pre_processor(stage) for stage in stages]

    def apply(self, text: str) -> str:
        """Apply all stages in order."""

        for stage in self.stages:
            text = stage.apply(text)
        return text
