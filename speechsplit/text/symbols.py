"""Static symbol tables used by pre-processors, split rules and cleaners.

Responsibilities:
- Hold the default abbreviation roots, substitution pairs and punctuation sets.
- Bundle them into an immutable `SymbolTable` passed explicitly to components.
"""

from __future__ import annotations

from dataclasses import dataclass


ABBREVIATIONS: tuple[str, ...] = (
    "dr",
    "jr",
    "mr",
    "mrs",
    "ms",
    "msgr",
    "prof",
    "sr",
    "st",
)

SUB_PAIRS: tuple[tuple[str, str], ...] = (("Esq.", "Esquire"),)

ALL_PUNC = "?!？！.,¡()[]¿…‥،;:—。，、：\n"

TONE_MARKS = "?!？！"

PERIOD_COMMA = ".,"

COLON = ":"


@dataclass(frozen=True, slots=True)
class SymbolTable:
    """Trigger sets consumed by the segmentation components.

    Attributes:
        abbreviations: Abbreviation roots whose trailing period is removed.
        sub_pairs: Ordered literal `(find, replace)` substitution pairs.
        all_punc: Full punctuation set used for punctuation-only filtering.
        tone_marks: Tone-modifying punctuation marks.
        period_comma: Period and comma characters.
        colon: Colon character(s).
    """

    abbreviations: tuple[str, ...] = ABBREVIATIONS
    sub_pairs: tuple[tuple[str, str], ...] = SUB_PAIRS
    all_punc: str = ALL_PUNC
    tone_marks: str = TONE_MARKS
    period_comma: str = PERIOD_COMMA
    colon: str = COLON

    def other_punctuation(self) -> tuple[str, ...]:
        """Return punctuation not claimed by tone marks, period/comma or colon.

        Characters keep the order of `all_punc`; duplicates are dropped.
        """

        claimed = set(self.tone_marks) | set(self.period_comma) | set(self.colon)
        remaining: list[str] = []
        for character in self.all_punc:
            if character in claimed or character in remaining:
                continue
            remaining.append(character)
        return tuple(remaining)


DEFAULT_SYMBOLS = SymbolTable()
