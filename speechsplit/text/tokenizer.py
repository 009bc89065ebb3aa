"""Rule-based tokenizer that keeps matched delimiters as tokens.

Responsibilities:
- Provide the default split rules (tone marks, period/comma, colon, other).
- Join rule patterns into one capturing alternation and split text on it.

Key types:
- `SplitRule`: named compiled matcher consumed by `Tokenizer`.
- `Tokenizer`: splits text into ordered tokens.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
import re

from .patterns import (
    ANY_CHARACTER,
    Condition,
    PatternBuilder,
    PatternTemplate,
    PositionalCondition,
)
from .symbols import DEFAULT_SYMBOLS, SymbolTable


@dataclass(frozen=True, slots=True)
class SplitRule:
    """A named matcher deciding where tokens begin and end.

    Attributes:
        name: Stable rule identifier used by configuration.
        regex: Compiled matcher; its matched span becomes a token.
    """

    name: str
    regex: re.Pattern[str]


def tone_marks(symbols: SymbolTable = DEFAULT_SYMBOLS) -> SplitRule:
    """Match the character right after a tone-modifying punctuation mark.

    Relies on the tone-mark pre-processor to guarantee such a character exists.
    """

    template = PatternTemplate(
        target=ANY_CHARACTER,
        conditions=(PositionalCondition(Condition.PRECEDED_BY),),
    )
    return SplitRule("tone_marks", PatternBuilder(tuple(symbols.tone_marks), template).regex)


def period_comma(symbols: SymbolTable = DEFAULT_SYMBOLS) -> SplitRule:
    """Match a period or comma followed by a space.

    Not after `.<letter>`, so dotted abbreviations and numbers are kept whole.
    The following space is not part of the match.
    """

    template = PatternTemplate(
        conditions=(
            PositionalCondition(Condition.NOT_PRECEDED_BY, r"\.[a-z]"),
            PositionalCondition(Condition.FOLLOWED_BY, " "),
        ),
    )
    return SplitRule("period_comma", PatternBuilder(tuple(symbols.period_comma), template).regex)


def colon(symbols: SymbolTable = DEFAULT_SYMBOLS) -> SplitRule:
    """Match a colon not preceded by a digit, keeping times like 10:01 whole."""

    template = PatternTemplate(
        conditions=(PositionalCondition(Condition.NOT_PRECEDED_BY, r"\d"),),
    )
    return SplitRule("colon", PatternBuilder(tuple(symbols.colon), template).regex)


def other_punctuation(symbols: SymbolTable = DEFAULT_SYMBOLS) -> SplitRule:
    """Match remaining punctuation that naturally inserts a pause in speech."""

    return SplitRule("other_punctuation", PatternBuilder(symbols.other_punctuation()).regex)


SPLIT_RULE_FACTORIES: dict[str, Callable[[SymbolTable], SplitRule]] = {
    "tone_marks": tone_marks,
    "period_comma": period_comma,
    "colon": colon,
    "other_punctuation": other_punctuation,
}

DEFAULT_SPLIT_RULES: tuple[str, ...] = (
    "tone_marks",
    "period_comma",
    "colon",
    "other_punctuation",
)


def build_split_rules(
    names: Iterable[str] = DEFAULT_SPLIT_RULES,
    symbols: SymbolTable = DEFAULT_SYMBOLS,
) -> list[SplitRule]:
    """Instantiate registered split rules by name, preserving priority order.

    Raises:
        ValueError: If a name is not registered.
    """

    rules: list[SplitRule] = []
    for name in names:
        factory = SPLIT_RULE_FACTORIES.get(name)
        if factory is None:
            known = ", ".join(sorted(SPLIT_RULE_FACTORIES))
            raise ValueError(f"Unknown split rule `{name}`. Expected one of: {known}.")
        rules.append(factory(symbols))
    return rules


class Tokenizer:
    """Split text on the union of ordered split rules.

    Every rule pattern is wrapped in a capturing group so matched delimiters
    are returned as tokens alongside the text between them. Earlier rules win
    ties at the same position.
    """

    def __init__(
        self,
        rules: Sequence[SplitRule] | None = None,
        flags: int = re.IGNORECASE,
    ) -> None:
        """Initialize with custom rules or the default rule sequence.

        Raises:
            ValueError: If the rule list is empty.
        """

        self.rules = list(rules) if rules is not None else build_split_rules()
        if not self.rules:
            raise ValueError("Tokenizer requires at least one split rule.")
        self.flags = flags
        self.regex = re.compile(
            "|".join(f"({rule.regex.pattern})" for rule in self.rules),
            flags,
        )

    def run(self, text: str) -> list[str]:
        """Tokenize `text` into delimiter and non-delimiter tokens, in order."""

        return [token for token in self.regex.split(text) if token]

    def __call__(self, text: str) -> list[str]:
        return self.run(text)
