"""Regex substitution processors.

Responsibilities:
- Apply one compiled matcher with a fixed literal replacement, globally.
- Compose ordered literal find/replace pairs as sequential substitutions.
"""

from __future__ import annotations

from collections.abc import Iterable
import re

from .patterns import LITERAL, PatternBuilder, PatternTemplate


class SubstitutionProcessor:
    """Replace every non-overlapping match of a matcher with a fixed string."""

    def __init__(self, regex: re.Pattern[str], replacement: str) -> None:
        """Initialize with a compiled matcher and literal replacement text."""

        self.regex = regex
        self.replacement = replacement

    @classmethod
    def from_triggers(
        cls,
        triggers: str | Iterable[str],
        template: PatternTemplate,
        replacement: str,
        flags: int = 0,
    ) -> SubstitutionProcessor:
        """Build a processor whose matcher comes from a `PatternBuilder`."""

        return cls(PatternBuilder(triggers, template, flags).regex, replacement)

    def apply(self, text: str) -> str:
        """Return `text` with all matches replaced.

        The replacement is inserted verbatim; backslashes and group references
        in it are not expanded.
        """

        replacement = self.replacement
        return self.regex.sub(lambda _match: replacement, text)


class WordSubstitutionProcessor:
    """Apply ordered literal `(find, replace)` pairs one after another.

    Each pair sees the output of the previous one, so a replacement may be
    matched again by a later pair.
    """

    def __init__(self, sub_pairs: Iterable[tuple[str, str]], ignore_case: bool = True) -> None:
        """Initialize one substitution processor per pair.

        Args:
            sub_pairs: Ordered `(find, replace)` literal pairs.
            ignore_case: Match `find` strings case-insensitively.
        """

        flags = re.IGNORECASE if ignore_case else 0
        self.processors = [
            SubstitutionProcessor.from_triggers(find, LITERAL, replace, flags)
            for find, replace in sub_pairs
        ]

    def apply(self, text: str) -> str:
        """Run every substitution in order."""

        for processor in self.processors:
            text = processor.apply(text)
        return text
