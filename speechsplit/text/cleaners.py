"""Token cleanup rules.

Responsibilities:
- Trim tokens and drop those made only of punctuation and whitespace.
"""

from __future__ import annotations

from collections.abc import Iterable
import re

from .symbols import ALL_PUNC


class TokenCleaner:
    """Strip tokens and discard empty or punctuation-only ones."""

    def __init__(self, punctuation: str = ALL_PUNC) -> None:
        """Initialize with the punctuation set treated as non-speakable."""

        self.punctuation = punctuation
        self._punctuation_only = re.compile(rf"[{re.escape(punctuation)}\s]*")

    def is_speakable(self, token: str) -> bool:
        """Return whether a stripped token has content beyond punctuation."""

        return bool(token) and self._punctuation_only.fullmatch(token) is None

    def clean(self, tokens: Iterable[str]) -> list[str]:
        """Return stripped tokens, keeping order and dropping non-speakable ones."""

        stripped = (token.strip() for token in tokens)
        return [token for token in stripped if self.is_speakable(token)]


def clean_tokens(tokens: Iterable[str], punctuation: str = ALL_PUNC) -> list[str]:
    """Clean `tokens` with a `TokenCleaner` for `punctuation`."""

    return TokenCleaner(punctuation).clean(tokens)
