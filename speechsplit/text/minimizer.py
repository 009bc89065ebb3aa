"""Bounded-size splitting of over-long tokens.

Responsibilities:
- Cut a token into pieces no longer than a maximum size.
- Prefer the right-most soft delimiter inside the size window.
"""

from __future__ import annotations

from ..errors import require_positive_size


def minimize(token: str, delimiter: str = " ", max_size: int = 100) -> list[str]:
    """Split `token` into the largest pieces that fit in `max_size`.

    Each step cuts at the right-most `delimiter` within the first `max_size`
    characters of the remaining text. When the window holds no delimiter the
    text is cut at exactly `max_size` characters. One leading delimiter is
    dropped from over-long remainders, so cuts always make progress.

    Args:
        token: Text to split.
        delimiter: Soft delimiter to cut on.
        max_size: Maximum length of every returned piece.

    Returns:
        Ordered non-empty pieces, each at most `max_size` characters long.

    Raises:
        InvalidChunkSizeError: If `max_size` is not a positive integer.
        ValueError: If `delimiter` is empty.
    """

    require_positive_size(max_size)
    if not delimiter:
        raise ValueError("Minimize delimiter must be a non-empty string.")

    pieces: list[str] = []
    remaining = token
    while len(remaining) > max_size:
        if remaining.startswith(delimiter):
            remaining = remaining[len(delimiter) :]
            continue
        index = remaining.rfind(delimiter, 0, max_size)
        if index == -1:
            index = max_size
        pieces.append(remaining[:index])
        remaining = remaining[index:]
    if remaining:
        pieces.append(remaining)
    return pieces
