"""Splitting normalized path text into name segments and back."""

from __future__ import annotations

import re
from collections.abc import Sequence

from pathalg.algebra.prefix import DOT, SLASH, classify, drive_label_present, is_separator
from pathalg.util.invariants import ensure

_SPLIT_PATTERN = re.compile(r"[\\/]")


def split(normalized: str, prefix_length: int) -> list[str]:
    """Split `normalized` into its segments.

    The prefix substring comes first when `prefix_length > 0`, e.g.
    `C:\\foo\\bar` gives `["C:\\", "foo", "bar"]`. Empty and `.` pieces are
    skipped.
    """

    ensure(
        0 <= prefix_length <= len(normalized),
        f"prefix length out of range for {normalized!r}",
    )
    segments = [
        piece
        for piece in _SPLIT_PATTERN.split(normalized[prefix_length:])
        if piece and piece != DOT
    ]
    if prefix_length > 0:
        segments.insert(0, normalized[:prefix_length])
    return segments


def join_segments(segments: Sequence[str], separator: str = SLASH) -> str:
    """Rebuild path text from `split` output.

    A leading prefix segment is attached without an extra separator. An empty
    sequence gives the current-directory symbol.
    """

    if not segments:
        return DOT

    first = segments[0]
    info = classify(first)
    if info.prefix_length and info.prefix_length == len(first):
        return first + separator.join(segments[1:])
    return separator.join(segments)


def name_of(text: str) -> str:
    """Return the last name of `text`, ignoring trailing separators.

    Roots and bare drive labels have no name and give an empty string.
    """

    info = classify(text)
    if info.is_root:
        return ""

    end = len(text)
    while end > info.prefix_length and is_separator(text[end - 1]):
        end -= 1
    start = end
    while start > info.prefix_length and not is_separator(text[start - 1]):
        start -= 1
    if start == end and drive_label_present(text):
        return ""
    return text[start:end]


__all__ = ["join_segments", "name_of", "split"]
