"""Lexical sort keys for path values."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from pathalg.services.pure_path import PurePathText

SortKey = Callable[[PurePathText], Any]


def by_name(ignore_case: bool = True) -> SortKey:
    """Sort by last name."""

    def key(path: PurePathText) -> str:
        return path.name.casefold() if ignore_case else path.name

    return key


def by_extension(ignore_case: bool = True) -> SortKey:
    """Sort by extension; paths without one come first."""

    def key(path: PurePathText) -> str:
        return path.extension.casefold() if ignore_case else path.extension

    return key


def hidden_first(path: PurePathText) -> int:
    return 0 if path.is_hidden_name else 1


def sort_paths(
    paths: Iterable[PurePathText], *keys: SortKey, reverse: bool = False
) -> list[PurePathText]:
    """Sort `paths` by `keys` in priority order, falling back to the raw text."""

    def combined(path: PurePathText) -> tuple[Any, ...]:
        return tuple(k(path) for k in keys) + (path.text,)

    return sorted(paths, key=combined, reverse=reverse)


__all__ = ["SortKey", "by_extension", "by_name", "hidden_first", "sort_paths"]
