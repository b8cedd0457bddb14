"""Combining path texts: change-directory, join and absolute resolution."""

from __future__ import annotations

from pathalg.algebra.normalize import normalize
from pathalg.algebra.prefix import PrefixKind, classify, is_separator, separator_flavour


def cd(base: str, addition: str, *, separator: str | None = None) -> str:
    """Return the path reached by running `cd addition` from `base`.

    A rooted `addition` replaces `base` entirely. The result is not
    normalized.
    """

    info = classify(addition)
    if info.has_root or info.is_root:
        return addition
    if not base:
        return addition

    base_info = classify(base)
    if is_separator(base[-1]) or (
        base_info.kind is PrefixKind.WINDOWS_DRIVE_RELATIVE and base_info.is_root
    ):
        return base + addition
    flavour = separator or separator_flavour(base, default=separator_flavour(addition))
    return base + flavour + addition


def join(base: str, *parts: str, separator: str | None = None) -> str:
    """Fold `cd` over `parts`; the last rooted part starts the result."""

    joined = base
    for part in parts:
        joined = cd(joined, part, separator=separator)
    return joined


def absolute(
    text: str,
    text_has_root: bool,
    working_directory: str,
    *,
    home: str | None = None,
    separator: str | None = None,
) -> str:
    """Resolve `text` against `working_directory` and normalize the result.

    Rooted text is already absolute and is returned unchanged.
    """

    if text_has_root:
        return text
    combined = cd(working_directory, text, separator=separator)
    info = classify(combined)
    return normalize(
        combined,
        info.has_root,
        info.prefix_length,
        home=home,
        separator=separator,
    )


__all__ = ["absolute", "cd", "join"]
