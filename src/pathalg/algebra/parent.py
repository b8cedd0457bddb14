"""Lexical parent lookup.

Examples::

    foo/bar       ->  foo
    /foo          ->  /
    /, ../, .     ->  None
    C:            ->  None
    C:\\          ->  None
    C:\\Windows   ->  C:\\
    C:file.txt    ->  C:
    \\\\server    ->  None
    file.txt      ->  None
    foo/../../    ->  foo/../

`..` is never resolved here; use the normalized text for a real parent.
"""

from __future__ import annotations

from pathalg.algebra.prefix import (
    BACKSLASH,
    DOT,
    SLASH,
    TWO_DOT,
    drive_label_present,
    is_separator,
    last_separator_index,
)

_TERMINALS = frozenset((SLASH, BACKSLASH, DOT, TWO_DOT, SLASH + TWO_DOT, BACKSLASH + TWO_DOT))


def resolve_parent(
    text: str,
    *,
    has_no_separator: bool,
    has_drive_label: bool,
    last_separator_index: int,
) -> str | None:
    """Return the parent of `text` from precomputed separator facts, or None."""

    if not text or text in _TERMINALS:
        return None

    if last_separator_index == 2 and has_drive_label:
        # `C:\` has no parent, `C:\Windows` keeps the separator.
        return None if len(text) == 3 else text[:3]
    if has_no_separator and has_drive_label:
        # `C:` has no parent, `C:file.txt` is relative to drive C.
        return None if len(text) == 2 else text[:2]
    if has_no_separator:
        return None
    if last_separator_index == 1 and is_separator(text[0]):
        # UNC share root such as `\\server`.
        return None
    if last_separator_index == 0:
        return text[:1]
    return text[:last_separator_index]


def parent(text: str) -> str | None:
    """Return the lexical parent of `text`, or None when it has none.

    Trailing separators are ignored while looking for the parent and are
    carried over to it.
    """

    if text and all(is_separator(char) for char in text):
        return None

    core = text
    while len(core) > 1 and is_separator(core[-1]):
        core = core[:-1]
    # Keep the separator of a drive root such as `C:\`.
    if len(core) == 2 and drive_label_present(core) and len(text) > 2:
        core = text[:3]

    result = resolve_parent(
        core,
        has_no_separator=last_separator_index(core) == -1,
        has_drive_label=drive_label_present(core),
        last_separator_index=last_separator_index(core),
    )
    if result is None or core == text:
        return result
    # `C:a/` has the drive-relative parent `C:`, not the drive root `C:/`.
    if len(result) == 2 and drive_label_present(result):
        return result
    if not is_separator(result[-1]):
        result += text[-1]
    return result


__all__ = ["parent", "resolve_parent"]
