"""Lexical normalization of path text.

The following steps may occur:

1. Separators are unified to a single flavour.
2. The home symbol (`~`) is expanded to an injected home directory.
3. Duplicate separators are removed, a UNC prefix is preserved.
4. Useless single dots (`./`) are removed.
5. Parent symbols (`..`) are resolved where it is legal to do so.

Examples::

    /foo/../bar/../baz    ->  /baz
    //server/foo/..//bar  ->  //server/bar
    /../..                ->  /
    foo/bar/..            ->  foo
    foo/../../bar/        ->  ../bar/
    C:\\..\\..\\bar       ->  C:\\bar
    C:..\\bar             ->  C:..\\bar
"""

from __future__ import annotations

import re

from pathalg.algebra.prefix import (
    DOT,
    SEPARATORS,
    TILDE,
    TWO_DOT,
    PrefixKind,
    classify,
    is_separator,
    separator_flavour,
)
from pathalg.util.invariants import ensure

_SPLIT_PATTERN = re.compile(r"[\\/]")


def _split_pieces(text: str) -> list[str]:
    return _SPLIT_PATTERN.split(text)


def _resolve_pieces(pieces: list[str], *, rooted: bool) -> list[str]:
    """Drop empty and `.` pieces and resolve `..` against the emitted names.

    On a rooted path a `..` that has nothing to climb is discarded. On an
    unrooted path it is kept, so `../foo` keeps its meaning.
    """

    stack: list[str] = []
    for piece in pieces:
        if not piece or piece == DOT:
            continue
        if piece == TWO_DOT:
            if stack and stack[-1] != TWO_DOT:
                stack.pop()
            elif not rooted:
                stack.append(piece)
            continue
        stack.append(piece)

    if rooted:
        ensure(TWO_DOT not in stack, "rooted segments must not contain '..'")
    return stack


def _build(segments: list[str], separator: str, *, trailing: bool) -> str:
    body = separator.join(segments)
    if trailing and segments:
        body += separator
    return body


def _expand_home(
    text: str,
    prefix_length: int,
    home: str,
    separator: str | None,
    *,
    trailing: bool,
) -> str:
    flavour = separator or separator_flavour(home)
    tail = _resolve_pieces(_split_pieces(text[prefix_length:]), rooted=True)
    if not tail:
        return home

    base = home
    while len(base) > 1 and is_separator(base[-1]) and not classify(base).is_root:
        base = base[:-1]
    if not is_separator(base[-1]):
        base += flavour
    return base + _build(tail, flavour, trailing=trailing)


def normalize(
    text: str,
    has_root: bool,
    prefix_length: int,
    is_directory: bool = False,
    *,
    home: str | None = None,
    separator: str | None = None,
) -> str:
    """Return the normalized form of `text`.

    `has_root` and `prefix_length` come from `classify`. A trailing separator
    is kept when `text` ends with one or `is_directory` is set. `home`
    replaces a leading `~`; without it the `~` prefix is kept literally.
    """

    ensure(0 <= prefix_length <= len(text), f"prefix length out of range for {text!r}")

    if (
        not text
        or (len(text) == 1 and is_separator(text))
        or not any(char in SEPARATORS or char == DOT or char == TILDE for char in text)
    ):
        return text

    flavour = separator or separator_flavour(text)

    if all(char in SEPARATORS for char in text):
        return flavour

    trailing = is_directory or is_separator(text[-1])
    kind = classify(text).kind

    if home and kind.is_home:
        if len(text) <= 2:
            return home
        return _expand_home(text, prefix_length, home, separator, trailing=trailing)

    segments = _resolve_pieces(_split_pieces(text[prefix_length:]), rooted=has_root)
    if not segments and kind is PrefixKind.UNC_ROOT:
        # `//server/..` leaves only separators behind.
        return flavour
    result = text[:prefix_length] + _build(segments, flavour, trailing=trailing)
    if not result:
        return DOT
    if prefix_length == 0 and classify(result).prefix_length > 0:
        # `x/../C:\foo` must not turn into a drive path.
        return DOT + flavour + result
    return result


def normalize_text(
    text: str,
    *,
    is_directory: bool = False,
    home: str | None = None,
    separator: str | None = None,
) -> str:
    """Classify `text` and normalize it in one step."""

    info = classify(text)
    return normalize(
        text,
        info.has_root,
        info.prefix_length,
        is_directory,
        home=home,
        separator=separator,
    )


__all__ = ["normalize", "normalize_text"]
