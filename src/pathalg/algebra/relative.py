"""Relative path computation between two path texts."""

from __future__ import annotations

import logging

from pathalg.algebra.normalize import normalize
from pathalg.algebra.prefix import BACKSLASH, DOT, SLASH, TWO_DOT, classify, separator_flavour
from pathalg.algebra.segments import split

LOGGER = logging.getLogger(__name__)


def _prefix_key(prefix: str | None) -> str | None:
    if prefix is None:
        return None
    return prefix.replace(BACKSLASH, SLASH).casefold()


def relative_to(
    source_normalized: str,
    source_prefix_length: int,
    target: str,
    *,
    home: str | None = None,
    separator: str | None = None,
) -> str:
    """Return the shortest relative path leading from the source to `target`.

    `/data/system/bin` to `/home` gives `../../../home`; `/data` to
    `/data/system/bin` gives `system/bin`. Paths on different roots cannot be
    bridged, so `target` comes back unchanged.
    """

    if source_normalized == target:
        return DOT

    target_info = classify(target)
    target_normalized = normalize(
        target,
        target_info.has_root,
        target_info.prefix_length,
        home=home,
        separator=separator,
    )
    if target_normalized == source_normalized:
        return DOT
    # Home expansion may have replaced the prefix.
    target_prefix_length = classify(target_normalized).prefix_length

    source_segments = split(source_normalized, source_prefix_length)
    target_segments = split(target_normalized, target_prefix_length)
    source_prefix = source_segments.pop(0) if source_prefix_length > 0 else None
    target_prefix = target_segments.pop(0) if target_prefix_length > 0 else None

    if _prefix_key(source_prefix) != _prefix_key(target_prefix):
        LOGGER.debug("No common root between %r and %r", source_normalized, target)
        return target

    common = 0
    for source_segment, target_segment in zip(source_segments, target_segments):
        if source_segment != target_segment:
            break
        common += 1

    parts = [TWO_DOT] * (len(source_segments) - common) + target_segments[common:]
    if not parts:
        return DOT
    flavour = separator or separator_flavour(source_normalized, default=separator_flavour(target))
    return flavour.join(parts)


__all__ = ["relative_to"]
