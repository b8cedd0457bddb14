"""Immutable path value built on the path algebra."""

from __future__ import annotations

import logging
from functools import cached_property, total_ordering
from typing import Optional, Union

from pathalg.algebra.normalize import normalize
from pathalg.algebra.parent import parent as parent_of
from pathalg.algebra.prefix import (
    BACKSLASH,
    DOT,
    SLASH,
    PrefixInfo,
    PrefixKind,
    classify,
    drive_label_present,
)
from pathalg.algebra.relative import relative_to
from pathalg.algebra.resolve import absolute, join
from pathalg.algebra.segments import name_of, split
from pathalg.config.models import PathContext

LOGGER = logging.getLogger(__name__)

PathLike = Union["PurePathText", str]


@total_ordering
class PurePathText:
    """A path string plus the context needed to resolve it.

    Instances never change. Derived values are memoized per instance and stay
    valid for its whole lifetime; renaming yields a new instance.
    """

    def __init__(self, text: str, context: PathContext, *, is_directory: bool = False) -> None:
        object.__setattr__(self, "_text", text)
        object.__setattr__(self, "_context", context)
        object.__setattr__(self, "is_directory", is_directory)

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"PurePathText is immutable: cannot set '{name}'")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"PurePathText is immutable: cannot delete '{name}'")

    def _produce(self, text: str, *, is_directory: bool = False) -> "PurePathText":
        return PurePathText(text, self._context, is_directory=is_directory)

    @property
    def text(self) -> str:
        return self._text

    @property
    def context(self) -> PathContext:
        return self._context

    @cached_property
    def prefix_info(self) -> PrefixInfo:
        return classify(self._text)

    @property
    def kind(self) -> PrefixKind:
        return self.prefix_info.kind

    @property
    def prefix_length(self) -> int:
        return self.prefix_info.prefix_length

    @property
    def has_root(self) -> bool:
        return self.prefix_info.has_root

    @property
    def is_root(self) -> bool:
        return self.prefix_info.is_root

    @property
    def is_absolute(self) -> bool:
        return self.has_root

    @property
    def is_relative(self) -> bool:
        return not self.has_root

    @cached_property
    def normalized(self) -> str:
        """Normalized text, see `pathalg.algebra.normalize`."""
        info = self.prefix_info
        return normalize(
            self._text,
            info.has_root,
            info.prefix_length,
            self.is_directory,
            home=self._context.home,
            separator=self._context.separator,
        )

    @cached_property
    def absolute(self) -> str:
        """Text resolved against the context working directory."""
        return absolute(
            self._text,
            self.has_root,
            self._context.working_directory,
            home=self._context.home,
            separator=self._context.separator,
        )

    @cached_property
    def parent(self) -> Optional["PurePathText"]:
        """Lexical parent, or None. `..` is not resolved."""
        result = parent_of(self._text)
        if result is None:
            return None
        return self._produce(result, is_directory=True)

    @cached_property
    def name(self) -> str:
        return name_of(self._text)

    @property
    def volume_label(self) -> Optional[str]:
        """Drive letter of a Windows path such as `C` for `C:\\Windows`."""
        if drive_label_present(self._text):
            return self._text[0]
        return None

    @property
    def extension(self) -> str:
        """`file.txt` -> `txt`, `.hidden.zip` -> `zip`, `.hidden` -> ``."""
        return self._extension(with_dot=False)

    @property
    def extension_with_dot(self) -> str:
        return self._extension(with_dot=True)

    @property
    def name_without_extension(self) -> str:
        name = self.name
        suffix = self.extension_with_dot
        return name[: len(name) - len(suffix)] if suffix else name

    @property
    def is_hidden_name(self) -> bool:
        """True for dot-files such as `.profile`."""
        name = self.name
        return name.startswith(DOT) and name not in (DOT, "..")

    def _extension(self, *, with_dot: bool) -> str:
        name = self.name
        if name in (DOT, "..") or (name.startswith(DOT) and name.count(DOT) == 1):
            return ""
        index = name.rfind(DOT)
        if index == -1:
            return ""
        return name[index if with_dot else index + 1 :]

    def split(self) -> list[str]:
        """Segments of the normalized text, prefix first."""
        return split(self.normalized, classify(self.normalized).prefix_length)

    def join(self, *parts: PathLike) -> "PurePathText":
        """Join `parts` like successive `cd` commands."""
        return self._produce(
            join(self._text, *(str(part) for part in parts), separator=self._context.separator)
        )

    def __truediv__(self, other: PathLike) -> "PurePathText":
        return self.join(other)

    def join_to_parent(self, *parts: PathLike) -> "PurePathText":
        """Join `parts` onto the parent, or onto the root when there is none."""
        base = self.parent or self._produce(self._context.separator or SLASH)
        return base.join(*parts)

    def relative_to(self, target: PathLike) -> "PurePathText":
        """Path leading from this path to `target`."""
        target_text = target.text if isinstance(target, PurePathText) else target
        source = self.normalized
        result = relative_to(
            source,
            classify(source).prefix_length,
            target_text,
            home=self._context.home,
            separator=self._context.separator,
        )
        LOGGER.debug("relative %r -> %r = %r", self._text, target_text, result)
        return self._produce(result)

    def _segment_names(self, others: tuple[PathLike, ...]) -> list[str]:
        names: list[str] = []
        for other in others:
            other_path = other if isinstance(other, PurePathText) else self._produce(other)
            names.extend(other_path.split())
        return names

    def starts_with(self, *others: PathLike) -> bool:
        """True when the normalized segments begin with those of `others`."""
        expected = self._segment_names(others)
        return bool(expected) and self.split()[: len(expected)] == expected

    def ends_with(self, *others: PathLike) -> bool:
        """True when the normalized segments end with those of `others`."""
        expected = self._segment_names(others)
        return bool(expected) and self.split()[-len(expected) :] == expected

    def with_name(self, name: str) -> "PurePathText":
        """Return a new path whose last name is replaced by `name`."""
        parent = parent_of(self._text)
        if parent is None:
            return self._produce(name, is_directory=self.is_directory)
        return self._produce(
            join(parent, name, separator=self._context.separator),
            is_directory=self.is_directory,
        )

    def to_unix_separators(self) -> "PurePathText":
        return self._produce(self._text.replace(BACKSLASH, SLASH), is_directory=self.is_directory)

    def to_windows_separators(self) -> "PurePathText":
        return self._produce(self._text.replace(SLASH, BACKSLASH), is_directory=self.is_directory)

    def to_system_separators(self) -> "PurePathText":
        if self._context.separator == BACKSLASH:
            return self.to_windows_separators()
        return self.to_unix_separators()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PurePathText):
            return self.normalized == other.normalized
        if isinstance(other, str):
            return self._text == other or self.normalized == self._produce(other).normalized
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, PurePathText):
            return self.normalized < other.normalized
        if isinstance(other, str):
            return self.normalized < self._produce(other).normalized
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.normalized)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"PurePathText({self._text!r})"


__all__ = ["PathLike", "PurePathText"]
