"""Root prefix detection for Unix, Windows drive, UNC and home paths."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pathalg.util.invariants import ensure

SLASH = "/"
BACKSLASH = "\\"
SEPARATORS = frozenset((SLASH, BACKSLASH))
COLON = ":"
DOT = "."
TWO_DOT = ".."
TILDE = "~"


class PrefixKind(Enum):
    """Root convention a path text starts with."""

    NONE = "none"
    UNIX_ROOT = "unix_root"
    WINDOWS_DRIVE_RELATIVE = "windows_drive_relative"
    WINDOWS_DRIVE_ROOT = "windows_drive_root"
    UNC_ROOT = "unc_root"
    HOME_RELATIVE = "home_relative"
    HOME_ROOT = "home_root"

    @property
    def is_home(self) -> bool:
        return self in (PrefixKind.HOME_RELATIVE, PrefixKind.HOME_ROOT)

    @property
    def is_drive(self) -> bool:
        return self in (PrefixKind.WINDOWS_DRIVE_RELATIVE, PrefixKind.WINDOWS_DRIVE_ROOT)


@dataclass(frozen=True)
class PrefixInfo:
    """Root metadata of a path text.

    `prefix_length` counts the leading characters that belong to the root
    marker. `has_root` means the path is anchored somewhere (filesystem root,
    drive, UNC share or home directory); `is_root` means nothing follows the
    prefix.
    """

    kind: PrefixKind
    prefix_length: int
    has_root: bool
    is_root: bool

    def prefix(self, text: str) -> str:
        """Return the prefix substring of `text`."""
        return text[: self.prefix_length]

    def to_dict(self) -> dict[str, object]:
        return {
            "kind": self.kind.value,
            "prefix_length": self.prefix_length,
            "has_root": self.has_root,
            "is_root": self.is_root,
        }


def is_separator(char: str | None) -> bool:
    """Return True for a forward or backward slash."""
    return char is not None and char in SEPARATORS


def _char_at(text: str, index: int) -> str | None:
    return text[index] if 0 <= index < len(text) else None


def drive_label_present(text: str) -> bool:
    """Return True when `text` starts with a letter followed by a colon (`C:`)."""
    first = _char_at(text, 0)
    return (
        first is not None
        and first.isascii()
        and first.isalpha()
        and _char_at(text, 1) == COLON
    )


def last_separator_index(text: str) -> int:
    """Return the index of the last `/` or `\\` in `text`, or -1."""
    return max(text.rfind(SLASH), text.rfind(BACKSLASH))


def separator_flavour(text: str, default: str = SLASH) -> str:
    """Return the first separator character used in `text`, else `default`."""
    for char in text:
        if char in SEPARATORS:
            return char
    return default


def classify(text: str) -> PrefixInfo:
    """Classify the root prefix of `text`.

    Checked in priority order: home symbol, UNC, drive label, Unix root.
    Every string, including the empty one, yields a result.
    """

    length = len(text)

    if text == TILDE:
        info = PrefixInfo(PrefixKind.HOME_ROOT, 1, has_root=True, is_root=True)
    elif _char_at(text, 0) == TILDE and is_separator(_char_at(text, 1)):
        if length == 2:
            info = PrefixInfo(PrefixKind.HOME_ROOT, 2, has_root=True, is_root=True)
        else:
            info = PrefixInfo(PrefixKind.HOME_RELATIVE, 2, has_root=True, is_root=False)
    elif is_separator(_char_at(text, 0)) and is_separator(_char_at(text, 1)):
        info = PrefixInfo(PrefixKind.UNC_ROOT, 2, has_root=True, is_root=length == 2)
    elif drive_label_present(text):
        if is_separator(_char_at(text, 2)):
            info = PrefixInfo(
                PrefixKind.WINDOWS_DRIVE_ROOT, 3, has_root=True, is_root=length == 3
            )
        else:
            # `C:notepad.exe` is relative to the current directory of drive C.
            info = PrefixInfo(
                PrefixKind.WINDOWS_DRIVE_RELATIVE, 2, has_root=False, is_root=length == 2
            )
    elif is_separator(_char_at(text, 0)):
        info = PrefixInfo(PrefixKind.UNIX_ROOT, 1, has_root=True, is_root=length == 1)
    else:
        info = PrefixInfo(PrefixKind.NONE, 0, has_root=False, is_root=False)

    ensure(0 <= info.prefix_length <= length, f"prefix length out of range for {text!r}")
    return info


__all__ = [
    "BACKSLASH",
    "COLON",
    "DOT",
    "PrefixInfo",
    "PrefixKind",
    "SEPARATORS",
    "SLASH",
    "TILDE",
    "TWO_DOT",
    "classify",
    "drive_label_present",
    "is_separator",
    "last_separator_index",
    "separator_flavour",
]
