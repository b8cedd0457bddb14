"""Internal invariant checks for the path algebra."""

from __future__ import annotations


class PathInvariantError(AssertionError):
    """Raised when the algebra computes a value that breaks its own invariants.

    This always signals a defect in the implementation, never bad input.
    """


def ensure(condition: bool, message: str) -> None:
    """Raise `PathInvariantError` with `message` unless `condition` holds."""
    if not condition:
        raise PathInvariantError(message)


__all__ = ["PathInvariantError", "ensure"]
