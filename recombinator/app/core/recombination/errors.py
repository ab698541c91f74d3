# File: recombinator/app/core/recombination/errors.py
# Version: v0.1.0
"""
Exceptions raised while validating a recombination run.

Every user-facing validation failure derives from RecombinationError and is
raised before the first candidate is enumerated. IndexResolutionError is not
one of them: it marks a broken internal invariant and is never caught by the CLI.
"""

from __future__ import annotations


class RecombinationError(RuntimeError):
    pass


class InvalidBreakpoint(RecombinationError):
    """A breakpoint token is not a positive integer."""


class TooManyBreakpoints(RecombinationError):
    """More breakpoints than available groups (or sequences, when ungrouped)."""


class BreakpointOutOfRange(RecombinationError):
    """A breakpoint is >= the length of the shortest input sequence."""


class EmptyInput(RecombinationError):
    """No sequences were loaded."""


class InsufficientGroups(RecombinationError):
    """Grouping by file was requested with fewer than two input sources."""


class IndexResolutionError(RuntimeError):
    pass


__all__ = [
    "RecombinationError",
    "InvalidBreakpoint",
    "TooManyBreakpoints",
    "BreakpointOutOfRange",
    "EmptyInput",
    "InsufficientGroups",
    "IndexResolutionError",
]
