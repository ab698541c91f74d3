# File: recombinator/app/core/recombination/breakpoints.py
# Version: v0.3.1
"""
Breakpoint parsing and validation.

Breakpoints are 1-based positions AFTER which a cut occurs. Tokens come from
the CLI as strings ("113" or "113,242") or from library callers as ints.

v0.3.1
- Positional indexing dropped; iterate or use positions.

v0.3.0
- Validation order is fixed: parse -> dedupe/sort -> count -> range.
- BreakpointSet.segments() exposes the fixed (start, end) spans.

v0.2.0
- Comma-joined tokens accepted; whitespace around each piece ignored.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from recombinator.app.core.recombination.errors import (
    BreakpointOutOfRange,
    InvalidBreakpoint,
    TooManyBreakpoints,
)

log = logging.getLogger(__name__)

BreakpointToken = Union[int, str]

_DIGITS = re.compile(r"[0-9]+")


def _parse_piece(piece: str, token: BreakpointToken) -> int:
    s = piece.strip()
    if not _DIGITS.fullmatch(s):
        raise InvalidBreakpoint(
            f"Breakpoint {token!r} is not a positive integer (bad value {piece!r})"
        )
    value = int(s)
    if value <= 0:
        raise InvalidBreakpoint(f"Breakpoint {token!r} must be > 0 (got {value})")
    return value


def parse_breakpoint_tokens(tokens: Iterable[BreakpointToken]) -> List[int]:
    """
    Flatten raw tokens into a list of positive ints, in input order.
    Duplicates are kept here; BreakpointSet.build removes them.
    """
    out: List[int] = []
    for token in tokens:
        # bool is an int subclass; True/False are never positions
        if isinstance(token, bool):
            raise InvalidBreakpoint(f"Breakpoint {token!r} is not a positive integer")
        if isinstance(token, int):
            if token <= 0:
                raise InvalidBreakpoint(f"Breakpoint {token!r} must be > 0")
            out.append(token)
            continue
        if not isinstance(token, str):
            raise InvalidBreakpoint(f"Breakpoint {token!r} is not a positive integer")
        for piece in token.split(","):
            out.append(_parse_piece(piece, token))
    return out


@dataclass(frozen=True)
class BreakpointSet:
    """
    Sorted, unique, validated breakpoint positions.
    """
    positions: Tuple[int, ...] = ()

    @classmethod
    def build(
        cls,
        tokens: Iterable[BreakpointToken],
        *,
        max_breakpoints: int,
        min_sequence_length: int,
    ) -> "BreakpointSet":
        values = sorted(set(parse_breakpoint_tokens(tokens)))

        if len(values) > max_breakpoints:
            raise TooManyBreakpoints(
                f"{len(values)} breakpoints requested but at most {max_breakpoints} allowed"
            )

        too_far = [b for b in values if b >= min_sequence_length]
        if too_far:
            raise BreakpointOutOfRange(
                f"Breakpoint(s) {', '.join(map(str, too_far))} must be < shortest "
                f"sequence length ({min_sequence_length})"
            )

        if not values:
            log.warning("No breakpoints given; sequences will be emitted unchanged")
        return cls(positions=tuple(values))

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[int]:
        return iter(self.positions)

    @property
    def segment_count(self) -> int:
        return len(self.positions) + 1

    def segments(self) -> Iterator[Tuple[int, Optional[int]]]:
        """
        1-based inclusive (start, end) per segment. The final segment's end is
        None: it runs to the end of whichever sequence supplies it.
        """
        start = 1
        for b in self.positions:
            yield (start, b)
            start = b + 1
        yield (start, None)

    def labels(self) -> Sequence[str]:
        return [f"@{b}" for b in self.positions]


__all__ = ["BreakpointToken", "BreakpointSet", "parse_breakpoint_tokens"]
