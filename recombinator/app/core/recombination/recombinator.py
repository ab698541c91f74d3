# File: recombinator/app/core/recombination/recombinator.py
# Version: v0.3.0
"""
Naive recombination driver: enumerate -> filter -> assemble, one record at a time.

v0.3.0
- prepare() does all validation up front (index, then breakpoints) so a bad
  configuration fails before the first record exists.
- Per-rule rejection counters in RecombinationStats.

v0.2.0
- Logger injection, same as the other engine classes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from recombinator.app.core.models.sequence_models import Recombinant, Sequence
from recombinator.app.core.recombination.assembler import RecombinantAssembler
from recombinator.app.core.recombination.breakpoints import BreakpointSet, BreakpointToken
from recombinator.app.core.recombination.combination_filter import (
    INTRA_GROUP,
    SELF_ADJACENT,
    CombinationFilter,
)
from recombinator.app.core.recombination.counting import expected_recombinant_count
from recombinator.app.core.recombination.enumerator import candidate_count, iter_combinations
from recombinator.app.core.recombination.sequence_index import SequenceIndex


@dataclass
class RecombinationStats:
    candidates: int = 0
    emitted: int = 0
    rejected_self_adjacent: int = 0
    rejected_intra_group: int = 0

    @property
    def rejected(self) -> int:
        return self.rejected_self_adjacent + self.rejected_intra_group


class NaiveRecombinator:
    def __init__(
        self,
        index: SequenceIndex,
        breakpoints: BreakpointSet,
        logger: Optional[logging.Logger] = None,
    ):
        self.index = index
        self.breakpoints = breakpoints
        self.log = logger or logging.getLogger(__name__)
        self.filter = CombinationFilter.for_index(index)
        self.assembler = RecombinantAssembler(index, breakpoints)
        self.stats = RecombinationStats()

    @property
    def candidate_count(self) -> int:
        return candidate_count(self.index.sequence_count, len(self.breakpoints))

    @property
    def expected_count(self) -> int:
        return expected_recombinant_count(self.index, len(self.breakpoints))

    def recombinants(self) -> Iterator[Recombinant]:
        """
        Stream recombinants in enumeration order. Stats are reset on each call.
        """
        self.stats = RecombinationStats()
        stats = self.stats
        for combo in iter_combinations(self.index.keys(), len(self.breakpoints)):
            stats.candidates += 1
            reason = self.filter.rejection_reason(combo)
            if reason == SELF_ADJACENT:
                stats.rejected_self_adjacent += 1
                continue
            if reason == INTRA_GROUP:
                stats.rejected_intra_group += 1
                continue
            rec = self.assembler.assemble(combo)
            stats.emitted += 1
            if self.log.isEnabledFor(logging.DEBUG):
                self.log.debug("Emit %s (%d bp)", rec.id, rec.length)
            yield rec


def prepare(
    collections: Iterable[Iterable[Sequence]],
    breakpoint_tokens: Iterable[BreakpointToken],
    group_by_file: bool = False,
    logger: Optional[logging.Logger] = None,
) -> NaiveRecombinator:
    index = SequenceIndex.from_collections(collections, group_by_file=group_by_file)
    breakpoints = BreakpointSet.build(
        breakpoint_tokens,
        max_breakpoints=index.max_breakpoints,
        min_sequence_length=index.min_sequence_length,
    )
    return NaiveRecombinator(index, breakpoints, logger=logger)


def generate_recombinants(
    collections: Iterable[Iterable[Sequence]],
    breakpoint_tokens: Iterable[BreakpointToken],
    group_by_file: bool = False,
) -> Iterator[Recombinant]:
    """Validate eagerly, then return the lazy recombinant stream."""
    return prepare(collections, breakpoint_tokens, group_by_file).recombinants()


__all__ = [
    "RecombinationStats",
    "NaiveRecombinator",
    "prepare",
    "generate_recombinants",
]
