# File: recombinator/app/core/recombination/assembler.py
# Version: v0.2.2
"""
Turn an accepted combination into a Recombinant.

ID:    id_0|@b_0|id_1|@b_1|...|@b_{K-1}|id_K
Bases: segment i < K is bases[cursor..b_i] (1-based, inclusive) of sequence i,
       then cursor = b_i + 1. The last segment runs from cursor to the end of
       ITS OWN sequence, so a recombinant can be longer than the shortest input.

v0.2.2
- Breakpoint markers come from BreakpointSet.labels().

v0.2.1
- Final segment no longer clipped to the shortest sequence length.

v0.2.0
- Id and bases built as joins over the segments; inputs are never mutated.
"""

from __future__ import annotations

from typing import List, Sequence as Seq

from recombinator.app.core.models.sequence_models import Combination, Recombinant, Sequence
from recombinator.app.core.recombination.breakpoints import BreakpointSet
from recombinator.app.core.recombination.errors import IndexResolutionError
from recombinator.app.core.recombination.sequence_index import SequenceIndex

ID_SEPARATOR = "|"


def recombinant_id(names: Seq[str], breakpoints: BreakpointSet) -> str:
    head, tail = names[0], names[1:]
    return ID_SEPARATOR.join(
        [head] + [part for label, name in zip(breakpoints.labels(), tail) for part in (label, name)]
    )


def recombinant_bases(sequences: Seq[Sequence], breakpoints: BreakpointSet) -> str:
    return "".join(
        seq.bases[start - 1:end]   # end=None -> to the end of this sequence
        for seq, (start, end) in zip(sequences, breakpoints.segments())
    )


class RecombinantAssembler:
    def __init__(self, index: SequenceIndex, breakpoints: BreakpointSet):
        self.index = index
        self.breakpoints = breakpoints

    def assemble(self, combination: Combination) -> Recombinant:
        if len(combination) != self.breakpoints.segment_count:
            raise IndexResolutionError(
                f"Combination of {len(combination)} keys does not match "
                f"{self.breakpoints.segment_count} segments"
            )
        parts: List[Sequence] = [self.index.resolve(k) for k in combination]
        return Recombinant(
            id=recombinant_id([s.id for s in parts], self.breakpoints),
            bases=recombinant_bases(parts, self.breakpoints),
        )


__all__ = ["ID_SEPARATOR", "recombinant_id", "recombinant_bases", "RecombinantAssembler"]
