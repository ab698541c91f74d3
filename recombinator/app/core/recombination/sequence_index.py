# File: recombinator/app/core/recombination/sequence_index.py
# Version: v0.2.0
"""
Sequence index: input sequences arranged into groups and addressed by IndexKey.

The grouping decision is made once, here, via GroupingMode:
  - FLAT      : every source is concatenated into a single group 0
  - BY_SOURCE : each source becomes its own group, in source order

The enumerator and the filter only see the canonical key list and
`enforces_group_exclusivity`; they never look at how groups were derived.

v0.2.0
- Empty sources keep their group slot under BY_SOURCE so group ids always
  match input order.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Iterable, List, Sequence as Seq, Tuple

from recombinator.app.core.models.sequence_models import IndexKey, Sequence
from recombinator.app.core.recombination.errors import (
    EmptyInput,
    IndexResolutionError,
    InsufficientGroups,
)

log = logging.getLogger(__name__)


class GroupingMode(str, Enum):
    FLAT = "flat"
    BY_SOURCE = "by_source"

    @classmethod
    def from_flag(cls, group_by_file: bool) -> "GroupingMode":
        return cls.BY_SOURCE if group_by_file else cls.FLAT


Group = Tuple[Sequence, ...]


class SequenceIndex:
    def __init__(self, groups: Seq[Group], mode: GroupingMode):
        self._groups: Tuple[Group, ...] = tuple(tuple(g) for g in groups)
        self.mode = mode
        self._keys: Tuple[IndexKey, ...] = tuple(
            IndexKey(gi, si)
            for gi, group in enumerate(self._groups)
            for si in range(len(group))
        )

    # --------------------- Construction ---------------------

    @classmethod
    def build(
        cls,
        collections: Iterable[Iterable[Sequence]],
        mode: GroupingMode = GroupingMode.FLAT,
    ) -> "SequenceIndex":
        sources: List[Group] = [tuple(c) for c in collections]

        if mode is GroupingMode.BY_SOURCE and len(sources) < 2:
            raise InsufficientGroups(
                f"Grouping by file needs at least 2 input sources (got {len(sources)})"
            )

        if mode is GroupingMode.BY_SOURCE:
            groups = sources
            for gi, g in enumerate(groups):
                if not g:
                    log.warning("Input source %d is empty; group %d has no sequences", gi + 1, gi)
        else:
            groups = [tuple(s for src in sources for s in src)]

        if not any(groups):
            raise EmptyInput("No sequences found in the input")

        idx = cls(groups, mode)
        log.debug(
            "Sequence index: %d sequences in %d group(s), shortest %d",
            idx.sequence_count, idx.group_count, idx.min_sequence_length,
        )
        return idx

    @classmethod
    def from_collections(
        cls,
        collections: Iterable[Iterable[Sequence]],
        group_by_file: bool = False,
    ) -> "SequenceIndex":
        return cls.build(collections, GroupingMode.from_flag(group_by_file))

    # --------------------- Queries ---------------------

    @property
    def groups(self) -> Tuple[Group, ...]:
        return self._groups

    @property
    def group_count(self) -> int:
        return len(self._groups)

    @property
    def group_sizes(self) -> List[int]:
        return [len(g) for g in self._groups]

    @property
    def sequence_count(self) -> int:
        return len(self._keys)

    @property
    def min_sequence_length(self) -> int:
        return min(s.length for g in self._groups for s in g)

    @property
    def max_breakpoints(self) -> int:
        if self.mode is GroupingMode.BY_SOURCE:
            return self.group_count
        return self.sequence_count

    @property
    def enforces_group_exclusivity(self) -> bool:
        return self.group_count > 1

    def keys(self) -> Tuple[IndexKey, ...]:
        """All keys, group ascending then position ascending."""
        return self._keys

    def resolve(self, key: IndexKey) -> Sequence:
        gi, si = key
        if not (0 <= gi < len(self._groups) and 0 <= si < len(self._groups[gi])):
            raise IndexResolutionError(f"IndexKey {tuple(key)} does not resolve to a sequence")
        return self._groups[gi][si]

    def __len__(self) -> int:
        return self.sequence_count

    def __repr__(self) -> str:
        return (
            f"SequenceIndex(mode={self.mode.value}, groups={self.group_sizes}, "
            f"min_len={self.min_sequence_length})"
        )


__all__ = ["GroupingMode", "SequenceIndex"]
