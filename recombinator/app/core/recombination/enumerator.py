# File: recombinator/app/core/recombination/enumerator.py
# Version: v0.1.1
"""
Lazy enumeration of candidate combinations.

Candidates are the full Cartesian power keys^(K+1), produced in lexicographic
order over the canonical key positions (leftmost element varies slowest).
itertools.product is pull-based, so only the current tuple is live; the
N^(K+1) candidate space is never materialized.

v0.1.1
- Each call returns a fresh iterator; callers may stop early at any point.
"""

from __future__ import annotations

import itertools
from typing import Iterator, Sequence

from recombinator.app.core.models.sequence_models import Combination, IndexKey


def iter_combinations(keys: Sequence[IndexKey], breakpoint_count: int) -> Iterator[Combination]:
    if breakpoint_count < 0:
        raise ValueError("breakpoint_count must be >= 0")
    return itertools.product(tuple(keys), repeat=breakpoint_count + 1)


def candidate_count(n_keys: int, breakpoint_count: int) -> int:
    return n_keys ** (breakpoint_count + 1)


__all__ = ["iter_combinations", "candidate_count"]
