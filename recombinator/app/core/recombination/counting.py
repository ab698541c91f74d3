# File: recombinator/app/core/recombination/counting.py
# Version: v0.1.0
"""
Closed-form number of recombinants that survive the filter.

Single group of N sequences (only self-adjacency applies):
    N * (N - 1)^K
G > 1 groups with sizes s_1..s_G (every segment from a distinct group, which
also rules out self-adjacency):
    (K + 1)! * e_{K+1}(s_1, ..., s_G)
where e_m is the elementary symmetric polynomial of degree m.
"""

from __future__ import annotations

import math
from typing import List, Sequence

from recombinator.app.core.recombination.sequence_index import SequenceIndex


def elementary_symmetric(values: Sequence[int], degree: int) -> int:
    if degree < 0:
        return 0
    # e[j] after processing each value, standard DP
    e: List[int] = [1] + [0] * degree
    for v in values:
        for j in range(degree, 0, -1):
            e[j] += e[j - 1] * v
    return e[degree]


def expected_recombinant_count(index: SequenceIndex, breakpoint_count: int) -> int:
    segments = breakpoint_count + 1
    if not index.enforces_group_exclusivity:
        n = index.sequence_count
        return n * (n - 1) ** breakpoint_count
    return math.factorial(segments) * elementary_symmetric(index.group_sizes, segments)


__all__ = ["elementary_symmetric", "expected_recombinant_count"]
