# File: recombinator/app/core/recombination/combination_filter.py
# Version: v0.2.1
"""
Structural filter for candidate combinations.

Rules, evaluated in this order:
  1. self-adjacency: two consecutive segments from the same IndexKey
  2. intra-group:    two segments (anywhere) from the same group; only when
                     the index holds more than one group

A rejected combination is dropped silently; it is not an error.

v0.2.1
- accepts()/filter() removed; rejection_reason() is the single entry point.

v0.2.0
- rejection_reason() so the driver can count rejections per rule.
"""

from __future__ import annotations

from typing import Optional

from recombinator.app.core.models.sequence_models import Combination

SELF_ADJACENT = "self_adjacent"
INTRA_GROUP = "intra_group"


def is_self_adjacent(combination: Combination) -> bool:
    return any(a == b for a, b in zip(combination, combination[1:]))


def has_intra_group_pair(combination: Combination) -> bool:
    group_ids = [k.group_id for k in combination]
    return len(set(group_ids)) != len(group_ids)


class CombinationFilter:
    def __init__(self, enforce_group_exclusivity: bool):
        self.enforce_group_exclusivity = enforce_group_exclusivity

    @classmethod
    def for_index(cls, index) -> "CombinationFilter":
        return cls(index.enforces_group_exclusivity)

    def rejection_reason(self, combination: Combination) -> Optional[str]:
        if is_self_adjacent(combination):
            return SELF_ADJACENT
        if self.enforce_group_exclusivity and has_intra_group_pair(combination):
            return INTRA_GROUP
        return None


__all__ = [
    "SELF_ADJACENT",
    "INTRA_GROUP",
    "is_self_adjacent",
    "has_intra_group_pair",
    "CombinationFilter",
]
