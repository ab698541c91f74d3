# File: recombinator/app/core/models/sequence_models.py
# Version: v0.2.0

"""
Shared records for the recombination engine.

v0.2.0
- IndexKey is a NamedTuple (group_id, seq_id) instead of a "g:s" string token.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import NamedTuple, Tuple


@dataclass(frozen=True)
class Sequence:
    """
    One input sequence. Read-only once loaded.
    """
    id:     str                 # FASTA record id (first header token)
    bases:  str                 # residues, case preserved
    length: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "length", len(self.bases))


class IndexKey(NamedTuple):
    group_id: int               # zero-based group number
    seq_id:   int               # position of the sequence inside its group


Combination = Tuple[IndexKey, ...]


@dataclass(frozen=True)
class Recombinant:
    id:    str
    bases: str

    @property
    def length(self) -> int:
        return len(self.bases)


__all__ = ["Sequence", "IndexKey", "Combination", "Recombinant"]
