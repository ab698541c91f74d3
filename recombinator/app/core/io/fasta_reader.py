# File: recombinator/app/core/io/fasta_reader.py
# Version: v0.2.1
"""
FASTA input: one collection of Sequence records per input source.

- "-" (or no paths at all) reads a single source from stdin
- paths ending in .gz / .bgz are read through gzip
- record id is SeqRecord.id (first header token); bases keep their case

v0.2.1
- "-" given more than once is rejected instead of yielding an empty source.

v0.2.0
- gzip inputs.
"""

from __future__ import annotations

import gzip
import logging
import sys
from pathlib import Path
from typing import IO, List, Optional, Sequence as Seq, TextIO, Union

from Bio import SeqIO

from recombinator.app.core.models.sequence_models import Sequence

log = logging.getLogger(__name__)

STDIN_MARKER = "-"

PathLike = Union[str, Path]


def read_fasta_handle(handle: IO[str]) -> List[Sequence]:
    return [Sequence(id=rec.id, bases=str(rec.seq)) for rec in SeqIO.parse(handle, "fasta")]


def read_fasta_source(path: PathLike, stdin: Optional[TextIO] = None) -> List[Sequence]:
    p = str(path)
    if p == STDIN_MARKER:
        records = read_fasta_handle(stdin if stdin is not None else sys.stdin)
    elif p.endswith((".gz", ".bgz")):
        with gzip.open(p, "rt", encoding="utf-8") as fh:
            records = read_fasta_handle(fh)
    else:
        with open(p, "rt", encoding="utf-8") as fh:
            records = read_fasta_handle(fh)
    log.info("Read %d sequence(s) from %s", len(records), "<stdin>" if p == STDIN_MARKER else p)
    return records


def read_collections(paths: Seq[PathLike], stdin: Optional[TextIO] = None) -> List[List[Sequence]]:
    """
    Load every source fully, in the given order. No paths -> stdin.
    stdin can only be consumed once, so "-" may appear at most once.
    """
    sources = list(paths) or [STDIN_MARKER]
    if sum(1 for p in sources if str(p) == STDIN_MARKER) > 1:
        raise ValueError(f"'{STDIN_MARKER}' (stdin) can be given only once as an input source")
    return [read_fasta_source(p, stdin=stdin) for p in sources]


__all__ = ["STDIN_MARKER", "read_fasta_handle", "read_fasta_source", "read_collections"]
