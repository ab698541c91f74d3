# File: recombinator/app/core/export/fasta_exporter.py
# Version: v0.3.0

"""
FASTA export for recombinants.

v0.3.0
- Streams records: each Recombinant becomes a SeqRecord and is written as soon
  as it is produced; nothing is buffered.
- Configurable line wrap (0 = one line per sequence).
"""

from pathlib import Path
from typing import IO, Iterable, Iterator, Optional

from Bio.Seq import Seq
from Bio.SeqIO.FastaIO import FastaWriter
from Bio.SeqRecord import SeqRecord

from recombinator.app.core.models.sequence_models import Recombinant

DEFAULT_WRAP = 60


def _as_records(recombinants: Iterable[Recombinant]) -> Iterator[SeqRecord]:
    """Header is exactly '>' + recombinant id (empty description)."""
    for r in recombinants:
        yield SeqRecord(Seq(r.bases), id=r.id, description="")


def write_recombinants(recombinants: Iterable[Recombinant],
                       handle: IO[str],
                       wrap: Optional[int] = DEFAULT_WRAP) -> int:
    """
    Write recombinants to an open text handle. Returns the record count.
    """
    writer = FastaWriter(handle, wrap=wrap or None)
    return writer.write_file(_as_records(recombinants))


def export_recombinants_to_fasta(recombinants: Iterable[Recombinant],
                                 fasta_path: Path,
                                 wrap: Optional[int] = DEFAULT_WRAP) -> int:
    with open(fasta_path, "w", encoding="utf-8") as fh:
        return write_recombinants(recombinants, fh, wrap=wrap)
