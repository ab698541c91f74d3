# File: recombinator/app/cli/recombine_cli.py
# Version: v0.3.1
"""
Command-line interface for naive recombinant generation.

Reads one or more FASTA sources, cuts every sequence at the given breakpoints
and writes every valid spliced combination as FASTA.

v0.3.1
- -o goes through export_recombinants_to_fasta.
- An invalid RECOMBINATOR_LOG_LEVEL is a usage error (exit 2).

v0.3.0
- --count reports the expected number of recombinants without writing any.
- Warns before enumerating when the expected output exceeds
  RECOMBINATOR_LARGE_OUTPUT_WARNING.

v0.2.0
- --log-level (default from RECOMBINATOR_LOG_LEVEL); logs go to stderr so
  stdout stays pure FASTA.
- -o/--output; the file is only created once validation has passed.

Usage:
    naive-recombinants -b 113 -b 242 seqs.fasta > recombinants.fasta
    naive-recombinants --breakpoint=113,242 --group-by-file subtypeA.fa subtypeB.fa subtypeC.fa
    cat seqs.fasta | naive-recombinants -b 50
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from recombinator.app.config.config_recombine import RecombineParameters
from recombinator.app.core.config import settings
from recombinator.app.core.export.fasta_exporter import (
    export_recombinants_to_fasta,
    write_recombinants,
)
from recombinator.app.core.io.fasta_reader import read_collections
from recombinator.app.core.recombination.errors import RecombinationError
from recombinator.app.core.recombination.recombinator import NaiveRecombinator, prepare

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog=settings.APP_NAME,
        description="Generate every naive recombinant of the input sequences at the given breakpoints.",
    )
    p.add_argument("inputs", nargs="*", metavar="FASTA",
                   help="Input FASTA file(s); none or '-' reads stdin")
    p.add_argument("-b", "--breakpoint", dest="breakpoints", action="append", metavar="N[,N...]",
                   help="1-based position after which to cut; repeatable, comma-separated lists allowed")
    p.add_argument("--group-by-file", action="store_true",
                   help="Treat each input file as a group; pieces of one recombinant come from distinct groups")
    p.add_argument("-o", "--output", default=None,
                   help="Write FASTA here instead of stdout")
    p.add_argument("--wrap", type=int, default=settings.FASTA_WRAP,
                   help=f"FASTA line width, 0 for single-line records (default: {settings.FASTA_WRAP})")
    p.add_argument("--count", dest="count_only", action="store_true",
                   help="Print the number of recombinants that would be produced and exit")
    p.add_argument("--log-level", dest="log_level", default=settings.log_level_name,
                   choices=LOG_LEVELS,
                   help=f"Logging level (default: {settings.log_level_name})")
    p.add_argument("--version", action="version",
                   version=f"%(prog)s {settings.APP_VERSION}")
    return p


def _log_plan(log: logging.Logger, rec: NaiveRecombinator) -> int:
    idx = rec.index
    expected = rec.expected_count
    log.info("Index: %d sequence(s), %d group(s) %s, mode=%s, shortest=%d bp",
             idx.sequence_count, idx.group_count, idx.group_sizes, idx.mode.value,
             idx.min_sequence_length)
    log.info("Breakpoints: %s", list(rec.breakpoints) or "none")
    log.info("Candidates: %d | expected recombinants: %d", rec.candidate_count, expected)
    if expected > settings.LARGE_OUTPUT_WARNING:
        log.warning("About to write %d recombinants", expected)
    if expected == 0 and idx.enforces_group_exclusivity:
        log.warning("No combination satisfies the grouping rules; output will be empty")
    elif expected == 0:
        log.warning("Self-adjacency leaves no combination with a single sequence; output will be empty")
    return expected


def run(params: RecombineParameters, log: logging.Logger) -> int:
    """
    Load, validate, stream. Returns the number of records written.
    Raises RecombinationError before anything is written if the run is invalid.
    """
    collections = read_collections(params.inputs)
    rec = prepare(collections, params.breakpoints, group_by_file=params.group_by_file, logger=log)
    expected = _log_plan(log, rec)

    if params.count_only:
        print(expected)
        return 0

    if params.output is not None:
        n = export_recombinants_to_fasta(rec.recombinants(), params.output, wrap=params.wrap)
        log.info("Output: %s", params.output)
    else:
        n = write_recombinants(rec.recombinants(), sys.stdout, wrap=params.wrap)
        sys.stdout.flush()

    st = rec.stats
    log.info("Done: %d written | %d candidates | %d self-adjacent | %d intra-group rejected",
             n, st.candidates, st.rejected_self_adjacent, st.rejected_intra_group)
    return n


def main(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    # argparse does not check a default (RECOMBINATOR_LOG_LEVEL) against choices
    if args.log_level not in LOG_LEVELS:
        parser.error(f"invalid log level {args.log_level!r} (choose from {', '.join(LOG_LEVELS)})")

    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")
    log = logging.getLogger("recombine_cli")

    log.info("=== %s %s ===", settings.APP_NAME, settings.APP_VERSION)
    log.info("INPUTS=%s | BREAKPOINTS=%s | GROUP_BY_FILE=%s | OUTPUT=%s",
             args.inputs or ["-"], args.breakpoints, args.group_by_file, args.output or "<stdout>")

    try:
        params = RecombineParameters.model_validate(vars(args))
        run(params, log)
    except (RecombinationError, OSError, ValueError) as ex:
        # pydantic.ValidationError and Bio parse errors are ValueErrors
        print(f"[ERROR] {ex}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
