# File: recombinator/tests/conftest.py
# Version: v0.2.0
"""
Test bootstrap: ensure project root is on sys.path so 'recombinator.*' imports work
without an editable install, plus small shared fixtures.
"""
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]  # repo root (../.. from this file)
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from recombinator.app.core.models.sequence_models import Sequence  # noqa: E402


def seqs(*pairs):
    """seqs(("A", "AAAA"), ("B", "BBBB")) -> [Sequence, ...]"""
    return [Sequence(id=i, bases=b) for i, b in pairs]


@pytest.fixture
def make_seqs():
    return seqs


@pytest.fixture
def ab_collection():
    return [seqs(("A", "AAAA"), ("B", "BBBB"))]


@pytest.fixture
def grouped_abc():
    # file1 = {A}, file2 = {B, C}
    return [seqs(("A", "AAA")), seqs(("B", "BBB"), ("C", "CCC"))]


@pytest.fixture
def write_fasta(tmp_path):
    def _write(name: str, text: str) -> Path:
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p
    return _write
