# File: recombinator/app/config/config_recombine.py
# Version: v0.1.0
"""
Pydantic model for one recombination run, built from the CLI namespace.

Breakpoint tokens are kept raw here: turning them into positions needs the
loaded sequences (max count, shortest length), so that happens in
BreakpointSet.build and raises the engine's own errors.

Usage:
    params = RecombineParameters.model_validate(vars(args))
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, conint, field_validator

from recombinator.app.core.recombination.sequence_index import GroupingMode


class RecombineParameters(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    inputs: List[str] = Field(default_factory=list, description="Input FASTA paths; empty or '-' means stdin")
    breakpoints: List[str] = Field(default_factory=list, description="Raw -b/--breakpoint tokens")
    group_by_file: bool = Field(False, description="One group per input source")
    output: Optional[Path] = Field(None, description="Output FASTA path; None means stdout")
    wrap: conint(ge=0) = Field(60, description="FASTA line width, 0 = no wrapping")
    count_only: bool = Field(False, description="Report the expected count and exit")

    @field_validator("inputs", "breakpoints", mode="before")
    @classmethod
    def _none_to_empty(cls, v):
        # argparse leaves append/nargs='*' options as None when absent
        if v is None:
            return []
        return [str(t) for t in v]

    @property
    def grouping_mode(self) -> GroupingMode:
        return GroupingMode.from_flag(self.group_by_file)


__all__ = ["RecombineParameters"]
