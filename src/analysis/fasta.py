"""FASTA alignment parsing.

Records are split on header lines (first character ``>``); every other line is
appended verbatim to the current record. An empty accumulator is never
emitted, so header-only entries and blank preambles produce no record.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from performance.timing import time_function


@dataclass(frozen=True)
class AlignmentRecord:
    """One row of a multiple sequence alignment."""

    sequence: str
    header: Optional[str] = None

    def __post_init__(self):
        if not isinstance(self.sequence, str):
            raise TypeError(f"sequence must be str, got {type(self.sequence).__name__}")
        if not self.sequence:
            raise ValueError("AlignmentRecord requires a non-empty sequence")

    def __len__(self) -> int:
        return len(self.sequence)

    def residue_at(self, index: int, gap: str = "-") -> str:
        """Character at a 0-based column, ``gap`` beyond the end of the record."""
        if 0 <= index < len(self.sequence):
            return self.sequence[index]
        return gap


@time_function("parse_fasta", items_len=True)
def parse_fasta(text: str) -> List[AlignmentRecord]:
    """Parse FASTA text into alignment records, in input order."""
    records: List[AlignmentRecord] = []
    header: Optional[str] = None
    current = ""

    for line in text.split("\n"):
        if line[:1] == ">":
            if current:
                records.append(AlignmentRecord(current, header))
            header = line[1:]
            current = ""
        else:
            current += line
    if current:
        records.append(AlignmentRecord(current, header))
    return records
