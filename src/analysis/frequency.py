"""Per-column residue frequency tabulation for FASTA alignments."""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import List, Sequence

from analysis.fasta import AlignmentRecord

GAP = "-"


@dataclass(frozen=True)
class FrequencyRow:
    """Count of one residue symbol at one 1-based alignment position."""

    position: int
    residue: str
    count: int

    def __post_init__(self):
        if not isinstance(self.position, int) or self.position < 1:
            raise ValueError(f"position must be a positive int, got {self.position!r}")
        if not isinstance(self.residue, str) or len(self.residue) != 1:
            raise ValueError(f"residue must be a single character, got {self.residue!r}")
        if not isinstance(self.count, int) or self.count < 1:
            raise ValueError(f"count must be a positive int, got {self.count!r}")


def alignment_width(records: Sequence[AlignmentRecord]) -> int:
    """Longest record length, 0 for an empty alignment."""
    return max((len(r) for r in records), default=0)


def column_counts(records: Sequence[AlignmentRecord], index: int) -> Counter:
    """Residue counts for one 0-based column, keyed in first-seen order.

    Records shorter than the column contribute a gap.
    """
    return Counter(r.residue_at(index, GAP) for r in records)


def tabulate(records: Sequence[AlignmentRecord]) -> List[FrequencyRow]:
    """Flatten an alignment into frequency rows grouped by position then residue."""
    rows: List[FrequencyRow] = []
    for i in range(alignment_width(records)):
        for residue, count in column_counts(records, i).items():
            rows.append(FrequencyRow(position=i + 1, residue=residue, count=count))
    return rows
