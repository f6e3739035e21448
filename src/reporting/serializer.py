"""Projection of frequency rows into the host's ``{"values": [...]}`` row format.

Values follow the order of the requested field ids; ids the projector does not
recognise produce an empty string placeholder instead of failing.
"""
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List, Sequence

from analysis.frequency import FrequencyRow

PLACEHOLDER = ""

_GETTERS: Dict[str, Callable[[FrequencyRow], Any]] = {
    "position": lambda row: row.position,
    "residue": lambda row: row.residue,
    "count": lambda row: row.count,
}


def project_row(row: FrequencyRow, field_ids: Sequence[str]) -> List[Any]:
    out = []
    for fid in field_ids:
        getter = _GETTERS.get(fid)
        out.append(getter(row) if getter else PLACEHOLDER)
    return out


def build_rows(rows: Iterable[FrequencyRow], field_ids: Sequence[str]) -> List[Dict[str, List[Any]]]:
    ids = list(field_ids)
    return [{"values": project_row(row, ids)} for row in rows]
