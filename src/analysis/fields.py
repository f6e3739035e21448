"""Field registry describing the three columns exposed to the reporting host.

Replaces the host's field builder: definitions are plain records, and a
FieldRegistry instance is built per request rather than shared globally.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Sequence

from utils.errors import UnknownFieldError


class FieldType(str, Enum):
    NUMBER = "NUMBER"
    TEXT = "TEXT"


class ConceptType(str, Enum):
    DIMENSION = "DIMENSION"
    METRIC = "METRIC"


class AggregationType(str, Enum):
    SUM = "SUM"


@dataclass(frozen=True)
class FieldDefinition:
    id: str
    name: str
    data_type: FieldType
    concept_type: ConceptType
    aggregation: Optional[AggregationType] = None

    def to_dict(self) -> Dict[str, Any]:
        semantics: Dict[str, Any] = {"conceptType": self.concept_type.value}
        out: Dict[str, Any] = {
            "name": self.id,
            "label": self.name,
            "dataType": self.data_type.value,
            "semantics": semantics,
        }
        if self.aggregation is not None:
            out["defaultAggregationType"] = self.aggregation.value
        return out


@dataclass(frozen=True)
class FieldRequest:
    """Ordered field ids requested by the host, duplicates collapsed."""

    field_ids: tuple

    def __post_init__(self):
        ids = []
        for fid in self.field_ids:
            if not isinstance(fid, str):
                raise TypeError(f"field id must be str, got {type(fid).__name__}")
            if fid not in ids:
                ids.append(fid)
        object.__setattr__(self, "field_ids", tuple(ids))

    @classmethod
    def from_names(cls, names: Iterable[str]) -> "FieldRequest":
        return cls(tuple(names))

    def __iter__(self):
        return iter(self.field_ids)

    def __len__(self) -> int:
        return len(self.field_ids)


# Key -> definition, in schema order
FIELD_DEFINITIONS: Dict[str, FieldDefinition] = {
    'position': FieldDefinition('position', 'Position', FieldType.NUMBER, ConceptType.DIMENSION),
    'residue': FieldDefinition('residue', 'Residue', FieldType.TEXT, ConceptType.DIMENSION),
    'count': FieldDefinition('count', 'Count', FieldType.NUMBER, ConceptType.METRIC, AggregationType.SUM),
}


class FieldRegistry:
    """Resolves requested field ids to their definitions."""

    def __init__(self, definitions: Optional[Iterable[FieldDefinition]] = None):
        defs = FIELD_DEFINITIONS.values() if definitions is None else definitions
        self._fields: Dict[str, FieldDefinition] = {d.id: d for d in defs}

    def ids(self) -> List[str]:
        return list(self._fields)

    def get(self, field_id: str) -> Optional[FieldDefinition]:
        return self._fields.get(field_id)

    def all(self) -> List[FieldDefinition]:
        return list(self._fields.values())

    def for_ids(self, field_ids: Sequence[str]) -> List[FieldDefinition]:
        """Definitions for ``field_ids`` in the requested order.

        Raises:
            UnknownFieldError: if any id is not registered
        """
        missing = [fid for fid in field_ids if fid not in self._fields]
        if missing:
            raise UnknownFieldError(missing)
        return [self._fields[fid] for fid in field_ids]

    def build(self, fields: Optional[Sequence[FieldDefinition]] = None) -> List[Dict[str, Any]]:
        """Serialize definitions (default: all) to the host schema format."""
        return [d.to_dict() for d in (self.all() if fields is None else fields)]
