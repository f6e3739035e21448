"""Error types and the result record returned by the data pipeline."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional

USER_ERROR_TEXT = (
    "The connector has encountered an unrecoverable error. "
    "Please try again later, or file an issue if this error persists."
)


class ConnectorError(Exception):
    """Base exception for the package"""
    pass


class UnknownFieldError(ConnectorError):
    """Raised when the host requests a field id missing from the registry"""

    def __init__(self, field_ids: List[str]):
        self.field_ids = list(field_ids)
        super().__init__(f"Unknown field id(s): {', '.join(self.field_ids)}")


class FetchError(ConnectorError):
    """Raised when the alignment could not be retrieved from Pfam"""
    pass


class UserError(ConnectorError):
    """User-facing failure; ``text`` is shown to the end user, ``debug_text`` only to admins/logs."""

    def __init__(self, text: str = USER_ERROR_TEXT, debug_text: Optional[str] = None):
        self.text = text
        self.debug_text = debug_text
        super().__init__(text)

    def to_dict(self, include_debug: bool = False) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"errorCode": "USER_ERROR", "text": self.text}
        if include_debug and self.debug_text:
            payload["debugText"] = self.debug_text
        return payload


class ErrorKind(str, Enum):
    FIELDS = "fields"
    FETCH = "fetch"
    TRANSFORM = "transform"


@dataclass(frozen=True)
class DataResult:
    """Outcome of one fetch-and-transform run: either rows or an error kind with debug detail."""

    rows: Optional[List[Dict[str, Any]]] = None
    error: Optional[ErrorKind] = None
    debug_text: str = ""

    def __post_init__(self):
        if (self.rows is None) == (self.error is None):
            raise ValueError("DataResult needs exactly one of rows or error")

    @classmethod
    def ok(cls, rows: List[Dict[str, Any]]) -> "DataResult":
        return cls(rows=rows)

    @classmethod
    def err(cls, kind: ErrorKind, debug_text: str) -> "DataResult":
        return cls(error=kind, debug_text=debug_text)

    @property
    def is_ok(self) -> bool:
        return self.error is None
