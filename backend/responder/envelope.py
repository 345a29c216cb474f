"""
Response envelope data model.

Every response rendered by the builder has the shape:
    {
        "status": "success" | "error" | "pending" | "rejected" | "failed",
        "code": 200,
        "message": "...",
        "data": ...,        # only when a payload was set (None counts)
        "errors": [...],    # only when non-empty
        "meta": {...},      # only when non-empty
        "headers": {...}    # only when non-empty
    }
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .enums import ResponseStatus
from .types import ErrorObject, HeadersObject, MetaObject


class _Absent:
    """Marks a payload that was never set, as opposed to one set to None."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self):
        return False

    def __repr__(self):
        return "ABSENT"

    def __reduce__(self):
        return (_Absent, ())


ABSENT: Any = _Absent()


@dataclass
class ResponseEnvelope:
    status: str = ResponseStatus.SUCCESS.value
    code: int = 200
    message: str = ""
    data: Any = ABSENT
    errors: list[ErrorObject] = field(default_factory=list)
    meta: MetaObject = field(default_factory=dict)
    headers: HeadersObject = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the minimal JSON-compatible envelope."""
        body: dict[str, Any] = {
            "status": _plain(self.status),
            "code": _plain(self.code),
            "message": self.message,
        }
        if self.data is not ABSENT:
            body["data"] = self.data
        if self.errors:
            body["errors"] = self.errors
        if self.meta:
            body["meta"] = self.meta
        if self.headers:
            body["headers"] = self.headers
        return body

    def is_success(self) -> bool:
        return self.status == ResponseStatus.SUCCESS

    def is_error(self) -> bool:
        return self.status == ResponseStatus.ERROR

    def is_pending(self) -> bool:
        return self.status == ResponseStatus.PENDING

    def is_rejected(self) -> bool:
        return self.status == ResponseStatus.REJECTED

    def is_failed(self) -> bool:
        return self.status == ResponseStatus.FAILED


def _plain(value):
    # Enum members go out as their raw value so the body stays plain JSON
    if isinstance(value, ResponseStatus):
        return value.value
    if isinstance(value, int) and not isinstance(value, bool) and type(value) is not int:
        return int(value)
    return value
