"""Status vocabularies shared by the envelope and the builder."""
from __future__ import annotations

from enum import Enum
from http import HTTPStatus


class ResponseStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    PENDING = "pending"
    REJECTED = "rejected"
    FAILED = "failed"


# Symbolic HTTP codes (StatusCode.OK == 200) callers can pass to the builder
StatusCode = HTTPStatus


class StatusMessage:
    """Default reason phrase for an HTTP code."""

    @staticmethod
    def for_code(code: int) -> str:
        """Return the reason phrase for an HTTP code, or "" if it is not a known status."""
        try:
            return HTTPStatus(code).phrase
        except ValueError:
            return ""
