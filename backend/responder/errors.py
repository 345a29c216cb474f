"""
Convert exceptions into JSON-safe error records.

Non-debug records carry only `code`, `message` and (optionally) `stack`.
Debug records copy every attribute set on the exception instance, plus
`message` when the instance does not carry one of its own.
"""
from __future__ import annotations

import traceback
from typing import Any

from .types import ErrorObject


class ErrorNormalizer:
    """Turns a raised (or merely constructed) exception into an error record."""

    @staticmethod
    def transform(
        error: BaseException,
        include_stack_trace: bool = True,
        debug: bool = False,
    ) -> ErrorObject:
        record: ErrorObject = {}

        if debug:
            for name in _own_attributes(error):
                record[name] = _safe_read(lambda: getattr(error, name))
            if "message" not in record:
                record["message"] = _safe_read(lambda: str(error))
            return record

        record["code"] = _safe_read(lambda: getattr(error, "code", None))
        record["message"] = _safe_read(lambda: str(error))
        if include_stack_trace:
            record["stack"] = _safe_read(lambda: _format_stack(error))
        return record


def transform_error(
    error: BaseException,
    include_stack_trace: bool = True,
    debug: bool = False,
) -> ErrorObject:
    return ErrorNormalizer.transform(error, include_stack_trace, debug)


def _own_attributes(error) -> list[str]:
    try:
        return list(vars(error))
    except TypeError:
        return []


def _format_stack(error: BaseException) -> str:
    lines = traceback.format_exception(type(error), error, error.__traceback__)
    return "".join(lines)


def _safe_read(read) -> Any:
    # Broken properties on third-party exceptions degrade to None
    try:
        return read()
    except Exception:
        return None
