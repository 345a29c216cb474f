"""
Fluent builder that accumulates envelope fields and writes the result once.

Usage:
    return ResponseBuilder(HttpResponse()).code(201).data(obj).success()

The sink is anything with writable `status_code` and `content` attributes;
Django's HttpResponse is the one used throughout this project. Each terminal
action (success, error, pending, rejected, failed) is meant to be called once
per builder. Calling a second one rewrites the sink, which is caller misuse.
"""
from __future__ import annotations

import json
import logging
from typing import Any

from django.core.serializers.json import DjangoJSONEncoder

from .enums import ResponseStatus, StatusCode
from .envelope import ABSENT, ResponseEnvelope
from .types import ErrorObject, HeadersObject, MetaObject

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"

# Written underneath the envelope by error(); the envelope's own keys win.
ERROR_DEFAULTS = {
    "code": 500,
    "status": ResponseStatus.ERROR.value,
    "message": "Internal Server Error!",
}


class ResponseBuilder:
    def __init__(
        self,
        sink,
        code: int = StatusCode.OK,
        status: str = ResponseStatus.SUCCESS,
        message: str = "",
        data: Any = ABSENT,
        errors: list[ErrorObject] | None = None,
    ):
        self._sink = sink
        self._envelope = ResponseEnvelope()
        self._apply(code, status, message, data, errors)

    def _apply(self, code, status, message, data, errors):
        self.code(code).status(status).message(message).data(data).errors(
            errors if errors is not None else []
        )

    @property
    def envelope(self) -> ResponseEnvelope:
        return self._envelope

    @property
    def sink(self):
        return self._sink

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------

    def code(self, value: int) -> ResponseBuilder:
        self._envelope.code = value
        return self

    def status(self, value: str) -> ResponseBuilder:
        self._envelope.status = value
        return self

    def message(self, value: str) -> ResponseBuilder:
        self._envelope.message = value
        return self

    def data(self, value: Any) -> ResponseBuilder:
        self._envelope.data = value
        return self

    def errors(self, value: list[ErrorObject]) -> ResponseBuilder:
        self._envelope.errors = value
        return self

    def meta(self, value: MetaObject) -> ResponseBuilder:
        self._envelope.meta = value
        return self

    def headers(self, value: HeadersObject) -> ResponseBuilder:
        self._envelope.headers = value
        return self

    # ------------------------------------------------------------------
    # Terminal actions
    # ------------------------------------------------------------------

    def success(self):
        return self._finish(ResponseStatus.SUCCESS)

    def pending(self):
        return self._finish(ResponseStatus.PENDING)

    def rejected(self):
        return self._finish(ResponseStatus.REJECTED)

    def failed(self):
        return self._finish(ResponseStatus.FAILED)

    def error(self):
        """Send an error envelope.

        The body starts from ERROR_DEFAULTS and is overlaid with the
        serialized envelope, so an explicitly set code/message is kept.
        The transport status is always the envelope's code.
        """
        self._envelope.status = ResponseStatus.ERROR.value
        body = {**ERROR_DEFAULTS, **self._envelope.to_dict()}
        return self._write(body)

    def _finish(self, status: ResponseStatus):
        self._envelope.status = status.value
        return self._write(self._envelope.to_dict())

    def _write(self, body: dict[str, Any]):
        sink = self._sink
        sink.status_code = int(self._envelope.code)
        if hasattr(sink, "__setitem__"):
            sink["Content-Type"] = JSON_CONTENT_TYPE
        sink.content = json.dumps(body, cls=DjangoJSONEncoder)
        logger.debug("Wrote %s envelope with code %s", body["status"], sink.status_code)
        return sink


def responder(
    sink,
    code: int = StatusCode.OK,
    status: str = ResponseStatus.SUCCESS,
    message: str = "",
    data: Any = ABSENT,
    errors: list[ErrorObject] | None = None,
) -> ResponseBuilder:
    """Create a builder bound to `sink`; equivalent to calling the constructor."""
    return ResponseBuilder(sink, code, status, message, data, errors)
