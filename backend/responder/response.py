"""
One-call envelope responses for views that don't go through the middleware.

    return api_response(data=trace, meta={"page": 1})
    return api_error("trace_id is required", errors=[{"field": "trace_id"}])
"""
from django.http import HttpResponse

from .builder import JSON_CONTENT_TYPE, ResponseBuilder
from .enums import StatusMessage
from .envelope import ABSENT


def api_response(data=ABSENT, meta=None, code=200, message=""):
    """Return a success response with standard envelope."""
    builder = ResponseBuilder(HttpResponse(content_type=JSON_CONTENT_TYPE), code, message=message, data=data)
    if meta:
        builder.meta(meta)
    return builder.success()


def api_error(message=None, code=400, errors=None):
    """Return a failed response; message defaults to the code's reason phrase."""
    if message is None:
        message = StatusMessage.for_code(code)
    builder = ResponseBuilder(HttpResponse(content_type=JSON_CONTENT_TYPE), code, message=message, errors=errors)
    return builder.failed()
