"""
Middleware that gives every request its own ResponseBuilder.

Views finish with the builder instead of constructing a response:

    def health(request):
        return request.responder.data({"ok": True}).success()

Uncaught view exceptions are logged and rendered as an error envelope
unless RESPONDER["HANDLE_EXCEPTIONS"] is False. Django's own client-error
exceptions (Http404, PermissionDenied, BadRequest, SuspiciousOperation)
keep their 4xx code and are rendered as failed envelopes instead.
"""
import json
import logging

from django.core.exceptions import BadRequest, PermissionDenied, SuspiciousOperation
from django.core.serializers.json import DjangoJSONEncoder
from django.http import Http404, HttpResponse

from .builder import JSON_CONTENT_TYPE, ResponseBuilder
from .conf import get_setting
from .enums import ResponseStatus, StatusCode, StatusMessage
from .errors import ErrorNormalizer

logger = logging.getLogger(__name__)

# Checked in order; SuspiciousOperation subclasses must not be shadowed.
CLIENT_ERRORS = (
    (Http404, StatusCode.NOT_FOUND),
    (PermissionDenied, StatusCode.FORBIDDEN),
    (BadRequest, StatusCode.BAD_REQUEST),
    (SuspiciousOperation, StatusCode.BAD_REQUEST),
)


class ResponderMiddleware:
    """Attach a fresh builder, bound to a fresh HttpResponse, to each request."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        sink = HttpResponse(content_type=JSON_CONTENT_TYPE)
        builder = ResponseBuilder(sink, StatusCode.OK, ResponseStatus.SUCCESS)
        setattr(request, get_setting("ATTRIBUTE"), builder)
        return self.get_response(request)

    def process_exception(self, request, exception):
        if not get_setting("HANDLE_EXCEPTIONS"):
            return None

        builder = getattr(request, get_setting("ATTRIBUTE"), None)
        if builder is None:
            return None

        # Start over on the same sink so nothing the view staged leaks out
        fresh = ResponseBuilder(builder.sink)

        code = _client_error_code(exception)
        if code is not None:
            logger.warning("%s in %s %s: %s", type(exception).__name__, request.method, request.path, exception)
            return (
                fresh.code(code)
                .message(StatusMessage.for_code(code))
                .errors([ErrorNormalizer.transform(exception, include_stack_trace=False)])
                .failed()
            )

        logger.error(
            "Unhandled exception in %s %s", request.method, request.path,
            exc_info=(type(exception), exception, exception.__traceback__),
        )
        return (
            fresh.code(StatusCode.INTERNAL_SERVER_ERROR)
            .message("Internal Server Error!")
            .errors([_error_record(exception)])
            .error()
        )


def _client_error_code(exception):
    for exc_type, code in CLIENT_ERRORS:
        if isinstance(exception, exc_type):
            return code
    return None


def _error_record(exception):
    include_stack_trace = get_setting("INCLUDE_STACK_TRACE")
    if get_setting("DEBUG_ERRORS"):
        record = ErrorNormalizer.transform(exception, include_stack_trace, debug=True)
        return {key: _json_safe(value) for key, value in record.items()}
    return ErrorNormalizer.transform(exception, include_stack_trace)


def _json_safe(value):
    # Debug records carry raw attributes; anything the encoder rejects goes out as repr
    try:
        json.dumps(value, cls=DjangoJSONEncoder)
    except (TypeError, ValueError):
        return repr(value)
    return value
