from .builder import ResponseBuilder, responder
from .enums import ResponseStatus, StatusCode, StatusMessage
from .envelope import ABSENT, ResponseEnvelope
from .errors import ErrorNormalizer, transform_error
from .middleware import ResponderMiddleware

__all__ = [
    "ABSENT",
    "ErrorNormalizer",
    "ResponderMiddleware",
    "ResponseBuilder",
    "ResponseEnvelope",
    "ResponseStatus",
    "StatusCode",
    "StatusMessage",
    "responder",
    "transform_error",
]
