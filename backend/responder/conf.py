"""Library settings, read from the RESPONDER dict in Django settings."""
from django.conf import settings

DEFAULTS = {
    # Turn uncaught view exceptions into error envelopes
    "HANDLE_EXCEPTIONS": True,
    # Copy every attribute of an exception into its error record
    "DEBUG_ERRORS": False,
    "INCLUDE_STACK_TRACE": False,
    # Request attribute the middleware attaches the builder to
    "ATTRIBUTE": "responder",
}


def get_setting(name):
    overrides = getattr(settings, "RESPONDER", None) or {}
    if name in overrides:
        return overrides[name]
    return DEFAULTS[name]
