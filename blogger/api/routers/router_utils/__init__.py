"""Router helpers: error mapping and request payload parsing."""

from .error_handling import handle_blog_errors, register_exception_handlers
from .payload_utils import expand_form_keys, parse_payload, payload_of

__all__ = [
    "expand_form_keys",
    "handle_blog_errors",
    "parse_payload",
    "payload_of",
    "register_exception_handlers",
]
