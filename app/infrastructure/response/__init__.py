"""Response envelope helpers"""

from .response_formatter import (
    standard_response,
    error_response,
    not_found_response,
)

__all__ = [
    "standard_response",
    "error_response",
    "not_found_response",
]
