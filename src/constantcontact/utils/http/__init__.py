"""HTTP utilities public API (barrel module).

This package provides:
- HTTP client manager and timeout/limit helpers
- The transport contract and its httpx implementation
- The raw response wrapper handed to the error mapper

Recommended import pattern for consumers:
    from constantcontact.utils.http import HttpxTransport, RawResponse

This keeps call sites stable even if internal modules are reorganized.
"""

from .client_manager import (
    HTTPClientManager,
    create_limits,
    create_timeout,
    http_client_manager,
)
from .transport import HttpxTransport, RawResponse, Transport

__all__ = [
    "HTTPClientManager",
    "http_client_manager",
    "create_timeout",
    "create_limits",
    "HttpxTransport",
    "RawResponse",
    "Transport",
]
