"""Constant Contact API client package.

This package provides Python bindings for the Constant Contact v2 REST
API: frozen Pydantic models for every JSON resource, and one service
class per resource family that builds the request URL, performs the HTTP
call and decodes the response.

:var __version__: Current package version
:type __version__: str
"""

__version__ = "0.1.0"

from .client import ConstantContact  # noqa: E402
from .exceptions import (  # noqa: E402
    ApiError,
    ConstantContactError,
    DecodeError,
    InvalidArgumentError,
    ServiceException,
    TransportError,
)

__all__ = [
    "__version__",
    "ConstantContact",
    "ConstantContactError",
    "InvalidArgumentError",
    "TransportError",
    "ApiError",
    "DecodeError",
    "ServiceException",
]
