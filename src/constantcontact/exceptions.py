"""Structured exception classes for the Constant Contact SDK."""

import json
from typing import Any, Dict, Optional, Sequence


class ConstantContactError(Exception):
    """Base exception for all Constant Contact SDK errors.

    This exception serves as the parent class for all SDK specific
    exceptions, providing a consistent interface for error handling
    across the service layer.

    :param message: Human-readable error message
    :param code: Optional error code for programmatic handling
    :param details: Optional dictionary containing additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the exception with message, code, and details."""
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format.

        :return: Dictionary containing error code, message, and details
        """
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self) -> str:
        """Convert exception to JSON string.

        :return: JSON-encoded string representation of the exception
        """
        return json.dumps(self.to_dict(), default=str)


class InvalidArgumentError(ConstantContactError, ValueError):
    """Raised when a caller-supplied argument violates a precondition.

    Raised before any request is built, so the network is never touched.

    :param message: Description of the violated precondition
    :param argument: Optional name of the offending argument
    :param value: Optional value that was rejected
    """

    def __init__(
        self,
        message: str,
        argument: Optional[str] = None,
        value: Optional[Any] = None,
    ):
        """Initialize invalid argument error with message and argument info."""
        details: Dict[str, Any] = {}
        if argument:
            details["argument"] = argument
        if value is not None:
            details["value"] = str(value)
        super().__init__(message=message, code="INVALID_ARGUMENT", details=details)
        self.argument = argument


class MissingPathParamError(InvalidArgumentError):
    """Raised when an endpoint template placeholder has no value.

    :param placeholder: Name of the unresolved placeholder
    :param template: Endpoint template being expanded
    """

    def __init__(self, placeholder: str, template: str):
        """Initialize missing path parameter error."""
        super().__init__(
            f"No value supplied for path parameter '{placeholder}' in '{template}'",
            argument=placeholder,
        )
        self.code = "MISSING_PATH_PARAM"
        self.details["template"] = template
        self.placeholder = placeholder
        self.template = template


class ConfigurationError(ConstantContactError):
    """Raised for configuration-related errors.

    :param message: Description of the configuration error
    :param setting: Optional name of the problematic setting
    """

    def __init__(self, message: str, setting: Optional[str] = None):
        """Initialize configuration error with message and optional setting."""
        details = {}
        if setting:
            details["setting"] = setting
        super().__init__(message=message, code="CONFIGURATION_ERROR", details=details)


class TransportError(ConstantContactError):
    """Raised when the HTTP exchange itself fails.

    Connection refused, DNS failure, timeouts and protocol errors all
    end up here. No response was received from the server.

    :param message: Description of the transport failure
    :param url: Request URL
    :param method: HTTP method
    :param original_error: Optional underlying exception
    """

    def __init__(
        self,
        message: str,
        url: Optional[str] = None,
        method: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        """Initialize transport error with request context."""
        details: Dict[str, Any] = {}
        if url:
            details["url"] = url
        if method:
            details["method"] = method
        if original_error:
            details["error_type"] = type(original_error).__name__
        super().__init__(message=message, code="TRANSPORT_ERROR", details=details)
        self.url = url
        self.method = method
        self.original_error = original_error


class ApiError(ConstantContactError):
    """Raised for non-2xx responses from the API.

    :param status_code: HTTP status code from the API response
    :param url: Request URL that produced the response
    :param error_key: Optional machine-readable key of the first error
    :param error_message: Optional human-readable message of the first error
    :param errors: All structured errors parsed from the body
    :param response_body: Optional raw response body
    """

    def __init__(
        self,
        status_code: int,
        url: str,
        error_key: Optional[str] = None,
        error_message: Optional[str] = None,
        errors: Sequence[Any] = (),
        response_body: Optional[str] = None,
    ):
        """Initialize API error with status and parsed error detail."""
        message = error_message or f"HTTP {status_code} returned by {url}"
        details: Dict[str, Any] = {"status_code": status_code, "url": url}
        if error_key:
            details["error_key"] = error_key
        if response_body:
            details["response_body"] = response_body
        super().__init__(message=message, code="API_ERROR", details=details)
        self.status_code = status_code
        self.url = url
        self.error_key = error_key
        self.error_message = error_message
        self.errors = tuple(errors)
        self.response_body = response_body


class DecodeError(ConstantContactError):
    """Raised when a successful response body cannot be decoded.

    :param message: Description of the decode failure
    :param target: Optional name of the type being decoded
    :param original_error: Optional underlying exception
    """

    def __init__(
        self,
        message: str,
        target: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        """Initialize decode error with target type info."""
        details = {}
        if target:
            details["target"] = target
        super().__init__(message=message, code="DECODE_ERROR", details=details)
        self.target = target
        self.original_error = original_error


class ServiceException(ConstantContactError):
    """Single failure type surfaced by every service operation.

    Wraps an ``ApiError``, ``TransportError`` or ``DecodeError`` together
    with the request URL. The original failure is available as ``cause``
    and as ``__cause__``.

    :param cause: The underlying SDK error
    :param url: Request URL of the failed operation
    """

    def __init__(self, cause: ConstantContactError, url: Optional[str] = None):
        """Initialize the service exception from its cause."""
        details: Dict[str, Any] = {"cause": cause.to_dict()}
        if url:
            details["url"] = url
        super().__init__(message=cause.message, code="SERVICE_ERROR", details=details)
        self.cause = cause
        self.url = url

    @property
    def status_code(self) -> Optional[int]:
        """HTTP status of the failed call, when the server answered."""
        return getattr(self.cause, "status_code", None)

    @property
    def errors(self) -> tuple:
        """Structured error details reported by the server, if any."""
        return getattr(self.cause, "errors", ())
