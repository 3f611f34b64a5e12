"""Credential redaction and secure logging.

This module keeps API keys and access tokens out of log output:
- URL sanitization for query-string credentials
- Header sanitization for bearer tokens
- A logging formatter that redacts both automatically
"""

import copy
import logging
import re
import sys
from typing import Any, Dict

# Patterns for sensitive data detection
SENSITIVE_PATTERNS = {
    "bearer_token": re.compile(r"Bearer\s+[A-Za-z0-9._~+/=-]+", re.IGNORECASE),
    "api_key": re.compile(r"(api_key=)[^&\s]+", re.IGNORECASE),
    "access_token": re.compile(r"(access_token=)[^&\s]+", re.IGNORECASE),
}

# Headers that should never be logged
SENSITIVE_HEADERS = {
    "authorization",
    "x-api-key",
    "cookie",
    "set-cookie",
}

# Query parameters that carry credentials
SENSITIVE_PARAMS = ("api_key", "access_token", "token", "client_secret")


def sanitize_string(value: str) -> str:
    """Redact credentials embedded in a free-form string.

    :param value: String to sanitize
    :type value: str
    :return: String with bearer tokens and credential parameters redacted
    :rtype: str
    """
    if not value:
        return value
    value = SENSITIVE_PATTERNS["bearer_token"].sub("Bearer <REDACTED>", value)
    value = SENSITIVE_PATTERNS["api_key"].sub(r"\1<REDACTED>", value)
    value = SENSITIVE_PATTERNS["access_token"].sub(r"\1<REDACTED>", value)
    return value


def sanitize_headers(headers: Dict[str, Any]) -> Dict[str, Any]:
    """Sanitize HTTP headers for logging.

    :param headers: Dictionary of HTTP headers
    :type headers: Dict[str, Any]
    :return: Copy of the headers with sensitive values redacted
    :rtype: Dict[str, Any]
    """
    if not headers:
        return headers
    sanitized = copy.deepcopy(dict(headers))
    for key, value in sanitized.items():
        if key.lower() in SENSITIVE_HEADERS:
            if isinstance(value, str) and value:
                sanitized[key] = f"<REDACTED:length={len(value)}>"
            else:
                sanitized[key] = "<REDACTED>"
        elif isinstance(value, str):
            sanitized[key] = sanitize_string(value)
    return sanitized


def sanitize_url(url: str) -> str:
    """Redact credential query parameters from a URL.

    :param url: URL to sanitize
    :type url: str
    :return: URL with credential parameter values replaced
    :rtype: str
    """
    if not url:
        return url
    for param in SENSITIVE_PARAMS:
        url = re.sub(rf"([?&]{param}=)[^&#\s]+", r"\1<REDACTED>", url, flags=re.IGNORECASE)
    return url


class SanitizingFormatter(logging.Formatter):
    """Formatter that redacts credentials from every record."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with credentials redacted.

        :param record: Log record to format
        :type record: logging.LogRecord
        :return: Sanitized log message
        :rtype: str
        """
        if record.args:
            try:
                record.msg = sanitize_string(record.msg % record.args)
                record.args = None
            except (TypeError, ValueError):
                record.msg = sanitize_string(str(record.msg))
        else:
            record.msg = sanitize_string(str(record.msg))
        return super().format(record)


# Global flag to track if logging has been set up
_LOGGING_CONFIGURED = False


def setup_secure_logging(level: str = "INFO") -> None:
    """Install a sanitizing stdout handler on the SDK logger.

    Only the ``constantcontact`` logger hierarchy is touched, so the
    host application's logging configuration is left alone. Repeated
    calls only adjust the level.

    :param level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    :type level: str
    """
    global _LOGGING_CONFIGURED

    sdk_logger = logging.getLogger("constantcontact")
    sdk_logger.setLevel(getattr(logging, level.upper()))

    if _LOGGING_CONFIGURED:
        sdk_logger.debug("Logging already configured, skipping duplicate setup")
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        SanitizingFormatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    sdk_logger.addHandler(handler)
    sdk_logger.propagate = False
    _LOGGING_CONFIGURED = True
