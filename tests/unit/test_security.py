"""Unit tests for credential redaction."""

import logging

from constantcontact.utils.security import (
    SanitizingFormatter,
    sanitize_headers,
    sanitize_string,
    sanitize_url,
)


def test_sanitize_url_redacts_api_key():
    url = "https://api.constantcontact.com/v2/contacts?limit=5&api_key=secret123"
    assert sanitize_url(url) == (
        "https://api.constantcontact.com/v2/contacts?limit=5&api_key=<REDACTED>"
    )


def test_sanitize_url_leaves_other_params():
    url = "https://api.constantcontact.com/v2/contacts?next=abc&limit=5"
    assert sanitize_url(url) == url


def test_sanitize_headers_redacts_authorization():
    headers = {"Authorization": "Bearer abc123", "Accept": "application/json"}
    sanitized = sanitize_headers(headers)

    assert sanitized["Authorization"] == "<REDACTED:length=13>"
    assert sanitized["Accept"] == "application/json"
    assert headers["Authorization"] == "Bearer abc123"


def test_sanitize_string_redacts_bearer_and_query_credentials():
    text = "sent Bearer abc.def-123 to /v2/contacts?access_token=xyz&api_key=k1"
    assert sanitize_string(text) == (
        "sent Bearer <REDACTED> to /v2/contacts?access_token=<REDACTED>&api_key=<REDACTED>"
    )


def test_formatter_redacts_interpolated_args():
    formatter = SanitizingFormatter("%(message)s")
    record = logging.LogRecord(
        name="constantcontact.test",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg="GET %s",
        args=("https://x.test/v2/lists?api_key=secret",),
        exc_info=None,
    )
    assert formatter.format(record) == "GET https://x.test/v2/lists?api_key=<REDACTED>"
