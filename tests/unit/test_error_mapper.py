"""Unit tests for response classification."""

import json

from constantcontact.exceptions import ApiError
from constantcontact.utils.error_mapper import classify, parse_error_body
from constantcontact.utils.http import RawResponse

URL = "https://api.constantcontact.com/v2/contacts/42"


def test_success_is_not_an_error():
    assert classify(RawResponse(200, {}, "{}"), URL) is None
    assert classify(RawResponse(204, {}, ""), URL) is None


def test_structured_error_array():
    body = json.dumps([{"error_key": "not_found", "error_message": "no such contact"}])
    error = classify(RawResponse(404, {}, body), URL)

    assert isinstance(error, ApiError)
    assert error.status_code == 404
    assert error.error_key == "not_found"
    assert error.error_message == "no such contact"
    assert error.message == "no such contact"
    assert error.url == URL
    assert len(error.errors) == 1


def test_structured_error_object():
    body = json.dumps({"error_key": "not_found", "error_message": "no such contact"})
    error = classify(RawResponse(404, {}, body), URL)
    assert error.error_key == "not_found"


def test_errors_wrapper_keeps_all_entries_first_wins():
    body = json.dumps(
        {
            "errors": [
                {"error_key": "json.field.invalid", "error_message": "bad email"},
                {"error_key": "json.field.missing", "error_message": "missing lists"},
            ]
        }
    )
    error = classify(RawResponse(400, {}, body), URL)
    assert error.error_key == "json.field.invalid"
    assert [e.error_key for e in error.errors] == ["json.field.invalid", "json.field.missing"]


def test_unparseable_body_falls_back_to_status_message():
    error = classify(RawResponse(502, {}, "<html>Bad Gateway</html>"), URL)
    assert error.status_code == 502
    assert error.error_key is None
    assert error.error_message == "HTTP 502 Bad Gateway"
    assert error.response_body == "<html>Bad Gateway</html>"


def test_empty_body_falls_back_to_status_message():
    error = classify(RawResponse(401, {}, ""), URL)
    assert error.error_message == "HTTP 401 Unauthorized"
    assert error.errors == ()


def test_unknown_status_code():
    error = classify(RawResponse(599, {}, ""), URL)
    assert error.error_message == "HTTP 599 Unexpected status"


def test_parse_error_body_skips_junk_entries():
    body = json.dumps(["oops", {}, {"error_message": "only a message"}])
    errors = parse_error_body(body)
    assert len(errors) == 1
    assert errors[0].error_key is None
    assert errors[0].error_message == "only a message"
