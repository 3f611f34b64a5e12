"""Classification of raw API responses into success or ``ApiError``.

Constant Contact reports failures as a JSON array of
``{"error_key": ..., "error_message": ...}`` objects; some gateways
answer with a single object instead. Both shapes are accepted. When the
body is absent or not JSON, the error message is derived from the
status code.
"""

import json
import logging
from http import HTTPStatus
from typing import Any, List, Optional

from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ApiError
from ..models.base_models import ErrorDetail
from .http.transport import RawResponse
from .security import sanitize_url

logger = logging.getLogger(__name__)


def parse_error_body(body: str) -> List[ErrorDetail]:
    """Parse a structured error body.

    :param body: Raw response body
    :type body: str
    :return: Parsed errors, empty when the body carries none
    :rtype: List[ErrorDetail]
    """
    if not body or not body.strip():
        return []
    try:
        payload: Any = json.loads(body)
    except ValueError:
        return []

    if isinstance(payload, dict):
        # {"errors": [...]} wrapper seen on some endpoints
        payload = payload.get("errors", payload)
    items = payload if isinstance(payload, list) else [payload]

    errors = []
    for item in items:
        if not isinstance(item, dict):
            continue
        try:
            detail = ErrorDetail.model_validate(item)
        except PydanticValidationError:
            continue
        if detail.error_key or detail.error_message:
            errors.append(detail)
    return errors


def _status_message(status_code: int) -> str:
    try:
        phrase = HTTPStatus(status_code).phrase
    except ValueError:
        phrase = "Unexpected status"
    return f"HTTP {status_code} {phrase}"


def classify(response: RawResponse, url: str) -> Optional[ApiError]:
    """Classify a response.

    :param response: Raw response from the transport
    :type response: RawResponse
    :param url: Request URL, recorded on the error
    :type url: str
    :return: None for a 2xx response, otherwise the ``ApiError`` describing it
    :rtype: Optional[ApiError]
    """
    if response.is_success():
        return None

    errors = parse_error_body(response.body)
    first = errors[0] if errors else None
    error_key = first.error_key if first else None
    error_message = first.error_message if first else None
    if not error_message:
        error_message = _status_message(response.status_code)

    logger.debug(
        "API error %d for %s: %s",
        response.status_code,
        sanitize_url(url),
        error_key or error_message,
    )
    return ApiError(
        status_code=response.status_code,
        url=url,
        error_key=error_key,
        error_message=error_message,
        errors=errors,
        response_body=response.body or None,
    )
