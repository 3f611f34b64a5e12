"""Request URL construction from endpoint templates.

Endpoint templates carry ``{name}`` placeholders. :func:`build_url`
substitutes them and appends query filters; :func:`next_link_url` turns
a server-issued next link into a request URL without touching it.

Argument validation (non-empty identifiers, ``limit`` range) belongs to
the service layer and happens before these functions are called.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Any, List, Mapping, Optional, Tuple
from urllib.parse import quote, urlencode, urlsplit

from ..exceptions import InvalidArgumentError, MissingPathParamError
from ..models.base_models import format_timestamp

_PLACEHOLDER = re.compile(r"\{(\w+)\}")

LIMIT_PARAM = "limit"


def _format_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return format_timestamp(value)
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def expand_template(template: str, path_params: Optional[Mapping[str, Any]] = None) -> str:
    """Substitute every ``{name}`` placeholder in ``template``.

    Values are percent-encoded as single path segments.

    :param template: Endpoint template
    :type template: str
    :param path_params: Placeholder values keyed by placeholder name
    :type path_params: Optional[Mapping[str, Any]]
    :return: Template with all placeholders replaced
    :rtype: str
    :raises MissingPathParamError: If a placeholder has no value
    """
    params = path_params or {}

    def _replace(match: "re.Match[str]") -> str:
        name = match.group(1)
        value = params.get(name)
        if value is None or str(value) == "":
            raise MissingPathParamError(name, template)
        return quote(str(value), safe="")

    return _PLACEHOLDER.sub(_replace, template)


def encode_query(query_params: Optional[Mapping[str, Any]] = None) -> List[Tuple[str, str]]:
    """Order and stringify query parameters.

    Filters keep the order they were given in, ``limit`` goes last, and
    absent (``None``) values are dropped.

    :param query_params: Query parameters in method-defined order
    :type query_params: Optional[Mapping[str, Any]]
    :return: Ordered ``(name, value)`` pairs
    :rtype: List[Tuple[str, str]]
    """
    if not query_params:
        return []
    pairs = [
        (name, _format_query_value(value))
        for name, value in query_params.items()
        if value is not None and name != LIMIT_PARAM
    ]
    limit = query_params.get(LIMIT_PARAM)
    if limit is not None:
        pairs.append((LIMIT_PARAM, _format_query_value(limit)))
    return pairs


def build_url(
    base_url: str,
    template: str,
    path_params: Optional[Mapping[str, Any]] = None,
    query_params: Optional[Mapping[str, Any]] = None,
) -> str:
    """Build a fully qualified request URL from an endpoint template.

    :param base_url: API base URL without trailing slash
    :type base_url: str
    :param template: Endpoint template, possibly with a fixed query string
    :type template: str
    :param path_params: Placeholder values
    :type path_params: Optional[Mapping[str, Any]]
    :param query_params: Query filters in method-defined order
    :type query_params: Optional[Mapping[str, Any]]
    :return: Request URL
    :rtype: str
    :raises MissingPathParamError: If a placeholder has no value

    .. example::
       >>> build_url("https://api.constantcontact.com",
       ...           "/v2/contacts/{contactId}/tracking/clicks",
       ...           {"contactId": "42"},
       ...           {"created_since": "2024-01-01", "limit": 50})
       'https://api.constantcontact.com/v2/contacts/42/tracking/clicks?created_since=2024-01-01&limit=50'
    """
    url = base_url + expand_template(template, path_params)
    pairs = encode_query(query_params)
    if pairs:
        separator = "&" if "?" in url else "?"
        url = url + separator + urlencode(pairs)
    return url


def next_link_url(base_url: str, next_link: str) -> str:
    """Build the request URL for a server-issued next link.

    The link is used verbatim as the request path. An absolute link is
    accepted only when it points at the same scheme and host as
    ``base_url``, since credentials are attached to every request.

    :param base_url: API base URL without trailing slash
    :type base_url: str
    :param next_link: ``next_link`` value from a previous page
    :type next_link: str
    :return: Request URL
    :rtype: str
    :raises InvalidArgumentError: If the link is empty or points at another host
    """
    if not next_link:
        raise InvalidArgumentError("next_link must not be empty", argument="next_link")
    link = urlsplit(next_link)
    if link.scheme or link.netloc:
        base = urlsplit(base_url)
        if (link.scheme.lower(), link.netloc.lower()) != (base.scheme.lower(), base.netloc.lower()):
            raise InvalidArgumentError(
                "next_link must point at the API host",
                argument="next_link",
                value=f"{link.scheme}://{link.netloc}",
            )
        return next_link
    if not next_link.startswith("/"):
        next_link = "/" + next_link
    return base_url + next_link
