"""Shared request/response plumbing for all Constant Contact services.

Every service operation follows the same steps:

1. Validate arguments, raising
   :class:`~constantcontact.exceptions.InvalidArgumentError` before any
   request is built.
2. Build the request URL from an endpoint template, or take a next link
   verbatim.
3. Send the request through the transport.
4. Classify the response; transport failures, API errors and decode
   failures are all re-raised as
   :class:`~constantcontact.exceptions.ServiceException`.
5. Decode the body into the declared result type.
"""

import json
import logging
from functools import lru_cache
from typing import Any, Callable, Iterator, Mapping, Optional, TypeVar, Union

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from ..config.endpoints import Endpoints
from ..config.settings import settings as default_settings
from ..exceptions import (
    ConstantContactError,
    DecodeError,
    InvalidArgumentError,
    ServiceException,
)
from ..models.base_models import CTCTModel
from ..utils.error_mapper import classify
from ..utils.http import HttpxTransport, RawResponse, Transport, create_timeout
from ..utils.security import sanitize_url
from ..utils.url_builder import build_url, next_link_url

logger = logging.getLogger(__name__)

P = TypeVar("P")


@lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", None) or str(target)


def iter_pages(first_page: Optional[P], fetch_next: Callable[[str], P]) -> Iterator[P]:
    """Yield ``first_page`` and every page reachable through its next links.

    :param first_page: Page returned by a list operation
    :type first_page: Optional[P]
    :param fetch_next: Operation that fetches a page from a next link
    :type fetch_next: Callable[[str], P]
    :return: Iterator over pages, stopping at the first page without a next link
    :rtype: Iterator[P]

    .. example::
       >>> for page in iter_pages(svc.get_bounces("1100"), svc.next_bounces):
       ...     handle(page.results)
    """
    page = first_page
    while page is not None:
        yield page
        next_link = getattr(page, "next_link", None)
        if not next_link:
            return
        page = fetch_next(next_link)


class BaseService:
    """Base class composing URL building, transport, error mapping and decoding.

    Services hold no state besides the credentials, the base URL and the
    transport, so one instance can be shared between threads when the
    transport allows it (the default httpx transport does).

    :param api_key: Constant Contact API key
    :type api_key: Optional[str]
    :param access_token: OAuth2 access token
    :type access_token: Optional[str]
    :param transport: Transport to use; an :class:`HttpxTransport` built
        from the credentials otherwise
    :type transport: Optional[Transport]
    :param base_url: API base URL; the configured one otherwise
    :type base_url: Optional[str]
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        access_token: Optional[str] = None,
        transport: Optional[Transport] = None,
        base_url: Optional[str] = None,
    ):
        self.api_key = api_key
        self.access_token = access_token
        self.base_url = (base_url or default_settings.base_url).rstrip("/")
        self.transport: Transport = transport or HttpxTransport(
            api_key=api_key,
            access_token=access_token,
            timeout=create_timeout(
                connect=default_settings.connect_timeout,
                read=default_settings.read_timeout,
            ),
            user_agent=default_settings.user_agent,
        )

    def close(self) -> None:
        """Close the connection pool of the transport, when it has one."""
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    # Validation

    @staticmethod
    def _require_id(value: Optional[str], argument: str) -> str:
        if value is None or not str(value).strip():
            raise InvalidArgumentError(
                f"{argument} must be a non-empty string", argument=argument, value=value
            )
        return str(value)

    @staticmethod
    def _require_model(value: Any, argument: str) -> Any:
        if value is None:
            raise InvalidArgumentError(f"{argument} must not be None", argument=argument)
        return value

    @staticmethod
    def _check_limit(limit: Optional[int]) -> Optional[int]:
        if limit is None:
            return None
        if (
            isinstance(limit, bool)
            or not isinstance(limit, int)
            or not Endpoints.MIN_LIMIT <= limit <= Endpoints.MAX_LIMIT
        ):
            raise InvalidArgumentError(
                f"limit must be an integer between {Endpoints.MIN_LIMIT} "
                f"and {Endpoints.MAX_LIMIT}",
                argument="limit",
                value=limit,
            )
        return limit

    # URL building

    def _url(
        self,
        template: str,
        path_params: Optional[Mapping[str, Any]] = None,
        query_params: Optional[Mapping[str, Any]] = None,
    ) -> str:
        return build_url(self.base_url, template, path_params, query_params)

    def _next_url(self, next_link: str) -> str:
        if next_link is None or not str(next_link).strip():
            raise InvalidArgumentError(
                "next_link must be a non-empty string", argument="next_link"
            )
        return next_link_url(self.base_url, next_link)

    # Request execution

    def _execute(
        self,
        method: str,
        url: str,
        body: Optional[Union[str, bytes]] = None,
    ) -> RawResponse:
        """Send a request and raise ``ServiceException`` for any failure.

        :param method: HTTP method
        :type method: str
        :param url: Request URL
        :type url: str
        :param body: Optional JSON request body
        :type body: Optional[Union[str, bytes]]
        :return: A successful raw response
        :rtype: RawResponse
        :raises ServiceException: On transport failure or non-2xx status
        """
        logger.debug("%s %s", method, sanitize_url(url))
        try:
            response = self.transport.send(method, url, body=body)
        except ConstantContactError as e:
            raise ServiceException(e, url=url) from e

        error = classify(response, url)
        if error is not None:
            raise ServiceException(error, url=url) from error
        return response

    def _decode(self, response: RawResponse, target: Any, url: str, allow_empty: bool = False) -> Any:
        """Decode a successful response body into ``target``.

        :param response: Successful raw response
        :type response: RawResponse
        :param target: Model class or type to decode into
        :type target: Any
        :param url: Request URL, recorded on failures
        :type url: str
        :param allow_empty: Return None for an empty body instead of failing
        :type allow_empty: bool
        :return: Decoded value, or None for an allowed empty body
        :rtype: Any
        :raises ServiceException: If the body is empty or does not decode
        """
        if not response.has_data():
            if allow_empty:
                return None
            error = DecodeError(
                f"Empty response body, expected {_type_name(target)}",
                target=_type_name(target),
            )
            raise ServiceException(error, url=url) from error
        try:
            return _adapter(target).validate_json(response.body)
        except PydanticValidationError as e:
            error = DecodeError(
                f"Response body does not match {_type_name(target)}: "
                f"{e.error_count()} error(s)",
                target=_type_name(target),
                original_error=e,
            )
            raise ServiceException(error, url=url) from e

    def _get(self, url: str, target: Any, allow_empty: bool = False) -> Any:
        response = self._execute("GET", url)
        return self._decode(response, target, url, allow_empty=allow_empty)

    def _post(self, url: str, payload: Any, target: Any) -> Any:
        response = self._execute("POST", url, body=self._encode(payload))
        return self._decode(response, target, url)

    def _put(self, url: str, payload: Any, target: Any) -> Any:
        response = self._execute("PUT", url, body=self._encode(payload))
        return self._decode(response, target, url)

    def _delete(self, url: str) -> bool:
        response = self._execute("DELETE", url)
        return response.status_code == 204

    @staticmethod
    def _encode(payload: Any) -> str:
        if isinstance(payload, CTCTModel):
            return payload.to_json()
        if isinstance(payload, (list, tuple)):
            return json.dumps(
                [
                    item.to_json_dict() if isinstance(item, CTCTModel) else item
                    for item in payload
                ]
            )
        return json.dumps(payload)
