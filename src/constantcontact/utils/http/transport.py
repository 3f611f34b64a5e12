"""Blocking HTTP transport for the Constant Contact API.

The transport performs one HTTP exchange and hands back the raw status,
headers and body. It never interprets the body: error classification is
done by :mod:`constantcontact.utils.error_mapper` and decoding by the
services. Network failures surface as
:class:`~constantcontact.exceptions.TransportError`.

Credentials are attached here: the access token as a bearer
``Authorization`` header and the API key as the ``api_key`` query
parameter.
"""

import logging
import threading
from typing import Dict, Mapping, Optional, Protocol, Union

import httpx

from ...exceptions import TransportError
from ..security import sanitize_headers, sanitize_url
from .client_manager import http_client_manager

logger = logging.getLogger(__name__)


class RawResponse:
    """Status, headers and body of one HTTP response.

    :param status_code: HTTP status code
    :type status_code: int
    :param headers: Response headers
    :type headers: Mapping[str, str]
    :param body: Response body as text
    :type body: str
    """

    def __init__(
        self,
        status_code: int,
        headers: Optional[Mapping[str, str]] = None,
        body: str = "",
    ):
        self.status_code = status_code
        self.headers: Dict[str, str] = dict(headers or {})
        self.body = body or ""

    def __repr__(self) -> str:
        return f"RawResponse(status_code={self.status_code}, body_length={len(self.body)})"

    def is_success(self) -> bool:
        """Check if the response indicates success (2xx status code).

        :return: True if status code is in 200-299 range
        :rtype: bool
        """
        return 200 <= self.status_code < 300

    def has_data(self) -> bool:
        """Whether the body holds anything besides whitespace."""
        return bool(self.body.strip())


class Transport(Protocol):
    """Minimal contract the services need from an HTTP client."""

    def send(
        self,
        method: str,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[Union[str, bytes]] = None,
    ) -> RawResponse:
        """Perform one request and return the raw response."""
        ...


class HttpxTransport:
    """Transport backed by an ``httpx.Client``.

    Without a caller-supplied client the transport creates its own
    through the client manager on first use and owns it: :meth:`close`
    closes that client only, and a later request opens a fresh one.

    :param api_key: Constant Contact API key
    :type api_key: Optional[str]
    :param access_token: OAuth2 access token
    :type access_token: Optional[str]
    :param client: Optional caller-owned client, never closed by the transport
    :type client: Optional[httpx.Client]
    :param timeout: Optional timeout for the owned client
    :type timeout: Optional[httpx.Timeout]
    :param user_agent: User-Agent header value
    :type user_agent: str
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        access_token: Optional[str] = None,
        client: Optional[httpx.Client] = None,
        timeout: Optional[httpx.Timeout] = None,
        user_agent: str = "constantcontact-sdk-python",
    ):
        self.api_key = api_key
        self.access_token = access_token
        self.user_agent = user_agent
        self._client = client
        self._timeout = timeout
        self._owned_client: Optional[httpx.Client] = None
        self._lock = threading.Lock()

    def _default_headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/json",
            "User-Agent": self.user_agent,
        }
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    def _get_client(self) -> httpx.Client:
        if self._client is not None:
            return self._client
        with self._lock:
            if self._owned_client is None or self._owned_client.is_closed:
                self._owned_client = http_client_manager.create_client(timeout=self._timeout)
            return self._owned_client

    def _request_url(self, url: str) -> httpx.URL:
        request_url = httpx.URL(url)
        if self.api_key:
            # Merged into the existing query so filters and next tokens survive
            request_url = request_url.copy_merge_params({"api_key": self.api_key})
        return request_url

    def send(
        self,
        method: str,
        url: str,
        headers: Optional[Mapping[str, str]] = None,
        body: Optional[Union[str, bytes]] = None,
    ) -> RawResponse:
        """Perform one request.

        :param method: HTTP method
        :type method: str
        :param url: Fully qualified request URL, query string included
        :type url: str
        :param headers: Extra headers, overriding the defaults
        :type headers: Optional[Mapping[str, str]]
        :param body: Optional JSON request body
        :type body: Optional[Union[str, bytes]]
        :return: The raw response
        :rtype: RawResponse
        :raises TransportError: If no response could be obtained
        """
        request_headers = self._default_headers()
        if body is not None:
            request_headers["Content-Type"] = "application/json"
        request_headers.update(headers or {})

        logger.debug(
            "%s %s headers=%s",
            method,
            sanitize_url(url),
            sanitize_headers(request_headers),
        )
        try:
            response = self._get_client().request(
                method,
                self._request_url(url),
                headers=request_headers,
                content=body,
            )
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, sanitize_url(url), e)
            raise TransportError(
                f"{method} request failed: {e}",
                url=url,
                method=method,
                original_error=e,
            ) from e

        logger.debug("%s %s -> %d", method, sanitize_url(url), response.status_code)
        return RawResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.text,
        )

    def close(self) -> None:
        """Close the owned client, if one was opened."""
        with self._lock:
            client, self._owned_client = self._owned_client, None
        if client is not None:
            http_client_manager.close_client(client)
