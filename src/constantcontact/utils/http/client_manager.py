"""HTTP client manager with connection pooling and lifecycle management.

This module provides a process-wide registry that creates and closes
``httpx.Client`` instances. Each transport owns the client it was given
by the manager, so closing one SDK client never affects another.
:meth:`HTTPClientManager.close_all` remains available for process
shutdown. ``httpx.Client`` is safe to share between threads.
"""

import logging
import threading
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)


def create_timeout(
    connect: float = 5.0,
    read: float = 30.0,
    write: float = 10.0,
    pool: float = 5.0,
) -> httpx.Timeout:
    """Create an ``httpx.Timeout`` with per-phase values in seconds."""
    return httpx.Timeout(connect=connect, read=read, write=write, pool=pool)


def create_limits(
    max_keepalive_connections: int = 10,
    max_connections: int = 20,
    keepalive_expiry: float = 30.0,
) -> httpx.Limits:
    """Create ``httpx.Limits`` for a connection pool."""
    return httpx.Limits(
        max_keepalive_connections=max_keepalive_connections,
        max_connections=max_connections,
        keepalive_expiry=keepalive_expiry,
    )


class HTTPClientManager:
    """Creates HTTP clients and tracks the ones still open.

    This singleton hands out a new client per call, configured with the
    default timeout and pool limits unless overridden, and remembers it
    until it is closed through :meth:`close_client` or :meth:`close_all`.
    """

    _instance: Optional["HTTPClientManager"] = None
    _lock = threading.Lock()

    def __new__(cls):
        """Ensure singleton pattern - only one instance exists.

        :return: The single instance of HTTPClientManager
        :rtype: HTTPClientManager
        """
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize default timeout and pool limits once."""
        if not hasattr(self, "_initialized"):
            self._clients: Dict[int, httpx.Client] = {}
            self._default_timeout = create_timeout()
            self._default_limits = create_limits()
            self._initialized = True

    @property
    def open_clients(self) -> int:
        """Number of clients created and not closed yet."""
        with self._lock:
            return len(self._clients)

    def create_client(
        self,
        timeout: Optional[httpx.Timeout] = None,
        limits: Optional[httpx.Limits] = None,
        **kwargs: Any,
    ) -> httpx.Client:
        """Create and register a new HTTP client.

        :param timeout: Optional custom timeout configuration
        :type timeout: Optional[httpx.Timeout]
        :param limits: Optional custom connection limits
        :type limits: Optional[httpx.Limits]
        :param kwargs: Additional ``httpx.Client`` options
        :return: Configured HTTP client instance
        :rtype: httpx.Client
        """
        client_config: Dict[str, Any] = {
            "timeout": timeout or self._default_timeout,
            "limits": limits or self._default_limits,
            "follow_redirects": kwargs.pop("follow_redirects", True),
            **kwargs,
        }
        client = httpx.Client(**client_config)
        with self._lock:
            self._clients[id(client)] = client
        logger.debug("Created new HTTP client %x", id(client))
        return client

    def close_client(self, client: httpx.Client) -> None:
        """Close one client and forget it.

        :param client: Client previously returned by :meth:`create_client`
        :type client: httpx.Client
        """
        with self._lock:
            self._clients.pop(id(client), None)
        client.close()
        logger.debug("Closed HTTP client %x", id(client))

    def close_all(self) -> None:
        """Close every managed client and forget it."""
        with self._lock:
            clients = list(self._clients.values())
            self._clients.clear()
        if not clients:
            logger.debug("No HTTP clients to close")
            return
        logger.info("Closing %d HTTP client(s)...", len(clients))
        for client in clients:
            try:
                client.close()
            except Exception as e:
                logger.warning("Error closing managed HTTP client %x: %s", id(client), e)


http_client_manager = HTTPClientManager()
