"""Top-level client bundling every Constant Contact service.

:class:`ConstantContact` builds one transport from the credentials and
hands it to one instance of each service, so all of them share the same
connection pool and configuration.
"""

import logging
from typing import Optional

import httpx

from .config.settings import Settings
from .config.settings import settings as default_settings
from .exceptions import ConfigurationError, InvalidArgumentError
from .services import (
    AccountService,
    CampaignTrackingService,
    ContactListService,
    ContactService,
    ContactTrackingService,
    EmailCampaignService,
)
from .utils.http import HttpxTransport, Transport, create_timeout
from .utils.security import setup_secure_logging

logger = logging.getLogger(__name__)


class ConstantContact:
    """Entry point to the Constant Contact API.

    :param api_key: Constant Contact API key
    :type api_key: str
    :param access_token: OAuth2 access token issued for the API key
    :type access_token: str
    :param base_url: API base URL; the configured one otherwise
    :type base_url: Optional[str]
    :param transport: Transport override, mainly for tests
    :type transport: Optional[Transport]
    :param http_client: Caller-owned ``httpx.Client`` for the default transport
    :type http_client: Optional[httpx.Client]
    :param settings: Settings supplying timeouts and the user agent
    :type settings: Optional[Settings]
    :raises InvalidArgumentError: If a credential is empty

    .. example::
       >>> with ConstantContact("key", "token") as cc:
       ...     page = cc.contact_tracking.get_activities("42", limit=50)
    """

    def __init__(
        self,
        api_key: str,
        access_token: str,
        base_url: Optional[str] = None,
        transport: Optional[Transport] = None,
        http_client: Optional[httpx.Client] = None,
        settings: Optional[Settings] = None,
    ):
        cfg = settings or default_settings
        if not api_key or not str(api_key).strip():
            raise InvalidArgumentError("api_key must be a non-empty string", argument="api_key")
        if not access_token or not str(access_token).strip():
            raise InvalidArgumentError(
                "access_token must be a non-empty string", argument="access_token"
            )

        self.api_key = api_key
        self.access_token = access_token
        self.base_url = (base_url or cfg.base_url).rstrip("/")
        self.transport: Transport = transport or HttpxTransport(
            api_key=api_key,
            access_token=access_token,
            client=http_client,
            timeout=create_timeout(connect=cfg.connect_timeout, read=cfg.read_timeout),
            user_agent=cfg.user_agent,
        )

        service_args = dict(
            api_key=api_key,
            access_token=access_token,
            transport=self.transport,
            base_url=self.base_url,
        )
        self.account = AccountService(**service_args)
        self.contacts = ContactService(**service_args)
        self.lists = ContactListService(**service_args)
        self.campaigns = EmailCampaignService(**service_args)
        self.campaign_tracking = CampaignTrackingService(**service_args)
        self.contact_tracking = ContactTrackingService(**service_args)
        logger.debug("Constant Contact client created for %s", self.base_url)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "ConstantContact":
        """Create a client from environment-backed settings.

        :param settings: Settings to use; the global settings otherwise
        :type settings: Optional[Settings]
        :return: A configured client
        :rtype: ConstantContact
        :raises ConfigurationError: If the API key or access token is missing
        """
        cfg = settings or default_settings
        if not cfg.has_credentials:
            missing = "CTCT_API_KEY" if not (cfg.api_key or "").strip() else "CTCT_ACCESS_TOKEN"
            raise ConfigurationError(
                "CTCT_API_KEY and CTCT_ACCESS_TOKEN must both be set", setting=missing
            )
        if cfg.configure_logging:
            setup_secure_logging(cfg.log_level)
        else:
            logging.getLogger("constantcontact").setLevel(cfg.log_level)
        return cls(
            api_key=cfg.api_key,
            access_token=cfg.access_token,
            base_url=cfg.base_url,
            settings=cfg,
        )

    def close(self) -> None:
        """Release the HTTP connections of this client.

        Only the connection pool opened by this instance is closed; other
        clients keep theirs. Caller-owned clients passed as
        ``http_client`` are left open. A new pool is opened on next use,
        so the instance stays usable after closing.
        """
        close = getattr(self.transport, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "ConstantContact":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
