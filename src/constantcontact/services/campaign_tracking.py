"""Email campaign tracking reports.

Campaign tracking endpoints return :class:`~constantcontact.models.Paged`
envelopes. Each report family has a ``get_*`` operation taking the
campaign id and optional filters, and a ``next_*`` operation taking the
``next_link`` of a previous page.
"""

import logging
from datetime import datetime
from typing import Optional, Type, TypeVar, Union

from ..config.endpoints import Endpoints
from ..models import (
    BounceReport,
    ClickReport,
    ForwardReport,
    OpenReport,
    OptOutReport,
    Paged,
    SendReport,
    TrackingSummary,
)
from .base import BaseService

logger = logging.getLogger(__name__)

R = TypeVar("R")

Timestamp = Union[str, datetime]


class CampaignTrackingService(BaseService):
    """Service for the email campaign tracking API.

    :param api_key: Constant Contact API key
    :param access_token: OAuth2 access token
    :param transport: Optional transport override
    :param base_url: Optional base URL override

    .. example::
       >>> svc = CampaignTrackingService(api_key="key", access_token="token")
       >>> page = svc.get_opens("1100394165290", limit=100)
       >>> while page.next_link:
       ...     page = svc.next_opens(page.next_link)
    """

    def _reports(
        self,
        template: str,
        report_type: Type[R],
        campaign_id: str,
        created_since: Optional[Timestamp],
        limit: Optional[int],
        link_id: Optional[str] = None,
    ) -> Paged[R]:
        self._require_id(campaign_id, "campaign_id")
        self._check_limit(limit)
        path_params = {"campaignId": campaign_id}
        if link_id is not None:
            path_params["linkId"] = self._require_id(link_id, "link_id")
        url = self._url(
            template,
            path_params,
            {"created_since": created_since, "limit": limit},
        )
        return self._get(url, Paged[report_type])

    def _next(self, next_link: str, report_type: Type[R]) -> Paged[R]:
        url = self._next_url(next_link)
        return self._get(url, Paged[report_type])

    def get_summary(self, campaign_id: str) -> Optional[TrackingSummary]:
        """Get the tracking summary of a campaign.

        The server recomputes the summary on request; while it is not
        available yet the body is empty and None is returned.

        :param campaign_id: The campaign id
        :type campaign_id: str
        :return: Summary counts, or None when not yet available
        :rtype: Optional[TrackingSummary]
        :raises InvalidArgumentError: If ``campaign_id`` is empty
        :raises ServiceException: If the request fails
        """
        self._require_id(campaign_id, "campaign_id")
        url = self._url(Endpoints.CAMPAIGN_TRACKING_SUMMARY, {"campaignId": campaign_id})
        summary = self._get(url, TrackingSummary, allow_empty=True)
        if summary is None:
            logger.info("Tracking summary for campaign %s not available yet", campaign_id)
        return summary

    def get_bounces(
        self,
        campaign_id: str,
        created_since: Optional[Timestamp] = None,
        limit: Optional[int] = None,
    ) -> Paged[BounceReport]:
        """Get bounce reports of a campaign.

        :param campaign_id: The campaign id
        :type campaign_id: str
        :param created_since: Only reports created since this ISO-8601 time
        :type created_since: Optional[Union[str, datetime]]
        :param limit: Page size (1 - 500)
        :type limit: Optional[int]
        :return: First page of bounce reports
        :rtype: Paged[BounceReport]
        :raises InvalidArgumentError: On empty id or out-of-range limit
        :raises ServiceException: If the request fails
        """
        return self._reports(
            Endpoints.CAMPAIGN_TRACKING_BOUNCES, BounceReport, campaign_id, created_since, limit
        )

    def next_bounces(self, next_link: str) -> Paged[BounceReport]:
        """Get the page of bounce reports at ``next_link``."""
        return self._next(next_link, BounceReport)

    def get_clicks(
        self,
        campaign_id: str,
        created_since: Optional[Timestamp] = None,
        limit: Optional[int] = None,
        link_id: Optional[str] = None,
    ) -> Paged[ClickReport]:
        """Get click reports of a campaign, optionally for a single link.

        :param campaign_id: The campaign id
        :type campaign_id: str
        :param created_since: Only reports created since this ISO-8601 time
        :type created_since: Optional[Union[str, datetime]]
        :param limit: Page size (1 - 500)
        :type limit: Optional[int]
        :param link_id: ``url_uid`` from the campaign's click-through details
        :type link_id: Optional[str]
        :return: First page of click reports
        :rtype: Paged[ClickReport]
        """
        template = (
            Endpoints.CAMPAIGN_TRACKING_CLICKS
            if link_id is None
            else Endpoints.CAMPAIGN_TRACKING_CLICKS_BY_LINK
        )
        return self._reports(template, ClickReport, campaign_id, created_since, limit, link_id)

    def next_clicks(self, next_link: str) -> Paged[ClickReport]:
        """Get the page of click reports at ``next_link``."""
        return self._next(next_link, ClickReport)

    def get_forwards(
        self,
        campaign_id: str,
        created_since: Optional[Timestamp] = None,
        limit: Optional[int] = None,
    ) -> Paged[ForwardReport]:
        """Get forward reports of a campaign."""
        return self._reports(
            Endpoints.CAMPAIGN_TRACKING_FORWARDS, ForwardReport, campaign_id, created_since, limit
        )

    def next_forwards(self, next_link: str) -> Paged[ForwardReport]:
        """Get the page of forward reports at ``next_link``."""
        return self._next(next_link, ForwardReport)

    def get_opens(
        self,
        campaign_id: str,
        created_since: Optional[Timestamp] = None,
        limit: Optional[int] = None,
    ) -> Paged[OpenReport]:
        """Get open reports of a campaign."""
        return self._reports(
            Endpoints.CAMPAIGN_TRACKING_OPENS, OpenReport, campaign_id, created_since, limit
        )

    def next_opens(self, next_link: str) -> Paged[OpenReport]:
        """Get the page of open reports at ``next_link``."""
        return self._next(next_link, OpenReport)

    def get_sends(
        self,
        campaign_id: str,
        created_since: Optional[Timestamp] = None,
        limit: Optional[int] = None,
    ) -> Paged[SendReport]:
        """Get send reports of a campaign."""
        return self._reports(
            Endpoints.CAMPAIGN_TRACKING_SENDS, SendReport, campaign_id, created_since, limit
        )

    def next_sends(self, next_link: str) -> Paged[SendReport]:
        """Get the page of send reports at ``next_link``."""
        return self._next(next_link, SendReport)

    def get_opt_outs(
        self,
        campaign_id: str,
        created_since: Optional[Timestamp] = None,
        limit: Optional[int] = None,
    ) -> Paged[OptOutReport]:
        """Get opt-out (unsubscribe) reports of a campaign."""
        return self._reports(
            Endpoints.CAMPAIGN_TRACKING_OPT_OUTS, OptOutReport, campaign_id, created_since, limit
        )

    def next_opt_outs(self, next_link: str) -> Paged[OptOutReport]:
        """Get the page of opt-out reports at ``next_link``."""
        return self._next(next_link, OptOutReport)
