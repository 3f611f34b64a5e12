"""Email campaign operations."""

import logging
from datetime import datetime
from typing import Optional, Union

from ..config.endpoints import Endpoints
from ..models import CampaignStatus, EmailCampaign, ResultSet
from .base import BaseService

logger = logging.getLogger(__name__)


class EmailCampaignService(BaseService):
    """Service for the email campaigns API.

    .. example::
       >>> svc = EmailCampaignService(api_key="key", access_token="token")
       >>> drafts = svc.get_campaigns(status=CampaignStatus.DRAFT, limit=50)
    """

    def get_campaigns(
        self,
        status: Optional[Union[CampaignStatus, str]] = None,
        modified_since: Optional[Union[str, datetime]] = None,
        limit: Optional[int] = None,
    ) -> ResultSet[EmailCampaign]:
        """Get a page of campaigns.

        Listed campaigns carry only their id, name, status and
        modification date; use :meth:`get_campaign` for the full record.

        :param status: Only campaigns with this status
        :type status: Optional[Union[CampaignStatus, str]]
        :param modified_since: Only campaigns modified since this time
        :type modified_since: Optional[Union[str, datetime]]
        :param limit: Page size (1 - 500)
        :type limit: Optional[int]
        :return: First page of campaigns
        :rtype: ResultSet[EmailCampaign]
        """
        self._check_limit(limit)
        url = self._url(
            Endpoints.CAMPAIGNS,
            query_params={"status": status, "modified_since": modified_since, "limit": limit},
        )
        return self._get(url, ResultSet[EmailCampaign])

    def get_campaigns_next(self, next_link: str) -> ResultSet[EmailCampaign]:
        """Get the page of campaigns at ``next_link``."""
        return self._get(self._next_url(next_link), ResultSet[EmailCampaign])

    def get_campaign(self, campaign_id: str, update_summary: bool = False) -> EmailCampaign:
        """Get a single campaign.

        :param campaign_id: The campaign id
        :type campaign_id: str
        :param update_summary: Ask the server to recompute the tracking summary
        :type update_summary: bool
        :return: The campaign
        :rtype: EmailCampaign
        """
        self._require_id(campaign_id, "campaign_id")
        url = self._url(
            Endpoints.CAMPAIGN,
            {"campaignId": campaign_id},
            {"updateSummary": True if update_summary else None},
        )
        return self._get(url, EmailCampaign)

    def add_campaign(self, campaign: EmailCampaign) -> EmailCampaign:
        self._require_model(campaign, "campaign")
        created = self._post(self._url(Endpoints.CAMPAIGNS), campaign, EmailCampaign)
        logger.info("Created campaign %s", created.id)
        return created

    def update_campaign(self, campaign: EmailCampaign) -> EmailCampaign:
        self._require_model(campaign, "campaign")
        campaign_id = self._require_id(campaign.id, "campaign.id")
        url = self._url(Endpoints.CAMPAIGN, {"campaignId": campaign_id})
        return self._put(url, campaign, EmailCampaign)

    def delete_campaign(self, campaign_id: str) -> bool:
        """Delete a campaign.

        :return: True when the server answered 204 No Content
        :rtype: bool
        """
        self._require_id(campaign_id, "campaign_id")
        return self._delete(self._url(Endpoints.CAMPAIGN, {"campaignId": campaign_id}))
