"""Contact tracking reports.

Contact tracking endpoints return
:class:`~constantcontact.models.ResultSet` envelopes. The all-activities
endpoint mixes report types; its results are decoded by their
``activity_type`` tag.

Each family has a ``get_*`` operation and a ``next_*`` operation taking
the ``next_link`` of a previous result set.
"""

import logging
from datetime import datetime
from typing import Any, List, Optional, Union

from ..config.endpoints import Endpoints
from ..models import (
    BounceReport,
    CampaignTrackingSummary,
    ClickReport,
    ForwardReport,
    OpenReport,
    OptOutReport,
    ResultSet,
    SendReport,
    TrackingReport,
    TrackingSummary,
)
from .base import BaseService

logger = logging.getLogger(__name__)

Timestamp = Union[str, datetime]


class ContactTrackingService(BaseService):
    """Service for the contact tracking API.

    :param api_key: Constant Contact API key
    :param access_token: OAuth2 access token
    :param transport: Optional transport override
    :param base_url: Optional base URL override
    """

    def _reports(
        self,
        template: str,
        report_type: Any,
        contact_id: str,
        limit: Optional[int],
        created_since: Optional[Timestamp] = None,
    ) -> ResultSet:
        self._require_id(contact_id, "contact_id")
        self._check_limit(limit)
        url = self._url(
            template,
            {"contactId": contact_id},
            {"created_since": created_since, "limit": limit},
        )
        return self._get(url, ResultSet[report_type])

    def get_summary(
        self, contact_id: str, created_since: Optional[Timestamp] = None
    ) -> Optional[TrackingSummary]:
        """Get the tracking summary of a contact.

        :param contact_id: The contact id
        :type contact_id: str
        :param created_since: Only count activity since this ISO-8601 time
        :type created_since: Optional[Union[str, datetime]]
        :return: Summary counts, or None when the server returns no body
        :rtype: Optional[TrackingSummary]
        :raises InvalidArgumentError: If ``contact_id`` is empty
        :raises ServiceException: If the request fails
        """
        self._require_id(contact_id, "contact_id")
        url = self._url(
            Endpoints.CONTACT_TRACKING_SUMMARY,
            {"contactId": contact_id},
            {"created_since": created_since},
        )
        summary = self._get(url, TrackingSummary, allow_empty=True)
        if summary is None:
            logger.info("Tracking summary for contact %s not available", contact_id)
        return summary

    def get_summary_by_campaign(self, contact_id: str) -> List[CampaignTrackingSummary]:
        """Get the tracking counts of a contact, broken down per campaign.

        :param contact_id: The contact id
        :type contact_id: str
        :return: One summary per campaign sent to the contact
        :rtype: List[CampaignTrackingSummary]
        """
        self._require_id(contact_id, "contact_id")
        url = self._url(Endpoints.CONTACT_TRACKING_SUMMARY_BY_CAMPAIGN, {"contactId": contact_id})
        return self._get(url, List[CampaignTrackingSummary], allow_empty=True) or []

    def get_activities(
        self,
        contact_id: str,
        limit: Optional[int] = None,
        created_since: Optional[Timestamp] = None,
    ) -> ResultSet[TrackingReport]:
        """Get all tracking activities of a contact, of any type.

        :param contact_id: The contact id
        :type contact_id: str
        :param limit: Page size (1 - 500)
        :type limit: Optional[int]
        :param created_since: Only activities since this ISO-8601 time
        :type created_since: Optional[Union[str, datetime]]
        :return: Activities, each decoded into its report variant
        :rtype: ResultSet[TrackingReport]
        :raises InvalidArgumentError: On empty id or out-of-range limit
        :raises ServiceException: If the request fails or a tag is unknown
        """
        return self._reports(
            Endpoints.CONTACT_TRACKING_ALL, TrackingReport, contact_id, limit, created_since
        )

    def get_bounces(self, contact_id: str, limit: Optional[int] = None) -> ResultSet[BounceReport]:
        """Get bounce reports of a contact."""
        return self._reports(Endpoints.CONTACT_TRACKING_BOUNCES, BounceReport, contact_id, limit)

    def get_clicks(
        self,
        contact_id: str,
        limit: Optional[int] = None,
        created_since: Optional[Timestamp] = None,
    ) -> ResultSet[ClickReport]:
        """Get click reports of a contact."""
        return self._reports(
            Endpoints.CONTACT_TRACKING_CLICKS, ClickReport, contact_id, limit, created_since
        )

    def get_forwards(
        self,
        contact_id: str,
        limit: Optional[int] = None,
        created_since: Optional[Timestamp] = None,
    ) -> ResultSet[ForwardReport]:
        """Get forward reports of a contact."""
        return self._reports(
            Endpoints.CONTACT_TRACKING_FORWARDS, ForwardReport, contact_id, limit, created_since
        )

    def get_opens(
        self,
        contact_id: str,
        limit: Optional[int] = None,
        created_since: Optional[Timestamp] = None,
    ) -> ResultSet[OpenReport]:
        """Get open reports of a contact."""
        return self._reports(
            Endpoints.CONTACT_TRACKING_OPENS, OpenReport, contact_id, limit, created_since
        )

    def get_sends(
        self,
        contact_id: str,
        limit: Optional[int] = None,
        created_since: Optional[Timestamp] = None,
    ) -> ResultSet[SendReport]:
        """Get send reports of a contact."""
        return self._reports(
            Endpoints.CONTACT_TRACKING_SENDS, SendReport, contact_id, limit, created_since
        )

    def get_unsubscribes(
        self,
        contact_id: str,
        limit: Optional[int] = None,
        created_since: Optional[Timestamp] = None,
    ) -> ResultSet[OptOutReport]:
        """Get unsubscribe reports of a contact."""
        return self._reports(
            Endpoints.CONTACT_TRACKING_UNSUBSCRIBES, OptOutReport, contact_id, limit, created_since
        )

    def get_next(self, next_link: str, report_type: Any = TrackingReport) -> ResultSet:
        """Get the result set at ``next_link``.

        Pass the report type of the operation that produced the link;
        without it entries are decoded by their ``activity_type`` tag,
        which single-type endpoints may omit. The ``next_*`` methods fix
        the type and fit :func:`~constantcontact.services.iter_pages`.

        :param next_link: ``next_link`` of a previous result set
        :type next_link: str
        :param report_type: Report type of the original operation; any
            activity type by default
        :type report_type: Any
        :return: The following result set
        :rtype: ResultSet
        """
        url = self._next_url(next_link)
        return self._get(url, ResultSet[report_type])

    def next_activities(self, next_link: str) -> ResultSet[TrackingReport]:
        """Get the set of mixed activities at ``next_link``."""
        return self.get_next(next_link, TrackingReport)

    def next_bounces(self, next_link: str) -> ResultSet[BounceReport]:
        """Get the set of bounce reports at ``next_link``."""
        return self.get_next(next_link, BounceReport)

    def next_clicks(self, next_link: str) -> ResultSet[ClickReport]:
        """Get the set of click reports at ``next_link``."""
        return self.get_next(next_link, ClickReport)

    def next_forwards(self, next_link: str) -> ResultSet[ForwardReport]:
        """Get the set of forward reports at ``next_link``."""
        return self.get_next(next_link, ForwardReport)

    def next_opens(self, next_link: str) -> ResultSet[OpenReport]:
        """Get the set of open reports at ``next_link``."""
        return self.get_next(next_link, OpenReport)

    def next_sends(self, next_link: str) -> ResultSet[SendReport]:
        """Get the set of send reports at ``next_link``."""
        return self.get_next(next_link, SendReport)

    def next_unsubscribes(self, next_link: str) -> ResultSet[OptOutReport]:
        """Get the set of unsubscribe reports at ``next_link``."""
        return self.get_next(next_link, OptOutReport)
