"""Pydantic models for email campaign and contact tracking reports.

Tracking reports form a closed set of variants sharing four base fields
(campaign id, contact id, activity type, email address). The
``activity_type`` field is the type tag: :data:`TrackingReport` decodes a
mixed list of activities by reading the tag first and dispatching to the
matching variant. An unknown tag is a decode error.

Summaries are count-only records and carry no tag.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import Field, TypeAdapter

from .base_models import CTCTModel


class ActivityType(str, Enum):
    """Type tags of tracking activities."""

    EMAIL_BOUNCE = "EMAIL_BOUNCE"
    EMAIL_CLICK = "EMAIL_CLICK"
    EMAIL_FORWARD = "EMAIL_FORWARD"
    EMAIL_OPEN = "EMAIL_OPEN"
    EMAIL_SEND = "EMAIL_SEND"
    EMAIL_UNSUBSCRIBE = "EMAIL_UNSUBSCRIBE"


class BaseTrackingReport(CTCTModel):
    """Fields shared by every tracking report variant.

    Not decoded directly; each variant flattens these fields next to its
    own and pins ``activity_type`` to its tag.

    :param campaign_id: Campaign the activity belongs to
    :type campaign_id: Optional[str]
    :param contact_id: Contact that performed the activity
    :type contact_id: Optional[str]
    :param email_address: Email address of the contact
    :type email_address: Optional[str]
    """

    campaign_id: Optional[str] = None
    contact_id: Optional[str] = None
    email_address: Optional[str] = None


class BounceReport(BaseTrackingReport):
    """An email that could not be delivered.

    :param bounce_code: Single-letter bounce classification
    :type bounce_code: Optional[str]
    :param bounce_description: Description of the bounce code
    :type bounce_description: Optional[str]
    :param bounce_message: Message returned by the receiving server
    :type bounce_message: Optional[str]
    :param bounce_date: When the bounce occurred
    :type bounce_date: Optional[datetime]
    """

    activity_type: Literal["EMAIL_BOUNCE"] = "EMAIL_BOUNCE"
    bounce_code: Optional[str] = None
    bounce_description: Optional[str] = None
    bounce_message: Optional[str] = None
    bounce_date: Optional[datetime] = None


class ClickReport(BaseTrackingReport):
    """A click on a tracked link.

    :param link_id: ``url_uid`` of the clicked link
    :type link_id: Optional[str]
    :param click_date: When the link was clicked
    :type click_date: Optional[datetime]
    """

    activity_type: Literal["EMAIL_CLICK"] = "EMAIL_CLICK"
    link_id: Optional[str] = None
    click_date: Optional[datetime] = None


class ForwardReport(BaseTrackingReport):
    """A forward-to-a-friend event."""

    activity_type: Literal["EMAIL_FORWARD"] = "EMAIL_FORWARD"
    forward_date: Optional[datetime] = None


class OpenReport(BaseTrackingReport):
    """An email open."""

    activity_type: Literal["EMAIL_OPEN"] = "EMAIL_OPEN"
    open_date: Optional[datetime] = None


class SendReport(BaseTrackingReport):
    """An email send to one contact."""

    activity_type: Literal["EMAIL_SEND"] = "EMAIL_SEND"
    send_date: Optional[datetime] = None


class OptOutReport(BaseTrackingReport):
    """An unsubscribe caused by a campaign.

    :param unsubscribe_date: When the contact opted out
    :type unsubscribe_date: Optional[datetime]
    :param unsubscribe_source: Who performed the opt-out
    :type unsubscribe_source: Optional[str]
    :param unsubscribe_reason: Reason given by the contact
    :type unsubscribe_reason: Optional[str]
    """

    activity_type: Literal["EMAIL_UNSUBSCRIBE"] = "EMAIL_UNSUBSCRIBE"
    unsubscribe_date: Optional[datetime] = None
    unsubscribe_source: Optional[str] = None
    unsubscribe_reason: Optional[str] = None


TrackingReport = Annotated[
    Union[
        BounceReport,
        ClickReport,
        ForwardReport,
        OpenReport,
        SendReport,
        OptOutReport,
    ],
    Field(discriminator="activity_type"),
]
"""Any tracking report, selected by its ``activity_type`` tag."""

_TRACKING_REPORT_ADAPTER: TypeAdapter = TypeAdapter(TrackingReport)


def decode_tracking_report(data: Any) -> BaseTrackingReport:
    """Decode one tracking activity into its variant.

    :param data: Parsed JSON object carrying an ``activity_type`` tag
    :type data: Any
    :return: The matching report variant
    :rtype: BaseTrackingReport
    :raises pydantic.ValidationError: If the tag is missing or unknown
    """
    return _TRACKING_REPORT_ADAPTER.validate_python(data)


class TrackingSummary(CTCTModel):
    """Aggregated tracking counts for a campaign or a contact."""

    sends: int = 0
    opens: int = 0
    clicks: int = 0
    forwards: int = 0
    unsubscribes: int = 0
    bounces: int = 0
    spam_count: int = 0


class CampaignTrackingSummary(TrackingSummary):
    """Tracking counts of one contact for one campaign.

    :param campaign_id: Campaign the counts refer to
    :type campaign_id: Optional[str]
    :param campaign_name: Name of the campaign
    :type campaign_name: Optional[str]
    :param campaign_send_date: When the campaign was sent to the contact
    :type campaign_send_date: Optional[datetime]
    """

    campaign_id: Optional[str] = None
    campaign_name: Optional[str] = None
    campaign_send_date: Optional[datetime] = None
