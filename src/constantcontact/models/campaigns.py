"""Pydantic models for email campaigns."""

from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from .base_models import CTCTModel
from .tracking import TrackingSummary


class CampaignStatus(str, Enum):
    """Lifecycle status of an email campaign."""

    DRAFT = "DRAFT"
    RUNNING = "RUNNING"
    SENT = "SENT"
    SCHEDULED = "SCHEDULED"
    DELETED = "DELETED"


class MessageFooter(CTCTModel):
    """Footer block rendered at the bottom of a campaign email."""

    organization_name: Optional[str] = None
    address_line_1: Optional[str] = None
    address_line_2: Optional[str] = None
    address_line_3: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    international_state: Optional[str] = None
    postal_code: Optional[str] = None
    country: Optional[str] = None
    include_forward_email: Optional[bool] = None
    forward_email_link_text: Optional[str] = None
    include_subscribe_link: Optional[bool] = None
    subscribe_link_text: Optional[str] = None


class ClickThroughDetail(CTCTModel):
    """Click counts for one tracked link of a campaign.

    ``url_uid`` is the link id accepted by the clicks-by-link tracking
    endpoint.
    """

    url: Optional[str] = None
    url_uid: Optional[str] = None
    click_count: Optional[int] = None


class SentToContactList(CTCTModel):
    """A list the campaign is addressed to."""

    id: str


class EmailCampaign(CTCTModel):
    """An email campaign.

    List endpoints return only ``id``, ``name``, ``status`` and
    ``modified_date``; the single-campaign endpoint fills the rest.

    :param id: Server-assigned campaign id
    :type id: Optional[str]
    :param name: Unique campaign name
    :type name: Optional[str]
    :param status: Lifecycle status
    :type status: Optional[CampaignStatus]
    :param click_through_details: Per-link click counts
    :type click_through_details: Tuple[ClickThroughDetail, ...]
    """

    id: Optional[str] = None
    name: Optional[str] = None
    subject: Optional[str] = None
    status: Optional[CampaignStatus] = None
    from_name: Optional[str] = None
    from_email: Optional[str] = None
    reply_to_email: Optional[str] = None
    template_type: Optional[str] = None
    created_date: Optional[datetime] = None
    modified_date: Optional[datetime] = None
    last_run_date: Optional[datetime] = None
    next_run_date: Optional[datetime] = None
    is_permission_reminder_enabled: Optional[bool] = None
    permission_reminder_text: Optional[str] = None
    is_view_as_webpage_enabled: Optional[bool] = None
    view_as_web_page_text: Optional[str] = None
    view_as_web_page_link_text: Optional[str] = None
    greeting_salutations: Optional[str] = None
    greeting_name: Optional[str] = None
    greeting_string: Optional[str] = None
    email_content: Optional[str] = None
    text_content: Optional[str] = None
    email_content_format: Optional[str] = None
    style_sheet: Optional[str] = None
    message_footer: Optional[MessageFooter] = None
    tracking_summary: Optional[TrackingSummary] = None
    sent_to_contact_lists: Tuple[SentToContactList, ...] = ()
    click_through_details: Tuple[ClickThroughDetail, ...] = ()
