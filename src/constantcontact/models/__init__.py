"""Constant Contact models package.

This package contains all Pydantic models used by the SDK, organized by
API resource family.
"""

from .account import (
    AccountEmailAddress,
    AccountEmailAddressStatus,
    AccountInfo,
    OrganizationAddress,
)
from .base_models import CTCTModel, ErrorDetail, format_timestamp
from .campaigns import (
    CampaignStatus,
    ClickThroughDetail,
    EmailCampaign,
    MessageFooter,
    SentToContactList,
)
from .contacts import (
    ActionBy,
    Address,
    AddressType,
    ConfirmStatus,
    Contact,
    ContactList,
    ContactListRef,
    ContactListStatus,
    ContactStatus,
    CustomField,
    EmailAddress,
    Note,
)
from .envelopes import (
    Paged,
    PagedMeta,
    PagedPagination,
    ResultSet,
    ResultSetMeta,
    ResultSetPagination,
)
from .tracking import (
    ActivityType,
    BaseTrackingReport,
    BounceReport,
    CampaignTrackingSummary,
    ClickReport,
    ForwardReport,
    OpenReport,
    OptOutReport,
    SendReport,
    TrackingReport,
    TrackingSummary,
    decode_tracking_report,
)

__all__ = [
    # Base
    "CTCTModel",
    "ErrorDetail",
    "format_timestamp",
    # Envelopes
    "Paged",
    "PagedMeta",
    "PagedPagination",
    "ResultSet",
    "ResultSetMeta",
    "ResultSetPagination",
    # Tracking
    "ActivityType",
    "BaseTrackingReport",
    "BounceReport",
    "ClickReport",
    "ForwardReport",
    "OpenReport",
    "SendReport",
    "OptOutReport",
    "TrackingReport",
    "TrackingSummary",
    "CampaignTrackingSummary",
    "decode_tracking_report",
    # Contacts
    "ActionBy",
    "Address",
    "AddressType",
    "ConfirmStatus",
    "Contact",
    "ContactList",
    "ContactListRef",
    "ContactListStatus",
    "ContactStatus",
    "CustomField",
    "EmailAddress",
    "Note",
    # Campaigns
    "CampaignStatus",
    "ClickThroughDetail",
    "EmailCampaign",
    "MessageFooter",
    "SentToContactList",
    # Account
    "AccountEmailAddress",
    "AccountEmailAddressStatus",
    "AccountInfo",
    "OrganizationAddress",
]
