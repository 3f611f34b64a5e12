"""Constant Contact API services, one per resource family."""

from .account import AccountService
from .base import BaseService, iter_pages
from .campaign_tracking import CampaignTrackingService
from .campaigns import EmailCampaignService
from .contact_tracking import ContactTrackingService
from .contacts import ContactService
from .lists import ContactListService

__all__ = [
    "AccountService",
    "BaseService",
    "CampaignTrackingService",
    "ContactListService",
    "ContactService",
    "ContactTrackingService",
    "EmailCampaignService",
    "iter_pages",
]
