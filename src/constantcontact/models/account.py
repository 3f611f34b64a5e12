"""Pydantic models for account settings."""

from enum import Enum
from typing import Optional, Tuple

from .base_models import CTCTModel


class AccountEmailAddressStatus(str, Enum):
    """Verification status of an account email address."""

    CONFIRMED = "CONFIRMED"
    UNCONFIRMED = "UNCONFIRMED"


class AccountEmailAddress(CTCTModel):
    """An email address verified for use as a campaign sender.

    :param email_address: The address
    :type email_address: str
    :param status: Verification status
    :type status: Optional[AccountEmailAddressStatus]
    """

    email_address: str
    status: Optional[AccountEmailAddressStatus] = None


class OrganizationAddress(CTCTModel):
    """Postal address of the account's organization."""

    line1: Optional[str] = None
    line2: Optional[str] = None
    line3: Optional[str] = None
    city: Optional[str] = None
    state_code: Optional[str] = None
    state: Optional[str] = None
    country_code: Optional[str] = None
    postal_code: Optional[str] = None


class AccountInfo(CTCTModel):
    """Account owner and organization details."""

    website: Optional[str] = None
    organization_name: Optional[str] = None
    time_zone: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    company_logo: Optional[str] = None
    country_code: Optional[str] = None
    state_code: Optional[str] = None
    organization_addresses: Tuple[OrganizationAddress, ...] = ()
