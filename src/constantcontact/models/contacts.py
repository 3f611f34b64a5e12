"""Pydantic models for contacts and contact lists."""

from datetime import datetime
from enum import Enum
from typing import Optional, Tuple

from pydantic import Field

from .base_models import CTCTModel


# Enums
class ContactStatus(str, Enum):
    """Subscription status of a contact."""

    ACTIVE = "ACTIVE"
    UNCONFIRMED = "UNCONFIRMED"
    OPTOUT = "OPTOUT"
    REMOVED = "REMOVED"
    NON_SUBSCRIBER = "NON_SUBSCRIBER"
    VISITOR = "VISITOR"


class ConfirmStatus(str, Enum):
    """Double opt-in confirmation status of an email address."""

    CONFIRMED = "CONFIRMED"
    NO_CONFIRMATION_REQUIRED = "NO_CONFIRMATION_REQUIRED"
    UNCONFIRMED = "UNCONFIRMED"


class ActionBy(str, Enum):
    """Who performed an opt-in or opt-out."""

    ACTION_BY_OWNER = "ACTION_BY_OWNER"
    ACTION_BY_VISITOR = "ACTION_BY_VISITOR"


class AddressType(str, Enum):
    """Kind of postal address."""

    PERSONAL = "PERSONAL"
    BUSINESS = "BUSINESS"
    UNKNOWN = "UNKNOWN"


class ContactListStatus(str, Enum):
    """Visibility of a contact list."""

    ACTIVE = "ACTIVE"
    HIDDEN = "HIDDEN"


# Contact components
class Address(CTCTModel):
    """Postal address of a contact."""

    id: Optional[str] = None
    line1: Optional[str] = None
    line2: Optional[str] = None
    line3: Optional[str] = None
    city: Optional[str] = None
    address_type: Optional[AddressType] = None
    state_code: Optional[str] = None
    state: Optional[str] = None
    country_code: Optional[str] = None
    postal_code: Optional[str] = None
    sub_postal_code: Optional[str] = None


class EmailAddress(CTCTModel):
    """Email address of a contact with its subscription state.

    :param email_address: The address itself
    :type email_address: Optional[str]
    :param status: Subscription status of this address
    :type status: Optional[ContactStatus]
    :param confirm_status: Double opt-in state
    :type confirm_status: Optional[ConfirmStatus]
    :param opt_in_source: Who opted the address in
    :type opt_in_source: Optional[ActionBy]
    :param opt_out_source: Who opted the address out
    :type opt_out_source: Optional[ActionBy]
    """

    id: Optional[str] = None
    email_address: Optional[str] = None
    status: Optional[ContactStatus] = None
    confirm_status: Optional[ConfirmStatus] = None
    opt_in_source: Optional[ActionBy] = None
    opt_in_date: Optional[datetime] = None
    opt_out_source: Optional[ActionBy] = None
    opt_out_date: Optional[datetime] = None


class Note(CTCTModel):
    """Free-text note attached to a contact."""

    id: Optional[str] = None
    note: Optional[str] = None
    created_date: Optional[datetime] = None
    modified_date: Optional[datetime] = None


class CustomField(CTCTModel):
    """Custom field value; names run ``CustomField1`` to ``CustomField15``."""

    name: str
    value: Optional[str] = None


class ContactListRef(CTCTModel):
    """Membership of a contact in a list."""

    id: str
    status: Optional[ContactListStatus] = None


class Contact(CTCTModel):
    """A contact record.

    ``id`` is the canonical server-assigned identifier; it is absent on
    contacts that have not been created yet.

    :param id: Server-assigned contact id
    :type id: Optional[str]
    :param status: Subscription status of the contact
    :type status: Optional[ContactStatus]
    :param email_addresses: Email addresses, the first being the primary one
    :type email_addresses: Tuple[EmailAddress, ...]
    :param lists: Lists the contact belongs to
    :type lists: Tuple[ContactListRef, ...]
    """

    id: Optional[str] = None
    status: Optional[ContactStatus] = None
    confirmed: Optional[bool] = None
    source: Optional[str] = None
    source_details: Optional[str] = None
    prefix_name: Optional[str] = None
    first_name: Optional[str] = None
    middle_name: Optional[str] = None
    last_name: Optional[str] = None
    job_title: Optional[str] = None
    company_name: Optional[str] = None
    home_phone: Optional[str] = None
    work_phone: Optional[str] = None
    cell_phone: Optional[str] = None
    fax: Optional[str] = None
    addresses: Tuple[Address, ...] = ()
    notes: Tuple[Note, ...] = ()
    lists: Tuple[ContactListRef, ...] = ()
    email_addresses: Tuple[EmailAddress, ...] = ()
    custom_fields: Tuple[CustomField, ...] = ()
    created_date: Optional[datetime] = None
    modified_date: Optional[datetime] = None

    @property
    def primary_email(self) -> Optional[str]:
        """First email address of the contact, if any."""
        if not self.email_addresses:
            return None
        return self.email_addresses[0].email_address


class ContactList(CTCTModel):
    """A contact list.

    :param id: Server-assigned list id
    :type id: Optional[str]
    :param name: Unique list name
    :type name: Optional[str]
    :param status: Visibility of the list
    :type status: Optional[ContactListStatus]
    :param contact_count: Number of contacts on the list
    :type contact_count: Optional[int]
    """

    id: Optional[str] = None
    name: Optional[str] = None
    status: Optional[ContactListStatus] = None
    contact_count: Optional[int] = Field(None, description="Number of contacts")
    created_date: Optional[datetime] = None
    modified_date: Optional[datetime] = None
