"""Contact management operations."""

import logging
from datetime import datetime
from typing import Optional, Union

from ..config.endpoints import Endpoints
from ..models import ActionBy, Contact, ContactStatus, ResultSet
from .base import BaseService

logger = logging.getLogger(__name__)


def _action_by(action_by_visitor: bool) -> ActionBy:
    return ActionBy.ACTION_BY_VISITOR if action_by_visitor else ActionBy.ACTION_BY_OWNER


class ContactService(BaseService):
    """Service for the contacts API.

    Write operations take an ``action_by_visitor`` flag. When set, the
    change is recorded as made by the contact, which triggers the
    double opt-in confirmation email where enabled.
    """

    def get_contacts(
        self,
        email: Optional[str] = None,
        status: Optional[Union[ContactStatus, str]] = None,
        modified_since: Optional[Union[str, datetime]] = None,
        limit: Optional[int] = None,
    ) -> ResultSet[Contact]:
        """Get a page of contacts, optionally filtered.

        :param email: Only the contact with this email address
        :type email: Optional[str]
        :param status: Only contacts with this status
        :type status: Optional[Union[ContactStatus, str]]
        :param modified_since: Only contacts modified since this time
        :type modified_since: Optional[Union[str, datetime]]
        :param limit: Page size (1 - 500)
        :type limit: Optional[int]
        :return: First page of contacts
        :rtype: ResultSet[Contact]
        """
        self._check_limit(limit)
        url = self._url(
            Endpoints.CONTACTS,
            query_params={
                "email": email,
                "status": status,
                "modified_since": modified_since,
                "limit": limit,
            },
        )
        return self._get(url, ResultSet[Contact])

    def get_contacts_next(self, next_link: str) -> ResultSet[Contact]:
        """Get the page of contacts at ``next_link``."""
        return self._get(self._next_url(next_link), ResultSet[Contact])

    def get_contact(self, contact_id: str) -> Contact:
        """Get a single contact.

        :param contact_id: The contact id
        :type contact_id: str
        :return: The contact
        :rtype: Contact
        """
        self._require_id(contact_id, "contact_id")
        return self._get(self._url(Endpoints.CONTACT, {"contactId": contact_id}), Contact)

    def add_contact(self, contact: Contact, action_by_visitor: bool = False) -> Contact:
        """Create a contact.

        :param contact: Contact to create; needs at least one email address
        :type contact: Contact
        :param action_by_visitor: Record the opt-in as made by the contact
        :type action_by_visitor: bool
        :return: The created contact with its server-assigned id
        :rtype: Contact
        """
        self._require_model(contact, "contact")
        url = self._url(
            Endpoints.CONTACTS, query_params={"action_by": _action_by(action_by_visitor)}
        )
        created = self._post(url, contact, Contact)
        logger.info("Created contact %s", created.id)
        return created

    def update_contact(self, contact: Contact, action_by_visitor: bool = False) -> Contact:
        """Update a contact; its ``id`` selects the record.

        :param contact: Contact carrying its server-assigned id
        :type contact: Contact
        :param action_by_visitor: Record the change as made by the contact
        :type action_by_visitor: bool
        :return: The updated contact
        :rtype: Contact
        """
        self._require_model(contact, "contact")
        contact_id = self._require_id(contact.id, "contact.id")
        url = self._url(
            Endpoints.CONTACT,
            {"contactId": contact_id},
            {"action_by": _action_by(action_by_visitor)},
        )
        return self._put(url, contact, Contact)

    def delete_contact(self, contact_id: str) -> bool:
        """Delete (opt out) a contact.

        :return: True when the server answered 204 No Content
        :rtype: bool
        """
        self._require_id(contact_id, "contact_id")
        return self._delete(self._url(Endpoints.CONTACT, {"contactId": contact_id}))
