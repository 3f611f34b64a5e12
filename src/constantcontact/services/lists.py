"""Contact list operations."""

from datetime import datetime
from typing import List, Optional, Union

from ..config.endpoints import Endpoints
from ..models import Contact, ContactList, ResultSet
from .base import BaseService


class ContactListService(BaseService):
    """Service for the contact lists API."""

    def get_lists(self, modified_since: Optional[Union[str, datetime]] = None) -> List[ContactList]:
        """Get all contact lists of the account.

        The lists endpoint is not paginated and returns a bare array.

        :param modified_since: Only lists modified since this time
        :type modified_since: Optional[Union[str, datetime]]
        :return: Contact lists
        :rtype: List[ContactList]
        """
        url = self._url(Endpoints.LISTS, query_params={"modified_since": modified_since})
        return self._get(url, List[ContactList], allow_empty=True) or []

    def get_list(self, list_id: str) -> ContactList:
        self._require_id(list_id, "list_id")
        return self._get(self._url(Endpoints.LIST, {"listId": list_id}), ContactList)

    def add_list(self, contact_list: ContactList) -> ContactList:
        """Create a contact list.

        :param contact_list: List to create; ``name`` and ``status`` are required remotely
        :type contact_list: ContactList
        :return: The created list
        :rtype: ContactList
        """
        self._require_model(contact_list, "contact_list")
        return self._post(self._url(Endpoints.LISTS), contact_list, ContactList)

    def update_list(self, contact_list: ContactList) -> ContactList:
        self._require_model(contact_list, "contact_list")
        list_id = self._require_id(contact_list.id, "contact_list.id")
        url = self._url(Endpoints.LIST, {"listId": list_id})
        return self._put(url, contact_list, ContactList)

    def delete_list(self, list_id: str) -> bool:
        self._require_id(list_id, "list_id")
        return self._delete(self._url(Endpoints.LIST, {"listId": list_id}))

    def get_contacts_from_list(
        self,
        list_id: str,
        modified_since: Optional[Union[str, datetime]] = None,
        limit: Optional[int] = None,
    ) -> ResultSet[Contact]:
        """Get a page of the contacts on a list.

        Follow-up pages are fetched with
        :meth:`ContactService.get_contacts_next`.

        :param list_id: The list id
        :type list_id: str
        :param modified_since: Only contacts modified since this time
        :type modified_since: Optional[Union[str, datetime]]
        :param limit: Page size (1 - 500)
        :type limit: Optional[int]
        :return: First page of contacts
        :rtype: ResultSet[Contact]
        """
        self._require_id(list_id, "list_id")
        self._check_limit(limit)
        url = self._url(
            Endpoints.LIST_CONTACTS,
            {"listId": list_id},
            {"modified_since": modified_since, "limit": limit},
        )
        return self._get(url, ResultSet[Contact])
