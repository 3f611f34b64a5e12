"""Account settings operations."""

from typing import List, Optional, Union

from ..config.endpoints import Endpoints
from ..models import AccountEmailAddress, AccountEmailAddressStatus, AccountInfo
from .base import BaseService


class AccountService(BaseService):
    """Service for the account API."""

    def get_account_info(self) -> AccountInfo:
        return self._get(self._url(Endpoints.ACCOUNT_INFO), AccountInfo)

    def update_account_info(self, info: AccountInfo) -> AccountInfo:
        """Replace the account details.

        :param info: New account details
        :type info: AccountInfo
        :return: Account details as stored by the server
        :rtype: AccountInfo
        """
        self._require_model(info, "info")
        return self._put(self._url(Endpoints.ACCOUNT_INFO), info, AccountInfo)

    def get_verified_email_addresses(
        self, status: Optional[Union[AccountEmailAddressStatus, str]] = None
    ) -> List[AccountEmailAddress]:
        """Get the email addresses that may be used as campaign senders.

        :param status: Only addresses with this verification status
        :type status: Optional[Union[AccountEmailAddressStatus, str]]
        :return: Verified email addresses
        :rtype: List[AccountEmailAddress]
        """
        url = self._url(Endpoints.ACCOUNT_VERIFIED_ADDRESSES, query_params={"status": status})
        return self._get(url, List[AccountEmailAddress], allow_empty=True) or []

    def add_verified_email_address(self, email_address: str) -> List[AccountEmailAddress]:
        """Start verification of a new sender address.

        The server emails a confirmation link to the address; its status
        stays ``UNCONFIRMED`` until the link is followed.

        :param email_address: Address to verify
        :type email_address: str
        :return: The added address
        :rtype: List[AccountEmailAddress]
        """
        self._require_id(email_address, "email_address")
        payload = [AccountEmailAddress(email_address=email_address)]
        return self._post(
            self._url(Endpoints.ACCOUNT_VERIFIED_ADDRESSES), payload, List[AccountEmailAddress]
        )
