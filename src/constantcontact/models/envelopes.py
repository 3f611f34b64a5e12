"""Pagination envelopes returned by list endpoints.

Two envelope families exist in the API. Campaign tracking endpoints
return :class:`Paged`; contacts, lists, campaigns and contact tracking
return :class:`ResultSet`. They are not interchangeable: each service
decodes into the envelope of its own endpoint family.

In both, ``next_link`` is an opaque path issued by the server. It is
passed back verbatim to fetch the following page and is absent on the
last page.
"""

from typing import Generic, Optional, Tuple, TypeVar
from urllib.parse import parse_qs, urlsplit

from pydantic import Field

from .base_models import CTCTModel

T = TypeVar("T")


class PagedPagination(CTCTModel):
    """Pagination block of a :class:`Paged` envelope."""

    next_link: Optional[str] = Field(None, description="Path of the next page")


class PagedMeta(CTCTModel):
    """Metadata block of a :class:`Paged` envelope."""

    pagination: PagedPagination = Field(default_factory=PagedPagination)


class Paged(CTCTModel, Generic[T]):
    """Page of results from a campaign tracking endpoint.

    :param results: Records on this page, in server order
    :type results: Tuple[T, ...]
    :param meta: Pagination metadata
    :type meta: PagedMeta
    """

    results: Tuple[T, ...] = ()
    meta: PagedMeta = Field(default_factory=PagedMeta)

    @property
    def next_link(self) -> Optional[str]:
        """Path of the next page, or None on the last page."""
        return self.meta.pagination.next_link

    @property
    def has_next(self) -> bool:
        return bool(self.next_link)


class ResultSetPagination(CTCTModel):
    """Pagination block of a :class:`ResultSet` envelope."""

    next_link: Optional[str] = Field(None, description="Path of the next page")

    @property
    def next(self) -> Optional[str]:
        """The ``next`` token carried in the link's query string."""
        if not self.next_link:
            return None
        values = parse_qs(urlsplit(self.next_link).query).get("next")
        return values[0] if values else None


class ResultSetMeta(CTCTModel):
    """Metadata block of a :class:`ResultSet` envelope."""

    pagination: ResultSetPagination = Field(default_factory=ResultSetPagination)


class ResultSet(CTCTModel, Generic[T]):
    """Set of results from a contacts, lists, campaigns or contact tracking endpoint.

    :param results: Records in this set, in server order
    :type results: Tuple[T, ...]
    :param meta: Pagination metadata
    :type meta: ResultSetMeta
    """

    results: Tuple[T, ...] = ()
    meta: ResultSetMeta = Field(default_factory=ResultSetMeta)

    @property
    def next_link(self) -> Optional[str]:
        """Path of the next set, or None when this is the last one."""
        return self.meta.pagination.next_link

    @property
    def next(self) -> Optional[str]:
        """Opaque ``next`` token of the following set."""
        return self.meta.pagination.next

    @property
    def has_next(self) -> bool:
        return bool(self.next_link)
