"""Shared Pydantic base models for the Constant Contact SDK.

Every resource record derives from :class:`CTCTModel`, which makes the
record immutable and therefore hashable. Equality and hashing are
structural: two records are equal when all of their fields are equal.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class CTCTModel(BaseModel):
    """Base model for all API resources.

    Provides consistent configuration for all resource models: frozen
    instances, population by wire name or attribute name, and unknown
    JSON fields ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",  # API adds fields over time
        populate_by_name=True,
    )

    def to_json_dict(self) -> Dict[str, Any]:
        """Serialize the record into its JSON wire representation.

        Fields left as ``None`` are omitted so partial updates do not
        clear server-side values.

        :return: JSON-compatible dictionary keyed by wire names
        :rtype: Dict[str, Any]
        """
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self) -> str:
        """Serialize the record to a JSON string.

        :return: JSON text keyed by wire names
        :rtype: str
        """
        return self.model_dump_json(by_alias=True, exclude_none=True)


class ErrorDetail(CTCTModel):
    """A single structured error reported by the API.

    :param error_key: Machine-readable error key
    :type error_key: Optional[str]
    :param error_message: Human-readable error message
    :type error_message: Optional[str]
    """

    error_key: Optional[str] = Field(None, description="Error key")
    error_message: Optional[str] = Field(None, description="Error message")


def format_timestamp(value: datetime) -> str:
    """Format a datetime the way the API expects in query filters.

    Naive datetimes are taken to be UTC.

    :param value: Timestamp to format
    :type value: datetime
    :return: ISO-8601 string ``YYYY-MM-DDTHH:MM:SS.mmmZ``
    :rtype: str
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"
