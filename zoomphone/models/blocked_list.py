import enum
from typing import ClassVar

from pydantic import Field

from zoomphone.models.base import (
    PaginationOptions,
    Paging,
    PaginationResponse,
    PhoneModel,
    QueryModel,
)

__all__ = (
    'BlockType',
    'BlockedList',
    'BlockedListCreated',
    'CreateBlockedListRequest',
    'ListBlockedListRequest',
    'ListBlockedListResponse',
    'MatchType',
    'UpdateBlockedListRequest',
)


class BlockType(str, enum.Enum):
    INBOUND = 'inbound'
    OUTBOUND = 'outbound'
    THREAT = 'threat'


class MatchType(str, enum.Enum):
    PHONE_NUMBER = 'phoneNumber'
    PREFIX = 'prefix'


class CreateBlockedListRequest(PhoneModel):
    block_type: BlockType
    comment: str | None = None
    country: str | None = None
    match_type: MatchType | None = None
    phone_number: str | None = None
    status: str | None = None


class UpdateBlockedListRequest(PhoneModel):
    block_type: BlockType | None = None
    comment: str | None = None
    country: str | None = None
    match_type: MatchType | None = None
    phone_number: str | None = None
    status: str | None = None


class BlockedListCreated(PhoneModel):
    id: str


class BlockedList(PhoneModel):
    id: str
    block_type: str | None = None
    comment: str | None = None
    match_type: str | None = None
    phone_number: str | None = None
    status: str | None = None


class ListBlockedListRequest(QueryModel):
    pagination: PaginationOptions = Field(default_factory=PaginationOptions)


class ListBlockedListResponse(PhoneModel):
    items_field: ClassVar[str] = 'blocked_list'

    pagination: Paging = Field(default_factory=PaginationResponse)
    blocked_list: list[BlockedList]
