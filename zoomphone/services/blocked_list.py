from typing import Any

from httpx import Response

from zoomphone.core.endpoint import Endpoint
from zoomphone.models.blocked_list import (
    BlockedList,
    BlockedListCreated,
    CreateBlockedListRequest,
    ListBlockedListRequest,
    ListBlockedListResponse,
    UpdateBlockedListRequest,
)
from zoomphone.services.base import Service, paginated

__all__ = ('BlockedListService',)

BLOCKED_LIST_PATH = '/phone/blocked_list'
BLOCKED_LIST_ENTRY_PATH = '/phone/blocked_list/{blocked_list_id}'

CREATE_BLOCKED_LIST = Endpoint(
    'create_blocked_list', 'POST', BLOCKED_LIST_PATH, response_model=BlockedListCreated
)
DELETE_BLOCKED_LIST = Endpoint('delete_blocked_list', 'DELETE', BLOCKED_LIST_ENTRY_PATH)
GET_BLOCKED_LIST = Endpoint(
    'get_blocked_list', 'GET', BLOCKED_LIST_ENTRY_PATH, response_model=BlockedList
)
LIST_BLOCKED_LIST = Endpoint(
    'list_blocked_list', 'GET', BLOCKED_LIST_PATH, response_model=ListBlockedListResponse
)
UPDATE_BLOCKED_LIST = Endpoint('update_blocked_list', 'PATCH', BLOCKED_LIST_ENTRY_PATH)


class BlockedListService(Service):
    """Numbers and prefixes blocked for inbound or outbound calls."""

    def create_blocked_list(
        self, body: CreateBlockedListRequest, **kwargs: Any
    ) -> BlockedListCreated:
        return self._call(CREATE_BLOCKED_LIST, body=body, **kwargs)

    def delete_blocked_list(self, blocked_list_id: str, **kwargs: Any) -> Response:
        return self._call(DELETE_BLOCKED_LIST, blocked_list_id, **kwargs)

    def get_blocked_list(self, blocked_list_id: str, **kwargs: Any) -> BlockedList:
        return self._call(GET_BLOCKED_LIST, blocked_list_id, **kwargs)

    @paginated(ListBlockedListRequest)
    def list_blocked_list(
        self, query: ListBlockedListRequest | None = None, **kwargs: Any
    ) -> ListBlockedListResponse:
        return self._call(LIST_BLOCKED_LIST, query=query, **kwargs)

    def update_blocked_list(
        self, blocked_list_id: str, body: UpdateBlockedListRequest, **kwargs: Any
    ) -> Response:
        return self._call(UPDATE_BLOCKED_LIST, blocked_list_id, body=body, **kwargs)
