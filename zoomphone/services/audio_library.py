from typing import Any

from httpx import Response

from zoomphone.core.endpoint import Endpoint
from zoomphone.models.audio_library import (
    AddAudioItemRequest,
    AddAudioItemsRequest,
    AddAudioItemsResponse,
    AudioItem,
    AudioItemCreated,
    ListAudioItemsResponse,
    UpdateAudioItemRequest,
)
from zoomphone.services.base import Service

__all__ = ('AudioLibraryService',)

USER_AUDIOS_PATH = '/phone/users/{user_id}/audios'
AUDIO_PATH = '/phone/audios/{audio_id}'

ADD_AUDIO_ITEM = Endpoint(
    'add_audio_item', 'POST', USER_AUDIOS_PATH, response_model=AudioItemCreated
)
ADD_AUDIO_ITEMS = Endpoint(
    'add_audio_items',
    'POST',
    f'{USER_AUDIOS_PATH}/batch',
    response_model=AddAudioItemsResponse,
)
DELETE_AUDIO_ITEM = Endpoint('delete_audio_item', 'DELETE', AUDIO_PATH)
GET_AUDIO_ITEM = Endpoint('get_audio_item', 'GET', AUDIO_PATH, response_model=AudioItem)
LIST_AUDIO_ITEMS = Endpoint(
    'list_audio_items', 'GET', USER_AUDIOS_PATH, response_model=ListAudioItemsResponse
)
UPDATE_AUDIO_ITEM = Endpoint('update_audio_item', 'PATCH', AUDIO_PATH)


class AudioLibraryService(Service):
    """Per-user audio prompts used by greetings and call routing."""

    def add_audio_item(
        self, user_id: str, body: AddAudioItemRequest, **kwargs: Any
    ) -> AudioItemCreated:
        """Create a text-to-speech audio item for a user."""
        return self._call(ADD_AUDIO_ITEM, user_id, body=body, **kwargs)

    def add_audio_items(
        self, user_id: str, body: AddAudioItemsRequest, **kwargs: Any
    ) -> AddAudioItemsResponse:
        """Upload base64 encoded audio files for a user."""
        return self._call(ADD_AUDIO_ITEMS, user_id, body=body, **kwargs)

    def delete_audio_item(self, audio_id: str, **kwargs: Any) -> Response:
        return self._call(DELETE_AUDIO_ITEM, audio_id, **kwargs)

    def get_audio_item(self, audio_id: str, **kwargs: Any) -> AudioItem:
        return self._call(GET_AUDIO_ITEM, audio_id, **kwargs)

    def list_audio_items(self, user_id: str, **kwargs: Any) -> ListAudioItemsResponse:
        return self._call(LIST_AUDIO_ITEMS, user_id, **kwargs)

    def update_audio_item(
        self, audio_id: str, body: UpdateAudioItemRequest, **kwargs: Any
    ) -> Response:
        return self._call(UPDATE_AUDIO_ITEM, audio_id, body=body, **kwargs)
