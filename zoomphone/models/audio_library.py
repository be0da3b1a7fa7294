from pydantic import Field

from zoomphone.models.base import PhoneModel

__all__ = (
    'AddAudioItemRequest',
    'AddAudioItemsRequest',
    'AddAudioItemsResponse',
    'AudioAttachment',
    'AudioItem',
    'AudioItemCreated',
    'ListAudioItemsResponse',
    'UpdateAudioItemRequest',
)


class AddAudioItemRequest(PhoneModel):
    """Text-to-speech audio item."""

    audio_name: str
    text: str | None = None
    voice_accent: str | None = None
    voice_language: str | None = None


class AudioAttachment(PhoneModel):
    audio_type: str
    base64_encoding: str
    name: str


class AddAudioItemsRequest(PhoneModel):
    attachments: list[AudioAttachment]


class AudioItemCreated(PhoneModel):
    audio_id: str
    name: str | None = None


class AddAudioItemsResponse(PhoneModel):
    audios: list[AudioItemCreated]


class AudioItem(PhoneModel):
    audio_id: str
    name: str | None = None
    play_url: str | None = None
    text: str | None = None
    voice_accent: str | None = None
    voice_language: str | None = None


class ListAudioItemsResponse(PhoneModel):
    audios: list[AudioItem] = Field(default_factory=list)


class UpdateAudioItemRequest(PhoneModel):
    name: str
