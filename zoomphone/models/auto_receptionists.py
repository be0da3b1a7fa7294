from typing import Annotated, ClassVar

from pydantic import Field

from zoomphone.models.base import (
    Flatten,
    IdName,
    PaginationOptions,
    Paging,
    PaginationResponse,
    PhoneModel,
    QueryModel,
    ResponseEnvelope,
    SettingState,
)

__all__ = (
    'AddAutoReceptionistRequest',
    'AssignPhoneNumbersRequest',
    'AutoReceptionist',
    'AutoReceptionistCreated',
    'AutoReceptionistPolicy',
    'DeletePolicySubSettingQuery',
    'HolidayHours',
    'ListAutoReceptionistsRequest',
    'ListAutoReceptionistsResponse',
    'PhoneNumber',
    'PolicySubSetting',
    'SmsPolicy',
    'SmsPolicyUpdate',
    'UpdateAutoReceptionistPolicyRequest',
    'UpdateAutoReceptionistRequest',
    'UpdatePolicySubSettingRequest',
    'VoicemailAccessMember',
    'VoicemailNotificationByEmail',
    'VoicemailNotificationByEmailPolicy',
    'VoicemailTranscriptionPolicy',
    'VoicemailTranscriptionUpdate',
)


class PhoneNumber(PhoneModel):
    id: str | None = None
    number: str | None = None


class HolidayHours(PhoneModel):
    id: str | None = None
    name: str | None = None
    from_: str | None = Field(default=None, alias='from')
    to: str | None = None


class AddAutoReceptionistRequest(PhoneModel):
    name: str
    site_id: str | None = None


class AutoReceptionistCreated(PhoneModel):
    id: str
    name: str | None = None
    extension_number: int | None = None


class AutoReceptionist(PhoneModel):
    id: str | None = None
    name: str
    extension_id: str | None = None
    extension_number: int | None = None
    audio_prompt_language: str | None = None
    cost_center: str | None = None
    department: str | None = None
    holiday_hours: list[HolidayHours] = Field(default_factory=list)
    own_storage_name: str | None = None
    phone_numbers: list[PhoneNumber] = Field(default_factory=list)
    recording_storage_location: str | None = None
    site: IdName | None = None
    time_zone: str | None = None


class ListAutoReceptionistsRequest(QueryModel):
    pagination: PaginationOptions = Field(default_factory=PaginationOptions)


class ListAutoReceptionistsResponse(PhoneModel):
    items_field: ClassVar[str] = 'auto_receptionists'

    pagination: Paging = Field(default_factory=PaginationResponse)
    auto_receptionists: list[AutoReceptionist]


class UpdateAutoReceptionistRequest(PhoneModel):
    audio_prompt_language: str | None = None
    cost_center: str | None = None
    department: str | None = None
    extension_number: int | None = None
    name: str | None = None
    recording_storage_location: str | None = None
    time_zone: str | None = None


class AssignPhoneNumbersRequest(PhoneModel):
    phone_numbers: list[PhoneNumber]


# Policies


class VoicemailAccessMember(PhoneModel):
    access_user_id: str
    access_user_type: str | None = None
    delete: bool | None = None
    download: bool | None = None
    shared_id: str | None = None


class PolicySubSetting(PhoneModel):
    voice_mail_access_member: VoicemailAccessMember


class UpdatePolicySubSettingRequest(PhoneModel):
    voice_mail_access_member: VoicemailAccessMember


class DeletePolicySubSettingQuery(QueryModel):
    shared_ids: list[str] | None = None


class SmsPolicy(PhoneModel):
    state: Annotated[SettingState, Flatten()] = Field(default_factory=SettingState)
    international_sms: bool | None = None


class VoicemailNotificationByEmailPolicy(PhoneModel):
    state: Annotated[SettingState, Flatten()] = Field(default_factory=SettingState)
    modified: bool | None = None
    forward_voicemail_to_email: bool | None = None
    include_voicemail_file: bool | None = None
    include_voicemail_transcription: bool | None = None


class VoicemailTranscriptionPolicy(PhoneModel):
    state: Annotated[SettingState, Flatten()] = Field(default_factory=SettingState)
    modified: bool | None = None


class AutoReceptionistPolicy(ResponseEnvelope):
    sms: SmsPolicy | None = None
    voicemail_access_members: list[VoicemailAccessMember] = Field(default_factory=list)
    voicemail_notification_by_email: VoicemailNotificationByEmailPolicy | None = None
    voicemail_transcription: VoicemailTranscriptionPolicy | None = None


class SmsPolicyUpdate(PhoneModel):
    enable: bool | None = None
    international_sms: bool | None = None
    international_sms_countries: list[str] | None = None
    reset: bool | None = None


class VoicemailNotificationByEmail(PhoneModel):
    forward_voicemail_to_email: bool | None = None
    include_voicemail_file: bool | None = None
    include_voicemail_transcription: bool | None = None


class VoicemailTranscriptionUpdate(PhoneModel):
    enable: bool | None = None
    reset: bool | None = None


class UpdateAutoReceptionistPolicyRequest(PhoneModel):
    sms: SmsPolicyUpdate | None = None
    voicemail_notification_by_email: VoicemailNotificationByEmail | None = None
    voicemail_transcription: VoicemailTranscriptionUpdate | None = None
