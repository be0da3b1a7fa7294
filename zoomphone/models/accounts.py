from typing import Annotated, Any, ClassVar

from pydantic import Field, field_validator

from zoomphone.models.base import (
    CommaJoined,
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
    'SETTING_TYPES',
    'AccountSettings',
    'AccountSettingsQuery',
    'AddCustomizedNumbersRequest',
    'AudioNotification',
    'AutoCallRecordingSetting',
    'BeepTone',
    'CallForwardingToOtherUsersSetting',
    'CallLiveTranscriptionSetting',
    'CallOverflowSetting',
    'CallTransferringSetting',
    'CustomizedNumber',
    'DeleteCustomizedNumbersQuery',
    'ListCustomizedNumbersRequest',
    'ListCustomizedNumbersResponse',
    'PersonalAudioLibrarySetting',
    'AllowedCallLocationsSetting',
    'SelectOutboundCallerIdSetting',
    'SmsEtiquettePolicy',
    'SmsEtiquetteToolSetting',
    'SmsSetting',
    'StateSetting',
    'VoicemailNotificationByEmailSetting',
    'ZoomPhoneOnMobileSetting',
    'ZoomPhoneOnPwaSetting',
)

SETTING_TYPES = frozenset(
    {
        'call_live_transcription',
        'local_survivability_mode',
        'external_calling_on_zoom_room_common_area',
        'select_outbound_caller_id',
        'personal_audio_library',
        'voicemail',
        'voicemail_transcription',
        'voicemail_notification_by_email',
        'shared_voicemail_notification_by_email',
        'restricted_call_hours',
        'allowed_call_locations',
        'check_voicemails_over_phone',
        'auto_call_recording',
        'ad_hoc_call_recording',
        'international_calling',
        'outbound_calling',
        'outbound_sms',
        'sms',
        'sms_etiquette_tool',
        'zoom_phone_on_mobile',
        'zoom_phone_on_pwa',
        'e2e_encryption',
        'call_handling_forwarding_to_other_users',
        'call_overflow',
        'call_transferring',
        'elevate_to_meeting',
        'call_park',
        'hand_off_to_room',
        'mobile_switch_to_carrier',
        'delegation',
        'audio_intercom',
        'block_calls_without_caller_id',
        'block_external_calls',
        'call_queue_opt_out_reason',
        'auto_delete_data_after_retention_duration',
        'auto_call_from_third_party_apps',
        'override_default_port',
        'peer_to_peer_media',
        'advanced_encryption',
        'display_call_feedback_survey',
        'block_list_for_inbound_calls_and_messaging',
        'block_calls_as_threat',
    }
)
"""Setting names accepted by the account settings ``setting_type`` filter."""


# Customized outbound caller ID numbers


class AddCustomizedNumbersRequest(PhoneModel):
    phone_number_ids: list[str]


class DeleteCustomizedNumbersQuery(QueryModel):
    customized_ids: list[str] | None = None


class ListCustomizedNumbersRequest(QueryModel):
    pagination: PaginationOptions = Field(default_factory=PaginationOptions)


class CustomizedNumber(PhoneModel):
    customize_id: str
    display_name: str | None = None
    extension_id: str | None = None
    extension_name: str | None = None
    extension_number: str | None = None
    extension_type: str | None = None
    incoming: bool | None = None
    outgoing: bool | None = None
    phone_number: str | None = None
    phone_number_id: str | None = None
    site: IdName | None = None


class ListCustomizedNumbersResponse(PhoneModel):
    items_field: ClassVar[str] = 'customize_numbers'

    pagination: Paging = Field(default_factory=PaginationResponse)
    customize_numbers: list[CustomizedNumber]


# Account settings


class AccountSettingsQuery(QueryModel):
    """Setting names to return; all settings when unset.

    Accepts a list or a comma separated string such as ``'sms, voicemail'``.
    Entries are whitespace-trimmed and sent as one comma-joined value.
    """

    setting_type: Annotated[list[str] | None, CommaJoined()] = None

    @field_validator('setting_type', mode='before')
    @classmethod
    def _split_setting_types(cls, value: Any) -> Any:
        if isinstance(value, str):
            return [entry.strip() for entry in value.split(',')]
        return value


class StateSetting(PhoneModel):
    state: Annotated[SettingState, Flatten()] = Field(default_factory=SettingState)


class AllowedCallLocationsSetting(StateSetting):
    allow_internal_calls: bool | None = None


class AudioNotification(PhoneModel):
    recording_explicit_consent: bool | None = None
    recording_start_prompt: bool | None = None
    recording_start_prompt_audio_id: str | None = None


class BeepTone(PhoneModel):
    enable: bool | None = None
    play_beep_member: str | None = None
    play_beep_time_interval: int | None = None


class AutoCallRecordingSetting(StateSetting):
    allow_stop_resume_recording: bool | None = None
    disconnect_on_recording_failure: bool | None = None
    inbound_audio_notification: AudioNotification | None = None
    outbound_audio_notification: AudioNotification | None = None
    play_recording_beep_tone: BeepTone | None = None
    recording_calls: str | None = None
    recording_transcription: bool | None = None


class CallForwardingToOtherUsersSetting(StateSetting):
    call_forwarding_type: int | None = None


class CallLiveTranscriptionSetting(StateSetting):
    transcription_start_prompt: dict[str, str] | None = None


class CallOverflowSetting(StateSetting):
    call_overflow_type: int | None = None


class CallTransferringSetting(StateSetting):
    call_transferring_type: int | None = None


class PersonalAudioLibrarySetting(StateSetting):
    allow_music_on_hold_customization: bool | None = None
    allow_voicemail_and_message_greeting_customization: bool | None = None


class SelectOutboundCallerIdSetting(StateSetting):
    allow_hide_outbound_caller_id: bool | None = None


class SmsSetting(StateSetting):
    international_sms: bool | None = None
    international_sms_countries: list[str] | None = None


class SmsEtiquettePolicy(PhoneModel):
    id: str | None = None
    name: str | None = None
    description: str | None = None
    rule: int | None = None
    content: str | None = None
    action: int | None = None
    active: bool | None = None


class SmsEtiquetteToolSetting(StateSetting):
    sms_etiquette_policy: list[SmsEtiquettePolicy] | None = None


class VoicemailNotificationByEmailSetting(StateSetting):
    include_voicemail_file: bool | None = None
    include_voicemail_transcription: bool | None = None
    forward_voicemail_to_email: bool | None = None


class ZoomPhoneOnMobileSetting(StateSetting):
    allow_calling_sms_mms: bool | None = None
    allow_calling_clients: list[str] | None = None
    allow_sms_mms_clients: list[str] | None = None


class ZoomPhoneOnPwaSetting(StateSetting):
    allow_calling: bool | None = None
    allow_sms_mms: bool | None = None


class AccountSettings(ResponseEnvelope):
    """Account-level phone settings. Only requested settings are present."""

    ad_hoc_call_recording: StateSetting | None = None
    advanced_encryption: StateSetting | None = None
    allowed_call_locations: AllowedCallLocationsSetting | None = None
    audio_intercom: StateSetting | None = None
    auto_call_from_third_party_apps: StateSetting | None = None
    auto_call_recording: AutoCallRecordingSetting | None = None
    auto_delete_data_after_retention_duration: StateSetting | None = None
    block_calls_as_threat: StateSetting | None = None
    block_calls_without_caller_id: StateSetting | None = None
    block_external_calls: StateSetting | None = None
    block_list_for_inbound_calls_and_messaging: StateSetting | None = None
    call_handling_forwarding_to_other_users: CallForwardingToOtherUsersSetting | None = None
    call_live_transcription: CallLiveTranscriptionSetting | None = None
    call_overflow: CallOverflowSetting | None = None
    call_park: StateSetting | None = None
    call_queue_opt_out_reason: StateSetting | None = None
    call_transferring: CallTransferringSetting | None = None
    check_voicemails_over_phone: StateSetting | None = None
    delegation: StateSetting | None = None
    display_call_feedback_survey: StateSetting | None = None
    e2e_encryption: StateSetting | None = None
    elevate_to_meeting: StateSetting | None = None
    external_calling_on_zoom_room_common_area: StateSetting | None = None
    hand_off_to_room: StateSetting | None = None
    international_calling: StateSetting | None = None
    local_survivability_mode: StateSetting | None = None
    mobile_switch_to_carrier: StateSetting | None = None
    outbound_calling: StateSetting | None = None
    outbound_sms: StateSetting | None = None
    override_default_port: StateSetting | None = None
    peer_to_peer_media: StateSetting | None = None
    personal_audio_library: PersonalAudioLibrarySetting | None = None
    restricted_call_hours: StateSetting | None = None
    select_outbound_caller_id: SelectOutboundCallerIdSetting | None = None
    shared_voicemail_notification_by_email: StateSetting | None = None
    sms: SmsSetting | None = None
    sms_etiquette_tool: SmsEtiquetteToolSetting | None = None
    voicemail: StateSetting | None = None
    voicemail_notification_by_email: VoicemailNotificationByEmailSetting | None = None
    voicemail_transcription: StateSetting | None = None
    zoom_phone_on_mobile: ZoomPhoneOnMobileSetting | None = None
    zoom_phone_on_pwa: ZoomPhoneOnPwaSetting | None = None
