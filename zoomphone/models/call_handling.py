"""Call handling payloads.

A call handling entry pairs a ``sub_setting_type`` discriminator with a
``settings`` object whose shape depends on it. Each known discriminator has
its own model; unknown discriminators fail validation instead of being
passed through as untyped data.
"""

import enum
from typing import Annotated, Any, Literal, Union

import pydantic
from pydantic import Field, TypeAdapter

from zoomphone.exceptions import ValidationError
from zoomphone.models.base import IdName, PhoneModel, QueryModel, ResponseEnvelope

__all__ = (
    'ADD_SUB_SETTING_TYPES',
    'CALL_HANDLING_SETTING_TYPES',
    'UPDATE_SUB_SETTING_TYPES',
    'AddCallHandlingRequest',
    'CallDistribution',
    'CallForwardingSettings',
    'CallForwardingSubSetting',
    'CallHandlingCreated',
    'CallHandlingSettings',
    'CallHandlingSettingType',
    'CallHandlingSubSetting',
    'CustomHours',
    'CustomHoursSettings',
    'CustomHoursSubSetting',
    'DeleteCallHandlingQuery',
    'ForwardTo',
    'HolidayHoursEntry',
    'HolidaySettings',
    'HolidaySubSetting',
    'Routing',
    'RoutingSettings',
    'SubSetting',
    'UpdateCallHandlingRequest',
    'parse_call_handling_request',
)


class CallHandlingSettingType(str, enum.Enum):
    BUSINESS_HOURS = 'business_hours'
    CLOSED_HOURS = 'closed_hours'
    HOLIDAY_HOURS = 'holiday_hours'


CALL_HANDLING_SETTING_TYPES = frozenset(t.value for t in CallHandlingSettingType)
ADD_SUB_SETTING_TYPES = frozenset({'call_forwarding', 'holiday'})
UPDATE_SUB_SETTING_TYPES = frozenset(
    {'call_forwarding', 'holiday', 'custom_hours', 'call_handling'}
)


class CallForwardingSettings(PhoneModel):
    call_forwarding_id: str | None = None
    description: str | None = None
    enable: bool | None = None
    holiday_id: str | None = None
    phone_number: str | None = None


class HolidaySettings(PhoneModel):
    holiday_id: str | None = None
    name: str | None = None
    from_: str | None = Field(default=None, alias='from')
    to: str | None = None


class CustomHours(PhoneModel):
    from_: str | None = Field(default=None, alias='from')
    to: str | None = None
    type: int | None = None
    weekday: int | None = None


class CustomHoursSettings(PhoneModel):
    allow_members_to_reset: bool | None = None
    custom_hours_settings: list[CustomHours] | None = None
    type: int | None = None


class CallDistribution(PhoneModel):
    handle_multiple_calls: bool | None = None
    ring_duration: int | None = None
    ring_mode: str | None = None
    skip_offline_device_phone_numbers: bool | None = None


class ForwardTo(PhoneModel):
    id: str | None = None
    description: str | None = None
    display_name: str | None = None
    extension_id: str | None = None
    extension_number: int | None = None
    extension_type: str | None = None
    phone_number: str | None = None
    voicemail_greeting: IdName | None = None
    message_greeting: IdName | None = None
    voicemail_leaving_instructions: IdName | None = None
    play_callee_voicemail_greeting: bool | None = None
    require_press_1_before_connecting: bool | None = None
    call_distribution: CallDistribution | None = None


class Routing(PhoneModel):
    action: int | None = None
    allow_callers_check_voicemail: bool | None = None
    busy_play_callee_voicemail_greeting: bool | None = None
    connect_to_operator: bool | None = None
    forward_to: ForwardTo | None = None
    operator: ForwardTo | None = None


class RoutingSettings(PhoneModel):
    allow_members_to_reset: bool | None = None
    audio_while_connecting: IdName | None = None
    busy_routing: Routing | None = None
    call_distribution: CallDistribution | None = None
    max_wait_time: int | None = None
    ring_mode: str | None = None
    routing: Routing | None = None


class CallForwardingSubSetting(PhoneModel):
    sub_setting_type: Literal['call_forwarding'] = 'call_forwarding'
    settings: CallForwardingSettings


class HolidaySubSetting(PhoneModel):
    sub_setting_type: Literal['holiday'] = 'holiday'
    settings: HolidaySettings


class CustomHoursSubSetting(PhoneModel):
    sub_setting_type: Literal['custom_hours'] = 'custom_hours'
    settings: CustomHoursSettings


class CallHandlingSubSetting(PhoneModel):
    sub_setting_type: Literal['call_handling'] = 'call_handling'
    settings: RoutingSettings


SubSetting = Annotated[
    Union[
        CallForwardingSubSetting,
        HolidaySubSetting,
        CustomHoursSubSetting,
        CallHandlingSubSetting,
    ],
    Field(discriminator='sub_setting_type'),
]

AddCallHandlingRequest = Annotated[
    Union[CallForwardingSubSetting, HolidaySubSetting],
    Field(discriminator='sub_setting_type'),
]

UpdateCallHandlingRequest = SubSetting


class HolidayHoursEntry(PhoneModel):
    holiday_id: str | None = None
    details: list[SubSetting] = Field(default_factory=list)


class CallHandlingSettings(ResponseEnvelope):
    business_hours: list[SubSetting] = Field(default_factory=list)
    closed_hours: list[SubSetting] = Field(default_factory=list)
    holiday_hours: list[HolidayHoursEntry] = Field(default_factory=list)


class CallHandlingCreated(PhoneModel):
    call_forwarding_id: str | None = None
    holiday_id: str | None = None


class DeleteCallHandlingQuery(QueryModel):
    call_forwarding_id: str | None = None
    holiday_id: str | None = None


_ADD_ADAPTER = TypeAdapter(AddCallHandlingRequest)
_UPDATE_ADAPTER = TypeAdapter(UpdateCallHandlingRequest)


def parse_call_handling_request(data: dict[str, Any], *, update: bool = False) -> PhoneModel:
    """Build the typed request for a raw ``{sub_setting_type, settings}`` dict.

    Raises:
        ValidationError: If the discriminator is unknown for the operation or
            the settings do not match its shape.
    """
    adapter = _UPDATE_ADAPTER if update else _ADD_ADAPTER
    try:
        return adapter.validate_python(data)
    except pydantic.ValidationError as e:
        allowed = UPDATE_SUB_SETTING_TYPES if update else ADD_SUB_SETTING_TYPES
        raise ValidationError(
            f"invalid call handling request (sub_setting_type must be one of "
            f"{', '.join(sorted(allowed))}): {e}",
            rule='AllowedValues',
            field='sub_setting_type',
        ) from e
