from typing import Annotated, ClassVar

from pydantic import Field

from zoomphone.models.base import (
    AlwaysSend,
    PaginationOptions,
    Paging,
    PaginationResponse,
    PhoneModel,
    QueryModel,
)

__all__ = (
    'AlertSetting',
    'AlertSettingCreated',
    'ChatChannel',
    'CreateAlertRequest',
    'ListAlertSettingsRequest',
    'ListAlertSettingsResponse',
    'RuleCondition',
    'UpdateAlertRequest',
)


class RuleCondition(PhoneModel):
    rule_condition_type: int
    rule_condition_value: str


class ChatChannel(PhoneModel):
    chat_channel_name: str
    endpoint: str
    token: str


class CreateAlertRequest(PhoneModel):
    alert_settings_name: str
    module: int
    rule: int
    rule_conditions: list[RuleCondition]
    target_type: int
    target_ids: list[str] | None = None
    time_frame_type: str | None = None
    time_frame_from: str | None = None
    time_frame_to: str | None = None
    frequency: int | None = None
    email_recipients: list[str] | None = None
    chat_channels: list[ChatChannel] | None = None
    status: int | None = None


class UpdateAlertRequest(PhoneModel):
    alert_settings_name: str | None = None
    rule_conditions: list[RuleCondition] | None = None
    target_ids: list[str] | None = None
    time_frame_type: str | None = None
    time_frame_from: str | None = None
    time_frame_to: str | None = None
    frequency: int | None = None
    email_recipients: list[str] | None = None
    chat_channels: list[ChatChannel] | None = None
    status: int | None = None


class AlertSettingCreated(PhoneModel):
    alert_setting_id: str
    alert_setting_name: str | None = None


class AlertSetting(PhoneModel):
    alert_setting_id: str
    alert_setting_name: str | None = None
    module: int | None = None
    rule: int | None = None
    rule_conditions: list[RuleCondition] = Field(default_factory=list)
    target_type: int | None = None
    time_frame_type: str | None = None
    time_frame_from: str | None = None
    time_frame_to: str | None = None
    frequency: int | None = None
    email_recipients: list[str] = Field(default_factory=list)
    chat_channels: list[ChatChannel] = Field(default_factory=list)
    status: int | None = None


class ListAlertSettingsRequest(QueryModel):
    pagination: PaginationOptions = Field(default_factory=PaginationOptions)
    module: Annotated[int | None, AlwaysSend()] = None
    rule: Annotated[int | None, AlwaysSend()] = None
    status: Annotated[int | None, AlwaysSend()] = None


class ListAlertSettingsResponse(PhoneModel):
    items_field: ClassVar[str] = 'alert_settings'

    pagination: Paging = Field(default_factory=PaginationResponse)
    alert_settings: list[AlertSetting]
