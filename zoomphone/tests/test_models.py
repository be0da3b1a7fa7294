"""Tests for payload models: flattened fields and polymorphic settings."""

from typing import Annotated

import pydantic
import pytest

from zoomphone.exceptions import ValidationError
from zoomphone.models.accounts import (
    SETTING_TYPES,
    AccountSettings,
    ListCustomizedNumbersResponse,
)
from zoomphone.models.auto_receptionists import AutoReceptionistPolicy, SmsPolicy
from zoomphone.models.base import Flatten, PhoneModel, SettingState
from zoomphone.models.blocked_list import ListBlockedListResponse
from zoomphone.models.call_handling import (
    CallForwardingSubSetting,
    CallHandlingSettings,
    CallHandlingSubSetting,
    CustomHoursSubSetting,
    HolidaySubSetting,
    parse_call_handling_request,
)

from .fixtures import ACCOUNT_SETTINGS, CALL_HANDLING_SETTINGS, blocked_list_page


class TestFlatten:
    """Tests for fields flattened into the parent's namespace."""

    def test_state_collected_from_parent(self):
        """Test that enable/locked keys populate the nested state."""
        settings = AccountSettings.model_validate(ACCOUNT_SETTINGS)

        assert settings.sms.state == SettingState(
            enable=True, locked=False, locked_by='account'
        )
        assert settings.voicemail.state.enable is False
        assert settings.voicemail.state.locked is True

    def test_state_spread_on_dump(self):
        """Test that the nested state is written back as sibling keys."""
        policy = SmsPolicy(state=SettingState(enable=True, locked=False))
        dumped = policy.model_dump(exclude_none=True)

        assert dumped == {'enable': True, 'locked': False}
        assert 'state' not in dumped

    def test_dump_then_validate(self):
        """Test that a dumped model validates back to the same value."""
        settings = AccountSettings.model_validate(ACCOUNT_SETTINGS)
        dumped = settings.model_dump(mode='json', by_alias=True, exclude_none=True)

        assert AccountSettings.model_validate(dumped) == settings
        assert dumped['auto_call_recording']['recording_calls'] == 'both'
        assert dumped['auto_call_recording']['enable'] is True

    def test_missing_state_keys(self):
        """Test that absent state keys leave an empty state."""
        settings = AccountSettings.model_validate({'sms': {}})
        assert settings.sms.state == SettingState()

    def test_pagination_metadata_collected(self):
        """Test that list responses collect top-level paging keys."""
        page = ListBlockedListResponse.model_validate(blocked_list_page(['a'], 'next'))

        assert page.pagination.next_page_token == 'next'
        assert page.pagination.total_records == 10
        assert [entry.id for entry in page.blocked_list] == ['a']

    def test_flatten_requires_model(self):
        """Test that Flatten on a non-model field is reported."""

        class Broken(PhoneModel):
            value: Annotated[int, Flatten()] = 0

        with pytest.raises(TypeError):
            Broken.model_validate({'value': 1})


class TestAccountSettingsFields:
    """Tests for the coverage of account settings."""

    def test_every_setting_type_is_a_field(self):
        """Test that each filterable setting name has a field."""
        assert SETTING_TYPES == set(AccountSettings.model_fields)

    def test_setting_specific_keys(self):
        """Test that keys beyond the shared state are kept."""
        settings = AccountSettings.model_validate(
            {
                'sms': {'enable': True, 'international_sms': True},
                'zoom_phone_on_pwa': {'enable': False, 'allow_sms_mms': True},
                'voicemail_notification_by_email': {'include_voicemail_file': True},
            }
        )

        assert settings.sms.international_sms is True
        assert settings.zoom_phone_on_pwa.allow_sms_mms is True
        assert settings.zoom_phone_on_pwa.state.enable is False
        assert settings.voicemail_notification_by_email.include_voicemail_file is True

    @pytest.mark.parametrize(
        'model', [AccountSettings, AutoReceptionistPolicy, CallHandlingSettings]
    )
    def test_unknown_only_body(self, model):
        """Test that a body carrying none of the fields is rejected."""
        with pytest.raises(pydantic.ValidationError):
            model.model_validate({'unexpected': 1})


class TestResponseShapes:
    """Tests for required identifying fields on responses."""

    def test_items_are_required(self):
        """Test that a list response without its items is rejected."""
        with pytest.raises(pydantic.ValidationError):
            ListCustomizedNumbersResponse.model_validate({'next_page_token': ''})

    def test_item_identifier_required(self):
        """Test that list entries must carry their identifier."""
        with pytest.raises(pydantic.ValidationError):
            ListCustomizedNumbersResponse.model_validate(
                {'customize_numbers': [{'display_name': 'no id'}]}
            )


class TestCallHandlingSettings:
    """Tests for the call handling discriminated union."""

    def test_variants_selected_by_discriminator(self):
        """Test that each sub setting decodes into its own type."""
        settings = CallHandlingSettings.model_validate(CALL_HANDLING_SETTINGS)

        custom_hours, routing = settings.business_hours
        assert isinstance(custom_hours, CustomHoursSubSetting)
        assert custom_hours.settings.custom_hours_settings[0].from_ == '09:00'
        assert isinstance(routing, CallHandlingSubSetting)
        assert routing.settings.max_wait_time == 30

        assert isinstance(settings.closed_hours[0], CallForwardingSubSetting)
        holiday = settings.holiday_hours[0].details[0]
        assert isinstance(holiday, HolidaySubSetting)
        assert holiday.settings.name == 'New Year'

    def test_unknown_discriminator_fails(self):
        """Test that an unknown sub_setting_type is not passed through."""
        data = {'business_hours': [{'sub_setting_type': 'fax', 'settings': {}}]}
        with pytest.raises(pydantic.ValidationError):
            CallHandlingSettings.model_validate(data)

    def test_encode_variant(self):
        """Test that the discriminator and aliases are kept in the body."""
        body = HolidaySubSetting.model_validate(
            {'settings': {'name': 'Day off', 'from': '2026-07-04', 'to': '2026-07-05'}}
        )
        assert body.model_dump(by_alias=True, exclude_none=True) == {
            'sub_setting_type': 'holiday',
            'settings': {'name': 'Day off', 'from': '2026-07-04', 'to': '2026-07-05'},
        }


class TestParseCallHandlingRequest:
    """Tests for parse_call_handling_request."""

    def test_add_call_forwarding(self):
        """Test building an add request from a raw dict."""
        request = parse_call_handling_request(
            {
                'sub_setting_type': 'call_forwarding',
                'settings': {'phone_number': '+15555550101', 'description': 'Cell'},
            }
        )
        assert isinstance(request, CallForwardingSubSetting)
        assert request.settings.phone_number == '+15555550101'

    def test_add_rejects_update_only_type(self):
        """Test that custom_hours cannot be added."""
        with pytest.raises(ValidationError) as exc_info:
            parse_call_handling_request({'sub_setting_type': 'custom_hours', 'settings': {}})

        assert exc_info.value.rule == 'AllowedValues'
        assert exc_info.value.field == 'sub_setting_type'

    def test_update_accepts_custom_hours(self):
        """Test that custom_hours is valid for updates."""
        request = parse_call_handling_request(
            {'sub_setting_type': 'custom_hours', 'settings': {'type': 1}}, update=True
        )
        assert isinstance(request, CustomHoursSubSetting)

    def test_unknown_type(self):
        """Test that an unknown discriminator raises ValidationError."""
        with pytest.raises(ValidationError):
            parse_call_handling_request({'sub_setting_type': 'fax', 'settings': {}}, update=True)
