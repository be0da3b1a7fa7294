"""Tests for request validation rules."""

import pytest

from zoomphone.core.validation import (
    AllowedValues,
    MaxItems,
    NotBlank,
    ValidationRule,
    validate,
)
from zoomphone.exceptions import ValidationError
from zoomphone.models.accounts import (
    SETTING_TYPES,
    AccountSettingsQuery,
    AddCustomizedNumbersRequest,
    DeleteCustomizedNumbersQuery,
)

from .fixtures import make_client


class TestMaxItems:
    """Tests for the MaxItems rule."""

    def test_within_limit(self):
        """Test that exactly the limit passes."""
        assert MaxItems('ids', 30).check([str(i) for i in range(30)]) is None

    def test_over_limit(self):
        """Test that one item over the limit fails with a count."""
        message = MaxItems('ids', 30).check([str(i) for i in range(31)])
        assert message == 'cannot send more than 30 ids at once (got 31)'

    def test_empty_and_missing_pass(self):
        """Test that empty and missing collections are accepted."""
        rule = MaxItems('ids')
        assert rule.check([]) is None
        assert rule.check(None) is None


class TestAllowedValues:
    """Tests for the AllowedValues rule."""

    @pytest.fixture
    def rule(self):
        return AllowedValues('setting_type', SETTING_TYPES)

    def test_all_entries_known(self, rule):
        """Test a comma separated filter of known names."""
        assert rule.check('sms,voicemail') is None

    def test_entries_are_trimmed(self, rule):
        """Test that whitespace around entries is ignored."""
        assert rule.check(' sms , voicemail ') is None

    def test_unknown_entry(self, rule):
        """Test that a single unknown entry fails the whole filter."""
        assert rule.check('sms,fax') == "invalid setting_type 'fax'"

    def test_case_sensitive(self, rule):
        """Test that names are matched case-sensitively."""
        assert rule.check('SMS') == "invalid setting_type 'SMS'"

    def test_empty_entry(self, rule):
        """Test that an empty entry is not a recognized name."""
        assert rule.check('sms,') == "invalid setting_type ''"

    def test_list_value(self, rule):
        """Test that collections are checked entry by entry."""
        assert rule.check(['sms', 'voicemail']) is None
        assert rule.check(['sms', 'nope']) == "invalid setting_type 'nope'"

    def test_missing_value_passes(self, rule):
        """Test that an unset filter is not validated."""
        assert rule.check(None) is None

    def test_without_separator(self):
        """Test that a rule without separator checks the whole value."""
        rule = AllowedValues('kind', frozenset({'a,b'}), separator=None)
        assert rule.check('a,b') is None
        assert rule.check('a') == "invalid kind 'a'"


class TestNotBlank:
    """Tests for the NotBlank rule."""

    @pytest.mark.parametrize('value', [None, '', '   '])
    def test_blank_values(self, value):
        """Test that missing and whitespace-only values fail."""
        assert NotBlank('audio_id').check(value) == 'audio_id must not be empty'

    def test_non_blank_value(self):
        """Test that any non-blank value passes."""
        assert NotBlank('audio_id').check('abc') is None
        assert NotBlank('audio_id').check(42) is None


class TestValidate:
    """Tests for the validate function."""

    def test_first_violation_is_reported(self):
        """Test that the first failing rule raises."""
        rules = [MaxItems('ids', 1), NotBlank('name')]
        with pytest.raises(ValidationError) as exc_info:
            validate(rules, {'ids': ['a', 'b'], 'name': ''}, operation='op')

        assert exc_info.value.rule == 'MaxItems'
        assert exc_info.value.field == 'ids'
        assert str(exc_info.value).startswith('op: ')

    def test_sources_in_order(self):
        """Test that mappings are searched before models."""
        query = DeleteCustomizedNumbersQuery(customized_ids=['a', 'b'])
        validate([MaxItems('customized_ids', 1)], {'customized_ids': ['a']}, query)

    def test_model_source(self):
        """Test that model attributes are validated."""
        query = DeleteCustomizedNumbersQuery(customized_ids=['a', 'b'])
        with pytest.raises(ValidationError):
            validate([MaxItems('customized_ids', 1)], None, query)

    def test_passes_silently(self):
        """Test that validate returns None when every rule passes."""
        assert validate([NotBlank('id')], {'id': 'x'}) is None

    def test_base_rule_is_abstract(self):
        """Test that a rule without a check cannot be instantiated."""
        with pytest.raises(TypeError):
            ValidationRule('id')


class TestValidationBeforeDispatch:
    """Tests that failed validation never reaches the network."""

    def test_add_customized_numbers_limit(self):
        """Test that 31 phone numbers fail without any request."""
        client, recorder = make_client()
        body = AddCustomizedNumbersRequest(phone_number_ids=[str(i) for i in range(31)])

        with pytest.raises(ValidationError) as exc_info:
            client.phone.accounts.add_customized_numbers(body)

        assert exc_info.value.rule == 'MaxItems'
        assert exc_info.value.operation == 'add_customized_numbers'
        assert recorder.requests == []

    def test_delete_customized_numbers_limit(self):
        """Test that the same limit applies to batch deletes."""
        client, recorder = make_client()
        query = DeleteCustomizedNumbersQuery(customized_ids=[str(i) for i in range(31)])

        with pytest.raises(ValidationError):
            client.phone.accounts.delete_customized_numbers(query)

        assert recorder.requests == []

    def test_empty_batch_is_dispatched(self):
        """Test that an empty batch passes validation and is sent."""
        client, recorder = make_client()
        client.phone.accounts.add_customized_numbers(
            AddCustomizedNumbersRequest(phone_number_ids=[])
        )
        assert len(recorder.requests) == 1

    def test_unknown_setting_type(self):
        """Test that an unknown settings filter is rejected locally."""
        client, recorder = make_client()

        with pytest.raises(ValidationError) as exc_info:
            client.phone.accounts.get_account_settings(
                AccountSettingsQuery(setting_type='sms,not_a_setting')
            )

        assert exc_info.value.rule == 'AllowedValues'
        assert exc_info.value.field == 'setting_type'
        assert recorder.requests == []

    @pytest.mark.parametrize('blocked_list_id', ['', '  '])
    def test_blank_path_parameter(self, blocked_list_id):
        """Test that blank identifiers never produce a request."""
        client, recorder = make_client()

        with pytest.raises(ValidationError) as exc_info:
            client.phone.blocked_list.get_blocked_list(blocked_list_id)

        assert exc_info.value.rule == 'NotBlank'
        assert exc_info.value.field == 'blocked_list_id'
        assert recorder.requests == []
