from typing import Any

from httpx import Response

from zoomphone.core.endpoint import Endpoint
from zoomphone.core.validation import AllowedValues
from zoomphone.models.call_handling import (
    ADD_SUB_SETTING_TYPES,
    CALL_HANDLING_SETTING_TYPES,
    UPDATE_SUB_SETTING_TYPES,
    AddCallHandlingRequest,
    CallHandlingCreated,
    CallHandlingSettings,
    CallHandlingSettingType,
    DeleteCallHandlingQuery,
    UpdateCallHandlingRequest,
)
from zoomphone.services.base import Service

__all__ = ('CallHandlingService',)

SETTINGS_PATH = '/phone/extensions/{extension_id}/call_handling/settings'
SETTING_TYPE_PATH = f'{SETTINGS_PATH}/{{setting_type}}'

_SETTING_TYPE_RULE = AllowedValues('setting_type', CALL_HANDLING_SETTING_TYPES, separator=None)

GET_CALL_HANDLING_SETTINGS = Endpoint(
    'get_call_handling_settings',
    'GET',
    SETTINGS_PATH,
    response_model=CallHandlingSettings,
)
ADD_CALL_HANDLING = Endpoint(
    'add_call_handling',
    'POST',
    SETTING_TYPE_PATH,
    response_model=CallHandlingCreated,
    rules=(
        _SETTING_TYPE_RULE,
        AllowedValues('sub_setting_type', ADD_SUB_SETTING_TYPES, separator=None),
    ),
)
UPDATE_CALL_HANDLING = Endpoint(
    'update_call_handling',
    'PATCH',
    SETTING_TYPE_PATH,
    rules=(
        _SETTING_TYPE_RULE,
        AllowedValues('sub_setting_type', UPDATE_SUB_SETTING_TYPES, separator=None),
    ),
)
DELETE_CALL_HANDLING = Endpoint(
    'delete_call_handling', 'DELETE', SETTING_TYPE_PATH, rules=(_SETTING_TYPE_RULE,)
)


class CallHandlingService(Service):
    """Business hours, closed hours and holiday routing of an extension.

    ``setting_type`` is one of ``business_hours``, ``closed_hours`` or
    ``holiday_hours``; the body's ``sub_setting_type`` selects the shape of
    its ``settings``.
    """

    def get_call_handling_settings(
        self, extension_id: str, **kwargs: Any
    ) -> CallHandlingSettings:
        return self._call(GET_CALL_HANDLING_SETTINGS, extension_id, **kwargs)

    def add_call_handling(
        self,
        extension_id: str,
        setting_type: CallHandlingSettingType | str,
        body: AddCallHandlingRequest,
        **kwargs: Any,
    ) -> CallHandlingCreated:
        """Add a call forwarding number or a holiday."""
        return self._call(ADD_CALL_HANDLING, extension_id, setting_type, body=body, **kwargs)

    def update_call_handling(
        self,
        extension_id: str,
        setting_type: CallHandlingSettingType | str,
        body: UpdateCallHandlingRequest,
        **kwargs: Any,
    ) -> Response:
        return self._call(
            UPDATE_CALL_HANDLING, extension_id, setting_type, body=body, **kwargs
        )

    def delete_call_handling(
        self,
        extension_id: str,
        setting_type: CallHandlingSettingType | str,
        query: DeleteCallHandlingQuery | None = None,
        **kwargs: Any,
    ) -> Response:
        """Delete a call forwarding number or a holiday by id."""
        return self._call(
            DELETE_CALL_HANDLING, extension_id, setting_type, query=query, **kwargs
        )
