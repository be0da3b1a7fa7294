from typing import Any

from httpx import Response

from zoomphone.core.endpoint import Endpoint
from zoomphone.models.alerts import (
    AlertSetting,
    AlertSettingCreated,
    CreateAlertRequest,
    ListAlertSettingsRequest,
    ListAlertSettingsResponse,
    UpdateAlertRequest,
)
from zoomphone.services.base import Service, paginated

__all__ = ('AlertsService',)

ALERT_SETTINGS_PATH = '/phone/alert_settings'
ALERT_SETTING_PATH = '/phone/alert_settings/{alert_setting_id}'

CREATE_ALERT = Endpoint(
    'create_alert', 'POST', ALERT_SETTINGS_PATH, response_model=AlertSettingCreated
)
DELETE_ALERT = Endpoint('delete_alert', 'DELETE', ALERT_SETTING_PATH)
GET_ALERT = Endpoint('get_alert', 'GET', ALERT_SETTING_PATH, response_model=AlertSetting)
LIST_ALERTS = Endpoint(
    'list_alerts', 'GET', ALERT_SETTINGS_PATH, response_model=ListAlertSettingsResponse
)
UPDATE_ALERT = Endpoint('update_alert', 'PATCH', ALERT_SETTING_PATH)


class AlertsService(Service):
    def create_alert(self, body: CreateAlertRequest, **kwargs: Any) -> AlertSettingCreated:
        return self._call(CREATE_ALERT, body=body, **kwargs)

    def delete_alert(self, alert_setting_id: str, **kwargs: Any) -> Response:
        return self._call(DELETE_ALERT, alert_setting_id, **kwargs)

    def get_alert(self, alert_setting_id: str, **kwargs: Any) -> AlertSetting:
        return self._call(GET_ALERT, alert_setting_id, **kwargs)

    @paginated(ListAlertSettingsRequest)
    def list_alerts(
        self, query: ListAlertSettingsRequest | None = None, **kwargs: Any
    ) -> ListAlertSettingsResponse:
        """List alert settings, optionally filtered by module, rule and status."""
        return self._call(LIST_ALERTS, query=query, **kwargs)

    def update_alert(
        self, alert_setting_id: str, body: UpdateAlertRequest, **kwargs: Any
    ) -> Response:
        return self._call(UPDATE_ALERT, alert_setting_id, body=body, **kwargs)
