from typing import Any

from httpx import Response

from zoomphone.core.endpoint import Endpoint
from zoomphone.models.auto_receptionists import (
    AddAutoReceptionistRequest,
    AssignPhoneNumbersRequest,
    AutoReceptionist,
    AutoReceptionistCreated,
    AutoReceptionistPolicy,
    DeletePolicySubSettingQuery,
    ListAutoReceptionistsRequest,
    ListAutoReceptionistsResponse,
    PolicySubSetting,
    UpdateAutoReceptionistPolicyRequest,
    UpdateAutoReceptionistRequest,
    UpdatePolicySubSettingRequest,
)
from zoomphone.services.base import Service, paginated

__all__ = ('AutoReceptionistsService',)

AUTO_RECEPTIONISTS_PATH = '/phone/auto_receptionists'
AUTO_RECEPTIONIST_PATH = '/phone/auto_receptionists/{auto_receptionist_id}'
PHONE_NUMBERS_PATH = f'{AUTO_RECEPTIONIST_PATH}/phone_numbers'
POLICIES_PATH = f'{AUTO_RECEPTIONIST_PATH}/policies'
POLICY_PATH = f'{POLICIES_PATH}/{{policy_type}}'

ADD_AUTO_RECEPTIONIST = Endpoint(
    'add_auto_receptionist',
    'POST',
    AUTO_RECEPTIONISTS_PATH,
    response_model=AutoReceptionistCreated,
)
GET_AUTO_RECEPTIONIST = Endpoint(
    'get_auto_receptionist', 'GET', AUTO_RECEPTIONIST_PATH, response_model=AutoReceptionist
)
LIST_AUTO_RECEPTIONISTS = Endpoint(
    'list_auto_receptionists',
    'GET',
    AUTO_RECEPTIONISTS_PATH,
    response_model=ListAutoReceptionistsResponse,
)
UPDATE_AUTO_RECEPTIONIST = Endpoint(
    'update_auto_receptionist', 'PATCH', AUTO_RECEPTIONIST_PATH
)
DELETE_AUTO_RECEPTIONIST = Endpoint(
    'delete_auto_receptionist', 'DELETE', AUTO_RECEPTIONIST_PATH
)
ASSIGN_PHONE_NUMBERS = Endpoint('assign_phone_numbers', 'POST', PHONE_NUMBERS_PATH)
UNASSIGN_PHONE_NUMBER = Endpoint(
    'unassign_phone_number', 'DELETE', f'{PHONE_NUMBERS_PATH}/{{phone_number_id}}'
)
UNASSIGN_ALL_PHONE_NUMBERS = Endpoint(
    'unassign_all_phone_numbers', 'DELETE', PHONE_NUMBERS_PATH
)
GET_POLICY = Endpoint(
    'get_auto_receptionist_policy', 'GET', POLICIES_PATH, response_model=AutoReceptionistPolicy
)
UPDATE_POLICY = Endpoint('update_auto_receptionist_policy', 'PATCH', POLICIES_PATH)
ADD_POLICY_SUB_SETTING = Endpoint(
    'add_policy_sub_setting', 'POST', POLICY_PATH, response_model=PolicySubSetting
)
UPDATE_POLICY_SUB_SETTING = Endpoint(
    'update_policy_sub_setting', 'PATCH', POLICY_PATH, response_model=PolicySubSetting
)
DELETE_POLICY_SUB_SETTING = Endpoint('delete_policy_sub_setting', 'DELETE', POLICY_PATH)


class AutoReceptionistsService(Service):
    def add_auto_receptionist(
        self, body: AddAutoReceptionistRequest, **kwargs: Any
    ) -> AutoReceptionistCreated:
        return self._call(ADD_AUTO_RECEPTIONIST, body=body, **kwargs)

    def get_auto_receptionist(
        self, auto_receptionist_id: str, **kwargs: Any
    ) -> AutoReceptionist:
        return self._call(GET_AUTO_RECEPTIONIST, auto_receptionist_id, **kwargs)

    @paginated(ListAutoReceptionistsRequest)
    def list_auto_receptionists(
        self, query: ListAutoReceptionistsRequest | None = None, **kwargs: Any
    ) -> ListAutoReceptionistsResponse:
        return self._call(LIST_AUTO_RECEPTIONISTS, query=query, **kwargs)

    def update_auto_receptionist(
        self,
        auto_receptionist_id: str,
        body: UpdateAutoReceptionistRequest,
        **kwargs: Any,
    ) -> Response:
        return self._call(UPDATE_AUTO_RECEPTIONIST, auto_receptionist_id, body=body, **kwargs)

    def delete_auto_receptionist(self, auto_receptionist_id: str, **kwargs: Any) -> Response:
        return self._call(DELETE_AUTO_RECEPTIONIST, auto_receptionist_id, **kwargs)

    def assign_phone_numbers(
        self, auto_receptionist_id: str, body: AssignPhoneNumbersRequest, **kwargs: Any
    ) -> Response:
        return self._call(ASSIGN_PHONE_NUMBERS, auto_receptionist_id, body=body, **kwargs)

    def unassign_phone_number(
        self, auto_receptionist_id: str, phone_number_id: str, **kwargs: Any
    ) -> Response:
        return self._call(
            UNASSIGN_PHONE_NUMBER, auto_receptionist_id, phone_number_id, **kwargs
        )

    def unassign_all_phone_numbers(
        self, auto_receptionist_id: str, **kwargs: Any
    ) -> Response:
        return self._call(UNASSIGN_ALL_PHONE_NUMBERS, auto_receptionist_id, **kwargs)

    def get_policy(self, auto_receptionist_id: str, **kwargs: Any) -> AutoReceptionistPolicy:
        """Return the SMS and voicemail policy of an auto receptionist."""
        return self._call(GET_POLICY, auto_receptionist_id, **kwargs)

    def update_policy(
        self,
        auto_receptionist_id: str,
        body: UpdateAutoReceptionistPolicyRequest,
        **kwargs: Any,
    ) -> Response:
        return self._call(UPDATE_POLICY, auto_receptionist_id, body=body, **kwargs)

    def add_policy_sub_setting(
        self,
        auto_receptionist_id: str,
        policy_type: str,
        body: PolicySubSetting,
        **kwargs: Any,
    ) -> PolicySubSetting:
        """Add a voicemail access member to a policy such as ``voice_mail``."""
        return self._call(
            ADD_POLICY_SUB_SETTING, auto_receptionist_id, policy_type, body=body, **kwargs
        )

    def update_policy_sub_setting(
        self,
        auto_receptionist_id: str,
        policy_type: str,
        body: UpdatePolicySubSettingRequest,
        **kwargs: Any,
    ) -> PolicySubSetting:
        return self._call(
            UPDATE_POLICY_SUB_SETTING,
            auto_receptionist_id,
            policy_type,
            body=body,
            **kwargs,
        )

    def delete_policy_sub_setting(
        self,
        auto_receptionist_id: str,
        policy_type: str,
        query: DeletePolicySubSettingQuery,
        **kwargs: Any,
    ) -> Response:
        """Remove voicemail access members; ``shared_ids`` repeat in the query string."""
        return self._call(
            DELETE_POLICY_SUB_SETTING,
            auto_receptionist_id,
            policy_type,
            query=query,
            **kwargs,
        )
