from typing import Any

from httpx import Response

from zoomphone.core.endpoint import Endpoint
from zoomphone.core.validation import AllowedValues, MaxItems
from zoomphone.models.accounts import (
    SETTING_TYPES,
    AccountSettings,
    AccountSettingsQuery,
    AddCustomizedNumbersRequest,
    DeleteCustomizedNumbersQuery,
    ListCustomizedNumbersRequest,
    ListCustomizedNumbersResponse,
)
from zoomphone.services.base import Service, paginated

__all__ = ('AccountsService',)

CUSTOMIZED_NUMBERS_PATH = '/phone/outbound_caller_id/customized_numbers'

ADD_CUSTOMIZED_NUMBERS = Endpoint(
    'add_customized_numbers',
    'POST',
    CUSTOMIZED_NUMBERS_PATH,
    rules=(MaxItems('phone_number_ids', 30),),
)
DELETE_CUSTOMIZED_NUMBERS = Endpoint(
    'delete_customized_numbers',
    'DELETE',
    CUSTOMIZED_NUMBERS_PATH,
    rules=(MaxItems('customized_ids', 30),),
)
LIST_CUSTOMIZED_NUMBERS = Endpoint(
    'list_customized_numbers',
    'GET',
    CUSTOMIZED_NUMBERS_PATH,
    response_model=ListCustomizedNumbersResponse,
)
GET_ACCOUNT_SETTINGS = Endpoint(
    'get_account_settings',
    'GET',
    '/phone/account_settings',
    response_model=AccountSettings,
    rules=(AllowedValues('setting_type', SETTING_TYPES),),
)


class AccountsService(Service):
    """Account-level outbound caller ID numbers and settings."""

    def add_customized_numbers(
        self, body: AddCustomizedNumbersRequest, **kwargs: Any
    ) -> Response:
        """Add up to 30 phone numbers to the account's customized outbound caller ID list."""
        return self._call(ADD_CUSTOMIZED_NUMBERS, body=body, **kwargs)

    def delete_customized_numbers(
        self, query: DeleteCustomizedNumbersQuery, **kwargs: Any
    ) -> Response:
        """Remove up to 30 numbers from the customized outbound caller ID list."""
        return self._call(DELETE_CUSTOMIZED_NUMBERS, query=query, **kwargs)

    @paginated(ListCustomizedNumbersRequest)
    def list_customized_numbers(
        self, query: ListCustomizedNumbersRequest | None = None, **kwargs: Any
    ) -> ListCustomizedNumbersResponse:
        return self._call(LIST_CUSTOMIZED_NUMBERS, query=query, **kwargs)

    def get_account_settings(
        self, query: AccountSettingsQuery | None = None, **kwargs: Any
    ) -> AccountSettings:
        """Return account settings, optionally filtered by setting names.

        Every comma separated name in ``query.setting_type`` must be one of
        :data:`~zoomphone.models.accounts.SETTING_TYPES`.
        """
        return self._call(GET_ACCOUNT_SETTINGS, query=query, **kwargs)
