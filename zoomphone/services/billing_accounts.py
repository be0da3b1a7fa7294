from typing import Any

from zoomphone.core.endpoint import Endpoint
from zoomphone.models.billing_accounts import (
    BillingAccount,
    ListBillingAccountsRequest,
    ListBillingAccountsResponse,
)
from zoomphone.services.base import Service

__all__ = ('BillingAccountsService',)

GET_BILLING_ACCOUNT = Endpoint(
    'get_billing_account',
    'GET',
    '/phone/billing_accounts/{billing_account_id}',
    response_model=BillingAccount,
)
LIST_BILLING_ACCOUNTS = Endpoint(
    'list_billing_accounts',
    'GET',
    '/phone/billing_accounts',
    response_model=ListBillingAccountsResponse,
)


class BillingAccountsService(Service):
    def get_billing_account(self, billing_account_id: str, **kwargs: Any) -> BillingAccount:
        return self._call(GET_BILLING_ACCOUNT, billing_account_id, **kwargs)

    def list_billing_accounts(
        self, query: ListBillingAccountsRequest | None = None, **kwargs: Any
    ) -> ListBillingAccountsResponse:
        """List billing accounts, optionally restricted to one site."""
        return self._call(LIST_BILLING_ACCOUNTS, query=query, **kwargs)
