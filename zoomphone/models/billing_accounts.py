from zoomphone.models.base import PhoneModel, QueryModel

__all__ = ('BillingAccount', 'ListBillingAccountsRequest', 'ListBillingAccountsResponse')


class BillingAccount(PhoneModel):
    id: str
    name: str | None = None


class ListBillingAccountsRequest(QueryModel):
    site_id: str | None = None


class ListBillingAccountsResponse(PhoneModel):
    billing_accounts: list[BillingAccount]
