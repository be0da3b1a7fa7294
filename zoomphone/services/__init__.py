from zoomphone.services.accounts import AccountsService
from zoomphone.services.alerts import AlertsService
from zoomphone.services.audio_library import AudioLibraryService
from zoomphone.services.auto_receptionists import AutoReceptionistsService
from zoomphone.services.base import Service, paginated
from zoomphone.services.billing_accounts import BillingAccountsService
from zoomphone.services.blocked_list import BlockedListService
from zoomphone.services.call_handling import CallHandlingService

__all__ = [
    'AccountsService',
    'AlertsService',
    'AudioLibraryService',
    'AutoReceptionistsService',
    'BillingAccountsService',
    'BlockedListService',
    'CallHandlingService',
    'PhoneService',
    'Service',
    'paginated',
]


class PhoneService:
    """All Zoom Phone sub-services bound to one client."""

    def __init__(self, client) -> None:
        self.accounts = AccountsService(client)
        self.alerts = AlertsService(client)
        self.audio_library = AudioLibraryService(client)
        self.auto_receptionists = AutoReceptionistsService(client)
        self.billing_accounts = BillingAccountsService(client)
        self.blocked_list = BlockedListService(client)
        self.call_handling = CallHandlingService(client)
