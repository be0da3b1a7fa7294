"""Zoom Phone API clients.

Example:
    >>> client = PhoneClient(access_token='...')
    >>> entry = client.phone.blocked_list.get_blocked_list('abc123')

    >>> import httpx
    >>> with httpx.Client() as http_client:
    ...     client = PhoneClient(access_token='...', http_client=http_client)
    ...     # Reuse a connection pool (or a mock transport in tests)

    >>> async with httpx.AsyncClient() as http_client:
    ...     client = AsyncPhoneClient(access_token='...', http_client=http_client)
    ...     settings = await client.phone.accounts.get_account_settings()
"""

from typing import Any

from zoomphone.config import ClientConfig, get_config
from zoomphone.core.client import AsyncBaseClient, BaseClient
from zoomphone.core.pagination import AsyncCursorPages, CursorPages
from zoomphone.services import PhoneService

__all__ = ['AsyncPhoneClient', 'Client', 'PhoneClient']


class PhoneClient(BaseClient):
    """Synchronous Zoom Phone client.

    Accepts the same arguments as :class:`~zoomphone.core.client.BaseClient`.
    """

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.phone = PhoneService(self)

    @classmethod
    def from_config(cls, config: ClientConfig | None = None, **kwargs: Any) -> 'PhoneClient':
        config = config or get_config()
        return cls(**{**config.client_kwargs(), **kwargs})

    def paginate(self, fetch, request=None, *, max_pages: int | None = None) -> CursorPages:
        """Walk every page of a list method, e.g. ``phone.blocked_list.list_blocked_list``."""
        return CursorPages(fetch, request, max_pages=max_pages)


class AsyncPhoneClient(AsyncBaseClient):
    """Asynchronous Zoom Phone client. Service methods return awaitables."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.phone = PhoneService(self)

    @classmethod
    def from_config(
        cls, config: ClientConfig | None = None, **kwargs: Any
    ) -> 'AsyncPhoneClient':
        config = config or get_config()
        return cls(**{**config.client_kwargs(), **kwargs})

    def paginate(
        self, fetch, request=None, *, max_pages: int | None = None
    ) -> AsyncCursorPages:
        return AsyncCursorPages(fetch, request, max_pages=max_pages)


# Convenience alias for shorter imports
Client = PhoneClient
