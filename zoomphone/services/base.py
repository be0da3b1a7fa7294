from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from zoomphone.core.endpoint import Endpoint

if TYPE_CHECKING:
    from zoomphone.core.client import AsyncBaseClient, BaseClient

__all__ = ('Service', 'paginated')

F = TypeVar('F', bound=Callable[..., Any])


def paginated(request_type: type) -> Callable[[F], F]:
    """Mark a list method with the request type its pages are built from."""

    def decorator(fn: F) -> F:
        fn.request_type = request_type
        return fn

    return decorator


class Service:
    """A group of endpoints sharing one client.

    Methods return the decoded value for a sync client and an awaitable of
    it for an async client.
    """

    def __init__(self, client: 'BaseClient | AsyncBaseClient') -> None:
        self._client = client

    def _call(
        self,
        endpoint: Endpoint,
        *path_params: Any,
        query: Any | None = None,
        body: Any | None = None,
        **kwargs: Any,
    ) -> Any:
        return self._client.call(
            endpoint, *path_params, query=query, body=body, **kwargs
        )
