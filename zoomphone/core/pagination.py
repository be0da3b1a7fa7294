"""Cursor pagination over list endpoints.

Every list request carries a ``pagination`` field of type
:class:`~zoomphone.models.base.PaginationOptions` and every list response a
``pagination`` field of type :class:`~zoomphone.models.base.PaginationResponse`.
The iterators below walk a result set by feeding each response's
``next_page_token`` into the next request until the token comes back empty.

Example:
    >>> pages = CursorPages(client.phone.blocked_list.list_blocked_list)
    >>> for entry in pages.items():
    ...     print(entry.phone_number)
"""

from collections.abc import AsyncIterator, Awaitable, Callable, Iterator
from typing import Any, Generic, TypeVar

from zoomphone.models.base import PaginationOptions, QueryModel

__all__ = ('AsyncCursorPages', 'CursorPages', 'with_page_token')

RequestT = TypeVar('RequestT', bound=QueryModel)
PageT = TypeVar('PageT')


def with_page_token(request: RequestT, token: str | None) -> RequestT:
    """Return a copy of ``request`` asking for the page at ``token``."""
    pagination = request.pagination or PaginationOptions()
    return request.model_copy(
        update={'pagination': pagination.model_copy(update={'next_page_token': token})}
    )


def _next_token(page: Any) -> str | None:
    pagination = getattr(page, 'pagination', None)
    if pagination is None:
        return None
    return pagination.next_page_token or None


def _page_items(page: Any) -> list[Any]:
    items_field = getattr(type(page), 'items_field', None)
    if items_field is None:
        raise TypeError(f'{type(page).__name__} does not declare an items_field')
    return getattr(page, items_field) or []


class CursorPages(Generic[RequestT, PageT]):
    """Lazy, restartable sequence of pages.

    Each step issues one call. Every new iteration starts over from the
    token of the original request (usually empty, meaning the first page).
    Pages are yielded as returned; repeated or out-of-order pages from the
    service are not filtered.

    Args:
        fetch: A list endpoint method, e.g.
            ``client.phone.blocked_list.list_blocked_list``.
        request: The first request. Defaults to ``fetch``'s request type
            with no options when omitted and ``request_type`` is given.
        max_pages: Stop after this many pages (default: unlimited).
    """

    def __init__(
        self,
        fetch: Callable[[RequestT], PageT],
        request: RequestT | None = None,
        *,
        request_type: type[RequestT] | None = None,
        max_pages: int | None = None,
    ) -> None:
        self.fetch = fetch
        self.request = _initial_request(fetch, request, request_type)
        self.max_pages = max_pages

    def __iter__(self) -> Iterator[PageT]:
        request = self.request
        pages_fetched = 0
        while self.max_pages is None or pages_fetched < self.max_pages:
            page = self.fetch(request)
            pages_fetched += 1
            yield page

            token = _next_token(page)
            if not token:
                return
            request = with_page_token(request, token)

    def items(self) -> Iterator[Any]:
        """Yield the items of every page, one at a time."""
        for page in self:
            yield from _page_items(page)


class AsyncCursorPages(Generic[RequestT, PageT]):
    """Async version of :class:`CursorPages`, used with ``async for``."""

    def __init__(
        self,
        fetch: Callable[[RequestT], Awaitable[PageT]],
        request: RequestT | None = None,
        *,
        request_type: type[RequestT] | None = None,
        max_pages: int | None = None,
    ) -> None:
        self.fetch = fetch
        self.request = _initial_request(fetch, request, request_type)
        self.max_pages = max_pages

    async def _iterate(self) -> AsyncIterator[PageT]:
        request = self.request
        pages_fetched = 0
        while self.max_pages is None or pages_fetched < self.max_pages:
            page = await self.fetch(request)
            pages_fetched += 1
            yield page

            token = _next_token(page)
            if not token:
                return
            request = with_page_token(request, token)

    def __aiter__(self) -> AsyncIterator[PageT]:
        return self._iterate()

    async def items(self) -> AsyncIterator[Any]:
        """Yield the items of every page, one at a time."""
        async for page in self:
            for item in _page_items(page):
                yield item


def _initial_request(
    fetch: Callable[..., Any],
    request: RequestT | None,
    request_type: type[RequestT] | None,
) -> RequestT:
    if request is not None:
        return request
    request_type = request_type or getattr(fetch, 'request_type', None)
    if request_type is None:
        raise TypeError(
            'A request (or request_type) is required to paginate '
            f'{getattr(fetch, "__name__", fetch)!r}'
        )
    return request_type()
