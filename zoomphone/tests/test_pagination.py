"""Tests for cursor pagination."""

import asyncio

import pytest

from zoomphone.core.pagination import AsyncCursorPages, CursorPages, with_page_token
from zoomphone.models.base import PaginationOptions
from zoomphone.models.blocked_list import ListBlockedListRequest, ListBlockedListResponse

from .fixtures import (
    blocked_list_page,
    json_response,
    make_async_client,
    make_client,
    query_params,
)

PAGES = {
    None: blocked_list_page(['a', 'b'], 't1'),
    't1': blocked_list_page(['c', 'd'], 't2'),
    't2': blocked_list_page(['e'], ''),
}


def paged_handler(request):
    token = query_params(request).get('next_page_token', [None])[0]
    return json_response(PAGES[token])


class TestWithPageToken:
    """Tests for with_page_token."""

    def test_sets_token(self):
        """Test that the token is set without touching other options."""
        request = ListBlockedListRequest(pagination=PaginationOptions(page_size=2))
        updated = with_page_token(request, 'abc')

        assert updated.pagination.next_page_token == 'abc'
        assert updated.pagination.page_size == 2
        assert request.pagination.next_page_token is None

    def test_without_pagination(self):
        """Test requests that carry no pagination options yet."""
        updated = with_page_token(ListBlockedListRequest(), 'abc')
        assert updated.pagination.next_page_token == 'abc'


class TestCursorPages:
    """Tests for synchronous page iteration."""

    def test_visits_every_page_in_order(self):
        """Test that pages are fetched until the token comes back empty."""
        client, recorder = make_client(paged_handler)

        pages = list(client.paginate(client.phone.blocked_list.list_blocked_list))

        assert all(isinstance(page, ListBlockedListResponse) for page in pages)
        assert [[e.id for e in page.blocked_list] for page in pages] == [
            ['a', 'b'],
            ['c', 'd'],
            ['e'],
        ]
        tokens = [query_params(r).get('next_page_token') for r in recorder.requests]
        assert tokens == [None, ['t1'], ['t2']]

    def test_request_options_are_kept(self):
        """Test that every page request keeps the caller's page size."""
        client, recorder = make_client(paged_handler)
        request = ListBlockedListRequest(pagination=PaginationOptions(page_size=2))

        list(client.paginate(client.phone.blocked_list.list_blocked_list, request))

        assert all(query_params(r)['page_size'] == ['2'] for r in recorder.requests)

    def test_restartable(self):
        """Test that a second iteration starts again from the first page."""
        client, recorder = make_client(paged_handler)
        pages = client.paginate(client.phone.blocked_list.list_blocked_list)

        first = [page.pagination.next_page_token for page in pages]
        second = [page.pagination.next_page_token for page in pages]

        assert first == second == ['t1', 't2', '']
        assert len(recorder.requests) == 6

    def test_lazy(self):
        """Test that nothing is fetched until iteration starts."""
        client, recorder = make_client(paged_handler)
        pages = iter(client.paginate(client.phone.blocked_list.list_blocked_list))

        assert recorder.requests == []
        next(pages)
        assert len(recorder.requests) == 1

    def test_max_pages(self):
        """Test that iteration stops after max_pages."""
        client, recorder = make_client(paged_handler)
        pages = client.paginate(client.phone.blocked_list.list_blocked_list, max_pages=2)

        assert len(list(pages)) == 2
        assert len(recorder.requests) == 2

    def test_items(self):
        """Test that items() yields every entry across pages."""
        client, _ = make_client(paged_handler)
        pages = client.paginate(client.phone.blocked_list.list_blocked_list)

        assert [entry.id for entry in pages.items()] == ['a', 'b', 'c', 'd', 'e']

    def test_plain_callable(self):
        """Test paginating any callable with an explicit request type."""
        responses = iter(
            ListBlockedListResponse.model_validate(PAGES[token]) for token in PAGES
        )
        seen = []

        def fetch(request):
            seen.append(request.pagination and request.pagination.next_page_token)
            return next(responses)

        pages = CursorPages(fetch, request_type=ListBlockedListRequest)

        assert len(list(pages)) == 3
        assert seen == [None, 't1', 't2']

    def test_request_required(self):
        """Test that a request type must be known."""
        with pytest.raises(TypeError):
            CursorPages(lambda request: None)

    def test_page_without_items_field(self):
        """Test that items() needs pages that declare their items."""
        pages = CursorPages(lambda request: object(), ListBlockedListRequest())

        with pytest.raises(TypeError):
            list(pages.items())


class TestAsyncCursorPages:
    """Tests for async page iteration."""

    def test_visits_every_page_in_order(self):
        """Test that async iteration follows the same cursor chain."""

        async def scenario():
            client, recorder = make_async_client(paged_handler)
            pages = client.paginate(client.phone.blocked_list.list_blocked_list)
            assert isinstance(pages, AsyncCursorPages)
            ids = [entry.id async for entry in pages.items()]
            return ids, recorder

        ids, recorder = asyncio.run(scenario())

        assert ids == ['a', 'b', 'c', 'd', 'e']
        assert len(recorder.requests) == 3

    def test_max_pages(self):
        """Test that async iteration honours max_pages."""

        async def scenario():
            client, _ = make_async_client(paged_handler)
            pages = client.paginate(
                client.phone.blocked_list.list_blocked_list, max_pages=1
            )
            return [page async for page in pages]

        assert len(asyncio.run(scenario())) == 1
