"""Test fixtures for zoomphone tests.

This module provides sample Zoom Phone payloads and a recording mock
transport so that client tests run without network access.
"""

import json
from collections.abc import Callable, Sequence
from urllib.parse import parse_qs

import httpx

from zoomphone.client import AsyncPhoneClient, PhoneClient

BASE_URL = 'https://api.zoom.test/v2'

ACCOUNT_SETTINGS = {
    'sms': {'enable': True, 'locked': False, 'locked_by': 'account'},
    'voicemail': {'enable': False, 'locked': True},
    'auto_call_recording': {
        'enable': True,
        'locked': False,
        'recording_calls': 'both',
        'play_recording_beep_tone': {'enable': True, 'play_beep_time_interval': 15},
    },
}

BLOCKED_LIST_ENTRY = {
    'id': 'bl-1',
    'block_type': 'inbound',
    'comment': 'spam',
    'match_type': 'phoneNumber',
    'phone_number': '+15555550100',
    'status': 'active',
}

CALL_HANDLING_SETTINGS = {
    'business_hours': [
        {
            'sub_setting_type': 'custom_hours',
            'settings': {
                'type': 2,
                'custom_hours_settings': [
                    {'weekday': 1, 'from': '09:00', 'to': '17:00', 'type': 2}
                ],
            },
        },
        {
            'sub_setting_type': 'call_handling',
            'settings': {'max_wait_time': 30, 'ring_mode': 'simultaneous'},
        },
    ],
    'closed_hours': [
        {
            'sub_setting_type': 'call_forwarding',
            'settings': {'call_forwarding_id': 'cf-1', 'phone_number': '+15555550101'},
        }
    ],
    'holiday_hours': [
        {
            'holiday_id': 'h-1',
            'details': [
                {
                    'sub_setting_type': 'holiday',
                    'settings': {
                        'holiday_id': 'h-1',
                        'name': 'New Year',
                        'from': '2026-01-01T00:00:00Z',
                        'to': '2026-01-02T00:00:00Z',
                    },
                }
            ],
        }
    ],
}


def blocked_list_page(ids: Sequence[str], next_page_token: str = '') -> dict:
    """Build one page of a blocked list response."""
    return {
        'next_page_token': next_page_token,
        'page_size': len(ids),
        'total_records': 10,
        'blocked_list': [{**BLOCKED_LIST_ENTRY, 'id': entry_id} for entry_id in ids],
    }


def json_response(payload, status_code: int = 200) -> httpx.Response:
    return httpx.Response(status_code, json=payload)


def query_params(request: httpx.Request) -> dict[str, list[str]]:
    """Return the request's query string as a dict of value lists."""
    return parse_qs(request.url.query.decode(), keep_blank_values=True)


def request_json(request: httpx.Request):
    return json.loads(request.content)


Handler = Callable[[httpx.Request], httpx.Response]


class RecordingTransport:
    """Mock transport handler that records every request it receives."""

    def __init__(self, handler: Handler | None = None):
        self.requests: list[httpx.Request] = []
        self.handler = handler or (lambda request: httpx.Response(204))

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def make_client(
    handler: Handler | None = None, **kwargs
) -> tuple[PhoneClient, RecordingTransport]:
    """Build a PhoneClient backed by a recording mock transport."""
    recorder = RecordingTransport(handler)
    http_client = httpx.Client(transport=httpx.MockTransport(recorder))
    kwargs.setdefault('access_token', 'test-token')
    client = PhoneClient(base_url=BASE_URL, http_client=http_client, **kwargs)
    return client, recorder


def make_async_client(
    handler: Handler | None = None, **kwargs
) -> tuple[AsyncPhoneClient, RecordingTransport]:
    """Build an AsyncPhoneClient backed by a recording mock transport."""
    recorder = RecordingTransport(handler)
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(recorder))
    kwargs.setdefault('access_token', 'test-token')
    client = AsyncPhoneClient(base_url=BASE_URL, http_client=http_client, **kwargs)
    return client, recorder
