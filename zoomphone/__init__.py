"""zoomphone - a typed Python client for the Zoom Phone REST API.

Every endpoint goes through one small kernel: local validation, request
shaping, a single httpx call and pydantic decoding of the response. Failures
surface as one of four exception types.

Quick Start:
    >>> from zoomphone import PhoneClient
    >>> from zoomphone.models.blocked_list import ListBlockedListRequest
    >>>
    >>> client = PhoneClient(access_token='...')
    >>> for page in client.paginate(client.phone.blocked_list.list_blocked_list):
    ...     for entry in page.blocked_list:
    ...         print(entry.phone_number)

CLI Usage:
    $ zoomphone account-settings --setting-type sms,voicemail
    $ zoomphone blocked-list --page-size 100
"""

from zoomphone.client import AsyncPhoneClient, Client, PhoneClient
from zoomphone.config import ClientConfig, get_config
from zoomphone.core import AsyncCursorPages, CursorPages, Endpoint
from zoomphone.exceptions import (
    APIError,
    ConfigurationError,
    DecodeError,
    RequestCanceledError,
    TransportError,
    ValidationError,
    ZoomPhoneError,
)

__all__ = [
    # Clients
    'AsyncPhoneClient',
    'Client',
    'PhoneClient',
    # Kernel
    'AsyncCursorPages',
    'CursorPages',
    'Endpoint',
    # Configuration
    'ClientConfig',
    'get_config',
    # Exceptions
    'ZoomPhoneError',
    'ValidationError',
    'TransportError',
    'RequestCanceledError',
    'APIError',
    'DecodeError',
    'ConfigurationError',
]

from importlib.metadata import PackageNotFoundError, version as _version

try:
    __version__ = _version('zoomphone')
except PackageNotFoundError:
    __version__ = 'unknown'
