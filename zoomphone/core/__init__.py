"""Request kernel shared by every endpoint: validate, shape, dispatch, decode."""

from zoomphone.core.client import AsyncBaseClient, BaseClient
from zoomphone.core.decoding import decode_response
from zoomphone.core.endpoint import Endpoint, EndpointCall, PreparedRequest
from zoomphone.core.pagination import AsyncCursorPages, CursorPages, with_page_token
from zoomphone.core.shaping import (
    build_path,
    encode_body,
    encode_query,
    parse_query,
)
from zoomphone.core.validation import (
    AllowedValues,
    MaxItems,
    NotBlank,
    ValidationRule,
    validate,
)

__all__ = [
    'AllowedValues',
    'AsyncBaseClient',
    'AsyncCursorPages',
    'BaseClient',
    'CursorPages',
    'Endpoint',
    'EndpointCall',
    'MaxItems',
    'NotBlank',
    'PreparedRequest',
    'ValidationRule',
    'build_path',
    'decode_response',
    'encode_body',
    'encode_query',
    'parse_query',
    'validate',
    'with_page_token',
]
