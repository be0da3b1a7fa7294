"""Payload models for the Zoom Phone API, one module per resource."""

from zoomphone.models import (
    accounts,
    alerts,
    audio_library,
    auto_receptionists,
    billing_accounts,
    blocked_list,
    call_handling,
)
from zoomphone.models.base import (
    AlwaysSend,
    CommaJoined,
    Flatten,
    IdName,
    PaginationOptions,
    PaginationResponse,
    Paging,
    PhoneModel,
    QueryModel,
    SettingState,
)

__all__ = [
    'AlwaysSend',
    'CommaJoined',
    'Flatten',
    'IdName',
    'PaginationOptions',
    'PaginationResponse',
    'Paging',
    'PhoneModel',
    'QueryModel',
    'SettingState',
    'accounts',
    'alerts',
    'audio_library',
    'auto_receptionists',
    'billing_accounts',
    'blocked_list',
    'call_handling',
]
