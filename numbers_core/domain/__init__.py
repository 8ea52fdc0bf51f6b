"""
Domain types for incoming phone numbers.
"""

from .filters import (
    DEFAULT_PAGE_SIZE,
    IncomingPhoneNumberFilter,
    SearchFilterMode,
    SortDirection,
    SortField,
)
from .models import Channel, ChannelConfig, IncomingPhoneNumber
from .sid import InvalidSidError, Sid, SidType


__all__ = [
    "Sid",
    "SidType",
    "InvalidSidError",
    "Channel",
    "ChannelConfig",
    "IncomingPhoneNumber",
    "IncomingPhoneNumberFilter",
    "SearchFilterMode",
    "SortField",
    "SortDirection",
    "DEFAULT_PAGE_SIZE",
]
