"""
Incoming Phone Number Search Filters
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Optional

from ..errors import InvalidFilterError
from .sid import Sid


DEFAULT_PAGE_SIZE = 50


class SearchFilterMode(str, Enum):
    """How a filter's friendly name and phone number are matched."""

    PERFECT_MATCH = "perfect_match"
    FRIENDLY_NAME_MATCH = "friendly_name_match"
    WILDCARD_MATCH = "wildcard_match"


class SortField(str, Enum):
    """Columns a listing can be ordered by."""

    PHONE_NUMBER = "phone_number"
    FRIENDLY_NAME = "friendly_name"
    DATE_CREATED = "date_created"
    DATE_UPDATED = "date_updated"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class IncomingPhoneNumberFilter:
    """
    Search criteria for incoming phone numbers.

    ``account_sids`` widens the scope to several accounts (an account and
    its sub-accounts); when empty, ``account_sid`` alone scopes the search.
    Patterns in ``friendly_name`` and ``phone_number`` are interpreted
    according to ``filter_mode``.

    A filter with neither ``account_sid`` nor ``account_sids`` is not
    scoped to any account and searches every stored number.
    """

    account_sid: Optional[Sid] = None
    account_sids: FrozenSet[Sid] = frozenset()
    organization_sid: Optional[Sid] = None
    friendly_name: Optional[str] = None
    phone_number: Optional[str] = None
    pure_sip: Optional[bool] = None
    filter_mode: SearchFilterMode = SearchFilterMode.FRIENDLY_NAME_MATCH
    sort_by: SortField = SortField.PHONE_NUMBER
    sort_direction: SortDirection = SortDirection.ASC
    offset: int = 0
    limit: Optional[int] = DEFAULT_PAGE_SIZE

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise InvalidFilterError(f"Offset must not be negative: {self.offset}")
        if self.limit is not None and self.limit <= 0:
            raise InvalidFilterError(f"Limit must be positive: {self.limit}")
        # Accept any iterable of sids for the scope set
        object.__setattr__(self, "account_sids", frozenset(self.account_sids))

    @property
    def scoped_account_sids(self) -> FrozenSet[Sid]:
        """All account sids the search is restricted to."""
        if self.account_sid is None:
            return self.account_sids
        return self.account_sids | {self.account_sid}
