"""
Search Filter Resolver

Chooses the catalog query that serves a search.
"""

from typing import Dict

from ..domain.filters import IncomingPhoneNumberFilter, SearchFilterMode
from . import queries


LISTING_QUERIES: Dict[SearchFilterMode, str] = {
    SearchFilterMode.PERFECT_MATCH: queries.GET_INCOMING_PHONE_NUMBERS_BY_FRIENDLY_NAME,
    SearchFilterMode.FRIENDLY_NAME_MATCH: queries.GET_INCOMING_PHONE_NUMBERS_BY_FRIENDLY_NAME,
    SearchFilterMode.WILDCARD_MATCH: queries.SEARCH_NUMBERS_WITH_WILDCARD_MODE,
}

_unmapped = set(SearchFilterMode) - set(LISTING_QUERIES)
if _unmapped:
    raise RuntimeError(f"Search filter modes without a listing query: {sorted(_unmapped)}")


def account_query() -> str:
    return queries.GET_INCOMING_PHONE_NUMBERS


def regex_query(search: IncomingPhoneNumberFilter) -> str:
    return queries.GET_INCOMING_PHONE_NUMBERS_REGEX


def listing_query(search: IncomingPhoneNumberFilter) -> str:
    """Wildcard searches get the wildcard query, everything else the friendly name query."""
    return LISTING_QUERIES[search.filter_mode]


def count_query(search: IncomingPhoneNumberFilter) -> str:
    """The count query applies the friendly name criteria whatever the mode."""
    return queries.GET_TOTAL_INCOMING_PHONE_NUMBERS


__all__ = [
    "LISTING_QUERIES",
    "account_query",
    "regex_query",
    "listing_query",
    "count_query",
]
