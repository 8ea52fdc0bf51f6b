"""Unit tests for search filters, the resolver and the query catalog."""

import pytest
from sqlalchemy.dialects import postgresql

from numbers_core.database import queries, resolver
from numbers_core.domain.filters import (
    IncomingPhoneNumberFilter,
    SearchFilterMode,
    SortDirection,
    SortField,
)
from numbers_core.domain.sid import Sid, SidType
from numbers_core.errors import InvalidFilterError, UnknownQueryError


def compile_sql(statement) -> str:
    return str(statement.compile(dialect=postgresql.dialect()))


class TestIncomingPhoneNumberFilter:
    """Tests for filter validation."""

    def test_defaults(self):
        search = IncomingPhoneNumberFilter()

        assert search.filter_mode == SearchFilterMode.FRIENDLY_NAME_MATCH
        assert search.offset == 0
        assert search.limit == 50

    def test_negative_offset_rejected(self):
        with pytest.raises(InvalidFilterError):
            IncomingPhoneNumberFilter(offset=-1)

    def test_zero_limit_rejected(self):
        with pytest.raises(InvalidFilterError):
            IncomingPhoneNumberFilter(limit=0)

    def test_scoped_account_sids(self):
        parent = Sid.generate(SidType.ACCOUNT)
        child = Sid.generate(SidType.ACCOUNT)

        search = IncomingPhoneNumberFilter(account_sid=parent, account_sids=[child])

        assert search.scoped_account_sids == {parent, child}


class TestResolver:
    """Tests for query selection."""

    def test_wildcard_mode_routes_to_wildcard_query(self):
        search = IncomingPhoneNumberFilter(filter_mode=SearchFilterMode.WILDCARD_MATCH)

        assert resolver.listing_query(search) == queries.SEARCH_NUMBERS_WITH_WILDCARD_MODE

    @pytest.mark.parametrize(
        "mode",
        [SearchFilterMode.PERFECT_MATCH, SearchFilterMode.FRIENDLY_NAME_MATCH],
    )
    def test_other_modes_route_to_friendly_name_query(self, mode):
        search = IncomingPhoneNumberFilter(filter_mode=mode)

        assert (
            resolver.listing_query(search)
            == queries.GET_INCOMING_PHONE_NUMBERS_BY_FRIENDLY_NAME
        )

    def test_listing_queries_are_distinct(self):
        assert (
            queries.SEARCH_NUMBERS_WITH_WILDCARD_MODE
            != queries.GET_INCOMING_PHONE_NUMBERS_BY_FRIENDLY_NAME
        )

    def test_every_mode_has_a_listing_query(self):
        for mode in SearchFilterMode:
            assert resolver.LISTING_QUERIES[mode] in queries.QUERIES

    @pytest.mark.parametrize("mode", list(SearchFilterMode))
    def test_count_ignores_mode(self, mode):
        search = IncomingPhoneNumberFilter(filter_mode=mode)

        assert resolver.count_query(search) == queries.GET_TOTAL_INCOMING_PHONE_NUMBERS

    def test_regex_and_account_queries(self):
        assert resolver.regex_query(IncomingPhoneNumberFilter()) == queries.GET_INCOMING_PHONE_NUMBERS_REGEX
        assert resolver.account_query() == queries.GET_INCOMING_PHONE_NUMBERS


class TestQueryCatalog:
    """Tests for statement construction."""

    def test_unknown_query(self):
        with pytest.raises(UnknownQueryError) as exc_info:
            queries.build(queries.NAMESPACE + "dropEverything", None)

        assert exc_info.value.query_id.endswith("dropEverything")

    def test_duplicate_registration_rejected(self):
        with pytest.raises(ValueError):
            queries.query(queries.GET_INCOMING_PHONE_NUMBER)(lambda sid: None)

    def test_identifiers_share_namespace(self):
        assert all(query_id.startswith(queries.NAMESPACE) for query_id in queries.QUERIES)

    @pytest.mark.parametrize(
        "pattern,expected",
        [
            ("+1555*", "+1555%"),
            ("+1555???4567", "+1555___4567"),
            ("100%_off*", "100\\%\\_off%"),
        ],
    )
    def test_wildcard_to_like(self, pattern, expected):
        assert queries.wildcard_to_like(pattern) == expected

    def test_listing_joins_application_names(self):
        sql = compile_sql(queries.build(queries.GET_INCOMING_PHONE_NUMBER, "PN" + "0" * 32))

        assert "voice_application_name" in sql
        assert "refer_application_name" in sql
        assert sql.count("LEFT OUTER JOIN applications") == 4

    def test_regex_query_uses_regexp_match(self):
        search = IncomingPhoneNumberFilter(phone_number=r"^\+1555")

        sql = compile_sql(queries.build(queries.GET_INCOMING_PHONE_NUMBERS_REGEX, search))

        assert "~" in sql

    def test_friendly_name_query_pages_and_sorts(self):
        search = IncomingPhoneNumberFilter(
            friendly_name="Main",
            sort_by=SortField.DATE_CREATED,
            sort_direction=SortDirection.DESC,
            offset=10,
            limit=5,
        )

        sql = compile_sql(
            queries.build(queries.GET_INCOMING_PHONE_NUMBERS_BY_FRIENDLY_NAME, search)
        )

        assert "ORDER BY incoming_phone_numbers.date_created DESC" in sql
        assert "LIMIT" in sql
        assert "OFFSET" in sql

    def test_count_query_has_no_paging(self):
        search = IncomingPhoneNumberFilter(limit=5, offset=5)

        sql = compile_sql(queries.build(queries.GET_TOTAL_INCOMING_PHONE_NUMBERS, search))

        assert "count(*)" in sql
        assert "LIMIT" not in sql
