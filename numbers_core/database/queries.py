"""
Incoming Phone Number Query Catalog

Every statement the data layer issues is registered here under a stable
query identifier. A builder receives the query parameter (a scalar key,
a filter, or a row snapshot) and returns one fixed statement shape.
"""

from typing import Any, Callable, Dict, List

from sqlalchemy import ColumnElement, Select, delete, func, insert, select, update
from sqlalchemy.sql.expression import Executable

from ..domain.filters import IncomingPhoneNumberFilter, SearchFilterMode, SortDirection
from ..errors import UnknownQueryError
from .models import applications, incoming_phone_numbers


NAMESPACE = "IncomingPhoneNumbersDao."

ADD_INCOMING_PHONE_NUMBER = NAMESPACE + "addIncomingPhoneNumber"
GET_INCOMING_PHONE_NUMBER = NAMESPACE + "getIncomingPhoneNumber"
GET_INCOMING_PHONE_NUMBERS = NAMESPACE + "getIncomingPhoneNumbers"
GET_INCOMING_PHONE_NUMBERS_REGEX = NAMESPACE + "getIncomingPhoneNumbersRegex"
GET_INCOMING_PHONE_NUMBERS_BY_FRIENDLY_NAME = NAMESPACE + "getIncomingPhoneNumbersByFriendlyName"
SEARCH_NUMBERS_WITH_WILDCARD_MODE = NAMESPACE + "searchNumbersWithWildcardMode"
GET_TOTAL_INCOMING_PHONE_NUMBERS = NAMESPACE + "getTotalIncomingPhoneNumbersByUsingFilters"
UPDATE_INCOMING_PHONE_NUMBER = NAMESPACE + "updateIncomingPhoneNumber"
REMOVE_INCOMING_PHONE_NUMBER = NAMESPACE + "removeIncomingPhoneNumber"
REMOVE_INCOMING_PHONE_NUMBERS = NAMESPACE + "removeIncomingPhoneNumbers"


QueryBuilder = Callable[[Any], Executable]

QUERIES: Dict[str, QueryBuilder] = {}

LIKE_ESCAPE = "\\"


def query(query_id: str) -> Callable[[QueryBuilder], QueryBuilder]:
    """Register a statement builder under a query identifier."""

    def decorator(builder: QueryBuilder) -> QueryBuilder:
        if query_id in QUERIES:
            raise ValueError(f"Query already registered: {query_id}")
        QUERIES[query_id] = builder
        return builder

    return decorator


def build(query_id: str, parameter: Any) -> Executable:
    """
    Build the statement registered under a query identifier.

    Raises:
        UnknownQueryError: If nothing is registered under the identifier
    """
    builder = QUERIES.get(query_id)
    if builder is None:
        raise UnknownQueryError(query_id)
    return builder(parameter)


# =============================================================================
# Shared Fragments
# =============================================================================


numbers = incoming_phone_numbers
voice_application = applications.alias("voice_application")
sms_application = applications.alias("sms_application")
ussd_application = applications.alias("ussd_application")
refer_application = applications.alias("refer_application")


def _select_numbers() -> Select:
    """Number columns plus the joined application names."""
    return select(
        numbers,
        voice_application.c.friendly_name.label("voice_application_name"),
        sms_application.c.friendly_name.label("sms_application_name"),
        ussd_application.c.friendly_name.label("ussd_application_name"),
        refer_application.c.friendly_name.label("refer_application_name"),
    ).select_from(
        numbers.outerjoin(
            voice_application,
            numbers.c.voice_application_sid == voice_application.c.sid,
        )
        .outerjoin(
            sms_application,
            numbers.c.sms_application_sid == sms_application.c.sid,
        )
        .outerjoin(
            ussd_application,
            numbers.c.ussd_application_sid == ussd_application.c.sid,
        )
        .outerjoin(
            refer_application,
            numbers.c.refer_application_sid == refer_application.c.sid,
        )
    )


def wildcard_to_like(pattern: str) -> str:
    """Translate a ``*``/``?`` wildcard pattern to a LIKE pattern."""
    escaped = (
        pattern.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )
    return escaped.replace("*", "%").replace("?", "_")


def _scope_conditions(search: IncomingPhoneNumberFilter) -> List[ColumnElement]:
    conditions: List[ColumnElement] = []
    account_sids = sorted(str(sid) for sid in search.scoped_account_sids)
    if account_sids:
        conditions.append(numbers.c.account_sid.in_(account_sids))
    if search.organization_sid is not None:
        conditions.append(numbers.c.organization_sid == str(search.organization_sid))
    if search.pure_sip is not None:
        conditions.append(numbers.c.pure_sip == search.pure_sip)
    return conditions


def _friendly_name_conditions(search: IncomingPhoneNumberFilter) -> List[ColumnElement]:
    conditions = _scope_conditions(search)
    if search.filter_mode == SearchFilterMode.PERFECT_MATCH:
        if search.friendly_name is not None:
            conditions.append(numbers.c.friendly_name == search.friendly_name)
        if search.phone_number is not None:
            conditions.append(numbers.c.phone_number == search.phone_number)
    else:
        if search.friendly_name is not None:
            conditions.append(
                numbers.c.friendly_name.icontains(search.friendly_name, autoescape=True)
            )
        if search.phone_number is not None:
            conditions.append(
                numbers.c.phone_number.contains(search.phone_number, autoescape=True)
            )
    return conditions


def _wildcard_conditions(search: IncomingPhoneNumberFilter) -> List[ColumnElement]:
    conditions = _scope_conditions(search)
    if search.friendly_name is not None:
        conditions.append(
            numbers.c.friendly_name.like(
                wildcard_to_like(search.friendly_name), escape=LIKE_ESCAPE
            )
        )
    if search.phone_number is not None:
        conditions.append(
            numbers.c.phone_number.like(
                wildcard_to_like(search.phone_number), escape=LIKE_ESCAPE
            )
        )
    return conditions


def _regex_conditions(search: IncomingPhoneNumberFilter) -> List[ColumnElement]:
    conditions = _scope_conditions(search)
    if search.friendly_name is not None:
        conditions.append(numbers.c.friendly_name.regexp_match(search.friendly_name))
    if search.phone_number is not None:
        conditions.append(numbers.c.phone_number.regexp_match(search.phone_number))
    return conditions


def _page(statement: Select, search: IncomingPhoneNumberFilter) -> Select:
    column = numbers.c[search.sort_by.value]
    ordering = column.desc() if search.sort_direction == SortDirection.DESC else column.asc()
    statement = statement.order_by(ordering, numbers.c.sid.asc()).offset(search.offset)
    if search.limit is not None:
        statement = statement.limit(search.limit)
    return statement


# =============================================================================
# Reads
# =============================================================================


@query(GET_INCOMING_PHONE_NUMBER)
def get_incoming_phone_number(sid: str) -> Select:
    return _select_numbers().where(numbers.c.sid == sid)


@query(GET_INCOMING_PHONE_NUMBERS)
def get_incoming_phone_numbers(account_sid: str) -> Select:
    return (
        _select_numbers()
        .where(numbers.c.account_sid == account_sid)
        .order_by(numbers.c.phone_number.asc(), numbers.c.sid.asc())
    )


@query(GET_INCOMING_PHONE_NUMBERS_BY_FRIENDLY_NAME)
def get_incoming_phone_numbers_by_friendly_name(search: IncomingPhoneNumberFilter) -> Select:
    return _page(_select_numbers().where(*_friendly_name_conditions(search)), search)


@query(SEARCH_NUMBERS_WITH_WILDCARD_MODE)
def search_numbers_with_wildcard_mode(search: IncomingPhoneNumberFilter) -> Select:
    return _page(_select_numbers().where(*_wildcard_conditions(search)), search)


@query(GET_INCOMING_PHONE_NUMBERS_REGEX)
def get_incoming_phone_numbers_regex(search: IncomingPhoneNumberFilter) -> Select:
    return _page(_select_numbers().where(*_regex_conditions(search)), search)


@query(GET_TOTAL_INCOMING_PHONE_NUMBERS)
def get_total_incoming_phone_numbers(search: IncomingPhoneNumberFilter) -> Select:
    return (
        select(func.count())
        .select_from(numbers)
        .where(*_friendly_name_conditions(search))
    )


# =============================================================================
# Writes
# =============================================================================


@query(ADD_INCOMING_PHONE_NUMBER)
def add_incoming_phone_number(row: Dict[str, Any]) -> Executable:
    return insert(numbers).values(**row)


@query(UPDATE_INCOMING_PHONE_NUMBER)
def update_incoming_phone_number(row: Dict[str, Any]) -> Executable:
    changes = {column: value for column, value in row.items() if column != "sid"}
    return update(numbers).where(numbers.c.sid == row["sid"]).values(**changes)


@query(REMOVE_INCOMING_PHONE_NUMBER)
def remove_incoming_phone_number(sid: str) -> Executable:
    return delete(numbers).where(numbers.c.sid == sid)


@query(REMOVE_INCOMING_PHONE_NUMBERS)
def remove_incoming_phone_numbers(account_sid: str) -> Executable:
    return delete(numbers).where(numbers.c.account_sid == account_sid)


__all__ = [
    "NAMESPACE",
    "QUERIES",
    "query",
    "build",
    "wildcard_to_like",
    "ADD_INCOMING_PHONE_NUMBER",
    "GET_INCOMING_PHONE_NUMBER",
    "GET_INCOMING_PHONE_NUMBERS",
    "GET_INCOMING_PHONE_NUMBERS_REGEX",
    "GET_INCOMING_PHONE_NUMBERS_BY_FRIENDLY_NAME",
    "SEARCH_NUMBERS_WITH_WILDCARD_MODE",
    "GET_TOTAL_INCOMING_PHONE_NUMBERS",
    "UPDATE_INCOMING_PHONE_NUMBER",
    "REMOVE_INCOMING_PHONE_NUMBER",
    "REMOVE_INCOMING_PHONE_NUMBERS",
]
