"""
Database Repositories

Repository for incoming phone numbers. Every operation runs in its own
unit of work: open a session, run one statement, commit when it mutates,
and release the session on every exit path.
"""

from typing import AsyncContextManager, Callable, List, Optional

import structlog

from ..domain.filters import IncomingPhoneNumberFilter
from ..domain.models import IncomingPhoneNumber
from ..domain.sid import Sid
from . import queries, resolver
from .base import DatabaseManager
from .codecs import SID
from .mapper import compose, decompose
from .session import QuerySession, open_session


logger = structlog.get_logger(__name__)


SessionOpener = Callable[[], AsyncContextManager[QuerySession]]


class IncomingPhoneNumberRepository:
    """Repository for IncomingPhoneNumber records."""

    def __init__(
        self,
        database: DatabaseManager,
        session_opener: Optional[SessionOpener] = None,
    ):
        self.database = database
        self._open = session_opener or (lambda: open_session(database))

    async def add_incoming_phone_number(self, number: IncomingPhoneNumber) -> None:
        """Insert a new incoming phone number."""
        async with self._open() as session:
            await session.insert(queries.ADD_INCOMING_PHONE_NUMBER, decompose(number))
            await session.commit()
        logger.debug("incoming_phone_number_added", sid=str(number.sid))

    async def get_incoming_phone_number(self, sid: Sid) -> Optional[IncomingPhoneNumber]:
        """Get an incoming phone number by sid, or None if it does not exist."""
        async with self._open() as session:
            row = await session.select_one(queries.GET_INCOMING_PHONE_NUMBER, SID.write(sid))
        return compose(row)

    async def get_incoming_phone_numbers(self, account_sid: Sid) -> List[IncomingPhoneNumber]:
        """List every incoming phone number of an account."""
        async with self._open() as session:
            rows = await session.select_list(resolver.account_query(), SID.write(account_sid))
        return self._to_numbers(rows)

    async def get_incoming_phone_numbers_regex(
        self,
        search: IncomingPhoneNumberFilter,
    ) -> List[IncomingPhoneNumber]:
        """List incoming phone numbers matching the filter's regular expressions."""
        async with self._open() as session:
            rows = await session.select_list(resolver.regex_query(search), search)
        return self._to_numbers(rows)

    async def get_incoming_phone_numbers_by_filter(
        self,
        search: IncomingPhoneNumberFilter,
    ) -> List[IncomingPhoneNumber]:
        """List incoming phone numbers matching a filter, honouring its mode."""
        query_id = resolver.listing_query(search)
        async with self._open() as session:
            rows = await session.select_list(query_id, search)
        return self._to_numbers(rows)

    async def get_total_incoming_phone_numbers(self, search: IncomingPhoneNumberFilter) -> int:
        """Count incoming phone numbers matching a filter."""
        async with self._open() as session:
            total = await session.select_scalar(resolver.count_query(search), search)
        return int(total) if total else 0

    async def update_incoming_phone_number(self, number: IncomingPhoneNumber) -> None:
        """Overwrite the stored columns of a number; no-op when the sid is unknown."""
        async with self._open() as session:
            updated = await session.update(
                queries.UPDATE_INCOMING_PHONE_NUMBER, decompose(number)
            )
            await session.commit()
        if not updated:
            logger.debug("incoming_phone_number_update_missed", sid=str(number.sid))

    async def remove_incoming_phone_number(self, sid: Sid) -> None:
        """Delete one incoming phone number."""
        await self._remove(queries.REMOVE_INCOMING_PHONE_NUMBER, sid)

    async def remove_incoming_phone_numbers(self, account_sid: Sid) -> None:
        """Delete every incoming phone number of an account."""
        await self._remove(queries.REMOVE_INCOMING_PHONE_NUMBERS, account_sid)

    async def _remove(self, query_id: str, sid: Sid) -> None:
        async with self._open() as session:
            removed = await session.delete(query_id, SID.write(sid))
            await session.commit()
        logger.debug("incoming_phone_numbers_removed", query_id=query_id, count=removed)

    @staticmethod
    def _to_numbers(rows: Optional[List[dict]]) -> List[IncomingPhoneNumber]:
        if not rows:
            return []
        return [compose(row) for row in rows]


__all__ = ["IncomingPhoneNumberRepository", "SessionOpener"]
