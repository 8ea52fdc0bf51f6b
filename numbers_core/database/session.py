"""
Named Query Session

Thin layer over ``AsyncSession`` that executes statements from the query
catalog by identifier and hands back row snapshots.
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator, Dict, List, Optional

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from . import queries
from .base import DatabaseManager


logger = structlog.get_logger(__name__)


class QuerySession:
    """Executes catalog queries against one database session."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _execute(self, query_id: str, parameter: Any):
        statement = queries.build(query_id, parameter)
        logger.debug("query_execute", query_id=query_id)
        return await self.session.execute(statement)

    async def select_one(self, query_id: str, parameter: Any) -> Optional[Dict[str, Any]]:
        """Run a query expected to return at most one row."""
        result = await self._execute(query_id, parameter)
        row = result.mappings().one_or_none()
        return dict(row) if row is not None else None

    async def select_list(self, query_id: str, parameter: Any) -> List[Dict[str, Any]]:
        """Run a query and return every row."""
        result = await self._execute(query_id, parameter)
        return [dict(row) for row in result.mappings().all()]

    async def select_scalar(self, query_id: str, parameter: Any) -> Any:
        result = await self._execute(query_id, parameter)
        return result.scalar_one_or_none()

    async def insert(self, query_id: str, parameter: Any) -> int:
        result = await self._execute(query_id, parameter)
        return result.rowcount

    async def update(self, query_id: str, parameter: Any) -> int:
        result = await self._execute(query_id, parameter)
        return result.rowcount

    async def delete(self, query_id: str, parameter: Any) -> int:
        result = await self._execute(query_id, parameter)
        return result.rowcount

    async def commit(self) -> None:
        await self.session.commit()


@asynccontextmanager
async def open_session(database: DatabaseManager) -> AsyncGenerator[QuerySession, None]:
    """
    Open a query session for one unit of work.

    The underlying session is rolled back on error and always closed;
    committing is left to the caller.
    """
    async with database.session() as session:
        yield QuerySession(session)


__all__ = ["QuerySession", "open_session"]
