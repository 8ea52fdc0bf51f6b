"""Shared pytest fixtures for testing."""

from datetime import datetime
from typing import AsyncGenerator, Callable

import pytest
import pytest_asyncio

from numbers_core.database.base import DatabaseManager
from numbers_core.database.repositories import IncomingPhoneNumberRepository
from numbers_core.domain.models import IncomingPhoneNumber
from numbers_core.domain.sid import Sid, SidType


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest_asyncio.fixture(scope="function")
async def database() -> AsyncGenerator[DatabaseManager, None]:
    """Create a fresh in-memory database for each test."""
    db = DatabaseManager("sqlite+aiosqlite:///:memory:")
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()


@pytest_asyncio.fixture(scope="function")
async def repository(database: DatabaseManager) -> IncomingPhoneNumberRepository:
    """Repository bound to the test database."""
    return IncomingPhoneNumberRepository(database)


# =============================================================================
# Test Data Fixtures
# =============================================================================


@pytest.fixture
def account_sid() -> Sid:
    """Generate a test account sid."""
    return Sid.generate(SidType.ACCOUNT)


@pytest.fixture
def organization_sid() -> Sid:
    """Generate a test organization sid."""
    return Sid.generate(SidType.ORGANIZATION)


@pytest.fixture
def make_number(account_sid: Sid, organization_sid: Sid) -> Callable[..., IncomingPhoneNumber]:
    """Factory for incoming phone numbers with sensible defaults."""

    def factory(**overrides) -> IncomingPhoneNumber:
        values = {
            "sid": Sid.generate(SidType.PHONE_NUMBER),
            "account_sid": account_sid,
            "organization_sid": organization_sid,
            "phone_number": "+15551234567",
            "friendly_name": "Main Line",
            "date_created": datetime(2024, 3, 1, 12, 30, 0),
            "date_updated": datetime(2024, 3, 2, 8, 15, 0),
            "api_version": "2012-04-24",
            "cost": "0.50",
            "voice_url": "https://example.com/voice",
            "voice_method": "POST",
            "voice_capable": True,
            "sms_capable": True,
        }
        values.update(overrides)
        return IncomingPhoneNumber(**values)

    return factory
