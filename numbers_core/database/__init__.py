"""
Database layer for incoming phone numbers.

Tables, field codecs, the record mapper, the named query catalog, and the
repository facade.
"""

from .base import (
    Base,
    DatabaseConfig,
    DatabaseManager,
    close_database,
    get_database,
    init_database,
)
from .mapper import FIELDS, FieldSpec, compose, decompose
from .models import ApplicationModel, IncomingPhoneNumberModel
from .repositories import IncomingPhoneNumberRepository
from .session import QuerySession, open_session


__all__ = [
    # Base
    "Base",
    "DatabaseConfig",
    "DatabaseManager",
    "get_database",
    "init_database",
    "close_database",
    # Models
    "ApplicationModel",
    "IncomingPhoneNumberModel",
    # Mapping
    "FieldSpec",
    "FIELDS",
    "compose",
    "decompose",
    # Sessions
    "QuerySession",
    "open_session",
    # Repositories
    "IncomingPhoneNumberRepository",
]
