"""
Field Codecs

Converters between raw column values and typed record fields. Every codec
maps ``None`` to ``None`` in both directions; non-null values survive
``read(write(value))`` unchanged, except that time-zone-aware timestamps
come back as naive UTC.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from ..domain.sid import InvalidSidError, Sid
from ..errors import FieldCodecError


class FieldCodec:
    """Base codec; the identity conversion."""

    name = "raw"

    def read(self, raw: Any) -> Any:
        return raw

    def write(self, value: Any) -> Any:
        return value


class SidCodec(FieldCodec):
    name = "sid"

    def read(self, raw: Any) -> Optional[Sid]:
        if raw is None or raw == "":
            return None
        if isinstance(raw, Sid):
            return raw
        try:
            return Sid(str(raw))
        except InvalidSidError:
            raise FieldCodecError(self.name, raw)

    def write(self, value: Optional[Sid]) -> Optional[str]:
        if value is None:
            return None
        return str(value)


class DateTimeCodec(FieldCodec):
    """Timestamps are stored naive; aware values are written as UTC."""

    name = "datetime"

    def read(self, raw: Any) -> Optional[datetime]:
        if raw is None or raw == "":
            return None
        if isinstance(raw, datetime):
            return raw
        if isinstance(raw, str):
            try:
                return datetime.fromisoformat(raw)
            except ValueError:
                raise FieldCodecError(self.name, raw)
        raise FieldCodecError(self.name, raw)

    def write(self, value: Optional[datetime]) -> Optional[datetime]:
        if value is not None and value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value


class UriCodec(FieldCodec):
    name = "uri"

    def read(self, raw: Any) -> Optional[str]:
        if raw is None:
            return None
        if not isinstance(raw, str):
            raise FieldCodecError(self.name, raw)
        return raw

    def write(self, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        return str(value)


class BooleanCodec(FieldCodec):
    name = "boolean"

    TRUE_VALUES = frozenset({"true", "t", "1", "yes", "y"})
    FALSE_VALUES = frozenset({"false", "f", "0", "no", "n"})

    def read(self, raw: Any) -> Optional[bool]:
        if raw is None:
            return None
        if isinstance(raw, bool):
            return raw
        if isinstance(raw, int) and raw in (0, 1):
            return bool(raw)
        if isinstance(raw, str):
            lowered = raw.strip().lower()
            if lowered in self.TRUE_VALUES:
                return True
            if lowered in self.FALSE_VALUES:
                return False
        raise FieldCodecError(self.name, raw)

    def write(self, value: Optional[bool]) -> Optional[bool]:
        if value is None:
            return None
        return bool(value)


class StringCodec(FieldCodec):
    name = "string"

    def read(self, raw: Any) -> Optional[str]:
        if raw is None:
            return None
        return raw if isinstance(raw, str) else str(raw)

    def write(self, value: Optional[str]) -> Optional[str]:
        return value


SID = SidCodec()
DATETIME = DateTimeCodec()
URI = UriCodec()
BOOLEAN = BooleanCodec()
STRING = StringCodec()


__all__ = [
    "FieldCodec",
    "SidCodec",
    "DateTimeCodec",
    "UriCodec",
    "BooleanCodec",
    "StringCodec",
    "SID",
    "DATETIME",
    "URI",
    "BOOLEAN",
    "STRING",
]
