"""
Incoming Phone Number Record Mapper

Converts between row snapshots (flat ``column -> raw value`` mappings) and
``IncomingPhoneNumber`` records. Both directions are driven by ``FIELDS`` so
the read and write paths cannot drift apart.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from ..domain.models import Channel, IncomingPhoneNumber
from ..errors import RecordMappingError
from .codecs import BOOLEAN, DATETIME, SID, STRING, URI, FieldCodec


RowSnapshot = Dict[str, Any]


@dataclass(frozen=True)
class FieldSpec:
    """Binding of one column to one record attribute."""

    column: str
    codec: FieldCodec
    writable: bool = True
    required: bool = False
    default: Any = None

    @property
    def attribute(self) -> str:
        return self.column


def _channel_fields(channel: Channel) -> Tuple[FieldSpec, ...]:
    prefix = channel.value
    return (
        FieldSpec(f"{prefix}_url", URI),
        FieldSpec(f"{prefix}_method", STRING),
        FieldSpec(f"{prefix}_fallback_url", URI),
        FieldSpec(f"{prefix}_fallback_method", STRING),
        FieldSpec(f"{prefix}_application_sid", SID),
        # Loaded from the applications relation
        FieldSpec(f"{prefix}_application_name", STRING, writable=False),
    )


FIELDS: Tuple[FieldSpec, ...] = (
    FieldSpec("sid", SID, required=True),
    FieldSpec("account_sid", SID, required=True),
    FieldSpec("phone_number", STRING, required=True),
    FieldSpec("organization_sid", SID),
    FieldSpec("date_created", DATETIME),
    FieldSpec("date_updated", DATETIME),
    FieldSpec("friendly_name", STRING),
    FieldSpec("cost", STRING),
    FieldSpec("api_version", STRING),
    FieldSpec("uri", URI),
    FieldSpec("voice_caller_id_lookup", BOOLEAN, default=False),
    *_channel_fields(Channel.VOICE),
    *_channel_fields(Channel.SMS),
    *_channel_fields(Channel.USSD),
    *_channel_fields(Channel.REFER),
    FieldSpec("status_callback", URI),
    FieldSpec("status_callback_method", STRING),
    FieldSpec("voice_capable", BOOLEAN, default=False),
    FieldSpec("sms_capable", BOOLEAN, default=False),
    FieldSpec("mms_capable", BOOLEAN, default=False),
    FieldSpec("fax_capable", BOOLEAN, default=False),
    FieldSpec("pure_sip", BOOLEAN, default=False),
)

WRITABLE_COLUMNS: Tuple[str, ...] = tuple(f.column for f in FIELDS if f.writable)
JOINED_COLUMNS: Tuple[str, ...] = tuple(f.column for f in FIELDS if not f.writable)


def compose(row: Optional[Mapping[str, Any]]) -> Optional[IncomingPhoneNumber]:
    """
    Build a record from a row snapshot.

    Args:
        row: Row snapshot, or None

    Returns:
        The record, or None when no row was given

    Raises:
        RecordMappingError: If a mandatory column is absent, null or empty
        FieldCodecError: If a value cannot be converted
    """
    if row is None:
        return None

    values: Dict[str, Any] = {}
    for spec in FIELDS:
        value = spec.codec.read(row.get(spec.column))
        if value is None or (spec.required and value == ""):
            if spec.required:
                raise RecordMappingError(spec.column)
            value = spec.default
        values[spec.attribute] = value

    return IncomingPhoneNumber(**values)


def decompose(record: IncomingPhoneNumber) -> RowSnapshot:
    """Build the row snapshot written for inserts and updates."""
    return {
        spec.column: spec.codec.write(getattr(record, spec.attribute))
        for spec in FIELDS
        if spec.writable
    }


__all__ = [
    "RowSnapshot",
    "FieldSpec",
    "FIELDS",
    "WRITABLE_COLUMNS",
    "JOINED_COLUMNS",
    "compose",
    "decompose",
]
