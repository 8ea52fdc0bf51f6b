"""
Incoming Phone Number Domain Model

Immutable value records for numbers provisioned to an account.
"""

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from ..errors import InvalidRecordError
from .sid import Sid


class Channel(str, Enum):
    """Routing channels configurable per number."""

    VOICE = "voice"
    SMS = "sms"
    USSD = "ussd"
    REFER = "refer"


@dataclass(frozen=True)
class ChannelConfig:
    """Routing configuration of one channel of a number."""

    url: Optional[str] = None
    method: Optional[str] = None
    fallback_url: Optional[str] = None
    fallback_method: Optional[str] = None
    application_sid: Optional[Sid] = None
    application_name: Optional[str] = None

    @property
    def has_application(self) -> bool:
        return self.application_sid is not None


@dataclass(frozen=True)
class IncomingPhoneNumber:
    """
    A phone number (or pure SIP address) bound to an account.

    Application names are populated from the applications relation on
    read and are never persisted through this record.
    """

    sid: Sid
    account_sid: Sid
    phone_number: str

    organization_sid: Optional[Sid] = None
    date_created: Optional[datetime] = None
    date_updated: Optional[datetime] = None
    friendly_name: Optional[str] = None
    cost: Optional[str] = None
    api_version: Optional[str] = None
    uri: Optional[str] = None
    voice_caller_id_lookup: bool = False

    # Voice
    voice_url: Optional[str] = None
    voice_method: Optional[str] = None
    voice_fallback_url: Optional[str] = None
    voice_fallback_method: Optional[str] = None
    voice_application_sid: Optional[Sid] = None
    voice_application_name: Optional[str] = None

    # SMS
    sms_url: Optional[str] = None
    sms_method: Optional[str] = None
    sms_fallback_url: Optional[str] = None
    sms_fallback_method: Optional[str] = None
    sms_application_sid: Optional[Sid] = None
    sms_application_name: Optional[str] = None

    # USSD
    ussd_url: Optional[str] = None
    ussd_method: Optional[str] = None
    ussd_fallback_url: Optional[str] = None
    ussd_fallback_method: Optional[str] = None
    ussd_application_sid: Optional[Sid] = None
    ussd_application_name: Optional[str] = None

    # Refer
    refer_url: Optional[str] = None
    refer_method: Optional[str] = None
    refer_fallback_url: Optional[str] = None
    refer_fallback_method: Optional[str] = None
    refer_application_sid: Optional[Sid] = None
    refer_application_name: Optional[str] = None

    # Status callback applies to every channel
    status_callback: Optional[str] = None
    status_callback_method: Optional[str] = None

    # Capabilities
    voice_capable: bool = False
    sms_capable: bool = False
    mms_capable: bool = False
    fax_capable: bool = False
    pure_sip: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.sid, Sid):
            raise InvalidRecordError("Incoming phone number requires a sid")
        if not isinstance(self.account_sid, Sid):
            raise InvalidRecordError(
                f"Incoming phone number {self.sid} requires an account sid"
            )
        if not self.phone_number:
            raise InvalidRecordError(
                f"Incoming phone number {self.sid} requires a phone number"
            )

    def channel(self, channel: Channel) -> ChannelConfig:
        """Get the routing configuration of a channel."""
        prefix = Channel(channel).value
        return ChannelConfig(
            url=getattr(self, f"{prefix}_url"),
            method=getattr(self, f"{prefix}_method"),
            fallback_url=getattr(self, f"{prefix}_fallback_url"),
            fallback_method=getattr(self, f"{prefix}_fallback_method"),
            application_sid=getattr(self, f"{prefix}_application_sid"),
            application_name=getattr(self, f"{prefix}_application_name"),
        )

    def with_changes(self, **changes: Any) -> "IncomingPhoneNumber":
        """
        Return a copy with the given fields replaced.

        The sid cannot be changed.
        """
        if "sid" in changes and changes["sid"] != self.sid:
            raise InvalidRecordError(
                f"Sid of incoming phone number {self.sid} is immutable"
            )
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a JSON friendly dictionary."""
        result: Dict[str, Any] = {}
        for name in self.__dataclass_fields__:
            value = getattr(self, name)
            if isinstance(value, Sid):
                value = str(value)
            elif isinstance(value, datetime):
                value = value.isoformat()
            result[name] = value
        return result
