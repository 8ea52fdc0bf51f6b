"""
Database Models

SQLAlchemy tables backing incoming phone numbers and the applications
they route to.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import Boolean, DateTime, Index, String, false
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


SID_LENGTH = 34
URL_LENGTH = 2048
METHOD_LENGTH = 10


class ApplicationModel(Base):
    """
    Application a number can route a channel to.

    Only the columns read by number listings are mapped here.
    """

    __tablename__ = "applications"

    sid: Mapped[str] = mapped_column(String(SID_LENGTH), primary_key=True)
    account_sid: Mapped[Optional[str]] = mapped_column(String(SID_LENGTH), nullable=True)
    friendly_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)


class IncomingPhoneNumberModel(Base):
    """Incoming phone number model."""

    __tablename__ = "incoming_phone_numbers"

    sid: Mapped[str] = mapped_column(String(SID_LENGTH), primary_key=True)
    date_created: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    date_updated: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    friendly_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    account_sid: Mapped[str] = mapped_column(String(SID_LENGTH), nullable=False)
    organization_sid: Mapped[Optional[str]] = mapped_column(String(SID_LENGTH), nullable=True)
    phone_number: Mapped[str] = mapped_column(String(255), nullable=False)
    cost: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    api_version: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    uri: Mapped[Optional[str]] = mapped_column(String(URL_LENGTH), nullable=True)
    voice_caller_id_lookup: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False, server_default=false()
    )

    # Voice
    voice_url: Mapped[Optional[str]] = mapped_column(String(URL_LENGTH), nullable=True)
    voice_method: Mapped[Optional[str]] = mapped_column(String(METHOD_LENGTH), nullable=True)
    voice_fallback_url: Mapped[Optional[str]] = mapped_column(String(URL_LENGTH), nullable=True)
    voice_fallback_method: Mapped[Optional[str]] = mapped_column(String(METHOD_LENGTH), nullable=True)
    voice_application_sid: Mapped[Optional[str]] = mapped_column(String(SID_LENGTH), nullable=True)

    # SMS
    sms_url: Mapped[Optional[str]] = mapped_column(String(URL_LENGTH), nullable=True)
    sms_method: Mapped[Optional[str]] = mapped_column(String(METHOD_LENGTH), nullable=True)
    sms_fallback_url: Mapped[Optional[str]] = mapped_column(String(URL_LENGTH), nullable=True)
    sms_fallback_method: Mapped[Optional[str]] = mapped_column(String(METHOD_LENGTH), nullable=True)
    sms_application_sid: Mapped[Optional[str]] = mapped_column(String(SID_LENGTH), nullable=True)

    # USSD
    ussd_url: Mapped[Optional[str]] = mapped_column(String(URL_LENGTH), nullable=True)
    ussd_method: Mapped[Optional[str]] = mapped_column(String(METHOD_LENGTH), nullable=True)
    ussd_fallback_url: Mapped[Optional[str]] = mapped_column(String(URL_LENGTH), nullable=True)
    ussd_fallback_method: Mapped[Optional[str]] = mapped_column(String(METHOD_LENGTH), nullable=True)
    ussd_application_sid: Mapped[Optional[str]] = mapped_column(String(SID_LENGTH), nullable=True)

    # Refer
    refer_url: Mapped[Optional[str]] = mapped_column(String(URL_LENGTH), nullable=True)
    refer_method: Mapped[Optional[str]] = mapped_column(String(METHOD_LENGTH), nullable=True)
    refer_fallback_url: Mapped[Optional[str]] = mapped_column(String(URL_LENGTH), nullable=True)
    refer_fallback_method: Mapped[Optional[str]] = mapped_column(String(METHOD_LENGTH), nullable=True)
    refer_application_sid: Mapped[Optional[str]] = mapped_column(String(SID_LENGTH), nullable=True)

    # Status callback
    status_callback: Mapped[Optional[str]] = mapped_column(String(URL_LENGTH), nullable=True)
    status_callback_method: Mapped[Optional[str]] = mapped_column(String(METHOD_LENGTH), nullable=True)

    # Capabilities
    voice_capable: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
    sms_capable: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
    mms_capable: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
    fax_capable: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())
    pure_sip: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())

    __table_args__ = (
        Index("ix_incoming_phone_numbers_account_sid", "account_sid"),
        Index("ix_incoming_phone_numbers_organization_sid", "organization_sid"),
        Index("ix_incoming_phone_numbers_phone_number", "phone_number"),
    )


incoming_phone_numbers = IncomingPhoneNumberModel.__table__
applications = ApplicationModel.__table__
