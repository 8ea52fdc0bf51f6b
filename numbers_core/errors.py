"""
Error types for the incoming phone numbers data layer.

Store failures raised by SQLAlchemy are never wrapped in these; they reach
the caller unchanged.
"""

from typing import Any


class NumbersDataError(Exception):
    """Base incoming phone numbers data error."""

    def __init__(self, message: str, code: str = "numbers_data_error"):
        self.message = message
        self.code = code
        super().__init__(message)


class FieldCodecError(NumbersDataError):
    """A raw column value could not be converted."""

    def __init__(self, codec: str, value: Any):
        self.codec = codec
        self.value = value
        super().__init__(
            f"Cannot read {value!r} as {codec}",
            "field_codec_error",
        )


class RecordMappingError(NumbersDataError):
    """A row snapshot is missing a mandatory column."""

    def __init__(self, column: str):
        self.column = column
        super().__init__(
            f"Row snapshot is missing mandatory column: {column}",
            "record_mapping_error",
        )


class InvalidRecordError(NumbersDataError):
    """An incoming phone number was built without a mandatory field."""

    def __init__(self, message: str):
        super().__init__(message, "invalid_record")


class InvalidFilterError(NumbersDataError):
    """A search filter carries unusable values."""

    def __init__(self, message: str):
        super().__init__(message, "invalid_filter")


class UnknownQueryError(NumbersDataError):
    """A query identifier is not registered in the catalog."""

    def __init__(self, query_id: str):
        self.query_id = query_id
        super().__init__(f"Unknown query: {query_id}", "unknown_query")


__all__ = [
    "NumbersDataError",
    "FieldCodecError",
    "RecordMappingError",
    "InvalidRecordError",
    "InvalidFilterError",
    "UnknownQueryError",
]
