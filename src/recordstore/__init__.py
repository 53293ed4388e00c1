"""Binary record storage on top of Discord text channels."""

from .errors import (
    ChannelError,
    CorruptedRecordError,
    InvalidDataError,
    PayloadTooLargeError,
    RecordNotFoundError,
    RecordStoreError,
    UninitializedRecordError,
    UnreadableRecordError,
)
from .store import Channel, ChannelRecord, DeleteResult, RecordStore

__all__ = [
    "Channel",
    "ChannelError",
    "ChannelRecord",
    "CorruptedRecordError",
    "DeleteResult",
    "InvalidDataError",
    "PayloadTooLargeError",
    "RecordNotFoundError",
    "RecordStore",
    "RecordStoreError",
    "UninitializedRecordError",
    "UnreadableRecordError",
]
