"""Record store built on the dense codec and an injected channel."""

from .channel import Channel, ChannelRecord
from .content import ContentKind, OverflowPointer, RecordContent, parse_content
from .provider import DeleteResult, RecordStore

__all__ = [
    "Channel",
    "ChannelRecord",
    "ContentKind",
    "DeleteResult",
    "OverflowPointer",
    "RecordContent",
    "RecordStore",
    "parse_content",
]
