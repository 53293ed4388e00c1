"""
Tagged record content.

Wire format (first character is the tag)::

    .                       uninitialized
    b<base64>               inline, standard encoding
    c<dense text>           inline, dense encoding
    u <secondary id> <url>  pointer to an overflow record
    d                       overflow record (payload is the attachment)

:func:`parse_content` turns raw message text into a :class:`RecordContent`;
anything with an unknown tag is rejected there so callers only ever branch on
:class:`ContentKind`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..errors import CorruptedRecordError

POINTER_SEPARATOR = " "


class ContentKind(str, Enum):
    UNINITIALIZED = "."
    STANDARD = "b"
    DENSE = "c"
    OVERFLOW = "u"
    RAW = "d"


@dataclass(frozen=True, slots=True)
class RecordContent:
    kind: ContentKind
    body: str = ""

    def render(self) -> str:
        return f"{self.kind.value}{self.body}"


@dataclass(frozen=True, slots=True)
class OverflowPointer:
    """Reference from a primary record to the overflow record holding its bytes."""

    record_id: str
    url: str

    def to_content(self) -> RecordContent:
        for name, value in (("record id", self.record_id), ("url", self.url)):
            if not value or POINTER_SEPARATOR in value:
                raise ValueError(f"overflow {name} must be non-empty and contain no spaces: {value!r}")
        return RecordContent(
            ContentKind.OVERFLOW,
            f"{POINTER_SEPARATOR}{self.record_id}{POINTER_SEPARATOR}{self.url}",
        )

    @classmethod
    def from_content(cls, content: RecordContent) -> "OverflowPointer":
        if content.kind is not ContentKind.OVERFLOW:
            raise ValueError(f"not an overflow pointer: {content.kind!r}")
        parts = content.body.split(POINTER_SEPARATOR)
        if len(parts) != 3 or parts[0] or not parts[1] or not parts[2]:
            raise CorruptedRecordError(f"malformed overflow pointer {content.render()!r}")
        return cls(record_id=parts[1], url=parts[2])


def parse_content(raw: str) -> RecordContent:
    """Split ``raw`` into its tag and body."""

    if not raw:
        raise CorruptedRecordError("record content is empty")
    try:
        kind = ContentKind(raw[0])
    except ValueError:
        raise CorruptedRecordError(f"unknown record tag {raw[0]!r}") from None
    return RecordContent(kind, raw[1:])


__all__ = ["ContentKind", "RecordContent", "OverflowPointer", "parse_content"]
