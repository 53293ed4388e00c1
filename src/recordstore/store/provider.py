"""
RecordStore
===========
Object store over a :class:`~recordstore.store.channel.Channel`.

1. ``create``  : send ``"."`` and hand the new id to the caller.
2. ``write``   : dense-encode inline when it fits, otherwise upload the bytes
   as an attachment on a secondary record and point the primary at it.
   Edit the primary first, then drop the secondary the old content referenced.
3. ``read``    : dispatch on the content tag.
4. ``delete``  : remove the primary, then its secondary.

NOTE: there is no locking or version check; concurrent writes to the same id
race and the last edit wins.
"""

from __future__ import annotations

import logging
from enum import Enum

from ..codec import dense, standard
from ..errors import (
    CorruptedRecordError,
    PayloadTooLargeError,
    RecordNotFoundError,
    UninitializedRecordError,
    UnreadableRecordError,
)
from .channel import Channel
from .content import ContentKind, OverflowPointer, RecordContent, parse_content

logger = logging.getLogger(__name__)

DEFAULT_MAX_CONTENT_LENGTH = 2000
DEFAULT_MAX_ATTACHMENT_BYTES = 25 * 1024 * 1024


def storage_kind(size: int, max_content_length: int = DEFAULT_MAX_CONTENT_LENGTH) -> ContentKind:
    """Return the tag a payload of ``size`` bytes is written with."""

    if size == 0:
        return ContentKind.STANDARD
    # One character is reserved for the tag.
    if dense.encoded_size(size) <= max_content_length - 1:
        return ContentKind.DENSE
    return ContentKind.OVERFLOW


class DeleteResult(Enum):
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    FAILED = "failed"

    def __bool__(self) -> bool:
        return self is DeleteResult.DELETED


class RecordStore:
    """Create/read/write/delete byte blobs addressed by channel record ids."""

    def __init__(
        self,
        channel: Channel,
        *,
        max_content_length: int = DEFAULT_MAX_CONTENT_LENGTH,
        max_attachment_bytes: int = DEFAULT_MAX_ATTACHMENT_BYTES,
    ) -> None:
        if max_content_length < 2:
            raise ValueError("max_content_length must leave room for a tag")
        self._channel = channel
        self.max_content_length = max_content_length
        self.max_attachment_bytes = max_attachment_bytes

    def storage_kind(self, size: int) -> ContentKind:
        return storage_kind(size, self.max_content_length)

    async def create(self) -> str:
        record = await self._channel.send(ContentKind.UNINITIALIZED.value)
        logger.debug("Created record %s", record.record_id)
        return record.record_id

    async def read(self, record_id: str) -> bytes:
        record = await self._channel.fetch(record_id)
        content = parse_content(record.content)
        kind = content.kind

        if kind is ContentKind.STANDARD:
            return standard.decode(content.body)
        if kind is ContentKind.DENSE:
            return dense.decode(content.body)
        if kind is ContentKind.OVERFLOW:
            pointer = OverflowPointer.from_content(content)
            return await self._channel.download(pointer.url)
        if kind is ContentKind.RAW:
            raise UnreadableRecordError(f"record {record_id} holds raw overflow data and cannot be read directly")
        if kind is ContentKind.UNINITIALIZED:
            raise UninitializedRecordError(f"record {record_id} has not been written")
        raise CorruptedRecordError(f"record {record_id} has unhandled kind {kind!r}")

    async def write(self, record_id: str, data: bytes) -> None:
        previous = await self._channel.fetch(record_id)

        kind = self.storage_kind(len(data))
        pointer = None
        if kind is ContentKind.STANDARD:
            new_content = RecordContent(ContentKind.STANDARD, "")
        elif kind is ContentKind.DENSE:
            new_content = RecordContent(ContentKind.DENSE, dense.encode(data))
        else:
            pointer = await self._upload_overflow(data)
            new_content = pointer.to_content()

        try:
            await self._channel.edit(record_id, new_content.render())
        except BaseException:
            # The new overflow record has no owner unless the edit lands.
            if pointer is not None:
                await self._discard_overflow(pointer.record_id)
            raise
        logger.debug(
            "Wrote %d byte(s) to record %s as %s", len(data), record_id, new_content.kind.name
        )

        await self._delete_linked(previous.content)

    async def delete(self, record_id: str) -> DeleteResult:
        try:
            record = await self._channel.fetch(record_id)
            await self._channel.delete(record_id)
        except RecordNotFoundError:
            logger.info("Record %s already absent", record_id)
            return DeleteResult.NOT_FOUND
        except Exception:
            logger.exception("Failed to delete record %s", record_id)
            return DeleteResult.FAILED

        await self._delete_linked(record.content)
        return DeleteResult.DELETED

    async def _upload_overflow(self, data: bytes) -> OverflowPointer:
        if len(data) > self.max_attachment_bytes:
            raise PayloadTooLargeError(
                f"payload of {len(data)} bytes exceeds attachment limit of {self.max_attachment_bytes}"
            )
        secondary = await self._channel.send(ContentKind.RAW.value, attachment=data)
        if not secondary.attachment_urls:
            raise CorruptedRecordError(f"overflow record {secondary.record_id} has no attachment url")
        return OverflowPointer(secondary.record_id, secondary.attachment_urls[0])

    async def _delete_linked(self, raw_content: str) -> None:
        """Best-effort removal of the overflow record ``raw_content`` points to."""

        try:
            content = parse_content(raw_content)
            if content.kind is not ContentKind.OVERFLOW:
                return
            pointer = OverflowPointer.from_content(content)
        except CorruptedRecordError:
            return

        await self._discard_overflow(pointer.record_id)

    async def _discard_overflow(self, record_id: str) -> None:
        try:
            await self._channel.delete(record_id)
        except RecordNotFoundError:
            logger.debug("Overflow record %s already gone", record_id)
        except Exception as exc:
            logger.warning("Failed to delete overflow record %s: %s", record_id, exc)


__all__ = ["RecordStore", "DeleteResult", "storage_kind"]
