"""
Channel capability consumed by :class:`~recordstore.store.provider.RecordStore`.

``Channel`` is a small :class:`typing.Protocol` describing the five primitives
the store needs from a messaging backend. Implementations must raise
:class:`~recordstore.errors.RecordNotFoundError` from ``fetch``/``delete`` when
the id does not resolve; every other failure is theirs to raise as-is.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, Tuple


@dataclass(frozen=True, slots=True)
class ChannelRecord:
    """Snapshot of a single message as seen by the store."""

    record_id: str
    content: str
    attachment_urls: Tuple[str, ...] = ()


class Channel(Protocol):
    async def send(self, content: str, *, attachment: bytes | None = None) -> ChannelRecord: ...

    async def fetch(self, record_id: str) -> ChannelRecord: ...

    async def edit(self, record_id: str, content: str) -> None: ...

    async def delete(self, record_id: str) -> None: ...

    async def download(self, url: str) -> bytes: ...


__all__ = ["Channel", "ChannelRecord"]
