"""Discord-backed channel adapter and client bootstrap."""

from __future__ import annotations

import io
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import aiohttp
import discord

from ..errors import PayloadTooLargeError, RecordNotFoundError
from ..store import ChannelRecord, RecordStore

logger = logging.getLogger(__name__)

INTENTS = discord.Intents.none()
INTENTS.guilds = True
INTENTS.messages = True
INTENTS.message_content = True


def _to_record(message: discord.Message) -> ChannelRecord:
    return ChannelRecord(
        record_id=str(message.id),
        content=message.content,
        attachment_urls=tuple(att.url for att in message.attachments),
    )


class DiscordChannel:
    """:class:`~recordstore.store.Channel` implementation over a text channel."""

    def __init__(
        self,
        channel: discord.TextChannel,
        *,
        attachment_filename: str = "data",
        download_timeout: float = 60.0,
        max_download_bytes: int = 25 * 1024 * 1024,
    ) -> None:
        self._channel = channel
        self._attachment_filename = attachment_filename
        self._max_download_bytes = max_download_bytes
        self._timeout = aiohttp.ClientTimeout(total=download_timeout)

    async def send(self, content: str, *, attachment: bytes | None = None) -> ChannelRecord:
        if attachment is None:
            message = await self._channel.send(content)
        else:
            file = discord.File(io.BytesIO(attachment), filename=self._attachment_filename)
            message = await self._channel.send(content, file=file)
        return _to_record(message)

    async def fetch(self, record_id: str) -> ChannelRecord:
        try:
            message = await self._channel.fetch_message(int(record_id))
        except discord.NotFound as exc:
            raise RecordNotFoundError(record_id) from exc
        return _to_record(message)

    async def edit(self, record_id: str, content: str) -> None:
        try:
            await self._channel.get_partial_message(int(record_id)).edit(content=content)
        except discord.NotFound as exc:
            raise RecordNotFoundError(record_id) from exc

    async def delete(self, record_id: str) -> None:
        try:
            await self._channel.get_partial_message(int(record_id)).delete()
        except discord.NotFound as exc:
            raise RecordNotFoundError(record_id) from exc

    async def download(self, url: str) -> bytes:
        async with aiohttp.ClientSession(timeout=self._timeout) as s, s.get(url) as r:
            r.raise_for_status()
            data = await r.read()
            if len(data) > self._max_download_bytes:
                raise PayloadTooLargeError(
                    f"attachment of {len(data)} bytes exceeds limit of {self._max_download_bytes}"
                )
            return data


class RecordStoreClient(discord.Client):
    """Minimal Discord client; only the HTTP API is used."""

    def __init__(self) -> None:
        super().__init__(intents=INTENTS)


@asynccontextmanager
async def connect_store(
    token: str,
    channel_id: int,
    *,
    max_content_length: int = 2000,
    max_attachment_bytes: int = 25 * 1024 * 1024,
    attachment_filename: str = "data",
    download_timeout: float = 60.0,
) -> AsyncIterator[RecordStore]:
    """
    Log in, resolve ``channel_id`` and yield a :class:`RecordStore` bound to it.

    The gateway is never opened; the client is closed on exit.
    """

    client = RecordStoreClient()
    try:
        await client.login(token)
        channel = await client.fetch_channel(channel_id)
        if not isinstance(channel, discord.TextChannel):
            raise ValueError(f"Channel {channel_id} is not a text channel.")
        logger.info("Using channel #%s (%s) for record storage", channel.name, channel_id)

        adapter = DiscordChannel(
            channel,
            attachment_filename=attachment_filename,
            download_timeout=download_timeout,
            max_download_bytes=max_attachment_bytes,
        )
        yield RecordStore(
            adapter,
            max_content_length=max_content_length,
            max_attachment_bytes=max_attachment_bytes,
        )
    finally:
        await client.close()


__all__ = ["DiscordChannel", "RecordStoreClient", "connect_store"]
