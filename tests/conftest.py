import os, sys
import warnings
from dataclasses import replace
from pathlib import Path

import pytest

# Add src/ to sys.path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

# Ensure required environment variables for recordstore.config
os.environ.setdefault("DISCORD_API_TOKEN", "test-token")
os.environ.setdefault("STORE_CHANNEL_ID", "123")

# Silence deprecation warnings surfaced from third-party dependencies during tests
warnings.filterwarnings(
    "ignore", category=DeprecationWarning, module=r"^discord\\.player$"
)
warnings.filterwarnings("ignore", "'audioop' is deprecated", DeprecationWarning)

from recordstore.errors import RecordNotFoundError
from recordstore.store import ChannelRecord, RecordStore


class FakeChannel:
    """In-memory channel; attachment urls resolve only while their record exists."""

    def __init__(self) -> None:
        self.records: dict[str, ChannelRecord] = {}
        self.blobs: dict[str, bytes] = {}
        self.calls: list[tuple[str, str]] = []
        self.fail_delete: set[str] = set()
        self._next_id = 1000

    def seed(self, content: str) -> str:
        rid = str(self._next_id)
        self._next_id += 1
        self.records[rid] = ChannelRecord(rid, content)
        return rid

    async def send(self, content, *, attachment=None):
        rid = str(self._next_id)
        self._next_id += 1
        urls = ()
        if attachment is not None:
            url = f"https://cdn.example.com/attachments/{rid}/data"
            self.blobs[url] = bytes(attachment)
            urls = (url,)
        record = ChannelRecord(rid, content, urls)
        self.records[rid] = record
        self.calls.append(("send", rid))
        return record

    async def fetch(self, record_id):
        self.calls.append(("fetch", record_id))
        try:
            return self.records[record_id]
        except KeyError:
            raise RecordNotFoundError(record_id) from None

    async def edit(self, record_id, content):
        self.calls.append(("edit", record_id))
        if record_id not in self.records:
            raise RecordNotFoundError(record_id)
        self.records[record_id] = replace(self.records[record_id], content=content)

    async def delete(self, record_id):
        self.calls.append(("delete", record_id))
        if record_id in self.fail_delete:
            raise ConnectionError("simulated transport failure")
        record = self.records.pop(record_id, None)
        if record is None:
            raise RecordNotFoundError(record_id)
        for url in record.attachment_urls:
            self.blobs.pop(url, None)

    async def download(self, url):
        self.calls.append(("download", url))
        return self.blobs[url]


@pytest.fixture
def channel():
    return FakeChannel()


@pytest.fixture
def store(channel):
    return RecordStore(channel)
