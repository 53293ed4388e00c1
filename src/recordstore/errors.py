"""
Exception hierarchy for the record store.

Everything raised by the codec and the store derives from
:class:`RecordStoreError`. Transport failures from a concrete channel are not
wrapped; only "record does not exist" is normalized into
:class:`RecordNotFoundError` so the store can tell it apart from other
failures.
"""

from __future__ import annotations


class RecordStoreError(Exception):
    """Base class for record store failures."""


class InvalidDataError(RecordStoreError, ValueError):
    """Encoded text is malformed (bad length class, digit, or code unit)."""


class UninitializedRecordError(RecordStoreError):
    """The record was created but never written."""


class UnreadableRecordError(RecordStoreError):
    """The record holds raw overflow data and cannot be read as a primary."""


class CorruptedRecordError(RecordStoreError):
    """The record content does not start with a recognized tag."""


class PayloadTooLargeError(RecordStoreError, ValueError):
    """The payload exceeds the channel's attachment ceiling."""


class ChannelError(RecordStoreError):
    """Base class for failures reported by a channel adapter."""


class RecordNotFoundError(ChannelError, LookupError):
    """The channel has no record with the requested id."""

    def __init__(self, record_id: str) -> None:
        super().__init__(f"record {record_id} not found")
        self.record_id = record_id


__all__ = [
    "RecordStoreError",
    "InvalidDataError",
    "UninitializedRecordError",
    "UnreadableRecordError",
    "CorruptedRecordError",
    "PayloadTooLargeError",
    "ChannelError",
    "RecordNotFoundError",
]
