"""Base64 helpers for ``b``-tagged records."""

from __future__ import annotations

import base64
import binascii

from ..errors import InvalidDataError


def encode(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def decode(encoded: str) -> bytes:
    try:
        return base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise InvalidDataError(f"invalid base64 body: {exc}") from exc


__all__ = ["encode", "decode"]
