"""
Dense text codec
================
Packs binary data into CJK ideographs so a character-limited message holds
more payload than base64 would allow.

Layout::

    aaaaaaaaaaaaaa bbbbbbbbbbbbbb cccccccccccccc dddddddddddddd   (4 chars)
    00000000111111 11222222223333 33334444444455 55555566666666   (7 bytes)

1. Split the input into 7-byte chunks; the final chunk is zero-padded.
2. Read each chunk as a 56-bit big-endian integer and slice it into four
   14-bit fields, most significant first.
3. Emit ``BASE_CODE_POINT + field`` for each field.
4. Append one digit ``1``-``7`` holding the length of the final chunk so the
   padding can be dropped on decode.

Every emitted code point lies in the BMP, so ``len(text)`` equals the number of
UTF-16 code units Discord counts against its limit.
"""

from __future__ import annotations

from ..errors import InvalidDataError

CHUNK_BYTES = 7
CHUNK_CHARS = 4
FIELD_BITS = 14
FIELD_MASK = (1 << FIELD_BITS) - 1
# Start of the CJK Unified Ideographs block; 0x4E00 + 0x3FFF stays inside it.
BASE_CODE_POINT = 0x4E00

_SHIFTS = tuple(FIELD_BITS * i for i in reversed(range(CHUNK_CHARS)))


def encoded_size(original_size: int) -> int:
    """Return the encoded length for ``original_size`` input bytes."""

    if original_size < 0:
        raise ValueError("original_size must be non-negative")
    return 1 + -(-original_size // CHUNK_BYTES) * CHUNK_CHARS


def encode(data: bytes) -> str:
    """Encode ``data`` into dense text. Empty input is rejected."""

    if not data:
        raise InvalidDataError("cannot dense-encode an empty payload")

    chars: list[str] = []
    last_len = 0
    for offset in range(0, len(data), CHUNK_BYTES):
        chunk = data[offset : offset + CHUNK_BYTES]
        last_len = len(chunk)
        value = int.from_bytes(chunk.ljust(CHUNK_BYTES, b"\0"), "big")
        chars.extend(chr(BASE_CODE_POINT + ((value >> s) & FIELD_MASK)) for s in _SHIFTS)
    chars.append(str(last_len))
    return "".join(chars)


def decoded_size(encoded: str) -> int:
    """Return the byte length ``encoded`` decodes to, validating its framing."""

    body_len = len(encoded) - 1
    if body_len <= 0 or body_len % CHUNK_CHARS:
        raise InvalidDataError(f"invalid dense text length {len(encoded)}")

    tail = encoded[-1]
    if tail not in "1234567":
        raise InvalidDataError(f"invalid trailing length digit {tail!r}")

    return (body_len // CHUNK_CHARS) * CHUNK_BYTES - (CHUNK_BYTES - int(tail))


def decode(encoded: str) -> bytes:
    """Decode text produced by :func:`encode`."""

    size = decoded_size(encoded)
    out = bytearray()
    for offset in range(0, len(encoded) - 1, CHUNK_CHARS):
        value = 0
        for ch in encoded[offset : offset + CHUNK_CHARS]:
            field = ord(ch) - BASE_CODE_POINT
            if not 0 <= field <= FIELD_MASK:
                raise InvalidDataError(f"code point U+{ord(ch):04X} outside dense range")
            value = (value << FIELD_BITS) | field
        out += value.to_bytes(CHUNK_BYTES, "big")
    return bytes(out[:size])


__all__ = [
    "BASE_CODE_POINT",
    "CHUNK_BYTES",
    "CHUNK_CHARS",
    "decode",
    "decoded_size",
    "encode",
    "encoded_size",
]
