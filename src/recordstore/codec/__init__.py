"""Text codecs used to inline binary payloads in message content."""

from . import dense, standard

__all__ = ["dense", "standard"]
