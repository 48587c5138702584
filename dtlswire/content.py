"""DTLS record content types."""

from __future__ import annotations

from enum import IntEnum


class ContentType(IntEnum):
    """The content type byte of a DTLS record header."""

    CHANGE_CIPHER_SPEC = 20
    ALERT = 21
    HANDSHAKE = 22
    APPLICATION_DATA = 23
    INVALID = 24

    @classmethod
    def from_byte(cls, value: int) -> "ContentType":
        """Map a wire byte to its content type; unknown bytes give ``INVALID``."""
        if value in (20, 21, 22, 23):
            return cls(value)
        return cls.INVALID