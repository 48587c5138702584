"""Elliptic curve type identifiers used in key exchange messages."""

from __future__ import annotations

from enum import IntEnum


class EllipticCurveType(IntEnum):
    """The ECCurveType byte; only named curves are supported."""

    NAMED_CURVE = 0x03
    UNSUPPORTED = 0x04

    @classmethod
    def from_byte(cls, value: int) -> "EllipticCurveType":
        """Map a wire byte to its curve type; unknown bytes give ``UNSUPPORTED``."""
        if value == cls.NAMED_CURVE:
            return cls.NAMED_CURVE
        return cls.UNSUPPORTED