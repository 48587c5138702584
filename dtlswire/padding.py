"""Block padding for DTLS CBC records (RFC 5246, section 6.2.3.2).

Every padding byte, and the final length byte, holds the number of
padding bytes that precede the length byte.
"""

from __future__ import annotations


class PaddingError(ValueError):
    """Raised when padding cannot be applied or removed."""


def raw_pad(block: bytes, pos: int) -> bytes:
    """Return ``block`` with everything from ``pos`` on replaced by padding."""
    if pos >= len(block):
        raise PaddingError("`pos` is bigger or equal to block size")
    padding_length = len(block) - pos - 1
    if padding_length > 255:
        raise PaddingError("block size is too big for DTLS")
    return bytes(block[:pos]) + bytes([padding_length]) * (len(block) - pos)


def raw_unpad(data: bytes) -> bytes:
    """Strip DTLS padding from ``data`` and return the content before it."""
    padding_length = data[-1] if data else 1
    if padding_length + 1 > len(data):
        raise PaddingError("padding longer than data")
    padding_begin = len(data) - padding_length - 1
    if any(byte != padding_length for byte in data[padding_begin:-1]):
        raise PaddingError("padding bytes do not match padding length")
    return bytes(data[:padding_begin])


def pad(data: bytes, block_size: int) -> bytes:
    """Pad ``data`` to a multiple of ``block_size``, always adding at least one byte."""
    if not 1 <= block_size <= 256:
        raise PaddingError("block size must be between 1 and 256")
    tail = len(data) % block_size
    head = len(data) - tail
    return bytes(data[:head]) + raw_pad(bytes(data[head:]) + bytes(block_size - tail), tail)


def unpad(data: bytes) -> bytes:
    """Remove padding added by :func:`pad`."""
    return raw_unpad(data)