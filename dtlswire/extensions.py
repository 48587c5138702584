"""Hello message extensions: their values, sizes and wire encodings."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from enum import IntEnum
from typing import BinaryIO, Iterable, Union

from .errors import DtlsError, ErrorKind

_SERVER_NAME_TYPE_DNS_HOST_NAME = 0


class ExtensionValue(IntEnum):
    """Registered TLS extension type numbers that are understood here."""

    SERVER_NAME = 0
    SUPPORTED_ELLIPTIC_CURVES = 10
    SUPPORTED_POINT_FORMATS = 11
    SUPPORTED_SIGNATURE_ALGORITHMS = 13
    USE_SRTP = 14
    USE_EXTENDED_MASTER_SECRET = 23
    RENEGOTIATION_INFO = 65281
    UNSUPPORTED = 65282

    @classmethod
    def from_int(cls, value: int) -> "ExtensionValue":
        """Map a wire number to its extension value; unknown numbers give ``UNSUPPORTED``."""
        try:
            member = cls(value)
        except ValueError:
            return cls.UNSUPPORTED
        return cls.UNSUPPORTED if member is cls.UNSUPPORTED else member


class SrtpProtectionProfile(IntEnum):
    """SRTP protection profiles negotiated through the use_srtp extension."""

    SRTP_AES128_CM_HMAC_SHA1_80 = 0x0001
    SRTP_AES128_CM_HMAC_SHA1_32 = 0x0002
    SRTP_AEAD_AES_128_GCM = 0x0007
    SRTP_AEAD_AES_256_GCM = 0x0008
    UNSUPPORTED = 0x0009

    @classmethod
    def from_int(cls, value: int) -> "SrtpProtectionProfile":
        """Map a wire number to its profile; unknown numbers give ``UNSUPPORTED``."""
        if value in (0x0001, 0x0002, 0x0007, 0x0008):
            return cls(value)
        return cls.UNSUPPORTED


@dataclass(frozen=True)
class SignatureHashAlgorithm:
    """A pair of hash and signature algorithm identifiers, as on the wire."""

    hash: int
    signature: int


def _read_exact(reader: BinaryIO, count: int) -> bytes:
    data = reader.read(count)
    if data is None or len(data) < count:
        raise DtlsError(ErrorKind.IO, "failed to fill whole buffer")
    return data


def _read_u8(reader: BinaryIO) -> int:
    return _read_exact(reader, 1)[0]


def _read_u16(reader: BinaryIO) -> int:
    return struct.unpack(">H", _read_exact(reader, 2))[0]


def _u8(value: int) -> bytes:
    if not 0 <= value <= 0xFF:
        raise DtlsError(ErrorKind.OTHER, f"value {value} does not fit in one byte")
    return bytes([value])


def _u16(value: int) -> bytes:
    if not 0 <= value <= 0xFFFF:
        raise DtlsError(ErrorKind.OTHER, f"value {value} does not fit in two bytes")
    return struct.pack(">H", value)


def _emit(writer: BinaryIO, *chunks: bytes) -> None:
    writer.write(b"".join(chunks))
    writer.flush()


@dataclass(frozen=True)
class ExtensionServerName:
    """Server Name Indication carrying a single DNS host name."""

    server_name: str

    def extension_value(self) -> ExtensionValue:
        return ExtensionValue.SERVER_NAME

    def size(self) -> int:
        return 2 + 2 + 1 + 2 + len(self.server_name.encode("utf-8"))

    def marshal(self, writer: BinaryIO) -> None:
        name = self.server_name.encode("utf-8")
        _emit(
            writer,
            _u16(2 + 1 + 2 + len(name)),
            _u16(1 + 2 + len(name)),
            _u8(_SERVER_NAME_TYPE_DNS_HOST_NAME),
            _u16(len(name)),
            name,
        )

    @classmethod
    def unmarshal(cls, reader: BinaryIO) -> "ExtensionServerName":
        _read_u16(reader)
        _read_u16(reader)
        if _read_u8(reader) != _SERVER_NAME_TYPE_DNS_HOST_NAME:
            raise DtlsError(ErrorKind.INVALID_SNI_FORMAT)
        raw = _read_exact(reader, _read_u16(reader))
        try:
            server_name = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DtlsError(ErrorKind.UTF8, exc) from exc
        return cls(server_name)


@dataclass(frozen=True)
class ExtensionSupportedEllipticCurves:
    """Supported groups, as named-curve numbers (RFC 8422, 5.1.1)."""

    elliptic_curves: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "elliptic_curves", tuple(self.elliptic_curves))

    def extension_value(self) -> ExtensionValue:
        return ExtensionValue.SUPPORTED_ELLIPTIC_CURVES

    def size(self) -> int:
        return 2 + 2 + len(self.elliptic_curves) * 2

    def marshal(self, writer: BinaryIO) -> None:
        count = len(self.elliptic_curves)
        _emit(
            writer,
            _u16(2 + 2 * count),
            _u16(2 * count),
            *(_u16(int(curve)) for curve in self.elliptic_curves),
        )

    @classmethod
    def unmarshal(cls, reader: BinaryIO) -> "ExtensionSupportedEllipticCurves":
        _read_u16(reader)
        group_count = _read_u16(reader) // 2
        return cls(tuple(_read_u16(reader) for _ in range(group_count)))


ELLIPTIC_CURVE_POINT_FORMAT_UNCOMPRESSED = 0


@dataclass(frozen=True)
class ExtensionSupportedPointFormats:
    """Supported elliptic curve point formats (RFC 4492, 5.1.2)."""

    point_formats: tuple[int, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "point_formats", tuple(self.point_formats))

    def extension_value(self) -> ExtensionValue:
        return ExtensionValue.SUPPORTED_POINT_FORMATS

    def size(self) -> int:
        return 2 + 1 + len(self.point_formats)

    def marshal(self, writer: BinaryIO) -> None:
        count = len(self.point_formats)
        _emit(
            writer,
            _u16(1 + count),
            _u8(count),
            *(_u8(fmt) for fmt in self.point_formats),
        )

    @classmethod
    def unmarshal(cls, reader: BinaryIO) -> "ExtensionSupportedPointFormats":
        _read_u16(reader)
        count = _read_u8(reader)
        return cls(tuple(_read_u8(reader) for _ in range(count)))


@dataclass(frozen=True)
class ExtensionSupportedSignatureAlgorithms:
    """Supported signature and hash algorithm pairs (RFC 5246, 7.4.1.4.1)."""

    signature_hash_algorithms: tuple[SignatureHashAlgorithm, ...] = field(
        default_factory=tuple
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "signature_hash_algorithms", tuple(self.signature_hash_algorithms)
        )

    def extension_value(self) -> ExtensionValue:
        return ExtensionValue.SUPPORTED_SIGNATURE_ALGORITHMS

    def size(self) -> int:
        return 2 + 2 + len(self.signature_hash_algorithms) * 2

    def marshal(self, writer: BinaryIO) -> None:
        count = len(self.signature_hash_algorithms)
        _emit(
            writer,
            _u16(2 + 2 * count),
            _u16(2 * count),
            *(
                _u8(int(alg.hash)) + _u8(int(alg.signature))
                for alg in self.signature_hash_algorithms
            ),
        )

    @classmethod
    def unmarshal(cls, reader: BinaryIO) -> "ExtensionSupportedSignatureAlgorithms":
        _read_u16(reader)
        count = _read_u16(reader) // 2
        algorithms = []
        for _ in range(count):
            hash_id = _read_u8(reader)
            signature_id = _read_u8(reader)
            algorithms.append(SignatureHashAlgorithm(hash_id, signature_id))
        return cls(tuple(algorithms))


@dataclass(frozen=True)
class ExtensionUseExtendedMasterSecret:
    """Signals support for the extended master secret."""

    supported: bool = True

    def extension_value(self) -> ExtensionValue:
        return ExtensionValue.USE_EXTENDED_MASTER_SECRET

    def size(self) -> int:
        return 2

    def marshal(self, writer: BinaryIO) -> None:
        _emit(writer, _u16(0))

    @classmethod
    def unmarshal(cls, reader: BinaryIO) -> "ExtensionUseExtendedMasterSecret":
        _read_u16(reader)
        return cls(supported=True)


@dataclass(frozen=True)
class ExtensionUseSrtp:
    """SRTP protection profiles offered or chosen (RFC 5764, 4.1.2)."""

    protection_profiles: tuple[SrtpProtectionProfile, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "protection_profiles", tuple(self.protection_profiles))

    def extension_value(self) -> ExtensionValue:
        return ExtensionValue.USE_SRTP

    def size(self) -> int:
        return 2 + 2 + len(self.protection_profiles) * 2 + 1

    def marshal(self, writer: BinaryIO) -> None:
        count = len(self.protection_profiles)
        _emit(
            writer,
            _u16(2 + 1 + 2 * count),
            _u16(2 * count),
            *(_u16(int(profile)) for profile in self.protection_profiles),
            _u8(0),  # MKI length
        )

    @classmethod
    def unmarshal(cls, reader: BinaryIO) -> "ExtensionUseSrtp":
        _read_u16(reader)
        count = _read_u16(reader) // 2
        profiles = tuple(
            SrtpProtectionProfile.from_int(_read_u16(reader)) for _ in range(count)
        )
        _read_u8(reader)  # MKI length
        return cls(profiles)


@dataclass(frozen=True)
class ExtensionRenegotiationInfo:
    """Renegotiation support indication (RFC 5746)."""

    renegotiated_connection: int = 0

    def extension_value(self) -> ExtensionValue:
        return ExtensionValue.RENEGOTIATION_INFO

    def size(self) -> int:
        return 3

    def marshal(self, writer: BinaryIO) -> None:
        _emit(writer, _u16(1), _u8(self.renegotiated_connection))

    @classmethod
    def unmarshal(cls, reader: BinaryIO) -> "ExtensionRenegotiationInfo":
        if _read_u16(reader) != 1:
            raise DtlsError(ErrorKind.INVALID_PACKET_LENGTH)
        return cls(_read_u8(reader))


Extension = Union[
    ExtensionServerName,
    ExtensionSupportedEllipticCurves,
    ExtensionSupportedPointFormats,
    ExtensionSupportedSignatureAlgorithms,
    ExtensionUseSrtp,
    ExtensionUseExtendedMasterSecret,
    ExtensionRenegotiationInfo,
]

_DECODERS = {
    ExtensionValue.SERVER_NAME: ExtensionServerName,
    ExtensionValue.SUPPORTED_ELLIPTIC_CURVES: ExtensionSupportedEllipticCurves,
    ExtensionValue.SUPPORTED_POINT_FORMATS: ExtensionSupportedPointFormats,
    ExtensionValue.SUPPORTED_SIGNATURE_ALGORITHMS: ExtensionSupportedSignatureAlgorithms,
    ExtensionValue.USE_SRTP: ExtensionUseSrtp,
    ExtensionValue.USE_EXTENDED_MASTER_SECRET: ExtensionUseExtendedMasterSecret,
    ExtensionValue.RENEGOTIATION_INFO: ExtensionRenegotiationInfo,
}


def extension_size(extension: Extension) -> int:
    """Encoded size of an extension including its two-byte type."""
    return 2 + extension.size()


def marshal_extension(extension: Extension, writer: BinaryIO) -> None:
    """Write the extension type followed by the extension body."""
    writer.write(_u16(int(extension.extension_value())))
    extension.marshal(writer)


def unmarshal_extension(reader: BinaryIO) -> Extension:
    """Read an extension type and decode the body that follows it."""
    value = ExtensionValue.from_int(_read_u16(reader))
    decoder = _DECODERS.get(value)
    if decoder is None:
        raise DtlsError(ErrorKind.INVALID_EXTENSION_TYPE)
    return decoder.unmarshal(reader)


def _all_extensions() -> Iterable[type]:
    return _DECODERS.values()