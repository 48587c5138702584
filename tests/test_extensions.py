import io

import pytest

from dtlswire.errors import DtlsError, ErrorKind
from dtlswire.extensions import (
    ExtensionRenegotiationInfo,
    ExtensionServerName,
    ExtensionSupportedEllipticCurves,
    ExtensionSupportedPointFormats,
    ExtensionSupportedSignatureAlgorithms,
    ExtensionUseExtendedMasterSecret,
    ExtensionUseSrtp,
    ExtensionValue,
    SignatureHashAlgorithm,
    SrtpProtectionProfile,
    extension_size,
    marshal_extension,
    unmarshal_extension,
)

X25519 = 0x001D
SHA256, SHA384, SHA512 = 4, 5, 6
ECDSA = 3


def _encode(extension):
    buf = io.BytesIO()
    extension.marshal(buf)
    return buf.getvalue()


def test_extension_server_name_round_trip():
    extension = ExtensionServerName("test.domain")
    raw = _encode(extension)
    assert ExtensionServerName.unmarshal(io.BytesIO(raw)) == extension
    assert len(raw) == extension.size()


def test_extension_supported_groups():
    parsed = ExtensionSupportedEllipticCurves([X25519])
    raw = _encode(parsed)
    assert raw == bytes([0x0, 0x4, 0x0, 0x2, 0x0, 0x1D])
    assert ExtensionSupportedEllipticCurves.unmarshal(io.BytesIO(raw)) == parsed


def test_extension_supported_point_formats():
    parsed = ExtensionSupportedPointFormats([0])
    raw = _encode(parsed)
    assert raw == bytes([0x00, 0x02, 0x01, 0x00])
    assert ExtensionSupportedPointFormats.unmarshal(io.BytesIO(raw)) == parsed


def test_extension_supported_signature_algorithms():
    parsed = ExtensionSupportedSignatureAlgorithms(
        [
            SignatureHashAlgorithm(SHA256, ECDSA),
            SignatureHashAlgorithm(SHA384, ECDSA),
            SignatureHashAlgorithm(SHA512, ECDSA),
        ]
    )
    raw = _encode(parsed)
    assert raw == bytes([0x00, 0x08, 0x00, 0x06, 0x04, 0x03, 0x05, 0x03, 0x06, 0x03])
    assert ExtensionSupportedSignatureAlgorithms.unmarshal(io.BytesIO(raw)) == parsed


def test_extension_use_srtp():
    parsed = ExtensionUseSrtp([SrtpProtectionProfile.SRTP_AES128_CM_HMAC_SHA1_80])
    raw = _encode(parsed)
    assert raw == bytes([0x00, 0x05, 0x00, 0x02, 0x00, 0x01, 0x00])
    assert ExtensionUseSrtp.unmarshal(io.BytesIO(raw)) == parsed


def test_renegotiation_info():
    extension = ExtensionRenegotiationInfo(0)
    raw = _encode(extension)
    decoded = ExtensionRenegotiationInfo.unmarshal(io.BytesIO(raw))
    assert decoded.renegotiated_connection == extension.renegotiated_connection
    assert raw == bytes([0x00, 0x01, 0x00])


def test_renegotiation_info_bad_length():
    with pytest.raises(DtlsError) as info:
        ExtensionRenegotiationInfo.unmarshal(io.BytesIO(bytes([0x00, 0x02, 0x00, 0x00])))
    assert info.value.kind is ErrorKind.INVALID_PACKET_LENGTH


def test_use_extended_master_secret():
    extension = ExtensionUseExtendedMasterSecret()
    raw = _encode(extension)
    assert raw == b"\x00\x00"
    assert ExtensionUseExtendedMasterSecret.unmarshal(io.BytesIO(raw)).supported is True


def test_server_name_rejects_non_dns_type():
    raw = bytes([0x00, 0x06, 0x00, 0x04, 0x01, 0x00, 0x01, 0x61])
    with pytest.raises(DtlsError) as info:
        ExtensionServerName.unmarshal(io.BytesIO(raw))
    assert info.value.kind is ErrorKind.INVALID_SNI_FORMAT


def test_server_name_rejects_invalid_utf8():
    raw = bytes([0x00, 0x06, 0x00, 0x04, 0x00, 0x00, 0x01, 0xFF])
    with pytest.raises(DtlsError) as info:
        ExtensionServerName.unmarshal(io.BytesIO(raw))
    assert info.value.kind is ErrorKind.UTF8


def test_truncated_input_is_io_error():
    with pytest.raises(DtlsError) as info:
        ExtensionSupportedEllipticCurves.unmarshal(io.BytesIO(bytes([0x00, 0x04, 0x00, 0x02, 0x00])))
    assert info.value.kind is ErrorKind.IO


def test_srtp_unknown_profile_maps_to_unsupported():
    assert SrtpProtectionProfile.from_int(0x0003) is SrtpProtectionProfile.UNSUPPORTED
    assert SrtpProtectionProfile.from_int(0x0007) is SrtpProtectionProfile.SRTP_AEAD_AES_128_GCM


@pytest.mark.parametrize(
    "number, expected",
    [
        (0, ExtensionValue.SERVER_NAME),
        (10, ExtensionValue.SUPPORTED_ELLIPTIC_CURVES),
        (14, ExtensionValue.USE_SRTP),
        (65281, ExtensionValue.RENEGOTIATION_INFO),
        (5, ExtensionValue.UNSUPPORTED),
        (65282, ExtensionValue.UNSUPPORTED),
    ],
)
def test_extension_value_from_int(number, expected):
    assert ExtensionValue.from_int(number) is expected


@pytest.mark.parametrize(
    "extension",
    [
        ExtensionServerName("example.com"),
        ExtensionSupportedEllipticCurves([X25519, 0x0017]),
        ExtensionSupportedPointFormats([0]),
        ExtensionSupportedSignatureAlgorithms([SignatureHashAlgorithm(SHA256, ECDSA)]),
        ExtensionUseSrtp([SrtpProtectionProfile.SRTP_AEAD_AES_256_GCM]),
        ExtensionUseExtendedMasterSecret(),
        ExtensionRenegotiationInfo(0),
    ],
)
def test_extension_dispatch_round_trip(extension):
    buf = io.BytesIO()
    marshal_extension(extension, buf)
    raw = buf.getvalue()
    assert len(raw) == extension_size(extension)
    assert unmarshal_extension(io.BytesIO(raw)) == extension


def test_marshal_extension_writes_type_prefix():
    buf = io.BytesIO()
    marshal_extension(ExtensionSupportedPointFormats([0]), buf)
    assert buf.getvalue() == bytes([0x00, 0x0B, 0x00, 0x02, 0x01, 0x00])


def test_unmarshal_unknown_extension_type():
    with pytest.raises(DtlsError) as info:
        unmarshal_extension(io.BytesIO(bytes([0x00, 0x05, 0x00, 0x00])))
    assert info.value.kind is ErrorKind.INVALID_EXTENSION_TYPE