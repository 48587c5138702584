"""Error kinds and the exception raised by the DTLS wire codecs."""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Every failure the DTLS layer can report, valued by its message.

    Messages containing ``{}`` take a detail string.
    """

    CONN_CLOSED = "conn is closed"
    DEADLINE_EXCEEDED = "read/write timeout"
    BUFFER_TOO_SMALL = "buffer is too small"
    CONTEXT_UNSUPPORTED = "context is not supported for export_keying_material"
    DTLS_PACKET_INVALID_LENGTH = "packet is too short"
    HANDSHAKE_IN_PROGRESS = "handshake is in progress"
    INVALID_CONTENT_TYPE = "invalid content type"
    INVALID_MAC = "invalid mac"
    INVALID_PACKET_LENGTH = "packet length and declared length do not match"
    RESERVED_EXPORT_KEYING_MATERIAL = (
        "export_keying_material can not be used with a reserved label"
    )
    CERTIFICATE_VERIFY_NO_CERTIFICATE = (
        "client sent certificate verify but we have no certificate to verify"
    )
    CIPHER_SUITE_NO_INTERSECTION = "client+server do not support any shared cipher suites"
    CIPHER_SUITE_UNSET = "server hello can not be created without a cipher suite"
    CLIENT_CERTIFICATE_NOT_VERIFIED = "client sent certificate but did not verify it"
    CLIENT_CERTIFICATE_REQUIRED = "server required client verification, but got none"
    CLIENT_NO_MATCHING_SRTP_PROFILE = "server responded with SRTP Profile we do not support"
    CLIENT_REQUIRED_BUT_NO_SERVER_EMS = (
        "client required Extended Master Secret extension, but server does not support it"
    )
    COMPRESSION_METHOD_UNSET = "server hello can not be created without a compression method"
    COOKIE_MISMATCH = "client+server cookie does not match"
    COOKIE_TOO_LONG = "cookie must not be longer then 255 bytes"
    IDENTITY_NO_PSK = "PSK Identity Hint provided but PSK is nil"
    INVALID_CERTIFICATE = "no certificate provided"
    INVALID_CIPHER_SPEC = "cipher spec invalid"
    INVALID_CIPHER_SUITE = "invalid or unknown cipher suite"
    INVALID_CLIENT_KEY_EXCHANGE = (
        "unable to determine if ClientKeyExchange is a public key or PSK Identity"
    )
    INVALID_COMPRESSION_METHOD = "invalid or unknown compression method"
    INVALID_ECDSA_SIGNATURE = "ECDSA signature contained zero or negative values"
    INVALID_ELLIPTIC_CURVE_TYPE = "invalid or unknown elliptic curve type"
    INVALID_EXTENSION_TYPE = "invalid extension type"
    INVALID_HASH_ALGORITHM = "invalid hash algorithm"
    INVALID_NAMED_CURVE = "invalid named curve"
    INVALID_KEY_TYPE = "invalid private key type"
    NAMED_CURVE_AND_KEY_TYPE_MISMATCH = "named curve and private key type does not match"
    INVALID_SNI_FORMAT = "invalid server name format"
    INVALID_SIGNATURE_ALGORITHM = "invalid signature algorithm"
    KEY_SIGNATURE_MISMATCH = "expected and actual key signature do not match"
    NIL_NEXT_CONN = "Conn can not be created with a nil nextConn"
    NO_AVAILABLE_CIPHER_SUITES = (
        "connection can not be created, no CipherSuites satisfy this Config"
    )
    NO_AVAILABLE_SIGNATURE_SCHEMES = (
        "connection can not be created, no SignatureScheme satisfy this Config"
    )
    NO_CERTIFICATES = "no certificates configured"
    NO_CONFIG_PROVIDED = "no config provided"
    NO_SUPPORTED_ELLIPTIC_CURVES = (
        "client requested zero or more elliptic curves that are not supported by the server"
    )
    UNSUPPORTED_PROTOCOL_VERSION = "unsupported protocol version"
    PSK_AND_CERTIFICATE = "Certificate and PSK provided"
    PSK_AND_IDENTITY_MUST_BE_SET_FOR_CLIENT = (
        "PSK and PSK Identity Hint must both be set for client"
    )
    REQUESTED_BUT_NO_SRTP_EXTENSION = (
        "SRTP support was requested but server did not respond with use_srtp extension"
    )
    SERVER_MUST_HAVE_CERTIFICATE = "Certificate is mandatory for server"
    SERVER_NO_MATCHING_SRTP_PROFILE = "client requested SRTP but we have no matching profiles"
    SERVER_REQUIRED_BUT_NO_CLIENT_EMS = (
        "server requires the Extended Master Secret extension, "
        "but the client does not support it"
    )
    VERIFY_DATA_MISMATCH = "expected and actual verify data does not match"
    HANDSHAKE_MESSAGE_UNSET = "handshake message unset, unable to marshal"
    INVALID_FLIGHT = "invalid flight number"
    KEY_SIGNATURE_GENERATE_UNIMPLEMENTED = "unable to generate key signature, unimplemented"
    KEY_SIGNATURE_VERIFY_UNIMPLEMENTED = "unable to verify key signature, unimplemented"
    LENGTH_MISMATCH = "data length and declared length do not match"
    NOT_ENOUGH_ROOM_FOR_NONCE = "buffer not long enough to contain nonce"
    NOT_IMPLEMENTED = "feature has not been implemented yet"
    SEQUENCE_NUMBER_OVERFLOW = "sequence number overflow"
    UNABLE_TO_MARSHAL_FRAGMENTED = "unable to marshal fragmented handshakes"
    INVALID_FSM_TRANSITION = "invalid state machine transition"
    APPLICATION_DATA_EPOCH_ZERO = "ApplicationData with epoch of 0"
    UNHANDLED_CONTEXT_TYPE = "unhandled contentType"
    CONTEXT_CANCELED = "context canceled"
    EMPTY_FRAGMENT = "empty fragment"
    ALERT_FATAL_OR_CLOSE = "Alert is Fatal or Close Notify"
    FRAGMENT_BUFFER_OVERFLOW = (
        "Fragment buffer overflow. New size {new_size} is greater than specified max {max_size}"
    )
    IO = "io error: {}"
    UTF8 = "utf8: {}"
    MPSC_SEND = "mpsc send: {}"
    KEYING_MATERIAL = "keying material: {}"
    INVALID_PEM = "invalid PEM: {}"
    OTHER = "{}"

    @property
    def takes_detail(self) -> bool:
        """Whether the message of this kind embeds a detail string."""
        return "{}" in self.value


class DtlsError(Exception):
    """An error raised by the DTLS layer, tagged with its :class:`ErrorKind`."""

    def __init__(self, kind: ErrorKind, detail: Any = None) -> None:
        if kind.takes_detail and detail is None:
            raise ValueError(f"{kind.name} needs a detail")
        if not kind.takes_detail and detail is not None:
            raise ValueError(f"{kind.name} takes no detail")
        self.kind = kind
        self.detail = None if detail is None else str(detail)
        super().__init__(self._render())

    def _render(self) -> str:
        if self.kind is ErrorKind.FRAGMENT_BUFFER_OVERFLOW:
            raise ValueError("use FragmentBufferOverflowError for this kind")
        if self.kind.takes_detail:
            return self.kind.value.format(self.detail)
        return self.kind.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DtlsError) or type(self) is not type(other):
            return NotImplemented
        return self.kind is other.kind and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.kind, self.args))


class FragmentBufferOverflowError(DtlsError):
    """Raised when a reassembly buffer would grow past its limit."""

    def __init__(self, new_size: int, max_size: int) -> None:
        self.new_size = new_size
        self.max_size = max_size
        super().__init__(ErrorKind.FRAGMENT_BUFFER_OVERFLOW, None)

    def _render(self) -> str:
        return self.kind.value.format(new_size=self.new_size, max_size=self.max_size)