# dtlswire

Python types for parts of the DTLS wire format. It covers record content types,
elliptic curve types, the DTLS block-cipher padding scheme and the
ClientHello/ServerHello extensions used in a WebRTC handshake.

It uses only the standard library.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dtlswire.errors`

- `ErrorKind` is an enum of every failure the DTLS layer can report. Each member's
  value is its message. Members whose message contains `{}` (`IO`, `UTF8`,
  `MPSC_SEND`, `KEYING_MATERIAL`, `INVALID_PEM`, `OTHER`) take a detail string,
  and `ErrorKind.takes_detail` tells which members do.
- `DtlsError(kind, detail=None)` is the exception the codecs raise. It exposes
  `kind` and `detail`. A `ValueError` is raised when a detail is missing for a
  kind that needs one, or is given for a kind that takes none. Two errors compare
  equal when they have the same kind and the same message.
- `FragmentBufferOverflowError(new_size, max_size)` is a `DtlsError` of kind
  `FRAGMENT_BUFFER_OVERFLOW`, with `new_size` and `max_size` attributes.

### `dtlswire.content`

`ContentType` is an `IntEnum` with the members `CHANGE_CIPHER_SPEC` (20),
`ALERT` (21), `HANDSHAKE` (22), `APPLICATION_DATA` (23) and `INVALID`.
`ContentType.from_byte(value)` maps any other byte to `INVALID`.

### `dtlswire.curve`

`EllipticCurveType` is an `IntEnum` with the members `NAMED_CURVE` (0x03) and
`UNSUPPORTED`. `EllipticCurveType.from_byte(value)` maps any other byte to
`UNSUPPORTED`.

### `dtlswire.padding`

This module implements the padding from RFC 5246 §6.2.3.2. Every padding byte,
and the length byte after them, holds the number of padding bytes.

- `raw_pad(block, pos)` returns `block` with every byte from `pos` on replaced by
  padding. It raises `PaddingError` if `pos` is not inside the block or if the
  padding would be longer than 255 bytes.
- `raw_unpad(data)` checks the padding and returns the content before it. It
  raises `PaddingError` on empty data, on a length byte that overruns the data,
  or on a padding byte that does not match the length byte.
- `pad(data, block_size)` pads `data` to a multiple of `block_size` (1 to 256) and
  always adds at least one byte. `unpad(data)` reverses it.
- `PaddingError` is a subclass of `ValueError`.

### `dtlswire.extensions`

- `ExtensionValue` holds the extension type numbers. `ExtensionValue.from_int(value)`
  maps unknown numbers to `UNSUPPORTED`.
- `SrtpProtectionProfile` holds the four SRTP profiles. `SrtpProtectionProfile.from_int(value)`
  maps unknown numbers to `UNSUPPORTED`.
- `SignatureHashAlgorithm(hash, signature)` is a pair of wire identifiers.
- The extension classes are frozen dataclasses:
  - `ExtensionServerName(server_name)`
  - `ExtensionSupportedEllipticCurves(elliptic_curves)`, which takes named-curve numbers
  - `ExtensionSupportedPointFormats(point_formats)`. The constant
    `ELLIPTIC_CURVE_POINT_FORMAT_UNCOMPRESSED` is 0.
  - `ExtensionSupportedSignatureAlgorithms(signature_hash_algorithms)`
  - `ExtensionUseExtendedMasterSecret(supported=True)`
  - `ExtensionUseSrtp(protection_profiles)`
  - `ExtensionRenegotiationInfo(renegotiated_connection=0)`

  Each class has `extension_value()`, `size()`, `marshal(writer)` and the
  classmethod `unmarshal(reader)`. The body these read and write excludes the
  two-byte extension type.
- `extension_size(extension)`, `marshal_extension(extension, writer)` and
  `unmarshal_extension(reader)` handle a whole extension, type number included.

Readers and writers are binary file-like objects such as `io.BytesIO`.

## Example

```python
import io

from dtlswire.extensions import (
    ExtensionServerName,
    marshal_extension,
    unmarshal_extension,
)
from dtlswire.padding import pad, unpad

buf = io.BytesIO()
marshal_extension(ExtensionServerName(server_name="test.domain"), buf)
buf.seek(0)
assert unmarshal_extension(buf) == ExtensionServerName(server_name="test.domain")

padded = pad(b"hello", 16)
assert len(padded) % 16 == 0
assert unpad(padded) == b"hello"
```

## Errors

Malformed input raises `DtlsError`, and its `kind` tells which check failed:

- An unknown extension type gives `ErrorKind.INVALID_EXTENSION_TYPE`.
- A server name type other than DNS host name gives `INVALID_SNI_FORMAT`.
- A renegotiation-info length other than 1 gives `INVALID_PACKET_LENGTH`.
- Input that ends too early gives `IO`.
- A server name that is not valid UTF-8 gives `UTF8`.
- A value too large for its wire field during marshalling gives `OTHER`.

## What it does not do

This package only encodes and decodes the pieces listed above. It does not
encrypt or decrypt records. It has no record-layer header, no handshake
messages and no connection or handshake state machine.