import pytest

from dtlswire.content import ContentType


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (20, ContentType.CHANGE_CIPHER_SPEC),
        (21, ContentType.ALERT),
        (22, ContentType.HANDSHAKE),
        (23, ContentType.APPLICATION_DATA),
    ],
)
def test_known_bytes(value, expected):
    assert ContentType.from_byte(value) is expected
    assert int(ContentType.from_byte(value)) == value


@pytest.mark.parametrize("value", [0, 19, 24, 25, 255])
def test_unknown_bytes_are_invalid(value):
    assert ContentType.from_byte(value) is ContentType.INVALID


def test_round_trip_of_valid_types():
    for member in ContentType:
        if member is not ContentType.INVALID:
            assert ContentType.from_byte(int(member)) is member