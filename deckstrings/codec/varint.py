"""
Unsigned varint codec.

Seven data bits per byte, least-significant group first. The high bit of
every byte except the last is set to flag a continuation.

Example:
    300 -> b"\\xac\\x02"
"""

from deckstrings.codec.errors import TruncatedError, VarintOverflowError
from deckstrings.config import MAX_VARINT_BITS

MAX_VARINT_VALUE = (1 << MAX_VARINT_BITS) - 1

_DATA_MASK = 0x7F
_CONTINUATION = 0x80


def encode_varint(value: int) -> bytes:
    """
    Encode an unsigned integer as a varint.

    Raises:
        ValueError: If value is negative
        VarintOverflowError: If value does not fit in MAX_VARINT_BITS bits
    """
    if value < 0:
        raise ValueError(f"varint value must be unsigned, got {value}")
    if value > MAX_VARINT_VALUE:
        raise VarintOverflowError(offset=0, bits=MAX_VARINT_BITS)

    out = bytearray()
    while True:
        group = value & _DATA_MASK
        value >>= 7
        if value:
            out.append(group | _CONTINUATION)
        else:
            out.append(group)
            return bytes(out)


def decode_varint(data: bytes, cursor: int = 0) -> tuple[int, int]:
    """
    Decode one varint starting at `cursor`.

    Args:
        data: Payload bytes
        cursor: Offset of the first byte of the varint

    Returns:
        (value, new_cursor) where new_cursor points just past the varint

    Raises:
        TruncatedError: If data ends before a terminating byte
        VarintOverflowError: If the value exceeds MAX_VARINT_BITS bits
    """
    start = cursor
    value = 0
    shift = 0

    while True:
        if cursor >= len(data):
            raise TruncatedError(offset=cursor)

        byte = data[cursor]
        cursor += 1

        value |= (byte & _DATA_MASK) << shift
        if value > MAX_VARINT_VALUE:
            raise VarintOverflowError(offset=start, bits=MAX_VARINT_BITS)

        if not byte & _CONTINUATION:
            return value, cursor

        shift += 7
