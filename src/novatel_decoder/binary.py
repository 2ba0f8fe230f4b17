"""
novatel_decoder.binary

Decoders for fixed-width fields of binary receiver logs.

Binary logs are little-endian on the wire. Every decoder reads exactly its
field width starting at ``offset`` and raises BufferTooShortError instead of
reading past the end of the buffer. No range validation is done: negative
integers, NaN and Inf are ordinary field content.

Functions:
    - decode_int16 / decode_uint16: 2-byte integers
    - decode_int32 / decode_uint32: 4-byte integers
    - decode_float: 4-byte IEEE-754 single
    - decode_double: 8-byte IEEE-754 double
"""

import struct

from .exceptions import BufferTooShortError

_FLOAT = struct.Struct("<f")
_DOUBLE = struct.Struct("<d")


def _field_bytes(buffer: bytes, offset: int, width: int) -> bytes:
    """
    Slice ``width`` bytes out of ``buffer`` at ``offset``, checking the length first.
    """
    available = len(buffer) - offset if offset >= 0 else 0
    if offset < 0 or available < width:
        raise BufferTooShortError(width, max(available, 0), offset)
    return bytes(buffer[offset : offset + width])


def _decode_int(buffer: bytes, offset: int, width: int, signed: bool) -> int:
    return int.from_bytes(_field_bytes(buffer, offset, width), byteorder="little", signed=signed)


def decode_int16(buffer: bytes, offset: int = 0) -> int:
    return _decode_int(buffer, offset, 2, signed=True)


def decode_uint16(buffer: bytes, offset: int = 0) -> int:
    return _decode_int(buffer, offset, 2, signed=False)


def decode_int32(buffer: bytes, offset: int = 0) -> int:
    return _decode_int(buffer, offset, 4, signed=True)


def decode_uint32(buffer: bytes, offset: int = 0) -> int:
    return _decode_int(buffer, offset, 4, signed=False)


def decode_float(buffer: bytes, offset: int = 0) -> float:
    """
    Decode a single-precision float. The result is a Python float holding the
    exact single-precision value.
    """
    (value,) = _FLOAT.unpack(_field_bytes(buffer, offset, _FLOAT.size))
    return value


def decode_double(buffer: bytes, offset: int = 0) -> float:
    (value,) = _DOUBLE.unpack(_field_bytes(buffer, offset, _DOUBLE.size))
    return value


# Field type name -> decoder, used by the CLI.
BINARY_DECODERS = {
    "int16": decode_int16,
    "uint16": decode_uint16,
    "int32": decode_int32,
    "uint32": decode_uint32,
    "float": decode_float,
    "double": decode_double,
}
