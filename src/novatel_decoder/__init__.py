"""
novatel_decoder
===============

Library for decoding the fields and status words of NovAtel GPS receiver logs.

This package turns raw little-endian byte slices of binary logs and text
tokens of comma-delimited ASCII logs into numbers, and unpacks 32-bit status
words into structured records. Framing, checksums and I/O are left to the
caller.

Functions:
    - decode_int16, decode_uint16, decode_int32, decode_uint32,
      decode_float, decode_double: binary log fields
    - parse_int16, parse_int32, parse_uint8, parse_uint16, parse_uint32,
      parse_float, parse_double: ASCII log fields (empty token -> 0)
    - get_receiver_status, get_extended_solution_status, get_signals_used:
      status words
    - utc_float_to_seconds, convert_dms_to_degrees: NMEA time/angle helpers
"""

from ._version import VERSION
from .ascii import (
    parse_double,
    parse_float,
    parse_int16,
    parse_int32,
    parse_uint8,
    parse_uint16,
    parse_uint32,
)
from .binary import (
    decode_double,
    decode_float,
    decode_int16,
    decode_int32,
    decode_uint16,
    decode_uint32,
)
from .conversions import convert_dms_to_degrees, utc_float_to_seconds
from .exceptions import BufferTooShortError, DecodeError, FieldParseError, StatusTableError
from .status import get_extended_solution_status, get_receiver_status, get_signals_used

__all__ = [
    "VERSION",
    "decode_int16",
    "decode_uint16",
    "decode_int32",
    "decode_uint32",
    "decode_float",
    "decode_double",
    "parse_int16",
    "parse_int32",
    "parse_uint8",
    "parse_uint16",
    "parse_uint32",
    "parse_float",
    "parse_double",
    "get_receiver_status",
    "get_extended_solution_status",
    "get_signals_used",
    "utc_float_to_seconds",
    "convert_dms_to_degrees",
    "DecodeError",
    "BufferTooShortError",
    "FieldParseError",
    "StatusTableError",
]
