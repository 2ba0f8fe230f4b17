"""
novatel_decoder.ascii

Parsers for single tokens of comma-delimited ASCII receiver logs.

Every parser treats the empty token as an omitted optional field and returns
the type's zero. Any other token must be a complete number in the requested
base; otherwise FieldParseError is raised.

The narrow integer parsers (int16, uint8, uint16) parse the token as the
corresponding 32-bit type first and only then check that the value fits the
narrow type.

Functions:
    - parse_int16, parse_int32: signed integers
    - parse_uint8, parse_uint16, parse_uint32: unsigned integers
    - parse_float, parse_double: IEEE-754 single/double
"""

import functools
import logging
import math
import re
import struct

from .exceptions import FieldParseError

logger = logging.getLogger(__name__)

INT16_MIN, INT16_MAX = -(1 << 15), (1 << 15) - 1
INT32_MIN, INT32_MAX = -(1 << 31), (1 << 31) - 1
UINT8_MAX = (1 << 8) - 1
UINT16_MAX = (1 << 16) - 1
UINT32_MAX = (1 << 32) - 1

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_FLOAT = struct.Struct("<f")
_EXPONENT = re.compile(r"[eE]")
_NONZERO_DIGIT = re.compile(r"[1-9]")


@functools.lru_cache(maxsize=None)
def _integer_pattern(base: int) -> re.Pattern:
    """
    Build the full-token pattern for integers in ``base``: optional leading
    whitespace, optional sign, a 0x prefix for base 16, then at least one digit.
    Trailing characters of any kind are rejected.
    """
    if not 2 <= base <= 36:
        raise ValueError(f"Unsupported base {base}; expected 2..36")
    prefix = r"(?:0[xX])?" if base == 16 else ""
    digits = re.escape(_DIGITS[:base])
    return re.compile(rf"\s*[+-]?{prefix}[{digits}]+", re.IGNORECASE)


def _fail(token: str, field_type: str, base: int | None = None) -> FieldParseError:
    logger.debug(f"Rejected ASCII token {token!r} for {field_type} field")
    return FieldParseError(token, field_type, base)


def _to_integer(token: str, base: int, field_type: str, low: int, high: int) -> int:
    if _integer_pattern(base).fullmatch(token) is None:
        raise _fail(token, field_type, base)
    value = int(token, base)
    if not low <= value <= high:
        raise _fail(token, field_type, base)
    return value


def _to_int32(token: str, base: int, field_type: str) -> int:
    return _to_integer(token, base, field_type, INT32_MIN, INT32_MAX)


def _to_uint32(token: str, base: int, field_type: str) -> int:
    return _to_integer(token, base, field_type, 0, UINT32_MAX)


def _narrow(value: int, token: str, base: int, field_type: str, low: int, high: int) -> int:
    if not low <= value <= high:
        raise _fail(token, field_type, base)
    return value


def _to_double(token: str, field_type: str) -> float:
    # float() also accepts digit-group underscores and trailing whitespace
    if "_" in token or token != token.rstrip():
        raise _fail(token, field_type)
    try:
        value = float(token)
    except ValueError:
        raise _fail(token, field_type) from None
    if math.isinf(value) and "inf" not in token.lower():
        # finite literal beyond the double range
        raise _fail(token, field_type)
    if value == 0.0 and _NONZERO_DIGIT.search(_EXPONENT.split(token, 1)[0]):
        # nonzero literal below the smallest subnormal double
        raise _fail(token, field_type)
    return value


def parse_int16(token: str, base: int = 10) -> int:
    if token == "":
        return 0
    value = _to_int32(token, base, "int16")
    return _narrow(value, token, base, "int16", INT16_MIN, INT16_MAX)


def parse_int32(token: str, base: int = 10) -> int:
    if token == "":
        return 0
    return _to_int32(token, base, "int32")


def parse_uint8(token: str, base: int = 10) -> int:
    if token == "":
        return 0
    value = _to_uint32(token, base, "uint8")
    return _narrow(value, token, base, "uint8", 0, UINT8_MAX)


def parse_uint16(token: str, base: int = 10) -> int:
    """
    Parse an unsigned 16-bit field, e.g. ``"65535"`` -> 65535.

    The token is read as a uint32 and then range-checked, so ``"70000"`` is a
    well-formed number that still fails for this field.
    """
    if token == "":
        return 0
    value = _to_uint32(token, base, "uint16")
    return _narrow(value, token, base, "uint16", 0, UINT16_MAX)


def parse_uint32(token: str, base: int = 10) -> int:
    """
    Parse an unsigned 32-bit field. Status words in ASCII logs are hex
    encoded, so those are parsed with ``base=16``.
    """
    if token == "":
        return 0
    return _to_uint32(token, base, "uint32")


def parse_float(token: str) -> float:
    """
    Parse a single-precision field. The value is rounded to the nearest
    single-precision number; literals too large for a single, or nonzero
    literals that round to zero, fail.
    """
    if token == "":
        return 0.0
    value = _to_double(token, "float")
    try:
        (single,) = _FLOAT.unpack(_FLOAT.pack(value))
    except OverflowError:
        raise _fail(token, "float") from None
    if single == 0.0 and value != 0.0:
        raise _fail(token, "float")
    return single


def parse_double(token: str) -> float:
    if token == "":
        return 0.0
    return _to_double(token, "double")


# Field type name -> (parser, accepts a base argument), used by the CLI.
ASCII_PARSERS = {
    "int16": (parse_int16, True),
    "int32": (parse_int32, True),
    "uint8": (parse_uint8, True),
    "uint16": (parse_uint16, True),
    "uint32": (parse_uint32, True),
    "float": (parse_float, False),
    "double": (parse_double, False),
}
