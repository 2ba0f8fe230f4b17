#!/usr/bin/env python3
"""
Command-line entry point for inspecting NovAtel log fields by hand.

Subcommands:
    status {receiver,extended,signals} MASK   decode a status word
    field TYPE TOKEN [--base N]               parse an ASCII log token
    binary TYPE HEX [--offset N]              decode hex-encoded binary log bytes

Results are printed as JSON. The exit status is 1 when the field cannot be decoded.
"""

import argparse
import json
import logging
import sys

from novatel_decoder.ascii import ASCII_PARSERS
from novatel_decoder.binary import BINARY_DECODERS
from novatel_decoder.config import configure_logger
from novatel_decoder.exceptions import DecodeError
from novatel_decoder.status import STATUS_DECODERS

logger = logging.getLogger(__name__)


def _parse_mask(text: str) -> int:
    try:
        mask = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid status word: {text!r}") from None
    if not 0 <= mask <= 0xFFFFFFFF:
        raise argparse.ArgumentTypeError(f"status word out of 32-bit range: {text!r}")
    return mask


def _parse_base(text: str) -> int:
    try:
        base = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid base: {text!r}") from None
    if not 2 <= base <= 36:
        raise argparse.ArgumentTypeError(f"base must be between 2 and 36: {text!r}")
    return base


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="novatel-decode", description="Decode NovAtel log fields and status words."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    status = sub.add_parser("status", help="Decode a 32-bit status word")
    status.add_argument("kind", choices=sorted(STATUS_DECODERS))
    status.add_argument("mask", type=_parse_mask, help="Status word, e.g. 0x00000001")

    field = sub.add_parser("field", help="Parse an ASCII log token")
    field.add_argument("type", choices=sorted(ASCII_PARSERS))
    field.add_argument("token", help="Token text; pass '' for an omitted field")
    field.add_argument("--base", type=_parse_base, default=10)

    binary = sub.add_parser("binary", help="Decode little-endian binary log bytes")
    binary.add_argument("type", choices=sorted(BINARY_DECODERS))
    binary.add_argument("hex", help="Field bytes as hex, e.g. 0100")
    binary.add_argument("--offset", type=int, default=0)

    return parser


def run(args: argparse.Namespace) -> dict:
    if args.command == "status":
        record = STATUS_DECODERS[args.kind](args.mask)
        return record.model_dump()
    if args.command == "field":
        parser_fn, takes_base = ASCII_PARSERS[args.type]
        value = parser_fn(args.token, args.base) if takes_base else parser_fn(args.token)
        return {"type": args.type, "token": args.token, "value": value}
    try:
        data = bytes.fromhex(args.hex)
    except ValueError as e:
        raise DecodeError(f"invalid hex input {args.hex!r}: {e}") from e
    value = BINARY_DECODERS[args.type](data, args.offset)
    return {"type": args.type, "offset": args.offset, "value": value}


def main(argv=None) -> int:
    """
    Parse arguments, decode, and print the result as JSON.
    """
    configure_logger()
    args = build_parser().parse_args(argv)
    try:
        result = run(args)
    except DecodeError as e:
        logger.error(f"Decode failed: {e}")
        return 1
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
