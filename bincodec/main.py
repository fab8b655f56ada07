#!/usr/bin/env python3
"""bincodec: encode and decode with a custom charset."""

import argparse
import logging
import os
import sys

from bincodec.charset import DEFAULT_CHARSET, is_safe
from bincodec.decoder import decode
from bincodec.encoder import encode
from bincodec.errors import CodecError

CHARSET_ENV = "BINCODEC_CHARSET"


def _read_input(args) -> bytes:
    if args.file:
        with open(args.file, "rb") as f:
            return f.read()
    if args.text is not None:
        return args.text.encode()
    return sys.stdin.buffer.read()


def cmd_encode(args):
    print(encode(args.charset, _read_input(args)))


def cmd_decode(args):
    text = _read_input(args).decode(errors="replace")
    print(decode(args.charset, text, strict=args.strict))


def cmd_check(args):
    safe = is_safe(args.charset_arg)
    print("safe" if safe else "unsafe")
    return 0 if safe else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bincodec", description="Custom-charset binary-to-text codec")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    sub = parser.add_subparsers(dest="command")

    default_charset = os.environ.get(CHARSET_ENV, DEFAULT_CHARSET)

    # encode
    p = sub.add_parser("encode", help="Encode text, a file, or stdin")
    p.add_argument("text", nargs="?", help="Text to encode (default: stdin)")
    p.add_argument("-f", "--file", help="Read raw bytes from FILE")
    p.add_argument("-c", "--charset", default=default_charset)
    p.set_defaults(func=cmd_encode)

    # decode
    p = sub.add_parser("decode", help="Decode text, a file, or stdin")
    p.add_argument("text", nargs="?", help="Encoded text (default: stdin)")
    p.add_argument("-f", "--file", help="Read encoded text from FILE")
    p.add_argument("-c", "--charset", default=default_charset)
    p.add_argument("--strict", action="store_true", help="Fail on truncated input or dropped zero bytes")
    p.set_defaults(func=cmd_decode)

    # check
    p = sub.add_parser("check", help="Check that a charset has no repeated characters")
    p.add_argument("charset_arg", metavar="charset")
    p.set_defaults(func=cmd_check)

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    if not args.command:
        parser.print_help()
        return 1
    try:
        return args.func(args) or 0
    except CodecError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
