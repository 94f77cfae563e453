#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import os
import sys
from dataclasses import replace

from otp_stack.api import encode_secret, generate, hotp
from otp_stack.clock import FixedClock
from otp_stack.config import SUPPORTED_ALGORITHMS, TOTPConfig
from otp_stack.errors import OTPError
from otp_stack.utils import json_dumps

logger = logging.getLogger("otp_cli")

SECRET_ENV = "OTP_STACK_SECRET"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Time-based one-time password generator (RFC 6238)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging to stderr")
    sub = parser.add_subparsers(dest="cmd", required=True)

    code_cmd = sub.add_parser("code", help="Print the current TOTP code and seconds left")
    code_cmd.add_argument("secret", nargs="?", default="", help=f"Base32 secret (default: ${SECRET_ENV})")
    code_cmd.add_argument("--period", type=int, default=None, help="Time step in seconds")
    code_cmd.add_argument("--digits", type=int, default=None)
    code_cmd.add_argument("--algorithm", choices=SUPPORTED_ALGORITHMS, default=None)
    code_cmd.add_argument("--t0", type=int, default=None, help="Epoch offset in unix seconds")
    code_cmd.add_argument("--at", type=int, default=None, help="Unix time to compute the code for")
    code_cmd.add_argument("--json", action="store_true")

    hotp_cmd = sub.add_parser("hotp", help="Print the HOTP code for an explicit counter")
    hotp_cmd.add_argument("secret", help="Base32 secret")
    hotp_cmd.add_argument("counter", type=int)
    hotp_cmd.add_argument("--digits", type=int, default=6)
    hotp_cmd.add_argument("--algorithm", choices=SUPPORTED_ALGORITHMS, default="sha1")

    encode_cmd = sub.add_parser("encode", help="Base32-encode a raw secret")
    encode_cmd.add_argument("text", help="Secret text, UTF-8 encoded before base32")
    encode_cmd.add_argument("--no-padding", action="store_true")

    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> TOTPConfig:
    cfg = TOTPConfig.from_env()
    overrides = {
        "time_step": args.period,
        "code_digits": args.digits,
        "hash_algorithm": args.algorithm,
        "initial_time": args.t0,
    }
    return replace(cfg, **{k: v for k, v in overrides.items() if v is not None})


def run(args: argparse.Namespace) -> str:
    if args.cmd == "code":
        secret = args.secret or os.getenv(SECRET_ENV, "")
        if not secret:
            raise SystemExit(f"Provide a base32 secret or set ${SECRET_ENV}")
        clock = FixedClock(args.at) if args.at is not None else None
        result = generate(secret, build_config(args), clock=clock)
        if args.json:
            return json_dumps(result.to_dict())
        return f"code: {result.code}\nleft time: {result.left_time}s"
    if args.cmd == "hotp":
        return hotp(args.secret, args.counter, digits=args.digits, algorithm=args.algorithm)
    if args.cmd == "encode":
        return encode_secret(args.text.encode("utf-8"), padding=not args.no_padding)
    raise SystemExit(f"Unknown command: {args.cmd}")


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(stream=sys.stderr, level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        out = run(args)
    except OTPError as e:
        logger.debug("command %s failed: %r", args.cmd, e)
        raise SystemExit(str(e)) from None
    print(out)


if __name__ == "__main__":
    main()
