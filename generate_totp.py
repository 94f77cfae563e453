#!/usr/bin/env python3

import argparse

from otp_stack.api import generate
from otp_stack.config import TOTPConfig
from otp_stack.errors import OTPError


def generate_totp(base32_secret: str, digits: int = 6, period: int = 30) -> str:
    cfg = TOTPConfig(time_step=period, code_digits=digits)
    return generate(base32_secret, cfg).code


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Generate the current TOTP code from a base32 secret."
    )
    parser.add_argument("secret", help="Base32-encoded TOTP secret")
    parser.add_argument("--digits", type=int, default=6)
    parser.add_argument("--period", type=int, default=30)
    args = parser.parse_args()

    try:
        print(generate_totp(args.secret, digits=args.digits, period=args.period))
    except OTPError as e:
        raise SystemExit(str(e)) from None


if __name__ == "__main__":
    main()
