from __future__ import annotations

import hmac

from .config import DEFAULT_CODE_DIGITS, DEFAULT_HASH_ALGORITHM, MAX_CODE_DIGITS, normalize_algorithm
from .errors import ConfigError, CounterRangeError, EmptyInputError
from .utils import format_code

MAX_COUNTER = (1 << 64) - 1


def counter_bytes(counter: int) -> bytes:
    if counter < 0 or counter > MAX_COUNTER:
        raise CounterRangeError(counter)
    return counter.to_bytes(8, "big")


def truncate(digest: bytes) -> int:
    """RFC 4226 dynamic truncation: 31-bit integer picked by the low nibble of the last byte."""
    offset = digest[-1] & 0x0F
    if len(digest) < offset + 4:
        raise ConfigError(f"Digest of {len(digest)} bytes is too short for truncation at offset {offset}")
    return int.from_bytes(digest[offset : offset + 4], "big") & 0x7FFFFFFF


def compute(
    secret: bytes,
    counter: int,
    digits: int = DEFAULT_CODE_DIGITS,
    algorithm: str = DEFAULT_HASH_ALGORITHM,
) -> int:
    if not 1 <= digits <= MAX_CODE_DIGITS:
        raise ConfigError(f"digits must be between 1 and {MAX_CODE_DIGITS}, got {digits}")
    if not secret:
        raise EmptyInputError("Secret decodes to zero bytes")
    digest = hmac.new(bytes(secret), counter_bytes(counter), normalize_algorithm(algorithm)).digest()
    return truncate(digest) % (10**digits)


def hotp_code(
    secret: bytes,
    counter: int,
    digits: int = DEFAULT_CODE_DIGITS,
    algorithm: str = DEFAULT_HASH_ALGORITHM,
) -> str:
    return format_code(compute(secret, counter, digits, algorithm), digits)
