from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from typing import Any

from . import base32, hotp as hotp_engine, totp
from .clock import Clock, read_clock
from .config import DEFAULT_CODE_DIGITS, DEFAULT_HASH_ALGORITHM, TOTPConfig
from .utils import format_code

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TOTPResult:
    code: str
    left_time: int
    counter: int
    time_step: int
    digits: int
    algorithm: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def decode_secret(secret: str) -> bytes:
    return base32.decode(secret)


def generate(
    secret: str,
    cfg: TOTPConfig | None = None,
    *,
    now: float | None = None,
    clock: Clock | None = None,
) -> TOTPResult:
    """
    Current TOTP code and seconds left for a base32 secret.

    The clock is read once so the code and the left time describe the same step.
    """
    cfg = cfg or TOTPConfig()
    key = decode_secret(secret)
    instant = read_clock(now, clock)
    counter = totp.counter_for(instant, cfg)
    code = hotp_engine.compute(key, counter, cfg.code_digits, cfg.hash_algorithm)
    logger.debug("generated %s code for counter %d", cfg.hash_algorithm, counter)
    return TOTPResult(
        code=format_code(code, cfg.code_digits),
        left_time=totp.get_left_time(cfg, now=instant),
        counter=counter,
        time_step=cfg.time_step,
        digits=cfg.code_digits,
        algorithm=cfg.hash_algorithm,
    )


def hotp(
    secret: str,
    counter: int,
    *,
    digits: int = DEFAULT_CODE_DIGITS,
    algorithm: str = DEFAULT_HASH_ALGORITHM,
) -> str:
    return hotp_engine.hotp_code(decode_secret(secret), counter, digits, algorithm)


def encode_secret(data: bytes, padding: bool = True) -> str:
    return base32.encode(data, padding=padding)
