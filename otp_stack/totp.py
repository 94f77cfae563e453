from __future__ import annotations

import logging
import math

from . import hotp
from .clock import Clock, read_clock
from .config import TOTPConfig
from .errors import TimeBeforeEpochOffsetError
from .utils import format_code

logger = logging.getLogger(__name__)


def _elapsed(now: float, config: TOTPConfig) -> int:
    if now < config.initial_time:
        raise TimeBeforeEpochOffsetError(now, config.initial_time)
    return math.floor(now) - config.initial_time


def counter_for(now: float, config: TOTPConfig) -> int:
    counter = _elapsed(now, config) // config.time_step
    logger.debug("counter=%d for now=%s step=%d t0=%d", counter, now, config.time_step, config.initial_time)
    return counter


def get_code(
    secret: bytes,
    config: TOTPConfig,
    now: float | None = None,
    clock: Clock | None = None,
) -> int:
    counter = counter_for(read_clock(now, clock), config)
    return hotp.compute(secret, counter, config.code_digits, config.hash_algorithm)


def get_left_time(config: TOTPConfig, now: float | None = None, clock: Clock | None = None) -> int:
    # Exactly on a boundary the whole step is left, never 0.
    return config.time_step - (_elapsed(read_clock(now, clock), config) % config.time_step)


class TOTP:
    """
    A secret bound to one configuration and time source.

    Holds no mutable state: every call reads the clock once and recomputes.
    """

    def __init__(self, secret: bytes, config: TOTPConfig | None = None, clock: Clock | None = None):
        self.secret = bytes(secret)
        self.config = config or TOTPConfig()
        self.clock = clock

    def code(self) -> int:
        return get_code(self.secret, self.config, clock=self.clock)

    def formatted(self) -> str:
        return format_code(self.code(), self.config.code_digits)

    def left_time(self) -> int:
        return get_left_time(self.config, clock=self.clock)

    def at(self, now: float) -> int:
        return get_code(self.secret, self.config, now=now)
