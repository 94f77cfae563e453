from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping

from .errors import ConfigError

# Dynamic truncation reads 4 bytes at offsets up to 15, so digests must be >= 19 bytes.
SUPPORTED_ALGORITHMS: tuple[str, ...] = ("sha1", "sha256", "sha512")

DEFAULT_TIME_STEP = 30
DEFAULT_CODE_DIGITS = 6
DEFAULT_HASH_ALGORITHM = "sha1"
DEFAULT_INITIAL_TIME = 0

MAX_CODE_DIGITS = 10

ENV_PREFIX = "OTP_STACK_"


@dataclass(frozen=True)
class TOTPConfig:
    time_step: int = DEFAULT_TIME_STEP
    code_digits: int = DEFAULT_CODE_DIGITS
    hash_algorithm: str = DEFAULT_HASH_ALGORITHM
    initial_time: int = DEFAULT_INITIAL_TIME

    def __post_init__(self) -> None:
        if isinstance(self.time_step, bool) or not isinstance(self.time_step, int) or self.time_step < 1:
            raise ConfigError(f"time_step must be a positive integer, got {self.time_step!r}")
        if isinstance(self.code_digits, bool) or not isinstance(self.code_digits, int):
            raise ConfigError(f"code_digits must be an integer, got {self.code_digits!r}")
        if not 1 <= self.code_digits <= MAX_CODE_DIGITS:
            raise ConfigError(f"code_digits must be between 1 and {MAX_CODE_DIGITS}, got {self.code_digits}")
        if isinstance(self.initial_time, bool) or not isinstance(self.initial_time, int):
            raise ConfigError(f"initial_time must be an integer, got {self.initial_time!r}")
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "hash_algorithm", normalize_algorithm(self.hash_algorithm))

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "TOTPConfig":
        env = os.environ if environ is None else environ
        return cls(
            time_step=_env_int(env, "TIME_STEP", DEFAULT_TIME_STEP),
            code_digits=_env_int(env, "DIGITS", DEFAULT_CODE_DIGITS),
            hash_algorithm=env.get(ENV_PREFIX + "ALGORITHM", DEFAULT_HASH_ALGORITHM),
            initial_time=_env_int(env, "INITIAL_TIME", DEFAULT_INITIAL_TIME),
        )


def normalize_algorithm(name: str) -> str:
    if not isinstance(name, str):
        raise ConfigError(f"hash_algorithm must be a string, got {name!r}")
    key = name.strip().lower().replace("-", "")
    if key not in SUPPORTED_ALGORITHMS:
        raise ConfigError(
            f"Unsupported hash algorithm {name!r}, expected one of: {', '.join(SUPPORTED_ALGORITHMS)}"
        )
    return key


def _env_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(ENV_PREFIX + name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}") from None
