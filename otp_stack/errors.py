from __future__ import annotations


class OTPError(Exception):
    """Base class for every failure raised by otp_stack."""


class DecodeError(OTPError, ValueError):
    pass


class InvalidCharacterError(DecodeError):
    def __init__(self, char: str, position: int):
        self.char = char
        self.position = position
        super().__init__(f"Invalid base32 char {char!r} at position {position}, should be A-Z, 2-7")


class EmptyInputError(DecodeError):
    def __init__(self, message: str = "Secret is empty"):
        super().__init__(message)


class ClockError(OTPError):
    pass


class TimeBeforeEpochOffsetError(ClockError):
    def __init__(self, now: float, initial_time: int):
        self.now = now
        self.initial_time = initial_time
        super().__init__(f"Time {now} is before the epoch offset {initial_time}")


class ConfigError(OTPError, ValueError):
    pass


class CounterRangeError(OTPError, ValueError):
    def __init__(self, counter: int):
        self.counter = counter
        super().__init__(f"Counter must fit in an unsigned 64-bit integer, got {counter}")
