from __future__ import annotations

import secrets
import time
from functools import lru_cache
from typing import Callable

BASE36_ALPHABET = "0123456789abcdefghijklmnopqrstuvwxyz"

RANDOM_BYTES = 6
RANDOM_MASK = (1 << 54) - 1

RandomSource = Callable[[int], bytes]
Clock = Callable[[], int]


class UidGenerationError(Exception):
    """Base error for identifier generation."""


class RandomSourceUnavailable(UidGenerationError):
    """Raised when the secure random source cannot produce bytes."""


def epoch_millis() -> int:
    return time.time_ns() // 1_000_000


def to_base36(value: int) -> str:
    """
    Minimal base-36 representation of a non-negative integer.

    Digits are 0-9 then a-z, most significant first, no padding.
    """
    if value < 0:
        raise ValueError(f"Cannot base36-encode negative value: {value}")
    if value == 0:
        return "0"

    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(BASE36_ALPHABET[rem])
    return "".join(reversed(digits))


def random_suffix_value(raw: bytes) -> int:
    return int.from_bytes(raw, byteorder="big") & RANDOM_MASK


class UidGenerator:
    """
    Time-ordered identifiers: base36(epoch ms) + base36(random).

    The random source and the clock are injected so callers (and tests)
    control both.
    """

    def __init__(
        self,
        random_source: RandomSource = secrets.token_bytes,
        clock: Clock = epoch_millis,
    ) -> None:
        self.random_source = random_source
        self.clock = clock

    def generate(self) -> str:
        millis = self.clock()
        raw = self._draw_random()
        return to_base36(millis) + to_base36(random_suffix_value(raw))

    def _draw_random(self) -> bytes:
        try:
            raw = self.random_source(RANDOM_BYTES)
        except (OSError, NotImplementedError) as exc:
            raise RandomSourceUnavailable("Secure random source failed") from exc

        if raw is None or len(raw) < RANDOM_BYTES:
            got = 0 if raw is None else len(raw)
            raise RandomSourceUnavailable(
                f"Secure random source returned {got} of {RANDOM_BYTES} bytes"
            )
        return raw[:RANDOM_BYTES]


@lru_cache()
def get_uid_generator() -> UidGenerator:
    """
    Process-wide generator backed by the shared secure random source.

    Used as a FastAPI dependency; override it via `app.dependency_overrides`.
    """
    return UidGenerator()
