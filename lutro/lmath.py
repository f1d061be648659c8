"""Random numbers with the engine's argument conventions."""

from __future__ import annotations

import random as _random
from typing import Any

from .runtime import LutroError

RAND_MAX = 2**31 - 1


def _check_number(value: Any, index: int, fname: str) -> float:
    if isinstance(value, bool):
        raise TypeError(f"bad argument #{index} to '{fname}' (number expected, got boolean)")
    if isinstance(value, (int, float)):
        return value
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            pass
    raise TypeError(
        f"bad argument #{index} to '{fname}' (number expected, got {type(value).__name__})"
    )


def _to_int(value: float) -> int:
    return int(value)


def _cmod(a: int, b: int) -> int:
    """Remainder whose sign follows the dividend."""
    r = abs(a) % abs(b)
    return r if a >= 0 else -r


class RandomGenerator:
    """Pseudo-random generator behind ``lutro.math``."""

    def __init__(self, seed: int | None = None) -> None:
        self._rng = _random.Random(seed)

    def _next(self) -> int:
        return self._rng.randint(0, RAND_MAX)

    def random(self, *args: Any) -> float | int:
        """No argument: a float in [0, 1]; one: an int in [1, max]; two: an int in [min, max]."""
        n = len(args)
        if n > 2:
            raise LutroError(f"lutro.math.random requires 0, 1 or 2 arguments, {n} given.")
        num = self._next()
        if n == 0:
            return num / RAND_MAX
        if n == 1:
            upper = _to_int(_check_number(args[0], 1, "random"))
            if upper == 0:
                raise ValueError("lutro.math.random upper bound must not be zero")
            return _cmod(num, upper) + 1
        low = _to_int(_check_number(args[0], 1, "random"))
        high = _to_int(_check_number(args[1], 2, "random"))
        if low > high:
            low, high = high, low
        return _cmod(num, high - low + 1) + low

    def set_random_seed(self, *args: Any) -> None:
        """Seed from one number, or from the sum of two."""
        n = len(args)
        if n < 1 or n > 2:
            raise LutroError(f"lutro.math.setRandomSeed requires 1 or 2 arguments, {n} given.")
        seed = _to_int(_check_number(args[0], 1, "setRandomSeed")) & 0xFFFFFFFF
        if n == 2:
            seed += _to_int(_check_number(args[1], 2, "setRandomSeed")) & 0xFFFFFFFF
        self._rng.seed(seed & 0xFFFFFFFF)