"""Randomness collaborator used when sampling sharing polynomials."""
from __future__ import annotations

import secrets
from typing import Protocol


class RandomSource(Protocol):
    """Anything that draws uniform integers from ``[start, stop)``.

    ``secrets.SystemRandom`` and ``random.Random`` both qualify; the latter is
    only suitable for deterministic tests.
    """

    def randrange(self, start: int, stop: int) -> int: ...


_system_random = secrets.SystemRandom()


def system_random() -> RandomSource:
    return _system_random


def random_field_element(p: int, rng: RandomSource | None = None) -> int:
    """Return a uniform element of ``[0, p-1]``."""
    source = rng if rng is not None else system_random()
    return source.randrange(0, p)


__all__ = ["RandomSource", "system_random", "random_field_element"]
