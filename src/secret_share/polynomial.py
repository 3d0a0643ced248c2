"""Sampling and evaluation of sharing polynomials over ``Z/pZ``."""
from __future__ import annotations

from typing import List, Sequence, Tuple

from .field import mod_floor
from .rng import RandomSource, random_field_element


def sample_polynomial(secret: int, t: int, p: int, rng: RandomSource | None = None) -> List[int]:
    """Return ``t`` coefficients ``[secret, r1, ..., r(t-1)]``.

    The constant term is the secret; the remaining coefficients are drawn
    uniformly from ``[0, p-1]``.
    """
    return [secret] + [random_field_element(p, rng) for _ in range(t - 1)]


def evaluate_at(coefficients: Sequence[int], x: int, p: int) -> int:
    """Evaluate the polynomial at ``x`` modulo ``p`` (Horner's method)."""
    acc = 0
    for coeff in reversed(coefficients):
        acc = mod_floor(x * acc + coeff, p)
    return acc


def evaluate_polynomial(coefficients: Sequence[int], n: int, p: int) -> List[Tuple[int, int]]:
    return [(x, evaluate_at(coefficients, x, p)) for x in range(1, n + 1)]


__all__ = ["sample_polynomial", "evaluate_at", "evaluate_polynomial"]
