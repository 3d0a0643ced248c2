"""Arithmetic helpers for the prime field ``Z/pZ``.

Every reduction in the package goes through :func:`mod_floor` so that
intermediate results always land in ``[0, p-1]``.
"""
from __future__ import annotations

import secrets

from .errors import NonInvertibleError, NonPrimeModulus

_SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def mod_floor(a: int, p: int) -> int:
    """Return the canonical representative of ``a`` modulo ``p``.

    Python's ``%`` floors toward negative infinity, so the result is never
    negative for a positive modulus.
    """
    return a % p


def extended_gcd(a: int, b: int) -> tuple[int, int, int]:
    """Return ``(g, x, y)`` with ``a*x + b*y == g == gcd(a, b)``."""
    s, s_last = 0, 1
    t, t_last = 1, 0
    r, r_last = b, a
    while r != 0:
        quotient = r_last // r
        r_last, r = r, r_last - quotient * r
        s_last, s = s, s_last - quotient * s
        t_last, t = t, t_last - quotient * t
    return r_last, s_last, t_last


def mod_inverse(a: int, p: int) -> int:
    """Return ``x`` in ``[0, p-1]`` such that ``a*x ≡ 1 (mod p)``.

    Raises :class:`NonInvertibleError` when ``a ≡ 0`` and
    :class:`NonPrimeModulus` when a nonzero element shares a factor with ``p``.
    """
    num = mod_floor(a, p)
    g, x, _ = extended_gcd(num, p)
    if g != 1:
        if num == 0:
            raise NonInvertibleError(f"0 has no inverse modulo {p}")
        raise NonPrimeModulus(f"{num} shares the factor {g} with modulus {p}")
    return mod_floor(x, p)


def is_probable_prime(n: int, rounds: int = 40) -> bool:
    """Miller-Rabin test with trial division by a few small primes."""
    if n < 2:
        return False
    for q in _SMALL_PRIMES:
        if n % q == 0:
            return n == q
    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1
    for _ in range(rounds):
        a = secrets.randbelow(n - 3) + 2  # in [2, n-2]
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for __ in range(s - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


__all__ = ["mod_floor", "extended_gcd", "mod_inverse", "is_probable_prime"]
