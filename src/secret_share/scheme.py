"""Shamir's threshold secret sharing over a prime field.

``SecretShare.split`` hides a secret in the constant term of a random
polynomial of degree ``t-1`` and hands out its values at ``x = 1..n``.
``SecretShare.recover`` interpolates exactly ``t`` of those points back to
``x = 0``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

from . import policy as _policy
from .audit import AuditTrail
from .errors import (
    ConfigError,
    DuplicateIndex,
    NonPrimeModulus,
    SecretOutOfRange,
    ShamirError,
    ShareCountMismatch,
)
from .field import is_probable_prime, mod_floor, mod_inverse
from .polynomial import evaluate_polynomial, sample_polynomial
from .rng import RandomSource

_logger = logging.getLogger(__name__)


class Share(NamedTuple):
    index: int
    value: int

    def to_text(self) -> str:
        return f"{self.index}-{self.value:x}"

    @classmethod
    def from_text(cls, text: str) -> "Share":
        index, sep, value = text.strip().partition("-")
        if not sep:
            raise ShamirError(f"malformed share {text!r}, expected '<index>-<hex>'")
        try:
            return cls(int(index, 10), int(value, 16))
        except ValueError:
            raise ShamirError(f"malformed share {text!r}, expected '<index>-<hex>'") from None


@dataclass(frozen=True)
class SecretShare:
    """A ``t``-of-``n`` sharing scheme over ``Z/pZ``."""

    t: int
    n: int
    p: int
    audit: Optional[AuditTrail] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.t < 1:
            raise ConfigError(f"threshold must be at least 1, got {self.t}")
        if self.p < 2:
            raise ConfigError(f"modulus must be at least 2, got {self.p}")
        policy = _policy.policy
        if policy.verify_prime and not is_probable_prime(self.p, policy.prime_rounds):
            raise NonPrimeModulus(f"modulus {self.p} is not prime")

    def split(self, secret: int, rng: RandomSource | None = None) -> List[Share]:
        """Split ``secret`` into ``n`` shares, any ``t`` of which recover it."""
        if self.t >= self.n:
            raise ConfigError(f"threshold {self.t} must be smaller than share count {self.n}")
        if self.n >= self.p:
            raise ConfigError(f"share count {self.n} must be smaller than modulus {self.p}")
        if not 0 <= secret < self.p:
            raise SecretOutOfRange("secret must lie in [0, p-1]")
        coefficients = sample_polynomial(secret, self.t, self.p, rng)
        shares = [Share(x, y) for x, y in evaluate_polynomial(coefficients, self.n, self.p)]
        _logger.debug("split secret into %d shares (t=%d, p=%d bits)", self.n, self.t, self.p.bit_length())
        self._record("split", [s.index for s in shares])
        return shares

    def recover(self, shares: Sequence[Tuple[int, int]]) -> int:
        """Recover the secret from exactly ``t`` shares with distinct indices."""
        if len(shares) != self.t:
            raise ShareCountMismatch(self.t, len(shares))
        xs = [int(index) for index, _ in shares]
        ys = [mod_floor(value, self.p) for _, value in shares]
        result = mod_floor(self.lagrange_interpolation(0, xs, ys), self.p)
        _logger.debug("recovered secret from shares %s (t=%d)", xs, self.t)
        self._record("recover", xs)
        return result

    def lagrange_interpolation(self, x: int, xs: Sequence[int], ys: Sequence[int]) -> int:
        """Evaluate at ``x`` the unique polynomial through ``zip(xs, ys)``."""
        _check_distinct(xs, self.p)
        p = self.p
        total = 0
        for i, xi in enumerate(xs):
            numerator = 1
            denominator = 1
            for j, xj in enumerate(xs):
                if i == j:
                    continue
                numerator = mod_floor(numerator * (x - xj), p)
                denominator = mod_floor(denominator * (xi - xj), p)
            total = mod_floor(total + numerator * mod_inverse(denominator, p) * ys[i], p)
        return total

    def _record(self, event: str, indices: Iterable[int]) -> None:
        if self.audit is None:
            return
        self.audit.record_event(
            event,
            details={
                "t": self.t,
                "n": self.n,
                "p_bits": self.p.bit_length(),
                "indices": list(indices),
            },
        )


def _check_distinct(xs: Sequence[int], p: int) -> None:
    seen = set()
    for x in xs:
        key = mod_floor(x, p)
        if key in seen:
            raise DuplicateIndex(x)
        seen.add(key)


__all__ = ["Share", "SecretShare"]
