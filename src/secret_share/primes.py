"""Well-known prime moduli."""
from __future__ import annotations

SECP256K1_P = 2**256 - 2**32 - 977
MERSENNE_127 = 2**127 - 1
MERSENNE_521 = 2**521 - 1

NAMED_PRIMES: dict[str, int] = {
    "secp256k1": SECP256K1_P,
    "mersenne127": MERSENNE_127,
    "mersenne521": MERSENNE_521,
}


def resolve_prime(value: str | int) -> int:
    """Map a prime name or an integer literal (``0x`` allowed) to an int."""
    if isinstance(value, int):
        return value
    key = value.strip().lower()
    if key in NAMED_PRIMES:
        return NAMED_PRIMES[key]
    try:
        return int(key, 0)
    except ValueError:
        known = ", ".join(sorted(NAMED_PRIMES))
        raise ValueError(f"unknown prime {value!r}; use an integer or one of: {known}") from None


__all__ = ["SECP256K1_P", "MERSENNE_127", "MERSENNE_521", "NAMED_PRIMES", "resolve_prime"]
