"""Shamir's secret sharing over prime fields."""

from .errors import (
    ConfigError,
    DuplicateIndex,
    NonInvertibleError,
    NonPrimeModulus,
    SecretOutOfRange,
    ShamirError,
    ShareCountMismatch,
)
from .primes import MERSENNE_127, MERSENNE_521, SECP256K1_P, resolve_prime
from .scheme import SecretShare, Share

__version__ = "0.1.0"

__all__ = [
    "SecretShare",
    "Share",
    "ShamirError",
    "ConfigError",
    "SecretOutOfRange",
    "ShareCountMismatch",
    "NonInvertibleError",
    "NonPrimeModulus",
    "DuplicateIndex",
    "SECP256K1_P",
    "MERSENNE_127",
    "MERSENNE_521",
    "resolve_prime",
]
