"""Exceptions raised when the sharing contract is violated."""
from __future__ import annotations


class ShamirError(ValueError):
    """Base class for every secret sharing failure."""


class ConfigError(ShamirError):
    """The scheme parameters cannot support the requested operation."""


class SecretOutOfRange(ShamirError):
    """The secret is not an element of the field."""


class ShareCountMismatch(ShamirError):
    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(f"expected exactly {expected} shares, got {actual}")
        self.expected = expected
        self.actual = actual


class NonInvertibleError(ShamirError):
    """An element has no multiplicative inverse modulo the field prime."""


class NonPrimeModulus(NonInvertibleError):
    """The modulus is not prime."""


class DuplicateIndex(NonInvertibleError):
    def __init__(self, index: int) -> None:
        super().__init__(f"share index {index} appears more than once")
        self.index = index


__all__ = [
    "ShamirError",
    "ConfigError",
    "SecretOutOfRange",
    "ShareCountMismatch",
    "NonInvertibleError",
    "NonPrimeModulus",
    "DuplicateIndex",
]
