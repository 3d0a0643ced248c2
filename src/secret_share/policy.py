"""Runtime configuration for the sharing scheme.

Values are read from environment variables once at import time so that
deployments can tighten or relax checks without code changes. Malformed
values fall back to the defaults.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _load_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    value = value.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    return default


def _load_int(name: str, default: int) -> int:
    value = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _load_path(name: str, default: Path) -> Path:
    value = os.environ.get(name)
    if not value:
        return default
    return Path(value).expanduser()


@dataclass(frozen=True)
class SharingPolicy:
    """Holds tunables for scheme construction and auditing."""

    verify_prime: bool = True
    prime_rounds: int = 40
    audit_dir: Path = Path.home() / ".secret_share_audit"


def load_policy() -> SharingPolicy:
    """Load the policy considering environment overrides."""

    return SharingPolicy(
        verify_prime=_load_bool("SECRET_SHARE_VERIFY_PRIME", True),
        prime_rounds=max(1, _load_int("SECRET_SHARE_PRIME_ROUNDS", 40)),
        audit_dir=_load_path("SECRET_SHARE_AUDIT_DIR", Path.home() / ".secret_share_audit"),
    )


policy = load_policy()


__all__ = ["SharingPolicy", "policy", "load_policy"]
