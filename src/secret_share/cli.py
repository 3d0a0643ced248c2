# SPDX-FileCopyrightText: 2025 Secret Share contributors
# SPDX-License-Identifier: MIT

"""Command line interface: ``secret-share split`` and ``secret-share recover``."""

from __future__ import annotations

import logging

import click

from . import policy as _policy
from .audit import AuditTrail
from .errors import ShamirError
from .primes import resolve_prime
from .scheme import SecretShare, Share


class IntLiteral(click.ParamType):
    name = "integer"

    def convert(self, value, param, ctx):
        if isinstance(value, int):
            return value
        try:
            return int(value, 0)
        except ValueError:
            self.fail(f"{value!r} is not an integer literal", param, ctx)


class PrimeParam(click.ParamType):
    name = "prime"

    def convert(self, value, param, ctx):
        try:
            return resolve_prime(value)
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


class ShareParam(click.ParamType):
    name = "share"

    def convert(self, value, param, ctx):
        if isinstance(value, Share):
            return value
        try:
            return Share.from_text(value)
        except ShamirError as exc:
            self.fail(str(exc), param, ctx)


def _build_scheme(threshold: int, shares: int, prime: int, audit: bool) -> SecretShare:
    trail = AuditTrail(_policy.policy.audit_dir) if audit else None
    try:
        return SecretShare(t=threshold, n=shares, p=prime, audit=trail)
    except ShamirError as exc:
        raise click.ClickException(str(exc)) from exc


prime_option = click.option(
    "--prime",
    "-p",
    type=PrimeParam(),
    default="secp256k1",
    show_default=True,
    help="Field modulus: secp256k1, mersenne127, mersenne521 or an integer literal",
)
audit_option = click.option("--audit", is_flag=True, help="Append a signed audit event")


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool) -> None:
    """Split a secret into shares and recover it from a threshold of them."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")


@main.command()
@click.option("--threshold", "-t", type=int, required=True, help="Shares needed to recover")
@click.option("--shares", "-n", type=int, required=True, help="Shares to generate")
@prime_option
@audit_option
@click.argument("secret", type=IntLiteral())
def split(threshold: int, shares: int, prime: int, audit: bool, secret: int) -> None:
    """Split SECRET (an integer literal, 0x... allowed) into shares."""
    scheme = _build_scheme(threshold, shares, prime, audit)
    try:
        parts = scheme.split(secret)
    except ShamirError as exc:
        raise click.ClickException(str(exc)) from exc
    for share in parts:
        click.echo(share.to_text())


@main.command()
@click.option("--threshold", "-t", type=int, required=True, help="Shares needed to recover")
@click.option("--shares", "-n", "total", type=int, default=None, help="Shares originally generated (default: threshold)")
@prime_option
@audit_option
@click.option("--hex", "as_hex", is_flag=True, help="Print the secret in hexadecimal")
@click.argument("shares", nargs=-1, required=True, type=ShareParam())
def recover(threshold: int, total: int | None, prime: int, audit: bool, as_hex: bool, shares: tuple[Share, ...]) -> None:
    """Recover the secret from SHARES given as '<index>-<hex value>'."""
    # n is only checked by split; here it just feeds the audit record
    scheme = _build_scheme(threshold, total if total is not None else threshold, prime, audit)
    try:
        secret = scheme.recover(list(shares))
    except ShamirError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(hex(secret) if as_hex else str(secret))


if __name__ == "__main__":
    main()
