"""
Command-Line Interface for the Schnorr proof toolkit

Provides commands for modular exponentiation, challenge derivation, proof
generation and proof verification.
"""

import json
import logging
import sys
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from schnorr_zkp import __version__, print_disclaimer
from schnorr_zkp.protocol import (
    GroupParameters,
    SchnorrProof,
    SchnorrZKPError,
    generate_challenge,
    load_parameters,
    mod_exp,
    prove as prove_knowledge,
    verify as verify_knowledge,
)
from schnorr_zkp.protocol.feature_flags import VALIDATION_MODES
from schnorr_zkp.protocol.parameters import parse_uint

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(verbose: bool = False) -> None:
    """Configure root logging for CLI runs (DEBUG when verbose)."""
    if not verbose:
        return

    # Clear existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, stream=sys.stderr)


class UIntParamType(click.ParamType):
    """Unsigned 64-bit integer, decimal or 0x-prefixed hex."""

    name = "uint"

    def convert(self, value, param, ctx):
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        try:
            return parse_uint(value, param.name if param else "value")
        except (TypeError, ValueError) as e:
            self.fail(str(e), param, ctx)


UINT = UIntParamType()

_VALIDATION_CHOICE = click.Choice(VALIDATION_MODES, case_sensitive=False)


def _resolve_params(
    p: Optional[int], g: Optional[int], params_file: Optional[str]
) -> GroupParameters:
    if params_file:
        if p is not None or g is not None:
            raise click.UsageError("Use either --params or --p/--g, not both")
        try:
            return load_parameters(params_file)
        except SchnorrZKPError as e:
            raise click.BadParameter(str(e), param_hint="--params")

    if p is None or g is None:
        raise click.UsageError("Both --p and --g are required (or use --params)")
    return GroupParameters(p=p, g=g)


def _fail(error: Exception) -> None:
    raise click.ClickException(f"{type(error).__name__}: {error}")


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', is_flag=True, help='Enable debug logging')
def main(verbose):
    """
    Schnorr Proof of Knowledge Toolkit - Proof of Concept

    Non-interactive (Fiat-Shamir) proofs of knowledge of a discrete
    logarithm x with y = g^x mod p, over 64-bit unsigned integers.

    ⚠️  PROOF OF CONCEPT - NOT PRODUCTION READY
    """
    setup_logging(verbose)


@main.command()
def version():
    """Show version and disclaimer information."""
    click.echo(f"\nschnorr-zkp v{__version__}")
    click.echo("Proof of Concept - Not Production Ready\n")
    print_disclaimer()


@main.command()
@click.argument('base', type=UINT)
@click.argument('exp', type=UINT)
@click.argument('modulus', type=UINT)
def modexp(base, exp, modulus):
    """
    Compute BASE^EXP mod MODULUS.

    Examples:

        schnorr-zkp modexp 5 6 23
    """
    try:
        click.echo(mod_exp(base, exp, modulus))
    except ArithmeticError as e:
        _fail(e)


@main.command()
@click.option('--t', 't', type=UINT, required=True, help='Commitment t')
@click.option('--y', 'y', type=UINT, required=True, help='Public value y')
@click.option('--g', 'g', type=UINT, required=True, help='Generator g')
@click.option('--p', 'p', type=UINT, required=True, help='Modulus p')
def challenge(t, y, g, p):
    """
    Derive the Fiat-Shamir challenge c from (t, y, g, p).

    Examples:

        schnorr-zkp challenge --t 4 --y 8 --g 5 --p 23
    """
    try:
        click.echo(generate_challenge(t, y, g, p))
    except ArithmeticError as e:
        _fail(e)


@main.command()
@click.option('--x', 'x', type=UINT, required=True, help='Secret exponent x')
@click.option('--p', 'p', type=UINT, help='Modulus p')
@click.option('--g', 'g', type=UINT, help='Generator g')
@click.option(
    '--params', 'params_file',
    type=click.Path(exists=True, dir_okay=False),
    help='YAML file with p and g'
)
@click.option(
    '--nonce',
    type=UINT,
    help='Explicit nonce r (testing only; never reuse a nonce)'
)
@click.option(
    '--validation',
    type=_VALIDATION_CHOICE,
    help='Parameter validation mode (default: $SCHNORR_ZKP_VALIDATION or basic)'
)
@click.option(
    '--format', 'output_format',
    type=click.Choice(['console', 'json', 'cbor'], case_sensitive=False),
    default='console',
    help='Output format'
)
def prove(x, p, g, params_file, nonce, validation, output_format):
    """
    Generate a proof of knowledge of x with y = g^x mod p.

    Examples:

        schnorr-zkp prove --p 23 --g 5 --x 6

        schnorr-zkp prove --params group.yaml --x 6 --format json
    """
    params = _resolve_params(p, g, params_file)

    try:
        proof = prove_knowledge(
            x, params, nonce=nonce,
            validation=validation.lower() if validation else None
        )
        y = params.public_value(x)
        c = proof.challenge(y, params)
    except (SchnorrZKPError, ArithmeticError, ValueError) as e:
        _fail(e)

    output_format = output_format.lower()
    if output_format == 'cbor':
        click.echo(proof.serialize().hex())
        return

    if output_format == 'json':
        payload = {
            "p": params.p,
            "g": params.g,
            "y": y,
            "t": proof.t,
            "c": c,
            "s": proof.s,
            "proof": proof.serialize().hex(),
        }
        click.echo(json.dumps(payload, indent=2))
        return

    table = Table(title="Schnorr Proof", show_header=True)
    table.add_column("Field", style="cyan")
    table.add_column("Value", justify="right")
    for name, value in (
        ("p", params.p), ("g", params.g), ("y", y),
        ("t", proof.t), ("c", c), ("s", proof.s),
    ):
        table.add_row(name, str(value))
    table.add_row("proof (CBOR)", proof.serialize().hex())

    Console().print(table)


@main.command()
@click.option('--y', 'y', type=UINT, required=True, help='Public value y')
@click.option('--t', 't', type=UINT, help='Commitment t')
@click.option('--s', 's', type=UINT, help='Response s')
@click.option('--proof', 'proof_hex', help='CBOR-encoded proof (hex)')
@click.option('--p', 'p', type=UINT, help='Modulus p')
@click.option('--g', 'g', type=UINT, help='Generator g')
@click.option(
    '--params', 'params_file',
    type=click.Path(exists=True, dir_okay=False),
    help='YAML file with p and g'
)
@click.option(
    '--validation',
    type=_VALIDATION_CHOICE,
    help='Parameter validation mode (default: $SCHNORR_ZKP_VALIDATION or basic)'
)
@click.option(
    '--format', 'output_format',
    type=click.Choice(['console', 'json'], case_sensitive=False),
    default='console',
    help='Output format'
)
def verify(y, t, s, proof_hex, p, g, params_file, validation, output_format):
    """
    Verify a proof (t, s) against public value y.

    Exits with status 0 if the proof is valid and 1 if it is not.

    Examples:

        schnorr-zkp verify --p 23 --g 5 --y 8 --t 4 --s 12

        schnorr-zkp verify --p 23 --g 5 --y 8 --proof a361760161740461730c
    """
    params = _resolve_params(p, g, params_file)

    if proof_hex is not None:
        if t is not None or s is not None:
            raise click.UsageError("Use either --proof or --t/--s, not both")
        try:
            proof = SchnorrProof.deserialize(bytes.fromhex(proof_hex))
        except (SchnorrZKPError, ValueError, TypeError) as e:
            raise click.BadParameter(str(e), param_hint="--proof")
    else:
        if t is None or s is None:
            raise click.UsageError("Both --t and --s are required (or use --proof)")
        proof = SchnorrProof(t=t, s=s)

    try:
        valid = verify_knowledge(
            proof, y, params,
            validation=validation.lower() if validation else None
        )
    except (SchnorrZKPError, ArithmeticError, ValueError) as e:
        _fail(e)

    if output_format.lower() == 'json':
        click.echo(json.dumps({"valid": valid, **proof.to_dict()}, indent=2))
    elif valid:
        click.echo(click.style("✓ Proof valid", fg="green"))
    else:
        click.echo(click.style("✗ Proof invalid", fg="red"))

    sys.exit(0 if valid else 1)


if __name__ == '__main__':
    main()
