"""
Schnorr zero-knowledge proof of knowledge of a discrete logarithm.

⚠️  PROOF OF CONCEPT - NOT PRODUCTION READY
"""

from schnorr_zkp.protocol import *  # noqa: F401,F403
from schnorr_zkp.protocol import __all__ as _protocol_all

__version__ = "0.1.0"

DISCLAIMER = (
    "⚠️  schnorr-zkp is a proof of concept. It has not had a security audit "
    "and does not protect against side channels."
)


def print_disclaimer() -> None:
    """Print the proof-of-concept disclaimer to stderr."""
    import click

    click.echo(click.style(DISCLAIMER, fg="yellow"), err=True)


__all__ = list(_protocol_all) + ["print_disclaimer", "__version__"]
