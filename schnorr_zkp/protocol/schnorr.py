"""
⚠️ DRAFT — requires crypto review before production use

Schnorr Proof of Knowledge of a discrete logarithm.

This is a PROTOTYPE implementation for testing and validation.
DO NOT use in production without security audit.

Schnorr Proof of Knowledge (PoK):
    Proves knowledge of x such that y = g^x mod p without revealing x.

    Protocol (Non-Interactive via Fiat-Shamir):
        Prover knows x with y = g^x mod p

        1. Draw a fresh nonce: r <- [0, p - 1)
        2. Compute commitment: t = g^r mod p
        3. Compute challenge: c = SHA-256("t,y,g,p")[0:8] mod (p - 1)
        4. Compute response: s = (r + c*x) mod (p - 1)
        5. Proof = (t, s)

        Verifier checks:
        1. Recompute c from (t, y, g, p)
        2. Verify g^s mod p == t * y^c mod p

Security Requirements (caller's responsibility, not checked by the core):
    1. p prime and g a generator of the multiplicative group mod p
    2. r random, secret and unique per proof (reuse with two different
       challenges gives two linear equations in r and x, revealing x)

The five core operations (mod_exp, generate_commitment, generate_challenge,
generate_response, verify_proof) are pure and thread-safe. prove() and
verify() wrap them with nonce generation and optional parameter validation.
"""

import logging
from typing import Optional

from .arithmetic import (
    mod_exp,
    mul_mod,
    require_order_modulus,
    require_uint,
)
from .exceptions import (
    InvalidModulusError,
    ParameterValidationError,
    ProofGenerationError,
    ProofVerificationError,
)
from .feature_flags import get_validation_mode
from .parameters import GroupParameters
from .security import RandomnessSource, constant_time_equal_uint
from .transcript import generate_challenge
from .types import SchnorrProof

logger = logging.getLogger(__name__)


# ============================================================================
# CORE OPERATIONS
# ============================================================================


def generate_commitment(g: int, r: int, p: int) -> int:
    """
    Compute the prover's commitment t = g^r mod p.

    Raises:
        InvalidModulusError: If p == 0
    """
    return mod_exp(g, r, p)


def generate_response(r: int, c: int, x: int, p: int) -> int:
    """
    Compute the prover's response s = (r + c*x) mod (p - 1).

    c*x is formed from operands already reduced mod (p - 1), so it is at
    most 128 bits; the sum is reduced once more.

    Args:
        r: Nonce used for the commitment
        c: Challenge
        x: Secret exponent
        p: Modulus (must be > 1)

    Returns:
        Response s in [0, p - 1)

    Raises:
        InvalidModulusError: If p <= 1

    Example:
        >>> generate_response(4, 5, 6, 23)
        12
    """
    require_uint(r, "r")
    require_uint(c, "c")
    require_uint(x, "x")
    require_order_modulus(p)

    order = p - 1
    return (r % order + mul_mod(c, x, order)) % order


def verify_proof(t: int, y: int, g: int, s: int, c: int, p: int) -> bool:
    """
    Check the proof equation g^s mod p == (t * y^c mod p) mod p.

    Pure predicate. Does not check that p is prime or that g generates the
    group; those are preconditions on the caller.

    Args:
        t: Commitment
        y: Public value
        g: Generator
        s: Response
        c: Challenge
        p: Modulus (must be > 1)

    Returns:
        True iff the equation holds

    Raises:
        InvalidModulusError: If p <= 1

    Example:
        >>> verify_proof(4, 8, 5, 12, 5, 23)
        True
    """
    require_uint(t, "t")
    require_uint(y, "y")
    require_order_modulus(p)

    left = mod_exp(g, s, p)
    right = mul_mod(t, mod_exp(y, c, p), p)

    return constant_time_equal_uint(left, right)


# ============================================================================
# CONVENIENCE PROVER / VERIFIER
# ============================================================================


def _check_parameters(params: GroupParameters, validation: Optional[str]) -> str:
    if not isinstance(params, GroupParameters):
        raise TypeError(f"params must be GroupParameters, got {type(params)}")

    mode = get_validation_mode(validation)
    if mode != "none":
        params.validate(strict=(mode == "strict"))
    else:
        # Even unvalidated, p <= 1 has no exponent group
        require_order_modulus(params.p)
    return mode


def public_key(x: int, params: GroupParameters) -> int:
    """
    Compute y = g^x mod p for a caller-supplied secret x.

    Not key generation: choosing x is left to the caller.
    """
    require_uint(x, "x")
    return params.public_value(x)


def prove(
    x: int,
    params: GroupParameters,
    randomness_source: Optional[RandomnessSource] = None,
    nonce: Optional[int] = None,
    validation: Optional[str] = None,
) -> SchnorrProof:
    """
    Generate a non-interactive Schnorr proof of knowledge of x.

    ⚠️ SECURITY CRITICAL

    Args:
        x: Secret exponent (kept secret, must be in [0, p - 1))
        params: Group parameters (p, g)
        randomness_source: Source for nonce generation (created if None)
        nonce: Explicit nonce r (testing and golden vectors only; must be
            fresh and secret, never reused)
        validation: Validation mode override ("none", "basic", "strict")

    Returns:
        SchnorrProof (t, s)

    Raises:
        TypeError: If inputs have the wrong type
        ValueError: If inputs are out of range
        ParameterValidationError: If params fail validation
        ProofGenerationError: If proof generation fails unexpectedly

    Example:
        >>> params = GroupParameters(p=23, g=5)
        >>> proof = prove(6, params, nonce=4)
        >>> (proof.t, proof.s)
        (4, 12)
    """
    mode = _check_parameters(params, validation)
    require_uint(x, "x")

    if mode != "none" and not (0 <= x < params.group_order):
        raise ValueError(f"x must be in [0, p - 1), got {x}")

    if nonce is not None:
        require_uint(nonce, "nonce")
        if mode != "none" and not (0 <= nonce < params.group_order):
            raise ValueError(f"nonce must be in [0, p - 1), got {nonce}")

    if randomness_source is None:
        randomness_source = RandomnessSource()

    try:
        r = nonce if nonce is not None else randomness_source.get_nonce(params.p)

        y = params.public_value(x)
        t = generate_commitment(params.g, r, params.p)
        c = generate_challenge(t, y, params.g, params.p)
        s = generate_response(r, c, x, params.p)

        logger.debug("Generated proof t=%d s=%d for y=%d p=%d", t, s, y, params.p)
        return SchnorrProof(t=t, s=s)

    except Exception as e:
        # Generic message: never echo x or r
        raise ProofGenerationError(
            f"Schnorr proof generation failed: {type(e).__name__}"
        ) from e


def verify(
    proof: SchnorrProof,
    y: int,
    params: GroupParameters,
    validation: Optional[str] = None,
) -> bool:
    """
    Verify a non-interactive Schnorr proof against public value y.

    Recomputes c = H(t, y, g, p) and checks g^s == t * y^c (mod p).

    Args:
        proof: Proof (t, s)
        y: Public value g^x mod p
        params: Group parameters (p, g)
        validation: Validation mode override ("none", "basic", "strict")

    Returns:
        True if the proof is valid, False otherwise

    Raises:
        TypeError: If inputs have the wrong type
        ValueError: If y is out of range
        ParameterValidationError: If params fail validation
        ProofVerificationError: If verification fails unexpectedly

    Example:
        >>> params = GroupParameters(p=23, g=5)
        >>> verify(SchnorrProof(t=4, s=12), 8, params)
        True
    """
    if not isinstance(proof, SchnorrProof):
        raise TypeError(f"proof must be SchnorrProof, got {type(proof)}")

    mode = _check_parameters(params, validation)
    require_uint(y, "y")

    if mode != "none" and not (0 < y < params.p):
        raise ParameterValidationError(f"y must be in (0, p), got {y}")

    try:
        c = proof.challenge(y, params)
        valid = verify_proof(proof.t, y, params.g, proof.s, c, params.p)
    except (InvalidModulusError, TypeError, ValueError):
        raise
    except Exception as e:
        raise ProofVerificationError(
            f"Schnorr proof verification failed: {type(e).__name__}"
        ) from e

    if not valid:
        logger.debug("Proof rejected: t=%d s=%d y=%d p=%d", proof.t, proof.s, y, params.p)
    return valid


__all__ = [
    "mod_exp",
    "generate_commitment",
    "generate_challenge",
    "generate_response",
    "verify_proof",
    "public_key",
    "prove",
    "verify",
]
