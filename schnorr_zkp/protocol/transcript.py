"""
⚠️ DRAFT — requires crypto review before production use

Fiat-Shamir challenge derivation for the Schnorr proof core.

This is a PROTOTYPE implementation for testing and validation.
DO NOT use in production without security audit.

Challenge = SHA-256("t,y,g,p")[0:8] as big-endian u64, mod (p - 1)

Hashing the full public transcript binds the challenge to the commitment
and the public key, so a prover cannot pick t after seeing c. Prover and
verifier derive the same c independently, which is what makes the protocol
non-interactive.
"""

import hashlib

from .arithmetic import require_order_modulus, require_uint
from .config import (
    CHALLENGE_BYTES,
    DIGEST_BYTES,
    TRANSCRIPT_DELIMITER,
    TRANSCRIPT_ENCODING,
    TRANSCRIPT_FIELDS,
)


def build_transcript(t: int, y: int, g: int, p: int) -> bytes:
    """
    Encode the public transcript as delimited decimal text.

    Args:
        t: Commitment
        y: Public value g^x mod p
        g: Generator
        p: Modulus

    Returns:
        ASCII bytes of "t,y,g,p" (no padding, no whitespace)

    Example:
        >>> build_transcript(4, 8, 5, 23)
        b'4,8,5,23'
    """
    fields = [
        require_uint(value, name)
        for name, value in zip(TRANSCRIPT_FIELDS, (t, y, g, p))
    ]
    text = TRANSCRIPT_DELIMITER.join(str(value) for value in fields)
    return text.encode(TRANSCRIPT_ENCODING)


def challenge_from_digest(digest: bytes, p: int) -> int:
    """
    Reduce a SHA-256 digest to a challenge in [0, p - 1).

    Only the first CHALLENGE_BYTES bytes are used.

    Raises:
        TypeError: If digest is not bytes
        ValueError: If digest is not DIGEST_BYTES long
        InvalidModulusError: If p <= 1
    """
    if not isinstance(digest, (bytes, bytearray)):
        raise TypeError(f"digest must be bytes, got {type(digest)}")

    if len(digest) != DIGEST_BYTES:
        raise ValueError(
            f"Invalid digest size: expected {DIGEST_BYTES} bytes, "
            f"got {len(digest)}"
        )

    require_order_modulus(p)

    prefix = int.from_bytes(bytes(digest[:CHALLENGE_BYTES]), "big")
    return prefix % (p - 1)


def generate_challenge(t: int, y: int, g: int, p: int) -> int:
    """
    Derive the Fiat-Shamir challenge c from (t, y, g, p).

    Deterministic: identical inputs always give the identical challenge.

    Args:
        t: Commitment g^r mod p
        y: Public value g^x mod p
        g: Generator
        p: Modulus (must be > 1)

    Returns:
        Challenge c in [0, p - 1)

    Raises:
        InvalidModulusError: If p <= 1
        TypeError: If an argument is not an int
        ValueError: If an argument is outside the 64-bit unsigned range

    Example:
        >>> generate_challenge(4, 8, 5, 23)
        5
    """
    # Check p first so p <= 1 fails as a modulus error, not a hash of garbage
    require_order_modulus(p)
    transcript = build_transcript(t, y, g, p)
    digest = hashlib.sha256(transcript).digest()
    return challenge_from_digest(digest, p)
