"""
⚠️ DRAFT — requires crypto review before production use

Protocol configuration for the Schnorr discrete-log proof core.

This is a PROTOTYPE implementation for testing and validation.
DO NOT use in production without security audit.
"""

# ============================================================================
# INTEGER WIDTH
# ============================================================================

# All protocol values (p, g, x, y, r, t, c, s) are unsigned 64-bit integers.
# Intermediate products are computed with Python's wide integers, so the
# width only constrains inputs and outputs.
UINT_BITS = 64
UINT_BYTES = UINT_BITS // 8
UINT_MAX = (1 << UINT_BITS) - 1

# ============================================================================
# HASH FUNCTIONS
# ============================================================================

# For Fiat-Shamir transform (challenge generation)
HASH_FUNCTION = "SHA-256"
DIGEST_BYTES = 32

# Leading digest bytes interpreted as the big-endian challenge integer
CHALLENGE_BYTES = 8

# Transcript layout: "t,y,g,p" in decimal, no padding
TRANSCRIPT_DELIMITER = ","
TRANSCRIPT_ENCODING = "ascii"
TRANSCRIPT_FIELDS = ("t", "y", "g", "p")

# ============================================================================
# PARAMETER VALIDATION
# ============================================================================

# Deterministic Miller-Rabin witnesses for every n < 3.3 * 10^24 (covers u64)
MILLER_RABIN_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)

# ============================================================================
# PROOF SERIALIZATION
# ============================================================================

SERIALIZATION_FORMAT = "CBOR"
PROOF_VERSION = 1  # Increment for breaking changes

# CBOR map of three small ints; anything larger is not a proof
MAX_PROOF_SIZE_BYTES = 64

# ============================================================================
# VALIDATION
# ============================================================================


def validate_config() -> bool:
    """
    Validate configuration parameters.

    Returns:
        True if configuration is valid

    Raises:
        AssertionError: If configuration is invalid
    """
    assert UINT_BITS == 64, "Protocol values are 64-bit unsigned integers"
    assert UINT_BYTES * 8 == UINT_BITS, "Width must be a whole number of bytes"
    assert HASH_FUNCTION == "SHA-256", "Challenge hash must be SHA-256"
    assert DIGEST_BYTES == 32, "SHA-256 digest is 32 bytes"
    assert 0 < CHALLENGE_BYTES <= DIGEST_BYTES, "Challenge prefix exceeds digest"
    assert CHALLENGE_BYTES == UINT_BYTES, "Challenge prefix must fill one word"
    assert len(TRANSCRIPT_DELIMITER) == 1, "Delimiter must be one character"
    assert not TRANSCRIPT_DELIMITER.isdigit(), "Delimiter cannot be a digit"
    assert SERIALIZATION_FORMAT == "CBOR", "Only CBOR serialization is supported"
    assert PROOF_VERSION >= 1, "Proof version must be positive"
    assert MAX_PROOF_SIZE_BYTES > 0, "Proof size limit must be positive"

    return True


# Auto-validate on import
validate_config()
