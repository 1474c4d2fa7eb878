"""
⚠️ DRAFT — requires crypto review before production use

Security utilities for the Schnorr proof core.

This is a PROTOTYPE implementation for testing and validation.
DO NOT use in production without security audit.
"""

import hmac
import os
import secrets

from .arithmetic import require_order_modulus, require_uint
from .config import UINT_BYTES


# ============================================================================
# RANDOMNESS SOURCE (Fork-Safe)
# ============================================================================


class RandomnessSource:
    """
    Cryptographically secure randomness with fork detection.

    Prevents catastrophic nonce reuse if the process forks: two children
    sharing RNG state would emit the same r, and two proofs with the same r
    and different challenges reveal x.

    Example:
        >>> rng = RandomnessSource()
        >>> r = rng.get_nonce(23)
        >>> assert 0 <= r < 22
    """

    def __init__(self):
        """Initialize randomness source with fork detection."""
        self._pid = os.getpid()
        self._rng = secrets.SystemRandom()

    def _check_fork(self) -> None:
        if os.getpid() != self._pid:
            self.__init__()

    def get_random_scalar(self, max_value: int) -> int:
        """
        Get random scalar in [0, max_value).

        Args:
            max_value: Upper bound (exclusive, must be > 0)

        Returns:
            Random scalar in [0, max_value)

        Raises:
            ValueError: If max_value <= 0
        """
        if isinstance(max_value, bool) or not isinstance(max_value, int):
            raise TypeError(f"max_value must be int, got {type(max_value)}")
        if max_value <= 0:
            raise ValueError(f"max_value must be > 0, got {max_value}")

        self._check_fork()
        return self._rng.randrange(0, max_value)

    def get_nonce(self, p: int) -> int:
        """
        Draw a fresh ephemeral nonce r in [0, p - 1).

        Raises:
            InvalidModulusError: If p <= 1
        """
        require_order_modulus(p)
        return self.get_random_scalar(p - 1)


# ============================================================================
# CONSTANT-TIME OPERATIONS
# ============================================================================


def constant_time_compare(a: bytes, b: bytes) -> bool:
    """
    Constant-time comparison to prevent timing attacks.

    Uses hmac.compare_digest, which takes the same time regardless of where
    the inputs differ.
    """
    return hmac.compare_digest(a, b)


def constant_time_equal_uint(a: int, b: int) -> bool:
    """Compare two unsigned 64-bit ints via fixed-width big-endian encoding."""
    require_uint(a, "a")
    require_uint(b, "b")
    return constant_time_compare(
        a.to_bytes(UINT_BYTES, "big"), b.to_bytes(UINT_BYTES, "big")
    )
