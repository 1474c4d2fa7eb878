"""
⚠️ DRAFT — requires crypto review before production use

Fixed-width modular arithmetic for the Schnorr proof core.

This is a PROTOTYPE implementation for testing and validation.
DO NOT use in production without security audit.

All public values are unsigned 64-bit integers. Products such as
result*base or base*base can reach 128 bits before reduction; Python ints
hold them exactly, so every reduction is applied to the true product and no
wraparound is possible.
"""

from .config import MILLER_RABIN_BASES, UINT_BITS, UINT_MAX
from .exceptions import InvalidModulusError


# ============================================================================
# INPUT VALIDATION
# ============================================================================


def require_uint(value: int, name: str) -> int:
    """
    Check that value is an unsigned integer within the protocol width.

    Args:
        value: Value to check
        name: Field name used in error messages

    Returns:
        The value, unchanged

    Raises:
        TypeError: If value is not an int (bool is rejected)
        ValueError: If value is negative or wider than UINT_BITS
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be int, got {type(value)}")

    if not (0 <= value <= UINT_MAX):
        raise ValueError(
            f"{name} must be in [0, 2^{UINT_BITS} - 1], got {value}"
        )

    return value


def require_modulus(modulus: int, name: str = "modulus") -> int:
    """Validate a modulus and reject zero."""
    require_uint(modulus, name)
    if modulus == 0:
        raise InvalidModulusError(f"{name} must be non-zero")
    return modulus


def require_order_modulus(p: int) -> int:
    """
    Validate p for operations that reduce modulo (p - 1).

    Raises:
        InvalidModulusError: If p <= 1
    """
    require_uint(p, "p")
    if p <= 1:
        raise InvalidModulusError(f"p must be > 1 to reduce modulo p - 1, got {p}")
    return p


# ============================================================================
# MODULAR ARITHMETIC
# ============================================================================


def mul_mod(a: int, b: int, modulus: int) -> int:
    """
    Compute (a * b) mod modulus without truncating the product.

    Operands are reduced first so the product never exceeds
    (modulus - 1)^2, i.e. at most 2 * UINT_BITS bits.
    """
    return ((a % modulus) * (b % modulus)) % modulus


def mod_exp(base: int, exp: int, modulus: int) -> int:
    """
    Compute base^exp mod modulus by binary square-and-multiply.

    Walks the bits of exp from least to most significant. On each set bit
    the accumulator is multiplied by the current power of base; the power is
    squared every iteration. O(log exp) multiplications.

    Args:
        base: Base (unsigned 64-bit)
        exp: Exponent (unsigned 64-bit)
        modulus: Modulus (unsigned 64-bit, non-zero)

    Returns:
        base^exp mod modulus

    Raises:
        InvalidModulusError: If modulus == 0
        TypeError: If an argument is not an int
        ValueError: If an argument is outside the 64-bit unsigned range

    Example:
        >>> mod_exp(5, 6, 23)
        8
        >>> mod_exp(0, 0, 7)
        1
        >>> mod_exp(9, 0, 1)
        0
    """
    require_uint(base, "base")
    require_uint(exp, "exp")
    require_modulus(modulus)

    # 1 mod modulus: exponent-zero convention, and 0 when modulus == 1
    result = 1 % modulus
    power = base % modulus

    while exp > 0:
        if exp & 1:
            result = (result * power) % modulus
        exp >>= 1
        power = (power * power) % modulus

    return result


# ============================================================================
# PRIMALITY (optional parameter validation)
# ============================================================================


def is_probable_prime(n: int) -> bool:
    """
    Deterministic Miller-Rabin primality test for 64-bit integers.

    The witness set in MILLER_RABIN_BASES is exact for all n < 3.3 * 10^24,
    which covers the whole unsigned 64-bit range.

    Args:
        n: Candidate (unsigned 64-bit)

    Returns:
        True if n is prime, False otherwise
    """
    require_uint(n, "n")

    if n < 2:
        return False

    for small in MILLER_RABIN_BASES:
        if n == small:
            return True
        if n % small == 0:
            return False

    d = n - 1
    rounds = 0
    while d % 2 == 0:
        d //= 2
        rounds += 1

    for a in MILLER_RABIN_BASES:
        x = mod_exp(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(rounds - 1):
            x = mul_mod(x, x, n)
            if x == n - 1:
                break
        else:
            return False

    return True
