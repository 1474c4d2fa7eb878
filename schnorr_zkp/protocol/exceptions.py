"""
⚠️ DRAFT — requires crypto review before production use

Custom exceptions for the Schnorr proof core.

These exceptions provide structured error handling for protocol operations.
"""


class SchnorrZKPError(Exception):
    """Base exception for Schnorr proof errors."""

    pass


class InvalidModulusError(SchnorrZKPError, ZeroDivisionError):
    """Modulus is zero, or p <= 1 where p - 1 is used as a divisor."""

    pass


class ParameterValidationError(SchnorrZKPError, ValueError):
    """Group parameters violate a stated precondition."""

    pass


class ProofGenerationError(SchnorrZKPError):
    """Error during proof generation."""

    pass


class ProofVerificationError(SchnorrZKPError):
    """Error during proof verification."""

    pass


class SerializationError(SchnorrZKPError):
    """Proof encoding or decoding error."""

    pass


class ConfigurationError(SchnorrZKPError):
    """Configuration error."""

    pass
