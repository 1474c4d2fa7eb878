"""Public API for the Schnorr discrete-log proof core."""
from __future__ import annotations

from .arithmetic import is_probable_prime, mod_exp, mul_mod
from .exceptions import (
    ConfigurationError,
    InvalidModulusError,
    ParameterValidationError,
    ProofGenerationError,
    ProofVerificationError,
    SchnorrZKPError,
    SerializationError,
)
from .feature_flags import get_validation_mode, set_validation_mode
from .parameters import GroupParameters, load_parameters
from .schnorr import (
    generate_commitment,
    generate_response,
    prove,
    public_key,
    verify,
    verify_proof,
)
from .security import RandomnessSource
from .transcript import build_transcript, generate_challenge
from .types import SchnorrProof

__all__ = [
    "mod_exp",
    "mul_mod",
    "is_probable_prime",
    "generate_commitment",
    "generate_challenge",
    "generate_response",
    "verify_proof",
    "build_transcript",
    "public_key",
    "prove",
    "verify",
    "GroupParameters",
    "load_parameters",
    "SchnorrProof",
    "RandomnessSource",
    "get_validation_mode",
    "set_validation_mode",
    "SchnorrZKPError",
    "InvalidModulusError",
    "ParameterValidationError",
    "ProofGenerationError",
    "ProofVerificationError",
    "SerializationError",
    "ConfigurationError",
]
