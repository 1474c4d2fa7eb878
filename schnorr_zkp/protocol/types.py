"""
⚠️ DRAFT — requires crypto review before production use

Proof artifact for the non-interactive Schnorr protocol.

This is a PROTOTYPE implementation for testing and validation.
DO NOT use in production without security audit.

The proof is the pair (t, s). The challenge c is not transmitted: any
verifier recomputes it from (t, y, g, p).

Serialization:
    - Primary: CBOR map {"v": version, "t": t, "s": s}
    - Compatibility: JSON via to_dict() / from_dict()
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict

try:
    import cbor2
except ImportError:
    raise ImportError(
        "cbor2 is required for proof serialization. "
        "Install with: pip install cbor2"
    )

from .arithmetic import require_uint
from .config import MAX_PROOF_SIZE_BYTES, PROOF_VERSION
from .exceptions import SerializationError
from .parameters import GroupParameters
from .transcript import generate_challenge


def _check_version(version: Any) -> None:
    # bool is an int subclass and True == 1
    if isinstance(version, bool) or version != PROOF_VERSION:
        raise ValueError(
            f"Unsupported proof version: {version!r} "
            f"(expected {PROOF_VERSION})"
        )


@dataclass(frozen=True)
class SchnorrProof:
    """
    Non-interactive proof of knowledge of x with y = g^x mod p.

    Attributes:
        t: Commitment g^r mod p
        s: Response (r + c*x) mod (p - 1)
        version: Proof format version

    Example:
        >>> proof = SchnorrProof(t=4, s=12)
        >>> restored = SchnorrProof.deserialize(proof.serialize())
        >>> assert restored == proof
    """

    t: int
    s: int
    version: int = field(default=PROOF_VERSION)

    def __post_init__(self):
        require_uint(self.t, "t")
        require_uint(self.s, "s")
        _check_version(self.version)

    def challenge(self, y: int, params: GroupParameters) -> int:
        """Recompute the Fiat-Shamir challenge for this proof."""
        return generate_challenge(self.t, y, params.g, params.p)

    # ========================================================================
    # SERIALIZATION (CBOR)
    # ========================================================================

    def serialize(self) -> bytes:
        """
        Serialize proof to bytes using CBOR.

        Returns:
            bytes: CBOR-encoded proof

        Raises:
            SerializationError: If serialization fails
        """
        try:
            data = {
                "v": self.version,
                "t": self.t,
                "s": self.s,
            }
            return cbor2.dumps(data)
        except Exception as e:
            raise SerializationError(f"Failed to serialize proof: {e}") from e

    @classmethod
    def deserialize(cls, data: bytes) -> "SchnorrProof":
        """
        Deserialize proof from CBOR bytes.

        Args:
            data: CBOR-encoded proof bytes

        Returns:
            SchnorrProof: Deserialized proof instance

        Raises:
            ValueError: If version is unsupported or fields are invalid
            SerializationError: If data is oversized or not valid CBOR
        """
        if not isinstance(data, (bytes, bytearray)):
            raise TypeError(f"data must be bytes, got {type(data)}")

        if len(data) > MAX_PROOF_SIZE_BYTES:
            raise SerializationError(
                f"Proof too large: {len(data)} bytes "
                f"(limit {MAX_PROOF_SIZE_BYTES})"
            )

        try:
            obj = cbor2.loads(bytes(data))
        except Exception as e:
            raise SerializationError(f"Failed to deserialize proof: {e}") from e

        if not isinstance(obj, dict):
            raise ValueError("Invalid proof format: expected a map")

        return cls.from_dict(obj, version_key="v", require_version=True)

    # ========================================================================
    # DICT / JSON
    # ========================================================================

    def to_dict(self) -> Dict[str, int]:
        """Convert to a JSON-compatible dictionary (decimal ints)."""
        return {"version": self.version, "t": self.t, "s": self.s}

    @classmethod
    def from_dict(
        cls,
        obj: Mapping[str, Any],
        version_key: str = "version",
        require_version: bool = False,
    ) -> "SchnorrProof":
        """
        Build a proof from a mapping with 't', 's' and a version.

        The version defaults to PROOF_VERSION unless require_version is set,
        as it is for CBOR payloads.

        Raises:
            ValueError: If obj is not a mapping, or fields are missing or invalid
        """
        if not isinstance(obj, Mapping):
            raise ValueError(
                f"Invalid proof format: expected a mapping, got {type(obj).__name__}"
            )

        required = {"t", "s", version_key} if require_version else {"t", "s"}
        missing = required - set(obj.keys())
        if missing:
            raise ValueError(
                f"Invalid proof format: missing required fields {sorted(missing)}"
            )

        version = obj.get(version_key, PROOF_VERSION)
        _check_version(version)

        try:
            return cls(t=obj["t"], s=obj["s"], version=version)
        except TypeError as e:
            raise ValueError(f"Invalid proof format: {e}") from e
