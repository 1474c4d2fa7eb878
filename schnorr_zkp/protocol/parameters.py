"""
⚠️ DRAFT — requires crypto review before production use

Public group parameters (p, g) for the Schnorr proof core.

This is a PROTOTYPE implementation for testing and validation.
DO NOT use in production without security audit.

The core operations never validate p or g: soundness and zero-knowledge
rest on p being prime and g generating the group, and that is the caller's
job. GroupParameters.validate() offers an opt-in check of the stated
preconditions; strict mode adds a primality test. Generator order is not
checked (it would require factoring p - 1).

Parameter files are YAML:

    p: 23
    g: 5
"""

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Union

try:
    import yaml
except ImportError:
    raise ImportError(
        "PyYAML is required for parameter files. "
        "Install with: pip install pyyaml"
    )

from .arithmetic import is_probable_prime, mod_exp, require_uint
from .config import UINT_MAX
from .exceptions import ConfigurationError, ParameterValidationError

# Largest prime below 2^64 (2^64 - 59)
LARGEST_U64_PRIME = UINT_MAX - 58


def parse_uint(value: Any, name: str) -> int:
    """
    Coerce an int, decimal string, or 0x-prefixed hex string to a uint.

    Raises:
        TypeError: If value is neither int nor str
        ValueError: If the string is not a number or out of range
    """
    if isinstance(value, str):
        text = value.strip().replace("_", "")
        try:
            if text.lower().startswith("0x"):
                value = int(text[2:], 16)
            else:
                value = int(text, 10)
        except ValueError:
            raise ValueError(f"{name} is not an integer: {value!r}") from None

    return require_uint(value, name)


@dataclass(frozen=True)
class GroupParameters:
    """
    Public parameters of the multiplicative group mod p.

    Attributes:
        p: Field modulus (treated as prime)
        g: Generator of the multiplicative group mod p

    Example:
        >>> params = GroupParameters(p=23, g=5)
        >>> params.validate(strict=True)
        True
        >>> params.group_order
        22
    """

    p: int
    g: int

    @property
    def group_order(self) -> int:
        """Exponent modulus p - 1 used for challenges and responses."""
        return self.p - 1

    def validate(self, strict: bool = False) -> bool:
        """
        Check the stated preconditions on (p, g).

        Args:
            strict: Also require p to be prime (Miller-Rabin)

        Returns:
            True if the parameters pass

        Raises:
            ParameterValidationError: If a precondition is violated
        """
        try:
            require_uint(self.p, "p")
            require_uint(self.g, "g")
        except (TypeError, ValueError) as e:
            raise ParameterValidationError(str(e)) from e

        if self.p <= 1:
            raise ParameterValidationError(f"p must be > 1, got {self.p}")

        if not (0 < self.g < self.p):
            raise ParameterValidationError(
                f"g must be in (0, p), got g={self.g}, p={self.p}"
            )

        if strict and not is_probable_prime(self.p):
            raise ParameterValidationError(f"p is not prime: {self.p}")

        return True

    def public_value(self, x: int) -> int:
        """Compute y = g^x mod p for a caller-supplied secret x."""
        return mod_exp(self.g, x, self.p)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "GroupParameters":
        """
        Build parameters from a mapping with keys 'p' and 'g'.

        Values may be ints or decimal / 0x-hex strings.

        Raises:
            ConfigurationError: If keys are missing or values malformed
        """
        if not isinstance(mapping, Mapping):
            raise ConfigurationError(
                f"parameters must be a mapping, got {type(mapping).__name__}"
            )

        missing = {"p", "g"} - set(mapping.keys())
        if missing:
            raise ConfigurationError(f"Missing parameter keys: {sorted(missing)}")

        try:
            return cls(p=parse_uint(mapping["p"], "p"), g=parse_uint(mapping["g"], "g"))
        except (TypeError, ValueError) as e:
            raise ConfigurationError(f"Invalid parameter value: {e}") from e

    def to_dict(self) -> dict:
        return {"p": self.p, "g": self.g}


def load_parameters(path: Union[str, Path]) -> GroupParameters:
    """
    Load group parameters from a YAML file.

    Args:
        path: Path to a YAML document with 'p' and 'g'

    Returns:
        GroupParameters (not validated; call validate() as needed)

    Raises:
        ConfigurationError: If the file is unreadable or malformed
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle)
    except OSError as e:
        raise ConfigurationError(f"Cannot read parameter file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        raise ConfigurationError(f"Parameter file {path} is empty")

    return GroupParameters.from_mapping(data)
