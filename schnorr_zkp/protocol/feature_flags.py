"""
Parameter validation modes for the convenience prover and verifier.

prove() and verify() check GroupParameters before touching the secret or the
proof. How much they check is a mode:

    none    trust the caller; only p <= 1 is refused, as in the core ops
    basic   p > 1, g in (0, p), x / nonce / y inside the group
    strict  basic plus a deterministic Miller-Rabin primality test on p

The mode comes from, in order: the call's ``validation`` argument, an
in-process override (set_validation_mode, used by tests), the
SCHNORR_ZKP_VALIDATION environment variable, then "basic".

WARNING: "none" leaves the verification equation meaningful only if the
caller already trusts (p, g).
"""

from __future__ import annotations

import os
from typing import Final

VALIDATION_MODES: Final[tuple[str, ...]] = ("none", "basic", "strict")
DEFAULT_VALIDATION_MODE: Final[str] = "basic"
VALIDATION_ENV_VAR: Final[str] = "SCHNORR_ZKP_VALIDATION"

_mode_override: str | None = None


def _parse_mode(value: object, source: str) -> str | None:
    """Return the canonical mode name, or None when value means 'unset'."""
    if value is None:
        return None

    if not isinstance(value, str):
        raise ValueError(
            f"Unknown validation mode {value!r} from {source}; "
            f"expected one of {', '.join(VALIDATION_MODES)}"
        )

    mode = value.strip().lower()
    if not mode:
        return None

    if mode not in VALIDATION_MODES:
        raise ValueError(
            f"Unknown validation mode {value!r} from {source}; "
            f"expected one of {', '.join(VALIDATION_MODES)}"
        )
    return mode


def get_validation_mode(prefer: str | None = None) -> str:
    """
    Resolve the validation mode for one prove()/verify() call.

    Args:
        prefer: Mode requested by the caller, if any.

    Raises:
        ValueError: If any consulted source names an unknown mode.
    """
    # Later sources are only read when earlier ones are unset
    mode = _parse_mode(prefer, "validation argument")
    if mode is None:
        mode = _mode_override
    if mode is None:
        mode = _parse_mode(os.getenv(VALIDATION_ENV_VAR), f"${VALIDATION_ENV_VAR}")
    return mode if mode is not None else DEFAULT_VALIDATION_MODE


def set_validation_mode(value: str | None) -> None:
    """Force a mode for this process; None or "" clears it (testing only)."""
    global _mode_override
    _mode_override = _parse_mode(value, "set_validation_mode")
