# -*- coding: utf-8 -*-
from __future__ import annotations

import hashlib
import json
from pathlib import Path
from typing import Any, Dict, List

from ..arithmetic import mod_exp
from ..config import CHALLENGE_BYTES, HASH_FUNCTION, TRANSCRIPT_DELIMITER, UINT_BITS
from ..schnorr import generate_commitment, generate_response, verify_proof
from ..transcript import build_transcript, challenge_from_digest

VECTOR_FILE = Path(__file__).with_name("golden_vectors.json")

_INPUT_FIELDS = ("p", "g", "x", "r")
_EXPECTED_FIELDS = ("y", "t", "transcript", "digest_prefix_hex", "c", "s")


def load_vectors(path: Path = VECTOR_FILE) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as handle:
        return json.load(handle)


def compute_expected(vector: Dict[str, Any]) -> Dict[str, Any]:
    p = _require_int(vector.get("p"), "p")
    g = _require_int(vector.get("g"), "g")
    x = _require_int(vector.get("x"), "x")
    r = _require_int(vector.get("r"), "r")

    y = mod_exp(g, x, p)
    t = generate_commitment(g, r, p)
    transcript = build_transcript(t, y, g, p)
    digest = hashlib.sha256(transcript).digest()
    c = challenge_from_digest(digest, p)
    s = generate_response(r, c, x, p)

    return {
        "y": y,
        "t": t,
        "transcript": transcript.decode("ascii"),
        "digest_prefix_hex": digest[:CHALLENGE_BYTES].hex(),
        "c": c,
        "s": s,
    }


def validate_vectors(data: Dict[str, Any]) -> List[str]:
    errors: List[str] = []
    if data.get("version") != "1.0":
        errors.append("version must be 1.0")
    if data.get("hash") != HASH_FUNCTION:
        errors.append(f"hash must be {HASH_FUNCTION}")
    if data.get("delimiter") != TRANSCRIPT_DELIMITER:
        errors.append(f"delimiter must be {TRANSCRIPT_DELIMITER!r}")
    if data.get("width_bits") != UINT_BITS:
        errors.append(f"width_bits must be {UINT_BITS}")

    vectors = data.get("vectors")
    if not isinstance(vectors, list) or not vectors:
        errors.append("vectors must be a non-empty list")
        return errors

    for index, vector in enumerate(vectors):
        label = f"vectors[{index}]"
        if not isinstance(vector, dict):
            errors.append(f"{label} must be an object")
            continue
        label = f"{label} ({vector.get('name', '?')})"

        missing = [name for name in _INPUT_FIELDS if name not in vector]
        if missing:
            errors.append(f"{label} missing inputs: {', '.join(missing)}")
            continue

        expected = vector.get("expected")
        if not isinstance(expected, dict):
            errors.append(f"{label}.expected must be an object")
            continue

        try:
            actual = compute_expected(vector)
        except (TypeError, ValueError, ArithmeticError) as exc:
            errors.append(f"{label} cannot be computed: {exc}")
            continue

        for name in _EXPECTED_FIELDS:
            if expected.get(name) != actual[name]:
                errors.append(
                    f"{label}.expected.{name} mismatch: "
                    f"file has {expected.get(name)!r}, computed {actual[name]!r}"
                )

        if not verify_proof(actual["t"], actual["y"], vector["g"], actual["s"], actual["c"], vector["p"]):
            errors.append(f"{label} does not verify")

    return errors


def _require_int(value: Any, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{label} must be an integer")
    return value
