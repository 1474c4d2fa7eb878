"""
End-to-end protocol round through the public package API.

A prover and a separate verifier share only (p, g, y) and the serialized
proof; the verifier recomputes the challenge on its own.
"""

import runpy
import threading
from pathlib import Path

import schnorr_zkp
from schnorr_zkp import (
    GroupParameters,
    SchnorrProof,
    generate_challenge,
    generate_commitment,
    generate_response,
    mod_exp,
    prove,
    verify,
    verify_proof,
)

MERSENNE_61 = (1 << 61) - 1


def test_manual_round_matches_scenario():
    p, g, x, r = 23, 5, 6, 4

    y = mod_exp(g, x, p)
    t = generate_commitment(g, r, p)
    c = generate_challenge(t, y, g, p)
    s = generate_response(r, c, x, p)

    assert (y, t, c, s) == (8, 4, 5, 12)
    assert verify_proof(t, y, g, s, c, p)


def test_serialized_proof_crosses_boundary():
    params = GroupParameters(p=MERSENNE_61, g=37)
    x = 987654321987654321
    y = params.public_value(x)

    wire = prove(x, params).serialize()

    # Verifier side: only wire bytes, y and params
    received = SchnorrProof.deserialize(wire)
    c = generate_challenge(received.t, y, params.g, params.p)
    assert verify_proof(received.t, y, params.g, received.s, c, params.p)
    assert verify(received, y, params)


def test_concurrent_rounds_are_independent():
    params = GroupParameters(p=MERSENNE_61, g=37)
    failures = []

    def worker(x):
        y = params.public_value(x)
        for _ in range(20):
            if not verify(prove(x, params), y, params):
                failures.append(x)

    threads = [threading.Thread(target=worker, args=(1000 + i,)) for i in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert failures == []


def test_package_exports():
    for name in ("mod_exp", "generate_commitment", "generate_challenge",
                 "generate_response", "verify_proof", "InvalidModulusError"):
        assert hasattr(schnorr_zkp, name)
    assert schnorr_zkp.__version__ == "0.1.0"


def test_disclaimer(capsys):
    schnorr_zkp.print_disclaimer()
    assert "proof of concept" in capsys.readouterr().err


def test_basic_example_runs(capsys):
    script = Path(__file__).resolve().parent.parent / "examples" / "basic_proof.py"
    runpy.run_path(str(script), run_name="__main__")
    out = capsys.readouterr().out
    assert "Verifier checks g^s == t*y^c mod p: ✓ valid" in out
    assert "Tampered response is rejected:\n   Verified: False" in out
