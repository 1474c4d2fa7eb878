"""
Basic Schnorr Proof Example

This example walks through one non-interactive protocol round step by step,
then repeats it with the convenience prover/verifier and a fresh nonce,
and shows a tampered response being rejected.
"""

from pathlib import Path

from schnorr_zkp import (
    SchnorrProof,
    generate_challenge,
    generate_commitment,
    generate_response,
    load_parameters,
    mod_exp,
    prove,
    verify,
    verify_proof,
)

PARAMS_FILE = Path(__file__).with_name("group.yaml")


def main():
    """Run the basic proof example."""

    print("\n" + "=" * 70)
    print("Schnorr Proof of Knowledge - Basic Example")
    print("=" * 70)

    params = load_parameters(PARAMS_FILE)
    params.validate(strict=True)
    p, g = params.p, params.g
    print(f"\n1. Loaded group parameters: p={p}, g={g}")

    x = 6
    y = mod_exp(g, x, p)
    print(f"\n2. Prover's secret x={x}, public value y=g^x mod p={y}")

    r = 4
    t = generate_commitment(g, r, p)
    print(f"\n3. Commitment t=g^r mod p={t} (nonce r={r}, fixed for the demo)")

    c = generate_challenge(t, y, g, p)
    print(f"\n4. Challenge c=H(t,y,g,p) mod (p-1)={c}")

    s = generate_response(r, c, x, p)
    print(f"\n5. Response s=(r + c*x) mod (p-1)={s}")

    ok = verify_proof(t, y, g, s, c, p)
    print(f"\n6. Verifier checks g^s == t*y^c mod p: {'✓ valid' if ok else '✗ invalid'}")

    print("\n7. Same statement with a fresh random nonce:")
    proof = prove(x, params)
    wire = proof.serialize()
    print(f"   Proof (t={proof.t}, s={proof.s}), CBOR {wire.hex()}")
    received = SchnorrProof.deserialize(wire)
    print(f"   Verified: {verify(received, y, params)}")

    print("\n8. Tampered response is rejected:")
    forged = SchnorrProof(t=received.t, s=(received.s + 1) % params.group_order)
    print(f"   Verified: {verify(forged, y, params)}")

    print("\n" + "=" * 70)


if __name__ == "__main__":
    main()
