from __future__ import annotations

from schnorr_zkp.protocol.test_vectors import golden_vectors


def main() -> int:
    data = golden_vectors.load_vectors()
    errors = golden_vectors.validate_vectors(data)
    if errors:
        for error in errors:
            print(f"golden_vectors.json: {error}")
        return 1
    print("golden_vectors.json: OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
