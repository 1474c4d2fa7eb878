"""
Unit tests for Fiat-Shamir challenge derivation.
"""

import hashlib

import pytest

from schnorr_zkp.protocol.config import UINT_MAX
from schnorr_zkp.protocol.exceptions import InvalidModulusError
from schnorr_zkp.protocol.transcript import (
    build_transcript,
    challenge_from_digest,
    generate_challenge,
)


def test_transcript_is_comma_separated_decimal():
    assert build_transcript(4, 8, 5, 23) == b"4,8,5,23"


def test_transcript_has_no_padding():
    assert build_transcript(0, 0, 1, 2) == b"0,0,1,2"
    assert build_transcript(UINT_MAX, 1, 2, 3) == (
        b"18446744073709551615,1,2,3"
    )


def test_transcript_order_matters():
    assert build_transcript(4, 8, 5, 23) != build_transcript(8, 4, 5, 23)


def test_golden_challenge():
    assert generate_challenge(4, 8, 5, 23) == 5


def test_golden_challenge_digest_prefix():
    digest = hashlib.sha256(b"4,8,5,23").digest()
    assert digest[:8].hex() == "3240fb451a9d5723"
    assert challenge_from_digest(digest, 23) == 0x3240FB451A9D5723 % 22


def test_challenge_is_deterministic():
    first = generate_challenge(7138, 6750, 7, 7919)
    second = generate_challenge(7138, 6750, 7, 7919)
    assert first == second == 5441


def test_challenge_depends_on_every_field():
    assert generate_challenge(229, 132, 2, 467) == 110
    # Challenges are reduced mod p - 1 and can collide; digests cannot
    digests = {
        hashlib.sha256(build_transcript(*fields)).digest()
        for fields in [(229, 132, 2, 467), (230, 132, 2, 467),
                       (229, 133, 2, 467), (229, 132, 3, 467),
                       (229, 132, 2, 468)]
    }
    assert len(digests) == 5


@pytest.mark.parametrize("p", [2, 3, 23, 1019, UINT_MAX])
def test_challenge_in_range(p):
    c = generate_challenge(1, 1, 1, p)
    assert 0 <= c < p - 1


def test_p_equal_two_gives_zero_challenge():
    assert generate_challenge(1, 1, 1, 2) == 0


@pytest.mark.parametrize("p", [0, 1])
def test_small_p_raises(p):
    with pytest.raises(InvalidModulusError):
        generate_challenge(4, 8, 5, p)


def test_small_p_is_arithmetic_error():
    with pytest.raises(ArithmeticError):
        generate_challenge(4, 8, 5, 1)


def test_digest_size_checked():
    with pytest.raises(ValueError, match="Invalid digest size"):
        challenge_from_digest(b"\x00" * 8, 23)


def test_digest_type_checked():
    with pytest.raises(TypeError):
        challenge_from_digest("00" * 32, 23)


def test_out_of_width_input_rejected():
    with pytest.raises(ValueError):
        generate_challenge(UINT_MAX + 1, 8, 5, 23)
