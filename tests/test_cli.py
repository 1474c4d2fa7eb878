"""
Tests for the schnorr-zkp command-line interface.

Runs every command through click's CliRunner and checks output and exit codes.
"""

import json

import pytest
from click.testing import CliRunner

from schnorr_zkp.cli import main
from schnorr_zkp.protocol import feature_flags

GOLDEN_PROOF_HEX = "a361760161740461730c"


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture(autouse=True)
def reset_validation_mode(monkeypatch: pytest.MonkeyPatch):
    feature_flags.set_validation_mode(None)
    monkeypatch.delenv("SCHNORR_ZKP_VALIDATION", raising=False)
    yield
    feature_flags.set_validation_mode(None)


@pytest.fixture
def params_file(tmp_path):
    path = tmp_path / "group.yaml"
    path.write_text("p: 23\ng: 5\n", encoding="utf-8")
    return str(path)


# ============================================================================
# modexp / challenge
# ============================================================================


def test_version(runner):
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_version_command_prints_disclaimer(runner):
    result = runner.invoke(main, ["version"])
    assert result.exit_code == 0
    assert "schnorr-zkp v0.1.0" in result.output
    assert "proof of concept" in result.output


def test_modexp(runner):
    result = runner.invoke(main, ["modexp", "5", "6", "23"])
    assert result.exit_code == 0
    assert result.output.strip() == "8"


def test_modexp_hex_arguments(runner):
    result = runner.invoke(main, ["modexp", "0x5", "0x6", "0x17"])
    assert result.exit_code == 0
    assert result.output.strip() == "8"


def test_modexp_zero_modulus_fails(runner):
    result = runner.invoke(main, ["modexp", "2", "3", "0"])
    assert result.exit_code == 1
    assert "InvalidModulusError" in result.output


def test_modexp_rejects_negative(runner):
    result = runner.invoke(main, ["modexp", "2", "--", "-3", "23"])
    assert result.exit_code == 2


def test_modexp_rejects_garbage(runner):
    result = runner.invoke(main, ["modexp", "two", "3", "23"])
    assert result.exit_code == 2
    assert "not an integer" in result.output


def test_challenge(runner):
    result = runner.invoke(main, ["challenge", "--t", "4", "--y", "8", "--g", "5", "--p", "23"])
    assert result.exit_code == 0
    assert result.output.strip() == "5"


def test_challenge_small_p_fails(runner):
    result = runner.invoke(main, ["challenge", "--t", "4", "--y", "8", "--g", "5", "--p", "1"])
    assert result.exit_code == 1
    assert "InvalidModulusError" in result.output


# ============================================================================
# prove
# ============================================================================


def test_prove_json(runner):
    result = runner.invoke(
        main,
        ["prove", "--p", "23", "--g", "5", "--x", "6", "--nonce", "4", "--format", "json"],
    )
    assert result.exit_code == 0, result.output

    payload = json.loads(result.output)
    assert payload["y"] == 8
    assert payload["t"] == 4
    assert payload["c"] == 5
    assert payload["s"] == 12
    assert payload["proof"] == GOLDEN_PROOF_HEX


def test_prove_cbor(runner):
    result = runner.invoke(
        main, ["prove", "--p", "23", "--g", "5", "--x", "6", "--nonce", "4", "--format", "cbor"]
    )
    assert result.exit_code == 0
    assert result.output.strip() == GOLDEN_PROOF_HEX


def test_prove_console_table(runner):
    result = runner.invoke(main, ["prove", "--p", "23", "--g", "5", "--x", "6", "--nonce", "4"])
    assert result.exit_code == 0
    assert "Schnorr Proof" in result.output
    assert GOLDEN_PROOF_HEX in result.output


def test_prove_from_params_file(runner, params_file):
    result = runner.invoke(
        main, ["prove", "--params", params_file, "--x", "6", "--nonce", "4", "--format", "cbor"]
    )
    assert result.exit_code == 0
    assert result.output.strip() == GOLDEN_PROOF_HEX


def test_prove_random_nonce_verifies(runner):
    result = runner.invoke(main, ["prove", "--p", "23", "--g", "5", "--x", "6", "--format", "json"])
    assert result.exit_code == 0
    payload = json.loads(result.output)

    verify_result = runner.invoke(
        main,
        ["verify", "--p", "23", "--g", "5", "--y", "8",
         "--t", str(payload["t"]), "--s", str(payload["s"])],
    )
    assert verify_result.exit_code == 0


def test_prove_requires_parameters(runner):
    result = runner.invoke(main, ["prove", "--x", "6"])
    assert result.exit_code == 2
    assert "--p and --g" in result.output


def test_prove_rejects_params_and_flags(runner, params_file):
    result = runner.invoke(main, ["prove", "--params", params_file, "--p", "23", "--x", "6"])
    assert result.exit_code == 2


def test_prove_strict_rejects_composite(runner):
    result = runner.invoke(
        main, ["prove", "--p", "21", "--g", "2", "--x", "3", "--validation", "strict"]
    )
    assert result.exit_code == 1
    assert "not prime" in result.output


def test_prove_witness_out_of_range(runner):
    result = runner.invoke(main, ["prove", "--p", "23", "--g", "5", "--x", "22"])
    assert result.exit_code == 1
    assert "x must be in" in result.output


# ============================================================================
# verify
# ============================================================================


def test_verify_valid(runner):
    result = runner.invoke(
        main, ["verify", "--p", "23", "--g", "5", "--y", "8", "--t", "4", "--s", "12"]
    )
    assert result.exit_code == 0
    assert "Proof valid" in result.output


def test_verify_invalid(runner):
    result = runner.invoke(
        main, ["verify", "--p", "23", "--g", "5", "--y", "8", "--t", "4", "--s", "13"]
    )
    assert result.exit_code == 1
    assert "Proof invalid" in result.output


def test_verify_cbor_proof(runner):
    result = runner.invoke(
        main, ["verify", "--p", "23", "--g", "5", "--y", "8", "--proof", GOLDEN_PROOF_HEX]
    )
    assert result.exit_code == 0


def test_verify_json(runner, params_file):
    result = runner.invoke(
        main,
        ["verify", "--params", params_file, "--y", "8", "--t", "4", "--s", "12", "--format", "json"],
    )
    assert result.exit_code == 0
    assert json.loads(result.output) == {"valid": True, "version": 1, "t": 4, "s": 12}


def test_verify_bad_proof_hex(runner):
    result = runner.invoke(
        main, ["verify", "--p", "23", "--g", "5", "--y", "8", "--proof", "zz"]
    )
    assert result.exit_code == 2


def test_verify_requires_proof(runner):
    result = runner.invoke(main, ["verify", "--p", "23", "--g", "5", "--y", "8", "--t", "4"])
    assert result.exit_code == 2


def test_verify_rejects_proof_and_fields(runner):
    result = runner.invoke(
        main,
        ["verify", "--p", "23", "--g", "5", "--y", "8", "--t", "4", "--proof", GOLDEN_PROOF_HEX],
    )
    assert result.exit_code == 2


def test_verify_small_p_fails(runner):
    result = runner.invoke(
        main,
        ["verify", "--p", "1", "--g", "1", "--y", "1", "--t", "1", "--s", "1",
         "--validation", "none"],
    )
    assert result.exit_code == 1
    assert "InvalidModulusError" in result.output
