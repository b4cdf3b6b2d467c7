"""Tests for the click command-line interface."""

import json

import pytest
from click.testing import CliRunner

from aes_modes import DEFAULT_CT_HEX, DEFAULT_KEY_HEX, DEFAULT_PT_HEX
from aes_modes.cli import main
from aes_modes.golden import SP800_38A_CBC_VECTOR


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


class TestEncryptDecrypt:
    """Tests for the encrypt/decrypt commands."""

    def test_encrypt_defaults_to_fips_vector(self, runner) -> None:
        result = runner.invoke(main, ["encrypt"])
        assert result.exit_code == 0
        assert result.output.strip() == DEFAULT_CT_HEX

    def test_decrypt_fips_vector(self, runner) -> None:
        result = runner.invoke(main, ["decrypt", DEFAULT_CT_HEX])
        assert result.exit_code == 0
        assert result.output.strip() == DEFAULT_PT_HEX

    def test_cbc_round_trip(self, runner) -> None:
        vec = SP800_38A_CBC_VECTOR
        args = ["--mode", "cbc", "--key", vec["key"].hex(), "--iv", vec["iv"].hex()]

        enc = runner.invoke(main, ["encrypt", *args, vec["plaintext"].hex()])
        assert enc.exit_code == 0
        assert enc.output.strip() == vec["ciphertext"].hex()

        dec = runner.invoke(main, ["decrypt", *args, vec["ciphertext"].hex()])
        assert dec.exit_code == 0
        assert dec.output.strip() == vec["plaintext"].hex()

    def test_pad_flag(self, runner) -> None:
        result = runner.invoke(main, ["encrypt", "--pad", "00"])
        assert result.exit_code == 0
        assert len(result.output.strip()) == 32

    def test_verbose_shows_rounds_and_verdict(self, runner) -> None:
        result = runner.invoke(main, ["encrypt", "--verbose"])
        assert result.exit_code == 0
        assert "MixColumns" in result.output
        assert "[OK] PASS" in result.output

    def test_trace_file(self, runner, tmp_path) -> None:
        trace = tmp_path / "trace.jsonl"
        result = runner.invoke(main, ["encrypt", "--trace", str(trace)])
        assert result.exit_code == 0
        lines = trace.read_text().splitlines()
        assert len(lines) == 40
        assert json.loads(lines[-1])["state"] == DEFAULT_CT_HEX

    def test_bad_key_length(self, runner) -> None:
        result = runner.invoke(main, ["encrypt", "--key", "00" * 15])
        assert result.exit_code == 1
        assert "Key must be 16 bytes" in result.output

    def test_bad_buffer_length(self, runner) -> None:
        result = runner.invoke(main, ["encrypt", "00" * 17])
        assert result.exit_code == 1
        assert "multiple of 16" in result.output

    def test_bad_iv_length(self, runner) -> None:
        result = runner.invoke(main, ["encrypt", "--mode", "cbc", "--iv", "00" * 10])
        assert result.exit_code == 1
        assert "IV must be 16 bytes" in result.output

    def test_cbc_without_iv(self, runner) -> None:
        result = runner.invoke(main, ["encrypt", "--mode", "cbc"])
        assert result.exit_code == 1
        assert "--iv is required" in result.output

    def test_invalid_hex(self, runner) -> None:
        result = runner.invoke(main, ["decrypt", "zz"])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestOtherCommands:
    """Tests for list-modes, validate and oracle."""

    def test_list_modes(self, runner) -> None:
        result = runner.invoke(main, ["list-modes"])
        assert result.exit_code == 0
        assert "ecb" in result.output
        assert "cbc" in result.output

    def test_validate(self, runner) -> None:
        result = runner.invoke(main, ["validate", "--n", "5", "--seed", "1"])
        assert result.exit_code == 0
        assert "VALIDATION PASSED" in result.output

    def test_oracle(self, runner) -> None:
        result = runner.invoke(main, ["oracle", "--n", "50", "--seed", "42"])
        assert result.exit_code == 0
        assert "Overall accuracy: 100.0%" in result.output

    def test_version(self, runner) -> None:
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "0.1.0" in result.output
