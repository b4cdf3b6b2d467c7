"""Tests for base64 ciphertext files and the decrypt --base64-file option."""

import base64

import pytest
from click.testing import CliRunner

from aes_modes.cli import main
from aes_modes.errors import InvalidBufferLength, InvalidIVLength
from aes_modes.files import decrypt_base64_file, read_base64_file
from aes_modes.golden import SP800_38A_CBC_VECTOR, SP800_38A_ECB_VECTOR
from aes_modes.modes import Mode, ecb_encrypt
from aes_modes.padding import pkcs7_pad

KEY = b"YELLOW SUBMARINE"
MESSAGE = b"I'm back and I'm ringin' the bell, a rockin' on the mike while the fly girls yell"


def write_base64(tmp_path, name: str, data: bytes) -> str:
    """Write data as line-wrapped base64 and return the path."""
    path = tmp_path / name
    path.write_bytes(base64.encodebytes(data))
    return str(path)


class TestReadBase64File:
    """Tests for read_base64_file."""

    def test_line_wrapped(self, tmp_path) -> None:
        data = bytes(range(256))
        assert read_base64_file(write_base64(tmp_path, "data.txt", data)) == data

    def test_invalid_base64(self, tmp_path) -> None:
        path = tmp_path / "bad.txt"
        path.write_text("abc")
        with pytest.raises(ValueError):
            read_base64_file(str(path))

    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(OSError):
            read_base64_file(str(tmp_path / "missing.txt"))


class TestDecryptBase64File:
    """Tests for decrypt_base64_file."""

    def test_ecb_vector(self, tmp_path) -> None:
        vec = SP800_38A_ECB_VECTOR
        path = write_base64(tmp_path, "ecb.txt", vec["ciphertext"])
        assert decrypt_base64_file(path, vec["key"]) == vec["plaintext"]

    def test_cbc_vector(self, tmp_path) -> None:
        vec = SP800_38A_CBC_VECTOR
        path = write_base64(tmp_path, "cbc.txt", vec["ciphertext"])
        assert decrypt_base64_file(path, vec["key"], Mode.CBC, vec["iv"]) == vec["plaintext"]

    def test_padding_left_in_place(self, tmp_path) -> None:
        padded = pkcs7_pad(MESSAGE)
        path = write_base64(tmp_path, "msg.txt", ecb_encrypt(KEY, padded))
        assert decrypt_base64_file(path, KEY) == padded

    def test_partial_block(self, tmp_path) -> None:
        path = write_base64(tmp_path, "short.txt", bytes(17))
        with pytest.raises(InvalidBufferLength):
            decrypt_base64_file(path, KEY)

    def test_cbc_requires_iv(self, tmp_path) -> None:
        path = write_base64(tmp_path, "cbc.txt", bytes(16))
        with pytest.raises(InvalidIVLength):
            decrypt_base64_file(path, KEY, "cbc")


class TestDecryptCommand:
    """Tests for decrypt --base64-file."""

    @pytest.fixture
    def runner(self) -> CliRunner:
        return CliRunner()

    def test_hex_output(self, runner, tmp_path) -> None:
        vec = SP800_38A_ECB_VECTOR
        path = write_base64(tmp_path, "ecb.txt", vec["ciphertext"])
        result = runner.invoke(main, ["decrypt", "--key", vec["key"].hex(), "--base64-file", path])
        assert result.exit_code == 0
        assert result.output.strip() == vec["plaintext"].hex()

    def test_text_output(self, runner, tmp_path) -> None:
        path = write_base64(tmp_path, "msg.txt", ecb_encrypt(KEY, pkcs7_pad(MESSAGE)))
        result = runner.invoke(main, ["decrypt", "--key", KEY.hex(), "--base64-file", path, "--text"])
        assert result.exit_code == 0
        assert MESSAGE.decode() in result.output

    def test_cbc_file(self, runner, tmp_path) -> None:
        vec = SP800_38A_CBC_VECTOR
        path = write_base64(tmp_path, "cbc.txt", vec["ciphertext"])
        result = runner.invoke(
            main,
            ["decrypt", "--mode", "cbc", "--key", vec["key"].hex(), "--iv", vec["iv"].hex(),
             "--base64-file", path],
        )
        assert result.exit_code == 0
        assert result.output.strip() == vec["plaintext"].hex()

    def test_needs_one_input(self, runner, tmp_path) -> None:
        result = runner.invoke(main, ["decrypt"])
        assert result.exit_code == 1
        assert "Give either DATA_HEX or --base64-file" in result.output

        path = write_base64(tmp_path, "ecb.txt", bytes(16))
        result = runner.invoke(main, ["decrypt", "00" * 16, "--base64-file", path])
        assert result.exit_code == 1
        assert "Give either DATA_HEX or --base64-file" in result.output

    def test_missing_file(self, runner, tmp_path) -> None:
        result = runner.invoke(main, ["decrypt", "--base64-file", str(tmp_path / "missing.txt")])
        assert result.exit_code == 1
        assert "Error" in result.output
