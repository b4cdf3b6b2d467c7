"""Tests for repeating-key XOR and its key recovery."""

import base64

import pytest
from click.testing import CliRunner

from aes_modes.cli import main
from aes_modes.files import break_xor_file
from aes_modes.xor import (
    MAX_KEY_SIZE,
    MIN_KEY_SIZE,
    XorGuess,
    break_repeating_key_xor,
    break_single_byte_xor,
    fixed_xor,
    guess_key_size,
    hamming_distance,
    key_size_scores,
    repeating_key_xor,
    score_english,
)

PASSAGE = (
    b"It was the best of times, it was the worst of times, it was the age of "
    b"wisdom, it was the age of foolishness, it was the epoch of belief, it was "
    b"the epoch of incredulity, it was the season of Light, it was the season of "
    b"Darkness, it was the spring of hope, it was the winter of despair, we had "
    b"everything before us, we had nothing before us, we were all going direct "
    b"to Heaven, we were all going direct the other way. In short, the period "
    b"was so far like the present period, that some of its noisiest authorities "
    b"insisted on its being received, for good or for evil, in the superlative "
    b"degree of comparison only. There were a king with a large jaw and a queen "
    b"with a plain face, on the throne of England; there were a king with a "
    b"large jaw and a queen with a fair face, on the throne of France. In both "
    b"countries it was clearer than crystal to the lords of the State preserves "
    b"of loaves and fishes, that things in general were settled for ever."
)

KEY = bytes.fromhex("8f12e4573b")


class TestXorCiphers:
    """Tests for fixed and repeating-key XOR."""

    def test_fixed_xor_vector(self) -> None:
        a = bytes.fromhex("1c0111001f010100061a024b53535009181c")
        b = bytes.fromhex("686974207468652062756c6c277320657965")
        assert fixed_xor(a, b).hex() == "746865206b696420646f6e277420706c6179"

    def test_fixed_xor_length_mismatch(self) -> None:
        with pytest.raises(ValueError, match="Length mismatch"):
            fixed_xor(b"AAAA", b"AAA")

    def test_repeating_key_vector(self) -> None:
        plaintext = b"Burning 'em, if you ain't quick and nimble\nI go crazy when I hear a cymbal"
        expected = (
            "0b3637272a2b2e63622c2e69692a23693a2a3c6324202d623d63343c2a2622632427"
            "2765272a282b2f20430a652e2c652a3124333a653e2b2027630c692b202831652863"
            "26302e27282f"
        )
        assert repeating_key_xor(plaintext, b"ICE").hex() == expected

    def test_repeating_key_is_involution(self) -> None:
        assert repeating_key_xor(repeating_key_xor(PASSAGE, KEY), KEY) == PASSAGE

    def test_empty_key(self) -> None:
        with pytest.raises(ValueError, match="Key must not be empty"):
            repeating_key_xor(b"data", b"")


class TestKeySize:
    """Tests for Hamming distance and key-size estimation."""

    def test_hamming_distance(self) -> None:
        assert hamming_distance(b"this is a test", b"wokka wokka!!!") == 37
        assert hamming_distance(b"HELLO", b"JELLO") == 1
        assert hamming_distance(b"AAAAA", b"JJJJA") == 12
        assert hamming_distance(b"", b"") == 0

    def test_hamming_length_mismatch(self) -> None:
        with pytest.raises(ValueError, match="Length mismatch"):
            hamming_distance(b"AAAA", b"AAA")

    def test_scores_cover_default_range(self) -> None:
        scores = key_size_scores(repeating_key_xor(PASSAGE, KEY))
        assert min(scores) == MIN_KEY_SIZE
        assert max(scores) == MAX_KEY_SIZE

    def test_scores_skip_sizes_without_two_chunks(self) -> None:
        scores = key_size_scores(bytes(10))
        assert sorted(scores) == [2, 3, 4, 5]

    def test_key_size_scores_lowest_on_multiples(self) -> None:
        scores = key_size_scores(repeating_key_xor(PASSAGE, KEY))
        assert scores[5] < scores[4]
        assert scores[5] < scores[6]
        assert scores[10] < scores[9]

    def test_guess_key_size(self) -> None:
        assert guess_key_size(repeating_key_xor(PASSAGE, KEY)) == len(KEY)

    def test_guess_key_size_too_short(self) -> None:
        with pytest.raises(ValueError, match="too short"):
            guess_key_size(b"abc")

    def test_bad_range(self) -> None:
        with pytest.raises(ValueError, match="Bad key size range"):
            key_size_scores(PASSAGE, 10, 2)


class TestKeyRecovery:
    """Tests for frequency-analysis key recovery."""

    def test_score_prefers_english(self) -> None:
        assert score_english(b"the quick brown fox") > score_english(bytes(range(19)))
        assert score_english(b"") == 0.0

    def test_single_byte_vector(self) -> None:
        ct = bytes.fromhex("1b37373331363f78151b7f2b783431333d78397828372d363c78373e783a393b3736")
        guess = break_single_byte_xor(ct)
        assert isinstance(guess, XorGuess)
        assert guess.key == 0x58
        assert guess.plaintext == b"Cooking MC's like a pound of bacon"

    def test_break_with_guessed_size(self) -> None:
        assert break_repeating_key_xor(repeating_key_xor(PASSAGE, KEY)) == KEY

    def test_break_with_known_size(self) -> None:
        ct = repeating_key_xor(PASSAGE, b"ICE")
        assert break_repeating_key_xor(ct, key_size=3) == b"ICE"

    def test_break_bad_size(self) -> None:
        with pytest.raises(ValueError, match="Key size must be positive"):
            break_repeating_key_xor(PASSAGE, key_size=0)


class TestXorFiles:
    """Tests for breaking base64 repeating-key XOR files."""

    @pytest.fixture
    def xor_file(self, tmp_path) -> str:
        path = tmp_path / "xor.txt"
        # encodebytes wraps lines at 76 characters
        path.write_bytes(base64.encodebytes(repeating_key_xor(PASSAGE, KEY)))
        return str(path)

    def test_break_xor_file(self, xor_file) -> None:
        key, plaintext = break_xor_file(xor_file)
        assert key == KEY
        assert plaintext == PASSAGE

    def test_break_xor_file_known_size(self, xor_file) -> None:
        key, _ = break_xor_file(xor_file, key_size=5)
        assert key == KEY

    def test_cli_break_xor(self, xor_file) -> None:
        result = CliRunner().invoke(main, ["break-xor", xor_file])
        assert result.exit_code == 0
        assert "Key size: 5" in result.output
        assert KEY.hex() in result.output
        assert "It was the best of times" in result.output

    def test_cli_break_xor_missing_file(self, tmp_path) -> None:
        result = CliRunner().invoke(main, ["break-xor", str(tmp_path / "nope.txt")])
        assert result.exit_code == 1
        assert "Error" in result.output

    def test_cli_fixed_xor(self) -> None:
        result = CliRunner().invoke(
            main, ["xor", "1c0111001f010100061a024b53535009181c", "686974207468652062756c6c277320657965"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "746865206b696420646f6e277420706c6179"

    def test_cli_fixed_xor_mismatch(self) -> None:
        result = CliRunner().invoke(main, ["xor", "00", "0000"])
        assert result.exit_code == 1
        assert "Length mismatch" in result.output
