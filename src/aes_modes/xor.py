"""
Repeating-key XOR and its statistical key recovery.

Contains:
- fixed_xor / repeating_key_xor: the XOR ciphers themselves
- hamming_distance, key_size_scores, guess_key_size: key-length estimation
- score_english, break_single_byte_xor, break_repeating_key_xor: key recovery
  by letter-frequency analysis, one key byte per transposed column

Like the AES core, everything here takes and returns raw byte buffers.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import cycle

from .utils import split_blocks, xor_bytes

MIN_KEY_SIZE = 2
MAX_KEY_SIZE = 40

# Multiples of the key length score like the key length itself; the
# smallest size within this fraction of the best score is returned.
KEY_SIZE_SLACK = 0.1

# Relative letter frequencies in English text, plus the space.
ENGLISH_FREQUENCIES = {
    "e": 0.1202, "t": 0.0910, "a": 0.0812, "o": 0.0768, "i": 0.0731,
    "n": 0.0695, "s": 0.0628, "r": 0.0602, "h": 0.0592, "d": 0.0432,
    "l": 0.0398, "u": 0.0288, "c": 0.0271, "m": 0.0261, "f": 0.0230,
    "y": 0.0211, "w": 0.0209, "g": 0.0203, "p": 0.0182, "b": 0.0149,
    "v": 0.0111, "k": 0.0069, "x": 0.0017, "q": 0.0011, "j": 0.0010,
    "z": 0.0007, " ": 0.1300,
}

NON_PRINTABLE_PENALTY = 0.5


def _build_byte_scores() -> tuple[float, ...]:
    scores = []
    for b in range(256):
        c = chr(b)
        if c.lower() in ENGLISH_FREQUENCIES:
            scores.append(ENGLISH_FREQUENCIES[c.lower()])
        elif 0x20 <= b < 0x7F or c in "\t\n\r":
            scores.append(0.0)
        else:
            scores.append(-NON_PRINTABLE_PENALTY)
    return tuple(scores)


_BYTE_SCORES = _build_byte_scores()


@dataclass
class XorGuess:
    """Best single-byte key for one ciphertext, with its plaintext and score."""

    key: int
    plaintext: bytes
    score: float


# ------------------------------------------------------------------
# XOR ciphers
# ------------------------------------------------------------------

def fixed_xor(a: bytes, b: bytes) -> bytes:
    """XOR two equal-length buffers."""
    return xor_bytes(a, b)


def repeating_key_xor(data: bytes, key: bytes) -> bytes:
    """XOR data with key repeated to its length (encrypts and decrypts)."""
    if not key:
        raise ValueError("Key must not be empty")
    return bytes(b ^ k for b, k in zip(data, cycle(key)))


# ------------------------------------------------------------------
# Key-size estimation
# ------------------------------------------------------------------

def hamming_distance(a: bytes, b: bytes) -> int:
    """Number of differing bits between two equal-length buffers."""
    if len(a) != len(b):
        raise ValueError(f"Length mismatch: {len(a)} vs {len(b)}")
    return sum(bin(x ^ y).count("1") for x, y in zip(a, b))


def key_size_scores(
    ciphertext: bytes,
    min_size: int = MIN_KEY_SIZE,
    max_size: int = MAX_KEY_SIZE,
) -> dict[int, float]:
    """
    Mean Hamming distance per byte between consecutive key-size chunks.

    Sizes for which the ciphertext holds fewer than two whole chunks are
    left out.
    """
    if min_size < 1 or max_size < min_size:
        raise ValueError(f"Bad key size range: {min_size}..{max_size}")

    scores: dict[int, float] = {}
    for size in range(min_size, max_size + 1):
        chunks = list(split_blocks(ciphertext, size))
        if len(chunks) < 2:
            break
        distance = sum(hamming_distance(a, b) for a, b in zip(chunks, chunks[1:]))
        scores[size] = distance / ((len(chunks) - 1) * size)
    return scores


def guess_key_size(
    ciphertext: bytes,
    min_size: int = MIN_KEY_SIZE,
    max_size: int = MAX_KEY_SIZE,
) -> int:
    """
    Guess the length of a repeating XOR key.

    Chunks one key length apart were XORed with the same key bytes, so
    their distance is that of the plaintexts alone and scores lowest.

    Raises:
        ValueError: Ciphertext shorter than two chunks of min_size
    """
    scores = key_size_scores(ciphertext, min_size, max_size)
    if not scores:
        raise ValueError(
            f"Ciphertext too short to estimate key size, got {len(ciphertext)} bytes"
        )
    best = min(scores.values())
    return min(size for size, s in scores.items() if s <= best * (1 + KEY_SIZE_SLACK))


# ------------------------------------------------------------------
# Frequency-analysis key recovery
# ------------------------------------------------------------------

def score_english(text: bytes) -> float:
    """Mean per-byte English score of text; higher is more English-like."""
    if not text:
        return 0.0
    return sum(_BYTE_SCORES[b] for b in text) / len(text)


def break_single_byte_xor(ciphertext: bytes) -> XorGuess:
    """Try all 256 single-byte keys and return the most English-like result."""
    best = None
    for k in range(256):
        plaintext = bytes(b ^ k for b in ciphertext)
        guess = XorGuess(key=k, plaintext=plaintext, score=score_english(plaintext))
        if best is None or guess.score > best.score:
            best = guess
    return best


def break_repeating_key_xor(ciphertext: bytes, key_size: int | None = None) -> bytes:
    """
    Recover the key of a repeating-key XOR ciphertext.

    Args:
        ciphertext: XOR-encrypted English text
        key_size: Key length if known, otherwise guessed with guess_key_size

    Returns:
        The recovered key
    """
    if key_size is None:
        key_size = guess_key_size(ciphertext)
    if key_size < 1:
        raise ValueError(f"Key size must be positive, got {key_size}")
    columns = [ciphertext[i::key_size] for i in range(key_size)]
    return bytes(break_single_byte_xor(column).key for column in columns)
