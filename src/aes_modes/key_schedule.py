"""
AES-128 key expansion.

The 16-byte key becomes 44 32-bit words (big-endian, one per column):

  w[0..3]   = key
  w[i]      = w[i-1] ^ w[i-4]                                 i % 4 != 0
  w[i]      = SubWord(RotWord(w[i-1])) ^ Rcon(i/4 - 1) ^ w[i-4]   i % 4 == 0

Round key r is w[4r .. 4r+3], serialized back to 16 bytes.
"""

from __future__ import annotations

from .errors import InvalidKeyLength
from .tables import INV_SBOX, POWX, SBOX

KEY_SIZE = 16
NUM_ROUNDS = 10
KEY_WORDS = KEY_SIZE // 4
EXPANDED_WORDS = 4 * (NUM_ROUNDS + 1)


def rot_word(word: int, n: int = 1) -> int:
    """Rotate a 32-bit word n bytes to the left."""
    n %= 4
    return ((word << (8 * n)) | (word >> (32 - 8 * n))) & 0xffffffff


def rot_word_right(word: int, n: int = 1) -> int:
    """Rotate a 32-bit word n bytes to the right."""
    return rot_word(word, 4 - (n % 4))


def sub_word(word: int) -> int:
    """Apply the S-box to each byte of a word."""
    return (
        SBOX[(word >> 24) & 0xff] << 24
        | SBOX[(word >> 16) & 0xff] << 16
        | SBOX[(word >> 8) & 0xff] << 8
        | SBOX[word & 0xff]
    )


def inv_sub_word(word: int) -> int:
    """Apply the inverse S-box to each byte of a word."""
    return (
        INV_SBOX[(word >> 24) & 0xff] << 24
        | INV_SBOX[(word >> 16) & 0xff] << 16
        | INV_SBOX[(word >> 8) & 0xff] << 8
        | INV_SBOX[word & 0xff]
    )


def rcon(j: int) -> int:
    """Round constant j: x^j in the most significant byte."""
    return POWX[j] << 24


def key_expansion(key: bytes) -> tuple[int, ...]:
    """
    Expand a 128-bit key into 44 words.

    Args:
        key: 16-byte AES key

    Returns:
        Tuple of 44 32-bit words

    Raises:
        InvalidKeyLength: If key is not 16 bytes
    """
    if len(key) != KEY_SIZE:
        raise InvalidKeyLength(f"Key must be 16 bytes, got {len(key)}")

    w = [int.from_bytes(bytes(key[i:i + 4]), "big") for i in range(0, KEY_SIZE, 4)]

    for i in range(KEY_WORDS, EXPANDED_WORDS):
        temp = w[i - 1]
        if i % KEY_WORDS == 0:
            temp = sub_word(rot_word(temp, 1)) ^ rcon(i // KEY_WORDS - 1)
        w.append(temp ^ w[i - KEY_WORDS])

    return tuple(w)


def round_keys(expanded: tuple[int, ...]) -> list[bytes]:
    """Split an expanded key into 16-byte round keys (11 for AES-128)."""
    keys = []
    for r in range(len(expanded) // 4):
        keys.append(b"".join(word.to_bytes(4, "big") for word in expanded[4 * r:4 * r + 4]))
    return keys
