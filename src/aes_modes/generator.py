"""
Labelled ECB/CBC ciphertexts for exercising the detection oracle.

Each sample:
1. Prepends 5-20 random bytes to the plaintext
2. Applies PKCS#7 padding
3. Draws a fresh random 16-byte key
4. Encrypts under ECB or CBC (fair coin), CBC with a fresh random IV

All randomness comes from the RandomSource passed in, so a seeded source
reproduces the same samples.
"""

from __future__ import annotations

from dataclasses import dataclass

from .cipher import BlockCipher
from .modes import CBCMode, ECBMode, Mode
from .padding import pkcs7_pad
from .randomness import RandomSource
from .utils import BLOCK_SIZE

PREFIX_MIN = 5
PREFIX_MAX = 20


@dataclass(frozen=True)
class Sample:
    """One generated ciphertext and the mode that produced it."""

    ciphertext: bytes
    mode: Mode


def repeated_block_plaintext(text: bytes = b"", fill: bytes = b"A") -> bytes:
    """
    Plaintext that still holds two equal aligned blocks after any prefix.

    A run of one repeated byte 3 blocks long covers at least two whole
    aligned blocks wherever it starts, so ECB output is bound to repeat.
    """
    if len(fill) != 1:
        raise ValueError(f"fill must be a single byte, got {len(fill)}")
    return bytes(text) + fill * (3 * BLOCK_SIZE)


def prepare_plaintext(plaintext: bytes, rng: RandomSource) -> bytes:
    """Random 5-20 byte prefix + plaintext, PKCS#7 padded."""
    prefix = rng.get_bytes(rng.randint(PREFIX_MIN, PREFIX_MAX, "prefix"), "prefix")
    return pkcs7_pad(prefix + bytes(plaintext))


def generate_sample(
    plaintext: bytes,
    rng: RandomSource,
    mode: Mode | None = None,
) -> Sample:
    """
    Encrypt one prepared plaintext under a random key.

    Args:
        plaintext: Message to embed
        rng: Randomness for prefix, key, mode and IV
        mode: Force a mode instead of flipping a coin
    """
    data = prepare_plaintext(plaintext, rng)
    if mode is None:
        mode = Mode.ECB if rng.coin("mode") else Mode.CBC

    cipher = BlockCipher(rng.get_bytes(16, "key"))
    if mode is Mode.ECB:
        ciphertext = ECBMode(cipher).encrypt(data)
    else:
        ciphertext = CBCMode(cipher, rng.get_bytes(BLOCK_SIZE, "iv")).encrypt(data)
    return Sample(ciphertext=ciphertext, mode=mode)


def generate_samples(
    plaintext: bytes,
    count: int,
    rng: RandomSource | None = None,
    mode: Mode | None = None,
) -> list[Sample]:
    """Generate count independent samples (unseeded source if rng is None)."""
    if rng is None:
        rng = RandomSource()
    return [generate_sample(plaintext, rng, mode) for _ in range(count)]
