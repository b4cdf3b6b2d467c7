"""
Base64-encoded ciphertext files.

The cipher core never touches files; these helpers read a base64 file
into raw bytes and hand it to the mode layer or the XOR breaker.
"""

from __future__ import annotations

import base64

from .modes import Mode, new_mode
from .xor import break_repeating_key_xor, repeating_key_xor


def read_base64_file(path: str) -> bytes:
    """Read and decode a base64 file. Line breaks are ignored."""
    with open(path, "rb") as f:
        return base64.b64decode(f.read())


def decrypt_base64_file(
    path: str,
    key: bytes,
    mode: str | Mode = Mode.ECB,
    iv: bytes | None = None,
) -> bytes:
    """
    Decrypt a base64 file under key (ECB unless told otherwise).

    Padding, if any, is left in place.

    Raises:
        InvalidKeyLength / InvalidBufferLength / InvalidIVLength: on wrong sizes
        ValueError: File is not valid base64
    """
    return new_mode(mode, key, iv).decrypt(read_base64_file(path))


def break_xor_file(path: str, key_size: int | None = None) -> tuple[bytes, bytes]:
    """Recover the key of a base64 repeating-key XOR file. Returns (key, plaintext)."""
    data = read_base64_file(path)
    key = break_repeating_key_xor(data, key_size)
    return key, repeating_key_xor(data, key)
