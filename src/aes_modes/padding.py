"""PKCS#7 padding (applied only; unpadding and validation are left to callers)."""

from .utils import BLOCK_SIZE


def pkcs7_pad(data: bytes, block_size: int = BLOCK_SIZE) -> bytes:
    """
    Pad data to a multiple of block_size.

    Always adds between 1 and block_size bytes, each equal to the pad
    length, so an already aligned input gains a full block.
    """
    if not 1 <= block_size <= 255:
        raise ValueError(f"block_size must be 1..255, got {block_size}")
    pad_len = block_size - (len(data) % block_size)
    return bytes(data) + bytes([pad_len]) * pad_len
