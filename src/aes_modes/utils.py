"""
Byte/state conversions, block splitting and hex formatting.

The AES state is a 4x4 byte matrix filled column by column:

  byte[0]  byte[4]  byte[8]   byte[12]
  byte[1]  byte[5]  byte[9]   byte[13]
  byte[2]  byte[6]  byte[10]  byte[14]
  byte[3]  byte[7]  byte[11]  byte[15]

so byte[r + 4c] lives at state[r][c].
"""

from __future__ import annotations

from typing import Iterator

from .errors import InvalidBlockLength

BLOCK_SIZE = 16

State = list[list[int]]


def bytes_to_state(data: bytes) -> State:
    """
    Convert 16 bytes to a 4x4 state (column-major).

    Raises:
        InvalidBlockLength: If data is not 16 bytes
    """
    if len(data) != BLOCK_SIZE:
        raise InvalidBlockLength(f"Block must be 16 bytes, got {len(data)}")
    return [[data[row + 4 * col] for col in range(4)] for row in range(4)]


def state_to_bytes(state: State) -> bytes:
    """Convert a 4x4 state back to 16 bytes (column-major)."""
    return bytes(state[row][col] for col in range(4) for row in range(4))


def copy_state(state: State) -> State:
    """Deep copy a 4x4 state."""
    return [row[:] for row in state]


def xor_bytes(a: bytes, b: bytes) -> bytes:
    """XOR two byte sequences of equal length."""
    if len(a) != len(b):
        raise ValueError(f"Length mismatch: {len(a)} vs {len(b)}")
    return bytes(x ^ y for x, y in zip(a, b))


def split_blocks(data: bytes, block_size: int = BLOCK_SIZE) -> Iterator[bytes]:
    """
    Yield consecutive block_size slices of data.

    A trailing partial block is dropped; callers that need whole blocks
    check the length first.
    """
    for offset in range(0, len(data) - block_size + 1, block_size):
        yield bytes(data[offset:offset + block_size])


def hex_to_bytes(hex_str: str) -> bytes:
    """Convert a hex string to bytes (whitespace is ignored)."""
    return bytes.fromhex("".join(hex_str.split()))


def bytes_to_hex(data: bytes) -> str:
    """Convert bytes to a lowercase hex string."""
    return bytes(data).hex()


def state_to_hex(state: State) -> str:
    """Convert a state to hex (via bytes)."""
    return bytes_to_hex(state_to_bytes(state))


def format_state_grid(state: State) -> str:
    """
    Format state as a readable 4x4 grid.

    Returns multi-line string like:
      2b 28 ab 09
      7e ae f7 cf
      15 d2 15 4f
      16 a6 88 3c
    """
    lines = []
    for row in range(4):
        lines.append("  " + " ".join(f"{state[row][col]:02x}" for col in range(4)))
    return "\n".join(lines)


def format_blocks(data: bytes, block_size: int = BLOCK_SIZE) -> str:
    """Format a buffer as one hex block per line, with its block index."""
    return "\n".join(
        f"  [{i:3d}] {bytes_to_hex(block)}"
        for i, block in enumerate(split_blocks(data, block_size))
    )
