"""
AES round transforms on the 4x4 state.

Each function is pure: it returns a new state and leaves its input alone.
Every forward transform has an exact inverse:

  add_round_key   (self-inverse)
  sub_bytes       <-> inv_sub_bytes
  shift_rows      <-> inv_shift_rows
  mix_columns     <-> inv_mix_columns
"""

from __future__ import annotations

from typing import Callable, Union

from .tables import INV_SBOX, MUL2, MUL3, MUL9, MUL11, MUL13, MUL14, SBOX
from .utils import State, bytes_to_state

RoundKey = Union[bytes, State]

ColumnFn = Callable[[int, int, int, int], tuple[int, int, int, int]]


def add_round_key(state: State, round_key: RoundKey) -> State:
    """XOR the state with a round key (16 bytes or a 4x4 state)."""
    if not isinstance(round_key, list):
        round_key = bytes_to_state(round_key)
    return [
        [state[row][col] ^ round_key[row][col] for col in range(4)]
        for row in range(4)
    ]


def sub_bytes(state: State) -> State:
    """Apply the S-box to every byte."""
    return [[SBOX[b] for b in row] for row in state]


def inv_sub_bytes(state: State) -> State:
    """Apply the inverse S-box to every byte."""
    return [[INV_SBOX[b] for b in row] for row in state]


def shift_rows(state: State) -> State:
    """Rotate row r left by r positions."""
    return [[state[row][(col + row) % 4] for col in range(4)] for row in range(4)]


def inv_shift_rows(state: State) -> State:
    """Rotate row r right by r positions."""
    return [[state[row][(col - row) % 4] for col in range(4)] for row in range(4)]


def _mix(a0: int, a1: int, a2: int, a3: int) -> tuple[int, int, int, int]:
    # circulant (2, 3, 1, 1)
    return (
        MUL2[a0] ^ MUL3[a1] ^ a2 ^ a3,
        a0 ^ MUL2[a1] ^ MUL3[a2] ^ a3,
        a0 ^ a1 ^ MUL2[a2] ^ MUL3[a3],
        MUL3[a0] ^ a1 ^ a2 ^ MUL2[a3],
    )


def _inv_mix(a0: int, a1: int, a2: int, a3: int) -> tuple[int, int, int, int]:
    # circulant (14, 11, 13, 9)
    return (
        MUL14[a0] ^ MUL11[a1] ^ MUL13[a2] ^ MUL9[a3],
        MUL9[a0] ^ MUL14[a1] ^ MUL11[a2] ^ MUL13[a3],
        MUL13[a0] ^ MUL9[a1] ^ MUL14[a2] ^ MUL11[a3],
        MUL11[a0] ^ MUL13[a1] ^ MUL9[a2] ^ MUL14[a3],
    )


def _map_columns(state: State, fn: ColumnFn) -> State:
    result = [[0] * 4 for _ in range(4)]
    for col in range(4):
        mixed = fn(state[0][col], state[1][col], state[2][col], state[3][col])
        for row in range(4):
            result[row][col] = mixed[row]
    return result


def mix_columns(state: State) -> State:
    """Multiply each column by the MixColumns matrix over GF(2^8)."""
    return _map_columns(state, _mix)


def inv_mix_columns(state: State) -> State:
    """Multiply each column by the InvMixColumns matrix over GF(2^8)."""
    return _map_columns(state, _inv_mix)


# Name -> transform, in the vocabulary used by the round schedules
TRANSFORMS: dict[str, Callable[[State], State]] = {
    "SubBytes": sub_bytes,
    "ShiftRows": shift_rows,
    "MixColumns": mix_columns,
    "InvSubBytes": inv_sub_bytes,
    "InvShiftRows": inv_shift_rows,
    "InvMixColumns": inv_mix_columns,
}
