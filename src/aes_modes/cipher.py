"""
AES-128 single-block cipher.

Round schedule (encrypt):
- Round 0:    AddRoundKey
- Rounds 1-9: SubBytes, ShiftRows, MixColumns, AddRoundKey
- Round 10:   SubBytes, ShiftRows, AddRoundKey   (no MixColumns)

Decrypt walks the same structure backwards, round keys 10 down to 0:
- Round 10:   AddRoundKey
- Rounds 9-1: InvShiftRows, InvSubBytes, AddRoundKey, InvMixColumns
- Round 0:    InvShiftRows, InvSubBytes, AddRoundKey

The schedules are static tables, so the operation sequence never depends
on the key or the data.
"""

from __future__ import annotations

from .errors import InvalidBlockLength
from .key_schedule import key_expansion, round_keys
from .trace import TraceRecorder
from .transforms import TRANSFORMS, add_round_key
from .utils import BLOCK_SIZE, State, bytes_to_state, state_to_bytes

# (round key index, operations)
ENCRYPT_SCHEDULE = (
    [(0, ("AddRoundKey",))]
    + [(r, ("SubBytes", "ShiftRows", "MixColumns", "AddRoundKey")) for r in range(1, 10)]
    + [(10, ("SubBytes", "ShiftRows", "AddRoundKey"))]
)

DECRYPT_SCHEDULE = (
    [(10, ("AddRoundKey",))]
    + [(r, ("InvShiftRows", "InvSubBytes", "AddRoundKey", "InvMixColumns")) for r in range(9, 0, -1)]
    + [(0, ("InvShiftRows", "InvSubBytes", "AddRoundKey"))]
)


class BlockCipher:
    """
    AES-128 block cipher bound to one key.

    The expanded key and round keys are computed once in the constructor
    and never change afterwards; encrypt/decrypt keep all working state
    local, so one instance can serve concurrent callers.
    """

    block_size = BLOCK_SIZE

    def __init__(self, key: bytes, tracer: TraceRecorder | None = None):
        """
        Args:
            key: 16-byte AES key
            tracer: Optional trace recorder for per-operation output

        Raises:
            InvalidKeyLength: If key is not 16 bytes
        """
        self._expanded_key = key_expansion(key)
        self._round_keys = tuple(round_keys(self._expanded_key))
        self.tracer = tracer

    @property
    def expanded_key(self) -> tuple[int, ...]:
        """The 44-word key schedule."""
        return self._expanded_key

    @property
    def round_keys(self) -> tuple[bytes, ...]:
        """The 11 round keys, round 0 first."""
        return self._round_keys

    def encrypt_block(self, block: bytes) -> bytes:
        """
        Encrypt a single 16-byte block.

        Raises:
            InvalidBlockLength: If block is not 16 bytes
        """
        return self._run(block, ENCRYPT_SCHEDULE, "encrypt")

    def decrypt_block(self, block: bytes) -> bytes:
        """
        Decrypt a single 16-byte block.

        Raises:
            InvalidBlockLength: If block is not 16 bytes
        """
        return self._run(block, DECRYPT_SCHEDULE, "decrypt")

    def _run(self, block: bytes, schedule: list, direction: str) -> bytes:
        if len(block) != BLOCK_SIZE:
            raise InvalidBlockLength(f"Block must be 16 bytes, got {len(block)}")

        state = bytes_to_state(bytes(block))
        for round_num, operations in schedule:
            state = self._execute_round(state, round_num, operations, direction)
        return state_to_bytes(state)

    def _execute_round(
        self,
        state: State,
        round_num: int,
        operations: tuple[str, ...],
        direction: str,
    ) -> State:
        round_key = self._round_keys[round_num]

        for op in operations:
            if op == "AddRoundKey":
                state = add_round_key(state, round_key)
            else:
                state = TRANSFORMS[op](state)

            if self.tracer:
                self.tracer.record(
                    direction=direction,
                    round=round_num,
                    operation=op,
                    state=state,
                    round_key=round_key if op == "AddRoundKey" else None,
                )
        return state

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(block_size={self.block_size})"


def encrypt_block(key: bytes, block: bytes, tracer: TraceRecorder | None = None) -> bytes:
    """Convenience function: encrypt one block under key."""
    return BlockCipher(key, tracer=tracer).encrypt_block(block)


def decrypt_block(key: bytes, block: bytes, tracer: TraceRecorder | None = None) -> bytes:
    """Convenience function: decrypt one block under key."""
    return BlockCipher(key, tracer=tracer).decrypt_block(block)
