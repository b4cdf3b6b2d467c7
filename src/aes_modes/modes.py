"""
ECB and CBC block modes on top of BlockCipher.

Both modes take buffers that are a whole number of 16-byte blocks;
padding is the caller's job (see aes_modes.padding).
"""

from __future__ import annotations

from enum import Enum

from .cipher import BlockCipher
from .errors import InvalidBufferLength, InvalidIVLength
from .utils import BLOCK_SIZE, split_blocks, xor_bytes


class Mode(str, Enum):
    """Block cipher mode label."""

    ECB = "ecb"
    CBC = "cbc"

    def __str__(self) -> str:
        return self.name


def _check_buffer(data: bytes) -> None:
    if len(data) % BLOCK_SIZE != 0:
        raise InvalidBufferLength(
            f"Data length must be a multiple of 16 bytes, got {len(data)}"
        )


def _check_iv(iv: bytes) -> bytes:
    if len(iv) != BLOCK_SIZE:
        raise InvalidIVLength(f"IV must be 16 bytes, got {len(iv)}")
    return bytes(iv)


class ECBMode:
    """Electronic codebook: every block goes through the cipher on its own."""

    name = Mode.ECB
    description = "Electronic codebook (independent blocks)"

    def __init__(self, cipher: BlockCipher):
        self.cipher = cipher

    def encrypt(self, data: bytes) -> bytes:
        """Encrypt a whole-block buffer."""
        _check_buffer(data)
        return b"".join(self.cipher.encrypt_block(block) for block in split_blocks(data))

    def decrypt(self, data: bytes) -> bytes:
        """Decrypt a whole-block buffer."""
        _check_buffer(data)
        return b"".join(self.cipher.decrypt_block(block) for block in split_blocks(data))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class CBCMode:
    """
    Cipher block chaining.

    The context holds a chaining slot that starts as the IV and is replaced
    by the last ciphertext block after every call, so consecutive calls on
    one context continue the same stream. Use clone() to fork a stream.
    """

    name = Mode.CBC
    description = "Cipher block chaining (XOR with previous ciphertext block)"

    def __init__(self, cipher: BlockCipher, iv: bytes):
        """
        Args:
            cipher: Block cipher to chain
            iv: 16-byte initialization vector

        Raises:
            InvalidIVLength: If iv is not 16 bytes
        """
        self.cipher = cipher
        self._iv = _check_iv(iv)

    @property
    def iv(self) -> bytes:
        """Current chaining value."""
        return self._iv

    def set_iv(self, iv: bytes) -> None:
        """Restart the chain from a new IV."""
        self._iv = _check_iv(iv)

    def clone(self) -> CBCMode:
        """Independent context sharing the cipher and the current chaining value."""
        return CBCMode(self.cipher, self._iv)

    def encrypt(self, data: bytes) -> bytes:
        """Encrypt a whole-block buffer, continuing from the chaining value."""
        _check_buffer(data)
        out = []
        chain = self._iv
        for block in split_blocks(data):
            chain = self.cipher.encrypt_block(xor_bytes(block, chain))
            out.append(chain)
        self._iv = chain
        return b"".join(out)

    def decrypt(self, data: bytes) -> bytes:
        """Decrypt a whole-block buffer, continuing from the chaining value."""
        _check_buffer(data)
        out = []
        chain = self._iv
        for block in split_blocks(data):
            out.append(xor_bytes(self.cipher.decrypt_block(block), chain))
            # next chaining value is the ciphertext block as received
            chain = block
        self._iv = chain
        return b"".join(out)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(iv={self._iv.hex()})"


# Registry of available modes
MODES: dict[str, type] = {
    Mode.ECB.value: ECBMode,
    Mode.CBC.value: CBCMode,
}


def get_mode(name: str | Mode) -> type:
    """
    Get mode class by name.

    Raises:
        KeyError: If mode not found
    """
    key = name.value if isinstance(name, Mode) else str(name).lower()
    if key not in MODES:
        available = ", ".join(MODES.keys())
        raise KeyError(f"Unknown mode '{name}'. Available: {available}")
    return MODES[key]


def list_modes() -> list[dict[str, str]]:
    """List all available modes with descriptions."""
    return [
        {"name": name, "description": getattr(cls, "description", "No description")}
        for name, cls in MODES.items()
    ]


def new_mode(mode: str | Mode, key: bytes, iv: bytes | None = None) -> ECBMode | CBCMode:
    """
    Build a mode context for key.

    Raises:
        KeyError: Unknown mode
        InvalidKeyLength: Key is not 16 bytes
        InvalidIVLength: CBC without a 16-byte IV
    """
    cls = get_mode(mode)
    cipher = BlockCipher(key)
    if cls is CBCMode:
        if iv is None:
            raise InvalidIVLength("IV must be 16 bytes, got none")
        return CBCMode(cipher, iv)
    return ECBMode(cipher)


def ecb_encrypt(key: bytes, data: bytes) -> bytes:
    """Convenience function to ECB-encrypt a whole-block buffer under key."""
    return ECBMode(BlockCipher(key)).encrypt(data)


def ecb_decrypt(key: bytes, data: bytes) -> bytes:
    """Convenience function to ECB-decrypt a whole-block buffer under key."""
    return ECBMode(BlockCipher(key)).decrypt(data)


def cbc_encrypt(key: bytes, iv: bytes, data: bytes) -> bytes:
    """Convenience function to CBC-encrypt a whole-block buffer from iv."""
    return CBCMode(BlockCipher(key), iv).encrypt(data)


def cbc_decrypt(key: bytes, iv: bytes, data: bytes) -> bytes:
    """Convenience function to CBC-decrypt a whole-block buffer from iv."""
    return CBCMode(BlockCipher(key), iv).decrypt(data)
