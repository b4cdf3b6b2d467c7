"""
AES-128 block cipher with ECB/CBC modes and an ECB/CBC detection oracle.

Everything works on raw byte buffers:
1. BlockCipher: single-block encrypt/decrypt under a 16-byte key
2. ECBMode / CBCMode: whole-block buffers
3. detect_mode / classify: tell ECB from CBC ciphertext without the key
4. repeating_key_xor / break_repeating_key_xor: XOR cipher and key recovery
"""

__version__ = "0.1.0"

# Default AES-128 test values from FIPS-197 Appendix B
DEFAULT_KEY_HEX = "2b7e151628aed2a6abf7158809cf4f3c"
DEFAULT_PT_HEX = "3243f6a8885a308d313198a2e0370734"
DEFAULT_CT_HEX = "3925841d02dc09fbdc118597196a0b32"

from .errors import (
    AESError,
    InvalidBlockLength,
    InvalidBufferLength,
    InvalidIVLength,
    InvalidKeyLength,
)
from .cipher import BlockCipher
from .modes import (
    CBCMode,
    ECBMode,
    Mode,
    cbc_decrypt,
    cbc_encrypt,
    ecb_decrypt,
    ecb_encrypt,
    new_mode,
)
from .oracle import classify, detect_mode
from .padding import pkcs7_pad
from .randomness import RandomSource
from .files import break_xor_file, decrypt_base64_file
from .xor import break_repeating_key_xor, fixed_xor, hamming_distance, repeating_key_xor

__all__ = [
    "AESError",
    "InvalidKeyLength",
    "InvalidBlockLength",
    "InvalidBufferLength",
    "InvalidIVLength",
    "BlockCipher",
    "ECBMode",
    "CBCMode",
    "Mode",
    "new_mode",
    "ecb_encrypt",
    "ecb_decrypt",
    "cbc_encrypt",
    "cbc_decrypt",
    "detect_mode",
    "classify",
    "pkcs7_pad",
    "RandomSource",
    "fixed_xor",
    "repeating_key_xor",
    "hamming_distance",
    "break_repeating_key_xor",
    "decrypt_base64_file",
    "break_xor_file",
]
