"""Golden reference AES using PyCryptodome."""

from Crypto.Cipher import AES

from .errors import InvalidBlockLength, InvalidBufferLength, InvalidIVLength, InvalidKeyLength


def _check_key(key: bytes) -> None:
    if len(key) != 16:
        raise InvalidKeyLength(f"Key must be 16 bytes, got {len(key)}")


def golden_encrypt(key: bytes, plaintext: bytes) -> bytes:
    """Encrypt a single block using PyCryptodome as golden reference.

    Args:
        key: 16-byte AES-128 key
        plaintext: 16-byte plaintext block

    Returns:
        16-byte ciphertext block

    Raises:
        InvalidKeyLength / InvalidBlockLength: on wrong sizes
    """
    _check_key(key)
    if len(plaintext) != 16:
        raise InvalidBlockLength(f"Block must be 16 bytes, got {len(plaintext)}")
    return AES.new(key, AES.MODE_ECB).encrypt(plaintext)


def golden_decrypt(key: bytes, ciphertext: bytes) -> bytes:
    """Decrypt a single block using PyCryptodome."""
    _check_key(key)
    if len(ciphertext) != 16:
        raise InvalidBlockLength(f"Block must be 16 bytes, got {len(ciphertext)}")
    return AES.new(key, AES.MODE_ECB).decrypt(ciphertext)


def golden_ecb_encrypt(key: bytes, data: bytes) -> bytes:
    """ECB-encrypt a whole-block buffer with PyCryptodome."""
    _check_key(key)
    if len(data) % 16:
        raise InvalidBufferLength(f"Data length must be a multiple of 16 bytes, got {len(data)}")
    return AES.new(key, AES.MODE_ECB).encrypt(data)


def golden_cbc_encrypt(key: bytes, iv: bytes, data: bytes) -> bytes:
    """CBC-encrypt a whole-block buffer with PyCryptodome."""
    _check_key(key)
    if len(iv) != 16:
        raise InvalidIVLength(f"IV must be 16 bytes, got {len(iv)}")
    if len(data) % 16:
        raise InvalidBufferLength(f"Data length must be a multiple of 16 bytes, got {len(data)}")
    return AES.new(key, AES.MODE_CBC, iv=iv).encrypt(data)


def validate_against_golden(
    key: bytes, plaintext: bytes, candidate_ciphertext: bytes
) -> tuple[bool, str]:
    """Validate a candidate single-block ciphertext against the golden reference.

    Returns:
        Tuple of (is_correct, error_detail)
    """
    expected = golden_encrypt(key, plaintext)
    if candidate_ciphertext == expected:
        return True, ""
    return False, (
        f"Ciphertext mismatch: expected {expected.hex()}, "
        f"got {candidate_ciphertext.hex()}"
    )


# FIPS-197 Appendix B / C.1 and additional NIST vectors for AES-128
FIPS_197_TEST_VECTORS = [
    # Appendix B - cipher example
    {
        "key": bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c"),
        "plaintext": bytes.fromhex("3243f6a8885a308d313198a2e0370734"),
        "ciphertext": bytes.fromhex("3925841d02dc09fbdc118597196a0b32"),
    },
    # Appendix C.1 - AES-128
    {
        "key": bytes.fromhex("000102030405060708090a0b0c0d0e0f"),
        "plaintext": bytes.fromhex("00112233445566778899aabbccddeeff"),
        "ciphertext": bytes.fromhex("69c4e0d86a7b0430d8cdb78070b4c55a"),
    },
    {
        "key": bytes.fromhex("00000000000000000000000000000000"),
        "plaintext": bytes.fromhex("00000000000000000000000000000000"),
        "ciphertext": bytes.fromhex("66e94bd4ef8a2c3b884cfa59ca342b2e"),
    },
    {
        "key": bytes.fromhex("00000000000000000000000000000000"),
        "plaintext": bytes.fromhex("f34481ec3cc627bacd5dc3fb08f273e6"),
        "ciphertext": bytes.fromhex("0336763e966d92595a567cc9ce537f5e"),
    },
    {
        "key": bytes.fromhex("00000000000000000000000000000000"),
        "plaintext": bytes.fromhex("9798c4640bad75c7c3227db910174e72"),
        "ciphertext": bytes.fromhex("a9a1631bf4996954ebc093957b234589"),
    },
    {
        "key": bytes.fromhex("ffffffffffffffffffffffffffffffff"),
        "plaintext": bytes.fromhex("00000000000000000000000000000000"),
        "ciphertext": bytes.fromhex("a1f6258c877d5fcd8964484538bfc92c"),
    },
    {
        "key": bytes.fromhex("ffffffffffffffffffffffffffffffff"),
        "plaintext": bytes.fromhex("ffffffffffffffffffffffffffffffff"),
        "ciphertext": bytes.fromhex("bcbf217cb280cf30b2517052193ab979"),
    },
]

_SP800_38A_PLAINTEXT = bytes.fromhex(
    "6bc1bee22e409f96e93d7e117393172a"
    "ae2d8a571e03ac9c9eb76fac45af8e51"
    "30c81c46a35ce411e5fbc1191a0a52ef"
    "f69f2445df4f9b17ad2b417be66c3710"
)

# NIST SP 800-38A F.1.1 ECB-AES128.Encrypt
SP800_38A_ECB_VECTOR = {
    "key": bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c"),
    "plaintext": _SP800_38A_PLAINTEXT,
    "ciphertext": bytes.fromhex(
        "3ad77bb40d7a3660a89ecaf32466ef97"
        "f5d3d58503b9699de785895a96fdbaaf"
        "43b1cd7f598ece23881b00e3ed030688"
        "7b0c785e27e8ad3f8223207104725dd4"
    ),
}

# NIST SP 800-38A F.2.1 CBC-AES128.Encrypt
SP800_38A_CBC_VECTOR = {
    "key": bytes.fromhex("2b7e151628aed2a6abf7158809cf4f3c"),
    "iv": bytes.fromhex("000102030405060708090a0b0c0d0e0f"),
    "plaintext": _SP800_38A_PLAINTEXT,
    "ciphertext": bytes.fromhex(
        "7649abac8119b246cee98e9b12e9197d"
        "5086cb9b507219ee95db113a917678b2"
        "73bed6b8e3c1743b7116e69e22229516"
        "3ff1caa1681fac09120eca307586e1a7"
    ),
}
