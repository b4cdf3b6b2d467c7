"""
Galois Field arithmetic and precomputed AES lookup tables.

Field:
  GF(2^8) = GF(2)[x] / (x^8 + x^4 + x^3 + x + 1)   (0x11b)

Tables (all 256-entry, built once at import, exposed as immutable bytes):
  SBOX, INV_SBOX             forward/inverse byte substitution
  MUL2, MUL3                 MixColumns coefficients
  MUL9, MUL11, MUL13, MUL14  InvMixColumns coefficients
  POWX                       x^i, source of the key schedule round constants
"""

from types import MappingProxyType

# Reduction polynomial x^8 + x^4 + x^3 + x + 1
AES_POLY = 0x11b


# ===========================================================================
# GF(2^8) Arithmetic
# ===========================================================================

def xtime(a: int) -> int:
    """Multiply by x in GF(2^8)."""
    return ((a << 1) ^ AES_POLY) & 0xff if a & 0x80 else (a << 1) & 0xff


def gf_mul(a: int, b: int) -> int:
    """Multiply two bytes in GF(2^8) (shift-and-add)."""
    a &= 0xff
    b &= 0xff
    result = 0
    while b:
        if b & 1:
            result ^= a
        a = xtime(a)
        b >>= 1
    return result


def gf_pow(a: int, n: int) -> int:
    """Raise a to the n-th power in GF(2^8)."""
    result = 1
    base = a & 0xff
    while n > 0:
        if n & 1:
            result = gf_mul(result, base)
        base = gf_mul(base, base)
        n >>= 1
    return result


def gf_inverse(a: int) -> int:
    """
    Multiplicative inverse in GF(2^8).

    Uses a^254 = a^-1 (the multiplicative group has order 255).
    Zero has no inverse and maps to zero, as the S-box requires.
    """
    if a == 0:
        return 0
    return gf_pow(a, 254)


def _rotl8(b: int, n: int) -> int:
    return ((b << n) | (b >> (8 - n))) & 0xff


def affine_transform(b: int) -> int:
    """AES affine map over GF(2): b ^ rotl(b,1..4) ^ 0x63."""
    return (b ^ _rotl8(b, 1) ^ _rotl8(b, 2) ^ _rotl8(b, 3) ^ _rotl8(b, 4) ^ 0x63)


# ===========================================================================
# Table generation
# ===========================================================================

def _build_sbox() -> bytes:
    return bytes(affine_transform(gf_inverse(x)) for x in range(256))


def _invert_table(table: bytes) -> bytes:
    inverse = bytearray(256)
    for x, y in enumerate(table):
        inverse[y] = x
    return bytes(inverse)


def _build_mul_table(constant: int) -> bytes:
    return bytes(gf_mul(x, constant) for x in range(256))


def _build_powx(count: int = 16) -> bytes:
    powers = bytearray(count)
    value = 1
    for i in range(count):
        powers[i] = value
        value = xtime(value)
    return bytes(powers)


SBOX = _build_sbox()
INV_SBOX = _invert_table(SBOX)

MUL2 = _build_mul_table(2)
MUL3 = _build_mul_table(3)
MUL9 = _build_mul_table(9)
MUL11 = _build_mul_table(11)
MUL13 = _build_mul_table(13)
MUL14 = _build_mul_table(14)

POWX = _build_powx()

# Lookup by coefficient, used by the column mixers
MUL_TABLES = MappingProxyType({
    2: MUL2,
    3: MUL3,
    9: MUL9,
    11: MUL11,
    13: MUL13,
    14: MUL14,
})
