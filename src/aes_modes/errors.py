"""Exceptions raised for invalid caller input.

Every error is detected before any transform runs, so a failed call
never leaves a cipher or mode context half-updated.
"""


class AESError(ValueError):
    """Base class for AES input errors."""


class InvalidKeyLength(AESError):
    """Key is not exactly 16 bytes."""


class InvalidBlockLength(AESError):
    """Single-block input is not exactly 16 bytes."""


class InvalidBufferLength(AESError):
    """Mode-layer input is not a whole number of 16-byte blocks."""


class InvalidIVLength(AESError):
    """CBC initialization vector is not exactly 16 bytes."""
