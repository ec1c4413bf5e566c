"""Exceptions raised at the cipher's operation boundary."""

from .tables import BLOCK_SIZE, KEY_SIZE


class CipherError(ValueError):
    """Base class for simplified AES input errors."""


class InvalidKeyLength(CipherError):
    """Key is not exactly KEY_SIZE bytes."""

    def __init__(self, actual: int, expected: int = KEY_SIZE):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Key must be {expected} bytes, got {actual}")


class InvalidBlockLength(CipherError):
    """Block is not exactly BLOCK_SIZE bytes."""

    def __init__(self, actual: int, expected: int = BLOCK_SIZE):
        self.expected = expected
        self.actual = actual
        super().__init__(f"Block must be {expected} bytes, got {actual}")
