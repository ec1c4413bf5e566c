"""
Standard AES-128 from PyCryptodome, for contrast with the simplified cipher.
"""

from Crypto.Cipher import AES

from .errors import InvalidBlockLength, InvalidKeyLength
from .tables import BLOCK_SIZE, KEY_SIZE


def aes128_encrypt(key: bytes, plaintext: bytes) -> bytes:
    """
    Encrypt a single 16-byte block using FIPS-197 AES-128 (ECB, one block).

    Args:
        key: 16-byte AES key
        plaintext: 16-byte plaintext block

    Returns:
        16-byte ciphertext
    """
    if len(key) != KEY_SIZE:
        raise InvalidKeyLength(len(key))
    if len(plaintext) != BLOCK_SIZE:
        raise InvalidBlockLength(len(plaintext))

    cipher = AES.new(key, AES.MODE_ECB)
    return cipher.encrypt(plaintext)


def aes128_decrypt(key: bytes, ciphertext: bytes) -> bytes:
    """
    Decrypt a single 16-byte block using FIPS-197 AES-128.
    """
    if len(key) != KEY_SIZE:
        raise InvalidKeyLength(len(key))
    if len(ciphertext) != BLOCK_SIZE:
        raise InvalidBlockLength(len(ciphertext))

    cipher = AES.new(key, AES.MODE_ECB)
    return cipher.decrypt(ciphertext)


def differing_bits(a: bytes, b: bytes) -> int:
    """Hamming distance between two equal-length byte strings."""
    if len(a) != len(b):
        raise ValueError(f"Length mismatch: {len(a)} vs {len(b)}")
    return sum(bin(x ^ y).count("1") for x, y in zip(a, b))
