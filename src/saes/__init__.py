"""
Simplified AES-128

A didactic, reduced-strength block cipher shaped like AES-128:
10 rounds of SubBytes, ShiftRows, MixColumns and AddRoundKey over a
4x4 column-major byte state, with an AES-style key schedule.

Deviations from FIPS-197 AES:
- 16-entry S-box looked up by the low nibble of each byte
- only 5 round constants, reused modulo 5 across the schedule
- MixColumns uses the circulant [2, 1, 1, 1]

Not secure. Encryption only, no integrity protection.
"""

__version__ = "1.0.0"

# Default demonstration values (ASCII, 16 bytes each)
DEFAULT_KEY_TEXT = "1234567890abcdef"
DEFAULT_PT_TEXT = "hello world12345"

from .errors import CipherError, InvalidKeyLength, InvalidBlockLength  # noqa: E402
from .cipher import SimplifiedAES128, new, encrypt_block, decrypt_block  # noqa: E402

__all__ = [
    "DEFAULT_KEY_TEXT",
    "DEFAULT_PT_TEXT",
    "CipherError",
    "InvalidKeyLength",
    "InvalidBlockLength",
    "SimplifiedAES128",
    "new",
    "encrypt_block",
    "decrypt_block",
]
