"""
Key expansion for simplified AES-128.

Expands a 16-byte key into 44 four-byte words (11 round keys). Same
shape as the FIPS-197 schedule, but SubWord uses the 16-entry S-box and
the round constants cycle through RCON modulo its length.
"""

from .errors import InvalidKeyLength
from .core import sub_byte
from .tables import KEY_SIZE, NB, NK, NR, RCON


def rot_word(word: bytes) -> bytes:
    """Cyclic left rotation by one byte: [b0, b1, b2, b3] -> [b1, b2, b3, b0]."""
    return word[1:] + word[:1]


def sub_word(word: bytes) -> bytes:
    """Apply the S-box to each byte of a word."""
    return bytes(sub_byte(b) for b in word)


def key_expansion(key: bytes) -> tuple[bytes, ...]:
    """
    Expand a 16-byte key into the round-key schedule.

    Args:
        key: 16-byte cipher key

    Returns:
        Tuple of NB * (NR + 1) = 44 words, 4 bytes each

    Raises:
        InvalidKeyLength: If key is not 16 bytes
    """
    if len(key) != KEY_SIZE:
        raise InvalidKeyLength(len(key))

    words: list[bytes] = [bytes(key[4 * i:4 * i + 4]) for i in range(NK)]

    for i in range(NK, NB * (NR + 1)):
        temp = words[i - 1]
        if i % NK == 0:
            temp = bytearray(sub_word(rot_word(temp)))
            temp[0] ^= RCON[(i // NK - 1) % len(RCON)]
        words.append(bytes(a ^ b for a, b in zip(words[i - NK], temp)))

    return tuple(words)


def round_key(schedule: tuple[bytes, ...], round_num: int) -> tuple[bytes, ...]:
    """Return the 4 words forming round key round_num (0..NR)."""
    if not 0 <= round_num <= NR:
        raise ValueError(f"Round must be 0..{NR}, got {round_num}")
    return schedule[round_num * NB:(round_num + 1) * NB]


def round_key_bytes(schedule: tuple[bytes, ...], round_num: int) -> bytes:
    """Round key as 16 contiguous bytes (same layout as a block)."""
    return b"".join(round_key(schedule, round_num))
