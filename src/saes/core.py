"""
Round primitives operating on the 4x4 state.

Every state-level primitive mutates the state in place and returns None.
The column helpers return a new 4-element list.
"""

from .gf import Multiplier, gmul, mul_0x52
from .tables import INV_SBOX, NB, SBOX


# ------------------------------------------------------------------
# SubBytes
# ------------------------------------------------------------------

def sub_byte(b: int) -> int:
    """Substitute one byte: low nibble indexes SBOX, high nibble passes through XOR."""
    return (b & 0xF0) ^ SBOX[b & 0x0F]


def inv_sub_byte(b: int) -> int:
    """Inverse of sub_byte."""
    return (b & 0xF0) ^ INV_SBOX[b & 0x0F]


def sub_bytes(state: list[list[int]]) -> None:
    for row in range(4):
        for col in range(NB):
            state[row][col] = sub_byte(state[row][col])


def inv_sub_bytes(state: list[list[int]]) -> None:
    for row in range(4):
        for col in range(NB):
            state[row][col] = inv_sub_byte(state[row][col])


# ------------------------------------------------------------------
# ShiftRows
# ------------------------------------------------------------------

def shift_rows(state: list[list[int]]) -> None:
    """
    Rotate row r left by r positions.

    Row 0: no shift, Row 1: shift 1, Row 2: shift 2, Row 3: shift 3.
    New column j takes old column (j + r) mod 4.
    """
    for row in range(1, 4):
        state[row] = [state[row][(col + row) % NB] for col in range(NB)]


def inv_shift_rows(state: list[list[int]]) -> None:
    """Rotate row r right by r positions (new column j takes old column (j - r) mod 4)."""
    for row in range(1, 4):
        state[row] = [state[row][(col - row) % NB] for col in range(NB)]


# ------------------------------------------------------------------
# MixColumns
# ------------------------------------------------------------------

def mix_column(col: list[int]) -> list[int]:
    """
    Multiply one column by the circulant matrix

        [2 1 1 1]
        [1 2 1 1]
        [1 1 2 1]
        [1 1 1 2]
    """
    a0, a1, a2, a3 = col
    two = Multiplier.TWO
    return [
        gmul(a0, two) ^ a1 ^ a2 ^ a3,
        a0 ^ gmul(a1, two) ^ a2 ^ a3,
        a0 ^ a1 ^ gmul(a2, two) ^ a3,
        a0 ^ a1 ^ a2 ^ gmul(a3, two),
    ]


def inv_mix_column(col: list[int]) -> list[int]:
    """Inverse of mix_column: M^-1 = 0x52 * M since M * M = 5 * I."""
    return [mul_0x52(b) for b in mix_column(col)]


def mix_columns(state: list[list[int]]) -> None:
    for col in range(NB):
        mixed = mix_column([state[row][col] for row in range(4)])
        for row in range(4):
            state[row][col] = mixed[row]


def inv_mix_columns(state: list[list[int]]) -> None:
    for col in range(NB):
        mixed = inv_mix_column([state[row][col] for row in range(4)])
        for row in range(4):
            state[row][col] = mixed[row]


# ------------------------------------------------------------------
# AddRoundKey
# ------------------------------------------------------------------

def add_round_key(
    state: list[list[int]],
    schedule: tuple[bytes, ...],
    round_num: int,
) -> None:
    """XOR state[r][c] with byte r of schedule word (round_num * 4 + c). Self-inverse."""
    for col in range(NB):
        word = schedule[round_num * NB + col]
        for row in range(4):
            state[row][col] ^= word[row]
