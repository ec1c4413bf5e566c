"""
Tests for the round primitives.

Verifies:
- SubBytes/InvSubBytes are inverse over all 256 bytes
- the substitution only looks at the low nibble
- ShiftRows direction and inverse
- MixColumns against hand-computed columns and its inverse law
- AddRoundKey is self-inverse
"""

import random

import pytest

from saes.core import (
    sub_byte,
    inv_sub_byte,
    sub_bytes,
    inv_sub_bytes,
    shift_rows,
    inv_shift_rows,
    mix_column,
    inv_mix_column,
    mix_columns,
    inv_mix_columns,
    add_round_key,
)
from saes.key_schedule import key_expansion
from saes.tables import INV_SBOX, RCON, SBOX
from saes.utils import bytes_to_state, copy_state, state_to_bytes


def _random_state(rng: random.Random) -> list[list[int]]:
    return bytes_to_state(bytes(rng.randrange(256) for _ in range(16)))


# ─── tables ───────────────────────────────────────────────────────

class TestTables:

    def test_sizes(self):
        assert len(SBOX) == 16
        assert len(INV_SBOX) == 16
        assert len(RCON) == 5

    def test_sbox_low_nibbles_are_a_permutation(self):
        assert sorted(b & 0x0F for b in SBOX) == list(range(16))

    def test_inverse_table_relation(self):
        for low in range(16):
            assert INV_SBOX[SBOX[low] & 0x0F] == (SBOX[low] & 0xF0) | low


# ─── SubBytes ─────────────────────────────────────────────────────

class TestSubBytes:

    def test_known_values(self):
        assert sub_byte(0x00) == 0x6E
        assert sub_byte(0x41) == 0x33
        assert sub_byte(0x64) == 0x91
        assert inv_sub_byte(0x33) == 0x41

    def test_inverse_all_bytes(self):
        for b in range(256):
            assert inv_sub_byte(sub_byte(b)) == b
            assert sub_byte(inv_sub_byte(b)) == b

    def test_lookup_ignores_high_nibble(self):
        """Same low nibble: identical substituted nibble, high-nibble difference passes through."""
        for b1 in range(256):
            for high in range(16):
                b2 = (high << 4) | (b1 & 0x0F)
                assert sub_byte(b1) & 0x0F == sub_byte(b2) & 0x0F
                assert sub_byte(b1) ^ sub_byte(b2) == b1 ^ b2

    def test_state_round_trip(self):
        rng = random.Random(7)
        for _ in range(50):
            state = _random_state(rng)
            original = copy_state(state)
            sub_bytes(state)
            inv_sub_bytes(state)
            assert state == original

    def test_in_place(self):
        state = bytes_to_state(bytes(16))
        assert sub_bytes(state) is None
        assert state_to_bytes(state) == bytes([0x6E] * 16)


# ─── ShiftRows ────────────────────────────────────────────────────

class TestShiftRows:

    @pytest.fixture
    def labelled(self):
        return [[16 * row + col for col in range(4)] for row in range(4)]

    def test_rotates_left_by_row_index(self, labelled):
        shift_rows(labelled)
        assert labelled == [
            [0x00, 0x01, 0x02, 0x03],
            [0x11, 0x12, 0x13, 0x10],
            [0x22, 0x23, 0x20, 0x21],
            [0x33, 0x30, 0x31, 0x32],
        ]

    def test_inverse_rotates_right(self, labelled):
        inv_shift_rows(labelled)
        assert labelled == [
            [0x00, 0x01, 0x02, 0x03],
            [0x13, 0x10, 0x11, 0x12],
            [0x22, 0x23, 0x20, 0x21],
            [0x31, 0x32, 0x33, 0x30],
        ]

    def test_inverse_law(self):
        rng = random.Random(11)
        for _ in range(50):
            state = _random_state(rng)
            original = copy_state(state)
            shift_rows(state)
            inv_shift_rows(state)
            assert state == original


# ─── MixColumns ───────────────────────────────────────────────────

class TestMixColumns:

    def test_unit_column(self):
        assert mix_column([0x01, 0x00, 0x00, 0x00]) == [0x02, 0x01, 0x01, 0x01]

    def test_matrix_squared_is_five(self):
        assert mix_column([0x02, 0x01, 0x01, 0x01]) == [0x05, 0x00, 0x00, 0x00]

    def test_reduction(self):
        assert mix_column([0x80, 0x00, 0x00, 0x00]) == [0x1B, 0x80, 0x80, 0x80]

    def test_inverse_of_unit_image(self):
        assert inv_mix_column([0x02, 0x01, 0x01, 0x01]) == [0x01, 0x00, 0x00, 0x00]

    def test_inverse_law_random_columns(self):
        rng = random.Random(2024)
        for _ in range(500):
            col = [rng.randrange(256) for _ in range(4)]
            assert inv_mix_column(mix_column(col)) == col
            assert mix_column(inv_mix_column(col)) == col

    def test_inverse_law_single_byte_columns(self):
        for pos in range(4):
            for v in range(256):
                col = [0, 0, 0, 0]
                col[pos] = v
                assert inv_mix_column(mix_column(col)) == col

    def test_state_inverse_law(self):
        rng = random.Random(3)
        for _ in range(50):
            state = _random_state(rng)
            original = copy_state(state)
            mix_columns(state)
            inv_mix_columns(state)
            assert state == original

    def test_columns_independent(self):
        state = bytes_to_state(bytes([1, 0, 0, 0] + [0] * 12))
        mix_columns(state)
        assert state_to_bytes(state) == bytes([2, 1, 1, 1] + [0] * 12)


# ─── AddRoundKey ──────────────────────────────────────────────────

class TestAddRoundKey:

    def test_round_zero_xors_key(self):
        key = bytes(range(16))
        block = bytes(range(100, 116))
        schedule = key_expansion(key)
        state = bytes_to_state(block)
        add_round_key(state, schedule, 0)
        assert state_to_bytes(state) == bytes(a ^ b for a, b in zip(block, key))

    @pytest.mark.parametrize("round_num", [0, 1, 5, 10])
    def test_self_inverse(self, round_num):
        schedule = key_expansion(b"1234567890abcdef")
        state = bytes_to_state(b"hello world12345")
        original = copy_state(state)
        add_round_key(state, schedule, round_num)
        assert state != original
        add_round_key(state, schedule, round_num)
        assert state == original
