"""Tests for GF(2^8) arithmetic."""

import pytest

from saes.gf import Multiplier, gmul, mul_0x52, xtime


class TestXtime:
    """xtime multiplies by x with reduction by 0x1B."""

    def test_fips_197_example(self):
        """FIPS-197 section 4.2.1: {57} * {02} = {ae}, {ae} * {02} = {47}."""
        assert xtime(0x57) == 0xAE
        assert xtime(0xAE) == 0x47

    def test_high_bit_reduces(self):
        assert xtime(0x80) == 0x1B
        assert xtime(0xFF) == 0xE5

    def test_stays_in_byte_range(self):
        for a in range(256):
            assert 0 <= xtime(a) <= 0xFF


class TestGmul:
    """gmul only accepts the constants 1, 2, 3."""

    def test_one_is_identity(self):
        for a in range(256):
            assert gmul(a, Multiplier.ONE) == a

    def test_two_is_xtime(self):
        for a in range(256):
            assert gmul(a, Multiplier.TWO) == xtime(a)

    def test_three_is_two_xor_one(self):
        assert gmul(0x57, Multiplier.THREE) == 0xF9
        for a in range(256):
            assert gmul(a, Multiplier.THREE) == xtime(a) ^ a

    def test_plain_ints_accepted(self):
        assert gmul(0x57, 2) == 0xAE

    @pytest.mark.parametrize("bad", [0, 4, 9, -1])
    def test_other_multipliers_rejected(self, bad):
        """No silent zero for out-of-range multipliers."""
        with pytest.raises(ValueError):
            gmul(0x57, bad)


class TestMul0x52:
    """0x52 is the multiplicative inverse of 0x05."""

    def test_inverse_of_five(self):
        assert mul_0x52(0x05) == 0x01

    def test_undoes_multiplication_by_five(self):
        for a in range(256):
            times_five = xtime(xtime(a)) ^ a
            assert mul_0x52(times_five) == a
