"""
GF(2^8) arithmetic with the AES reduction polynomial x^8 + x^4 + x^3 + x + 1.

Column mixing only ever multiplies by 1, 2 or 3, so the multiplier is a
closed enumeration rather than an arbitrary integer.
"""

from enum import IntEnum

AES_REDUCTION = 0x1B  # low 8 bits of 0x11B


class Multiplier(IntEnum):
    """Constants the column-mixing steps are allowed to multiply by."""

    ONE = 1
    TWO = 2
    THREE = 3


def xtime(a: int) -> int:
    """Multiply by x in GF(2^8)."""
    return ((a << 1) ^ AES_REDUCTION) & 0xFF if a & 0x80 else (a << 1) & 0xFF


def gmul(a: int, m: Multiplier) -> int:
    """
    Multiply byte a by a small field constant.

    Args:
        a: byte value (0-255)
        m: Multiplier member (plain ints 1-3 are accepted and converted)

    Returns:
        Product in GF(2^8)

    Raises:
        ValueError: If m is not one of 1, 2, 3
    """
    m = Multiplier(m)
    if m is Multiplier.ONE:
        return a
    if m is Multiplier.TWO:
        return xtime(a)
    return xtime(a) ^ a


def mul_0x52(a: int) -> int:
    """
    Multiply by 0x52 = x^6 + x^4 + x, the field inverse of 0x05.

    The [2, 1, 1, 1] mixing matrix M satisfies M*M = 5*I, so its inverse
    is 0x52 * M.
    """
    x1 = xtime(a)
    x2 = xtime(x1)
    x3 = xtime(x2)
    x4 = xtime(x3)
    x5 = xtime(x4)
    x6 = xtime(x5)
    return x6 ^ x4 ^ x1
