"""
Fixed lookup tables and dimensions.

SBOX and INV_SBOX have 16 entries and are indexed by the low nibble of a
byte only. The low nibbles of SBOX form a permutation of 0..15, and

    INV_SBOX[SBOX[l] & 0x0F] == (SBOX[l] & 0xF0) | l

so that (b & 0xF0) ^ SBOX[b & 0x0F] is undone by
(c & 0xF0) ^ INV_SBOX[c & 0x0F] for every byte.
"""

NB = 4           # columns in the state
NK = 4           # 32-bit words in the key
NR = 10          # rounds
BLOCK_SIZE = 16
KEY_SIZE = 16

SBOX = bytes([
    0x6e, 0x73, 0x74, 0x78,
    0xf1, 0x6c, 0x6a, 0xcf,
    0x37, 0x0d, 0x69, 0x26,
    0xfb, 0xd2, 0xa0, 0x75,
])

INV_SBOX = bytes([
    0xae, 0xf4, 0xdd, 0x71,
    0x72, 0x7f, 0x2b, 0x38,
    0x73, 0x6a, 0x66, 0xfc,
    0x65, 0x09, 0x60, 0xc7,
])

# Only 5 constants; the key schedule wraps around them
RCON = bytes([0x01, 0x02, 0x04, 0x08, 0x10])
