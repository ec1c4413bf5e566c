"""
Utility functions for byte/state conversions and hex formatting.

The state is 4x4 bytes in column-major order:
  state[row][col] where row, col in [0..3]

Column-major mapping from a 16-byte block:
  byte[0]  -> state[0][0]
  byte[1]  -> state[1][0]
  byte[2]  -> state[2][0]
  byte[3]  -> state[3][0]
  byte[4]  -> state[0][1]
  ...
  byte[15] -> state[3][3]
"""

from .errors import InvalidBlockLength
from .tables import BLOCK_SIZE


def bytes_to_state(data: bytes) -> list[list[int]]:
    """
    Convert a 16-byte block to a fresh 4x4 state (column-major).

    Args:
        data: 16 bytes of input

    Returns:
        4x4 list of integers (0-255)

    Raises:
        InvalidBlockLength: If data is not 16 bytes
    """
    if len(data) != BLOCK_SIZE:
        raise InvalidBlockLength(len(data))

    state = [[0 for _ in range(4)] for _ in range(4)]
    for col in range(4):
        for row in range(4):
            state[row][col] = data[col * 4 + row]
    return state


def state_to_bytes(state: list[list[int]]) -> bytes:
    """
    Convert a 4x4 state back to 16 bytes (column-major).
    """
    result = []
    for col in range(4):
        for row in range(4):
            result.append(state[row][col])
    return bytes(result)


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Convert a hex string to bytes. Spaces are ignored.

    Raises:
        ValueError: If the string is not valid hex
    """
    return bytes.fromhex(hex_str)


def bytes_to_hex(data: bytes) -> str:
    """Convert bytes to a lowercase hex string."""
    return data.hex()


def state_to_hex(state: list[list[int]]) -> str:
    """
    Convert state to hex string (via bytes).
    """
    return bytes_to_hex(state_to_bytes(state))


def copy_state(state: list[list[int]]) -> list[list[int]]:
    """
    Deep copy a 4x4 state.
    """
    return [row[:] for row in state]


def format_state_grid(state: list[list[int]]) -> str:
    """
    Format state as a readable 4x4 grid.

    Returns multi-line string like:
      31 35 39 63
      32 36 30 64
      33 37 61 65
      34 38 62 66
    """
    lines = []
    for row in range(4):
        row_hex = [f"{state[row][col]:02x}" for col in range(4)]
        lines.append("  " + " ".join(row_hex))
    return "\n".join(lines)


def format_hex_rows(data: bytes, per_row: int = 4) -> str:
    """
    Format bytes as space-separated hex, per_row bytes per line.

    Each line is one column of the state for a 16-byte block.
    """
    lines = []
    for start in range(0, len(data), per_row):
        chunk = data[start:start + per_row]
        lines.append(" ".join(f"{b:02x}" for b in chunk))
    return "\n".join(lines)
