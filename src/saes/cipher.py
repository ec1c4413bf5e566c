"""
Simplified AES-128 cipher engine.

Round pipelines:
- Encrypt: AddRoundKey(0); rounds 1-9: SubBytes, ShiftRows, MixColumns,
  AddRoundKey(r); round 10: SubBytes, ShiftRows, AddRoundKey(10)
- Decrypt: AddRoundKey(10); rounds 9-1: InvShiftRows, InvSubBytes,
  AddRoundKey(r), InvMixColumns; final: InvShiftRows, InvSubBytes,
  AddRoundKey(0)

The key schedule is computed once per engine and never mutated, so an
engine can be shared between threads. Each call works on its own state.
"""

from .core import (
    sub_bytes,
    inv_sub_bytes,
    shift_rows,
    inv_shift_rows,
    mix_columns,
    inv_mix_columns,
    add_round_key,
)
from .errors import InvalidKeyLength
from .key_schedule import key_expansion
from .tables import KEY_SIZE, NR
from .trace import TraceRecorder
from .utils import bytes_to_state, state_to_bytes, copy_state


# Pipeline definitions: (round, operations)
ENCRYPT_PIPELINE: list[tuple[int, list[str]]] = (
    [(0, ["AddRoundKey"])]
    + [(r, ["SubBytes", "ShiftRows", "MixColumns", "AddRoundKey"]) for r in range(1, NR)]
    + [(NR, ["SubBytes", "ShiftRows", "AddRoundKey"])]  # Final round: no MixColumns
)

DECRYPT_PIPELINE: list[tuple[int, list[str]]] = (
    [(NR, ["AddRoundKey"])]
    + [(r, ["InvShiftRows", "InvSubBytes", "AddRoundKey", "InvMixColumns"])
       for r in range(NR - 1, 0, -1)]
    + [(0, ["InvShiftRows", "InvSubBytes", "AddRoundKey"])]  # no InvMixColumns
)

_STATE_OPS = {
    "SubBytes": sub_bytes,
    "InvSubBytes": inv_sub_bytes,
    "ShiftRows": shift_rows,
    "InvShiftRows": inv_shift_rows,
    "MixColumns": mix_columns,
    "InvMixColumns": inv_mix_columns,
}


class SimplifiedAES128:
    """
    Simplified AES-128 block cipher bound to one key.
    """

    def __init__(self, key: bytes, tracer: TraceRecorder | None = None):
        """
        Expand the key.

        Args:
            key: 16-byte key
            tracer: Optional trace recorder, fed the state after every operation

        Raises:
            InvalidKeyLength: If key is not 16 bytes
        """
        if len(key) != KEY_SIZE:
            raise InvalidKeyLength(len(key))

        self.tracer = tracer
        self._schedule = key_expansion(bytes(key))

    @property
    def schedule(self) -> tuple[bytes, ...]:
        """The 44-word round-key schedule."""
        return self._schedule

    def encrypt(self, block: bytes) -> bytes:
        """
        Encrypt a single 16-byte block.

        Raises:
            InvalidBlockLength: If block is not 16 bytes
        """
        return self._run(block, ENCRYPT_PIPELINE, "encrypt")

    def decrypt(self, block: bytes) -> bytes:
        """
        Decrypt a single 16-byte block.

        Raises:
            InvalidBlockLength: If block is not 16 bytes
        """
        return self._run(block, DECRYPT_PIPELINE, "decrypt")

    def _run(
        self,
        block: bytes,
        pipeline: list[tuple[int, list[str]]],
        direction: str,
    ) -> bytes:
        state = bytes_to_state(block)

        if self.tracer:
            self.tracer.record(
                direction=direction,
                round=pipeline[0][0],
                operation="Input",
                state=copy_state(state),
            )

        for round_num, operations in pipeline:
            for op in operations:
                if op == "AddRoundKey":
                    add_round_key(state, self._schedule, round_num)
                else:
                    _STATE_OPS[op](state)

                if self.tracer:
                    self.tracer.record(
                        direction=direction,
                        round=round_num,
                        operation=op,
                        state=copy_state(state),
                    )

        return state_to_bytes(state)


def new(key: bytes, tracer: TraceRecorder | None = None) -> SimplifiedAES128:
    """Create a cipher engine for key."""
    return SimplifiedAES128(key, tracer=tracer)


def encrypt_block(key: bytes, block: bytes) -> bytes:
    """
    Convenience function: expand key and encrypt one block.
    """
    return SimplifiedAES128(key).encrypt(block)


def decrypt_block(key: bytes, block: bytes) -> bytes:
    """
    Convenience function: expand key and decrypt one block.
    """
    return SimplifiedAES128(key).decrypt(block)
