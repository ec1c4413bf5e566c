"""Run configuration shared by the command-line commands."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidBlockLength, InvalidKeyLength
from .tables import BLOCK_SIZE, KEY_SIZE
from .utils import hex_to_bytes


@dataclass
class RunConfig:
    """Validated inputs for one cipher run.

    Construction fails with a typed length error before any cipher
    work happens.
    """

    key: bytes
    data: bytes
    verbose: bool = False
    trace_path: str | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if len(self.key) != KEY_SIZE:
            raise InvalidKeyLength(len(self.key))
        if len(self.data) != BLOCK_SIZE:
            raise InvalidBlockLength(len(self.data))

    @classmethod
    def from_inputs(
        cls,
        key_hex: str | None = None,
        key_text: str | None = None,
        data_hex: str | None = None,
        data_text: str | None = None,
        verbose: bool = False,
        trace_path: str | None = None,
    ) -> RunConfig:
        """Build a config from hex or text inputs.

        Exactly one of key_hex/key_text and one of data_hex/data_text
        must be given. Text is encoded as UTF-8.

        Raises:
            ValueError: On missing, duplicated or malformed inputs
            InvalidKeyLength, InvalidBlockLength: On wrong sizes
        """
        key = _parse_input("key", key_hex, key_text)
        data = _parse_input("data", data_hex, data_text)
        return cls(key=key, data=data, verbose=verbose, trace_path=trace_path)


def _parse_input(name: str, hex_value: str | None, text_value: str | None) -> bytes:
    if hex_value is not None and text_value is not None:
        raise ValueError(f"Give {name} as hex or as text, not both")
    if hex_value is not None:
        try:
            return hex_to_bytes(hex_value)
        except ValueError as e:
            raise ValueError(f"Invalid {name} hex: {e}") from e
    if text_value is not None:
        return text_value.encode("utf-8")
    raise ValueError(f"Missing {name}")
