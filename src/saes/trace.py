"""
Trace recording and pretty printing for cipher runs.

Contains:
- TraceRecorder: JSON Lines trace file + compact verbose stdout
- print_header / print_result: shared formatting helpers
"""

import json
from typing import Any, TextIO

from .utils import state_to_hex


class TraceRecorder:
    """
    Records the state after each round operation.

    Supports:
    - in-memory records (always)
    - JSON Lines file output (when trace_file is set)
    - compact verbose stdout (when verbose is set)
    """

    def __init__(self, verbose: bool = False, trace_file: TextIO | None = None):
        self.verbose = verbose
        self.trace_file = trace_file
        self._records: list[dict[str, Any]] = []

    def record(self, **kwargs) -> None:
        """Record a trace entry."""
        self._records.append(kwargs)

        if self.trace_file:
            self._write_jsonl(kwargs)

        if self.verbose:
            self._print_verbose(kwargs)

    def _write_jsonl(self, record: dict[str, Any]) -> None:
        serializable = self._make_serializable(record)
        self.trace_file.write(json.dumps(serializable) + "\n")
        self.trace_file.flush()

    def _make_serializable(self, obj: Any) -> Any:
        if isinstance(obj, dict):
            if "state" in obj:
                obj = dict(obj, state=state_to_hex(obj["state"]))
            return {k: self._make_serializable(v) for k, v in obj.items()}
        elif isinstance(obj, (list, tuple)):
            return [self._make_serializable(item) for item in obj]
        elif isinstance(obj, (bytes, bytearray)):
            return obj.hex()
        else:
            return obj

    def _print_verbose(self, record: dict[str, Any]) -> None:
        round_num = record.get("round", "?")
        operation = record.get("operation", "unknown")
        direction = record.get("direction", "")

        if "state" in record:
            state_hex = state_to_hex(record["state"])
            print(f"{direction[:3]:3s} R{round_num:>2}  {operation:14s} STATE:{state_hex}")

    def get_records(self) -> list[dict[str, Any]]:
        return list(self._records)

    def clear(self) -> None:
        self._records.clear()


# ------------------------------------------------------------------
# Shared formatting functions
# ------------------------------------------------------------------

def print_header(title: str) -> None:
    """Print a section header."""
    print(f"\n{'#'*70}")
    print(f"# {title}")
    print(f"{'#'*70}")


def print_result(label: str, output_hex: str, round_trip_ok: bool | None = None) -> None:
    """Print the result of an encrypt or decrypt run."""
    print(f"\n{'='*70}")
    print("RESULT")
    print(f"{'='*70}")
    print(f"{label}: {output_hex}")

    if round_trip_ok is not None:
        status = "PASS" if round_trip_ok else "FAIL"
        marker = "[OK]" if round_trip_ok else "[ERROR]"
        print(f"Round trip: {marker} {status}")
    print(f"{'='*70}")
