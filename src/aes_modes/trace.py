"""
Trace recording and pretty printing for AES operations.

Contains:
- TraceRecorder: JSON Lines trace file and/or compact verbose stdout
- print_header / print_result: shared CLI formatting helpers
"""

import json
from typing import Any, TextIO

from .utils import state_to_hex


class TraceRecorder:
    """
    Records per-operation traces of block encryption/decryption.

    Each record is a flat dict (direction, round, operation, state, ...).
    States are stored as hex strings so records are JSON-ready.

    Supports:
    - JSON Lines file output  (when trace_file is set)
    - Compact verbose stdout  (when verbose is set)
    """

    def __init__(self, verbose: bool = False, trace_file: TextIO | None = None):
        self.verbose = verbose
        self.trace_file = trace_file
        self._records: list[dict[str, Any]] = []

    def record(self, **kwargs) -> None:
        """Record a trace entry."""
        entry = self._make_serializable(kwargs)
        self._records.append(entry)

        if self.trace_file:
            self.trace_file.write(json.dumps(entry) + "\n")
            self.trace_file.flush()

        if self.verbose:
            self._print_verbose(entry)

    def _make_serializable(self, obj: Any) -> Any:
        if isinstance(obj, dict):
            return {k: self._make_serializable(v) for k, v in obj.items()}
        elif isinstance(obj, list) and len(obj) == 4 and all(
            isinstance(row, list) for row in obj
        ):
            return state_to_hex(obj)
        elif isinstance(obj, list):
            return [self._make_serializable(item) for item in obj]
        elif isinstance(obj, (bytes, bytearray)):
            return bytes(obj).hex()
        else:
            return obj

    def _print_verbose(self, record: dict[str, Any]) -> None:
        direction = record.get("direction", "?")
        round_num = record.get("round", "?")
        operation = record.get("operation", "unknown")
        state_hex = record.get("state", "")
        tag = "E" if direction == "encrypt" else "D"
        print(f"{tag} R{round_num:>2}  {operation:15s} STATE:{state_hex}")

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


def print_result(output_hex: str, blocks: int, passed: bool | None = None) -> None:
    """Print final result, with golden-reference verdict when available."""
    print(f"\n{'='*70}")
    print("RESULT")
    print(f"{'='*70}")
    print(f"Output: {output_hex}")
    print(f"Blocks: {blocks}")

    if passed is not None:
        status = "PASS" if passed else "FAIL"
        marker = "[OK]" if passed else "[ERROR]"
        print(f"Verification: {marker} {status}")
    print(f"{'='*70}")
