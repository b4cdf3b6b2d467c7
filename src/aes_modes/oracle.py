"""
ECB/CBC detection oracle.

ECB maps equal plaintext blocks to equal ciphertext blocks under one key.
CBC chains every block through the previous ciphertext, so two equal
ciphertext blocks only appear by a 2^-128 accident. One repeated aligned
block is therefore enough to call a ciphertext ECB. No key is needed.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Sequence

from .modes import Mode
from .utils import BLOCK_SIZE, split_blocks


def count_repeated_blocks(ciphertext: bytes, block_size: int = BLOCK_SIZE) -> int:
    """Count aligned blocks equal to some earlier block (trailing partial block ignored)."""
    seen: set[bytes] = set()
    repeats = 0
    for block in split_blocks(ciphertext, block_size):
        if block in seen:
            repeats += 1
        else:
            seen.add(block)
    return repeats


def detect_mode(ciphertext: bytes) -> Mode:
    """Guess the mode that produced ciphertext. Always returns ECB or CBC."""
    if count_repeated_blocks(ciphertext) > 0:
        return Mode.ECB
    return Mode.CBC


def classify(ciphertexts: Iterable[bytes]) -> list[Mode]:
    """Classify each ciphertext; output is parallel to the input."""
    return [detect_mode(ct) for ct in ciphertexts]


@dataclass
class OracleReport:
    """Oracle accuracy against ground truth, per true mode."""

    total: dict[str, int] = field(default_factory=dict)
    correct: dict[str, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for mode in Mode:
            self.total.setdefault(mode.value, 0)
            self.correct.setdefault(mode.value, 0)

    def accuracy(self, mode: Mode | None = None) -> float:
        """Fraction classified correctly, overall or for one true mode."""
        if mode is None:
            total = sum(self.total.values())
            correct = sum(self.correct.values())
        else:
            total = self.total[mode.value]
            correct = self.correct[mode.value]
        return correct / total if total else 1.0

    @property
    def misses(self) -> int:
        return sum(self.total.values()) - sum(self.correct.values())


def score(predictions: Sequence[Mode], truth: Sequence[Mode]) -> OracleReport:
    """Compare oracle guesses with the true modes."""
    if len(predictions) != len(truth):
        raise ValueError(f"Length mismatch: {len(predictions)} vs {len(truth)}")

    report = OracleReport()
    for guess, actual in zip(predictions, truth):
        report.total[actual.value] += 1
        if guess == actual:
            report.correct[actual.value] += 1
    return report
