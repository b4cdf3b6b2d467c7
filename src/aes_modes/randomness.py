"""Injectable randomness with usage tracking for the sample generator."""

from __future__ import annotations

import random
import secrets
from typing import Any


class RandomSource:
    """Random source with tracking by category.

    Seeded sources are deterministic (for reproducible test vectors);
    unseeded sources draw from the secrets module.
    """

    CATEGORIES = ("key", "iv", "prefix", "mode", "other")

    def __init__(self, seed: int | None = None):
        """Initialize random source.

        Args:
            seed: Optional seed for deterministic randomness
        """
        self._seed = seed
        self._rng = self._create_rng(seed)
        self._bytes_used: dict[str, int] = {}
        self.reset()

    def _create_rng(self, seed: int | None) -> random.Random | None:
        if seed is None:
            return None  # Use secrets
        return random.Random(seed)

    def reset(self) -> None:
        """Reset usage counters (and rewind a seeded stream)."""
        self._bytes_used = {k: 0 for k in self.CATEGORIES}
        if self._seed is not None:
            self._rng = self._create_rng(self._seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    @property
    def total_bytes(self) -> int:
        """Total random bytes drawn."""
        return sum(self._bytes_used.values())

    @property
    def bytes_breakdown(self) -> dict[str, int]:
        """Get bytes breakdown by category."""
        return self._bytes_used.copy()

    def _track(self, category: str, count: int) -> None:
        if category not in self._bytes_used:
            category = "other"
        self._bytes_used[category] += count

    def get_bytes(self, count: int, category: str = "other") -> bytes:
        """Get random bytes and track usage."""
        self._track(category, count)
        if self._rng is None:
            return secrets.token_bytes(count)
        return bytes(self._rng.getrandbits(8) for _ in range(count))

    def randint(self, low: int, high: int, category: str = "other") -> int:
        """Random integer in [low, high], inclusive."""
        self._track(category, 1)
        if self._rng is None:
            return low + secrets.randbelow(high - low + 1)
        return self._rng.randint(low, high)

    def coin(self, category: str = "other") -> bool:
        """Fair coin flip."""
        return self.randint(0, 1, category) == 1

    def get_summary(self) -> dict[str, Any]:
        """Get summary of randomness usage."""
        return {
            "seed": self._seed,
            "total_bytes": self.total_bytes,
            "bytes_breakdown": self.bytes_breakdown,
        }
