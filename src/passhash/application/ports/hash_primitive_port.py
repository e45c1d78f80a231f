"""Port for the adaptive password-hashing primitive."""

from __future__ import annotations

from typing import Protocol


class HashPrimitivePort(Protocol):
    """Adaptive hash contract: hash, verify, and expose the embedded cost."""

    def hash(self, password: bytes, cost: int) -> bytes:
        """Hash password with a fresh salt at the given cost."""

    def verify(self, encoded: bytes, password: bytes) -> bool:
        """Compare password against encoded hash in constant time."""

    def extract_cost(self, encoded: bytes) -> int:
        """Return the cost factor embedded in encoded hash."""
