"""Port for the cryptographically secure random byte source."""

from __future__ import annotations

from typing import Protocol


class RandomSourcePort(Protocol):
    """Secure random byte source contract."""

    def read(self, size: int) -> bytes:
        """Return exactly size unpredictable bytes."""
