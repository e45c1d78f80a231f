"""Operating-system CSPRNG adapter."""

from __future__ import annotations

import logging
import secrets

from passhash.application.ports.random_source_port import RandomSourcePort
from passhash.domain.errors import EntropyFailureError

logger = logging.getLogger(__name__)


class SystemRandomSource(RandomSourcePort):
    """Random source backed by the operating system via `secrets`."""

    def read(self, size: int) -> bytes:
        try:
            data = secrets.token_bytes(size)
        except (OSError, NotImplementedError) as exc:
            logger.error("entropy_read_failed size=%s error=%s", size, type(exc).__name__)
            raise EntropyFailureError("secure random source is unavailable") from exc
        if len(data) != size:
            raise EntropyFailureError(f"secure random source returned {len(data)} of {size} bytes")
        return data
