"""Process-wide unique identifier generation."""

from __future__ import annotations

import logging
import threading

logger = logging.getLogger(__name__)

_UINT32_MASK = 0xFFFFFFFF


class UUIDGenerator:
    """Hands out sequential 32-bit identifiers, starting at ``start``."""

    def __init__(self, start: int = 0) -> None:
        self.next_uuid = start & _UINT32_MASK
        self._lock = threading.Lock()

    def generate(self) -> int:
        """Return the next identifier and advance the counter, wrapping at 2**32."""
        with self._lock:
            uuid = self.next_uuid
            self.next_uuid = (uuid + 1) & _UINT32_MASK
        logger.info("Generate UUID : %d", uuid)
        return uuid


_default_generator = UUIDGenerator()


def gen_uuid() -> int:
    """Return the next identifier from the shared generator."""
    return _default_generator.generate()