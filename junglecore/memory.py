"""Heap allocation tracking for engine objects and containers."""

from __future__ import annotations

import threading
from enum import IntEnum
from typing import Dict, Optional, Tuple

_UINT64_MASK = (1 << 64) - 1
_SUPPORTED_INDEX_SIZES = (8, 16, 32, 64)


class AllocationType(IntEnum):
    """What an allocation is used for."""

    OBJECT = 0
    CONTAINER = 1


def size_type_bounds(index_size: int) -> Tuple[int, int]:
    """Inclusive range of the signed integer type with ``index_size`` bits."""
    if index_size not in _SUPPORTED_INDEX_SIZES:
        raise ValueError(f"unsupported allocator index size: {index_size}")
    half = 1 << (index_size - 1)
    return -half, half - 1


class PlatformMemory:
    """Hands out zeroed blocks and keeps byte and block counts per allocation type."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._bytes: Dict[AllocationType, int] = {kind: 0 for kind in AllocationType}
        self._counts: Dict[AllocationType, int] = {kind: 0 for kind in AllocationType}

    def _change(self, alloc_type: AllocationType, size: int, sign: int) -> None:
        kind = AllocationType(alloc_type)
        with self._lock:
            self._bytes[kind] = (self._bytes[kind] + sign * size) & _UINT64_MASK
            self._counts[kind] = (self._counts[kind] + sign) & _UINT64_MASK

    def malloc(self, alloc_type: AllocationType, size: int) -> bytearray:
        """Allocate ``size`` zeroed bytes and record them."""
        block = bytearray(size)
        self._change(alloc_type, size, 1)
        return block

    def aligned_malloc(self, alloc_type: AllocationType, size: int, alignment: int) -> bytearray:
        """Allocate like :meth:`malloc`; ``alignment`` must be a power of two."""
        if alignment <= 0 or alignment & (alignment - 1):
            raise ValueError(f"alignment must be a power of two: {alignment}")
        return self.malloc(alloc_type, size)

    def free(self, alloc_type: AllocationType, block: Optional[bytearray]) -> None:
        """Release ``block``; ``None`` is ignored."""
        if block is None:
            return
        self._change(alloc_type, len(block), -1)

    def aligned_free(self, alloc_type: AllocationType, block: Optional[bytearray]) -> None:
        self.free(alloc_type, block)

    def allocation_bytes(self, alloc_type: AllocationType) -> int:
        with self._lock:
            return self._bytes[AllocationType(alloc_type)]

    def allocation_count(self, alloc_type: AllocationType) -> int:
        with self._lock:
            return self._counts[AllocationType(alloc_type)]


platform_memory = PlatformMemory()


class ContainerAllocator:
    """Allocates storage for ``count`` elements of ``element_size`` bytes as container memory."""

    def __init__(
        self,
        element_size: int,
        index_size: int = 32,
        memory: Optional[PlatformMemory] = None,
    ) -> None:
        if element_size <= 0:
            raise ValueError(f"element size must be positive: {element_size}")
        size_type_bounds(index_size)
        self.element_size = element_size
        self.index_size = index_size
        self.max_count = (1 << index_size) - 1
        self.memory = memory if memory is not None else platform_memory

    def allocate(self, count: int) -> bytearray:
        if not 0 <= count <= self.max_count:
            raise OverflowError(f"element count {count} does not fit in {self.index_size} bits")
        return self.memory.malloc(AllocationType.CONTAINER, self.element_size * count)

    def deallocate(self, block: Optional[bytearray]) -> None:
        self.memory.free(AllocationType.CONTAINER, block)