"""Named statistics and a scoped elapsed-time counter."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from types import TracebackType
from typing import Optional, Type, Union

from .names import Name

_UINT64_MASK = (1 << 64) - 1


def _cycles64() -> int:
    return time.perf_counter_ns() & _UINT64_MASK


@dataclass(frozen=True)
class StatId:
    """Identifies a statistic by name."""

    name: Name = field(default_factory=Name)

    def __post_init__(self) -> None:
        if isinstance(self.name, str):
            object.__setattr__(self, "name", Name(self.name))


class ScopeCycleCounter:
    """Measures time elapsed since creation, in nanosecond ticks."""

    def __init__(self, stat_id: Union[StatId, str, None] = None) -> None:
        if stat_id is None:
            stat_id = StatId()
        elif isinstance(stat_id, str):
            stat_id = StatId(Name(stat_id))
        self.stat_id = stat_id
        self.start_cycles = _cycles64()
        self.elapsed: Optional[int] = None

    def finish(self) -> int:
        """Ticks elapsed since the counter started."""
        self.elapsed = (_cycles64() - self.start_cycles) & _UINT64_MASK
        return self.elapsed

    def __enter__(self) -> ScopeCycleCounter:
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.finish()