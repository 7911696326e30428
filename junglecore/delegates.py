"""Single-cast and multicast delegates."""

from __future__ import annotations

import threading
from itertools import count
from typing import Any, Callable, Dict, Optional

_UINT64_MASK = (1 << 64) - 1


class UnboundDelegateError(RuntimeError):
    """Raised when an unbound delegate is executed."""


class _HandleIds:
    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._counter = count(1)

    def next(self) -> int:
        with self._lock:
            result = next(self._counter) & _UINT64_MASK
            if result == 0:
                result = next(self._counter) & _UINT64_MASK
        return result


_handle_ids = _HandleIds()


class DelegateHandle:
    """Identifies one function bound to a multicast delegate."""

    __slots__ = ("handle_id",)

    def __init__(self, handle_id: int = 0) -> None:
        self.handle_id = handle_id

    @staticmethod
    def create() -> DelegateHandle:
        """A new handle with an identifier never handed out before."""
        return DelegateHandle(_handle_ids.next())

    def is_valid(self) -> bool:
        return self.handle_id != 0

    def invalidate(self) -> None:
        self.handle_id = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DelegateHandle):
            return NotImplemented
        return self.handle_id == other.handle_id

    def __hash__(self) -> int:
        return hash(self.handle_id)

    def __repr__(self) -> str:
        return f"DelegateHandle({self.handle_id})"


class Delegate:
    """Holds at most one callable."""

    def __init__(self) -> None:
        self._func: Optional[Callable[..., Any]] = None

    def bind(self, func: Callable[..., Any]) -> None:
        self._func = func

    def unbind(self) -> None:
        self._func = None

    def is_bound(self) -> bool:
        return self._func is not None

    def execute(self, *args: Any) -> Any:
        """Call the bound function and return its result."""
        if self._func is None:
            raise UnboundDelegateError("delegate is not bound")
        return self._func(*args)

    def execute_if_bound(self, *args: Any) -> bool:
        """Call the bound function if there is one; report whether it was called."""
        if self.is_bound():
            self.execute(*args)
            return True
        return False


class MulticastDelegate:
    """Holds any number of callables, all called on broadcast."""

    def __init__(self) -> None:
        self._delegates: Dict[int, Callable[..., Any]] = {}

    def add(self, func: Callable[..., Any], *args: Any) -> DelegateHandle:
        """Register ``func``; ``args`` are passed before the broadcast arguments."""
        handle = DelegateHandle.create()

        def call(*params: Any) -> None:
            func(*args, *params)

        self._delegates[handle.handle_id] = call
        return handle

    def remove(self, handle: DelegateHandle) -> bool:
        """Unregister the function for ``handle``; False if the handle is invalid."""
        if handle.is_valid():
            self._delegates.pop(handle.handle_id, None)
            return True
        return False

    def broadcast(self, *args: Any) -> None:
        """Call every registered function; changes made during the call apply afterwards."""
        for delegate in list(self._delegates.values()):
            delegate(*args)

    def __len__(self) -> int:
        return len(self._delegates)