"""Interned, case-insensitive names backed by a global string pool."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Dict, Optional

NAME_SIZE = 256
NAME_NONE = 0

_UINT32_MASK = 0xFFFFFFFF
_DJB2_SEED = 5381
_NUL = "\0"


def _until_nul(text: str) -> str:
    return text.split(_NUL, 1)[0]


def hash_string(text: str) -> int:
    """32-bit djb2 hash of ``text``, stopping at the first NUL character."""
    value = _DJB2_SEED
    for ch in _until_nul(text):
        value = (((value << 5) + value) + ord(ch)) & _UINT32_MASK
    return value


def _lower(text: str) -> str:
    if text.isascii():
        return text.lower()
    return "".join(ch.lower() if len(ch.lower()) == 1 else ch for ch in text)


def hash_string_lower(text: str) -> int:
    """djb2 hash of the lower-cased ``text``; equal for strings differing only in case."""
    return hash_string(_lower(text))


@dataclass(frozen=True)
class NameEntry:
    """A stored name together with the hash used to compare it."""

    comparison_id: int
    name: str
    is_wide: bool = False

    @property
    def length(self) -> int:
        return len(self.name)


class NamePool:
    """Maps display hashes and comparison hashes to stored name entries."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._display: Dict[int, NameEntry] = {}
        self._comparison: Dict[int, NameEntry] = {}

    def find_or_store(self, text: str) -> int:
        """Store ``text`` if its display hash is new; return the display hash."""
        is_wide = not text.isascii()
        display_hash = hash_string(text)
        with self._lock:
            if display_hash in self._display:
                return display_hash
            comparison_hash = hash_string_lower(text)
            if comparison_hash not in self._comparison:
                self._comparison[comparison_hash] = NameEntry(0, text, is_wide)
            self._display[display_hash] = NameEntry(comparison_hash, text, is_wide)
        return display_hash

    def resolve(self, display_hash: int) -> NameEntry:
        """The entry stored under ``display_hash``; KeyError if there is none."""
        with self._lock:
            try:
                return self._display[display_hash]
            except KeyError:
                raise KeyError(f"no name stored for hash {display_hash}") from None

    def __len__(self) -> int:
        with self._lock:
            return len(self._display)


name_pool = NamePool()


class Name:
    """A lightweight handle to a pooled string, compared without regard to case."""

    __slots__ = ("_display_index", "_comparison_index", "_pool")

    def __init__(self, text: Optional[str] = None, pool: Optional[NamePool] = None) -> None:
        self._pool = pool if pool is not None else name_pool
        self._display_index = NAME_NONE
        self._comparison_index = NAME_NONE
        if text is None or len(text) >= NAME_SIZE:
            return
        display = self._pool.find_or_store(text)
        self._display_index = display
        if display != NAME_NONE:
            self._comparison_index = self._pool.resolve(display).comparison_id

    @property
    def display_index(self) -> int:
        return self._display_index

    @property
    def comparison_index(self) -> int:
        return self._comparison_index

    def is_none(self) -> bool:
        return self._comparison_index == NAME_NONE

    def to_string(self) -> str:
        """The name as first stored, or ``"None"`` for the empty name."""
        if self._display_index == NAME_NONE and self._comparison_index == NAME_NONE:
            return "None"
        return _until_nul(self._pool.resolve(self._display_index).name)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Name({self.to_string()!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self._comparison_index == other._comparison_index

    def __hash__(self) -> int:
        return hash(self._comparison_index)