# -*- coding: utf-8 -*-
"""streaming_ta core – fixed-capacity circular buffer.

A ``Window`` always holds exactly ``size`` values: it is filled with the
seed value at construction, so there is no partially filled state and no
warm-up bookkeeping for its owners.  ``push`` is the only mutator; it
returns the value that falls out of the window.

    >>> w = Window(3, 1)      # [1, 1, 1]
    >>> w.push(2), w.push(3), w.push(4), w.push(5), w.push(6)
    (1, 1, 1, 2, 3)
    >>> list(w)               # newest -> oldest
    [6, 5, 4]

Two implementations share one interface.  ``Window`` checks its
preconditions (``assert`` on pushing into an empty window, ``IndexError`` on
out-of-range indexing); ``UncheckedWindow`` skips them.  ``Window.create``
picks one of them, so callers never see a difference in results.
"""
from __future__ import annotations

from typing import Any, Generic, Iterator, List, Optional, Sequence, TypeVar

from . import _base

T = TypeVar("T")


class Window(Generic[T]):
    __slots__ = ("_buf", "_index", "_size", "_s_1")

    def __init__(self, size: int, value: T) -> None:
        assert size >= 0, "Window size must not be negative"
        self._buf: List[T] = [value] * size
        self._index = 0
        self._size = size
        self._s_1 = max(size - 1, 0)

    # -----------------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------------

    @classmethod
    def create(cls, size: int, value: T, unchecked: Optional[bool] = None) -> "Window[T]":
        """Build a window, unchecked when asked to or when the
        ``STREAMING_TA_UNSAFE_PERFORMANCE`` switch is on."""
        if unchecked is None:
            unchecked = _base.UNSAFE_PERFORMANCE
        if unchecked:
            return UncheckedWindow(size, value)
        return Window(size, value)

    @classmethod
    def empty(cls) -> "Window[Any]":
        """A window without storage.  Pushing into it is a programmer error."""
        return cls(0, None)

    @classmethod
    def from_parts(cls, buf: Sequence[T], index: int) -> "Window[T]":
        """Rebuild a window from raw storage; *index* is the slot of the
        oldest value (usually 0)."""
        assert len(buf) > index >= 0, "Index is out of slice's range"
        window = cls.__new__(cls)
        window._buf = list(buf)
        window._index = index
        window._size = len(window._buf)
        window._s_1 = window._size - 1
        return window

    # -----------------------------------------------------------------------
    # Mutation
    # -----------------------------------------------------------------------

    def push(self, value: T) -> T:
        """Store *value* and return the oldest value, which leaves the window."""
        assert self._size, "Trying to use an empty window"
        index = self._index
        old_value = self._buf[index]
        self._buf[index] = value
        self._index = 0 if index == self._s_1 else index + 1
        return old_value

    # -----------------------------------------------------------------------
    # Read-only views
    # -----------------------------------------------------------------------

    def newest(self) -> T:
        # index 0 wraps to the last slot
        return self._buf[self._index - 1]

    def oldest(self) -> T:
        return self._buf[self._index]

    def is_empty(self) -> bool:
        return self._size == 0

    def as_slice(self) -> tuple:
        """Raw storage.  The order of elements is not the push order."""
        return tuple(self._buf)

    def get(self, index: int) -> Optional[T]:
        """Element *index* steps back from the newest, or None when out of range."""
        if not 0 <= index < self._size:
            return None
        return self._buf[self._slice_index(index)]

    def _slice_index(self, index: int) -> int:
        position = self._index + self._s_1 - index
        if position >= self._size:
            position -= self._size
        return position

    def __getitem__(self, index: int) -> T:
        if not 0 <= index < self._size:
            raise IndexError(f"Window index {index} is out of range")
        return self._buf[self._slice_index(index)]

    def __len__(self) -> int:
        return self._size

    def iter(self) -> "WindowIterator[T]":
        """Values from the newest to the oldest."""
        return WindowIterator(self)

    def iter_rev(self) -> "ReversedWindowIterator[T]":
        """Values from the oldest to the newest."""
        return ReversedWindowIterator(self)

    def __iter__(self) -> Iterator[T]:
        return WindowIterator(self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self.iter())!r})"


class UncheckedWindow(Window[T]):
    """Same semantics as :class:`Window` without precondition checks."""

    __slots__ = ()

    def push(self, value: T) -> T:
        index = self._index
        old_value = self._buf[index]
        self._buf[index] = value
        self._index = 0 if index == self._s_1 else index + 1
        return old_value

    def __getitem__(self, index: int) -> T:
        return self._buf[self._slice_index(index)]


# ---------------------------------------------------------------------------
# Iterators
# ---------------------------------------------------------------------------

class WindowIterator(Generic[T]):
    """Exact-length iterator from the newest value to the oldest one."""

    __slots__ = ("_window", "_index", "_remaining")

    def __init__(self, window: Window[T]) -> None:
        self._window = window
        self._index = window._index
        self._remaining = window._size

    def __iter__(self) -> "WindowIterator[T]":
        return self

    def __next__(self) -> T:
        if self._remaining == 0:
            raise StopIteration
        self._remaining -= 1
        self._index = self._index - 1 if self._index else self._window._s_1
        return self._window._buf[self._index]

    def __len__(self) -> int:
        return self._remaining

    def __length_hint__(self) -> int:
        return self._remaining


class ReversedWindowIterator(Generic[T]):
    """Exact-length iterator from the oldest value to the newest one."""

    __slots__ = ("_window", "_index", "_remaining")

    def __init__(self, window: Window[T]) -> None:
        self._window = window
        self._index = window._index
        self._remaining = window._size

    def __iter__(self) -> "ReversedWindowIterator[T]":
        return self

    def __next__(self) -> T:
        if self._remaining == 0:
            raise StopIteration
        value = self._window._buf[self._index]
        self._remaining -= 1
        self._index = 0 if self._index == self._window._s_1 else self._index + 1
        return value

    def __len__(self) -> int:
        return self._remaining

    def __length_hint__(self) -> int:
        return self._remaining
