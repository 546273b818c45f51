from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *
from .validation import require_callable, guard_callback

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

# --- abstract base class ---

class IStream(ABC, Generic[T]):
    @abstractmethod
    def enumerate(self) -> Iterator[T]:
        """
        obtain a fresh pull iterator over this stream's elements.
        must not consume anything upstream; consumption happens as the
        returned iterator is advanced.
        """
        pass

# --- main stream class ---

class Stream(
    IStream[T],
    _CoreOperations[T]
):
    """a lazy, pull-based stream. nothing is evaluated until a terminal operation runs."""

    def __init__(self):
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    def _upstreams(self) -> Tuple['Stream[Any]', ...]:
        """the streams this node reads from, used for repr."""
        return ()

    def __iter__(self) -> Iterator[T]:
        return self.enumerate()

    def __repr__(self) -> str:
        inner = ", ".join(repr(s) for s in self._upstreams())
        return f"{type(self).__name__}({inner})" if inner else type(self).__name__

    def for_each(self, action: Action[T]) -> None:
        """
        performs the action on each element, in order.
        this is a terminal operation that runs one full pull pass.
        """
        require_callable(action, "action")
        action = guard_callback(action)
        for item in self.enumerate():
            action(item)
