from __future__ import annotations

import logging
import weakref
from collections import abc
from ..stream import Stream
from ..types import *
from ..validation import require_callable, require_stream, guard_callback
from .base import _NodeIterator, strict_enabled

logger = logging.getLogger(__name__)


class IterableSource(Stream[T]):
    """
    leaf node over an existing iterable.
    collections are re-iterable and get a fresh iterator per enumeration;
    a one-shot iterator is handed out as-is and stays exhausted after one pass.
    mappings yield their values, never their keys.
    """

    def __init__(self, source: Iterable[T], strict: Optional[bool] = None):
        super().__init__()
        if not isinstance(source, abc.Iterable):
            raise TypeError(f"source must be iterable, got {type(source).__name__}")
        self._source = source
        self._strict = strict
        # iterators are one-shot; collections hand out a fresh iterator per pass
        self._one_shot = isinstance(source, abc.Iterator)
        self._enumerated = False

    def enumerate(self) -> Iterator[T]:
        if self._one_shot:
            if self._enumerated:
                if strict_enabled(self._strict):
                    raise SourceConsumedError("iterable source")
                logger.debug("one-shot iterable source enumerated again; yielding what is left")
            self._enumerated = True
        if isinstance(self._source, abc.Mapping):
            return iter(self._source.values())
        return iter(self._source)


class GeneratorSource(Stream[T]):
    """leaf node that calls its factory anew for each enumeration."""

    def __init__(self, factory: Producer[T], strict: Optional[bool] = None):
        super().__init__()
        require_callable(factory, "factory")
        self._factory = guard_callback(factory)
        self._strict = strict
        self._last_producer: Callable[[], Optional[Iterator[T]]] = lambda: None

    def enumerate(self) -> Iterator[T]:
        producer = self._factory()
        # only iterators are one-shot; a collection handed back again iterates afresh
        if isinstance(producer, abc.Iterator):
            if producer is self._last_producer():
                if strict_enabled(self._strict):
                    raise SourceConsumedError("generator source")
                logger.debug("generator factory returned a producer it already returned; yielding what is left")
            self._last_producer = _reference(producer)
        return iter(producer)


def _reference(producer: Iterator[T]) -> Callable[[], Optional[Iterator[T]]]:
    """weak reference where the iterator type allows one; builtin iterators such as list_iterator do not."""
    try:
        return weakref.ref(producer)
    except TypeError:
        return lambda: producer


class EmptySource(Stream[Any]):
    """yields nothing, every time."""

    def enumerate(self) -> Iterator[Any]:
        return iter(())


class _ConcatIterator(_NodeIterator[T]):
    def __init__(self, streams: Tuple[Stream[T], ...]):
        self._pending = list(reversed(streams))
        self._current: Optional[Iterator[T]] = None

    def __next__(self) -> T:
        while True:
            if self._current is None:
                if not self._pending:
                    raise StopIteration
                # only enumerate an operand once we actually reach it
                self._current = self._pending.pop().enumerate()
            for value in self._current:
                return value
            self._current = None


class Concat(Stream[T]):
    """yields every operand in turn; an infinite operand hides the ones after it."""

    def __init__(self, *streams: Stream[T]):
        super().__init__()
        for index, s in enumerate(streams):
            require_stream(s, f"concat operand {index}")
        self._streams = streams

    def _upstreams(self) -> Tuple[Stream[Any], ...]:
        return self._streams

    def enumerate(self) -> Iterator[T]:
        return _ConcatIterator(self._streams)
