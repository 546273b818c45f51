from __future__ import annotations

import logging
from functools import cmp_to_key
from ..stream import Stream
from ..types import *
from ..validation import require_callable, require_count, guard_callback
from .base import _NodeIterator, _BufferWatch

logger = logging.getLogger(__name__)


class _Operator(Stream[T]):
    """a node with exactly one upstream."""

    def __init__(self, upstream: Stream[Any]):
        super().__init__()
        self._upstream = upstream

    def _upstreams(self) -> Tuple[Stream[Any], ...]:
        return (self._upstream,)


# --- filter ---

class _FilterIterator(_NodeIterator[T]):
    def __init__(self, upstream: Iterator[T], predicate: Predicate[T]):
        self._upstream = upstream
        self._predicate = predicate

    def __next__(self) -> T:
        for value in self._upstream:
            if self._predicate(value):
                return value
        raise StopIteration


class Filter(_Operator[T]):
    def __init__(self, upstream: Stream[T], predicate: Predicate[T]):
        require_callable(predicate, "predicate")
        super().__init__(upstream)
        self._predicate = guard_callback(predicate)

    def enumerate(self) -> Iterator[T]:
        return _FilterIterator(self._upstream.enumerate(), self._predicate)


# --- map ---

class _MapIterator(_NodeIterator[U]):
    def __init__(self, upstream: Iterator[T], mapper: Selector[T, U]):
        self._upstream = upstream
        self._mapper = mapper

    def __next__(self) -> U:
        return self._mapper(next(self._upstream))


class Map(_Operator[U]):
    def __init__(self, upstream: Stream[T], mapper: Selector[T, U]):
        require_callable(mapper, "mapper")
        super().__init__(upstream)
        self._mapper = guard_callback(mapper)

    def enumerate(self) -> Iterator[U]:
        return _MapIterator(self._upstream.enumerate(), self._mapper)


# --- flat map ---

class _FlatMapIterator(_NodeIterator[U]):
    def __init__(self, upstream: Iterator[T], mapper: Selector[T, Iterable[U]]):
        self._upstream = upstream
        self._mapper = mapper
        self._inner: Optional[Iterator[U]] = None

    def __next__(self) -> U:
        while True:
            if self._inner is None:
                # raises StopIteration once upstream is exhausted
                self._inner = iter(self._mapper(next(self._upstream)))
            for value in self._inner:
                return value
            self._inner = None


class FlatMap(_Operator[U]):
    """each mapped result may be a Stream or any iterable; inner elements come out before the next outer pull."""

    def __init__(self, upstream: Stream[T], mapper: Selector[T, Iterable[U]]):
        require_callable(mapper, "mapper")
        super().__init__(upstream)
        self._mapper = guard_callback(mapper)

    def enumerate(self) -> Iterator[U]:
        return _FlatMapIterator(self._upstream.enumerate(), self._mapper)


# --- skip ---

class _SkipIterator(_NodeIterator[T]):
    def __init__(self, upstream: Iterator[T], count: int):
        self._upstream = upstream
        self._remaining = count

    def __next__(self) -> T:
        while self._remaining > 0:
            next(self._upstream)
            self._remaining -= 1
        return next(self._upstream)


class Skip(_Operator[T]):
    def __init__(self, upstream: Stream[T], count: int):
        count = require_count(count, "count")
        super().__init__(upstream)
        self._count = count

    def enumerate(self) -> Iterator[T]:
        return _SkipIterator(self._upstream.enumerate(), self._count)


class _SkipWhileIterator(_NodeIterator[T]):
    def __init__(self, upstream: Iterator[T], predicate: Predicate[T]):
        self._upstream = upstream
        self._predicate = predicate
        self._skipping = True

    def __next__(self) -> T:
        if not self._skipping:
            return next(self._upstream)
        for value in self._upstream:
            if not self._predicate(value):
                # predicate is never consulted again for this enumeration
                self._skipping = False
                return value
        raise StopIteration


class SkipWhile(_Operator[T]):
    def __init__(self, upstream: Stream[T], predicate: Predicate[T]):
        require_callable(predicate, "predicate")
        super().__init__(upstream)
        self._predicate = guard_callback(predicate)

    def enumerate(self) -> Iterator[T]:
        return _SkipWhileIterator(self._upstream.enumerate(), self._predicate)


# --- limit ---

class _LimitIterator(_NodeIterator[T]):
    def __init__(self, upstream: Iterator[T], count: int):
        self._upstream = upstream
        self._remaining = count

    def __next__(self) -> T:
        # check before pulling: element n+1 must never be requested
        if self._remaining <= 0:
            raise StopIteration
        value = next(self._upstream)
        self._remaining -= 1
        return value


class Limit(_Operator[T]):
    def __init__(self, upstream: Stream[T], count: int):
        count = require_count(count, "count")
        super().__init__(upstream)
        self._count = count

    def enumerate(self) -> Iterator[T]:
        return _LimitIterator(self._upstream.enumerate(), self._count)


class _LimitWhileIterator(_NodeIterator[T]):
    def __init__(self, upstream: Iterator[T], predicate: Predicate[T]):
        self._upstream = upstream
        self._predicate = predicate
        self._done = False

    def __next__(self) -> T:
        if self._done:
            raise StopIteration
        value = next(self._upstream)
        if not self._predicate(value):
            self._done = True
            raise StopIteration
        return value


class LimitWhile(_Operator[T]):
    def __init__(self, upstream: Stream[T], predicate: Predicate[T]):
        require_callable(predicate, "predicate")
        super().__init__(upstream)
        self._predicate = guard_callback(predicate)

    def enumerate(self) -> Iterator[T]:
        return _LimitWhileIterator(self._upstream.enumerate(), self._predicate)


# --- distinct ---

def _strictly_equal(a: Any, b: Any) -> bool:
    """same object, or same type and equal value; 1, 1.0 and True stay distinct."""
    return a is b or (type(a) is type(b) and a == b)


class _DistinctIterator(_NodeIterator[T]):
    def __init__(self, upstream: Iterator[T]):
        self._upstream = upstream
        # hashable values go in a set keyed by type; the rest fall back to a linear scan
        self._seen_hashable: Set[Tuple[type, Any]] = set()
        self._seen_unhashable: List[T] = []
        self._watch = _BufferWatch("distinct")

    def _accept(self, value: T) -> bool:
        try:
            hash(value)
        except TypeError:
            if any(_strictly_equal(value, seen) for seen in self._seen_unhashable):
                return False
            self._seen_unhashable.append(value)
            return True
        key = (type(value), value)
        if key in self._seen_hashable:
            return False
        self._seen_hashable.add(key)
        return True

    def __next__(self) -> T:
        for value in self._upstream:
            if self._accept(value):
                self._watch.check(len(self._seen_hashable) + len(self._seen_unhashable))
                return value
        raise StopIteration


class _DistinctByIterator(_NodeIterator[T]):
    def __init__(self, upstream: Iterator[T], comparer: EqualityComparer[T]):
        self._upstream = upstream
        self._comparer = comparer
        self._accepted: List[T] = []
        self._watch = _BufferWatch("distinct")

    def __next__(self) -> T:
        for value in self._upstream:
            # always called as comparer(candidate, previously_accepted)
            if any(self._comparer(value, accepted) for accepted in self._accepted):
                continue
            self._accepted.append(value)
            self._watch.check(len(self._accepted))
            return value
        raise StopIteration


class Distinct(_Operator[T]):
    """
    yields each element the first time an equal one is seen in this enumeration.
    without a comparer, equality is strict: the same object, or the same type and ==.
    with a comparer, every candidate is checked pairwise against the accepted
    elements, so the cost is quadratic in the worst case.
    """

    def __init__(self, upstream: Stream[T], comparer: Optional[EqualityComparer[T]] = None):
        if comparer is not None:
            require_callable(comparer, "comparer")
            comparer = guard_callback(comparer)
        super().__init__(upstream)
        self._comparer = comparer

    def enumerate(self) -> Iterator[T]:
        if self._comparer is None:
            return _DistinctIterator(self._upstream.enumerate())
        return _DistinctByIterator(self._upstream.enumerate(), self._comparer)


# --- sorted ---

class _SortedIterator(_NodeIterator[T]):
    def __init__(self, upstream: Iterator[T], comparer: Comparer[T]):
        self._upstream = upstream
        self._comparer = comparer
        self._buffer: Optional[Iterator[T]] = None

    def _drain(self) -> Iterator[T]:
        watch = _BufferWatch("sorted")
        data: List[T] = []
        for value in self._upstream:
            data.append(value)
            watch.check(len(data))
        # list.sort is stable, so equal elements keep their encounter order
        data.sort(key=cmp_to_key(self._comparer))
        logger.debug(f"sorted buffered {len(data)} elements")
        return iter(data)

    def __next__(self) -> T:
        if self._buffer is None:
            self._buffer = self._drain()
        return next(self._buffer)


class Sorted(_Operator[T]):
    """not element-lazy: the first pull drains the whole upstream. never use on an infinite stream."""

    def __init__(self, upstream: Stream[T], comparer: Comparer[T]):
        require_callable(comparer, "comparer")
        super().__init__(upstream)
        self._comparer = guard_callback(comparer)

    def enumerate(self) -> Iterator[T]:
        return _SortedIterator(self._upstream.enumerate(), self._comparer)


# --- peek ---

class _PeekIterator(_NodeIterator[T]):
    def __init__(self, upstream: Iterator[T], action: Action[T]):
        self._upstream = upstream
        self._action = action

    def __next__(self) -> T:
        value = next(self._upstream)
        self._action(value)
        return value


class Peek(_Operator[T]):
    def __init__(self, upstream: Stream[T], action: Action[T]):
        require_callable(action, "action")
        super().__init__(upstream)
        self._action = guard_callback(action)

    def enumerate(self) -> Iterator[T]:
        return _PeekIterator(self._upstream.enumerate(), self._action)
