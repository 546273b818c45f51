from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..validation import require_callable, guard_callback

if typing.TYPE_CHECKING:
    from ..stream import Stream

_MISSING = object()


class TerminalAccessor(Generic[T]):
    """
    terminal operations. each one runs a single pull pass over the stream,
    stopping early where the result is already decided.
    """

    def __init__(self, stream_instance: 'Stream[T]'):
        self._stream = stream_instance

    # --- materialization ---

    def list(self) -> List[T]:
        """convert to list, preserving order"""
        return list(self._stream.enumerate())

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._stream.enumerate())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._stream.enumerate())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary; later keys overwrite earlier ones"""
        require_callable(key_selector, "key_selector")
        key_sel = guard_callback(key_selector)
        val_sel = guard_callback(value_selector) if value_selector else lambda item: item
        return {key_sel(item): val_sel(item) for item in self._stream.enumerate()}

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    # --- aggregation ---

    def count(self) -> int:
        """count elements; every upstream operator still runs per element"""
        return sum(1 for _ in self._stream.enumerate())

    def reduce(self, identity: U, accumulator: Accumulator[U, T]) -> U:
        """left fold starting from identity; empty streams return identity unchanged"""
        require_callable(accumulator, "accumulator")
        accumulator = guard_callback(accumulator)
        accum = identity
        for item in self._stream.enumerate():
            accum = accumulator(accum, item)
        return accum

    # --- matching ---

    def all_match(self, predicate: Predicate[T]) -> bool:
        """true unless some element fails; stops at the first failure"""
        require_callable(predicate, "predicate")
        predicate = guard_callback(predicate)
        return all(predicate(x) for x in self._stream.enumerate())

    def any_match(self, predicate: Predicate[T]) -> bool:
        """true at the first element that satisfies the predicate"""
        require_callable(predicate, "predicate")
        predicate = guard_callback(predicate)
        return any(predicate(x) for x in self._stream.enumerate())

    def none_match(self, predicate: Predicate[T]) -> bool:
        """true if no element satisfies the predicate; stops at the first match"""
        return not self.any_match(predicate)

    # --- element access ---

    def first_or_default(self, default: Optional[T] = None) -> Optional[T]:
        """first element, pulling at most once"""
        return next(self._stream.enumerate(), default)

    def last_or_default(self, default: Optional[T] = None) -> Optional[T]:
        """last element; drains the whole stream"""
        last = default
        for item in self._stream.enumerate():
            last = item
        return last

    def first(self) -> T:
        """first element, erroring on an empty stream"""
        item = self.first_or_default(_MISSING)
        if item is _MISSING: raise ValueError("sequence contains no elements")
        return item

    def last(self) -> T:
        """last element, erroring on an empty stream"""
        item = self.last_or_default(_MISSING)
        if item is _MISSING: raise ValueError("sequence contains no elements")
        return item

    def max_or_default(self, comparer: Comparer[T], default: Optional[T] = None) -> Optional[T]:
        """greatest element by a three-way comparer; the first of equals wins"""
        return self._best(comparer, default, lambda c: c > 0)

    def min_or_default(self, comparer: Comparer[T], default: Optional[T] = None) -> Optional[T]:
        """least element by a three-way comparer; the first of equals wins"""
        return self._best(comparer, default, lambda c: c < 0)

    def _best(self, comparer: Comparer[T], default: Optional[T], better: Callable[[int], bool]) -> Optional[T]:
        require_callable(comparer, "comparer")
        comparer = guard_callback(comparer)
        iterator = self._stream.enumerate()
        # an empty stream is the only case that yields default
        best = next(iterator, _MISSING)
        if best is _MISSING:
            return default
        for candidate in iterator:
            if better(comparer(candidate, best)):
                best = candidate
        return best
