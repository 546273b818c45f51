from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..stream import Stream

class _CoreOperations(Generic[T]):
    """
    the chaining api. every method returns a new node immediately;
    nothing upstream is touched until a terminal operation pulls.
    """

    def filter(self: 'Stream[T]', predicate: Predicate[T]) -> 'Stream[T]':
        """keep elements for which the predicate holds"""
        from ..nodes import Filter
        return Filter(self, predicate)

    def map(self: 'Stream[T]', mapper: Selector[T, U]) -> 'Stream[U]':
        """project each element to a new form"""
        from ..nodes import Map
        return Map(self, mapper)

    def flat_map(self: 'Stream[T]', mapper: Selector[T, Iterable[U]]) -> 'Stream[U]':
        """project each element to a sequence and flatten, outer order first"""
        from ..nodes import FlatMap
        return FlatMap(self, mapper)

    def skip(self: 'Stream[T]', count: int) -> 'Stream[T]':
        """drop the first 'count' elements; zero or negative is a no-op"""
        from ..nodes import Skip
        return Skip(self, count)

    def skip_while(self: 'Stream[T]', predicate: Predicate[T]) -> 'Stream[T]':
        """drop elements while the predicate holds, then yield everything after"""
        from ..nodes import SkipWhile
        return SkipWhile(self, predicate)

    def limit(self: 'Stream[T]', count: int) -> 'Stream[T]':
        """yield at most 'count' elements, never pulling beyond them"""
        from ..nodes import Limit
        return Limit(self, count)

    def limit_while(self: 'Stream[T]', predicate: Predicate[T]) -> 'Stream[T]':
        """yield elements while the predicate holds; the first failure ends the stream"""
        from ..nodes import LimitWhile
        return LimitWhile(self, predicate)

    def distinct(self: 'Stream[T]', comparer: Optional[EqualityComparer[T]] = None) -> 'Stream[T]':
        """
        drop elements equal to one already yielded in this enumeration.
        'comparer' is called as comparer(candidate, accepted) and is not assumed
        to be symmetric or transitive.
        """
        from ..nodes import Distinct
        return Distinct(self, comparer)

    def sorted(self: 'Stream[T]', comparer: Comparer[T]) -> 'Stream[T]':
        """
        sort with a three-way comparer (negative, zero, positive).
        buffers the whole upstream on the first pull.
        """
        from ..nodes import Sorted
        return Sorted(self, comparer)

    def peek(self: 'Stream[T]', action: Action[T]) -> 'Stream[T]':
        """call action on each element as it passes through, unchanged"""
        from ..nodes import Peek
        return Peek(self, action)

    def concat(self: 'Stream[T]', *others: 'Stream[T]') -> 'Stream[T]':
        """this stream's elements followed by each of the others, in order"""
        from ..nodes import Concat
        return Concat(self, *others)
