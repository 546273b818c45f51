import typing
from itertools import count as _count, repeat as _repeat
from .types import *
from .validation import require_callable, require_count

if typing.TYPE_CHECKING:
    from .stream import Stream

def of_iterable(source: Iterable[T], strict: Optional[bool] = None) -> 'Stream[T]':
    """create stream over an existing iterable; mappings yield their values"""
    from .nodes import IterableSource
    return IterableSource(source, strict)

def of(*values: T) -> 'Stream[T]':
    """create stream over the given literal values"""
    from .nodes import IterableSource
    return IterableSource(tuple(values))

def of_generator(factory: Producer[T], strict: Optional[bool] = None) -> 'Stream[T]':
    """create stream whose factory is called anew for every enumeration"""
    from .nodes import GeneratorSource
    return GeneratorSource(factory, strict)

def empty() -> 'Stream[Any]':
    """create empty stream"""
    from .nodes import EmptySource
    return EmptySource()

def concat(*streams: 'Stream[T]') -> 'Stream[T]':
    """create stream yielding each operand's elements in turn"""
    from .nodes import Concat
    return Concat(*streams)

# --- lazy renditions of the classic factories ---

def from_range(start: int, count: Optional[int] = None) -> 'Stream[int]':
    """consecutive integers from start; infinite when count is None"""
    if count is None:
        return of_generator(lambda: _count(start))
    count = require_count(count, "count")
    return of_iterable(range(start, start + count))

def repeat(item: T, count: Optional[int] = None) -> 'Stream[T]':
    """the same item over and over; infinite when count is None"""
    if count is None:
        return of_generator(lambda: _repeat(item))
    count = require_count(count, "count")
    return of_iterable((item,) * count)

def iterate(seed: T, step: Selector[T, T]) -> 'Stream[T]':
    """infinite stream seed, step(seed), step(step(seed)), ..."""
    require_callable(step, "step")
    def produce():
        value = seed
        while True:
            yield value
            value = step(value)
    return of_generator(produce)

# --- aliases ---
S = of_iterable
