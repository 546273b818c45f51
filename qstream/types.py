from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type, Mapping
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Comparer = Callable[[T, T], int]
EqualityComparer = Callable[[T, T], bool]
Accumulator = Callable[[U, T], U]
Action = Callable[[T], Any]
Producer = Callable[[], Iterable[T]]


class SourceConsumedError(RuntimeError):
    """raised in strict mode when a one-shot source is enumerated a second time"""

    def __init__(self, source_kind: str):
        super().__init__(f"{source_kind} is one-shot and has already been enumerated")
        self.source_kind = source_kind
