from .sources import IterableSource, GeneratorSource, EmptySource, Concat
from .operators import (
    Filter,
    Map,
    FlatMap,
    Skip,
    SkipWhile,
    Limit,
    LimitWhile,
    Distinct,
    Sorted,
    Peek
)

__all__ = [
    "IterableSource",
    "GeneratorSource",
    "EmptySource",
    "Concat",
    "Filter",
    "Map",
    "FlatMap",
    "Skip",
    "SkipWhile",
    "Limit",
    "LimitWhile",
    "Distinct",
    "Sorted",
    "Peek"
]
