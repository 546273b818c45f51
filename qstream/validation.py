"""argument checks and callback wrapping shared by nodes and terminals."""

import functools
from .types import *


def require_callable(func: Any, name: str) -> None:
    """reject a missing or non-callable callback before any work is done."""
    if func is None:
        raise TypeError(f"{name} is required")
    if not callable(func):
        raise TypeError(f"{name} must be callable, got {type(func).__name__}")


def require_count(n: Any, name: str) -> int:
    """counts must be ints; negatives are legal and clamp to zero."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} must be an int, got {type(n).__name__}")
    return max(n, 0)


def require_stream(obj: Any, name: str) -> None:
    from .stream import Stream
    if not isinstance(obj, Stream):
        raise TypeError(f"{name} must be a Stream, got {type(obj).__name__}")


def guard_callback(callback: Callable[..., U]) -> Callable[..., U]:
    """
    wraps a caller callback so a StopIteration escaping it cannot be mistaken
    for the end of the stream by the pull iterator that invoked it.
    """
    @functools.wraps(callback)
    def guarded(*args: Any) -> U:
        try:
            return callback(*args)
        except StopIteration as exc:
            raise RuntimeError("callback raised StopIteration") from exc
    return guarded
