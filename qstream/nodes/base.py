from __future__ import annotations

import logging
from ..config import config
from ..types import *

logger = logging.getLogger(__name__)


class _NodeIterator(Iterator[T]):
    """
    pull iterator owned by a single enumeration of a node.
    subclasses hold whatever state the operator needs between pulls
    (counters, buffers, the upstream iterator handle) and implement __next__.
    """

    def __iter__(self) -> '_NodeIterator[T]':
        return self

    def __next__(self) -> T:
        raise NotImplementedError


class _BufferWatch:
    """logs a single warning when an operator's buffer outgrows the configured threshold."""

    def __init__(self, operator_name: str):
        self._operator_name = operator_name
        self._threshold = config.buffer_warning_threshold
        self._warned = False

    def check(self, size: int) -> None:
        if self._warned or self._threshold is None or size <= self._threshold:
            return
        self._warned = True
        logger.warning(f"{self._operator_name} is buffering more than {self._threshold} elements; "
                       f"is the upstream unbounded?")


def strict_enabled(override: Optional[bool]) -> bool:
    """per-source override wins; otherwise read the global config at enumeration time."""
    return config.strict_sources if override is None else override
