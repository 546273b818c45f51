"""
runtime configuration shared by every stream.
"""

from dataclasses import dataclass, fields
from typing import ClassVar, Optional


@dataclass
class StreamConfig:
    """global switches consulted while streams are enumerated."""

    # raise SourceConsumedError instead of silently yielding leftovers
    strict_sources: bool = False

    # sorted/distinct log a warning once their buffer grows past this; None disables
    buffer_warning_threshold: Optional[int] = 100_000

    _instance: ClassVar[Optional['StreamConfig']] = None

    @classmethod
    def get_instance(cls) -> 'StreamConfig':
        """get singleton instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def set_defaults(cls, **kwargs) -> None:
        """set configuration values on the singleton."""
        instance = cls.get_instance()
        known = {f.name for f in fields(cls)}
        unknown = set(kwargs) - known
        if unknown:
            raise ValueError(f"unknown configuration keys: {sorted(unknown)}")
        for key, value in kwargs.items():
            setattr(instance, key, value)

    def reset(self) -> None:
        """restore every field to its default."""
        for f in fields(self):
            setattr(self, f.name, f.default)


# global configuration instance
config = StreamConfig.get_instance()


def configure(**kwargs) -> StreamConfig:
    """update the global configuration and return it."""
    StreamConfig.set_defaults(**kwargs)
    return config
