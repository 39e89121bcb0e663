"""Compilation options.
"""

import enum
import os
from typing import NamedTuple, Optional, Union

__all__ = ['Platform', 'CompilationOptions', 'make_options']


class Platform(enum.Enum):
    """Path conventions used by compiled globs.
    """
    POSIX = "posix"
    WINDOWS = "windows"

    @classmethod
    def host(cls) -> "Platform":
        return cls.WINDOWS if os.name == "nt" else cls.POSIX

    @classmethod
    def get(cls, value: Union["Platform", str, None]) -> "Platform":
        """Convert name or None to Platform.

        None means host platform.
        """
        if value is None:
            return cls.host()
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError("unknown platform: %r" % (value,)) from None


class CompilationOptions(NamedTuple):
    extended: bool = True
    globstar: bool = True
    case_insensitive: bool = False
    platform: Optional[Platform] = None

    def resolve(self) -> "CompilationOptions":
        """Return copy with platform pinned."""
        return self._replace(platform=Platform.get(self.platform))


def make_options(options: Optional[CompilationOptions] = None, **kwargs) -> CompilationOptions:
    """Merge keyword overrides into options.
    """
    if options is None:
        options = CompilationOptions()
    if kwargs:
        options = options._replace(**kwargs)
    return options.resolve()
