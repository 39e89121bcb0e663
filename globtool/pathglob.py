"""Glob-aware path normalization and joining.

Plain normalization collapses "x/.." pairs, that is wrong
when x is "**" as globstar can stand for zero segments.
"""

import ntpath
import posixpath
import re
from typing import Sequence

from globtool.options import Platform

__all__ = ['InvalidPattern', 'path_module', 'sep_pattern', 'join_paths',
           'normalize_glob', 'join_globs']

# stands for protected ".." during normalization
_SENTINEL = "\0"


class InvalidPattern(ValueError):
    """Glob cannot be used as path."""


def path_module(platform=None):
    """Return os.path implementation for platform.
    """
    if Platform.get(platform) is Platform.WINDOWS:
        return ntpath
    return posixpath


def sep_pattern(platform=None) -> str:
    """Regex for run of separators.
    """
    if Platform.get(platform) is Platform.WINDOWS:
        return r"[\\/]+"
    return "/+"


def join_paths(*parts: str, platform=None) -> str:
    """Join non-empty parts and normalize result.

    Absolute part does not restart the path, "a" + "/b" gives "a/b".
    """
    parts = [p for p in parts if p]
    if not parts:
        return "."
    mod = path_module(platform)
    return mod.normpath(mod.sep.join(parts))


def normalize_glob(glob: str, globstar: bool = False, platform=None) -> str:
    """Like normpath(), but keeps "**/.." when `globstar` is set.
    """
    if _SENTINEL in glob:
        raise InvalidPattern("Glob contains invalid characters: %r" % glob)

    mod = path_module(platform)
    if not globstar:
        return mod.normpath(glob)

    s = sep_pattern(platform)
    bad_parent = re.compile(r"(^|%s)\*\*(%s)\.\.(?=%s|$)" % (s, s, s))
    protected = bad_parent.sub(lambda m: m.group(1) + "**" + m.group(2) + _SENTINEL, glob)
    return mod.normpath(protected).replace(_SENTINEL, "..")


def join_globs(globs: Sequence[str], extended: bool = True, globstar: bool = False, platform=None) -> str:
    """Like join_paths(), but keeps "**/.." when `globstar` is set.

    `extended` is accepted for symmetry with compile_glob(),
    joining does not depend on it.
    """
    if not globstar or not globs:
        return join_paths(*globs, platform=platform)

    joined = path_module(platform).sep.join(g for g in globs if g)
    if not joined:
        return "."
    return normalize_glob(joined, globstar=globstar, platform=platform)
