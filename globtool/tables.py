"""Static tables for glob compilation.
"""

from typing import NamedTuple, Tuple

__all__ = ['REGEX_ESCAPE_CHARS', 'RANGE_ESCAPE_CHARS', 'RANGE_LITERAL_ESCAPES',
           'GLOB_MAGIC', 'POSIX_CLASSES', 'Fragments', 'FRAGMENTS']


# chars that need backslash outside of [...]
REGEX_ESCAPE_CHARS = frozenset("!$()*+.=?[\\^{|")

# escaped chars that need backslash inside [...]
RANGE_ESCAPE_CHARS = frozenset("-\\[]^")

# unescaped chars that need backslash inside [...],
# python re warns about nested sets and set operations
RANGE_LITERAL_ESCAPES = frozenset("[\\&~|")

# chars with glob meaning, separators excluded
GLOB_MAGIC = frozenset("*?[]{}(),|!@+")

# [:name:] -> contents for regex char set
POSIX_CLASSES = {
    "alnum": r"\dA-Za-z",
    "alpha": r"A-Za-z",
    "ascii": r"\x00-\x7f",
    "blank": r"\t ",
    "cntrl": r"\x00-\x1f\x7f",
    "digit": r"\d",
    "graph": r"\x21-\x7e",
    "lower": r"a-z",
    "print": r"\x20-\x7e",
    "punct": r"!\"#$%&'()*+,\-./:;<=>?@\[\\\]^_`{|}~",
    "space": r"\s\v",
    "upper": r"A-Z",
    "word": r"\w",
    "xdigit": r"\dA-Fa-f",
}


class Fragments(NamedTuple):
    """Platform-specific regex pieces."""
    seps: Tuple[str, ...]
    sep: str
    sep_maybe: str
    globstar: str
    wildcard: str
    escape_prefix: str


# keyed by Platform value
FRAGMENTS = {
    "posix": Fragments(
        seps=("/",),
        sep="/+",
        sep_maybe="/*",
        globstar="(?:[^/]*(?:/|$)+)*",
        wildcard="[^/]*",
        escape_prefix="\\",
    ),
    "windows": Fragments(
        seps=("\\", "/"),
        sep=r"(?:\\|/)+",
        sep_maybe=r"(?:\\|/)*",
        globstar=r"(?:[^\\/]*(?:\\|/|$)+)*",
        wildcard=r"[^\\/]*",
        escape_prefix="`",
    ),
}
