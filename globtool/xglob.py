"""Extended glob to regex compiler.

Basic syntax:

*       - anything, except separator
?       - any char
[...]   - char in set
[!...]  - char not in set
[[:digit:]]  - POSIX class in set
{a,b}   - a or b

Recursion syntax (globstar):

**      - zero or more path segments, must be whole segment

Extended syntax (extglob):

?()     - zero or one of group
*()     - any number occurances of group
+()     - one or more occurances of group
@()     - one occurance of group
!()     - no occurance of group
|       - separate group elements

Escape prefix is backslash, on Windows backtick as there
backslash is separator.

If segment ends with unclosed group or set, or with dangling
escape prefix, whole segment is taken literally.

Negative group is converted to negative look-ahead followed
by wildcard, so !(foo).js does not match foobar.js.  It works
correctly only at the end of segment.
"""

import enum
import logging
import re
from typing import Iterable, Iterator, Optional, Pattern, Tuple

from globtool.options import CompilationOptions, Platform, make_options
from globtool.tables import (
    FRAGMENTS, GLOB_MAGIC, POSIX_CLASSES, RANGE_ESCAPE_CHARS,
    RANGE_LITERAL_ESCAPES, REGEX_ESCAPE_CHARS, Fragments,
)

__all__ = ["translate", "compile_glob", "is_glob", "escape", "re_escape", "xfilter"]

log = logging.getLogger(__name__)


class GroupTag(enum.Enum):
    BRACE = "{"
    PLUS = "+"
    AT = "@"
    QUESTION = "?"
    STAR = "*"
    BANG = "!"


# extglob prefix before "("
_GROUP_OPENERS = {
    "+": GroupTag.PLUS,
    "@": GroupTag.AT,
    "?": GroupTag.QUESTION,
    "*": GroupTag.STAR,
    "!": GroupTag.BANG,
}

# appended after ")", BANG gets wildcard instead
_GROUP_SUFFIX = {
    GroupTag.PLUS: "+",
    GroupTag.AT: "",
    GroupTag.QUESTION: "?",
    GroupTag.STAR: "*",
}

_POSIX_CLASS_RX = re.compile(r"\[:([a-z]+):\]")

# glob tokens, group 2 is set when token has glob meaning
_GLOB_TOKEN_RX = re.compile(r"""
    \\(.) |
    ( ^!
    | \*
    | \?
    | [\].+)]\?
    | \[[^\\\]]+\]
    | \{[^\\}]+\}
    | \(\?[:!=][^\\)]+\)
    | \([^|]+\|[^\\)]+\)
    )
""", re.X)

_CLOSERS = {"{": "}", "(": ")", "[": "]"}


def re_escape(s: str) -> str:
    """Escape regex meta-characters.
    """
    return "".join("\\" + c if c in REGEX_ESCAPE_CHARS else c for c in s)


def escape(s: str, platform: Optional[Platform] = None) -> str:
    """Escape glob meta-characters.

    Separators are left alone.
    """
    prefix = FRAGMENTS[Platform.get(platform).value].escape_prefix
    return "".join(prefix + c if c in GLOB_MAGIC or c == prefix else c for c in s)


def _is_valid(rx: str) -> bool:
    try:
        re.compile(rx)
    except re.error:
        return False
    return True


def _scan_segment(glob: str, start: int, opts: CompilationOptions, frag: Fragments) -> Tuple[Optional[str], int, bool]:
    """Structured compile of segment that starts at `start`.

    Returns (regex, end, ends_with_sep) where end is position of
    next separator or end of glob.  Regex is None if segment
    has unclosed syntax.
    """
    seps = frag.seps
    glen = len(glob)
    res = []
    groups = []
    in_range = False
    in_escape = False
    ends_with_sep = False
    range_start = -1
    range_end = -1

    i = start
    while i < glen and glob[i] not in seps:
        c = glob[i]
        nxt = glob[i + 1] if i + 1 < glen else None

        if in_escape:
            in_escape = False
            escape_chars = RANGE_ESCAPE_CHARS if in_range else REGEX_ESCAPE_CHARS
            res.append("\\" + c if c in escape_chars else c)
        elif c == frag.escape_prefix:
            in_escape = True
        elif c == "[" and not in_range:
            in_range = True
            res.append("[")
            if nxt == "!":
                i += 1
                res.append("^")
                range_start = len(res)
            elif nxt == "^":
                i += 1
                range_start = len(res)
                res.append("\\^")
            else:
                range_start = len(res)
        elif in_range:
            m = _POSIX_CLASS_RX.match(glob, i) if c == "[" else None
            if m and m.group(1) in POSIX_CLASSES:
                res.append(POSIX_CLASSES[m.group(1)])
                i = m.end()
                continue
            if m:
                log.debug("unknown POSIX class %r in %r", m.group(1), glob)
            if c == "]" and len(res) > range_start:
                in_range = False
                res.append("]")
                range_end = len(res)
            elif c == "]":
                # first member of set
                res.append("\\]")
            elif c == "-" and res[-1] == "-":
                # "--" is set difference for python re
                res.append("\\-")
            else:
                res.append("\\" + c if c in RANGE_LITERAL_ESCAPES else c)
        elif c == ")" and groups and groups[-1] is not GroupTag.BRACE:
            tag = groups.pop()
            res.append(")")
            res.append(frag.wildcard if tag is GroupTag.BANG else _GROUP_SUFFIX[tag])
        elif c == "|" and groups and groups[-1] is not GroupTag.BRACE:
            res.append("|")
        elif c in _GROUP_OPENERS and opts.extended and nxt == "(":
            i += 1
            tag = _GROUP_OPENERS[c]
            groups.append(tag)
            res.append("(?!" if tag is GroupTag.BANG else "(?:")
        elif c == "?":
            res.append(".")
        elif c == "{":
            groups.append(GroupTag.BRACE)
            res.append("(?:")
        elif c == "}" and groups and groups[-1] is GroupTag.BRACE:
            groups.pop()
            res.append(")")
        elif c == "," and groups and groups[-1] is GroupTag.BRACE:
            res.append("|")
        elif c == "*":
            prev = glob[i - 1] if i > 0 else None
            stars = 1
            while i + 1 < glen and glob[i + 1] == "*":
                i += 1
                stars += 1
            nxt = glob[i + 1] if i + 1 < glen else None
            if (opts.globstar and stars == 2
                    and (prev is None or prev in seps)
                    and (nxt is None or nxt in seps)):
                res.append(frag.globstar)
                ends_with_sep = True
            else:
                res.append(frag.wildcard)
        elif c == "+" and opts.extended and range_end == len(res):
            # [set]+ repeats the set
            res.append("+")
        else:
            res.append("\\" + c if c in REGEX_ESCAPE_CHARS else c)
        i += 1

    if groups or in_range or in_escape:
        return None, i, False
    rx = "".join(res)
    if not _is_valid(rx):
        return None, i, False
    return rx, i, ends_with_sep


def _compile_segment(glob: str, start: int, opts: CompilationOptions, frag: Fragments) -> Tuple[str, int, bool]:
    """Compile one segment, on parse failure take it literally.
    """
    rx, end, ends_with_sep = _scan_segment(glob, start, opts, frag)
    if rx is None:
        log.debug("parse failure in segment %r, taking it literally", glob[start:end])
        rx = re_escape(glob[start:end])
    return rx, end, ends_with_sep


def translate(pat: str, options: Optional[CompilationOptions] = None, **kwargs) -> str:
    """Convert glob pattern to regex string.

    Result is anchored at both ends.  Repeating and trailing separators
    are tolerated.  Empty glob matches nothing.
    """
    opts = make_options(options, **kwargs)
    if pat == "":
        return "(?!)"

    frag = FRAGMENTS[opts.platform.value]

    # drop trailing separators
    plen = len(pat)
    while plen > 1 and pat[plen - 1] in frag.seps:
        plen -= 1
    pat = pat[:plen]

    res = []
    pos = 0
    while pos < plen:
        rx, end, ends_with_sep = _compile_segment(pat, pos, opts, frag)
        res.append(rx)
        if not ends_with_sep:
            res.append(frag.sep if end < plen else frag.sep_maybe)

        # skip to start of next segment
        while end < plen and pat[end] in frag.seps:
            end += 1
        if end <= pos:
            raise AssertionError("glob scan did not advance at position %d: %r" % (pos, pat))
        pos = end

    return "^" + "".join(res) + "$"


def compile_glob(pat: str, options: Optional[CompilationOptions] = None, **kwargs) -> Pattern[str]:
    """Convert glob pattern to compiled regex.

    Keyword args override fields of `options`:
    extended, globstar, case_insensitive, platform.
    """
    opts = make_options(options, **kwargs)
    flags = re.IGNORECASE if opts.case_insensitive else 0
    return re.compile(translate(pat, opts), flags)


def is_glob(s: str) -> bool:
    """Contains glob syntax.
    """
    if s == "":
        return False
    while True:
        m = _GLOB_TOKEN_RX.search(s)
        if not m:
            return False
        if m.group(2):
            return True
        pos = m.end()

        # escaped opening char, skip to closing one
        close = _CLOSERS.get(m.group(1))
        if close:
            n = s.find(close, pos)
            if n != -1:
                pos = n + 1
        s = s[pos:]


def xfilter(pat: str, names: Iterable[str], options: Optional[CompilationOptions] = None, **kwargs) -> Iterator[str]:
    """Filter name list based on glob pattern.
    """
    matcher = compile_glob(pat, options, **kwargs)
    for n in names:
        if matcher.match(n):
            yield n
