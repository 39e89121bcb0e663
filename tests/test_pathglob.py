
import pytest

from globtool.pathglob import InvalidPattern, join_globs, join_paths, normalize_glob, sep_pattern


def test_normalize():
    assert normalize_glob('a/x/../b') == 'a/b'
    assert normalize_glob('a/**/../b') == 'a/b'
    assert normalize_glob('a/**/../b', globstar=True) == 'a/**/../b'
    assert normalize_glob('**/..', globstar=True) == '**/..'
    assert normalize_glob('a/./b//c/', globstar=True) == 'a/b/c'
    assert normalize_glob('a/b**/../c', globstar=True) == 'a/c'
    assert normalize_glob('') == '.'


def test_normalize_windows():
    assert normalize_glob('a/x/../b', platform='windows') == 'a\\b'
    assert normalize_glob('a/**/../b', globstar=True, platform='windows') == 'a\\**\\..\\b'
    assert normalize_glob('a\\**\\..\\b', globstar=True, platform='windows') == 'a\\**\\..\\b'


def test_normalize_nul():
    with pytest.raises(InvalidPattern):
        normalize_glob('a\0b')
    with pytest.raises(ValueError):
        normalize_glob('**/\0', globstar=True)


def test_normalize_idempotent():
    globs = ['a/x/../b', 'a/**/../b', '**/../..', '../**/..', 'a/**/x/..',
             './a//b/', '/**/../x', '**/**/../..', '']
    for g in globs:
        for globstar in (False, True):
            once = normalize_glob(g, globstar=globstar)
            assert normalize_glob(once, globstar=globstar) == once


def test_join():
    assert join_globs(['a', '**', '..', 'b'], globstar=True) == 'a/**/../b'
    assert join_globs(['a', 'x', '..', 'b'], globstar=True) == 'a/b'
    assert join_globs(['a', '**', '..', 'b']) == 'a/b'
    assert join_globs(['a', '', 'b'], globstar=True) == 'a/b'
    assert join_globs(['*.py']) == '*.py'

    # absolute part does not restart the path
    assert join_globs(['a', '/b']) == 'a/b'
    assert join_globs(['a', '/b'], globstar=True) == 'a/b'
    assert join_globs(['/a', 'b']) == '/a/b'


def test_join_empty():
    assert join_globs([]) == '.'
    assert join_globs([], globstar=True) == '.'
    assert join_globs(['', ''], globstar=True) == '.'
    assert join_globs(['', '']) == '.'


def test_join_windows():
    assert join_globs(['a', '**', '..', 'b'], globstar=True, platform='windows') == 'a\\**\\..\\b'
    assert join_globs(['a', 'b'], platform='windows') == 'a\\b'


def test_join_paths():
    assert join_paths('a', 'b') == 'a/b'
    assert join_paths('a', 'b/../c') == 'a/c'
    assert join_paths() == '.'
    assert join_paths('', '') == '.'
    assert join_paths('a', '/b') == 'a/b'
    assert join_paths('a', '\\b', platform='windows') == 'a\\b'


def test_sep_pattern():
    assert sep_pattern('posix') == '/+'
    assert sep_pattern('windows') == r'[\\/]+'
