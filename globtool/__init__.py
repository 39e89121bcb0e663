"""Shell-style glob to regex compiler.
"""

__version__ = '1.0.0'

from globtool.options import CompilationOptions, Platform
from globtool.pathglob import InvalidPattern, join_globs, normalize_glob
from globtool.xglob import compile_glob, escape, is_glob, translate, xfilter

__all__ = ['CompilationOptions', 'Platform', 'InvalidPattern',
           'compile_glob', 'translate', 'is_glob', 'escape', 'xfilter',
           'normalize_glob', 'join_globs']
