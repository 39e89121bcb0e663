"""Nicer config class, with glob options loading."""

import logging
import os.path

from configparser import (
    NoOptionError, NoSectionError, Error as ConfigError,
    ConfigParser, ExtendedInterpolation)

from globtool.options import CompilationOptions, Platform

__all__ = ['Config', 'NoOptionError', 'NoSectionError', 'ConfigError', 'load_options']

_UNSET = object()

# keys understood by load_options()
_OPTION_KEYS = ('extended', 'globstar', 'case_insensitive', 'platform')

log = logging.getLogger(__name__)


class Config(object):
    """Bit improved ConfigParser.

    Additional features:
     - Remembers section.
     - Accepts defaults in get() functions.
     - Override values are applied on top of file.
    """
    def __init__(self, main_section, filename, override=None):
        """Initialize Config and read from file.
        """
        self.main_section = main_section
        self.filename = filename
        self.override = override or {}
        self.cf = ConfigParser(interpolation=ExtendedInterpolation())

        if filename is None:
            self.cf.add_section(main_section)
        elif not os.path.isfile(filename):
            raise ConfigError('Config file not found: ' + filename)

        self.reload()

    def reload(self):
        """Re-reads config file."""
        if self.filename:
            self.cf.read(self.filename)
        if not self.cf.has_section(self.main_section):
            raise NoSectionError(self.main_section)

        # apply overrides
        for k, v in self.override.items():
            self.cf.set(self.main_section, k, v)

    def get(self, key, default=_UNSET):
        """Reads string value, if not set then default."""

        if not self.cf.has_option(self.main_section, key):
            if default is _UNSET:
                raise NoOptionError(key, self.main_section)
            return default

        return str(self.cf.get(self.main_section, key))

    def getboolean(self, key, default=_UNSET):
        """Reads boolean value, if not set then default."""

        if not self.cf.has_option(self.main_section, key):
            if default is _UNSET:
                raise NoOptionError(key, self.main_section)
            return default

        return self.cf.getboolean(self.main_section, key)

    def options(self):
        """Return list of options in main section."""
        return self.cf.options(self.main_section)

    def has_option(self, opt):
        """Checks if option exists in main section."""
        return self.cf.has_option(self.main_section, opt)


def load_options(cf):
    """Build CompilationOptions from main section.
    """
    for k in cf.options():
        if k not in _OPTION_KEYS:
            log.warning("Unknown option in [%s]: %s", cf.main_section, k)

    defs = CompilationOptions()
    return CompilationOptions(
        extended=cf.getboolean('extended', defs.extended),
        globstar=cf.getboolean('globstar', defs.globstar),
        case_insensitive=cf.getboolean('case_insensitive', defs.case_insensitive),
        platform=Platform.get(cf.get('platform', None)),
    )
