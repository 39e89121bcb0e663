"""Base class for globtool command-line script.
"""

import sys
import inspect
import logging
import argparse

from globtool import __version__
from globtool.config import Config, ConfigError, load_options

__all__ = ['GlobScript', 'UsageError', 'printf']


class UsageError(Exception):
    """User induced error."""


def printf(msg, *args):
    if args:
        msg = msg % args
    sys.stdout.write(msg + '\n')
    sys.stdout.flush()


class GlobScript(object):
    """Parses command line, loads config and runs cmd_* methods.
    """

    service_name = None
    cf = None
    glob_options = None

    # setup logger here, this allows override by subclass
    log = logging.getLogger('globtool')

    def __init__(self, service_name, args):
        """Script setup.

        User class should add cmd_<name>() methods, their positional
        arguments are taken from command line.

        @param service_name: name for script, also config section name.
        @param args: cmdline args (sys.argv[1:])
        """
        self.service_name = service_name
        self.log_level = logging.INFO

        # parse command line
        parser = self.init_argparse()
        self.options = parser.parse_args(args)
        self.args = self.options.args

        # check args
        if self.options.version:
            printf("%s %s", service_name, __version__)
            sys.exit(0)
        if not self.options.command:
            parser.error("command missing")
        if self.options.quiet:
            self.log_level = logging.WARNING
        if self.options.verbose:
            self.log_level = logging.DEBUG

        # init logging
        logging.basicConfig(level=self.log_level,
                            format="%(asctime)s %(name)s - %(levelname)s: %(message)s",
                            datefmt="%H:%M:%S")

        self.cf_override = {}
        for a in self.options.set or []:
            if '=' not in a:
                parser.error("cannot parse --set %r, need PARAM=VAL" % a)
            k, v = a.split('=', 1)
            self.cf_override[k.strip()] = v.strip()

    def init_argparse(self, parser=None):
        """Initialize a ArgumentParser() instance that will be used to
        parse command line arguments.

        @param parser: optional ArgumentParser() instance,
               where GlobScript should attach its own arguments.
        @return: initialized ArgumentParser() instance.
        """
        if parser:
            p = parser
        else:
            p = argparse.ArgumentParser(prog=self.service_name)

        # generic options
        p.add_argument("-q", "--quiet", action="store_true",
                       help="log only errors and warnings")
        p.add_argument("-v", "--verbose", action="count",
                       help="log verbosely")
        p.add_argument("-V", "--version", action="store_true",
                       help="print version info and exit")
        p.add_argument("--config", help="config file with glob options")
        p.add_argument("--set", action="append",
                       help="override config setting (--set 'PARAM=VAL')")
        p.add_argument("command", nargs="?", help="command name")
        p.add_argument("args", nargs=argparse.REMAINDER, help="arguments for command")
        return p

    def load_config(self):
        """Loads config.
        """
        return Config(self.service_name, self.options.config, override=self.cf_override)

    def startup(self):
        self.cf = self.load_config()
        self.glob_options = load_options(self.cf)
        self.log.debug("glob options: %r", self.glob_options)

    def start(self):
        self.run_func_safely(self.startup)
        self.run_func_safely(self.work)

    def run_func_safely(self, func):
        "Run users work function, safely."
        try:
            return func()
        except (UsageError, ConfigError, ValueError) as d:
            self.log.error(str(d))
        except SystemExit:
            raise
        except KeyboardInterrupt:
            sys.exit(1)
        except Exception:
            self.log.exception('Command failed')
        # done
        sys.exit(1)

    def work(self):
        """Calls command function."""

        cmd = self.options.command
        cmdargs = self.args

        # find function
        fname = "cmd_" + cmd.replace('-', '_')
        if not hasattr(self, fname):
            raise UsageError("bad subcommand %r, see --help for usage" % cmd)
        fn = getattr(self, fname)

        # check if correct number of arguments
        argspec = inspect.getfullargspec(fn)
        n_args = len(argspec.args) - 1   # drop 'self'
        if (argspec.varargs is None and n_args != len(cmdargs)) or len(cmdargs) < n_args:
            helpstr = ""
            if n_args:
                helpstr = ": " + " ".join(argspec.args[1:])
            raise UsageError("command '%s' got %d args, but expects %d%s"
                             % (cmd, len(cmdargs), n_args, helpstr))

        # run command
        fn(*cmdargs)
