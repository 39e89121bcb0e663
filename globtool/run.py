#! /usr/bin/env python3

"""globtool <command> <command args>

    Compile and test shell-style globs.

Commands:

    regex PATTERN           print regex for glob
    match PATTERN NAME...   print names that match glob
    isglob STRING           print whether string contains glob syntax
    normalize GLOB          normalize glob as path
    join GLOB...            join globs as path
"""

import sys

from globtool.pathglob import join_globs, normalize_glob
from globtool.scripting import GlobScript, printf
from globtool.xglob import is_glob, translate, xfilter


class GlobTool(GlobScript):
    """globtool commands.
    """

    def cmd_regex(self, pattern):
        printf("%s", translate(pattern, self.glob_options))

    def cmd_match(self, pattern, *names):
        found = 0
        for name in xfilter(pattern, names, self.glob_options):
            printf("%s", name)
            found += 1
        self.log.debug("%d of %d names matched", found, len(names))
        if not found:
            sys.exit(1)

    def cmd_isglob(self, s):
        printf("true" if is_glob(s) else "false")

    def cmd_normalize(self, glob):
        opts = self.glob_options
        printf("%s", normalize_glob(glob, globstar=opts.globstar, platform=opts.platform))

    def cmd_join(self, *globs):
        opts = self.glob_options
        printf("%s", join_globs(globs, extended=opts.extended,
                                globstar=opts.globstar, platform=opts.platform))


def main(args=None):
    if args is None:
        args = sys.argv[1:]
    script = GlobTool('globtool', args)
    script.start()
    sys.stdout.flush()
    sys.stderr.flush()


if __name__ == '__main__':
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(1)
