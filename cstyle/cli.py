# cli.py
# Command-line front end for the Fibonacci sequence printer

import argparse
import errno
import os
import re
import sys

from cstyle import PROGNAME, VERSION
from cstyle.sequence import print_sequence

# --- Configuration ---
INDEX_MIN = 0
INDEX_MAX = 48  # fib(47) is the last value that fits in 32 bits
DEFAULT_START = 0
DEFAULT_END = 10

USAGE = (
    f"{PROGNAME} v{VERSION}\n"
    "Prints Fibonacci sequences\n"
    f"USAGE: {PROGNAME} [-h] [-v] [-s START] [-e END] [-o FILE]\n"
    "\n"
    "OPTIONS:\n"
    "\t-h:\tShows this help and exits.\n"
    "\n"
    "\t-v:\tShows version info and exits.\n"
    "\n"
    "\t-s START:\tStarts sequence at START.\n"
    "\n"
    "\t-e END:\tEnds sequence at END.\n"
    "\n"
    "\t-o FILE:\tSaves output in FILE.\n"
)

# --- Colors (ANSI escape codes) ---
RED = '\033[0;31m'
NC = '\033[0m' # No Color

# Same leading-integer rule as sscanf("%d")
INTEGER_PREFIX = re.compile(r'\s*([+-]?[0-9]+)')


def print_color(color, text, file=None):
    """Prints text in the specified color when the stream is a terminal."""
    if file is None:
        file = sys.stdout
    if file.isatty():
        text = f"{color}{text}{NC}"
    print(text, file=file)


def usage(rc):
    """Prints usage info to stderr and exits with rc."""
    sys.stderr.write(USAGE)
    sys.exit(rc)


def str_to_index(src, lower, upper, arg):
    """Converts a string to an index in [lower, upper] or exits with code 1."""
    match = INTEGER_PREFIX.match(src)
    if not match:
        print_color(RED, f"{PROGNAME}: argument to -{arg} must be a number", file=sys.stderr)
        sys.exit(1)

    temp = int(match.group(1))
    if temp < lower or temp > upper:
        print_color(RED, f"{PROGNAME}: argument to -{arg} must be between {lower} and {upper}", file=sys.stderr)
        sys.exit(1)

    return temp


class UsageArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports every parse error through usage(1)."""

    def error(self, message):
        # Missing option arguments and unknown options end up here alike
        print_color(RED, f"{PROGNAME}: {message}", file=sys.stderr)
        usage(1)


def open_error(path):
    """Returns why path cannot be opened for writing, or None if it can."""
    if not path:
        return os.strerror(errno.ENOENT)
    if os.path.isdir(path):
        return os.strerror(errno.EISDIR)
    if os.path.exists(path):
        return None if os.access(path, os.W_OK) else os.strerror(errno.EACCES)

    parent = os.path.dirname(path) or '.'
    if not os.path.isdir(parent):
        return os.strerror(errno.ENOENT)
    return None if os.access(parent, os.W_OK) else os.strerror(errno.EACCES)


def report_open_error(path, reason):
    """Prints the could-not-open diagnostic for path."""
    print_color(RED, f"{PROGNAME}: could not open {path}: {reason}", file=sys.stderr)


class HelpAction(argparse.Action):
    """Prints usage info and exits 0 as soon as -h is seen."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS):
        super().__init__(option_strings, dest=dest, default=default, nargs=0)

    def __call__(self, parser, namespace, values, option_string=None):
        usage(0)


class VersionAction(argparse.Action):
    """Prints name and version and exits 0 as soon as -v is seen."""

    def __init__(self, option_strings, dest=argparse.SUPPRESS, default=argparse.SUPPRESS):
        super().__init__(option_strings, dest=dest, default=default, nargs=0)

    def __call__(self, parser, namespace, values, option_string=None):
        print(f"{PROGNAME} v{VERSION}", file=sys.stderr)
        sys.exit(0)


class IndexAction(argparse.Action):
    """Converts -s/-e to an index when seen, exiting 1 if it is invalid."""

    def __call__(self, parser, namespace, values, option_string=None):
        setattr(namespace, self.dest, str_to_index(values, INDEX_MIN, INDEX_MAX, option_string.lstrip('-')))


class OutputAction(argparse.Action):
    """Records the -o path, exiting 1 right away if it cannot be written."""

    def __call__(self, parser, namespace, values, option_string=None):
        reason = open_error(values)
        if reason is not None:
            report_open_error(values, reason)
            sys.exit(1)
        setattr(namespace, self.dest, values)


def build_parser():
    # Options take effect in command-line order, like getopt
    parser = UsageArgumentParser(prog=PROGNAME, add_help=False, allow_abbrev=False)
    parser.add_argument('-h', action=HelpAction)
    parser.add_argument('-v', action=VersionAction)
    parser.add_argument('-s', dest='start', metavar='START', action=IndexAction, default=DEFAULT_START)
    parser.add_argument('-e', dest='end', metavar='END', action=IndexAction, default=DEFAULT_END)
    parser.add_argument('-o', dest='outfile', metavar='FILE', action=OutputAction)
    # getopt leaves operands unread; accept and ignore them
    parser.add_argument('operands', nargs='*')
    return parser


def main(argv=None):
    args = build_parser().parse_intermixed_args(argv)

    # Created only after every argument is valid, so bad input leaves no file behind
    outfile = sys.stdout
    if args.outfile is not None:
        try:
            outfile = open(args.outfile, 'w')
        except OSError as e:
            report_open_error(args.outfile, e.strerror or e)
            return 1

    try:
        print_sequence(args.start, args.end, None, outfile)
    finally:
        if outfile is not sys.stdout:
            outfile.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
