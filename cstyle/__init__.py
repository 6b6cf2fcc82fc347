"""
c-style
Prints bounded Fibonacci sequences.
"""

PROGNAME = "c-style"
VERSION = "20170512"
__version__ = VERSION

from cstyle.sequence import FibStateMachine, print_sequence  # noqa: E402

__all__ = ["PROGNAME", "VERSION", "FibStateMachine", "print_sequence"]
