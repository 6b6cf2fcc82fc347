# sequence.py
# Fibonacci state machine and bounded sequence printer

import sys

import numpy as np

# --- Configuration ---
DEFAULT_FORMAT = "%d\n"  # One integer conversion per line


class FibStateMachine:
    """Holds the state of a Fibonacci sequence.

    Values are fixed-width 32-bit unsigned integers, so advancing past
    index 47 wraps around instead of growing without bound.
    """

    def __init__(self):
        self.value = np.uint32(0)
        self.next_value = np.uint32(1)
        self.index = 0

    def advance(self):
        """Advances the sequence to its next value."""
        with np.errstate(over='ignore'):
            temp = np.add(self.value, self.next_value, dtype=np.uint32)

        self.value = self.next_value
        self.next_value = np.uint32(temp)
        self.index += 1

    def __repr__(self):
        return (f"FibStateMachine(value={int(self.value)}, "
                f"next_value={int(self.next_value)}, index={self.index})")


def print_sequence(start, end, fmt=None, dest=None):
    """Prints the values at indices [start, end) of the Fibonacci sequence.

    fmt must contain exactly one integer conversion; dest defaults to
    standard output.
    """
    if end <= start:
        return

    if fmt is None:
        fmt = DEFAULT_FORMAT

    if dest is None:
        dest = sys.stdout

    fib = FibStateMachine()

    while fib.index < start:
        fib.advance()

    # Post-test loop: the guard above ensures at least one value is due
    while True:
        dest.write(fmt % int(fib.value))
        fib.advance()
        if fib.index >= end:
            break
