"""
Runtime options for strided.

Options are read from ``STRIDED_*=value`` command-line arguments first, then
from environment variables, and must be integers. Arguments without the
``STRIDED_`` prefix belong to the host program and are ignored. A value that
does not parse is reported with a warning and the default is used.
"""

import os
import sys
import warnings

PREFIX = "STRIDED_"


def parse_args(argv):
    pairs = (arg.split("=", 1) for arg in argv if "=" in arg)
    return {k.upper(): v for k, v in pairs if k.upper().startswith(PREFIX)}


ARGS = parse_args(sys.argv[1:])


class Option:
    value: int
    key: str

    def __init__(self, key: str, default_value: int = 0):
        self.key = key.upper()
        value = ARGS.get(self.key, os.getenv(self.key, default_value))
        try:
            self.value = int(value)
        except ValueError:
            warnings.warn(f"Invalid value for {self.key}: {value!r}. Expected an integer, using {default_value}.")
            self.value = default_value

    def __bool__(self): return bool(self.value)
    def __int__(self): return self.value
    def __ge__(self, x): return self.value >= x
    def __gt__(self, x): return self.value > x
    def __lt__(self, x): return self.value < x
    def __repr__(self): return f"Option({self.key}={self.value})"


DEBUG = Option("STRIDED_DEBUG")
# Number of elements repr() lists before eliding the rest
PRINT_THRESHOLD = Option("STRIDED_PRINT_THRESHOLD", 16)

__all__ = ["Option", "PREFIX", "parse_args", "DEBUG", "PRINT_THRESHOLD"]
