# Tempest UDP Relay — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `OptionArity`, an enum describing whether a command-line option carries
a value.

Each member maps onto the `has_arg` column of a POSIX `getopt_long` option table:
`NONE` flags are pure presence switches (`--daemon`), `REQUIRED` flags must be
followed by a value (`--url=<url>`). The arity decides how the short- and long-option
strings handed to the scanner are synthesized.
"""
from __future__ import annotations

from enum import Enum


class OptionArity(Enum):
    """
    Defines how many values follow an option on the command line.

    Members:
        NONE: The option is a presence-only switch and takes no value.
        REQUIRED: The option must be followed by a value.
    """

    NONE = "none"
    REQUIRED = "required"

    @property
    def takes_value(self) -> bool:
        """Return True if the option must be followed by a value."""
        return self is OptionArity.REQUIRED

    def __str__(self) -> str:
        """Return the string representation of the option arity."""
        return self.value
