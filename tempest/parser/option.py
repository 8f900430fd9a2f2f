# Tempest UDP Relay — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `Option` dataclass and the process-wide `OPTIONS` table, the single
source of truth for every flag the Tempest command line recognizes.

Each `Option` describes one flag: its long name, its single-character short code,
whether it carries a value, the presence `Flag` it sets, and the help lines shown
in the usage banner.

The table is immutable and defined once at import time. The getopt option strings
consumed by the scanner are derived from it rather than written by hand:

    short_options() → "u:f:i:l:dtsvh"
    long_options()  → ["url=", "format=", "interval=", "log=", "daemon", ...]

Used By:
- `tempest.parser.scanner` to drive the getopt scan loop
- `CommandLine.render_usage()` to render the options section
"""
from __future__ import annotations

from dataclasses import dataclass

from tempest.parser.option_arity import OptionArity
from tempest.parser.parser_types import Flag


@dataclass(frozen=True)
class Option:
    """
    Represents a recognized command-line flag.

    Attributes:
        name (str): Long name, without the leading `--`.
        code (str): Single-character short code, without the leading `-`.
        arity (OptionArity): Whether the flag must be followed by a value.
        flag (Flag): Presence marker recorded when the flag is seen.
        metavar (str): Placeholder shown for the value in help, if any.
        help (tuple[str, ...]): Help text, one entry per rendered line.
    """

    name: str
    code: str
    arity: OptionArity
    flag: Flag
    metavar: str = ""
    help: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if len(self.code) != 1 or not self.code.isalpha():
            raise ValueError(f"Short code for '{self.name}' must be a single letter")
        if len(self.name) < 2 or not self.name.replace("-", "").isalnum():
            raise ValueError(f"Invalid long name: {self.name!r}")
        if self.arity.takes_value and not self.metavar:
            raise ValueError(f"Option '{self.name}' takes a value and needs a metavar")

    @property
    def short_spec(self) -> str:
        """Return the getopt short-option spec, e.g. `u:` or `d`."""
        return f"{self.code}:" if self.arity.takes_value else self.code

    @property
    def long_spec(self) -> str:
        """Return the getopt long-option spec, e.g. `url=` or `daemon`."""
        return f"{self.name}=" if self.arity.takes_value else self.name

    def get_flags_text(self) -> str:
        """Return the flags column of the usage banner, e.g. `-u | --url=<url>`."""
        text = f"-{self.code} | --{self.name}"
        if self.arity.takes_value:
            text = f"{text}=<{self.metavar}>"
        return text


OPTIONS: tuple[Option, ...] = (
    Option(
        "url",
        "u",
        OptionArity.REQUIRED,
        Flag.URL,
        metavar="url",
        help=("full URL to relay data to",),
    ),
    Option(
        "format",
        "f",
        OptionArity.REQUIRED,
        Flag.FORMAT,
        metavar="fmt",
        help=(
            "format to which the UDP data is repackaged:",
            "1) REST API, 2) Ecowitt (default if omitted: 1)",
        ),
    ),
    Option(
        "interval",
        "i",
        OptionArity.REQUIRED,
        Flag.INTERVAL,
        metavar="min",
        help=(
            "interval in minutes at which data is relayed:",
            "1 <= min <= 30 (default if omitted: 1)",
        ),
    ),
    Option(
        "log",
        "l",
        OptionArity.REQUIRED,
        Flag.LOG,
        metavar="lev",
        help=(
            "1) only errors",
            "2) errors and warnings",
            "3) errors, warnings and info (default if omitted)",
            "4) errors, warnings, info and debug (everything)",
        ),
    ),
    Option("daemon", "d", OptionArity.NONE, Flag.DAEMON, help=("run as a service",)),
    Option(
        "trace",
        "t",
        OptionArity.NONE,
        Flag.TRACE,
        help=("relay data to the terminal standard output",),
    ),
    Option(
        "stop",
        "s",
        OptionArity.NONE,
        Flag.STOP,
        help=("stop the relay and exit gracefully",),
    ),
    Option(
        "version",
        "v",
        OptionArity.NONE,
        Flag.VERSION,
        help=("print version information",),
    ),
    Option("help", "h", OptionArity.NONE, Flag.HELP, help=("print this help",)),
)


def short_options(options: tuple[Option, ...] = OPTIONS) -> str:
    """Build the getopt short-option string from an option table."""
    return "".join(option.short_spec for option in options)


def long_options(options: tuple[Option, ...] = OPTIONS) -> list[str]:
    """Build the getopt long-option list from an option table."""
    return [option.long_spec for option in options]


def get_option(switch: str, options: tuple[Option, ...] = OPTIONS) -> Option | None:
    """
    Look up an option by the switch getopt reports for it.

    Args:
        switch (str): Either `-<code>` or `--<name>`.
        options (tuple[Option, ...]): Table to search.

    Returns:
        Option | None: The matching option, or None if the switch is unknown.
    """
    for option in options:
        if switch in (f"-{option.code}", f"--{option.name}"):
            return option
    return None


FLAG_BY_CODE: dict[str, Flag] = {option.code: option.flag for option in OPTIONS}
