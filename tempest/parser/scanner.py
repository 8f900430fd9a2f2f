# Tempest UDP Relay — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Drives a POSIX getopt scan over the process arguments using the option table.

`scan()` yields one `(short code, raw value)` pair per flag occurrence, in command
line order. Valueless flags yield `None` as their raw value. Long options accept
unambiguous prefixes (`--int=5`) and short options accept attached values
(`-i5`, `-i=5`) or bundled switches (`-dt`).

The scan never prints. Unknown flags, missing values, ambiguous prefixes and bare
positional arguments all raise `CommandLineError`; there is no partial acceptance.
"""
import getopt
from typing import Iterator, Sequence

from tempest.exceptions import CommandLineError
from tempest.logger import logger
from tempest.parser.option import (
    OPTIONS,
    Option,
    get_option,
    long_options,
    short_options,
)


def scan(
    argv: Sequence[str], options: tuple[Option, ...] = OPTIONS
) -> Iterator[tuple[str, str | None]]:
    """
    Scan `argv` and yield each recognized flag with its raw value.

    Args:
        argv (Sequence[str]): Full process argument vector; `argv[0]` is the program.
        options (tuple[Option, ...]): Option table describing the recognized flags.

    Yields:
        tuple[str, str | None]: Short code and raw value (None for valueless flags).

    Raises:
        CommandLineError: On any unrecognized, malformed or positional argument.
    """
    try:
        pairs, remaining = getopt.getopt(
            list(argv[1:]), short_options(options), long_options(options)
        )
    except getopt.GetoptError as error:
        raise CommandLineError(f"Unrecognized option: {error.msg}") from error

    if remaining:
        raise CommandLineError(f"Unexpected positional argument: {remaining[0]!r}")

    for switch, value in pairs:
        option = get_option(switch, options)
        if option is None:
            raise CommandLineError(f"Unrecognized option: {switch}")
        raw = value if option.arity.takes_value else None
        logger.debug("Scanned %s -> %r", switch, raw)
        yield option.code, raw
