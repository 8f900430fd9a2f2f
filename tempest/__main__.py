"""
Tempest UDP Relay

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import sys
from typing import Sequence

from tempest.dispatch import Dispatcher, Handler
from tempest.logger import logger
from tempest.parser import CommandKind, CommandLine, LogLevel
from tempest.utils import setup_logging


def get_log_level(command_line: CommandLine) -> LogLevel:
    """Return the `--log` rank of a relay or trace command, INFO otherwise."""
    payload = command_line.relay() or command_line.trace()
    if payload:
        return payload.log
    return LogLevel.INFO


def main(
    argv: Sequence[str] | None = None,
    handlers: dict[CommandKind, Handler] | None = None,
) -> int:
    argv = list(sys.argv if argv is None else argv)
    command_line = CommandLine(argv)

    setup_logging(log_level=get_log_level(command_line))
    logger.debug("Invoked as: %s", CommandLine.render_command_line(argv))

    return Dispatcher(handlers).dispatch(command_line)


if __name__ == "__main__":
    sys.exit(main())
