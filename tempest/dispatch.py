# Tempest UDP Relay — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Turns a resolved `CommandLine` into an exit code.

The dispatcher owns the process-level policy the resolver deliberately leaves out:

- Invalid command line: print usage to stderr, exit 1.
- Empty command line or `--help`: print usage, exit 0.
- `--version`: print the version banner, exit 0.
- Relay, trace and stop: log the canonical command line and call the handler
  registered for that command with its typed payload.

The relay engine, daemon controller and HTTP publisher are external collaborators
plugged in as handlers, so this module never touches the network.

Example:
    dispatcher = Dispatcher()
    dispatcher.register(CommandKind.RELAY, start_relay)
    sys.exit(dispatcher.dispatch(CommandLine(sys.argv)))
"""
from __future__ import annotations

from typing import Callable, Union

from rich.console import Console

from tempest.console import console as default_console
from tempest.console import error_console as default_error_console
from tempest.exceptions import HandlerNotFoundError, InvalidHandlerError
from tempest.logger import logger
from tempest.parser import (
    CommandKind,
    CommandLine,
    RelayCommand,
    SimpleCommand,
    TraceCommand,
)

Payload = Union[RelayCommand, TraceCommand, SimpleCommand]
Handler = Callable[[Payload], Union[int, None]]

HANDLED_COMMANDS = (CommandKind.RELAY, CommandKind.TRACE, CommandKind.STOP)

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_NO_HANDLER = 2


class Dispatcher:
    """
    Maps resolved commands to exit codes and registered handlers.

    Args:
        handlers (dict[CommandKind, Handler] | None): Initial handler registrations.
        console (Console | None): Console for usage and version output.
        error_console (Console | None): Console for usage after an invalid command line.
    """

    def __init__(
        self,
        handlers: dict[CommandKind, Handler] | None = None,
        console: Console | None = None,
        error_console: Console | None = None,
    ) -> None:
        self.console: Console = console if console is not None else default_console
        self.error_console: Console = (
            error_console if error_console is not None else default_error_console
        )
        self._handlers: dict[CommandKind, Handler] = {}
        for kind, handler in (handlers or {}).items():
            self.register(kind, handler)

    def register(self, kind: CommandKind, handler: Handler) -> None:
        """Register the handler invoked for a relay, trace or stop command."""
        if kind not in HANDLED_COMMANDS:
            raise InvalidHandlerError(f"Handlers cannot be registered for '{kind}'")
        if not callable(handler):
            raise InvalidHandlerError(f"Handler for '{kind}' is not callable: {handler!r}")
        self._handlers[kind] = handler

    def get_handler(self, kind: CommandKind) -> Handler:
        """Return the handler registered for `kind`."""
        try:
            return self._handlers[kind]
        except KeyError:
            raise HandlerNotFoundError(f"No handler registered for '{kind}'") from None

    def dispatch(self, command_line: CommandLine) -> int:
        """Act on a resolved command line and return the process exit code."""
        if command_line.is_invalid():
            logger.debug("Invalid command line, printing usage.")
            self.error_console.print(
                CommandLine.render_usage(), end="", markup=False
            )
            return EXIT_INVALID

        if command_line.command.prints_usage:
            self.console.print(CommandLine.render_usage(), end="", markup=False)
            return EXIT_OK

        if command_line.version():
            self.console.print(CommandLine.render_version(), markup=False)
            return EXIT_OK

        payload = self._get_payload(command_line)
        logger.info("Command: %s", payload.command_line)
        try:
            handler = self.get_handler(command_line.command)
        except HandlerNotFoundError as error:
            logger.error("%s", error)
            return EXIT_NO_HANDLER

        result = handler(payload)
        return EXIT_OK if result is None else int(result)

    def _get_payload(self, command_line: CommandLine) -> Payload:
        payload = command_line.relay() or command_line.trace() or command_line.stop()
        assert payload is not None, f"No payload for command {command_line.command}"
        return payload
