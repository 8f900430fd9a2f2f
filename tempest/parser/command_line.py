# Tempest UDP Relay — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `CommandLine`, the resolver that turns the raw process
arguments of the `tempest` executable into exactly one validated command.

The resolver is built once per process from `sys.argv` and is immutable afterwards.
Parsing happens entirely in the constructor:

    argv → scan() → trim() → _accumulate() → classify() → stored CommandKind

Any unknown flag, malformed or out-of-range value, or forbidden flag combination
collapses the whole command line to `CommandKind.INVALID`. Nothing is printed and
no exception escapes the constructor; the caller inspects the result through one
accessor per command:

    command_line = CommandLine(sys.argv)
    if relay := command_line.relay():
        start_relay(relay.url, relay.format, relay.interval)
    elif command_line.is_invalid():
        print(CommandLine.render_usage(), file=sys.stderr)

Accessors return a typed payload, or None unless the resolved command is exactly
that one. Each payload carries a canonical command line re-serialized from the
stored option values, intended for audit logging rather than re-parsing.

Public Interface:
- `command`: The resolved `CommandKind`.
- `relay()`, `trace()`, `stop()`, `version()`, `help()`: Typed command payloads.
- `is_empty()`, `is_invalid()`: The two payload-free meta states.
- `render_command_line(argv)`, `render_usage()`, `render_version()`: Static text.
"""
from __future__ import annotations

from typing import Callable, Sequence

from tempest.exceptions import CommandLineError
from tempest.logger import logger
from tempest.parser.classifier import classify
from tempest.parser.option import FLAG_BY_CODE, OPTIONS
from tempest.parser.parser_types import (
    CommandKind,
    DataFormat,
    Flag,
    LogLevel,
    RelayCommand,
    SimpleCommand,
    TraceCommand,
)
from tempest.parser.scanner import scan
from tempest.parser.utils import coerce_int_range, trim
from tempest.version import __version__

PROGRAM = "tempest"

USAGE_COMMANDS = (
    "Usage:        tempest [OPTIONS]",
    "",
    "Commands:",
    "",
    "Relay:        tempest --url=<url> [--format=<fmt>] [--interval=<min>]",
    "                      [--log=<lev>] [--daemon]",
    "Trace:        tempest --trace [--format=<fmt>] [--interval=<min>]",
    "                      [--log=<lev>]",
    "Stop:         tempest --stop",
    "Version:      tempest --version",
    "Help:         tempest [--help]",
)

USAGE_EXAMPLES = (
    "Examples:",
    "",
    "tempest --url=http://hubitat.local:39501 --format=2 --interval=5",
    "tempest -u=192.168.1.100:39500 -l=1 -d",
    "tempest --stop",
)

USAGE_COLUMN = 22


class CommandLine:
    """
    Resolves a process argument vector into a single typed command.

    Defaults before any flag is seen: url is empty, format is REST (1), interval is
    1 minute, log is INFO (3) and daemon is off. Option values are stored raw so the
    canonical command line renders exactly the numbers that were accepted.
    """

    def __init__(self, argv: Sequence[str]) -> None:
        """Parse `argv` and record the resolved command."""
        self._url: str = ""
        self._format: int = DataFormat.REST.value
        self._interval: int = 1
        self._log: int = LogLevel.INFO.value
        self._flags: set[Flag] = set()
        self._decoders: dict[str, Callable[[str], None]] = {
            "u": self._decode_url,
            "f": self._decode_format,
            "i": self._decode_interval,
            "l": self._decode_log,
        }
        self._command: CommandKind = self._resolve(argv)
        logger.debug("Resolved command line %r as %s", list(argv), self._command)

    def _resolve(self, argv: Sequence[str]) -> CommandKind:
        try:
            for code, raw in scan(argv):
                self._accumulate(code, trim(raw))
            command = classify(frozenset(self._flags))
        except CommandLineError as error:
            logger.debug("Invalid command line: %s", error)
            return CommandKind.INVALID

        passthrough = not self._flags & {Flag.FORMAT, Flag.INTERVAL}
        if command is CommandKind.TRACE and passthrough:
            self._format = DataFormat.JSON.value
            self._interval = 0
        return command

    def _accumulate(self, code: str, value: str) -> None:
        """Decode one scanned flag and record its presence."""
        decoder = self._decoders.get(code)
        if decoder:
            decoder(value)
        self._flags.add(FLAG_BY_CODE[code])

    def _decode_url(self, value: str) -> None:
        if not value:
            raise CommandLineError("Invalid value for '--url': must not be empty")
        self._url = value

    def _decode_format(self, value: str) -> None:
        self._format = coerce_int_range(
            value, DataFormat.REST.value, DataFormat.ECOWITT.value, "format"
        )

    def _decode_interval(self, value: str) -> None:
        self._interval = coerce_int_range(value, 1, 30, "interval")

    def _decode_log(self, value: str) -> None:
        self._log = coerce_int_range(
            value, LogLevel.ERROR.value, LogLevel.DEBUG.value, "log"
        )

    @property
    def command(self) -> CommandKind:
        """The resolved command."""
        return self._command

    def is_invalid(self) -> bool:
        """Return True if the command line could not be resolved."""
        return self._command is CommandKind.INVALID

    def is_empty(self) -> bool:
        """Return True if no arguments were given at all."""
        return self._command is CommandKind.EMPTY

    def relay(self) -> RelayCommand | None:
        """Return the relay command payload, or None if another command was resolved."""
        if self._command is not CommandKind.RELAY:
            return None
        daemon = Flag.DAEMON in self._flags
        text = (
            f"{PROGRAM} --url={self._url} --format={self._format}"
            f" --interval={self._interval} --log={self._log}"
        )
        if daemon:
            text += " --daemon"
        return RelayCommand(
            url=self._url,
            format=DataFormat(self._format),
            interval=self._interval,
            log=LogLevel(self._log),
            daemon=daemon,
            command_line=text,
        )

    def trace(self) -> TraceCommand | None:
        """
        Return the trace command payload, or None if another command was resolved.

        When neither `--format` nor `--interval` was given, the payload describes the
        raw sub-mode: untranslated JSON passthrough (format 0) with no batching
        (interval 0).
        """
        if self._command is not CommandKind.TRACE:
            return None
        return TraceCommand(
            format=DataFormat(self._format),
            interval=self._interval,
            log=LogLevel(self._log),
            command_line=(
                f"{PROGRAM} --trace --format={self._format}"
                f" --interval={self._interval} --log={self._log}"
            ),
        )

    def stop(self) -> SimpleCommand | None:
        """Return the stop command payload, or None if another command was resolved."""
        return self._simple(CommandKind.STOP, f"{PROGRAM} --stop")

    def version(self) -> SimpleCommand | None:
        """Return the version command payload, or None if another command was resolved."""
        return self._simple(CommandKind.VERSION, f"{PROGRAM} --version")

    def help(self) -> SimpleCommand | None:
        """Return the help command payload, or None if another command was resolved."""
        return self._simple(CommandKind.HELP, f"{PROGRAM} [--help]")

    def _simple(self, kind: CommandKind, text: str) -> SimpleCommand | None:
        if self._command is not kind:
            return None
        return SimpleCommand(kind=kind, command_line=text)

    @staticmethod
    def render_command_line(argv: Sequence[str]) -> str:
        """Return the original argument vector joined by single spaces."""
        return " ".join(argv)

    @staticmethod
    def render_usage() -> str:
        """
        Return the multi-line usage banner, one newline-terminated line per entry.

        The options section is rendered from the option table so it always lists
        exactly the recognized flags.
        """
        lines = list(USAGE_COMMANDS)
        lines.extend(["", "Options:", ""])
        for option in OPTIONS:
            flags = option.get_flags_text()
            help_lines = option.help or ("",)
            lines.append(f"{flags:<{USAGE_COLUMN}}{help_lines[0]}".rstrip())
            for help_line in help_lines[1:]:
                lines.append(f"{'':<{USAGE_COLUMN}}{help_line}")
        lines.append("")
        lines.extend(USAGE_EXAMPLES)
        return "".join(f"{line}\n" for line in lines)

    @staticmethod
    def render_version() -> str:
        """Return the version banner."""
        return f"Tempest UDP Relay v{__version__}"

    def __repr__(self) -> str:
        return f"CommandLine(command={self._command})"
