# Tempest UDP Relay — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value types shared by the Tempest command-line resolver.

Contents:
- `Flag`: One member per recognized option; a set of flags records which options
  were present on the command line.
- `DataFormat`: Format the relayed UDP payload is repackaged into.
- `LogLevel`: Four ordered verbosity ranks, convertible to `logging` levels.
- `CommandKind`: The mutually exclusive outcomes of resolving a command line.
- `RelayCommand` / `TraceCommand` / `SimpleCommand`: Typed payloads returned by
  the `CommandLine` accessors, each carrying the canonical re-serialized command.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum, IntEnum


class Flag(Enum):
    """Presence marker for each recognized option, keyed by its long name."""

    URL = "url"
    FORMAT = "format"
    INTERVAL = "interval"
    LOG = "log"
    DAEMON = "daemon"
    TRACE = "trace"
    STOP = "stop"
    VERSION = "version"
    HELP = "help"

    def __str__(self) -> str:
        return self.value


class DataFormat(IntEnum):
    """
    Format to which the UDP data is repackaged.

    `JSON` is the untranslated passthrough of the original payload and can only be
    reached through the trace command's raw sub-mode.
    """

    JSON = 0
    REST = 1
    ECOWITT = 2


class LogLevel(IntEnum):
    """Ordered verbosity ranks, from errors only to everything."""

    ERROR = 1
    WARNING = 2
    INFO = 3
    DEBUG = 4

    @property
    def logging_level(self) -> int:
        """Return the matching standard `logging` level."""
        return {
            LogLevel.ERROR: logging.ERROR,
            LogLevel.WARNING: logging.WARNING,
            LogLevel.INFO: logging.INFO,
            LogLevel.DEBUG: logging.DEBUG,
        }[self]


class CommandKind(Enum):
    """Resolved state of a command line. Exactly one is active per parse."""

    RELAY = "relay"
    TRACE = "trace"
    STOP = "stop"
    VERSION = "version"
    HELP = "help"
    EMPTY = "empty"
    INVALID = "invalid"

    @property
    def prints_usage(self) -> bool:
        """Return True if the caller is expected to print the usage banner."""
        return self in (CommandKind.HELP, CommandKind.EMPTY, CommandKind.INVALID)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class RelayCommand:
    """Relay UDP broadcasts to `url`, batched every `interval` minutes."""

    url: str
    format: DataFormat
    interval: int
    log: LogLevel
    daemon: bool
    command_line: str


@dataclass(frozen=True)
class TraceCommand:
    """Relay UDP broadcasts to the terminal standard output."""

    format: DataFormat
    interval: int
    log: LogLevel
    command_line: str

    @property
    def raw(self) -> bool:
        """Return True if the untranslated payload is passed through unbatched."""
        return self.format is DataFormat.JSON and self.interval == 0


@dataclass(frozen=True)
class SimpleCommand:
    """Payload-free command (stop, version, help)."""

    kind: CommandKind
    command_line: str
