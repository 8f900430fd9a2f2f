# Tempest UDP Relay — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the custom exception classes used by Tempest.

Exception Hierarchy:
- TempestError
    ├── CommandLineError
    ├── HandlerNotFoundError
    └── InvalidHandlerError

`CommandLineError` is raised while scanning, decoding or classifying a command
line. `CommandLine` catches it at its boundary and records the command line as
invalid, so it never reaches the caller.
"""


class TempestError(Exception):
    """Base exception for Tempest."""


class CommandLineError(TempestError):
    """Exception raised when a command line cannot be resolved to a valid command."""


class HandlerNotFoundError(TempestError):
    """Exception raised when no handler is registered for a resolved command."""


class InvalidHandlerError(TempestError):
    """Exception raised when a command handler is not callable or not dispatchable."""
