"""
Tempest UDP Relay

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .classifier import COMMAND_RULES, CommandRule, classify
from .command_line import CommandLine
from .option import FLAG_BY_CODE, OPTIONS, Option, long_options, short_options
from .option_arity import OptionArity
from .parser_types import (
    CommandKind,
    DataFormat,
    Flag,
    LogLevel,
    RelayCommand,
    SimpleCommand,
    TraceCommand,
)
from .scanner import scan
from .utils import coerce_int_range, trim

__all__ = [
    "COMMAND_RULES",
    "CommandKind",
    "CommandLine",
    "CommandRule",
    "DataFormat",
    "FLAG_BY_CODE",
    "Flag",
    "LogLevel",
    "OPTIONS",
    "Option",
    "OptionArity",
    "RelayCommand",
    "SimpleCommand",
    "TraceCommand",
    "classify",
    "coerce_int_range",
    "long_options",
    "scan",
    "short_options",
    "trim",
]
