"""
Tempest UDP Relay

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .dispatch import Dispatcher
from .parser import CommandKind, CommandLine

logger = logging.getLogger("tempest")


__all__ = [
    "CommandKind",
    "CommandLine",
    "Dispatcher",
]
