# Tempest UDP Relay — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for Tempest."""
import logging

logger: logging.Logger = logging.getLogger("tempest")
