"""Utility functions for shapelab.

This module provides utility functions including:

- Logging setup and configuration
- Interaction statistics tracking
"""

from shapelab.utils.logging import (
    InteractionLogger,
    InteractionStats,
    configure_logging,
    get_logger,
)

__all__ = [
    "InteractionLogger",
    "InteractionStats",
    "configure_logging",
    "get_logger",
]
