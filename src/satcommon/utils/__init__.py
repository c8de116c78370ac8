"""
Utilities for the satcommon package.
"""

from satcommon.utils.logging_utils import (
    configure_logging,
    configure_logging_from_config,
)

__all__ = [
    "configure_logging",
    "configure_logging_from_config",
]
