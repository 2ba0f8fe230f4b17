"""
common

This package contains shared models used across the novatel_decoder project.

Modules:
    - models: Pydantic records for decoded status words
"""

from .models import ExtendedSolutionStatus, ReceiverStatus, SignalMask

__all__ = ["ExtendedSolutionStatus", "ReceiverStatus", "SignalMask"]
