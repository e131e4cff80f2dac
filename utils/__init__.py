"""Utility modules for naturaltime.

This package provides helpers for reference timestamps and formatting.

Modules:
    time_utils: Timestamp coercion and formatting utilities
"""
from utils.time_utils import to_reference_datetime, format_rfc3339, format_duration

__all__ = ["to_reference_datetime", "format_rfc3339", "format_duration"]
