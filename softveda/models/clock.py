"""
Timestamps

DateTime columns hold naive UTC values.
"""

from datetime import datetime, timezone


def utcnow():
    """Current UTC time as a naive datetime."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
