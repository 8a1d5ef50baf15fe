"""Swipe commands."""

from .record_swipe import RecordSwipeCommand, RecordSwipeHandler, SwipeResult

__all__ = [
    "RecordSwipeCommand",
    "RecordSwipeHandler",
    "SwipeResult",
]
