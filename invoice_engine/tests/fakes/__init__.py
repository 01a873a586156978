"""Fake implementations of core ports for testing.

- RecordingVisitor: Captures visitor callbacks in order
"""

from .visitor import RecordingVisitor

__all__ = ["RecordingVisitor"]
