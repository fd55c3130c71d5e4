"""Notification sink contract and the default marker presentation."""

from .sink import MarkerSink, NotificationSink

__all__ = ["MarkerSink", "NotificationSink"]
