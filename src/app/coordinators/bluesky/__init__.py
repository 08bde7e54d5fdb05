"""Coordinator inbound Bluesky."""

from .handler import BlueskyEventDispatcher

__all__ = ["BlueskyEventDispatcher"]
