"""Filas de delivery."""

from .memory_queue import InMemoryDeliveryQueue, QueuedMessage

__all__ = ["InMemoryDeliveryQueue", "QueuedMessage"]
