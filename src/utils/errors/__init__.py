"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    EmbedResolutionError,
    ExtractionError,
    InvalidDidError,
    LogEntryParseError,
    SenderResolutionError,
    TimestampParseError,
    UnhandledRecordKindError,
)

__all__ = [
    "EmbedResolutionError",
    "ExtractionError",
    "InvalidDidError",
    "LogEntryParseError",
    "SenderResolutionError",
    "TimestampParseError",
    "UnhandledRecordKindError",
]
