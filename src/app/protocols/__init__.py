"""Protocolos e contratos do core da aplicação."""

from .delivery_queue import DeliveryQueueProtocol
from .models import (
    ContentPart,
    ConversionDiagnostic,
    ConversionResult,
    EventSender,
    MessageFormat,
    NormalizedMessage,
    PortalKey,
    RenderKind,
)
from .sender_resolver import SenderResolverProtocol

__all__ = [
    "ContentPart",
    "ConversionDiagnostic",
    "ConversionResult",
    "DeliveryQueueProtocol",
    "EventSender",
    "MessageFormat",
    "NormalizedMessage",
    "PortalKey",
    "RenderKind",
    "SenderResolverProtocol",
]
