"""Protocolo da fila de delivery (fire-and-forget)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import NormalizedMessage


class DeliveryQueueProtocol(Protocol):
    """Contrato mínimo para enfileirar mensagens normalizadas."""

    def enqueue(
        self,
        message: NormalizedMessage,
        log_context: dict[str, str],
    ) -> None: ...
