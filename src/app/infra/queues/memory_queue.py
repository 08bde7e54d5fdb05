"""Fila de delivery em memória — apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from app.protocols.delivery_queue import DeliveryQueueProtocol

if TYPE_CHECKING:
    from app.protocols.models import NormalizedMessage


@dataclass(frozen=True, slots=True)
class QueuedMessage:
    """Mensagem enfileirada com seu contexto de log."""

    message: NormalizedMessage
    log_context: dict[str, str]


class InMemoryDeliveryQueue(DeliveryQueueProtocol):
    """Fila FIFO em memória — apenas para dev/test."""

    def __init__(self) -> None:
        self._items: list[QueuedMessage] = []

    def enqueue(self, message: NormalizedMessage, log_context: dict[str, str]) -> None:
        """Adiciona mensagem ao fim da fila."""
        self._items.append(QueuedMessage(message=message, log_context=dict(log_context)))

    def drain(self) -> list[QueuedMessage]:
        """Remove e retorna todas as mensagens, na ordem de chegada."""
        items, self._items = self._items, []
        return items

    def sorted_by_stream_order(self) -> list[QueuedMessage]:
        """Snapshot ordenado por stream_order (empates mantêm a chegada)."""
        return sorted(self._items, key=lambda item: item.message.stream_order)

    def __len__(self) -> int:
        return len(self._items)
