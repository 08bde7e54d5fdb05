"""Protocolo de resolução de remetente."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from .models import EventSender


class SenderResolverProtocol(Protocol):
    """Contrato mínimo para resolver o DID bruto em um EventSender.

    Deve levantar exceção em caso de falha; timeout e retry são
    responsabilidade da implementação.
    """

    async def resolve(self, raw_sender_id: str) -> EventSender: ...
