"""Fake de resolução de remetente para testes deterministas."""

from __future__ import annotations

from app.protocols.models import EventSender


class FakeSenderResolver:
    """Implementa SenderResolverProtocol sem IO.

    DIDs listados em `failing` levantam RuntimeError, simulando indisponibilidade
    do serviço de identidade.
    """

    def __init__(self, *, own_did: str = "", failing: set[str] | None = None) -> None:
        self._own_did = own_did
        self._failing = failing or set()
        self.calls: list[str] = []

    async def resolve(self, raw_sender_id: str) -> EventSender:
        self.calls.append(raw_sender_id)
        if raw_sender_id in self._failing:
            raise RuntimeError("identity service unavailable")
        return EventSender(
            sender=raw_sender_id,
            is_from_me=raw_sender_id == self._own_did,
        )
