"""Extração de detalhes (sender, timestamp, id) de uma view de mensagem.

Retorna um único registro estruturado ou levanta um único erro tipado;
nunca devolve estado parcialmente preenchido.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import TYPE_CHECKING

from utils.errors import ExtractionError, SenderResolutionError, TimestampParseError

if TYPE_CHECKING:
    from app.protocols.models import EventSender
    from app.protocols.sender_resolver import SenderResolverProtocol

    from .models import DeletedMessageView, MessageView, MessageViewUnion

# Datetime estrito do AT Protocol: RFC 3339, `T` maiúsculo, segundos
# obrigatórios e timezone explícito.
_ATPROTO_DATETIME_RE = re.compile(
    r"^[0-9]{4}-[01][0-9]-[0-3][0-9]"
    r"T[0-2][0-9]:[0-6][0-9]:[0-6][0-9]"
    r"(\.[0-9]{1,20})?"
    r"(Z|[+-][0-2][0-9]:[0-5][0-9])$"
)

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)


def parse_atproto_datetime(value: str) -> datetime:
    """Faz parse estrito de um datetime AT Protocol.

    Raises:
        ValueError: Se o valor não segue o formato estrito.
    """
    match = _ATPROTO_DATETIME_RE.match(value)
    if not match:
        raise ValueError(f"datetime not in AT Protocol format: {value!r}")
    fraction, offset = match.group(1), match.group(2)
    if offset == "-00:00":
        raise ValueError("datetime with unknown local offset (-00:00) not allowed")
    # Fração normalizada para microssegundos (excedente truncado)
    micros = ((fraction or ".")[1:] + "000000")[:6]
    if offset == "Z":
        offset = "+00:00"
    return datetime.fromisoformat(f"{value[:19]}.{micros}{offset}")


def to_stream_order(moment: datetime) -> int:
    """Milissegundos desde epoch (ordenação entre eventos)."""
    return (moment - _EPOCH) // timedelta(milliseconds=1)


@dataclass(frozen=True, slots=True)
class MessageDetails:
    """Detalhes extraídos de uma view de mensagem.

    Atributos:
        sender: Remetente resolvido
        timestamp: Instante de envio (timezone-aware)
        id: ID remoto da mensagem
        payload: View original, repassada sem validação
    """

    sender: EventSender
    timestamp: datetime
    id: str
    payload: MessageView | DeletedMessageView

    @property
    def stream_order(self) -> int:
        return to_stream_order(self.timestamp)


class MessageDetailExtractor:
    """Extrai sender/timestamp/id de MessageViewUnion."""

    def __init__(self, sender_resolver: SenderResolverProtocol) -> None:
        self._sender_resolver = sender_resolver

    async def extract(self, view: MessageViewUnion) -> MessageDetails:
        """Extrai detalhes da variante populada.

        Raises:
            ExtractionError: Nenhuma variante populada.
            SenderResolutionError: Colaborador de sender falhou.
            TimestampParseError: sentAt fora do formato estrito.
        """
        payload: MessageView | DeletedMessageView
        if view.active is not None:
            payload = view.active
        elif view.deleted is not None:
            payload = view.deleted
        else:
            raise ExtractionError("no message view or deleted message view")

        try:
            sender = await self._sender_resolver.resolve(payload.sender.did)
        except Exception as exc:
            raise SenderResolutionError(f"failed to parse sender DID: {exc}") from exc

        try:
            sent_at = parse_atproto_datetime(payload.sent_at)
        except ValueError as exc:
            raise TimestampParseError(f"failed to parse sentAt: {exc}") from exc

        return MessageDetails(sender=sender, timestamp=sent_at, id=payload.id, payload=payload)
