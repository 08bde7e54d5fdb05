"""Processamento inbound Bluesky: classifica, extrai, converte e enfileira.

Ponto de entrada do core. Cada entrada de log é processada de forma
independente; falhas derrubam apenas a entrada atual (sem retry aqui).
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, assert_never

from api.connectors.bluesky.ids import make_message_id, make_portal_id, make_portal_key
from api.normalizers.bluesky.extractor import extract_log_entries, parse_log_entry
from api.normalizers.bluesky.models import LogCreateMessage, OtherLogEntry
from app.observability import reset_correlation_id, set_correlation_id
from app.protocols.models import NormalizedMessage
from utils.errors import ExtractionError, LogEntryParseError

if TYPE_CHECKING:
    from api.normalizers.bluesky.converter import MessageConverter
    from api.normalizers.bluesky.details import MessageDetailExtractor
    from api.normalizers.bluesky.models import LogEntry
    from app.protocols.delivery_queue import DeliveryQueueProtocol

logger = logging.getLogger(__name__)


class BlueskyEventDispatcher:
    """Despacha entradas do log de chat para o pipeline de mensagens."""

    def __init__(
        self,
        *,
        extractor: MessageDetailExtractor,
        converter: MessageConverter,
        delivery_queue: DeliveryQueueProtocol,
        receiver: str | None = None,
    ) -> None:
        """Inicializa dispatcher com dependências injetadas.

        Args:
            extractor: Extrator de detalhes (sender/timestamp/id)
            converter: Conversor de conteúdo
            delivery_queue: Fila de delivery (fire-and-forget)
            receiver: Login local dono dos portais, quando aplicável
        """
        self._extractor = extractor
        self._converter = converter
        self._delivery_queue = delivery_queue
        self._receiver = receiver

    async def handle(self, entry: LogEntry) -> None:
        """Processa uma entrada de log; tipos não tratados são ignorados."""
        await self._dispatch(entry)

    async def handle_raw(self, raw: dict[str, Any]) -> None:
        """Faz parse de uma entrada bruta e a processa.

        Entradas malformadas são logadas e descartadas.
        """
        entry = self._parse_or_log(raw)
        if entry is not None:
            await self._dispatch(entry)

    async def handle_log_page(self, payload: dict[str, Any]) -> int:
        """Processa todas as entradas de uma página de getLog, em ordem.

        Returns:
            Quantidade de mensagens enfileiradas.
        """
        enqueued = 0
        for raw in extract_log_entries(payload):
            entry = self._parse_or_log(raw)
            if entry is not None and await self._dispatch(entry):
                enqueued += 1
        return enqueued

    def _parse_or_log(self, raw: dict[str, Any]) -> LogEntry | None:
        try:
            return parse_log_entry(raw)
        except LogEntryParseError as exc:
            logger.error(
                "log_entry_parse_failed",
                extra={"error": str(exc), "error_type": type(exc).__name__},
            )
            return None

    async def _dispatch(self, entry: LogEntry) -> bool:
        token = set_correlation_id(f"{entry.convo_id}:{entry.rev}")
        try:
            match entry:
                case LogCreateMessage():
                    return await self._handle_new_message(entry)
                case OtherLogEntry():
                    logger.debug(
                        "log_entry_ignored",
                        extra={"kind": entry.kind, "chat_id": entry.convo_id},
                    )
                    return False
                case _:
                    assert_never(entry)
        finally:
            reset_correlation_id(token)

    async def _handle_new_message(self, entry: LogCreateMessage) -> bool:
        try:
            details = await self._extractor.extract(entry.message)
        except ExtractionError as exc:
            logger.error(
                "message_details_parse_failed",
                extra={
                    "chat_id": entry.convo_id,
                    "rev": entry.rev,
                    "error": str(exc),
                    "error_type": type(exc).__name__,
                },
            )
            return False

        log_context = {
            "chat_id": entry.convo_id,
            "rev": entry.rev,
            "message_id": details.id,
            "sender_id": details.sender.sender,
        }
        result = self._converter.convert(details.payload)
        for diagnostic in result.diagnostics:
            logger.log(diagnostic.level, diagnostic.event, extra={**log_context, **diagnostic.detail})

        message = NormalizedMessage(
            portal_key=make_portal_key(entry.convo_id, self._receiver),
            sender=details.sender,
            timestamp=details.timestamp,
            stream_order=details.stream_order,
            message_id=make_message_id(make_portal_id(entry.convo_id), details.id),
            parts=result.parts,
        )
        self._delivery_queue.enqueue(message, log_context)
        return True
