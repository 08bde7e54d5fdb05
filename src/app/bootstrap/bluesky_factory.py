"""Factory de wiring para Bluesky (bootstrap)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from api.normalizers.bluesky import EmbedResolver, MessageConverter, MessageDetailExtractor
from app.coordinators.bluesky import BlueskyEventDispatcher
from app.infra.identity import DidSenderResolver
from config.settings import BlueskySettings, get_bluesky_settings

if TYPE_CHECKING:
    from app.protocols import DeliveryQueueProtocol, SenderResolverProtocol


def create_bluesky_converter(settings: BlueskySettings | None = None) -> MessageConverter:
    """Cria conversor de mensagens conforme settings."""
    settings = settings or get_bluesky_settings()
    resolver = EmbedResolver(web_url=settings.web_url, formatted=settings.embed_html)
    return MessageConverter(resolver)


def create_bluesky_dispatcher(
    delivery_queue: DeliveryQueueProtocol,
    *,
    sender_resolver: SenderResolverProtocol | None = None,
    settings: BlueskySettings | None = None,
) -> BlueskyEventDispatcher:
    """Cria dispatcher com dependências injetadas.

    Sem `sender_resolver`, usa DidSenderResolver com o DID do login.
    """
    settings = settings or get_bluesky_settings()
    resolver = sender_resolver or DidSenderResolver(settings.user_did)
    return BlueskyEventDispatcher(
        extractor=MessageDetailExtractor(resolver),
        converter=create_bluesky_converter(settings),
        delivery_queue=delivery_queue,
        receiver=settings.user_did or None,
    )
