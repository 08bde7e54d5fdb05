"""Testes do MessageConverter (views de mensagem → partes de conteúdo)."""

from __future__ import annotations

import logging

from api.normalizers.bluesky.converter import (
    DELETED_MESSAGE_NOTICE,
    UNSUPPORTED_MESSAGE_NOTICE,
    MessageConverter,
)
from api.normalizers.bluesky.embeds import EmbedResolver
from api.normalizers.bluesky.models import (
    DeletedMessageView,
    EmbedRecordView,
    FeedPost,
    ListView,
    MessageSender,
    MessageView,
    ViewRecord,
)
from app.protocols.models import ContentPart, RenderKind

SENDER = MessageSender(did="did:plc:abc")
SENT_AT = "2024-01-01T00:00:00.000Z"


def _active(text: str, embed: EmbedRecordView | None = None) -> MessageView:
    return MessageView(id="msg1", text=text, sender=SENDER, sent_at=SENT_AT, embed=embed)


def _quote(text: str = "quoted") -> EmbedRecordView:
    return EmbedRecordView(
        record=ViewRecord(uri="at://did:plc:x/app.bsky.feed.post/3abc", value=FeedPost(text=text))
    )


class TestActiveMessage:
    """Mensagens ativas."""

    def test_text_only_yields_single_text_part(self) -> None:
        """Corpo sem embed gera exatamente uma parte de texto."""
        result = MessageConverter().convert(_active("hello"))

        assert result.parts == (ContentPart(render_kind=RenderKind.TEXT, body="hello"),)
        assert result.diagnostics == ()

    def test_embed_precedes_text(self) -> None:
        """Embed resolvido vem antes da parte de texto."""
        converter = MessageConverter(EmbedResolver(formatted=False))
        embed_part = ContentPart(render_kind=RenderKind.TEXT, body="quoted")

        result = converter.convert(_active("hi", _quote()))

        assert result.parts == (
            embed_part,
            ContentPart(render_kind=RenderKind.TEXT, body="hi"),
        )

    def test_empty_body_with_embed_yields_embed_only(self) -> None:
        """Sem corpo, apenas o embed é emitido (sem parte de texto vazia)."""
        converter = MessageConverter(EmbedResolver(formatted=False))

        result = converter.convert(_active("", _quote()))

        assert result.parts == (ContentPart(render_kind=RenderKind.TEXT, body="quoted"),)

    def test_unhandled_record_is_omitted_with_warning(self) -> None:
        """Record não suportado é omitido e vira diagnóstico warning."""
        embed = EmbedRecordView(record=ListView(uri="at://did:plc:x/app.bsky.graph.list/1"))

        result = MessageConverter().convert(_active("hi", embed))

        assert result.parts == (ContentPart(render_kind=RenderKind.TEXT, body="hi"),)
        assert len(result.diagnostics) == 1
        diagnostic = result.diagnostics[0]
        assert diagnostic.level == logging.WARNING
        assert diagnostic.event == "embed_record_unhandled"
        assert diagnostic.detail["record_type"] == ListView.KIND

    def test_missing_record_is_omitted_with_warning(self) -> None:
        """Embed sem record (tipo desconhecido) é omitido."""
        embed = EmbedRecordView(type="app.bsky.embed.images#view", record=None)

        result = MessageConverter().convert(_active("hi", embed))

        assert [part.body for part in result.parts] == ["hi"]
        assert result.diagnostics[0].event == "embed_conversion_failed"
        assert result.diagnostics[0].detail["embed_type"] == "app.bsky.embed.images#view"

    def test_empty_body_without_embed_yields_no_parts(self) -> None:
        """Nada a entregar não é erro."""
        result = MessageConverter().convert(_active(""))

        assert result.parts == ()
        assert result.is_empty

    def test_empty_body_with_unhandled_embed_yields_no_parts(self) -> None:
        """Embed omitido e corpo vazio resulta em lista vazia."""
        embed = EmbedRecordView(record=ListView(uri="at://did:plc:x/app.bsky.graph.list/1"))

        result = MessageConverter().convert(_active("", embed))

        assert result.parts == ()
        assert len(result.diagnostics) == 1


class TestDeletedMessage:
    """Mensagens apagadas."""

    def test_deleted_yields_single_notice(self) -> None:
        """Sempre um aviso fixo, independente dos campos."""
        view = DeletedMessageView(id="whatever", rev="r", sender=SENDER, sent_at="garbage")

        result = MessageConverter().convert(view)

        assert result.parts == (
            ContentPart(render_kind=RenderKind.NOTICE, body=DELETED_MESSAGE_NOTICE),
        )
        assert DELETED_MESSAGE_NOTICE == "Deleted message"


class TestUnsupportedPayload:
    """Formatos de payload desconhecidos."""

    def test_unknown_payload_yields_unsupported_notice(self) -> None:
        """Payload inesperado gera aviso e não levanta."""
        result = MessageConverter().convert({"$type": "chat.bsky.convo.defs#futureView"})

        assert result.parts == (
            ContentPart(render_kind=RenderKind.NOTICE, body=UNSUPPORTED_MESSAGE_NOTICE),
        )
        assert UNSUPPORTED_MESSAGE_NOTICE == "Unsupported message"
        assert result.diagnostics[0].detail == {"payload_type": "dict"}

    def test_none_payload_yields_unsupported_notice(self) -> None:
        result = MessageConverter().convert(None)

        assert [part.render_kind for part in result.parts] == [RenderKind.NOTICE]
