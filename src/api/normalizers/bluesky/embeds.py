"""Conversão de records embutidos em parte de conteúdo.

Apenas posts referenciados (`viewRecord`) são convertidos hoje; os demais
tipos levantam UnhandledRecordKindError, que o conversor trata como omissão
não fatal do embed.
"""

from __future__ import annotations

import html
from typing import assert_never

from api.connectors.bluesky.ids import post_web_url
from app.protocols.models import ContentPart, MessageFormat, RenderKind
from utils.errors import EmbedResolutionError, UnhandledRecordKindError

from .models import (
    EmbeddedRecord,
    FeedPost,
    GeneratorView,
    LabelerView,
    ListView,
    RecordValue,
    StarterPackViewBasic,
    UnknownRecordView,
    ViewBlocked,
    ViewDetached,
    ViewNotFound,
    ViewRecord,
)

RECORD_VALUE_PLACEHOLDER = "not parsed"
DEFAULT_WEB_URL = "https://bsky.app"


def decode_record_value(value: RecordValue) -> str:
    """Texto exibível do valor de um record; nunca falha."""
    match value:
        case FeedPost():
            return value.text
        case _:
            return RECORD_VALUE_PLACEHOLDER


class EmbedResolver:
    """Mapeia um record embutido em uma única ContentPart."""

    def __init__(self, *, web_url: str = DEFAULT_WEB_URL, formatted: bool = True) -> None:
        self._web_url = web_url
        self._formatted = formatted

    def resolve(self, record: EmbeddedRecord | None) -> ContentPart:
        """Converte o record.

        Raises:
            EmbedResolutionError: Record ausente.
            UnhandledRecordKindError: Tipo de record fora do escopo.
        """
        if record is None:
            raise EmbedResolutionError("record is nil")

        match record:
            case ViewRecord():
                return self._post_part(record)
            case (
                GeneratorView()
                | ListView()
                | LabelerView()
                | StarterPackViewBasic()
                | ViewNotFound()
                | ViewBlocked()
                | ViewDetached()
            ):
                raise UnhandledRecordKindError(record.KIND)
            case UnknownRecordView():
                raise UnhandledRecordKindError(record.type or "unknown")
            case _:
                assert_never(record)

    def _post_part(self, record: ViewRecord) -> ContentPart:
        body = decode_record_value(record.value)
        if not self._formatted:
            return ContentPart(render_kind=RenderKind.TEXT, body=body)
        return ContentPart(
            render_kind=RenderKind.TEXT,
            body=body,
            formatted_body=self._render_html(record, body),
            format=MessageFormat.HTML,
        )

    def _render_html(self, record: ViewRecord, body: str) -> str:
        author = record.author
        handle = author.handle if author and author.handle else None
        url = post_web_url(record.uri, self._web_url, handle)

        if author is not None:
            name = author.display_name or author.handle or author.did
            label = f"{name} (@{handle})" if handle else name
        else:
            label = record.uri
        label_html = html.escape(label)
        if url:
            label_html = f'<a href="{html.escape(url)}">{label_html}</a>'

        text_html = html.escape(body).replace("\n", "<br>")
        return (
            '<blockquote class="bluesky-embed">'
            f"<p>{label_html}</p>"
            f"<p>{text_html}</p>"
            "</blockquote>"
        )
