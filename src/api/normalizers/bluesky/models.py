"""Modelos tipados do log de chat Bluesky (chat.bsky.convo.getLog).

Cada família de variantes (entrada de log, view de mensagem, record embutido,
valor de record) é uma união fechada. O discriminador `$type` é resolvido
aqui; tipos desconhecidos caem em variantes explícitas (`OtherLogEntry`,
`UnknownRecordView`, `UnknownRecordValue`) em vez de serem descartados.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

LOG_CREATE_MESSAGE = "chat.bsky.convo.defs#logCreateMessage"
MESSAGE_VIEW = "chat.bsky.convo.defs#messageView"
DELETED_MESSAGE_VIEW = "chat.bsky.convo.defs#deletedMessageView"
EMBED_RECORD_VIEW = "app.bsky.embed.record#view"
FEED_POST = "app.bsky.feed.post"


def wire_type(raw: Any) -> str:
    """Retorna o `$type` de um objeto bruto (ou string vazia)."""
    if not isinstance(raw, dict):
        return ""
    return str(raw.get("$type") or "")


class _WireModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)


class MessageSender(_WireModel):
    did: str


class ProfileViewBasic(_WireModel):
    did: str
    handle: str = ""
    display_name: str | None = Field(None, alias="displayName")
    avatar: str | None = None


# Valores de record ---------------------------------------------------------


class FeedPost(_WireModel):
    """Valor `app.bsky.feed.post` de um record referenciado."""

    text: str = ""
    created_at: str | None = Field(None, alias="createdAt")
    langs: tuple[str, ...] = ()


class UnknownRecordValue(_WireModel):
    """Qualquer outro valor de record; mantido apenas para inspeção."""

    type: str = ""
    data: dict[str, Any] = Field(default_factory=dict)


RecordValue = FeedPost | UnknownRecordValue


def parse_record_value(raw: Any) -> Any:
    """Valor de record; formato inválido cai em UnknownRecordValue."""
    if isinstance(raw, FeedPost | UnknownRecordValue):
        return raw
    if wire_type(raw) == FEED_POST:
        try:
            return FeedPost.model_validate(raw)
        except ValidationError:
            pass
    return UnknownRecordValue(
        type=wire_type(raw),
        data=raw if isinstance(raw, dict) else {},
    )


# Records embutidos ---------------------------------------------------------


class ViewRecord(_WireModel):
    """Post referenciado (citação)."""

    KIND: ClassVar[str] = "app.bsky.embed.record#viewRecord"

    uri: str
    cid: str = ""
    author: ProfileViewBasic | None = None
    value: RecordValue = Field(default_factory=UnknownRecordValue)
    like_count: int | None = Field(None, alias="likeCount")
    indexed_at: str | None = Field(None, alias="indexedAt")

    @field_validator("value", mode="before")
    @classmethod
    def _discriminate_value(cls, raw: Any) -> Any:
        return parse_record_value(raw)


class GeneratorView(_WireModel):
    KIND: ClassVar[str] = "app.bsky.feed.defs#generatorView"

    uri: str
    display_name: str | None = Field(None, alias="displayName")


class ListView(_WireModel):
    KIND: ClassVar[str] = "app.bsky.graph.defs#listView"

    uri: str
    name: str | None = None


class LabelerView(_WireModel):
    KIND: ClassVar[str] = "app.bsky.labeler.defs#labelerView"

    uri: str


class StarterPackViewBasic(_WireModel):
    KIND: ClassVar[str] = "app.bsky.graph.defs#starterPackViewBasic"

    uri: str


class ViewNotFound(_WireModel):
    KIND: ClassVar[str] = "app.bsky.embed.record#viewNotFound"

    uri: str


class ViewBlocked(_WireModel):
    KIND: ClassVar[str] = "app.bsky.embed.record#viewBlocked"

    uri: str


class ViewDetached(_WireModel):
    KIND: ClassVar[str] = "app.bsky.embed.record#viewDetached"

    uri: str


class UnknownRecordView(_WireModel):
    """Record de `$type` ainda desconhecido."""

    type: str = ""
    uri: str | None = None


EmbeddedRecord = (
    ViewRecord
    | GeneratorView
    | ListView
    | LabelerView
    | StarterPackViewBasic
    | ViewNotFound
    | ViewBlocked
    | ViewDetached
    | UnknownRecordView
)

_RECORD_VIEW_TYPES: dict[str, type[_WireModel]] = {
    model.KIND: model  # type: ignore[attr-defined]
    for model in (
        ViewRecord,
        GeneratorView,
        ListView,
        LabelerView,
        StarterPackViewBasic,
        ViewNotFound,
        ViewBlocked,
        ViewDetached,
    )
}


def parse_embedded_record(raw: Any) -> Any:
    """Record embutido; tipo desconhecido ou malformado vira UnknownRecordView."""
    if raw is None or isinstance(raw, _WireModel):
        return raw
    record_type = wire_type(raw)
    model = _RECORD_VIEW_TYPES.get(record_type)
    if model is not None:
        try:
            return model.model_validate(raw)
        except ValidationError:
            pass
    uri = raw.get("uri") if isinstance(raw, dict) else None
    return UnknownRecordView(type=record_type, uri=uri if isinstance(uri, str) else None)


class EmbedRecordView(_WireModel):
    """Embed `app.bsky.embed.record#view`.

    Embeds de outro `$type` mantêm `record=None`.
    """

    type: str = Field(EMBED_RECORD_VIEW, alias="$type")
    record: EmbeddedRecord | None = None

    @field_validator("record", mode="before")
    @classmethod
    def _discriminate_record(cls, raw: Any) -> Any:
        return parse_embedded_record(raw)


def parse_embed(raw: Any) -> Any:
    if raw is None or isinstance(raw, EmbedRecordView):
        return raw
    if wire_type(raw) == EMBED_RECORD_VIEW:
        return EmbedRecordView.model_validate(raw)
    return EmbedRecordView(type=wire_type(raw) or "unknown", record=None)


# Views de mensagem ---------------------------------------------------------


class MessageView(_WireModel):
    """Mensagem ativa."""

    id: str
    rev: str = ""
    text: str = ""
    sender: MessageSender
    sent_at: str = Field(alias="sentAt")
    embed: EmbedRecordView | None = None

    @field_validator("embed", mode="before")
    @classmethod
    def _discriminate_embed(cls, raw: Any) -> Any:
        return parse_embed(raw)


class DeletedMessageView(_WireModel):
    """Mensagem apagada; não tem corpo."""

    id: str
    rev: str = ""
    sender: MessageSender
    sent_at: str = Field(alias="sentAt")


class MessageViewUnion(_WireModel):
    """União com uma única variante populada.

    Ambas ausentes é estado de erro (tratado na extração de detalhes).
    """

    active: MessageView | None = None
    deleted: DeletedMessageView | None = None


def parse_message_view_union(raw: Any) -> Any:
    if isinstance(raw, MessageViewUnion):
        return raw
    view_type = wire_type(raw)
    if view_type == MESSAGE_VIEW:
        return MessageViewUnion(active=MessageView.model_validate(raw))
    if view_type == DELETED_MESSAGE_VIEW:
        return MessageViewUnion(deleted=DeletedMessageView.model_validate(raw))
    return MessageViewUnion()


# Entradas de log -----------------------------------------------------------


class LogCreateMessage(_WireModel):
    """Entrada `logCreateMessage`: única tratada hoje."""

    rev: str = ""
    convo_id: str = Field(alias="convoId")
    message: MessageViewUnion = Field(default_factory=MessageViewUnion)

    @field_validator("message", mode="before")
    @classmethod
    def _discriminate_message(cls, raw: Any) -> Any:
        return parse_message_view_union(raw)


class OtherLogEntry(_WireModel):
    """Qualquer outro tipo de entrada (ignorada pelo dispatcher)."""

    kind: str = ""
    rev: str = ""
    convo_id: str = ""


LogEntry = LogCreateMessage | OtherLogEntry
