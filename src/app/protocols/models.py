"""Contratos canônicos de saída do pipeline inbound Bluesky.

Modelos imutáveis, independentes do protocolo remoto. São criados por entrada
de log, entregues à fila de delivery e descartados.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Any


class RenderKind(StrEnum):
    """Tipo de renderização de uma parte de conteúdo."""

    TEXT = "m.text"
    NOTICE = "m.notice"

    def __str__(self) -> str:
        return self.value


class MessageFormat(StrEnum):
    """Formato do corpo alternativo formatado."""

    HTML = "org.matrix.custom.html"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class ContentPart:
    """Parte renderizável de uma mensagem.

    Atributos:
        render_kind: text ou notice
        body: Corpo em texto puro
        formatted_body: Corpo alternativo (ex: HTML), opcional
        format: Formato de formatted_body, obrigatório quando ele existe
    """

    render_kind: RenderKind
    body: str
    formatted_body: str | None = None
    format: MessageFormat | None = None

    def __post_init__(self) -> None:
        """Valida invariantes."""
        if self.formatted_body is not None and self.format is None:
            raise ValueError("formatted_body requires format")

    def to_content(self) -> dict[str, Any]:
        """Serializa para o conteúdo de evento de mensagem."""
        content: dict[str, Any] = {
            "msgtype": str(self.render_kind),
            "body": self.body,
        }
        if self.formatted_body is not None and self.format is not None:
            content["format"] = str(self.format)
            content["formatted_body"] = self.formatted_body
        return content


@dataclass(frozen=True, slots=True)
class EventSender:
    """Identidade canônica do remetente, resolvida pelo colaborador externo."""

    sender: str
    is_from_me: bool = False
    sender_login: str | None = None


@dataclass(frozen=True, slots=True)
class PortalKey:
    """Chave opaca e estável de uma conversa (portal)."""

    id: str
    receiver: str | None = None


@dataclass(frozen=True, slots=True)
class ConversionDiagnostic:
    """Diagnóstico não fatal gerado durante a conversão.

    O conversor não loga; quem o chama decide como registrar.
    """

    level: int
    event: str
    detail: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Partes convertidas (em ordem) e diagnósticos não fatais."""

    parts: tuple[ContentPart, ...] = ()
    diagnostics: tuple[ConversionDiagnostic, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True quando não há nada a entregar."""
        return not self.parts


@dataclass(frozen=True, slots=True)
class NormalizedMessage:
    """Mensagem normalizada pronta para a fila de delivery.

    Atributos:
        portal_key: Chave da conversa
        sender: Remetente resolvido
        timestamp: Instante absoluto (timezone-aware)
        stream_order: Milissegundos desde epoch, usado na ordenação
        message_id: ID composto e determinístico (dedupe no delivery)
        parts: Partes de conteúdo em ordem (pode ser vazio)
        create_portal: Sempre True; a conversa é criada se ausente
        event_type: Tipo de evento remoto
    """

    portal_key: PortalKey
    sender: EventSender
    timestamp: datetime
    stream_order: int
    message_id: str
    parts: tuple[ContentPart, ...] = ()
    create_portal: bool = True
    event_type: str = "message"
