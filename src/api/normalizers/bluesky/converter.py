"""Conversão de views de mensagem em partes de conteúdo ordenadas.

Nunca levanta exceção: falhas de embed viram diagnósticos e formatos
desconhecidos viram um aviso "Unsupported message". Não loga; o chamador
registra os diagnósticos retornados.
"""

from __future__ import annotations

import logging

from app.protocols.models import (
    ContentPart,
    ConversionDiagnostic,
    ConversionResult,
    RenderKind,
)
from utils.errors import EmbedResolutionError, UnhandledRecordKindError

from .embeds import EmbedResolver
from .models import DeletedMessageView, MessageView

DELETED_MESSAGE_NOTICE = "Deleted message"
UNSUPPORTED_MESSAGE_NOTICE = "Unsupported message"


def _notice(body: str) -> ContentPart:
    return ContentPart(render_kind=RenderKind.NOTICE, body=body)


class MessageConverter:
    """Mapeia MessageView / DeletedMessageView em ConversionResult."""

    def __init__(self, embed_resolver: EmbedResolver | None = None) -> None:
        self._embed_resolver = embed_resolver or EmbedResolver()

    def convert(self, payload: object) -> ConversionResult:
        """Converte o payload repassado pelo extrator de detalhes."""
        match payload:
            case MessageView():
                return self._convert_active(payload)
            case DeletedMessageView():
                return ConversionResult(parts=(_notice(DELETED_MESSAGE_NOTICE),))
            case _:
                return ConversionResult(
                    parts=(_notice(UNSUPPORTED_MESSAGE_NOTICE),),
                    diagnostics=(
                        ConversionDiagnostic(
                            level=logging.INFO,
                            event="unsupported_payload_type",
                            detail={"payload_type": type(payload).__name__},
                        ),
                    ),
                )

    def _convert_active(self, view: MessageView) -> ConversionResult:
        parts: list[ContentPart] = []
        diagnostics: list[ConversionDiagnostic] = []

        if view.embed is not None:
            try:
                # Embed antes do texto
                parts.append(self._embed_resolver.resolve(view.embed.record))
            except UnhandledRecordKindError as exc:
                diagnostics.append(
                    ConversionDiagnostic(
                        level=logging.WARNING,
                        event="embed_record_unhandled",
                        detail={"record_type": exc.record_type},
                    )
                )
            except EmbedResolutionError as exc:
                diagnostics.append(
                    ConversionDiagnostic(
                        level=logging.WARNING,
                        event="embed_conversion_failed",
                        detail={"embed_type": view.embed.type, "error": str(exc)},
                    )
                )

        if view.text:
            parts.append(ContentPart(render_kind=RenderKind.TEXT, body=view.text))

        return ConversionResult(parts=tuple(parts), diagnostics=tuple(diagnostics))
